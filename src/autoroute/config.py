"""Compiler configuration.

CompilerConfig is a frozen dataclass — immutable after creation, passed
explicitly to each ``ControllerCompiler``. No module-level switches.
"""

import tempfile
from dataclasses import dataclass
from pathlib import Path

from autoroute.routing.verbs import VERB_ORDER, HttpVerb


def _default_listing_dir() -> Path:
    return Path(tempfile.gettempdir()) / "autoroute"


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Route compiler configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = CompilerConfig(controller_namespaces=("myapp.controllers",))
    """

    # Classification
    verbs: tuple[HttpVerb, ...] = VERB_ORDER  # Priority order, first match wins
    reserved_names: frozenset[str] = frozenset({"getMiddleware"})
    verb_boundary: bool = True  # Require a word break after the verb prefix

    # Slugs — qualified type names injected at dispatch, never in URLs
    request_types: frozenset[str] = frozenset({"autoroute.context.Request"})

    # Resolution — module prefixes tried for short controller names
    controller_namespaces: tuple[str, ...] = ()

    # Debug listing of registration statements (off by default)
    emit_listing: bool = False
    listing_dir: str | Path = _default_listing_dir()
