"""Tests for autoroute.config — CompilerConfig frozen dataclass."""

import tempfile
from pathlib import Path

import pytest

from autoroute.config import CompilerConfig
from autoroute.routing.verbs import VERB_ORDER


class TestCompilerConfig:
    def test_defaults(self) -> None:
        cfg = CompilerConfig()

        assert cfg.verbs == VERB_ORDER
        assert cfg.reserved_names == frozenset({"getMiddleware"})
        assert cfg.verb_boundary is True
        assert cfg.request_types == frozenset({"autoroute.context.Request"})
        assert cfg.controller_namespaces == ()
        assert cfg.emit_listing is False
        assert cfg.listing_dir == Path(tempfile.gettempdir()) / "autoroute"

    def test_override(self) -> None:
        cfg = CompilerConfig(verb_boundary=False, controller_namespaces=("app.controllers",))

        assert cfg.verb_boundary is False
        assert cfg.controller_namespaces == ("app.controllers",)

    def test_frozen(self) -> None:
        cfg = CompilerConfig()
        with pytest.raises(AttributeError):
            cfg.emit_listing = True  # type: ignore[misc]

    def test_slots(self) -> None:
        assert not hasattr(CompilerConfig(), "__dict__")
