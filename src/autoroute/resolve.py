"""Controller resolution — turns a controller identifier into a class.

Accepts a class (returned as-is), an import string
(``"myapp.controllers:UserController"`` or
``"myapp.controllers.UserController"``), or a short name tried against
each configured namespace (``"UserController"`` with namespace
``"myapp.controllers"``).
"""

import importlib
import logging
from typing import Protocol

from autoroute.errors import ClassResolutionError

logger = logging.getLogger("autoroute.resolve")


class ClassResolver(Protocol):
    """Anything that can resolve a controller identifier to a class."""

    def resolve(self, identifier: str | type) -> type: ...


class ImportResolver:
    """Resolve controllers by importing them.

    Direct lookup is tried first, then ``"<namespace>.<identifier>"``
    for each namespace in order.
    """

    __slots__ = ("namespaces",)

    def __init__(self, namespaces: tuple[str, ...] = ()) -> None:
        self.namespaces = namespaces

    def resolve(self, identifier: str | type) -> type:
        """Return the class *identifier* names.

        Raises:
            ClassResolutionError: If no candidate imports to a class.
        """
        if isinstance(identifier, type):
            return identifier
        if not isinstance(identifier, str) or not identifier:
            raise ClassResolutionError(identifier)

        tried: list[str] = []
        for candidate in self._candidates(identifier):
            tried.append(candidate)
            obj = _import_object(candidate)
            if isinstance(obj, type):
                return obj
            logger.debug("Controller candidate %r did not resolve to a class", candidate)

        raise ClassResolutionError(identifier, tuple(tried))

    def _candidates(self, identifier: str) -> list[str]:
        candidates = [identifier]
        candidates.extend(f"{ns.rstrip('.')}.{identifier}" for ns in self.namespaces)
        return candidates


def _import_object(import_string: str) -> object | None:
    """Import ``"module:attr"`` or ``"module.attr"``, or return ``None``."""
    if ":" in import_string:
        module_path, _, attr_path = import_string.partition(":")
    else:
        module_path, _, attr_path = import_string.rpartition(".")
    if not module_path or not attr_path:
        return None

    try:
        obj: object = importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        # Only a missing candidate module means "not here"; broken imports propagate
        if exc.name and not (module_path == exc.name or module_path.startswith(exc.name + ".")):
            raise
        return None

    for attr in attr_path.split("."):
        obj = getattr(obj, attr, None)
        if obj is None:
            return None
    return obj
