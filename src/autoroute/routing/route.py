"""Route, Target, RouteMatch, and PathSegment frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from autoroute.routing.verbs import HttpVerb


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route slug.

    Static:    ``users``    (is_param=False)
    Required:  ``{id}``     (is_param=True, param_name="id")
    Optional:  ``{force?}`` (is_param=True, param_name="force", optional=True)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    optional: bool = False


@dataclass(frozen=True, slots=True)
class Target:
    """The handler a route dispatches to: a class and one of its operations.

    Serialized as ``"module.Class@operation"`` only at the boundary
    (``str(target)``), which is the form routers and listings store.
    """

    class_name: str
    operation: str

    def __str__(self) -> str:
        return f"{self.class_name}@{self.operation}"

    @classmethod
    def parse(cls, value: str) -> Target:
        """Parse a ``"Class@operation"`` string back into a Target."""
        class_name, sep, operation = value.rpartition("@")
        if not sep or not class_name or not operation:
            msg = f"Invalid route target {value!r}, expected 'Class@operation'"
            raise ValueError(msg)
        return cls(class_name=class_name, operation=operation)


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route definition.

    ``slug`` is the full path (base path joined with the operation's
    fragment), without leading or trailing slashes. It may contain
    ``{name}`` and ``{name?}`` placeholders.
    """

    http_method: HttpVerb
    slug: str
    target: Target


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]
