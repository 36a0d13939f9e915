"""Ordered router — registers compiled routes and matches request paths.

Patterns are tried in registration order and the first match wins,
which is why ``prioritize()`` puts literal routes ahead of
parameterized ones before registration.
"""

import re
from dataclasses import dataclass

from autoroute.errors import ConfigurationError, MethodNotAllowed, NotFound
from autoroute.routing.route import PathSegment, Route, RouteMatch

_PLACEHOLDER = re.compile(r"^\{([A-Za-z_][A-Za-z0-9_]*)(\?)?\}$")
_SEGMENT_PATTERN = r"[^/]+"


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route slug into segments.

    Examples::

        "users"                -> [PathSegment("users")]
        "users/{id}"           -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "users/{user}/{force?}" -> [..., PathSegment("{force?}", is_param=True, optional=True)]

    Raises ``ConfigurationError`` for malformed placeholders.
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if "{" not in part and "}" not in part:
            segments.append(PathSegment(value=part))
            continue

        m = _PLACEHOLDER.match(part)
        if m is None:
            msg = f"Malformed placeholder {part!r} in route {path!r}. Use {{name}} or {{name?}}."
            raise ConfigurationError(msg)
        optional = m.group(2) is not None
        segments.append(
            PathSegment(value=part, is_param=True, param_name=m.group(1), optional=optional)
        )
    return segments


def _compile_pattern(segments: list[PathSegment]) -> re.Pattern[str]:
    """Compile parsed segments into an anchored regex.

    Optional placeholders (and the slash before them) may be absent.
    Groups are positional so a name may repeat within one route.
    """
    parts: list[str] = []
    for i, seg in enumerate(segments):
        slash = "/" if i else ""
        if not seg.is_param:
            parts.append(slash + re.escape(seg.value))
        elif seg.optional:
            parts.append(f"(?:{slash}({_SEGMENT_PATTERN}))?")
        else:
            parts.append(f"{slash}({_SEGMENT_PATTERN})")
    return re.compile("^" + "".join(parts) + "$")


@dataclass(frozen=True, slots=True)
class _CompiledRoute:
    """A registered route with its compiled matcher."""

    route: Route
    regex: re.Pattern[str]
    param_names: tuple[str, ...]


class Router:
    """Router that keeps routes in registration order.

    Usage::

        router = Router()
        for route in compile_controller("api/v1", UserController):
            router.add(route)
        router.compile()
        match = router.match("GET", "/api/v1/users/42")
    """

    __slots__ = ("_compiled", "_entries")

    def __init__(self) -> None:
        self._entries: list[_CompiledRoute] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Register a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        segments = parse_path(route.slug)
        self._entries.append(
            _CompiledRoute(
                route=route,
                regex=_compile_pattern(segments),
                param_names=tuple(s.param_name or "" for s in segments if s.is_param),
            )
        )

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return [entry.route for entry in self._entries]

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request method and path against registered routes.

        Returns a ``RouteMatch`` for the first route, in registration
        order, whose pattern matches and whose verb accepts *method*.
        Absent optional placeholders are left out of ``path_params``.
        Raises ``MethodNotAllowed`` if only the method didn't match.
        Raises ``NotFound`` if no route matches the path.
        """
        method = method.upper()
        normalized = path.strip("/")
        allowed: set[str] = set()

        for entry in self._entries:
            m = entry.regex.match(normalized)
            if m is None:
                continue
            accepted = entry.route.http_method.methods
            if method not in accepted:
                allowed.update(accepted)
                continue
            params = {
                name: value
                for name, value in zip(entry.param_names, m.groups(), strict=True)
                if value is not None
            }
            return RouteMatch(route=entry.route, path_params=params)

        if allowed:
            raise MethodNotAllowed(frozenset(allowed))
        raise NotFound(f"No route matches {method} {path!r}")
