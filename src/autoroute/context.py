"""Request context passed to controller operations at dispatch time.

Operations may declare a ``Request`` parameter. It is supplied by the
dispatcher, never taken from the URL, so the slug compiler leaves it
out of route patterns (its qualified name is in
``CompilerConfig.request_types`` by default).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from autoroute.routing.route import RouteMatch


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable view of the request that matched a route."""

    method: str
    path: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_match(
        cls,
        method: str,
        path: str,
        match: RouteMatch,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        """Build the context for a ``Router.match()`` result."""
        return cls(
            method=method.upper(),
            path=path,
            path_params=dict(match.path_params),
            headers=dict(headers or {}),
        )
