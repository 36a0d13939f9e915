"""Route ordering.

Routers that try patterns in order would let ``users/{id}`` shadow a
literal ``users/me`` registered after it. Literal routes therefore come
first, then parameterized ones, each group sorted by slug.
"""

from collections.abc import Iterable

from autoroute.routing.route import Route


def has_placeholder(slug: str) -> bool:
    """True if *slug* contains at least one ``{...}`` placeholder."""
    return "{" in slug


def _priority_key(route: Route) -> tuple[bool, str]:
    return has_placeholder(route.slug), route.slug


def prioritize(routes: Iterable[Route]) -> tuple[Route, ...]:
    """Return *routes* ordered literal-first, then by codepoint order of slug.

    The sort is stable: routes with identical slugs keep their input
    order.
    """
    return tuple(sorted(routes, key=_priority_key))
