"""Route building — base path + slug fragment + verb -> Route."""

from autoroute.routing.route import Route, Target
from autoroute.routing.verbs import HttpVerb


def join_path(base: str, slug: str) -> str:
    """Join *base* and *slug* with one slash, trimming slashes from each part.

    ``join_path("api/v1", "users") == "api/v1/users"``
    ``join_path("/api/v1/", "") == "api/v1"``
    """
    return "/".join(part for part in (base.strip("/"), slug.strip("/")) if part)


def build_route(
    base: str,
    slug: str,
    verb: HttpVerb,
    class_name: str,
    operation: str,
) -> Route:
    """Build the Route for one classified operation."""
    return Route(
        http_method=verb,
        slug=join_path(base, slug),
        target=Target(class_name=class_name, operation=operation),
    )
