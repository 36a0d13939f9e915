"""Controller registration — compile, register in order, optionally list.

``register_controller()`` is the glue between the pure compiler and a
router. Any object with an ``add(route)`` method can receive routes.
"""

from typing import Protocol

from autoroute.compiler import ControllerCompiler, RouteSet, qualified_name
from autoroute.listing import emit_listing
from autoroute.routing.route import Route


class RouteSink(Protocol):
    """Anything routes can be registered with, such as ``Router``."""

    def add(self, route: Route) -> None: ...


def register_controller(
    router: RouteSink,
    path: str,
    controller: str | type,
    compiler: ControllerCompiler | None = None,
) -> RouteSet:
    """Compile *controller* under *path* and register its routes on *router*.

    Routes are registered in priority order. When the compiler's
    config enables listings, one is written after registration.
    Returns the compiled route set.

    Raises:
        ClassResolutionError: If *controller* does not resolve; nothing
            is registered.
    """
    compiler = compiler or ControllerCompiler()
    cls = compiler.resolve(controller)
    routes = compiler.compile_class(path, cls)

    for route in routes:
        router.add(route)

    if compiler.config.emit_listing:
        emit_listing(compiler.config.listing_dir, qualified_name(cls), routes)

    return routes
