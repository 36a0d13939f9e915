"""Controller compiler — derives an ordered route set from a controller class.

Usage::

    from autoroute import compile_controller

    routes = compile_controller("api/v1", UserController)
    for route in routes:
        router.add(route)

Compilation is pure: no I/O and no shared state, so controllers may be
compiled concurrently (see ``compile_many``).
"""

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeAlias

from autoroute.config import CompilerConfig
from autoroute.descriptors import Operation, describe_operations
from autoroute.errors import ConfigurationError
from autoroute.resolve import ClassResolver, ImportResolver
from autoroute.routing.builder import build_route
from autoroute.routing.priority import prioritize
from autoroute.routing.route import Route
from autoroute.routing.slug import compile_slug
from autoroute.routing.verbs import HttpVerb, classify

logger = logging.getLogger("autoroute.compiler")

# Never routable, whatever the configured reserved names
MIDDLEWARE_HOOK = "getMiddleware"

RouteSet: TypeAlias = tuple[Route, ...]


def qualified_name(cls: type) -> str:
    """``"module.QualName"`` for *cls*, the class half of a route target."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _coerce_verbs(verbs: Iterable[HttpVerb | str]) -> tuple[HttpVerb, ...]:
    try:
        coerced = tuple(HttpVerb(v) for v in verbs)
    except ValueError as exc:
        msg = f"Unknown HTTP verb in configuration: {exc}"
        raise ConfigurationError(msg) from exc
    if not coerced:
        msg = "At least one HTTP verb must be configured."
        raise ConfigurationError(msg)
    if len(set(coerced)) != len(coerced):
        msg = f"Duplicate HTTP verbs in configuration: {[v.value for v in coerced]}"
        raise ConfigurationError(msg)
    return coerced


class ControllerCompiler:
    """Compiles controller classes into ordered route sets.

    The resolver and the operation describer are injected; defaults
    import controllers by name and inspect them at runtime.
    """

    __slots__ = ("_describe", "_resolver", "_verbs", "config")

    def __init__(
        self,
        config: CompilerConfig | None = None,
        *,
        resolver: ClassResolver | None = None,
        describe: Callable[[type], Iterable[Operation]] = describe_operations,
    ) -> None:
        self.config = config or CompilerConfig()
        self._verbs = _coerce_verbs(self.config.verbs)
        self._resolver = resolver or ImportResolver(self.config.controller_namespaces)
        self._describe = describe

    def compile(self, path: str, controller: str | type) -> RouteSet:
        """Compile *controller* under base *path*.

        Raises:
            ClassResolutionError: If *controller* does not resolve to a class.
        """
        return self.compile_class(path, self.resolve(controller))

    def resolve(self, controller: str | type) -> type:
        """Resolve *controller* with the injected resolver."""
        return self._resolver.resolve(controller)

    def compile_class(self, path: str, cls: type) -> RouteSet:
        """Compile an already-resolved controller class."""
        class_name = qualified_name(cls)
        routes = self.compile_operations(path, class_name, self._describe(cls))
        logger.debug("Compiled %d routes for %s under %r", len(routes), class_name, path)
        return routes

    def compile_operations(
        self,
        path: str,
        class_name: str,
        operations: Iterable[Operation],
    ) -> RouteSet:
        """Compile already-described *operations* of *class_name*."""
        routes: list[Route] = []
        for operation in operations:
            route = self._compile_operation(path, class_name, operation)
            if route is not None:
                routes.append(route)
        return prioritize(routes)

    def _compile_operation(self, path: str, class_name: str, operation: Operation) -> Route | None:
        if not operation.public or operation.name == MIDDLEWARE_HOOK:
            return None
        if operation.name in self.config.reserved_names:
            return None

        verb = classify(operation.name, self._verbs, boundary=self.config.verb_boundary)
        if verb is None:
            logger.debug("Skipping %s.%s: no verb prefix", class_name, operation.name)
            return None

        slug = compile_slug(operation, verb, self.config.request_types)
        return build_route(path, slug, verb, class_name, operation.name)


def compile_controller(
    path: str,
    controller: str | type,
    config: CompilerConfig | None = None,
) -> RouteSet:
    """Compile one controller with a fresh compiler."""
    return ControllerCompiler(config).compile(path, controller)


def compile_many(
    controllers: Iterable[tuple[str, str | type]],
    compiler: ControllerCompiler | None = None,
    *,
    max_workers: int | None = None,
) -> list[RouteSet]:
    """Compile several ``(path, controller)`` pairs concurrently.

    Results come back in input order. The first resolution failure
    propagates.
    """
    compiler = compiler or ControllerCompiler()
    pairs = list(controllers)
    if not pairs:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(compiler.compile, path, controller) for path, controller in pairs]
        return [future.result() for future in futures]
