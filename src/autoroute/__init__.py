"""Autoroute — convention-based routes for controller classes.

Public operations named after an HTTP verb become routes, with URL
placeholders derived from their parameters::

    from autoroute import Router, register_controller


    class UserController:
        def getIndex(self): ...
        def getShow(self, id: int): ...
        def postUpdate(self, user: User, force=None): ...


    router = Router()
    register_controller(router, "api/users", UserController)
    # get   api/users
    # get   api/users/show/{id}
    # post  api/users/update/{user}/{force?}
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AutorouteError",
    "ClassResolutionError",
    "CompilerConfig",
    "ConfigurationError",
    "ControllerCompiler",
    "HTTPError",
    "HttpVerb",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "Route",
    "Router",
    "Target",
    "compile_controller",
    "compile_many",
    "register_controller",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import autoroute`` fast while providing a clean top-level API.
    """
    if name in ("ControllerCompiler", "compile_controller", "compile_many"):
        from autoroute import compiler as _compiler

        return getattr(_compiler, name)

    if name == "CompilerConfig":
        from autoroute.config import CompilerConfig

        return CompilerConfig

    if name == "register_controller":
        from autoroute.registry import register_controller

        return register_controller

    if name == "Request":
        from autoroute.context import Request

        return Request

    if name in ("Route", "Target"):
        from autoroute.routing import route as _route

        return getattr(_route, name)

    if name == "Router":
        from autoroute.routing.router import Router

        return Router

    if name == "HttpVerb":
        from autoroute.routing.verbs import HttpVerb

        return HttpVerb

    if name in (
        "AutorouteError",
        "ClassResolutionError",
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
    ):
        from autoroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
