"""Autoroute exception hierarchy.

Shared across the compiler, resolver, and router so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class AutorouteError(Exception):
    """Base for all autoroute-specific errors."""


class ConfigurationError(AutorouteError):
    """Raised when compiler configuration is invalid.

    Typically caught when a ``ControllerCompiler`` is constructed.
    """


class ClassResolutionError(AutorouteError):
    """Raised when a controller identifier does not resolve to a class.

    Fatal to that controller's compilation: no partial route set is
    returned. ``tried`` lists every candidate name that was attempted.
    """

    def __init__(self, identifier: object, tried: tuple[str, ...] = ()) -> None:
        self.identifier = identifier
        self.tried = tried
        detail = f"Cannot resolve controller {identifier!r} to a class"
        if tried:
            detail += f" (tried: {', '.join(tried)})"
        super().__init__(detail)


@dataclass(frozen=True, slots=True)
class HTTPError(AutorouteError):
    """An error that maps directly to an HTTP status code.

    Raised by ``Router.match()`` so consumers can translate a failed
    lookup into a response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no registered route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — a route exists for the path but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
