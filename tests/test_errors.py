"""Tests for autoroute.errors — exception hierarchy and error messages."""

from autoroute.errors import (
    AutorouteError,
    ClassResolutionError,
    ConfigurationError,
    HTTPError,
    MethodNotAllowed,
    NotFound,
)


class TestHierarchy:
    def test_http_error_is_autoroute_error(self) -> None:
        assert issubclass(HTTPError, AutorouteError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_method_not_allowed_is_http_error(self) -> None:
        assert issubclass(MethodNotAllowed, HTTPError)

    def test_configuration_error_is_autoroute_error(self) -> None:
        assert issubclass(ConfigurationError, AutorouteError)

    def test_class_resolution_error_is_autoroute_error(self) -> None:
        assert issubclass(ClassResolutionError, AutorouteError)


class TestClassResolutionError:
    def test_message_without_candidates(self) -> None:
        err = ClassResolutionError("Ghost")
        assert str(err) == "Cannot resolve controller 'Ghost' to a class"
        assert err.tried == ()

    def test_message_with_candidates(self) -> None:
        err = ClassResolutionError("Ghost", ("Ghost", "app.Ghost"))
        assert str(err) == "Cannot resolve controller 'Ghost' to a class (tried: Ghost, app.Ghost)"
        assert err.identifier == "Ghost"


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad")) == "400: Bad"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"


class TestMethodNotAllowed:
    def test_allow_header(self) -> None:
        err = MethodNotAllowed(frozenset({"POST", "GET"}))
        assert err.status == 405
        assert err.headers == (("Allow", "GET, POST"),)
        assert "GET, POST" in err.detail
