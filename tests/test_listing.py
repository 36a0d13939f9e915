"""Tests for autoroute.listing — registration statement listings."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from sample_controllers import UserController

from autoroute.compiler import compile_controller
from autoroute.listing import emit_listing, listing_path, render_listing
from autoroute.routing.route import Route, Target
from autoroute.routing.verbs import HttpVerb


def _route(slug: str, verb: HttpVerb, operation: str) -> Route:
    return Route(http_method=verb, slug=slug, target=Target("app.UserController", operation))


class TestRenderListing:
    def test_header_and_lines(self) -> None:
        routes = [
            _route("api/v1/users", HttpVerb.GET, "getUsers"),
            _route("api/v1/update/{user}/{force?}", HttpVerb.POST, "postUpdate"),
        ]
        assert render_listing("app.UserController", routes) == (
            "# Routes for app.UserController\n"
            "router.get('api/v1/users', 'app.UserController@getUsers')\n"
            "router.post('api/v1/update/{user}/{force?}', 'app.UserController@postUpdate')\n"
        )

    def test_no_routes(self) -> None:
        assert render_listing("app.Empty", []) == "# Routes for app.Empty\n"

    def test_one_line_per_route(self) -> None:
        routes = compile_controller("api/v1", UserController)
        text = render_listing("sample_controllers.UserController", routes)
        assert len(text.splitlines()) == len(routes) + 1


class TestEmitListing:
    def test_writes_file(self, tmp_path: Path) -> None:
        routes = [_route("users", HttpVerb.GET, "getUsers")]
        written = emit_listing(tmp_path / "listings", "app.UserController", routes)
        assert written == tmp_path / "listings" / "app.UserController.py"
        assert written.read_text(encoding="utf-8") == render_listing("app.UserController", routes)

    def test_overwrites(self, tmp_path: Path) -> None:
        emit_listing(tmp_path, "app.C", [_route("a", HttpVerb.GET, "getA")])
        written = emit_listing(tmp_path, "app.C", [])
        assert written.read_text(encoding="utf-8") == "# Routes for app.C\n"

    def test_render_failure_leaves_no_file(self, tmp_path: Path) -> None:
        def broken() -> Iterator[Route]:
            raise RuntimeError("boom")
            yield  # pragma: no cover

        with pytest.raises(RuntimeError, match="boom"):
            emit_listing(tmp_path, "app.C", broken())
        assert not listing_path(tmp_path, "app.C").exists()

    def test_logs_path(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="autoroute.listing"):
            emit_listing(tmp_path, "app.C", [])
        assert "app.C" in caplog.text
