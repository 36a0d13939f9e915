"""Tests for autoroute.routing.priority — literal-first route ordering."""

import itertools

from autoroute.routing.priority import has_placeholder, prioritize
from autoroute.routing.route import Route, Target
from autoroute.routing.verbs import HttpVerb


def _route(slug: str, operation: str = "getThing", verb: HttpVerb = HttpVerb.GET) -> Route:
    return Route(http_method=verb, slug=slug, target=Target("Controller", operation))


class TestHasPlaceholder:
    def test_literal(self) -> None:
        assert has_placeholder("users") is False
        assert has_placeholder("") is False

    def test_param(self) -> None:
        assert has_placeholder("users/{id}") is True
        assert has_placeholder("users/{id?}") is True


class TestPrioritize:
    def test_literal_before_parameterized(self) -> None:
        slugs = ["users/{id}", "users", "posts/{id}", "posts"]
        ordered = prioritize(_route(s) for s in slugs)
        assert [r.slug for r in ordered] == ["posts", "users", "posts/{id}", "users/{id}"]

    def test_every_permutation_same_order(self) -> None:
        routes = [_route(s) for s in ["b/{x}", "a", "b", "a/{x?}", "a/me"]]
        expected = ("a", "a/me", "b", "a/{x?}", "b/{x}")
        for perm in itertools.permutations(routes):
            assert tuple(r.slug for r in prioritize(perm)) == expected

    def test_codepoint_order(self) -> None:
        ordered = prioritize([_route("b"), _route("B"), _route("a-b"), _route("a")])
        assert [r.slug for r in ordered] == ["B", "a", "a-b", "b"]

    def test_stable_for_equal_slugs(self) -> None:
        first = _route("users/{id}", "getShow", HttpVerb.GET)
        second = _route("users/{id}", "postShow", HttpVerb.POST)
        assert prioritize([first, second]) == (first, second)
        assert prioritize([second, first]) == (second, first)

    def test_routes_not_modified(self) -> None:
        route = _route("users/{id}")
        assert prioritize([route])[0] is route

    def test_empty(self) -> None:
        assert prioritize([]) == ()
