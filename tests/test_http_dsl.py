"""Tests for flauta.dsl.http — route() and the verb builders."""

import pytest

from flauta.dsl.http import destroy, get, head, patch, post, put, route
from flauta.routing.route import HTTPMethod, Route


class TestRoute:
    def test_builds_route(self) -> None:
        assert route("GET", "foo", "bar", "baz") == Route(
            http_method=HTTPMethod.GET, path="foo", require_path="bar", handler="baz"
        )

    def test_lowercase_method(self) -> None:
        assert route("patch", "foo", "bar", "baz").http_method is HTTPMethod.PATCH

    def test_enum_method(self) -> None:
        assert route(HTTPMethod.PUT, "foo", "bar", "baz").http_method is HTTPMethod.PUT

    def test_alias(self) -> None:
        assert route("GET", "foo", "bar", "baz", alias="users").alias == "users"

    def test_no_alias_left_unset(self) -> None:
        assert route("GET", "foo", "bar", "baz").alias is None

    def test_unknown_method(self) -> None:
        with pytest.raises(ValueError):
            route("TRACE", "foo", "bar", "baz")


@pytest.mark.parametrize(
    ("builder", "method"),
    [
        (destroy, HTTPMethod.DELETE),
        (get, HTTPMethod.GET),
        (head, HTTPMethod.HEAD),
        (patch, HTTPMethod.PATCH),
        (post, HTTPMethod.POST),
        (put, HTTPMethod.PUT),
    ],
)
def test_verb_builders(builder, method: HTTPMethod) -> None:
    assert builder("foo", "bar", "baz") == Route(method, "foo", "bar", "baz")


def test_verb_builder_alias() -> None:
    assert get("foo", "bar", "baz", alias="users") == Route(
        HTTPMethod.GET, "foo", "bar", "baz", alias="users"
    )
