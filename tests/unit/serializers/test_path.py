"""Tests for path template substitution."""

import pytest

from openapi_fetch_core.serializers.path import default_path_serializer, parse_placeholder
from openapi_fetch_core.types import UNSET, Style


@pytest.mark.unit
@pytest.mark.parametrize(
    ("placeholder", "expected"),
    [
        ("{id}", ("id", Style.SIMPLE, False)),
        ("{id*}", ("id", Style.SIMPLE, True)),
        ("{.id}", ("id", Style.LABEL, False)),
        ("{.id*}", ("id", Style.LABEL, True)),
        ("{;id}", ("id", Style.MATRIX, False)),
        ("{;id*}", ("id", Style.MATRIX, True)),
    ],
)
def test_parse_placeholder(placeholder, expected):
    assert parse_placeholder(placeholder) == expected


@pytest.mark.unit
def test_template_without_placeholders_returns_none():
    assert default_path_serializer("/users", {"id": 1}) is None


@pytest.mark.unit
def test_simple_and_exploded_array():
    result = default_path_serializer("/users/{id}/teams/{team*}", {"id": "42", "team": ["a", "b"]})
    assert result == "/users/42/teams/a,b"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("template", "params", "expected"),
    [
        ("/items/{.id}", {"id": 5}, "/items/.5"),
        ("/items/{.ids}", {"ids": [1, 2]}, "/items/.1,2"),
        ("/items/{.ids*}", {"ids": [1, 2]}, "/items/.1.2"),
        ("/items/{;id}", {"id": 5}, "/items/;id=5"),
        ("/items/{;ids}", {"ids": [1, 2]}, "/items/;ids=1,2"),
        ("/items/{;ids*}", {"ids": [1, 2]}, "/items/;ids=1;ids=2"),
        ("/items/{color}", {"color": {"R": 1, "G": 2}}, "/items/R,1,G,2"),
        ("/items/{color*}", {"color": {"R": 1, "G": 2}}, "/items/R=1,G=2"),
        ("/items/{.color*}", {"color": {"R": 1, "G": 2}}, "/items/.R=1.G=2"),
        ("/items/{;color}", {"color": {"R": 1, "G": 2}}, "/items/;color=R,1,G,2"),
        ("/items/{;color*}", {"color": {"R": 1, "G": 2}}, "/items/;R=1;G=2"),
    ],
)
def test_styles(template, params, expected):
    assert default_path_serializer(template, params) == expected


@pytest.mark.unit
def test_missing_param_leaves_placeholder():
    """Missing path parameters are not an error; the placeholder stays in the URL."""
    result = default_path_serializer("/users/{id}/posts/{postId}", {"id": 1})
    assert result == "/users/1/posts/{postId}"


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, UNSET])
def test_nullish_param_leaves_placeholder(value):
    assert default_path_serializer("/users/{id}", {"id": value}) == "/users/{id}"


@pytest.mark.unit
def test_no_params_leaves_placeholders():
    assert default_path_serializer("/users/{id}", None) == "/users/{id}"


@pytest.mark.unit
def test_repeated_placeholder_is_replaced_each_time():
    assert default_path_serializer("/a/{id}/b/{id}", {"id": 7}) == "/a/7/b/7"


@pytest.mark.unit
def test_matrix_primitive_is_percent_encoded():
    assert default_path_serializer("/files/{;name}", {"name": "a b"}) == "/files/;name=a%20b"


@pytest.mark.unit
def test_simple_primitive_is_inserted_verbatim():
    assert default_path_serializer("/files/{name}", {"name": "v1.2"}) == "/files/v1.2"
    assert default_path_serializer("/flags/{on}", {"on": True}) == "/flags/true"


@pytest.mark.unit
def test_unknown_params_are_ignored():
    assert default_path_serializer("/users/{id}", {"id": 1, "extra": "x"}) == "/users/1"
