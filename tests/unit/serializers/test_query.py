"""Tests for the query string serializer."""

from urllib.parse import parse_qs

import pytest

from openapi_fetch_core.errors import UnsupportedValueError
from openapi_fetch_core.serializers.query import create_query_serializer, resolve_query_serializer
from openapi_fetch_core.types import UNSET, QuerySerializerOptions


class TestCreateQuerySerializer:
    """Test the built-in query serializer."""

    @pytest.mark.unit
    def test_empty_params(self):
        assert create_query_serializer()({}) == ""

    @pytest.mark.unit
    def test_non_mapping_params(self):
        assert create_query_serializer()(None) == ""

    @pytest.mark.unit
    def test_nullish_params_are_skipped(self):
        serializer = create_query_serializer()
        assert serializer({"a": None, "b": UNSET}) == ""
        assert serializer({"a": None, "b": 2}) == "b=2"

    @pytest.mark.unit
    def test_default_styles(self):
        serializer = create_query_serializer()
        result = serializer({"id": [1, 2], "color": {"R": 1, "G": 2}, "q": "x y"})

        assert result == "id=1&id=2&color[R]=1&color[G]=2&q=x%20y"

    @pytest.mark.unit
    def test_empty_string_value_is_kept(self):
        assert create_query_serializer()({"q": "", "page": 1}) == "q=&page=1"

    @pytest.mark.unit
    def test_empty_array_adds_nothing(self):
        assert create_query_serializer()({"a": [], "b": 1}) == "b=1"

    @pytest.mark.unit
    def test_array_options(self):
        serializer = create_query_serializer({"array": {"style": "pipeDelimited", "explode": False}})
        assert serializer({"id": [1, 2]}) == "id=1|2"

    @pytest.mark.unit
    def test_object_options(self):
        serializer = create_query_serializer(QuerySerializerOptions(object={"style": "form", "explode": False}))
        assert serializer({"color": {"R": 1, "G": 2}}) == "color=R,1,G,2"

    @pytest.mark.unit
    def test_partial_array_options_keep_default_style(self):
        serializer = create_query_serializer({"array": {"explode": False}})
        assert serializer({"id": [1, 2]}) == "id=1,2"

    @pytest.mark.unit
    def test_allow_reserved_applies_to_every_kind(self):
        serializer = create_query_serializer({"allowReserved": True})
        result = serializer({"path": "/a", "ids": ["/b"], "f": {"k": "/c"}})

        assert result == "path=/a&ids=/b&f[k]=/c"

    @pytest.mark.unit
    def test_nested_values_raise(self):
        with pytest.raises(UnsupportedValueError):
            create_query_serializer()({"a": [[1, 2]]})

    @pytest.mark.unit
    def test_round_trip_through_parse_qs(self):
        params = {"id": [1, 2, 3], "name": "Jane Doe", "tag": "a&b=c", "flag": True}
        result = create_query_serializer()(params)

        assert parse_qs(result) == {
            "id": ["1", "2", "3"],
            "name": ["Jane Doe"],
            "tag": ["a&b=c"],
            "flag": ["true"],
        }

    @pytest.mark.unit
    def test_does_not_mutate_params(self):
        params = {"id": [1, 2], "color": {"R": 1}}
        create_query_serializer()(params)
        assert params == {"id": [1, 2], "color": {"R": 1}}


class TestResolveQuerySerializer:
    """Test request-level vs client-level serializer resolution."""

    @pytest.mark.unit
    def test_defaults(self):
        assert resolve_query_serializer(None)({"id": [1, 2]}) == "id=1&id=2"

    @pytest.mark.unit
    def test_client_callable(self):
        def custom(params):
            return "custom=1"

        assert resolve_query_serializer(custom) is custom

    @pytest.mark.unit
    def test_request_callable_wins(self):
        def client_level(params):
            return "client=1"

        def request_level(params):
            return "request=1"

        assert resolve_query_serializer(client_level, request_level) is request_level
        assert resolve_query_serializer({"allowReserved": True}, request_level) is request_level

    @pytest.mark.unit
    def test_request_options_merge_over_client_options(self):
        serializer = resolve_query_serializer(
            {"array": {"style": "pipeDelimited", "explode": False}},
            {"allow_reserved": True},
        )
        assert serializer({"ids": ["a/b", "c"]}) == "ids=a/b|c"

    @pytest.mark.unit
    def test_request_array_options_replace_client_array_options(self):
        serializer = resolve_query_serializer(
            {"array": {"style": "pipeDelimited", "explode": False}},
            {"array": {"style": "spaceDelimited", "explode": False}},
        )
        assert serializer({"ids": [1, 2]}) == "ids=1%202"

    @pytest.mark.unit
    def test_request_options_can_turn_off_allow_reserved(self):
        serializer = resolve_query_serializer({"allowReserved": True}, {"allowReserved": False})
        assert serializer({"path": "/a"}) == "path=%2Fa"

    @pytest.mark.unit
    def test_request_dataclass_options_can_turn_off_allow_reserved(self):
        serializer = resolve_query_serializer(
            QuerySerializerOptions(allow_reserved=True),
            QuerySerializerOptions(allow_reserved=False),
        )
        assert serializer({"path": "/a"}) == "path=%2Fa"

    @pytest.mark.unit
    def test_request_dataclass_without_allow_reserved_keeps_client_value(self):
        serializer = resolve_query_serializer(
            QuerySerializerOptions(allow_reserved=True),
            QuerySerializerOptions(array={"style": "pipeDelimited", "explode": False}),
        )
        assert serializer({"path": "/a", "ids": ["b/c", "d"]}) == "path=/a&ids=b/c|d"

    @pytest.mark.unit
    def test_request_options_ignore_client_callable(self):
        def client_level(params):
            return "client=1"

        serializer = resolve_query_serializer(client_level, QuerySerializerOptions(allow_reserved=True))
        assert serializer({"path": "/a", "ids": [1, 2]}) == "path=/a&ids=1&ids=2"
