"""Parameter, query, path and body serializers.

This package turns declarative parameter values into the exact strings that
appear in a request URL, following the OpenAPI 3.x ``style``/``explode``
serialization rules.

Modules:
    params: Primitive, object and array encoders
    query: Query string serializer factory and per-request resolution
    path: Path template substitution
    body: Request body serialization
"""

from openapi_fetch_core.serializers.body import BodySerializer, MultipartForm, default_body_serializer
from openapi_fetch_core.serializers.params import (
    encode_uri_component,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
)
from openapi_fetch_core.serializers.path import default_path_serializer
from openapi_fetch_core.serializers.query import (
    QuerySerializer,
    create_query_serializer,
    resolve_query_serializer,
)

__all__ = [
    "BodySerializer",
    "MultipartForm",
    "QuerySerializer",
    "create_query_serializer",
    "default_body_serializer",
    "default_path_serializer",
    "encode_uri_component",
    "resolve_query_serializer",
    "serialize_array_param",
    "serialize_object_param",
    "serialize_primitive_param",
]
