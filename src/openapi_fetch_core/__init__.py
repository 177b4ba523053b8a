"""OpenAPI Fetch Core - typed HTTP request runtime for OpenAPI clients.

This library turns declarative parameter values into correctly formatted
HTTP requests and raw responses back into typed results:
- OpenAPI 3.x parameter serialization (simple, label, matrix, form,
  spaceDelimited, pipeDelimited, deepObject; explode on/off)
- Path template substitution and query string building
- Header merging with per-key override and explicit removal
- Status-based response classification into ``Success`` / ``Failure``

Example:
    ```python
    from openapi_fetch_core import create_client

    async with create_client("https://api.example.com") as client:
        result = await client.get(
            "/users/{id}/teams/{team*}",
            params={"path": {"id": "42", "team": ["a", "b"]}, "query": {"page": 2}},
        )
        # GET https://api.example.com/users/42/teams/a,b?page=2
        if result.ok:
            teams = result.data
    ```
"""

from openapi_fetch_core.client import Client, create_client
from openapi_fetch_core.headers import merge_headers
from openapi_fetch_core.response import Failure, FetchResult, Success
from openapi_fetch_core.serializers import (
    create_query_serializer,
    default_body_serializer,
    default_path_serializer,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
)
from openapi_fetch_core.types import (
    UNSET,
    MultipartForm,
    QuerySerializerOptions,
    RequestParams,
    SerializerOptions,
    Style,
    Unset,
)
from openapi_fetch_core.url import create_final_url

__version__ = "0.1.0"

__all__ = [
    "UNSET",
    "Client",
    "Failure",
    "FetchResult",
    "MultipartForm",
    "QuerySerializerOptions",
    "RequestParams",
    "SerializerOptions",
    "Style",
    "Success",
    "Unset",
    "__version__",
    "create_client",
    "create_final_url",
    "create_query_serializer",
    "default_body_serializer",
    "default_path_serializer",
    "merge_headers",
    "serialize_array_param",
    "serialize_object_param",
    "serialize_primitive_param",
]
