"""Query string serialization.

A query serializer is any callable ``(query_params) -> str``. The built-in one
is produced by :func:`create_query_serializer` from
:class:`~openapi_fetch_core.types.QuerySerializerOptions`.

Query defaults:

| Value type | style | explode |
|------------|-------|---------|
| list/tuple | `form` | `true` |
| mapping | `deepObject` | `true` |
| scalar | n/a | n/a |

Example:
    ```python
    from openapi_fetch_core.serializers.query import create_query_serializer

    serializer = create_query_serializer({"array": {"style": "pipeDelimited", "explode": False}})
    serializer({"id": [1, 2], "q": "a b", "skip": None})
    # 'id=1|2&q=a%20b'
    ```
"""

from collections.abc import Callable, Mapping
from typing import Any

from openapi_fetch_core.serializers.params import (
    is_array_value,
    is_object_value,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
)
from openapi_fetch_core.types import QuerySerializerOptions, SerializerOptions, Style, is_nullish

QuerySerializer = Callable[[Mapping[str, Any]], str]
QuerySerializerConfig = QuerySerializer | QuerySerializerOptions | Mapping[str, Any]


def create_query_serializer(
    options: QuerySerializerOptions | Mapping[str, Any] | None = None,
) -> QuerySerializer:
    """Create a query serializer bound to the given options.

    Args:
        options: Array/object style overrides and ``allow_reserved``

    Returns:
        Function turning a query parameter mapping into a query string
        (without the leading ``?``)
    """
    opts = QuerySerializerOptions.coerce(options)
    allow_reserved = bool(opts.allow_reserved)
    array_options = SerializerOptions.coerce(
        opts.array, style=Style.FORM, explode=True, allow_reserved=allow_reserved
    )
    object_options = SerializerOptions.coerce(
        opts.object, style=Style.DEEP_OBJECT, explode=True, allow_reserved=allow_reserved
    )
    primitive_options = SerializerOptions(allow_reserved=allow_reserved)

    def query_serializer(query_params: Mapping[str, Any] | None) -> str:
        search = []
        if not isinstance(query_params, Mapping):
            return ""
        for name, value in query_params.items():
            if is_nullish(value):
                continue
            if is_array_value(value):
                search.append(serialize_array_param(name, value, array_options))
            elif is_object_value(value):
                search.append(serialize_object_param(name, value, object_options))
            else:
                search.append(serialize_primitive_param(name, value, primitive_options))
        return "&".join(fragment for fragment in search if fragment)

    return query_serializer


def _options_dict(options: QuerySerializerOptions | Mapping[str, Any] | None) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, QuerySerializerOptions):
        return options.as_dict()
    result = dict(options)
    if "allowReserved" in result:
        result["allow_reserved"] = result.pop("allowReserved")
    return result


def resolve_query_serializer(
    client_level: QuerySerializerConfig | None,
    request_level: QuerySerializerConfig | None = None,
) -> QuerySerializer:
    """Pick the query serializer for one request.

    Resolution order:
    1. Request-level callable, used as-is
    2. Request-level options merged over client-level options (top-level keys
       replace each other; a client-level callable contributes nothing)
    3. Client-level callable, used as-is
    4. Client-level options (or defaults)
    """
    if request_level is not None:
        if callable(request_level):
            return request_level
        base = {} if callable(client_level) else _options_dict(client_level)
        return create_query_serializer({**base, **_options_dict(request_level)})
    if callable(client_level):
        return client_level
    return create_query_serializer(client_level)
