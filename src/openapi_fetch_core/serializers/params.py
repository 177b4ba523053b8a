"""Primitive, object and array parameter encoders.

These implement the OpenAPI 3.x ``style``/``explode`` rules for a single
parameter. Objects and arrays are shallow: their members must be scalars.

See: https://swagger.io/docs/specification/serialization/

Example:
    ```python
    from openapi_fetch_core.serializers.params import serialize_array_param, serialize_object_param

    serialize_array_param("id", [3, 4, 5], {"style": "simple", "explode": False})
    # '3,4,5'
    serialize_object_param("color", {"R": 100, "G": 200}, {"style": "deepObject", "explode": True})
    # 'color[R]=100&color[G]=200'
    ```
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from openapi_fetch_core.errors.exceptions import UnsupportedValueError
from openapi_fetch_core.types import UNSET, SerializerOptions, Style, is_nullish

# Characters left alone by encodeURIComponent, besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"

# Joiners between exploded members
EXPLODE_JOINERS: dict[Style, str] = {
    Style.SIMPLE: ",",
    Style.LABEL: ".",
    Style.MATRIX: ";",
}
DEFAULT_EXPLODE_JOINER = "&"

# Joiners between array values when explode is false
ARRAY_JOINERS: dict[Style, str] = {
    Style.FORM: ",",
    Style.SPACE_DELIMITED: "%20",
    Style.PIPE_DELIMITED: "|",
}
DEFAULT_ARRAY_JOINER = ","


def _options(options: SerializerOptions | Mapping[str, Any] | None) -> SerializerOptions:
    if isinstance(options, SerializerOptions):
        return options
    options = options or {}
    return SerializerOptions(
        style=options.get("style", Style.FORM),
        explode=options.get("explode", True),
        allow_reserved=bool(options.get("allow_reserved", options.get("allowReserved", False))),
    )


def is_array_value(value: Any) -> bool:
    """Return True for values encoded by :func:`serialize_array_param`."""
    return isinstance(value, (list, tuple))


def is_object_value(value: Any) -> bool:
    """Return True for values encoded by :func:`serialize_object_param`."""
    return isinstance(value, Mapping)


def stringify(value: Any) -> str:
    """Render a scalar the way JSON and URL templates do.

    Booleans become ``true``/``false``, ``None`` becomes ``null`` and integral
    floats drop their fractional part. ``UNSET`` renders as an empty string.
    """
    if value is None:
        return "null"
    if value is UNSET:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_uri_component(value: Any) -> str:
    """Percent-encode a scalar with ``encodeURIComponent`` semantics."""
    return quote(stringify(value), safe=_URI_COMPONENT_SAFE)


def _encode(value: Any, allow_reserved: bool) -> str:
    return stringify(value) if allow_reserved else encode_uri_component(value)


def serialize_primitive_param(
    name: str,
    value: Any,
    options: SerializerOptions | Mapping[str, Any] | None = None,
) -> str:
    """Encode a scalar as ``name=value``.

    Args:
        name: Parameter (or member) name, emitted as-is
        value: Scalar value; ``None``/``UNSET`` yield an empty string
        options: Only ``allow_reserved`` is consulted

    Returns:
        The ``name=value`` fragment

    Raises:
        UnsupportedValueError: If value is a mapping or a sequence
    """
    if is_nullish(value):
        return ""
    if is_object_value(value) or is_array_value(value):
        raise UnsupportedValueError(
            "Deeply-nested arrays/objects aren't supported. "
            "Provide your own query_serializer() to handle these.",
            name=name,
            value=value,
        )
    return f"{name}={_encode(value, _options(options).allow_reserved)}"


def serialize_object_param(
    name: str,
    value: Any,
    options: SerializerOptions | Mapping[str, Any] | None = None,
) -> str:
    """Encode a shallow mapping per ``style`` and ``explode``.

    Non-mapping or nullish values yield an empty string.
    """
    if is_nullish(value) or not is_object_value(value):
        return ""
    opts = _options(options)

    if not opts.explode:
        # Members are always comma-joined here; the style only decides the wrapping
        values: list[str] = []
        for key, member in value.items():
            values.extend((str(key), _encode(member, opts.allow_reserved)))
        final = ",".join(values)
        if opts.style == Style.FORM:
            return f"{name}={final}"
        if opts.style == Style.LABEL:
            return f".{final}"
        if opts.style == Style.MATRIX:
            return f";{name}={final}"
        return final

    joiner = EXPLODE_JOINERS.get(opts.style, DEFAULT_EXPLODE_JOINER)
    fragments = []
    for key, member in value.items():
        final_name = f"{name}[{key}]" if opts.style == Style.DEEP_OBJECT else str(key)
        fragments.append(serialize_primitive_param(final_name, member, opts))
    final = joiner.join(fragments)
    if opts.style in (Style.LABEL, Style.MATRIX):
        return f"{joiner}{final}"
    return final


def serialize_array_param(
    name: str,
    value: Any,
    options: SerializerOptions | Mapping[str, Any] | None = None,
) -> str:
    """Encode a sequence of scalars per ``style`` and ``explode``.

    Non-sequence values yield an empty string.
    """
    if not is_array_value(value):
        return ""
    opts = _options(options)

    if not opts.explode:
        joiner = ARRAY_JOINERS.get(opts.style, DEFAULT_ARRAY_JOINER)
        final = joiner.join(_encode(item, opts.allow_reserved) for item in value)
        if opts.style == Style.SIMPLE:
            return final
        if opts.style == Style.LABEL:
            return f".{final}"
        if opts.style == Style.MATRIX:
            return f";{name}={final}"
        # form, spaceDelimited, pipeDelimited and anything else
        return f"{name}={final}"

    joiner = EXPLODE_JOINERS.get(opts.style, DEFAULT_EXPLODE_JOINER)
    fragments = []
    for item in value:
        if opts.style in (Style.SIMPLE, Style.LABEL):
            fragments.append(_encode(item, opts.allow_reserved))
        else:
            fragments.append(serialize_primitive_param(name, item, opts))
    final = joiner.join(fragments)
    if opts.style in (Style.LABEL, Style.MATRIX):
        return f"{joiner}{final}"
    return final
