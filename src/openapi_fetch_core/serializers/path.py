"""Path template substitution.

Placeholders follow RFC 6570 operator syntax as used by OpenAPI path
parameters:

| Placeholder | style | explode |
|-------------|-------|---------|
| `{id}` | `simple` | `false` |
| `{id*}` | `simple` | `true` |
| `{.id}` | `label` | `false` |
| `{.id*}` | `label` | `true` |
| `{;id}` | `matrix` | `false` |
| `{;id*}` | `matrix` | `true` |

A placeholder whose parameter is missing (or ``None``/``UNSET``) is left in
the path untouched.
"""

import re
from collections.abc import Mapping
from typing import Any

from openapi_fetch_core.serializers.params import (
    is_array_value,
    is_object_value,
    serialize_array_param,
    serialize_object_param,
    serialize_primitive_param,
    stringify,
)
from openapi_fetch_core.types import SerializerOptions, Style, is_nullish

PATH_PARAM_RE = re.compile(r"\{[^{}]+\}")


def parse_placeholder(placeholder: str) -> tuple[str, Style, bool]:
    """Split ``{.name*}``-style placeholder text into name, style and explode."""
    name = placeholder[1:-1]
    explode = False
    style = Style.SIMPLE
    if name.endswith("*"):
        explode = True
        name = name[:-1]
    if name.startswith("."):
        style = Style.LABEL
        name = name[1:]
    elif name.startswith(";"):
        style = Style.MATRIX
        name = name[1:]
    return name, style, explode


def default_path_serializer(pathname: str, path_params: Mapping[str, Any] | None) -> str | None:
    """Substitute path parameters into a templated path.

    Args:
        pathname: Path or full URL containing ``{...}`` placeholders
        path_params: Parameter values by name

    Returns:
        The substituted path, or None when the template has no placeholders
    """
    matches = PATH_PARAM_RE.findall(pathname)
    if not matches:
        return None

    next_url = pathname
    for match in matches:
        name, style, explode = parse_placeholder(match)
        value = path_params.get(name) if path_params else None
        if is_nullish(value):
            continue

        options = SerializerOptions(style=style, explode=explode)
        if is_array_value(value):
            replacement = serialize_array_param(name, value, options)
        elif is_object_value(value):
            replacement = serialize_object_param(name, value, options)
        elif style == Style.MATRIX:
            replacement = f";{serialize_primitive_param(name, value)}"
        elif style == Style.LABEL:
            replacement = f".{stringify(value)}"
        else:
            replacement = stringify(value)
        next_url = next_url.replace(match, replacement, 1)
    return next_url
