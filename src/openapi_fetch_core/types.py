"""Shared value types for parameter serialization.

Python has a single ``None`` where the HTTP/JSON world distinguishes
``null`` from "not provided". ``None`` means null; :data:`UNSET` means the
value was never provided. Serializers skip both. Header merging treats them
differently (``None`` removes a header, ``UNSET`` leaves it alone).

Example:
    ```python
    from openapi_fetch_core.types import UNSET, SerializerOptions, Style

    opts = SerializerOptions(style=Style.PIPE_DELIMITED, explode=False)
    headers = {"X-Trace": UNSET, "X-Legacy": None}
    ```
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final


class Unset:
    """Marker type for values that were never provided."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = Unset()


def is_nullish(value: Any) -> bool:
    """Return True for ``None`` and :data:`UNSET`."""
    return value is None or isinstance(value, Unset)


class Style(str, Enum):
    """OpenAPI 3.x parameter serialization styles."""

    SIMPLE = "simple"
    LABEL = "label"
    MATRIX = "matrix"
    FORM = "form"
    SPACE_DELIMITED = "spaceDelimited"
    PIPE_DELIMITED = "pipeDelimited"
    DEEP_OBJECT = "deepObject"


def coerce_style(value: "Style | str") -> "Style | str":
    """Convert a style string to :class:`Style`.

    Unrecognized strings are returned unchanged so the encoders route them
    through their default branch.
    """
    if isinstance(value, Style):
        return value
    try:
        return Style(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class SerializerOptions:
    """Options for one array, object or primitive encoding."""

    style: Style | str = Style.FORM
    explode: bool = True
    allow_reserved: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", coerce_style(self.style))

    @classmethod
    def coerce(
        cls,
        value: "SerializerOptions | Mapping[str, Any] | None",
        *,
        style: Style | str,
        explode: bool,
        allow_reserved: bool = False,
    ) -> "SerializerOptions":
        """Build options from a partial mapping laid over the given defaults."""
        if isinstance(value, SerializerOptions):
            return cls(style=value.style, explode=value.explode, allow_reserved=allow_reserved)
        overrides = dict(value or {})
        return cls(
            style=overrides.get("style", style),
            explode=overrides.get("explode", explode),
            allow_reserved=allow_reserved,
        )


@dataclass(frozen=True)
class QuerySerializerOptions:
    """Client- or request-level options for the built-in query serializer.

    ``array`` and ``object`` hold partial :class:`SerializerOptions`
    (``style``/``explode``) applied over the query defaults. ``allow_reserved``
    left at ``None`` counts as unset and falls back to ``False``.
    """

    array: "SerializerOptions | Mapping[str, Any] | None" = None
    object: "SerializerOptions | Mapping[str, Any] | None" = None
    allow_reserved: bool | None = None

    @classmethod
    def coerce(cls, value: "QuerySerializerOptions | Mapping[str, Any] | None") -> "QuerySerializerOptions":
        if isinstance(value, QuerySerializerOptions):
            return value
        if value is None:
            return cls()
        return cls(
            array=value.get("array"),
            object=value.get("object"),
            allow_reserved=value.get("allow_reserved", value.get("allowReserved")),
        )

    def as_dict(self) -> dict[str, Any]:
        """Return only the fields that were set, for shallow merging."""
        result: dict[str, Any] = {}
        if self.array is not None:
            result["array"] = self.array
        if self.object is not None:
            result["object"] = self.object
        if self.allow_reserved is not None:
            result["allow_reserved"] = self.allow_reserved
        return result


@dataclass
class RequestParams:
    """Per-request parameter values grouped by location."""

    path: Mapping[str, Any] | None = None
    query: Mapping[str, Any] | None = None
    header: Mapping[str, Any] | None = None

    @classmethod
    def coerce(cls, value: "RequestParams | Mapping[str, Any] | None") -> "RequestParams":
        if isinstance(value, RequestParams):
            return value
        if not value:
            return cls()
        return cls(path=value.get("path"), query=value.get("query"), header=value.get("header"))


@dataclass(frozen=True)
class MultipartForm:
    """A ``multipart/form-data`` payload handed to httpx as ``data``/``files``.

    Returning one of these from a body serializer makes the client drop its
    default ``Content-Type`` so httpx can write the boundary.
    """

    data: Mapping[str, Any] = field(default_factory=dict)
    files: Any = None
