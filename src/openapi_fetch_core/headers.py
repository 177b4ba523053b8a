"""Header merging across defaults, client, request and parameter sources."""

from collections.abc import Mapping
from typing import Any

import httpx

from openapi_fetch_core.serializers.params import stringify
from openapi_fetch_core.types import Unset

DEFAULT_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}

HeaderSource = Mapping[str, Any] | httpx.Headers | None


def merge_headers(*sources: HeaderSource) -> httpx.Headers:
    """Merge header sources left to right, later sources winning per key.

    Within each source, a value of ``None`` removes the header from the
    result, ``UNSET`` leaves it as it is, and anything else sets it.
    Keys compare case-insensitively. Sources are never modified.

    Args:
        *sources: Mappings or ``httpx.Headers``; ``None`` entries are skipped

    Returns:
        A new ``httpx.Headers`` collection
    """
    headers = httpx.Headers()
    for source in sources:
        if not isinstance(source, (Mapping, httpx.Headers)):
            continue
        items = source.multi_items() if isinstance(source, httpx.Headers) else source.items()
        for key, value in items:
            if value is None:
                if key in headers:
                    del headers[key]
            elif not isinstance(value, Unset):
                headers[key] = stringify(value)
    return headers
