"""Request body serialization."""

import json
from collections.abc import Callable
from typing import Any

from openapi_fetch_core.types import MultipartForm

BodySerializer = Callable[[Any], "str | bytes | MultipartForm"]


def default_body_serializer(body: Any) -> str:
    """Serialize a request body to JSON text."""
    return json.dumps(body)


__all__ = ["BodySerializer", "MultipartForm", "default_body_serializer"]
