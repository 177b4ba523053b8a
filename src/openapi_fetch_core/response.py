"""Response classification into ``Success`` / ``Failure`` results.

The outcome is decided by HTTP status alone, never by body content:

| Response | Result |
|----------|--------|
| 204, or `Content-Length: 0` | `Success({})` / `Failure({})` |
| 2xx, `parse_as="stream"` | `Success(<async byte iterator>)` |
| 2xx | `Success(<parsed body>)` |
| anything else | `Failure(<JSON body, or raw text if not JSON>)` |

Example:
    ```python
    result = await client.get("/pets/{id}", params={"path": {"id": 7}})
    if result.ok:
        print(result.data["name"])
    else:
        print(result.response.status_code, result.error)
    ```
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

import httpx

from openapi_fetch_core.errors.handler import raise_for_status

logger = logging.getLogger(__name__)

ParseAs = Literal["json", "text", "bytes", "blob", "arrayBuffer", "stream"]

PARSERS: dict[str, Callable[[httpx.Response], Any]] = {
    "json": lambda response: response.json(),
    "text": lambda response: response.text,
    "bytes": lambda response: response.content,
    "blob": lambda response: response.content,
    "arrayBuffer": lambda response: response.content,
}


@dataclass(frozen=True)
class Success:
    """A 2xx response and its parsed body."""

    data: Any
    response: httpx.Response

    ok = True
    error = None

    def unwrap(self) -> Any:
        """Return ``data``."""
        return self.data


@dataclass(frozen=True)
class Failure:
    """A non-2xx response and its parsed error body."""

    error: Any
    response: httpx.Response

    ok = False
    data = None

    def unwrap(self) -> Any:
        """Raise the ``APIError`` subclass matching the response status."""
        raise_for_status(self)


FetchResult = Success | Failure


def clone_response(response: httpx.Response) -> httpx.Response:
    """Return an independent copy of a response whose body has been read.

    Each parse attempt works on its own copy, so a failed ``.json()`` never
    affects the ``.text`` fallback or the response handed back to the caller.
    """
    # content is already decoded, so the copy must not decode it again
    headers = [(k, v) for k, v in response.headers.multi_items() if k.lower() != "content-encoding"]
    return httpx.Response(
        status_code=response.status_code,
        headers=headers,
        content=response.content,
        extensions=response.extensions,
        default_encoding=response.encoding or "utf-8",
    )


def is_empty_response(response: httpx.Response) -> bool:
    return response.status_code == 204 or response.headers.get("content-length") == "0"


async def classify_response(response: httpx.Response, parse_as: str = "json") -> FetchResult:
    """Classify a raw response and parse its body.

    Args:
        response: Response returned by the transport, read or unread
        parse_as: How to parse a 2xx body (``json``, ``text``, ``bytes``,
            ``blob``, ``arrayBuffer`` or ``stream``)

    Returns:
        ``Success`` or ``Failure`` carrying the raw response

    Raises:
        ValueError: If a 2xx body cannot be parsed as requested
    """
    if is_empty_response(response):
        await response.aclose()
        logger.debug(f"Empty response body (HTTP {response.status_code})")
        return Success({}, response) if response.is_success else Failure({}, response)

    if response.is_success and parse_as == "stream":
        # The caller owns the stream and must close the response
        return Success(response.aiter_bytes(), response)

    await response.aread()

    if response.is_success:
        parser = PARSERS.get(parse_as)
        if parser is None:
            logger.debug(f"Unknown parse_as {parse_as!r}, falling back to text")
            parser = PARSERS["text"]
        return Success(parser(clone_response(response)), response)

    try:
        error = clone_response(response).json()
    except ValueError:
        logger.debug(f"HTTP {response.status_code} error body is not JSON, returning raw text")
        error = clone_response(response).text
    return Failure(error, response)
