"""httpx-backed transport.

The client talks to the network through a single awaitable call,
``transport(url, init)``, returning an ``httpx.Response``. Anything with that
shape works; :class:`HttpxTransport` is the default.

Example:
    ```python
    import httpx
    from openapi_fetch_core import create_client
    from openapi_fetch_core.transport import HttpxTransport

    async with httpx.AsyncClient(timeout=10) as http_client:
        client = create_client("https://api.example.com", transport=HttpxTransport(http_client))
        result = await client.get("/pets")
    ```
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from openapi_fetch_core.types import MultipartForm

logger = logging.getLogger(__name__)

# Init options consumed by AsyncClient.send() rather than build_request()
SEND_OPTIONS: frozenset[str] = frozenset(["follow_redirects", "auth"])


@dataclass
class RequestInit:
    """Everything the transport needs besides the URL."""

    method: str
    headers: httpx.Headers
    body: str | bytes | MultipartForm | None = None
    options: dict[str, Any] = field(default_factory=dict)


class Transport(Protocol):
    """Callable that sends one request and returns the raw response."""

    async def __call__(self, url: str, init: RequestInit) -> httpx.Response: ...


class HttpxTransport:
    """Send requests through an ``httpx.AsyncClient``.

    Responses are returned unread (``stream=True``) so the caller decides
    whether to read the body or hand the stream out.

    Args:
        client: Client to send through. When omitted, a private client is
            created and closed by :meth:`aclose`.
        owns_client: Close ``client`` in :meth:`aclose` even though it was
            passed in (default: only when this transport created it)
    """

    def __init__(self, client: httpx.AsyncClient | None = None, *, owns_client: bool | None = None) -> None:
        self._owns_client = client is None if owns_client is None else owns_client
        self._client = client if client is not None else httpx.AsyncClient()

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def __call__(self, url: str, init: RequestInit) -> httpx.Response:
        build_kwargs = {k: v for k, v in init.options.items() if k not in SEND_OPTIONS}
        send_kwargs = {k: v for k, v in init.options.items() if k in SEND_OPTIONS}

        body = init.body
        if isinstance(body, MultipartForm):
            build_kwargs["data"] = dict(body.data)
            build_kwargs["files"] = body.files
        elif body is not None:
            build_kwargs["content"] = body

        request = self._client.build_request(init.method, url, headers=init.headers, **build_kwargs)
        logger.debug(f"{request.method} {request.url}")
        return await self._client.send(request, stream=True, **send_kwargs)
