"""Typed request client.

One request goes through three steps:

1. Build: pick the query serializer, build the URL, merge headers, serialize the body
2. Send: a single awaited transport call
3. Classify: turn the raw response into ``Success`` or ``Failure``

HTTP error statuses never raise. Only malformed parameter values
(``UnsupportedValueError``) and transport failures propagate as exceptions.

Example:
    ```python
    from openapi_fetch_core import create_client

    async with create_client("https://petstore.example.com/v1", headers={"Authorization": "Bearer ..."}) as client:
        result = await client.get(
            "/pets/{petId}",
            params={"path": {"petId": 42}, "query": {"fields": ["name", "tag"]}},
        )
        if result.ok:
            print(result.data)
        else:
            print(result.response.status_code, result.error)
    ```
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import httpx

from openapi_fetch_core.headers import DEFAULT_HEADERS, HeaderSource, merge_headers
from openapi_fetch_core.response import FetchResult, classify_response
from openapi_fetch_core.serializers.body import BodySerializer, default_body_serializer
from openapi_fetch_core.serializers.query import QuerySerializerConfig, resolve_query_serializer
from openapi_fetch_core.transport import HttpxTransport, RequestInit, Transport
from openapi_fetch_core.types import MultipartForm, RequestParams, is_nullish
from openapi_fetch_core.url import create_final_url

logger = logging.getLogger(__name__)

# Transport init defaults applied under client- and request-level options
DEFAULT_INIT: Mapping[str, Any] = MappingProxyType({"follow_redirects": True})


class Client:
    """HTTP client for an OpenAPI described service.

    Configuration is fixed at construction; calls never modify it, so one
    client can serve concurrent requests.

    Args:
        base_url: Prefix for every request path; one trailing slash is removed
        headers: Client-level headers, merged over the JSON content type default
        query_serializer: Callable replacing the built-in query serializer, or
            ``QuerySerializerOptions`` (or an equivalent mapping) configuring it
        body_serializer: Callable turning a request body into ``str``, ``bytes``
            or ``MultipartForm`` (default: JSON)
        transport: Async callable ``(url, init) -> httpx.Response``
        http_client: ``httpx.AsyncClient`` to wrap when no transport is given
        **init: Client-level transport options such as ``timeout``
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        headers: HeaderSource = None,
        query_serializer: QuerySerializerConfig | None = None,
        body_serializer: BodySerializer | None = None,
        transport: Transport | None = None,
        http_client: httpx.AsyncClient | None = None,
        **init: Any,
    ) -> None:
        if base_url.endswith("/"):
            base_url = base_url[:-1]
        self._base_url = base_url
        self._headers = _freeze_headers(headers)
        self._query_serializer = query_serializer
        self._body_serializer = body_serializer
        self._init = MappingProxyType(dict(init))

        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            transport = HttpxTransport(http_client)
            if http_client is None:
                self._owned_transport = transport
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: RequestParams | Mapping[str, Any] | None = None,
        headers: HeaderSource = None,
        body: Any = None,
        parse_as: str = "json",
        query_serializer: QuerySerializerConfig | None = None,
        body_serializer: BodySerializer | None = None,
        transport: Transport | None = None,
        **init: Any,
    ) -> FetchResult:
        """Send a request and classify the response.

        Args:
            method: HTTP method
            url: Path template relative to ``base_url``, e.g. ``/users/{id}``
            params: ``path``, ``query`` and ``header`` parameter values
            headers: Request-level headers (``None`` values remove a header)
            body: Request body; skipped when ``None`` or ``UNSET``
            parse_as: How to parse a 2xx body (``json``, ``text``, ``bytes``,
                ``blob``, ``arrayBuffer`` or ``stream``)
            query_serializer: Request-level serializer callable or options
            body_serializer: Request-level body serializer
            transport: Replacement transport for this call
            **init: Transport options overriding client-level ones

        Returns:
            ``Success`` or ``Failure``, both carrying the raw ``httpx.Response``

        Raises:
            UnsupportedValueError: If a nested array/object is passed as a scalar
            httpx.HTTPError: If the transport fails
        """
        request_params = RequestParams.coerce(params)
        serializer = resolve_query_serializer(self._query_serializer, query_serializer)
        final_url = create_final_url(
            url,
            base_url=self._base_url,
            params=request_params,
            query_serializer=serializer,
        )
        final_headers = merge_headers(DEFAULT_HEADERS, self._headers, headers, request_params.header)

        serialized_body = None
        if not is_nullish(body):
            serialize = body_serializer or self._body_serializer or default_body_serializer
            serialized_body = serialize(body)
        # httpx writes its own multipart Content-Type with the boundary
        if isinstance(serialized_body, MultipartForm) and "content-type" in final_headers:
            del final_headers["content-type"]

        request_init = RequestInit(
            method=method.upper(),
            headers=final_headers,
            body=serialized_body,
            options={**DEFAULT_INIT, **self._init, **init},
        )
        send = transport or self._transport
        response = await send(final_url, request_init)
        result = await classify_response(response, parse_as)
        logger.debug(f"{request_init.method} {final_url} -> HTTP {response.status_code} ({type(result).__name__})")
        return result

    async def get(self, url: str, **options: Any) -> FetchResult:
        """Call a GET endpoint."""
        return await self.request("GET", url, **options)

    async def put(self, url: str, **options: Any) -> FetchResult:
        """Call a PUT endpoint."""
        return await self.request("PUT", url, **options)

    async def post(self, url: str, **options: Any) -> FetchResult:
        """Call a POST endpoint."""
        return await self.request("POST", url, **options)

    async def delete(self, url: str, **options: Any) -> FetchResult:
        """Call a DELETE endpoint."""
        return await self.request("DELETE", url, **options)

    async def options(self, url: str, **options: Any) -> FetchResult:
        """Call an OPTIONS endpoint."""
        return await self.request("OPTIONS", url, **options)

    async def head(self, url: str, **options: Any) -> FetchResult:
        """Call a HEAD endpoint."""
        return await self.request("HEAD", url, **options)

    async def patch(self, url: str, **options: Any) -> FetchResult:
        """Call a PATCH endpoint."""
        return await self.request("PATCH", url, **options)

    async def trace(self, url: str, **options: Any) -> FetchResult:
        """Call a TRACE endpoint."""
        return await self.request("TRACE", url, **options)


def _freeze_headers(headers: HeaderSource) -> HeaderSource:
    """Copy client-level headers so later changes by the caller do not leak in."""
    if isinstance(headers, httpx.Headers):
        return headers.copy()
    if isinstance(headers, Mapping):
        return MappingProxyType(dict(headers))
    return None


def create_client(base_url: str = "", **options: Any) -> Client:
    """Create a :class:`Client`. See the class for the accepted options."""
    return Client(base_url, **options)
