"""Transport layer between the request executor and the network.

The executor depends only on the ``Transport`` call shape:
``await transport(url, init) -> httpx.Response``. Wrap an
``httpx.AsyncClient`` (or an ``httpx.MockTransport`` in tests) with
:class:`HttpxTransport`, or pass any async callable with that signature.

Modules:
    httpx_transport: ``RequestInit``, the ``Transport`` protocol and ``HttpxTransport``

Example:
    ```python
    import httpx
    from openapi_fetch_core.transport import HttpxTransport

    transport = HttpxTransport(httpx.AsyncClient(timeout=30))
    ```
"""

from openapi_fetch_core.transport.httpx_transport import HttpxTransport, RequestInit, Transport

__all__ = ["HttpxTransport", "RequestInit", "Transport"]
