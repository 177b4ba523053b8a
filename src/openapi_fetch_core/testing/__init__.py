"""Testing utilities for code built on openapi-fetch-core.

Modules:
    factories: Mock response and transport factories

Example:
    ```python
    from openapi_fetch_core import create_client
    from openapi_fetch_core.testing import create_error_response, mock_transport


    async def test_client_handles_404():
        async with mock_transport(lambda request: create_error_response(404)) as transport:
            client = create_client("https://api.example.com", transport=transport)
            result = await client.get("/pets/1")
        assert result.response.status_code == 404
    ```
"""

from openapi_fetch_core.testing.factories import create_error_response, create_mock_response, mock_transport

__all__ = ["create_error_response", "create_mock_response", "mock_transport"]
