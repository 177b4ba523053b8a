"""Structured exceptions.

Two kinds of failure are raised from a request call:

- ``UnsupportedValueError``: a nested array/object reached the scalar encoder
- transport errors (``httpx.HTTPError`` and friends), propagated unchanged

HTTP error statuses are never raised by the client. They come back as
``Failure`` results; the ``APIError`` hierarchy below is only used when a
caller opts in with ``Failure.unwrap()`` or ``raise_for_status()``.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from openapi_fetch_core.errors.models import ProblemDetail


class OpenAPIFetchError(Exception):
    """Base exception for everything raised by this library."""

    pass


class UnsupportedValueError(OpenAPIFetchError, TypeError):
    """A nested array or object was passed where only scalars are supported."""

    def __init__(self, message: str, name: str | None = None, value: Any = None):
        super().__init__(message)
        self.name = name
        self.value = value


class APIError(OpenAPIFetchError):
    """Base exception for API errors raised from a ``Failure`` result."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        problem_detail: "ProblemDetail | None" = None,
        error: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.problem_detail = problem_detail
        self.error = error


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
