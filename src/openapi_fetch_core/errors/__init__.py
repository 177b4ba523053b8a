"""Error taxonomy and RFC 7807 support."""

from openapi_fetch_core.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    OpenAPIFetchError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnsupportedValueError,
    ValidationError,
)
from openapi_fetch_core.errors.handler import exception_class_for, raise_for_status
from openapi_fetch_core.errors.models import ProblemDetail

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "OpenAPIFetchError",
    "ProblemDetail",
    "RateLimitError",
    "ServerError",
    "UnauthorizedError",
    "UnsupportedValueError",
    "ValidationError",
    "exception_class_for",
    "raise_for_status",
]
