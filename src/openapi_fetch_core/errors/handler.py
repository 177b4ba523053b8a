"""Opt-in conversion of ``Failure`` results into exceptions."""

import json
from typing import TYPE_CHECKING

from openapi_fetch_core.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from openapi_fetch_core.errors.models import ProblemDetail

if TYPE_CHECKING:
    from openapi_fetch_core.response import FetchResult

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> type[APIError]:
    """Map an HTTP status code to the matching ``APIError`` subclass."""
    if status_code in EXCEPTION_MAP:
        return EXCEPTION_MAP[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def _summarize(error: object) -> str:
    if isinstance(error, str):
        return error[:200]
    if not error:
        return ""
    try:
        return json.dumps(error)[:200]
    except (TypeError, ValueError):
        return repr(error)[:200]


def raise_for_status(result: "FetchResult") -> None:
    """Raise the matching ``APIError`` for a ``Failure`` result.

    Does nothing for ``Success``. The classified error body is attached as
    ``exc.error`` and parsed as RFC 7807 problem details when it looks like one.

    Args:
        result: Result returned by a client call

    Raises:
        APIError subclass based on status code
    """
    if result.ok:
        return

    response = result.response
    status_code = response.status_code
    problem_detail = ProblemDetail.from_payload(result.error, response.headers.get("content-type", ""))
    exc_class = exception_class_for(status_code)

    if problem_detail:
        message = problem_detail.to_exception_message()
    else:
        summary = _summarize(result.error)
        message = f"HTTP {status_code}: {summary}" if summary else f"HTTP {status_code}"

    kwargs = {
        "status_code": status_code,
        "response": response,
        "problem_detail": problem_detail,
        "error": result.error,
    }

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, **kwargs)

    if exc_class is ValidationError:
        validation_errors = None
        if problem_detail and problem_detail.extensions:
            # Explicit key check so an empty "errors" list is kept
            if "errors" in problem_detail.extensions:
                validation_errors = problem_detail.extensions.get("errors")
            else:
                validation_errors = problem_detail.extensions.get("validation_errors")
        raise ValidationError(message, validation_errors=validation_errors, **kwargs)

    raise exc_class(message, **kwargs)
