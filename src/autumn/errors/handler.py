"""Conversion between HTTP responses, Results and exceptions."""

import logging
from typing import Any

import httpx

from autumn.errors.exceptions import (
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
from autumn.errors.models import ErrorDetail, Result

logger = logging.getLogger(__name__)

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def _parse_json(response: httpx.Response) -> Any:
    """Parse the body as JSON, returning None for empty or non-JSON bodies."""
    try:
        return response.json()
    except ValueError:
        return None


def _parse_retry_after(response: httpx.Response) -> int | None:
    """Parse a delay-seconds Retry-After header, or None if missing or invalid."""
    retry_after = response.headers.get("retry-after")
    if not retry_after:
        return None

    try:
        delay = int(retry_after)
    except ValueError:
        return None

    # Protect against negative values
    return delay if delay >= 0 else None


def _request_label(response: httpx.Response) -> str:
    try:
        request = response.request
    except RuntimeError:
        # Response was built without a request (tests, custom transports)
        return "request"
    return f"{request.method} {request.url.path}"


def to_result(response: httpx.Response, *, logger: logging.Logger = logger) -> Result[Any]:
    """Normalize an HTTP response into a Result.

    Every response becomes a Result, whatever its status code. 2xx responses
    carry the parsed JSON body as ``data`` (None if it is not JSON); anything
    else carries an ErrorDetail.

    Args:
        response: HTTP response object
        logger: Logger receiving one error line per failure Result

    Returns:
        Success or failure Result
    """
    body = _parse_json(response)

    if response.is_success:
        return Result.success(body)

    error = ErrorDetail.from_body(
        response.status_code, body, response.text, retry_after=_parse_retry_after(response)
    )

    try:
        logger.error(f"[Autumn] {_request_label(response)} failed with {error.status_code}: {error.message}")
    except Exception:
        # A broken logger must never turn an API error into an exception
        pass

    return Result.failure(error)


def raise_for_error(result: Result[Any]) -> None:
    """Raise the exception matching a failure Result.

    Args:
        result: Result returned by an operation

    Raises:
        APIError subclass based on status code
    """
    error = result.error
    if error is None:
        return

    status_code = error.status_code

    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    kwargs: dict[str, Any] = {"status_code": status_code, "code": error.code, "result": result}

    if exc_class is RateLimitError:
        kwargs["retry_after"] = error.retry_after

    if exc_class is ValidationError and isinstance(error.body, dict):
        fields = error.body.get("error") if isinstance(error.body.get("error"), dict) else error.body
        # Use explicit key checking to handle empty collections properly
        if "errors" in fields:
            kwargs["validation_errors"] = fields.get("errors")
        else:
            kwargs["validation_errors"] = fields.get("validation_errors")

    raise exc_class(error.message, **kwargs)
