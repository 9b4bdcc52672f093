"""Result normalization and error types for the Autumn client."""

from autumn.errors.exceptions import (
    APIError,
    AutumnError,
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
from autumn.errors.handler import raise_for_error, to_result
from autumn.errors.models import ErrorDetail, Result

__all__ = [
    "APIError",
    "AutumnError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorDetail",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "Result",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "raise_for_error",
    "to_result",
]
