"""Result models returned by every Autumn operation."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Fields carrying the human-readable message / machine code, in priority order.
# Autumn uses message/code; RFC 7807 detail/title/type are accepted as fallbacks.
MESSAGE_FIELDS = ("message", "detail", "title")
CODE_FIELDS = ("code", "type")


@dataclass(frozen=True)
class ErrorDetail:
    """Error payload of a failed call."""

    message: str
    code: str | int
    status_code: int
    retry_after: int | None = None
    # Parsed error body, kept for fields beyond message/code (validation errors...)
    body: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_body(
        cls, status_code: int, body: Any, text: str = "", retry_after: int | None = None
    ) -> "ErrorDetail":
        """Build an ErrorDetail from a parsed error body.

        Args:
            status_code: HTTP status of the response.
            body: Parsed JSON body, or None if the body was not JSON.
            text: Raw response text, used for the fallback message.
            retry_after: Seconds from the Retry-After header, if any.

        Returns:
            ErrorDetail with recognized fields, or placeholders derived from
            the status code.
        """
        fields = body if isinstance(body, dict) else {}
        if isinstance(fields.get("error"), dict):
            fields = fields["error"]

        message = next((fields[f] for f in MESSAGE_FIELDS if isinstance(fields.get(f), str) and fields[f]), None)
        code = next((fields[f] for f in CODE_FIELDS if isinstance(fields.get(f), (str, int)) and fields[f] != ""), None)

        if message is None:
            snippet = text[:200]
            message = f"HTTP {status_code}: {snippet}" if snippet else f"HTTP {status_code}"

        return cls(
            message=message,
            code=code if code is not None else status_code,
            status_code=status_code,
            retry_after=retry_after,
            body=body,
        )


@dataclass(frozen=True)
class Result(Generic[T]):
    """Discriminated outcome of one call: either ``data`` or ``error`` is set.

    Example:
        ```python
        result = await autumn.check(customer_id="cus_123", feature_id="messages")
        if result.error:
            print(result.error.message)
        else:
            print(result.data["allowed"])
        ```
    """

    data: T | None = None
    error: ErrorDetail | None = None

    @classmethod
    def success(cls, data: T | None) -> "Result[T]":
        return cls(data=data, error=None)

    @classmethod
    def failure(cls, error: ErrorDetail) -> "Result[T]":
        return cls(data=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Return ``data``, or raise the APIError matching the failure.

        Raises:
            APIError subclass based on the error's status code
        """
        from autumn.errors.handler import raise_for_error

        raise_for_error(self)
        return self.data
