"""Error models for LINE Pay SDK.

Every failure the SDK raises derives from :class:`LinePayError`:

- ``LinePayConfigError``: invalid credentials, environment or timeout
- ``LinePayValidationError``: a request body failed a client-side invariant
- ``LinePayFormatError``: a malformed transaction id
- ``LinePayAPIError``: the remote API reported a failure
    - ``LinePayHTTPError``: non-2xx HTTP status
    - ``LinePayBusinessError``: HTTP 2xx with ``returnCode != "0000"``
        - ``LinePayParseError``: the body was not a usable JSON envelope
- ``LinePayTimeoutError``: the per-call deadline expired

Network failures (DNS, connection reset, ...) surface as the underlying
``httpx.RequestError`` and are never wrapped.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

SUCCESS_CODE = "0000"


class ErrorCode(str, Enum):
    """SDK-side error codes."""

    UNKNOWN_ERROR = "LINE_PAY_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORMAT_ERROR = "FORMAT_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    TIMEOUT_ERROR = "TIMEOUT_ERROR"


class ErrorCategory(str, Enum):
    """Category of a remote return code, by its leading digit."""

    AUTH = "auth"
    PAYMENT = "payment"
    INTERNAL = "internal"
    OTHER = "other"


class LinePayError(Exception):
    """Base exception for LINE Pay SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCode.UNKNOWN_ERROR.value
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "name": type(self).__name__,
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class LinePayConfigError(LinePayError):
    """Invalid client configuration."""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.CONFIG_ERROR.value)


class LinePayValidationError(LinePayError):
    """Client-side validation error."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, code=ErrorCode.VALIDATION_ERROR.value, details={"field": field})
        self.field = field


class LinePayFormatError(LinePayError):
    """Malformed transaction id."""

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid transactionId format: {value!r} (expected 19 digits)",
            code=ErrorCode.FORMAT_ERROR.value,
            details={"value": value},
        )
        self.value = value


class LinePayAPIError(LinePayError):
    """Failure reported by the LINE Pay API."""

    def __init__(
        self,
        return_code: str,
        return_message: str,
        http_status: int,
        raw_response: Optional[str] = None,
    ):
        super().__init__(
            f"LINE Pay API Error [{return_code}]: {return_message}",
            code=return_code,
            details={"http_status": http_status},
        )
        self.return_code = return_code
        self.return_message = return_message
        self.http_status = http_status
        self.raw_response = raw_response

    @property
    def is_auth_error(self) -> bool:
        """Return codes 1xxx: authentication, merchant or user state."""
        return self.return_code.startswith("1")

    @property
    def is_payment_error(self) -> bool:
        """Return codes 2xxx: payment or parameter errors."""
        return self.return_code.startswith("2")

    @property
    def is_internal_error(self) -> bool:
        """Return codes 9xxx: LINE Pay internal errors."""
        return self.return_code.startswith("9")

    @property
    def category(self) -> ErrorCategory:
        if self.is_auth_error:
            return ErrorCategory.AUTH
        if self.is_payment_error:
            return ErrorCategory.PAYMENT
        if self.is_internal_error:
            return ErrorCategory.INTERNAL
        return ErrorCategory.OTHER

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["error"].update(
            {
                "return_code": self.return_code,
                "return_message": self.return_message,
                "http_status": self.http_status,
                "raw_response": self.raw_response,
                "category": self.category.value,
            }
        )
        return data

    @classmethod
    def from_response(
        cls,
        http_status: int,
        reason_phrase: str,
        body: dict[str, Any],
        raw_response: Optional[str] = None,
    ) -> "LinePayAPIError":
        """Create the matching API error from a parsed envelope."""
        return_code = body.get("returnCode")
        return_message = body.get("returnMessage")
        if not 200 <= http_status < 300:
            return LinePayHTTPError(
                return_code=str(return_code) if return_code is not None else ErrorCode.HTTP_ERROR.value,
                return_message=str(return_message) if return_message is not None else reason_phrase,
                http_status=http_status,
                raw_response=raw_response,
            )
        return LinePayBusinessError(
            return_code=str(return_code) if return_code is not None else "",
            return_message=str(return_message) if return_message is not None else "",
            http_status=http_status,
            raw_response=raw_response,
        )


class LinePayHTTPError(LinePayAPIError):
    """The API answered with a non-2xx HTTP status."""


class LinePayBusinessError(LinePayAPIError):
    """HTTP succeeded but ``returnCode`` was not ``"0000"``."""


class LinePayParseError(LinePayBusinessError):
    """The response body could not be parsed as an envelope."""

    def __init__(self, http_status: int, raw_response: str):
        super().__init__(
            return_code=ErrorCode.PARSE_ERROR.value,
            return_message=f"Failed to parse response body (HTTP {http_status})",
            http_status=http_status,
            raw_response=raw_response,
        )


class LinePayTimeoutError(LinePayError):
    """Request exceeded the configured timeout."""

    def __init__(self, timeout: int, url: Optional[str] = None):
        super().__init__(
            f"Request timeout after {timeout}ms",
            code=ErrorCode.TIMEOUT_ERROR.value,
            details={"timeout": timeout, "url": url},
        )
        self.timeout = timeout
        self.url = url
