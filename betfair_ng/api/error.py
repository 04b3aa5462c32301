"""API error types and failure classification for the Betfair client."""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Layer at which a failure was detected."""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    PRECONDITION = "precondition"
    TRANSPORT = "transport"
    HTTP = "http"
    APPLICATION = "application"


class ApiError(Exception):
    """Base exception for API errors.

    ``message`` is the short text recorded as the client's ``last_error``.
    """

    kind = ErrorKind.APPLICATION

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ApiError):
    """Malformed construction parameters."""

    kind = ErrorKind.CONFIGURATION


class InvalidParameterError(ApiError):
    """Invalid or missing call parameter."""

    kind = ErrorKind.VALIDATION

    def __str__(self) -> str:
        return f"Invalid parameter: {self.message}"


class PreconditionError(ApiError):
    """Client state does not allow the call."""

    kind = ErrorKind.PRECONDITION


class NotLoggedInError(PreconditionError):
    """No active session token."""

    def __init__(self):
        super().__init__("Not logged in")


class MissingAppKeyError(PreconditionError):
    """No application key configured."""

    def __init__(self):
        super().__init__("No application key set")


class MissingCredentialsError(PreconditionError):
    """Client certificate or key file not configured."""


class HttpError(ApiError):
    """HTTP/network error."""

    kind = ErrorKind.TRANSPORT

    def __str__(self) -> str:
        return f"HTTP error: {self.message}"


class UnexpectedStatusError(ApiError):
    """Unexpected HTTP status code."""

    kind = ErrorKind.HTTP

    def __init__(self, status: int, status_line: str):
        self.status = status
        super().__init__(status_line)

    def __str__(self) -> str:
        return f"Unexpected status {self.status}: {self.message}"


class BadRequestError(ApiError):
    """HTTP 400 carrying an APINGException error code."""

    def __init__(self, error_code: str):
        self.error_code = error_code
        super().__init__(error_code)

    def __str__(self) -> str:
        return f"Bad request: {self.message}"


class ApplicationError(ApiError):
    """Structurally successful response whose status is not SUCCESS."""

    def __init__(self, status: str, error_code: Optional[str] = None):
        self.status = status
        self.error_code = error_code
        message = str(status) if status else "UNKNOWN"
        if error_code:
            message += f" : {error_code}"
        super().__init__(message)


class LoginFailedError(ApiError):
    """Identity service rejected the login, logout or keep-alive."""

    def __init__(self, message: Any):
        super().__init__(str(message) if message else "Unknown error")


class DeserializeError(ApiError):
    """JSON deserialization error."""

    def __str__(self) -> str:
        return f"Deserialization error: {self.message}"


def api_exception_code(body: Any) -> Optional[str]:
    """Pull ``detail.APINGException.errorCode`` out of a decoded 400 body."""
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if not isinstance(detail, dict):
        return None
    exception = detail.get("APINGException")
    if not isinstance(exception, dict):
        return None
    return exception.get("errorCode") or None


def classify_status(status: int, status_line: str, body: Any = None) -> ApiError:
    """Map a non-200 HTTP outcome to an ApiError.

    Only a 400 is inspected for an APINGException code; every other status
    is reported by its raw status line.
    """
    if status == 400:
        error_code = api_exception_code(body)
        if error_code:
            return BadRequestError(error_code)
    return UnexpectedStatusError(status, status_line)


def check_execution_report(result: Any) -> None:
    """Raise ApplicationError unless an execution report's status is SUCCESS."""
    if not isinstance(result, dict):
        return
    status = result.get("status")
    if status != "SUCCESS":
        raise ApplicationError(status, result.get("errorCode"))
