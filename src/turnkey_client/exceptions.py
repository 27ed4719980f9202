"""
Exception hierarchy for the Turnkey client library.

Every non-200 HTTP response becomes an ``UnexpectedResponseError`` (or a
status-specific subclass of it) that keeps the status code, the Turnkey
error code and the raw response body. Local failures (stamping, signing,
activity polling, configuration) have their own branches.
"""

from typing import Any, Dict, Optional


class TurnkeyClientError(Exception):
    """
    Base exception for all Turnkey client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Turnkey error code (``turnkeyErrorCode`` in the error body)
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# HTTP Errors (any status other than 200)
# =============================================================================


class UnexpectedResponseError(TurnkeyClientError):
    """
    The API answered with a status other than 200.

    Attributes:
        body: Raw response text
        grpc_code: ``code`` field of the error body, if present
    """

    def __init__(
        self,
        message: str = "Unexpected response",
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        body: str = "",
        grpc_code: Optional[int] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )
        self.body = body
        self.grpc_code = grpc_code


class ValidationError(UnexpectedResponseError):
    """The API rejected the request body (400)."""

    def __init__(self, message: str = "Validation error", *, status_code: int = 400, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class AuthenticationError(UnexpectedResponseError):
    """
    The request stamp was missing or invalid (401).

    Raised when:
    - No stamper is configured
    - The API key is unknown to the organization
    - The stamp does not verify against the body
    """

    def __init__(self, message: str = "Authentication required", *, status_code: int = 401, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class AuthorizationError(UnexpectedResponseError):
    """The authenticated API key may not perform this request (403)."""

    def __init__(self, message: str = "Access denied", *, status_code: int = 403, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class NotFoundError(UnexpectedResponseError):
    """Requested resource or endpoint was not found (404)."""

    def __init__(self, message: str = "Resource not found", *, status_code: int = 404, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class ConflictError(UnexpectedResponseError):
    """Request conflicts with current state of the resource (409)."""

    def __init__(self, message: str = "Resource conflict", *, status_code: int = 409, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class RateLimitError(UnexpectedResponseError):
    """
    Rate limit exceeded (429).

    The retry_after attribute indicates how many seconds to wait, when the
    server sent a ``Retry-After`` header.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(message, status_code=status_code, **kwargs)
        self.retry_after = retry_after


class ServerError(UnexpectedResponseError):
    """Server-side error occurred (5xx)."""

    def __init__(self, message: str = "Server error", *, status_code: int = 500, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(TurnkeyClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    network-related issues.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Request Preparation Errors
# =============================================================================


class MissingOrganizationError(TurnkeyClientError):
    """Neither the request nor the client carries an organization id."""

    def __init__(self, message: str = "organizationId is required but no default organization is configured"):
        super().__init__(message)


class StampError(TurnkeyClientError):
    """The request body could not be stamped."""

    def __init__(self, message: str = "Invalid stamp"):
        super().__init__(message)


class InvalidPrivateKeyLengthError(StampError):
    """The API private key does not decode to exactly 32 bytes."""

    def __init__(self, message: str = "Invalid private key length"):
        super().__init__(message)


class SigningKeyError(StampError):
    """The API private key is not a valid P-256 scalar."""

    def __init__(self, message: str = "Signing key error"):
        super().__init__(message)


# =============================================================================
# Signer Errors
# =============================================================================


class SignerError(TurnkeyClientError):
    """Base class for errors raised by ``TurnkeySigner``."""


class InvalidResponseError(SignerError):
    """The activity response did not carry a usable signature."""

    def __init__(self, message: str = "Invalid response"):
        super().__init__(message)


class InvalidSignatureError(SignerError):
    """A signature component is longer than 32 bytes."""

    def __init__(self, message: str = "Invalid signature"):
        super().__init__(message)


class InvalidSignatureLengthError(SignerError):
    """The assembled signature is not 64 bytes."""

    def __init__(self, message: str = "Invalid signature length"):
        super().__init__(message)


class InvalidHexError(SignerError):
    """A signature component is not valid hex."""

    def __init__(self, message: str = "Invalid hex"):
        super().__init__(message)


class SignerConfigError(TurnkeyClientError):
    """Signer configuration is incomplete or points at unset variables."""


# =============================================================================
# Activity Errors
# =============================================================================


class ActivityError(TurnkeyClientError):
    """
    A submitted activity did not complete.

    Attributes:
        activity_id: Id of the activity
        activity_status: Last observed status string
    """

    def __init__(
        self,
        message: str,
        *,
        activity_id: Optional[str] = None,
        activity_status: Optional[str] = None,
    ):
        super().__init__(
            message,
            details={"activity_id": activity_id, "activity_status": activity_status},
        )
        self.activity_id = activity_id
        self.activity_status = activity_status


class ActivityFailedError(ActivityError):
    """The activity ended as FAILED or REJECTED."""


class ConsensusNeededError(ActivityError):
    """The activity is waiting for more approvals than this key can give."""


class ActivityTimeoutError(ActivityError):
    """The activity did not reach a terminal status in time."""


# =============================================================================
# Exception Mapping
# =============================================================================

# Map HTTP status codes to exception classes
STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def exception_from_response(
    status_code: int,
    message: str,
    *,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    body: str = "",
    grpc_code: Optional[int] = None,
    retry_after: Optional[int] = None,
) -> UnexpectedResponseError:
    """
    Create an appropriate exception from an HTTP response.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Turnkey error code
        details: Additional error details
        body: Raw response text
        grpc_code: gRPC status code from the error body
        retry_after: Seconds to wait, from the Retry-After header

    Returns:
        Appropriate UnexpectedResponseError subclass
    """
    if 500 <= status_code < 600:
        exception_class = ServerError
    else:
        exception_class = STATUS_CODE_EXCEPTIONS.get(status_code, UnexpectedResponseError)

    kwargs: Dict[str, Any] = {
        "status_code": status_code,
        "error_code": error_code,
        "details": details,
        "body": body,
        "grpc_code": grpc_code,
    }
    if exception_class is RateLimitError:
        kwargs["retry_after"] = retry_after
    return exception_class(message, **kwargs)
