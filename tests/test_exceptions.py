"""Tests for exception classes."""

import pytest

from turnkey_client.exceptions import (
    ActivityError,
    ActivityFailedError,
    ActivityTimeoutError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ConsensusNeededError,
    InvalidHexError,
    InvalidPrivateKeyLengthError,
    InvalidResponseError,
    InvalidSignatureError,
    InvalidSignatureLengthError,
    MissingOrganizationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    SignerConfigError,
    SignerError,
    SigningKeyError,
    StampError,
    TimeoutError,
    TurnkeyClientError,
    UnexpectedResponseError,
    ValidationError,
    exception_from_response,
)


class TestTurnkeyClientError:
    """Tests for the base TurnkeyClientError class."""

    def test_basic_creation(self):
        """Test creating a basic exception."""
        error = TurnkeyClientError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.status_code is None
        assert error.error_code is None
        assert error.details == {}

    def test_with_status_and_error_code(self):
        """Test the full string form."""
        error = TurnkeyClientError("Denied", status_code=403, error_code="POLICY_DENY")
        assert str(error) == "[POLICY_DENY] Denied (HTTP 403)"

    def test_repr(self):
        """Test exception repr."""
        error = TurnkeyClientError("Error", status_code=400, error_code="VAL_001")
        repr_str = repr(error)
        assert "TurnkeyClientError" in repr_str
        assert "400" in repr_str
        assert "VAL_001" in repr_str


class TestHttpErrors:
    """Tests for non-200 response exceptions."""

    @pytest.mark.parametrize(
        "exception_class,status_code",
        [
            (ValidationError, 400),
            (AuthenticationError, 401),
            (AuthorizationError, 403),
            (NotFoundError, 404),
            (ConflictError, 409),
            (RateLimitError, 429),
            (ServerError, 500),
        ],
    )
    def test_default_status_codes(self, exception_class, status_code):
        """Test that each subclass carries its default status."""
        error = exception_class()
        assert error.status_code == status_code
        assert isinstance(error, UnexpectedResponseError)

    def test_unexpected_response_fields(self):
        """Test the fields kept from the response."""
        error = UnexpectedResponseError(
            "boom",
            status_code=418,
            body='{"message":"boom"}',
            grpc_code=2,
        )
        assert error.body == '{"message":"boom"}'
        assert error.grpc_code == 2

    def test_rate_limit_retry_after(self):
        """Test retry_after on RateLimitError."""
        assert RateLimitError(retry_after=30).retry_after == 30
        assert RateLimitError().retry_after is None


class TestExceptionFromResponse:
    """Tests for exception_from_response."""

    @pytest.mark.parametrize(
        "status_code,exception_class",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (409, ConflictError),
            (429, RateLimitError),
            (500, ServerError),
            (502, ServerError),
            (599, ServerError),
            (201, UnexpectedResponseError),
            (302, UnexpectedResponseError),
            (422, UnexpectedResponseError),
        ],
    )
    def test_mapping(self, status_code, exception_class):
        """Test the status code to exception mapping."""
        error = exception_from_response(status_code, "message")
        assert type(error) is exception_class
        assert error.status_code == status_code

    def test_carries_response_fields(self):
        """Test that body fields are passed through."""
        error = exception_from_response(
            400,
            "bad",
            error_code="INVALID_REQUEST",
            details={"details": []},
            body="raw",
            grpc_code=3,
        )
        assert error.error_code == "INVALID_REQUEST"
        assert error.body == "raw"
        assert error.grpc_code == 3

    def test_retry_after_only_for_rate_limit(self):
        """Test that retry_after is set on RateLimitError."""
        error = exception_from_response(429, "slow", retry_after=5)
        assert error.retry_after == 5


class TestLocalErrors:
    """Tests for errors raised before or after the HTTP exchange."""

    def test_signer_messages(self):
        """Test the fixed signer messages."""
        assert str(InvalidResponseError()) == "Invalid response"
        assert str(InvalidSignatureError()) == "Invalid signature"
        assert str(InvalidSignatureLengthError()) == "Invalid signature length"

    def test_signer_hierarchy(self):
        """Test that signer errors share a base."""
        for error in (
            InvalidResponseError(),
            InvalidSignatureError(),
            InvalidSignatureLengthError(),
            InvalidHexError(),
        ):
            assert isinstance(error, SignerError)
            assert isinstance(error, TurnkeyClientError)

    def test_stamp_hierarchy(self):
        """Test that key errors are stamp errors."""
        assert isinstance(InvalidPrivateKeyLengthError(), StampError)
        assert isinstance(SigningKeyError(), StampError)

    def test_timeout_is_network_error(self):
        """Test that timeouts are network errors."""
        assert isinstance(TimeoutError(), NetworkError)

    def test_missing_organization(self):
        """Test the missing organization message."""
        assert "organizationId" in str(MissingOrganizationError())

    def test_signer_config_error(self):
        """Test that signer config errors are client errors."""
        assert isinstance(SignerConfigError("bad"), TurnkeyClientError)

    def test_activity_errors(self):
        """Test activity error attributes."""
        error = ActivityFailedError("failed", activity_id="a-1", activity_status="ACTIVITY_STATUS_FAILED")
        assert error.activity_id == "a-1"
        assert error.details == {"activity_id": "a-1", "activity_status": "ACTIVITY_STATUS_FAILED"}
        for cls in (ActivityFailedError, ConsensusNeededError, ActivityTimeoutError):
            assert issubclass(cls, ActivityError)
