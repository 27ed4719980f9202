"""
Turnkey Client Library.

A type-safe async HTTP client for the Turnkey key-custody API.

Example usage:
    ```python
    from turnkey_client import TurnkeyClient
    from turnkey_types.wallets import CreateWalletIntent, CreateWalletRequest

    async with TurnkeyClient(
        organization_id="org-id",
        api_public_key="02...",
        api_private_key="...",
    ) as client:
        me = await client.whoami()

        # Queries return typed responses
        wallets = await client.wallets.list()

        # Submits return the activity, which can be polled
        submitted = await client.wallets.create(CreateWalletRequest(
            parameters=CreateWalletIntent(wallet_name="treasury", accounts=[]),
        ))
        activity = await client.activities.wait(submitted.activity)
    ```
"""

__version__ = "0.1.0"

# Main client
from turnkey_client.client import TurnkeyClient

# HTTP client components (for advanced usage)
from turnkey_client.http import DEFAULT_BASE_URL, AsyncHTTPClient

# Stamping
from turnkey_client.stamper import ApiKeyStamper, Stamper

# Signing
from turnkey_client.signer import TurnkeySigner

# Configuration
from turnkey_client.config import (
    TurnkeySettings,
    TurnkeySignerConfig,
    get_turnkey_settings,
)

# Exceptions
from turnkey_client.exceptions import (
    # Base exception
    TurnkeyClientError,
    # HTTP errors
    UnexpectedResponseError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    # Network errors
    NetworkError,
    TimeoutError,
    # Request preparation
    MissingOrganizationError,
    StampError,
    InvalidPrivateKeyLengthError,
    SigningKeyError,
    # Signer
    SignerError,
    InvalidResponseError,
    InvalidSignatureError,
    InvalidSignatureLengthError,
    InvalidHexError,
    SignerConfigError,
    # Activities
    ActivityError,
    ActivityFailedError,
    ConsensusNeededError,
    ActivityTimeoutError,
    # Utility
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "TurnkeyClient",
    # HTTP
    "DEFAULT_BASE_URL",
    "AsyncHTTPClient",
    # Stamping and signing
    "Stamper",
    "ApiKeyStamper",
    "TurnkeySigner",
    # Configuration
    "TurnkeySettings",
    "TurnkeySignerConfig",
    "get_turnkey_settings",
    # Exceptions
    "TurnkeyClientError",
    "UnexpectedResponseError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
    "TimeoutError",
    "MissingOrganizationError",
    "StampError",
    "InvalidPrivateKeyLengthError",
    "SigningKeyError",
    "SignerError",
    "InvalidResponseError",
    "InvalidSignatureError",
    "InvalidSignatureLengthError",
    "InvalidHexError",
    "SignerConfigError",
    "ActivityError",
    "ActivityFailedError",
    "ConsensusNeededError",
    "ActivityTimeoutError",
    "exception_from_response",
]
