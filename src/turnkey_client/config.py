"""
Configuration settings for the Turnkey client.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Optional
import logging
import os

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from turnkey_client.exceptions import SignerConfigError
from turnkey_client.http import DEFAULT_BASE_URL

if TYPE_CHECKING:
    from turnkey_client.signer import TurnkeySigner

logger = logging.getLogger(__name__)


class TurnkeySettings(BaseSettings):
    """
    Configuration for the Turnkey API client.

    Settings are loaded from environment variables with TURNKEY_ prefix.
    Example: TURNKEY_API_PUBLIC_KEY, TURNKEY_ORGANIZATION_ID, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="TURNKEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Turnkey API
    api_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Turnkey API base URL"
    )

    # API key pair used to stamp requests
    api_public_key: Optional[str] = Field(
        default=None,
        description="Compressed P-256 API public key (hex)"
    )
    api_private_key: Optional[str] = Field(
        default=None,
        description="P-256 API private key (64 hex characters)"
    )

    organization_id: Optional[str] = Field(
        default=None,
        description="Default organization for requests that omit one"
    )

    # Signing key
    private_key_id: Optional[str] = Field(
        default=None,
        description="Private key or wallet account used by the signer"
    )
    public_key: Optional[str] = Field(
        default=None,
        description="Public key (address) of the signing key"
    )

    # HTTP client settings
    timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )
    max_retries: int = Field(
        default=3,
        description="Maximum number of attempts on connection failures"
    )

    # Activity polling
    activity_poll_interval: float = Field(
        default=1.0,
        description="Seconds between activity status polls"
    )
    activity_poll_timeout: float = Field(
        default=60.0,
        description="Seconds to wait for an activity to reach a terminal status"
    )


@lru_cache()
def get_turnkey_settings() -> TurnkeySettings:
    """Get cached Turnkey settings instance."""
    return TurnkeySettings()


class TurnkeySignerConfig(BaseModel):
    """
    Names of the environment variables a Turnkey signer reads its
    credentials from.
    """

    api_public_key_env: str = "TURNKEY_API_PUBLIC_KEY"
    api_private_key_env: str = "TURNKEY_API_PRIVATE_KEY"
    organization_id_env: str = "TURNKEY_ORGANIZATION_ID"
    private_key_id_env: str = "TURNKEY_PRIVATE_KEY_ID"
    public_key_env: str = "TURNKEY_PUBLIC_KEY"

    def validate_config(self, signer_name: str) -> None:
        """
        Check that every variable name is set.

        Raises:
            SignerConfigError: On the first empty name
        """
        for field_name in (
            "api_public_key_env",
            "api_private_key_env",
            "organization_id_env",
            "private_key_id_env",
            "public_key_env",
        ):
            if not getattr(self, field_name):
                raise SignerConfigError(
                    f"Turnkey signer '{signer_name}' must specify non-empty {field_name}"
                )

    def build_signer(self, signer_name: str, api_base_url: str = DEFAULT_BASE_URL) -> "TurnkeySigner":
        """
        Build a signer from the configured environment variables.

        Raises:
            SignerConfigError: If the config is invalid or a variable is unset
        """
        from turnkey_client.signer import TurnkeySigner

        self.validate_config(signer_name)
        signer = TurnkeySigner(
            api_public_key=_read_env(self.api_public_key_env, signer_name),
            api_private_key=_read_env(self.api_private_key_env, signer_name),
            organization_id=_read_env(self.organization_id_env, signer_name),
            private_key_id=_read_env(self.private_key_id_env, signer_name),
            public_key=_read_env(self.public_key_env, signer_name),
            api_base_url=api_base_url,
        )
        logger.debug(f"Built Turnkey signer '{signer_name}' for key {signer.private_key_id}")
        return signer


def _read_env(var_name: str, signer_name: str) -> str:
    value = os.environ.get(var_name)
    if not value:
        raise SignerConfigError(
            f"Environment variable '{var_name}' required by signer '{signer_name}' is not set"
        )
    return value
