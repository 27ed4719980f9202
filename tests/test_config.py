"""Tests for settings and signer configuration."""

import pytest

from turnkey_client.config import (
    TurnkeySettings,
    TurnkeySignerConfig,
    get_turnkey_settings,
)
from turnkey_client.exceptions import SignerConfigError
from turnkey_client.signer import TurnkeySigner


SIGNER_ENV = {
    "SIGNER_API_PUBLIC_KEY": "02abcdef",
    "SIGNER_API_PRIVATE_KEY": "0123456789abcdef" * 4,
    "SIGNER_ORG_ID": "org-123",
    "SIGNER_PRIVATE_KEY_ID": "pk-1",
    "SIGNER_PUBLIC_KEY": "So1anaPubkey",
}


@pytest.fixture
def signer_config():
    return TurnkeySignerConfig(
        api_public_key_env="SIGNER_API_PUBLIC_KEY",
        api_private_key_env="SIGNER_API_PRIVATE_KEY",
        organization_id_env="SIGNER_ORG_ID",
        private_key_id_env="SIGNER_PRIVATE_KEY_ID",
        public_key_env="SIGNER_PUBLIC_KEY",
    )


@pytest.fixture
def signer_env(monkeypatch):
    for name, value in SIGNER_ENV.items():
        monkeypatch.setenv(name, value)


class TestTurnkeySettings:
    """Tests for TurnkeySettings."""

    def test_defaults(self, monkeypatch):
        """Test default settings."""
        for name in ("TURNKEY_API_BASE_URL", "TURNKEY_ORGANIZATION_ID", "TURNKEY_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        settings = TurnkeySettings(_env_file=None)
        assert settings.api_base_url == "https://api.turnkey.com"
        assert settings.organization_id is None
        assert settings.timeout == 30.0
        assert settings.max_retries == 3
        assert settings.activity_poll_interval == 1.0
        assert settings.activity_poll_timeout == 60.0

    def test_environment_prefix(self, monkeypatch):
        """Test that TURNKEY_* variables are read."""
        monkeypatch.setenv("TURNKEY_API_PUBLIC_KEY", "02abcdef")
        monkeypatch.setenv("TURNKEY_ORGANIZATION_ID", "org-env")
        monkeypatch.setenv("TURNKEY_MAX_RETRIES", "5")

        settings = TurnkeySettings(_env_file=None)
        assert settings.api_public_key == "02abcdef"
        assert settings.organization_id == "org-env"
        assert settings.max_retries == 5

    def test_get_settings_is_cached(self):
        """Test that get_turnkey_settings returns one instance."""
        get_turnkey_settings.cache_clear()
        try:
            assert get_turnkey_settings() is get_turnkey_settings()
        finally:
            get_turnkey_settings.cache_clear()


class TestTurnkeySignerConfig:
    """Tests for TurnkeySignerConfig."""

    def test_default_variable_names(self):
        """Test the default environment variable names."""
        config = TurnkeySignerConfig()
        assert config.api_public_key_env == "TURNKEY_API_PUBLIC_KEY"
        assert config.private_key_id_env == "TURNKEY_PRIVATE_KEY_ID"

    def test_validate_config(self, signer_config):
        """Test that a complete config validates."""
        signer_config.validate_config("main")

    @pytest.mark.parametrize(
        "field_name",
        [
            "api_public_key_env",
            "api_private_key_env",
            "organization_id_env",
            "private_key_id_env",
            "public_key_env",
        ],
    )
    def test_empty_variable_name(self, signer_config, field_name):
        """Test that each empty variable name is reported."""
        setattr(signer_config, field_name, "")

        with pytest.raises(SignerConfigError) as exc_info:
            signer_config.validate_config("main")

        assert str(exc_info.value) == f"Turnkey signer 'main' must specify non-empty {field_name}"

    def test_build_signer(self, signer_config, signer_env):
        """Test building a signer from the environment."""
        signer = signer_config.build_signer("main")

        assert isinstance(signer, TurnkeySigner)
        assert signer.organization_id == "org-123"
        assert signer.private_key_id == "pk-1"
        assert signer.solana_pubkey == "So1anaPubkey"

    def test_build_signer_missing_variable(self, signer_config, signer_env, monkeypatch):
        """Test that an unset variable is reported."""
        monkeypatch.delenv("SIGNER_PRIVATE_KEY_ID")

        with pytest.raises(SignerConfigError) as exc_info:
            signer_config.build_signer("main")

        assert "SIGNER_PRIVATE_KEY_ID" in str(exc_info.value)
        assert "'main'" in str(exc_info.value)

    def test_build_signer_validates_first(self, signer_config, signer_env):
        """Test that build_signer rejects an incomplete config."""
        signer_config.public_key_env = ""
        with pytest.raises(SignerConfigError):
            signer_config.build_signer("main")
