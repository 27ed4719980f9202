"""
API key DTOs.

API keys are P-256 key pairs registered on a user; their private half
stamps requests (see ``turnkey_client.stamper``).
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, QueryRequest, Timestamp, TurnkeyModel


class CredentialType(str, Enum):
    """Kind of credential backing an API key or authenticator."""
    WEBAUTHN_AUTHENTICATOR = "CREDENTIAL_TYPE_WEBAUTHN_AUTHENTICATOR"
    API_KEY_P256 = "CREDENTIAL_TYPE_API_KEY_P256"
    RECOVER_USER_KEY_P256 = "CREDENTIAL_TYPE_RECOVER_USER_KEY_P256"
    API_KEY_SECP256K1 = "CREDENTIAL_TYPE_API_KEY_SECP256K1"
    EMAIL_AUTH_KEY_P256 = "CREDENTIAL_TYPE_EMAIL_AUTH_KEY_P256"
    API_KEY_ED25519 = "CREDENTIAL_TYPE_API_KEY_ED25519"
    OTP_AUTH_KEY_P256 = "CREDENTIAL_TYPE_OTP_AUTH_KEY_P256"
    READ_WRITE_SESSION_KEY_P256 = "CREDENTIAL_TYPE_READ_WRITE_SESSION_KEY_P256"
    OAUTH_KEY_P256 = "CREDENTIAL_TYPE_OAUTH_KEY_P256"


class ApiKeyCurve(str, Enum):
    P256 = "API_KEY_CURVE_P256"
    SECP256K1 = "API_KEY_CURVE_SECP256K1"
    ED25519 = "API_KEY_CURVE_ED25519"


class Credential(TurnkeyModel):
    public_key: str
    type: CredentialType


class ApiKey(TurnkeyModel):
    credential: Credential
    api_key_id: str
    api_key_name: str
    created_at: Timestamp
    updated_at: Timestamp
    expiration_seconds: Optional[str] = None


class ApiKeyParamsV2(TurnkeyModel):
    api_key_name: str
    public_key: str
    curve_type: ApiKeyCurve = ApiKeyCurve.P256
    expiration_seconds: Optional[str] = None


# Queries

class GetApiKeyRequest(QueryRequest):
    api_key_id: str


class GetApiKeyResponse(TurnkeyModel):
    api_key: ApiKey


class GetApiKeysRequest(QueryRequest):
    user_id: Optional[str] = None


class GetApiKeysResponse(TurnkeyModel):
    api_keys: List[ApiKey] = Field(default_factory=list)


# Activities

class CreateApiKeysIntentV2(TurnkeyModel):
    api_keys: List[ApiKeyParamsV2]
    user_id: str


class CreateApiKeysRequest(ActivityRequest):
    type: str = ActivityType.CREATE_API_KEYS_V2.value
    parameters: CreateApiKeysIntentV2


class CreateApiKeysResult(TurnkeyModel):
    api_key_ids: List[str]


class DeleteApiKeysIntent(TurnkeyModel):
    user_id: str
    api_key_ids: List[str]


class DeleteApiKeysRequest(ActivityRequest):
    type: str = ActivityType.DELETE_API_KEYS.value
    parameters: DeleteApiKeysIntent


class DeleteApiKeysResult(TurnkeyModel):
    api_key_ids: List[str]
