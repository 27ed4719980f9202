import time
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def current_timestamp_ms() -> str:
    """Current epoch time in milliseconds, as the decimal string the API expects."""
    return str(int(time.time() * 1000))


class TurnkeyModel(BaseModel):
    """
    Base for every Turnkey DTO.

    Python fields are snake_case; the wire format is camelCase.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Timestamp(TurnkeyModel):
    seconds: str
    nanos: str = "0"

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(
            int(self.seconds) + int(self.nanos) / 1_000_000_000,
            tz=timezone.utc,
        )


class PaginationOptions(TurnkeyModel):
    limit: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None


class QueryRequest(TurnkeyModel):
    """Body of a read-only query endpoint."""
    organization_id: Optional[str] = None


class ActivityRequest(TurnkeyModel):
    """
    Envelope of a submit endpoint.

    Subclasses pin ``type`` to their versioned activity type and narrow
    ``parameters`` to the matching intent model.
    """
    type: str
    timestamp_ms: str = Field(default_factory=current_timestamp_ms)
    organization_id: Optional[str] = None
    parameters: TurnkeyModel = Field(default_factory=TurnkeyModel)


class ActivityType(str, Enum):
    """Versioned activity type strings accepted in the ``type`` envelope field."""
    APPROVE_ACTIVITY = "ACTIVITY_TYPE_APPROVE_ACTIVITY"
    REJECT_ACTIVITY = "ACTIVITY_TYPE_REJECT_ACTIVITY"
    CREATE_API_KEYS_V2 = "ACTIVITY_TYPE_CREATE_API_KEYS_V2"
    DELETE_API_KEYS = "ACTIVITY_TYPE_DELETE_API_KEYS"
    CREATE_AUTHENTICATORS_V2 = "ACTIVITY_TYPE_CREATE_AUTHENTICATORS_V2"
    DELETE_AUTHENTICATORS = "ACTIVITY_TYPE_DELETE_AUTHENTICATORS"
    CREATE_INVITATIONS = "ACTIVITY_TYPE_CREATE_INVITATIONS"
    DELETE_INVITATION = "ACTIVITY_TYPE_DELETE_INVITATION"
    CREATE_OAUTH_PROVIDERS = "ACTIVITY_TYPE_CREATE_OAUTH_PROVIDERS"
    DELETE_OAUTH_PROVIDERS = "ACTIVITY_TYPE_DELETE_OAUTH_PROVIDERS"
    CREATE_POLICY_V3 = "ACTIVITY_TYPE_CREATE_POLICY_V3"
    CREATE_POLICIES = "ACTIVITY_TYPE_CREATE_POLICIES"
    UPDATE_POLICY = "ACTIVITY_TYPE_UPDATE_POLICY"
    DELETE_POLICY = "ACTIVITY_TYPE_DELETE_POLICY"
    CREATE_PRIVATE_KEYS_V2 = "ACTIVITY_TYPE_CREATE_PRIVATE_KEYS_V2"
    DELETE_PRIVATE_KEYS = "ACTIVITY_TYPE_DELETE_PRIVATE_KEYS"
    EXPORT_PRIVATE_KEY = "ACTIVITY_TYPE_EXPORT_PRIVATE_KEY"
    IMPORT_PRIVATE_KEY = "ACTIVITY_TYPE_IMPORT_PRIVATE_KEY"
    INIT_IMPORT_PRIVATE_KEY = "ACTIVITY_TYPE_INIT_IMPORT_PRIVATE_KEY"
    CREATE_PRIVATE_KEY_TAG = "ACTIVITY_TYPE_CREATE_PRIVATE_KEY_TAG"
    UPDATE_PRIVATE_KEY_TAG = "ACTIVITY_TYPE_UPDATE_PRIVATE_KEY_TAG"
    DELETE_PRIVATE_KEY_TAGS = "ACTIVITY_TYPE_DELETE_PRIVATE_KEY_TAGS"
    CREATE_USERS_V2 = "ACTIVITY_TYPE_CREATE_USERS_V2"
    UPDATE_USER = "ACTIVITY_TYPE_UPDATE_USER"
    DELETE_USERS = "ACTIVITY_TYPE_DELETE_USERS"
    RECOVER_USER = "ACTIVITY_TYPE_RECOVER_USER"
    CREATE_USER_TAG = "ACTIVITY_TYPE_CREATE_USER_TAG"
    UPDATE_USER_TAG = "ACTIVITY_TYPE_UPDATE_USER_TAG"
    DELETE_USER_TAGS = "ACTIVITY_TYPE_DELETE_USER_TAGS"
    CREATE_WALLET = "ACTIVITY_TYPE_CREATE_WALLET"
    CREATE_WALLET_ACCOUNTS = "ACTIVITY_TYPE_CREATE_WALLET_ACCOUNTS"
    DELETE_WALLETS = "ACTIVITY_TYPE_DELETE_WALLETS"
    EXPORT_WALLET = "ACTIVITY_TYPE_EXPORT_WALLET"
    EXPORT_WALLET_ACCOUNT = "ACTIVITY_TYPE_EXPORT_WALLET_ACCOUNT"
    IMPORT_WALLET = "ACTIVITY_TYPE_IMPORT_WALLET"
    INIT_IMPORT_WALLET = "ACTIVITY_TYPE_INIT_IMPORT_WALLET"
    SIGN_RAW_PAYLOAD_V2 = "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2"
    SIGN_RAW_PAYLOADS = "ACTIVITY_TYPE_SIGN_RAW_PAYLOADS"
    SIGN_TRANSACTION_V2 = "ACTIVITY_TYPE_SIGN_TRANSACTION_V2"
    SET_ORGANIZATION_FEATURE = "ACTIVITY_TYPE_SET_ORGANIZATION_FEATURE"
    REMOVE_ORGANIZATION_FEATURE = "ACTIVITY_TYPE_REMOVE_ORGANIZATION_FEATURE"
    UPDATE_ROOT_QUORUM = "ACTIVITY_TYPE_UPDATE_ROOT_QUORUM"
    CREATE_READ_ONLY_SESSION = "ACTIVITY_TYPE_CREATE_READ_ONLY_SESSION"
    CREATE_READ_WRITE_SESSION_V2 = "ACTIVITY_TYPE_CREATE_READ_WRITE_SESSION_V2"
    CREATE_SUB_ORGANIZATION_V7 = "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION_V7"
    DELETE_SUB_ORGANIZATION = "ACTIVITY_TYPE_DELETE_SUB_ORGANIZATION"
    EMAIL_AUTH_V2 = "ACTIVITY_TYPE_EMAIL_AUTH_V2"
    OAUTH = "ACTIVITY_TYPE_OAUTH"
    INIT_OTP_AUTH = "ACTIVITY_TYPE_INIT_OTP_AUTH"
    OTP_AUTH = "ACTIVITY_TYPE_OTP_AUTH"
    INIT_USER_EMAIL_RECOVERY = "ACTIVITY_TYPE_INIT_USER_EMAIL_RECOVERY"
