"""
Organization-level DTOs: configuration, features, root quorum, sessions
and sub-organizations.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, PaginationOptions, QueryRequest, TurnkeyModel
from .users import RootUserParams
from .wallets import WalletAccountParams


class FeatureName(str, Enum):
    ROOT_USER_EMAIL_RECOVERY = "FEATURE_NAME_ROOT_USER_EMAIL_RECOVERY"
    WEBAUTHN_ORIGINS = "FEATURE_NAME_WEBAUTHN_ORIGINS"
    EMAIL_AUTH = "FEATURE_NAME_EMAIL_AUTH"
    EMAIL_RECOVERY = "FEATURE_NAME_EMAIL_RECOVERY"
    WEBHOOK = "FEATURE_NAME_WEBHOOK"
    SMS_AUTH = "FEATURE_NAME_SMS_AUTH"
    OTP_EMAIL_AUTH = "FEATURE_NAME_OTP_EMAIL_AUTH"


class Feature(TurnkeyModel):
    name: Optional[FeatureName] = None
    value: Optional[str] = None


class Quorum(TurnkeyModel):
    threshold: int
    user_ids: List[str] = Field(default_factory=list)


class Config(TurnkeyModel):
    features: List[Feature] = Field(default_factory=list)
    quorum: Optional[Quorum] = None


# Queries

class GetOrganizationConfigsRequest(QueryRequest):
    pass


class GetOrganizationConfigsResponse(TurnkeyModel):
    configs: Config


class GetWhoamiRequest(QueryRequest):
    pass


class GetWhoamiResponse(TurnkeyModel):
    organization_id: str
    organization_name: str
    user_id: str
    username: str


class GetSubOrgIdsRequest(QueryRequest):
    filter_type: Optional[str] = None
    filter_value: Optional[str] = None
    pagination_options: Optional[PaginationOptions] = None


class GetSubOrgIdsResponse(TurnkeyModel):
    organization_ids: List[str] = Field(default_factory=list)


# Features

class SetOrganizationFeatureIntent(TurnkeyModel):
    name: FeatureName
    value: Optional[str] = None


class SetOrganizationFeatureRequest(ActivityRequest):
    type: str = ActivityType.SET_ORGANIZATION_FEATURE.value
    parameters: SetOrganizationFeatureIntent


class SetOrganizationFeatureResult(TurnkeyModel):
    features: List[Feature] = Field(default_factory=list)


class RemoveOrganizationFeatureIntent(TurnkeyModel):
    name: FeatureName


class RemoveOrganizationFeatureRequest(ActivityRequest):
    type: str = ActivityType.REMOVE_ORGANIZATION_FEATURE.value
    parameters: RemoveOrganizationFeatureIntent


class RemoveOrganizationFeatureResult(TurnkeyModel):
    features: List[Feature] = Field(default_factory=list)


# Root quorum

class UpdateRootQuorumIntent(TurnkeyModel):
    threshold: int
    user_ids: List[str]


class UpdateRootQuorumRequest(ActivityRequest):
    type: str = ActivityType.UPDATE_ROOT_QUORUM.value
    parameters: UpdateRootQuorumIntent


class UpdateRootQuorumResult(TurnkeyModel):
    pass


# Sessions

class CreateReadOnlySessionIntent(TurnkeyModel):
    pass


class CreateReadOnlySessionRequest(ActivityRequest):
    type: str = ActivityType.CREATE_READ_ONLY_SESSION.value
    parameters: CreateReadOnlySessionIntent = Field(default_factory=CreateReadOnlySessionIntent)


class CreateReadOnlySessionResult(TurnkeyModel):
    organization_id: str
    organization_name: str
    user_id: str
    username: str
    session: str
    session_expiry: str


class CreateReadWriteSessionIntentV2(TurnkeyModel):
    target_public_key: str
    user_id: Optional[str] = None
    api_key_name: Optional[str] = None
    expiration_seconds: Optional[str] = None
    invalidate_existing: Optional[bool] = None


class CreateReadWriteSessionRequest(ActivityRequest):
    type: str = ActivityType.CREATE_READ_WRITE_SESSION_V2.value
    parameters: CreateReadWriteSessionIntentV2


class CreateReadWriteSessionResultV2(TurnkeyModel):
    organization_id: str
    organization_name: str
    user_id: str
    username: str
    api_key_id: str
    credential_bundle: str


# Sub-organizations

class WalletParams(TurnkeyModel):
    wallet_name: str
    accounts: List[WalletAccountParams] = Field(default_factory=list)
    mnemonic_length: Optional[int] = None


class CreateSubOrganizationIntentV7(TurnkeyModel):
    sub_organization_name: str
    root_users: List[RootUserParams]
    root_quorum_threshold: int
    wallet: Optional[WalletParams] = None
    disable_email_recovery: Optional[bool] = None
    disable_email_auth: Optional[bool] = None
    disable_sms_auth: Optional[bool] = None
    disable_otp_email_auth: Optional[bool] = None


class CreateSubOrganizationRequest(ActivityRequest):
    type: str = ActivityType.CREATE_SUB_ORGANIZATION_V7.value
    parameters: CreateSubOrganizationIntentV7


class WalletResult(TurnkeyModel):
    wallet_id: str
    addresses: List[str] = Field(default_factory=list)


class CreateSubOrganizationResultV7(TurnkeyModel):
    sub_organization_id: str
    wallet: Optional[WalletResult] = None
    root_user_ids: List[str] = Field(default_factory=list)


class DeleteSubOrganizationIntent(TurnkeyModel):
    delete_without_export: Optional[bool] = None


class DeleteSubOrganizationRequest(ActivityRequest):
    type: str = ActivityType.DELETE_SUB_ORGANIZATION.value
    parameters: DeleteSubOrganizationIntent = Field(default_factory=DeleteSubOrganizationIntent)


class DeleteSubOrganizationResult(TurnkeyModel):
    sub_organization_uuid: str
