"""
Activity DTOs.

Every submit endpoint answers with an ``ActivityResponse``. The activity's
``result`` carries exactly one populated ``<name>Result`` field, matching
the activity type that was submitted.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from .api_keys import CreateApiKeysResult, DeleteApiKeysResult
from .auth import (
    EmailAuthResult,
    InitOtpAuthResult,
    InitUserEmailRecoveryResult,
    OauthResult,
    OtpAuthResult,
)
from .authenticators import CreateAuthenticatorsResult, DeleteAuthenticatorsResult, RecoverUserResult
from .base import ActivityRequest, ActivityType, PaginationOptions, QueryRequest, Timestamp, TurnkeyModel
from .invitations import CreateInvitationsResult, DeleteInvitationResult
from .oauth import CreateOauthProvidersResult, DeleteOauthProvidersResult
from .organizations import (
    CreateReadOnlySessionResult,
    CreateReadWriteSessionResultV2,
    CreateSubOrganizationResultV7,
    DeleteSubOrganizationResult,
    RemoveOrganizationFeatureResult,
    SetOrganizationFeatureResult,
    UpdateRootQuorumResult,
)
from .policies import CreatePoliciesResult, CreatePolicyResult, DeletePolicyResult, UpdatePolicyResult
from .private_keys import (
    CreatePrivateKeysResultV2,
    DeletePrivateKeysResult,
    ExportPrivateKeyResult,
    ImportPrivateKeyResult,
    InitImportPrivateKeyResult,
)
from .signing import SignRawPayloadResult, SignRawPayloadsResult, SignTransactionResult
from .tags import (
    CreatePrivateKeyTagResult,
    CreateUserTagResult,
    DeletePrivateKeyTagsResult,
    DeleteUserTagsResult,
    UpdatePrivateKeyTagResult,
    UpdateUserTagResult,
)
from .users import CreateUsersResult, DeleteUsersResult, UpdateUserResult
from .wallets import (
    CreateWalletAccountsResult,
    CreateWalletResult,
    DeleteWalletsResult,
    ExportWalletAccountResult,
    ExportWalletResult,
    ImportWalletResult,
    InitImportWalletResult,
)


class ActivityStatus(str, Enum):
    CREATED = "ACTIVITY_STATUS_CREATED"
    PENDING = "ACTIVITY_STATUS_PENDING"
    COMPLETED = "ACTIVITY_STATUS_COMPLETED"
    FAILED = "ACTIVITY_STATUS_FAILED"
    CONSENSUS_NEEDED = "ACTIVITY_STATUS_CONSENSUS_NEEDED"
    REJECTED = "ACTIVITY_STATUS_REJECTED"

    @property
    def is_terminal(self) -> bool:
        return self in (
            ActivityStatus.COMPLETED,
            ActivityStatus.FAILED,
            ActivityStatus.REJECTED,
            ActivityStatus.CONSENSUS_NEEDED,
        )


class VoteSelection(str, Enum):
    APPROVED = "VOTE_SELECTION_APPROVED"
    REJECTED = "VOTE_SELECTION_REJECTED"


class Vote(TurnkeyModel):
    id: str
    user_id: str
    user: Optional[Dict[str, Any]] = None
    activity_id: str
    selection: VoteSelection
    message: str
    public_key: str
    signature: str
    scheme: str
    created_at: Timestamp


class Status(TurnkeyModel):
    code: Optional[int] = None
    message: Optional[str] = None
    details: List[Any] = Field(default_factory=list)


class Result(TurnkeyModel):
    create_api_keys_result: Optional[CreateApiKeysResult] = None
    delete_api_keys_result: Optional[DeleteApiKeysResult] = None
    create_authenticators_result: Optional[CreateAuthenticatorsResult] = None
    delete_authenticators_result: Optional[DeleteAuthenticatorsResult] = None
    create_invitations_result: Optional[CreateInvitationsResult] = None
    delete_invitation_result: Optional[DeleteInvitationResult] = None
    create_oauth_providers_result: Optional[CreateOauthProvidersResult] = None
    delete_oauth_providers_result: Optional[DeleteOauthProvidersResult] = None
    create_policy_result: Optional[CreatePolicyResult] = None
    create_policies_result: Optional[CreatePoliciesResult] = None
    update_policy_result: Optional[UpdatePolicyResult] = None
    delete_policy_result: Optional[DeletePolicyResult] = None
    create_private_keys_result_v2: Optional[CreatePrivateKeysResultV2] = None
    delete_private_keys_result: Optional[DeletePrivateKeysResult] = None
    export_private_key_result: Optional[ExportPrivateKeyResult] = None
    import_private_key_result: Optional[ImportPrivateKeyResult] = None
    init_import_private_key_result: Optional[InitImportPrivateKeyResult] = None
    create_private_key_tag_result: Optional[CreatePrivateKeyTagResult] = None
    update_private_key_tag_result: Optional[UpdatePrivateKeyTagResult] = None
    delete_private_key_tags_result: Optional[DeletePrivateKeyTagsResult] = None
    create_users_result: Optional[CreateUsersResult] = None
    update_user_result: Optional[UpdateUserResult] = None
    delete_users_result: Optional[DeleteUsersResult] = None
    recover_user_result: Optional[RecoverUserResult] = None
    create_user_tag_result: Optional[CreateUserTagResult] = None
    update_user_tag_result: Optional[UpdateUserTagResult] = None
    delete_user_tags_result: Optional[DeleteUserTagsResult] = None
    create_wallet_result: Optional[CreateWalletResult] = None
    create_wallet_accounts_result: Optional[CreateWalletAccountsResult] = None
    delete_wallets_result: Optional[DeleteWalletsResult] = None
    export_wallet_result: Optional[ExportWalletResult] = None
    export_wallet_account_result: Optional[ExportWalletAccountResult] = None
    import_wallet_result: Optional[ImportWalletResult] = None
    init_import_wallet_result: Optional[InitImportWalletResult] = None
    sign_raw_payload_result: Optional[SignRawPayloadResult] = None
    sign_raw_payloads_result: Optional[SignRawPayloadsResult] = None
    sign_transaction_result: Optional[SignTransactionResult] = None
    set_organization_feature_result: Optional[SetOrganizationFeatureResult] = None
    remove_organization_feature_result: Optional[RemoveOrganizationFeatureResult] = None
    update_root_quorum_result: Optional[UpdateRootQuorumResult] = None
    create_read_only_session_result: Optional[CreateReadOnlySessionResult] = None
    create_read_write_session_result_v2: Optional[CreateReadWriteSessionResultV2] = None
    create_sub_organization_result_v7: Optional[CreateSubOrganizationResultV7] = None
    delete_sub_organization_result: Optional[DeleteSubOrganizationResult] = None
    email_auth_result: Optional[EmailAuthResult] = None
    oauth_result: Optional[OauthResult] = None
    init_otp_auth_result: Optional[InitOtpAuthResult] = None
    otp_auth_result: Optional[OtpAuthResult] = None
    init_user_email_recovery_result: Optional[InitUserEmailRecoveryResult] = None


class Activity(TurnkeyModel):
    id: str
    organization_id: str
    status: ActivityStatus
    type: str
    intent: Dict[str, Any] = Field(default_factory=dict)
    result: Optional[Result] = None
    votes: List[Vote] = Field(default_factory=list)
    fingerprint: str = ""
    can_approve: bool = False
    can_reject: bool = False
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None
    failure: Optional[Status] = None


class ActivityResponse(TurnkeyModel):
    activity: Activity


# Queries

class GetActivityRequest(QueryRequest):
    activity_id: str


class GetActivitiesRequest(QueryRequest):
    filter_by_status: Optional[List[ActivityStatus]] = None
    filter_by_type: Optional[List[str]] = None
    pagination_options: Optional[PaginationOptions] = None


class GetActivitiesResponse(TurnkeyModel):
    activities: List[Activity] = Field(default_factory=list)


# Votes

class ApproveActivityIntent(TurnkeyModel):
    fingerprint: str


class ApproveActivityRequest(ActivityRequest):
    type: str = ActivityType.APPROVE_ACTIVITY.value
    parameters: ApproveActivityIntent


class RejectActivityIntent(TurnkeyModel):
    fingerprint: str


class RejectActivityRequest(ActivityRequest):
    type: str = ActivityType.REJECT_ACTIVITY.value
    parameters: RejectActivityIntent
