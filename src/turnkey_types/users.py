from typing import List, Optional

from pydantic import Field

from .api_keys import ApiKey, ApiKeyParamsV2
from .authenticators import Authenticator, AuthenticatorParamsV2
from .base import ActivityRequest, ActivityType, QueryRequest, Timestamp, TurnkeyModel
from .oauth import OauthProvider, OauthProviderParams


class User(TurnkeyModel):
    user_id: str
    user_name: str
    user_email: Optional[str] = None
    user_phone_number: Optional[str] = None
    authenticators: List[Authenticator] = Field(default_factory=list)
    api_keys: List[ApiKey] = Field(default_factory=list)
    user_tags: List[str] = Field(default_factory=list)
    oauth_providers: List[OauthProvider] = Field(default_factory=list)
    created_at: Timestamp
    updated_at: Timestamp


class UserParamsV2(TurnkeyModel):
    user_name: str
    user_email: Optional[str] = None
    api_keys: List[ApiKeyParamsV2] = Field(default_factory=list)
    authenticators: List[AuthenticatorParamsV2] = Field(default_factory=list)
    user_tags: List[str] = Field(default_factory=list)


class GetUserRequest(QueryRequest):
    user_id: str


class GetUserResponse(TurnkeyModel):
    user: User


class GetUsersRequest(QueryRequest):
    pass


class GetUsersResponse(TurnkeyModel):
    users: List[User] = Field(default_factory=list)


class CreateUsersIntentV2(TurnkeyModel):
    users: List[UserParamsV2]


class CreateUsersRequest(ActivityRequest):
    type: str = ActivityType.CREATE_USERS_V2.value
    parameters: CreateUsersIntentV2


class CreateUsersResult(TurnkeyModel):
    user_ids: List[str]


class UpdateUserIntent(TurnkeyModel):
    user_id: str
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    user_tag_ids: Optional[List[str]] = None
    user_phone_number: Optional[str] = None


class UpdateUserRequest(ActivityRequest):
    type: str = ActivityType.UPDATE_USER.value
    parameters: UpdateUserIntent


class UpdateUserResult(TurnkeyModel):
    user_id: str


class DeleteUsersIntent(TurnkeyModel):
    user_ids: List[str]


class DeleteUsersRequest(ActivityRequest):
    type: str = ActivityType.DELETE_USERS.value
    parameters: DeleteUsersIntent


class DeleteUsersResult(TurnkeyModel):
    user_ids: List[str]


class RootUserParams(TurnkeyModel):
    """Root user of a new sub-organization."""
    user_name: str
    user_email: Optional[str] = None
    user_phone_number: Optional[str] = None
    api_keys: List[ApiKeyParamsV2] = Field(default_factory=list)
    authenticators: List[AuthenticatorParamsV2] = Field(default_factory=list)
    oauth_providers: List[OauthProviderParams] = Field(default_factory=list)
