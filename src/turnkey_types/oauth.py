"""OIDC provider DTOs."""

from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, QueryRequest, Timestamp, TurnkeyModel


class OauthProvider(TurnkeyModel):
    provider_id: str
    provider_name: str
    issuer: str
    audience: str
    subject: str
    created_at: Timestamp
    updated_at: Timestamp


class OauthProviderParams(TurnkeyModel):
    provider_name: str
    oidc_token: str


class GetOauthProvidersRequest(QueryRequest):
    user_id: Optional[str] = None


class GetOauthProvidersResponse(TurnkeyModel):
    oauth_providers: List[OauthProvider] = Field(default_factory=list)


class CreateOauthProvidersIntent(TurnkeyModel):
    user_id: str
    oauth_providers: List[OauthProviderParams]


class CreateOauthProvidersRequest(ActivityRequest):
    type: str = ActivityType.CREATE_OAUTH_PROVIDERS.value
    parameters: CreateOauthProvidersIntent


class CreateOauthProvidersResult(TurnkeyModel):
    provider_ids: List[str]


class DeleteOauthProvidersIntent(TurnkeyModel):
    user_id: str
    provider_ids: List[str]


class DeleteOauthProvidersRequest(ActivityRequest):
    type: str = ActivityType.DELETE_OAUTH_PROVIDERS.value
    parameters: DeleteOauthProvidersIntent


class DeleteOauthProvidersResult(TurnkeyModel):
    provider_ids: List[str]
