"""Authenticator (WebAuthn / passkey) DTOs."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .api_keys import Credential
from .base import ActivityRequest, ActivityType, QueryRequest, Timestamp, TurnkeyModel


class AuthenticatorTransport(str, Enum):
    BLE = "AUTHENTICATOR_TRANSPORT_BLE"
    INTERNAL = "AUTHENTICATOR_TRANSPORT_INTERNAL"
    NFC = "AUTHENTICATOR_TRANSPORT_NFC"
    USB = "AUTHENTICATOR_TRANSPORT_USB"
    HYBRID = "AUTHENTICATOR_TRANSPORT_HYBRID"


class Attestation(TurnkeyModel):
    credential_id: str
    client_data_json: str
    attestation_object: str
    transports: List[AuthenticatorTransport]


class Authenticator(TurnkeyModel):
    transports: List[AuthenticatorTransport] = Field(default_factory=list)
    attestation_type: str
    aaguid: str
    credential_id: str
    model: str
    credential: Credential
    authenticator_id: str
    authenticator_name: str
    created_at: Timestamp
    updated_at: Timestamp


class AuthenticatorParamsV2(TurnkeyModel):
    authenticator_name: str
    challenge: str
    attestation: Attestation


class GetAuthenticatorRequest(QueryRequest):
    authenticator_id: str


class GetAuthenticatorResponse(TurnkeyModel):
    authenticator: Authenticator


class GetAuthenticatorsRequest(QueryRequest):
    user_id: str


class GetAuthenticatorsResponse(TurnkeyModel):
    authenticators: List[Authenticator] = Field(default_factory=list)


class CreateAuthenticatorsIntentV2(TurnkeyModel):
    authenticators: List[AuthenticatorParamsV2]
    user_id: str


class CreateAuthenticatorsRequest(ActivityRequest):
    type: str = ActivityType.CREATE_AUTHENTICATORS_V2.value
    parameters: CreateAuthenticatorsIntentV2


class CreateAuthenticatorsResult(TurnkeyModel):
    authenticator_ids: List[str]


class DeleteAuthenticatorsIntent(TurnkeyModel):
    user_id: str
    authenticator_ids: List[str]


class DeleteAuthenticatorsRequest(ActivityRequest):
    type: str = ActivityType.DELETE_AUTHENTICATORS.value
    parameters: DeleteAuthenticatorsIntent


class DeleteAuthenticatorsResult(TurnkeyModel):
    authenticator_ids: List[str]


class RecoverUserIntent(TurnkeyModel):
    authenticator: AuthenticatorParamsV2
    user_id: str


class RecoverUserRequest(ActivityRequest):
    type: str = ActivityType.RECOVER_USER.value
    parameters: RecoverUserIntent


class RecoverUserResult(TurnkeyModel):
    authenticator_id: List[str]
