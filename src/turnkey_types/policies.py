"""
Policy DTOs.

``condition`` and ``consensus`` are expressions in Turnkey's policy
language; they are evaluated server-side and carried here as opaque strings.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, QueryRequest, Timestamp, TurnkeyModel


class Effect(str, Enum):
    ALLOW = "EFFECT_ALLOW"
    DENY = "EFFECT_DENY"


class Policy(TurnkeyModel):
    policy_id: str
    policy_name: str
    effect: Effect
    created_at: Timestamp
    updated_at: Timestamp
    notes: str = ""
    consensus: Optional[str] = None
    condition: Optional[str] = None


class GetPolicyRequest(QueryRequest):
    policy_id: str


class GetPolicyResponse(TurnkeyModel):
    policy: Policy


class GetPoliciesRequest(QueryRequest):
    pass


class GetPoliciesResponse(TurnkeyModel):
    policies: List[Policy] = Field(default_factory=list)


class CreatePolicyIntentV3(TurnkeyModel):
    policy_name: str
    effect: Effect
    condition: Optional[str] = None
    consensus: Optional[str] = None
    notes: str = ""


class CreatePolicyRequest(ActivityRequest):
    type: str = ActivityType.CREATE_POLICY_V3.value
    parameters: CreatePolicyIntentV3


class CreatePolicyResult(TurnkeyModel):
    policy_id: str


class CreatePoliciesIntent(TurnkeyModel):
    policies: List[CreatePolicyIntentV3]


class CreatePoliciesRequest(ActivityRequest):
    type: str = ActivityType.CREATE_POLICIES.value
    parameters: CreatePoliciesIntent


class CreatePoliciesResult(TurnkeyModel):
    policy_ids: List[str]


class UpdatePolicyIntent(TurnkeyModel):
    policy_id: str
    policy_name: Optional[str] = None
    policy_effect: Optional[Effect] = None
    policy_condition: Optional[str] = None
    policy_consensus: Optional[str] = None
    policy_notes: Optional[str] = None


class UpdatePolicyRequest(ActivityRequest):
    type: str = ActivityType.UPDATE_POLICY.value
    parameters: UpdatePolicyIntent


class UpdatePolicyResult(TurnkeyModel):
    policy_id: str


class DeletePolicyIntent(TurnkeyModel):
    policy_id: str


class DeletePolicyRequest(ActivityRequest):
    type: str = ActivityType.DELETE_POLICY.value
    parameters: DeletePolicyIntent


class DeletePolicyResult(TurnkeyModel):
    policy_id: str
