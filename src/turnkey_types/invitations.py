from enum import Enum
from typing import List

from .base import ActivityRequest, ActivityType, TurnkeyModel


class AccessType(str, Enum):
    WEB = "ACCESS_TYPE_WEB"
    API = "ACCESS_TYPE_API"
    ALL = "ACCESS_TYPE_ALL"


class InvitationParams(TurnkeyModel):
    receiver_user_name: str
    receiver_user_email: str
    receiver_user_tags: List[str]
    access_type: AccessType
    sender_user_id: str


class CreateInvitationsIntent(TurnkeyModel):
    invitations: List[InvitationParams]


class CreateInvitationsRequest(ActivityRequest):
    type: str = ActivityType.CREATE_INVITATIONS.value
    parameters: CreateInvitationsIntent


class CreateInvitationsResult(TurnkeyModel):
    invitation_ids: List[str]


class DeleteInvitationIntent(TurnkeyModel):
    invitation_id: str


class DeleteInvitationRequest(ActivityRequest):
    type: str = ActivityType.DELETE_INVITATION.value
    parameters: DeleteInvitationIntent


class DeleteInvitationResult(TurnkeyModel):
    invitation_id: str
