"""User and private key tag DTOs."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, QueryRequest, Timestamp, TurnkeyModel


class TagType(str, Enum):
    USER = "TAG_TYPE_USER"
    PRIVATE_KEY = "TAG_TYPE_PRIVATE_KEY"


class Tag(TurnkeyModel):
    tag_id: str
    tag_name: str
    tag_type: TagType
    created_at: Timestamp
    updated_at: Timestamp


# Private key tags

class ListPrivateKeyTagsRequest(QueryRequest):
    pass


class ListPrivateKeyTagsResponse(TurnkeyModel):
    private_key_tags: List[Tag] = Field(default_factory=list)


class CreatePrivateKeyTagIntent(TurnkeyModel):
    private_key_tag_name: str
    private_key_ids: List[str] = Field(default_factory=list)


class CreatePrivateKeyTagRequest(ActivityRequest):
    type: str = ActivityType.CREATE_PRIVATE_KEY_TAG.value
    parameters: CreatePrivateKeyTagIntent


class CreatePrivateKeyTagResult(TurnkeyModel):
    private_key_tag_id: str
    private_key_ids: List[str] = Field(default_factory=list)


class UpdatePrivateKeyTagIntent(TurnkeyModel):
    private_key_tag_id: str
    new_private_key_tag_name: Optional[str] = None
    add_private_key_ids: List[str] = Field(default_factory=list)
    remove_private_key_ids: List[str] = Field(default_factory=list)


class UpdatePrivateKeyTagRequest(ActivityRequest):
    type: str = ActivityType.UPDATE_PRIVATE_KEY_TAG.value
    parameters: UpdatePrivateKeyTagIntent


class UpdatePrivateKeyTagResult(TurnkeyModel):
    private_key_tag_id: str


class DeletePrivateKeyTagsIntent(TurnkeyModel):
    private_key_tag_ids: List[str]


class DeletePrivateKeyTagsRequest(ActivityRequest):
    type: str = ActivityType.DELETE_PRIVATE_KEY_TAGS.value
    parameters: DeletePrivateKeyTagsIntent


class DeletePrivateKeyTagsResult(TurnkeyModel):
    private_key_tag_ids: List[str]
    private_key_ids: List[str] = Field(default_factory=list)


# User tags

class ListUserTagsRequest(QueryRequest):
    pass


class ListUserTagsResponse(TurnkeyModel):
    user_tags: List[Tag] = Field(default_factory=list)


class CreateUserTagIntent(TurnkeyModel):
    user_tag_name: str
    user_ids: List[str] = Field(default_factory=list)


class CreateUserTagRequest(ActivityRequest):
    type: str = ActivityType.CREATE_USER_TAG.value
    parameters: CreateUserTagIntent


class CreateUserTagResult(TurnkeyModel):
    user_tag_id: str
    user_ids: List[str] = Field(default_factory=list)


class UpdateUserTagIntent(TurnkeyModel):
    user_tag_id: str
    new_user_tag_name: Optional[str] = None
    add_user_ids: List[str] = Field(default_factory=list)
    remove_user_ids: List[str] = Field(default_factory=list)


class UpdateUserTagRequest(ActivityRequest):
    type: str = ActivityType.UPDATE_USER_TAG.value
    parameters: UpdateUserTagIntent


class UpdateUserTagResult(TurnkeyModel):
    user_tag_id: str


class DeleteUserTagsIntent(TurnkeyModel):
    user_tag_ids: List[str]


class DeleteUserTagsRequest(ActivityRequest):
    type: str = ActivityType.DELETE_USER_TAGS.value
    parameters: DeleteUserTagsIntent


class DeleteUserTagsResult(TurnkeyModel):
    user_tag_ids: List[str]
    user_ids: List[str] = Field(default_factory=list)
