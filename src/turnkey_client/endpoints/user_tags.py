"""
Endpoint client for user tags.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.tags import (
    CreateUserTagRequest,
    DeleteUserTagsRequest,
    ListUserTagsRequest,
    ListUserTagsResponse,
    UpdateUserTagRequest,
)

from turnkey_client.http import AsyncHTTPClient


class UserTagsClient:
    """
    Client for user tag endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def list(
        self,
        data: Union[ListUserTagsRequest, Dict[str, Any], None] = None,
    ) -> ListUserTagsResponse:
        """List user tags"""
        response = await self._http.post("/public/v1/query/list_user_tags", json_data=data)
        return ListUserTagsResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreateUserTagRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create user tag"""
        response = await self._http.post("/public/v1/submit/create_user_tag", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def update(
        self,
        data: Union[UpdateUserTagRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Update user tag"""
        response = await self._http.post("/public/v1/submit/update_user_tag", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteUserTagsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete user tags"""
        response = await self._http.post("/public/v1/submit/delete_user_tags", json_data=data)
        return ActivityResponse.model_validate(response.json())
