"""
Endpoint client for users.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.authenticators import RecoverUserRequest
from turnkey_types.users import (
    CreateUsersRequest,
    DeleteUsersRequest,
    GetUserRequest,
    GetUserResponse,
    GetUsersRequest,
    GetUsersResponse,
    UpdateUserRequest,
)

from turnkey_client.http import AsyncHTTPClient


class UsersClient:
    """
    Client for user endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def get(
        self,
        data: Union[GetUserRequest, Dict[str, Any]],
    ) -> GetUserResponse:
        """Get user"""
        response = await self._http.post("/public/v1/query/get_user", json_data=data)
        return GetUserResponse.model_validate(response.json())

    async def list(
        self,
        data: Union[GetUsersRequest, Dict[str, Any], None] = None,
    ) -> GetUsersResponse:
        """List users"""
        response = await self._http.post("/public/v1/query/list_users", json_data=data)
        return GetUsersResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreateUsersRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create users"""
        response = await self._http.post("/public/v1/submit/create_users", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def update(
        self,
        data: Union[UpdateUserRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Update user"""
        response = await self._http.post("/public/v1/submit/update_user", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteUsersRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete users"""
        response = await self._http.post("/public/v1/submit/delete_users", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def recover(
        self,
        data: Union[RecoverUserRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Recover a user"""
        response = await self._http.post("/public/v1/submit/recover_user", json_data=data)
        return ActivityResponse.model_validate(response.json())
