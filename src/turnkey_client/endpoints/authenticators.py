"""
Endpoint client for authenticators.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.authenticators import (
    CreateAuthenticatorsRequest,
    DeleteAuthenticatorsRequest,
    GetAuthenticatorRequest,
    GetAuthenticatorResponse,
    GetAuthenticatorsRequest,
    GetAuthenticatorsResponse,
)

from turnkey_client.http import AsyncHTTPClient


class AuthenticatorsClient:
    """
    Client for authenticator endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def get(
        self,
        data: Union[GetAuthenticatorRequest, Dict[str, Any]],
    ) -> GetAuthenticatorResponse:
        """Get authenticator"""
        response = await self._http.post("/public/v1/query/get_authenticator", json_data=data)
        return GetAuthenticatorResponse.model_validate(response.json())

    async def list(
        self,
        data: Union[GetAuthenticatorsRequest, Dict[str, Any]],
    ) -> GetAuthenticatorsResponse:
        """Get authenticators"""
        response = await self._http.post("/public/v1/query/get_authenticators", json_data=data)
        return GetAuthenticatorsResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreateAuthenticatorsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create authenticators"""
        response = await self._http.post("/public/v1/submit/create_authenticators", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteAuthenticatorsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete authenticators"""
        response = await self._http.post("/public/v1/submit/delete_authenticators", json_data=data)
        return ActivityResponse.model_validate(response.json())
