"""
Endpoint client for OIDC providers.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.oauth import (
    CreateOauthProvidersRequest,
    DeleteOauthProvidersRequest,
    GetOauthProvidersRequest,
    GetOauthProvidersResponse,
)

from turnkey_client.http import AsyncHTTPClient


class OauthProvidersClient:
    """
    Client for OAuth provider endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def list(
        self,
        data: Union[GetOauthProvidersRequest, Dict[str, Any], None] = None,
    ) -> GetOauthProvidersResponse:
        """Get OAuth providers"""
        response = await self._http.post("/public/v1/query/get_oauth_providers", json_data=data)
        return GetOauthProvidersResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreateOauthProvidersRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create OAuth providers"""
        response = await self._http.post("/public/v1/submit/create_oauth_providers", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteOauthProvidersRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete OAuth providers"""
        response = await self._http.post("/public/v1/submit/delete_oauth_providers", json_data=data)
        return ActivityResponse.model_validate(response.json())
