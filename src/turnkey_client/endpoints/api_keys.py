"""
Endpoint client for API keys.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.api_keys import (
    CreateApiKeysRequest,
    DeleteApiKeysRequest,
    GetApiKeyRequest,
    GetApiKeyResponse,
    GetApiKeysRequest,
    GetApiKeysResponse,
)

from turnkey_client.http import AsyncHTTPClient


class ApiKeysClient:
    """
    Client for API key endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def get(
        self,
        data: Union[GetApiKeyRequest, Dict[str, Any]],
    ) -> GetApiKeyResponse:
        """Get API key"""
        response = await self._http.post("/public/v1/query/get_api_key", json_data=data)
        return GetApiKeyResponse.model_validate(response.json())

    async def list(
        self,
        data: Union[GetApiKeysRequest, Dict[str, Any], None] = None,
    ) -> GetApiKeysResponse:
        """Get API keys"""
        response = await self._http.post("/public/v1/query/get_api_keys", json_data=data)
        return GetApiKeysResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreateApiKeysRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create API keys"""
        response = await self._http.post("/public/v1/submit/create_api_keys", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteApiKeysRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete API keys"""
        response = await self._http.post("/public/v1/submit/delete_api_keys", json_data=data)
        return ActivityResponse.model_validate(response.json())
