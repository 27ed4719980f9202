"""
Endpoint client for private keys.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.private_keys import (
    CreatePrivateKeysRequest,
    DeletePrivateKeysRequest,
    ExportPrivateKeyRequest,
    GetPrivateKeyRequest,
    GetPrivateKeyResponse,
    GetPrivateKeysRequest,
    GetPrivateKeysResponse,
    ImportPrivateKeyRequest,
    InitImportPrivateKeyRequest,
)

from turnkey_client.http import AsyncHTTPClient


class PrivateKeysClient:
    """
    Client for private key endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def get(
        self,
        data: Union[GetPrivateKeyRequest, Dict[str, Any]],
    ) -> GetPrivateKeyResponse:
        """Get private key"""
        response = await self._http.post("/public/v1/query/get_private_key", json_data=data)
        return GetPrivateKeyResponse.model_validate(response.json())

    async def list(
        self,
        data: Union[GetPrivateKeysRequest, Dict[str, Any], None] = None,
    ) -> GetPrivateKeysResponse:
        """List private keys"""
        response = await self._http.post("/public/v1/query/list_private_keys", json_data=data)
        return GetPrivateKeysResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreatePrivateKeysRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create private keys"""
        response = await self._http.post("/public/v1/submit/create_private_keys", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeletePrivateKeysRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete private keys"""
        response = await self._http.post("/public/v1/submit/delete_private_keys", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def export(
        self,
        data: Union[ExportPrivateKeyRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Export private key"""
        response = await self._http.post("/public/v1/submit/export_private_key", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def import_(
        self,
        data: Union[ImportPrivateKeyRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Import private key"""
        response = await self._http.post("/public/v1/submit/import_private_key", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def init_import(
        self,
        data: Union[InitImportPrivateKeyRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Init import private key"""
        response = await self._http.post("/public/v1/submit/init_import_private_key", json_data=data)
        return ActivityResponse.model_validate(response.json())
