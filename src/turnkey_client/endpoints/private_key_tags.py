"""
Endpoint client for private key tags.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.tags import (
    CreatePrivateKeyTagRequest,
    DeletePrivateKeyTagsRequest,
    ListPrivateKeyTagsRequest,
    ListPrivateKeyTagsResponse,
    UpdatePrivateKeyTagRequest,
)

from turnkey_client.http import AsyncHTTPClient


class PrivateKeyTagsClient:
    """
    Client for private key tag endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def list(
        self,
        data: Union[ListPrivateKeyTagsRequest, Dict[str, Any], None] = None,
    ) -> ListPrivateKeyTagsResponse:
        """List private key tags"""
        response = await self._http.post("/public/v1/query/list_private_key_tags", json_data=data)
        return ListPrivateKeyTagsResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreatePrivateKeyTagRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create private key tag"""
        response = await self._http.post("/public/v1/submit/create_private_key_tag", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def update(
        self,
        data: Union[UpdatePrivateKeyTagRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Update private key tag"""
        response = await self._http.post("/public/v1/submit/update_private_key_tag", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeletePrivateKeyTagsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete private key tags"""
        response = await self._http.post("/public/v1/submit/delete_private_key_tags", json_data=data)
        return ActivityResponse.model_validate(response.json())
