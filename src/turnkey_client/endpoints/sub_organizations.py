"""
Endpoint client for sub-organizations.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.organizations import (
    CreateSubOrganizationRequest,
    DeleteSubOrganizationRequest,
    GetSubOrgIdsRequest,
    GetSubOrgIdsResponse,
)

from turnkey_client.http import AsyncHTTPClient


class SubOrganizationsClient:
    """
    Client for sub-organization endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def list_ids(
        self,
        data: Union[GetSubOrgIdsRequest, Dict[str, Any], None] = None,
    ) -> GetSubOrgIdsResponse:
        """Get sub-organizations"""
        response = await self._http.post("/public/v1/query/list_suborgs", json_data=data)
        return GetSubOrgIdsResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreateSubOrganizationRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create sub-organization"""
        response = await self._http.post("/public/v1/submit/create_sub_organization", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteSubOrganizationRequest, Dict[str, Any], None] = None,
    ) -> ActivityResponse:
        """Delete sub-organization"""
        if data is None:
            data = DeleteSubOrganizationRequest()
        response = await self._http.post("/public/v1/submit/delete_sub_organization", json_data=data)
        return ActivityResponse.model_validate(response.json())
