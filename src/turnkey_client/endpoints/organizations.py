"""
Endpoint client for organization settings and sessions.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.organizations import (
    CreateReadOnlySessionRequest,
    CreateReadWriteSessionRequest,
    GetOrganizationConfigsRequest,
    GetOrganizationConfigsResponse,
    GetWhoamiRequest,
    GetWhoamiResponse,
    RemoveOrganizationFeatureRequest,
    SetOrganizationFeatureRequest,
    UpdateRootQuorumRequest,
)

from turnkey_client.http import AsyncHTTPClient


class OrganizationsClient:
    """
    Client for organization endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def configs(
        self,
        data: Union[GetOrganizationConfigsRequest, Dict[str, Any], None] = None,
    ) -> GetOrganizationConfigsResponse:
        """Get configs"""
        response = await self._http.post("/public/v1/query/get_organization_configs", json_data=data)
        return GetOrganizationConfigsResponse.model_validate(response.json())

    async def whoami(
        self,
        data: Union[GetWhoamiRequest, Dict[str, Any], None] = None,
    ) -> GetWhoamiResponse:
        """Who am I?"""
        response = await self._http.post("/public/v1/query/whoami", json_data=data)
        return GetWhoamiResponse.model_validate(response.json())

    async def set_feature(
        self,
        data: Union[SetOrganizationFeatureRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Set organization feature"""
        response = await self._http.post("/public/v1/submit/set_organization_feature", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def remove_feature(
        self,
        data: Union[RemoveOrganizationFeatureRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Remove organization feature"""
        response = await self._http.post("/public/v1/submit/remove_organization_feature", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def update_root_quorum(
        self,
        data: Union[UpdateRootQuorumRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Update root quorum"""
        response = await self._http.post("/public/v1/submit/update_root_quorum", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def create_read_only_session(
        self,
        data: Union[CreateReadOnlySessionRequest, Dict[str, Any], None] = None,
    ) -> ActivityResponse:
        """Create read only session"""
        if data is None:
            data = CreateReadOnlySessionRequest()
        response = await self._http.post("/public/v1/submit/create_read_only_session", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def create_read_write_session(
        self,
        data: Union[CreateReadWriteSessionRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create read write session"""
        response = await self._http.post("/public/v1/submit/create_read_write_session", json_data=data)
        return ActivityResponse.model_validate(response.json())
