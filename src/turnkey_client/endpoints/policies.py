"""
Endpoint client for policies.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.policies import (
    CreatePoliciesRequest,
    CreatePolicyRequest,
    DeletePolicyRequest,
    GetPoliciesRequest,
    GetPoliciesResponse,
    GetPolicyRequest,
    GetPolicyResponse,
    UpdatePolicyRequest,
)

from turnkey_client.http import AsyncHTTPClient


class PoliciesClient:
    """
    Client for policy endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def get(
        self,
        data: Union[GetPolicyRequest, Dict[str, Any]],
    ) -> GetPolicyResponse:
        """Get policy"""
        response = await self._http.post("/public/v1/query/get_policy", json_data=data)
        return GetPolicyResponse.model_validate(response.json())

    async def list(
        self,
        data: Union[GetPoliciesRequest, Dict[str, Any], None] = None,
    ) -> GetPoliciesResponse:
        """List policies"""
        response = await self._http.post("/public/v1/query/list_policies", json_data=data)
        return GetPoliciesResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreatePolicyRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create policy"""
        response = await self._http.post("/public/v1/submit/create_policy", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def create_many(
        self,
        data: Union[CreatePoliciesRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create policies"""
        response = await self._http.post("/public/v1/submit/create_policies", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def update(
        self,
        data: Union[UpdatePolicyRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Update policy"""
        response = await self._http.post("/public/v1/submit/update_policy", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeletePolicyRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete policy"""
        response = await self._http.post("/public/v1/submit/delete_policy", json_data=data)
        return ActivityResponse.model_validate(response.json())
