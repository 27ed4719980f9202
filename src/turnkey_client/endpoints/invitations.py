"""
Endpoint client for invitations.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.invitations import (
    CreateInvitationsRequest,
    DeleteInvitationRequest,
)

from turnkey_client.http import AsyncHTTPClient


class InvitationsClient:
    """
    Client for invitation endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def create(
        self,
        data: Union[CreateInvitationsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create invitations"""
        response = await self._http.post("/public/v1/submit/create_invitations", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteInvitationRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete invitation"""
        response = await self._http.post("/public/v1/submit/delete_invitation", json_data=data)
        return ActivityResponse.model_validate(response.json())
