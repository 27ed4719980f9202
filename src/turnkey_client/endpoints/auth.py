"""
Endpoint client for end-user authentication flows.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.auth import (
    EmailAuthRequest,
    InitOtpAuthRequest,
    InitUserEmailRecoveryRequest,
    OauthRequest,
    OtpAuthRequest,
)

from turnkey_client.http import AsyncHTTPClient


class AuthClient:
    """
    Client for email, OTP and OAuth authentication endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def email_auth(
        self,
        data: Union[EmailAuthRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Perform email auth"""
        response = await self._http.post("/public/v1/submit/email_auth", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def oauth(
        self,
        data: Union[OauthRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Oauth"""
        response = await self._http.post("/public/v1/submit/oauth", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def init_otp_auth(
        self,
        data: Union[InitOtpAuthRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Init OTP auth"""
        response = await self._http.post("/public/v1/submit/init_otp_auth", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def otp_auth(
        self,
        data: Union[OtpAuthRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """OTP auth"""
        response = await self._http.post("/public/v1/submit/otp_auth", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def init_user_email_recovery(
        self,
        data: Union[InitUserEmailRecoveryRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Init email recovery"""
        response = await self._http.post("/public/v1/submit/init_user_email_recovery", json_data=data)
        return ActivityResponse.model_validate(response.json())
