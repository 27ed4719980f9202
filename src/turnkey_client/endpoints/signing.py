"""
Endpoint client for signing.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.signing import (
    SignRawPayloadRequest,
    SignRawPayloadsRequest,
    SignTransactionRequest,
)

from turnkey_client.http import AsyncHTTPClient


class SigningClient:
    """
    Client for signing endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def sign_raw_payload(
        self,
        data: Union[SignRawPayloadRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Sign raw payload"""
        response = await self._http.post("/public/v1/submit/sign_raw_payload", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def sign_raw_payloads(
        self,
        data: Union[SignRawPayloadsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Sign raw payloads"""
        response = await self._http.post("/public/v1/submit/sign_raw_payloads", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def sign_transaction(
        self,
        data: Union[SignTransactionRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Sign transaction"""
        response = await self._http.post("/public/v1/submit/sign_transaction", json_data=data)
        return ActivityResponse.model_validate(response.json())
