"""
Endpoint client for wallets and wallet accounts.

Generated from the Turnkey public API OpenAPI document.
"""

from typing import Any, Dict, Union

from turnkey_types.activities import ActivityResponse
from turnkey_types.wallets import (
    CreateWalletAccountsRequest,
    CreateWalletRequest,
    DeleteWalletsRequest,
    ExportWalletAccountRequest,
    ExportWalletRequest,
    GetWalletAccountRequest,
    GetWalletAccountResponse,
    GetWalletAccountsRequest,
    GetWalletAccountsResponse,
    GetWalletRequest,
    GetWalletResponse,
    GetWalletsRequest,
    GetWalletsResponse,
    ImportWalletRequest,
    InitImportWalletRequest,
)

from turnkey_client.http import AsyncHTTPClient


class WalletsClient:
    """
    Client for wallet endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def get(
        self,
        data: Union[GetWalletRequest, Dict[str, Any]],
    ) -> GetWalletResponse:
        """Get wallet"""
        response = await self._http.post("/public/v1/query/get_wallet", json_data=data)
        return GetWalletResponse.model_validate(response.json())

    async def list(
        self,
        data: Union[GetWalletsRequest, Dict[str, Any], None] = None,
    ) -> GetWalletsResponse:
        """List wallets"""
        response = await self._http.post("/public/v1/query/list_wallets", json_data=data)
        return GetWalletsResponse.model_validate(response.json())

    async def get_account(
        self,
        data: Union[GetWalletAccountRequest, Dict[str, Any]],
    ) -> GetWalletAccountResponse:
        """Get wallet account"""
        response = await self._http.post("/public/v1/query/get_wallet_account", json_data=data)
        return GetWalletAccountResponse.model_validate(response.json())

    async def list_accounts(
        self,
        data: Union[GetWalletAccountsRequest, Dict[str, Any]],
    ) -> GetWalletAccountsResponse:
        """List wallet accounts"""
        response = await self._http.post("/public/v1/query/list_wallet_accounts", json_data=data)
        return GetWalletAccountsResponse.model_validate(response.json())

    async def create(
        self,
        data: Union[CreateWalletRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create wallet"""
        response = await self._http.post("/public/v1/submit/create_wallet", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def create_accounts(
        self,
        data: Union[CreateWalletAccountsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Create wallet accounts"""
        response = await self._http.post("/public/v1/submit/create_wallet_accounts", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def delete(
        self,
        data: Union[DeleteWalletsRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Delete wallets"""
        response = await self._http.post("/public/v1/submit/delete_wallets", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def export(
        self,
        data: Union[ExportWalletRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Export wallet"""
        response = await self._http.post("/public/v1/submit/export_wallet", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def export_account(
        self,
        data: Union[ExportWalletAccountRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Export wallet account"""
        response = await self._http.post("/public/v1/submit/export_wallet_account", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def import_(
        self,
        data: Union[ImportWalletRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Import wallet"""
        response = await self._http.post("/public/v1/submit/import_wallet", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def init_import(
        self,
        data: Union[InitImportWalletRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Init import wallet"""
        response = await self._http.post("/public/v1/submit/init_import_wallet", json_data=data)
        return ActivityResponse.model_validate(response.json())
