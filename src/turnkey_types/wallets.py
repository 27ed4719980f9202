"""
Wallet DTOs.

A wallet is an HD seed held by Turnkey; wallet accounts are addresses
derived from it along a BIP32 path.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, PaginationOptions, QueryRequest, Timestamp, TurnkeyModel


class Curve(str, Enum):
    SECP256K1 = "CURVE_SECP256K1"
    ED25519 = "CURVE_ED25519"


class PathFormat(str, Enum):
    BIP32 = "PATH_FORMAT_BIP32"


class AddressFormat(str, Enum):
    UNCOMPRESSED = "ADDRESS_FORMAT_UNCOMPRESSED"
    COMPRESSED = "ADDRESS_FORMAT_COMPRESSED"
    ETHEREUM = "ADDRESS_FORMAT_ETHEREUM"
    SOLANA = "ADDRESS_FORMAT_SOLANA"
    COSMOS = "ADDRESS_FORMAT_COSMOS"
    TRON = "ADDRESS_FORMAT_TRON"
    SUI = "ADDRESS_FORMAT_SUI"
    APTOS = "ADDRESS_FORMAT_APTOS"
    BITCOIN_MAINNET_P2PKH = "ADDRESS_FORMAT_BITCOIN_MAINNET_P2PKH"
    BITCOIN_MAINNET_P2SH = "ADDRESS_FORMAT_BITCOIN_MAINNET_P2SH"
    BITCOIN_MAINNET_P2WPKH = "ADDRESS_FORMAT_BITCOIN_MAINNET_P2WPKH"
    BITCOIN_MAINNET_P2WSH = "ADDRESS_FORMAT_BITCOIN_MAINNET_P2WSH"
    BITCOIN_MAINNET_P2TR = "ADDRESS_FORMAT_BITCOIN_MAINNET_P2TR"
    BITCOIN_TESTNET_P2PKH = "ADDRESS_FORMAT_BITCOIN_TESTNET_P2PKH"
    BITCOIN_TESTNET_P2WPKH = "ADDRESS_FORMAT_BITCOIN_TESTNET_P2WPKH"
    BITCOIN_TESTNET_P2TR = "ADDRESS_FORMAT_BITCOIN_TESTNET_P2TR"
    SEI = "ADDRESS_FORMAT_SEI"
    XLM = "ADDRESS_FORMAT_XLM"
    DOGE_MAINNET = "ADDRESS_FORMAT_DOGE_MAINNET"
    TON_V4R2 = "ADDRESS_FORMAT_TON_V4R2"
    XRP = "ADDRESS_FORMAT_XRP"


class MnemonicLanguage(str, Enum):
    ENGLISH = "MNEMONIC_LANGUAGE_ENGLISH"
    SIMPLIFIED_CHINESE = "MNEMONIC_LANGUAGE_SIMPLIFIED_CHINESE"
    TRADITIONAL_CHINESE = "MNEMONIC_LANGUAGE_TRADITIONAL_CHINESE"
    CZECH = "MNEMONIC_LANGUAGE_CZECH"
    FRENCH = "MNEMONIC_LANGUAGE_FRENCH"
    ITALIAN = "MNEMONIC_LANGUAGE_ITALIAN"
    JAPANESE = "MNEMONIC_LANGUAGE_JAPANESE"
    KOREAN = "MNEMONIC_LANGUAGE_KOREAN"
    SPANISH = "MNEMONIC_LANGUAGE_SPANISH"


class Wallet(TurnkeyModel):
    wallet_id: str
    wallet_name: str
    created_at: Timestamp
    updated_at: Timestamp
    exported: bool = False
    imported: bool = False


class WalletAccount(TurnkeyModel):
    wallet_account_id: Optional[str] = None
    organization_id: str
    wallet_id: str
    curve: Curve
    path_format: PathFormat
    path: str
    address_format: AddressFormat
    address: str
    created_at: Timestamp
    updated_at: Timestamp
    public_key: Optional[str] = None


class WalletAccountParams(TurnkeyModel):
    """Derivation parameters for one account, e.g. ``m/44'/501'/0'/0'`` on ed25519."""
    curve: Curve
    path_format: PathFormat = PathFormat.BIP32
    path: str
    address_format: AddressFormat


# Queries

class GetWalletRequest(QueryRequest):
    wallet_id: str


class GetWalletResponse(TurnkeyModel):
    wallet: Wallet


class GetWalletsRequest(QueryRequest):
    pass


class GetWalletsResponse(TurnkeyModel):
    wallets: List[Wallet] = Field(default_factory=list)


class GetWalletAccountRequest(QueryRequest):
    wallet_id: str
    address: Optional[str] = None
    path: Optional[str] = None


class GetWalletAccountResponse(TurnkeyModel):
    account: WalletAccount


class GetWalletAccountsRequest(QueryRequest):
    wallet_id: str
    pagination_options: Optional[PaginationOptions] = None


class GetWalletAccountsResponse(TurnkeyModel):
    accounts: List[WalletAccount] = Field(default_factory=list)


# Activities

class CreateWalletIntent(TurnkeyModel):
    wallet_name: str
    accounts: List[WalletAccountParams] = Field(default_factory=list)
    mnemonic_length: Optional[int] = None


class CreateWalletRequest(ActivityRequest):
    type: str = ActivityType.CREATE_WALLET.value
    parameters: CreateWalletIntent


class CreateWalletResult(TurnkeyModel):
    wallet_id: str
    addresses: List[str] = Field(default_factory=list)


class CreateWalletAccountsIntent(TurnkeyModel):
    wallet_id: str
    accounts: List[WalletAccountParams]


class CreateWalletAccountsRequest(ActivityRequest):
    type: str = ActivityType.CREATE_WALLET_ACCOUNTS.value
    parameters: CreateWalletAccountsIntent


class CreateWalletAccountsResult(TurnkeyModel):
    addresses: List[str]


class DeleteWalletsIntent(TurnkeyModel):
    wallet_ids: List[str]
    delete_without_export: Optional[bool] = None


class DeleteWalletsRequest(ActivityRequest):
    type: str = ActivityType.DELETE_WALLETS.value
    parameters: DeleteWalletsIntent


class DeleteWalletsResult(TurnkeyModel):
    wallet_ids: List[str]


class ExportWalletIntent(TurnkeyModel):
    wallet_id: str
    target_public_key: str
    language: Optional[MnemonicLanguage] = None


class ExportWalletRequest(ActivityRequest):
    type: str = ActivityType.EXPORT_WALLET.value
    parameters: ExportWalletIntent


class ExportWalletResult(TurnkeyModel):
    wallet_id: str
    export_bundle: str


class ExportWalletAccountIntent(TurnkeyModel):
    address: str
    target_public_key: str


class ExportWalletAccountRequest(ActivityRequest):
    type: str = ActivityType.EXPORT_WALLET_ACCOUNT.value
    parameters: ExportWalletAccountIntent


class ExportWalletAccountResult(TurnkeyModel):
    address: str
    export_bundle: str


class InitImportWalletIntent(TurnkeyModel):
    user_id: str


class InitImportWalletRequest(ActivityRequest):
    type: str = ActivityType.INIT_IMPORT_WALLET.value
    parameters: InitImportWalletIntent


class InitImportWalletResult(TurnkeyModel):
    import_bundle: str


class ImportWalletIntent(TurnkeyModel):
    user_id: str
    wallet_name: str
    encrypted_bundle: str
    accounts: List[WalletAccountParams] = Field(default_factory=list)


class ImportWalletRequest(ActivityRequest):
    type: str = ActivityType.IMPORT_WALLET.value
    parameters: ImportWalletIntent


class ImportWalletResult(TurnkeyModel):
    wallet_id: str
    addresses: List[str] = Field(default_factory=list)
