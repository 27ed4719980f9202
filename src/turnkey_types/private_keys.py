from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, QueryRequest, Timestamp, TurnkeyModel
from .wallets import AddressFormat, Curve


class Address(TurnkeyModel):
    format: Optional[AddressFormat] = None
    address: Optional[str] = None


class PrivateKey(TurnkeyModel):
    private_key_id: str
    public_key: str
    private_key_name: str
    curve: Curve
    addresses: List[Address] = Field(default_factory=list)
    private_key_tags: List[str] = Field(default_factory=list)
    created_at: Timestamp
    updated_at: Timestamp
    exported: bool = False
    imported: bool = False


class PrivateKeyParams(TurnkeyModel):
    private_key_name: str
    curve: Curve
    private_key_tags: List[str] = Field(default_factory=list)
    address_formats: List[AddressFormat] = Field(default_factory=list)


class PrivateKeyResult(TurnkeyModel):
    private_key_id: str
    addresses: List[Address] = Field(default_factory=list)


class GetPrivateKeyRequest(QueryRequest):
    private_key_id: str


class GetPrivateKeyResponse(TurnkeyModel):
    private_key: PrivateKey


class GetPrivateKeysRequest(QueryRequest):
    pass


class GetPrivateKeysResponse(TurnkeyModel):
    private_keys: List[PrivateKey] = Field(default_factory=list)


class CreatePrivateKeysIntentV2(TurnkeyModel):
    private_keys: List[PrivateKeyParams]


class CreatePrivateKeysRequest(ActivityRequest):
    type: str = ActivityType.CREATE_PRIVATE_KEYS_V2.value
    parameters: CreatePrivateKeysIntentV2


class CreatePrivateKeysResultV2(TurnkeyModel):
    private_keys: List[PrivateKeyResult]


class DeletePrivateKeysIntent(TurnkeyModel):
    private_key_ids: List[str]
    delete_without_export: Optional[bool] = None


class DeletePrivateKeysRequest(ActivityRequest):
    type: str = ActivityType.DELETE_PRIVATE_KEYS.value
    parameters: DeletePrivateKeysIntent


class DeletePrivateKeysResult(TurnkeyModel):
    private_key_ids: List[str]


class ExportPrivateKeyIntent(TurnkeyModel):
    private_key_id: str
    target_public_key: str


class ExportPrivateKeyRequest(ActivityRequest):
    type: str = ActivityType.EXPORT_PRIVATE_KEY.value
    parameters: ExportPrivateKeyIntent


class ExportPrivateKeyResult(TurnkeyModel):
    private_key_id: str
    export_bundle: str


class InitImportPrivateKeyIntent(TurnkeyModel):
    user_id: str


class InitImportPrivateKeyRequest(ActivityRequest):
    type: str = ActivityType.INIT_IMPORT_PRIVATE_KEY.value
    parameters: InitImportPrivateKeyIntent


class InitImportPrivateKeyResult(TurnkeyModel):
    import_bundle: str


class ImportPrivateKeyIntent(TurnkeyModel):
    user_id: str
    private_key_name: str
    encrypted_bundle: str
    curve: Curve
    address_formats: List[AddressFormat] = Field(default_factory=list)


class ImportPrivateKeyRequest(ActivityRequest):
    type: str = ActivityType.IMPORT_PRIVATE_KEY.value
    parameters: ImportPrivateKeyIntent


class ImportPrivateKeyResult(TurnkeyModel):
    private_key_id: str
    addresses: List[Address] = Field(default_factory=list)
