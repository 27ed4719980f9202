"""
Signing DTOs.

``sign_with`` accepts a private key id, a wallet account address or a
private key address.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from .base import ActivityRequest, ActivityType, TurnkeyModel


class PayloadEncoding(str, Enum):
    HEXADECIMAL = "PAYLOAD_ENCODING_HEXADECIMAL"
    TEXT_UTF8 = "PAYLOAD_ENCODING_TEXT_UTF8"
    EIP712 = "PAYLOAD_ENCODING_EIP712"


class HashFunction(str, Enum):
    NO_OP = "HASH_FUNCTION_NO_OP"
    SHA256 = "HASH_FUNCTION_SHA256"
    KECCAK256 = "HASH_FUNCTION_KECCAK256"
    NOT_APPLICABLE = "HASH_FUNCTION_NOT_APPLICABLE"


class TransactionType(str, Enum):
    ETHEREUM = "TRANSACTION_TYPE_ETHEREUM"
    SOLANA = "TRANSACTION_TYPE_SOLANA"
    TRON = "TRANSACTION_TYPE_TRON"


class SignRawPayloadIntentV2(TurnkeyModel):
    sign_with: str
    payload: str
    encoding: PayloadEncoding
    hash_function: HashFunction


class SignRawPayloadRequest(ActivityRequest):
    type: str = ActivityType.SIGN_RAW_PAYLOAD_V2.value
    parameters: SignRawPayloadIntentV2


class SignRawPayloadResult(TurnkeyModel):
    """
    ECDSA/EdDSA signature components as hex strings.

    Components are not zero-padded; ``v`` is empty for ed25519.
    """
    r: str
    s: str
    v: Optional[str] = None


class SignRawPayloadsIntent(TurnkeyModel):
    sign_with: str
    payloads: List[str]
    encoding: PayloadEncoding
    hash_function: HashFunction


class SignRawPayloadsRequest(ActivityRequest):
    type: str = ActivityType.SIGN_RAW_PAYLOADS.value
    parameters: SignRawPayloadsIntent


class SignRawPayloadsResult(TurnkeyModel):
    signatures: List[SignRawPayloadResult] = Field(default_factory=list)


class SignTransactionIntentV2(TurnkeyModel):
    sign_with: str
    unsigned_transaction: str
    type: TransactionType


class SignTransactionRequest(ActivityRequest):
    type: str = ActivityType.SIGN_TRANSACTION_V2.value
    parameters: SignTransactionIntentV2


class SignTransactionResult(TurnkeyModel):
    signed_transaction: str
