"""Pytest configuration and fixtures for turnkey-client tests."""

import base64
import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import httpx
import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec


API_PRIVATE_KEY = "0123456789abcdef" * 4
ORGANIZATION_ID = "org-123"
BASE_URL = "https://api.turnkey.test"


# ============================================================================
# Key Material
# ============================================================================


def private_key_object(private_hex: str = API_PRIVATE_KEY) -> ec.EllipticCurvePrivateKey:
    return ec.derive_private_key(int(private_hex, 16), ec.SECP256R1())


def compressed_public_key(private_hex: str = API_PRIVATE_KEY) -> str:
    """Compressed SEC1 public key as hex, the form Turnkey shows for API keys."""
    public_key = private_key_object(private_hex).public_key()
    return public_key.public_bytes(
        serialization.Encoding.X962,
        serialization.PublicFormat.CompressedPoint,
    ).hex()


def decode_stamp(stamp: str) -> Dict[str, str]:
    """Decode an unpadded base64url X-Stamp value."""
    padded = stamp + "=" * (-len(stamp) % 4)
    return json.loads(base64.urlsafe_b64decode(padded))


# ============================================================================
# Mock Payloads
# ============================================================================


def timestamp() -> Dict[str, str]:
    return {"seconds": "1700000000", "nanos": "0"}


def activity_payload(
    status: str = "ACTIVITY_STATUS_COMPLETED",
    *,
    activity_id: str = "activity-1",
    activity_type: str = "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2",
    result: Optional[Dict[str, Any]] = None,
    failure: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """JSON body of an ActivityResponse."""
    activity: Dict[str, Any] = {
        "id": activity_id,
        "organizationId": ORGANIZATION_ID,
        "status": status,
        "type": activity_type,
        "intent": {},
        "votes": [],
        "fingerprint": "fingerprint-1",
        "canApprove": False,
        "canReject": False,
        "createdAt": timestamp(),
        "updatedAt": timestamp(),
    }
    if result is not None:
        activity["result"] = result
    if failure is not None:
        activity["failure"] = failure
    return {"activity": activity}


def create_mock_response(
    status_code: int = 200,
    json_data: Optional[Any] = None,
    text: str = "",
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.text = text if text else (json.dumps(json_data) if json_data is not None else "")
    response.headers = headers or {}

    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = json.JSONDecodeError("Expecting value", response.text, 0)

    return response


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return BASE_URL


@pytest.fixture
def api_private_key():
    return API_PRIVATE_KEY


@pytest.fixture
def api_public_key():
    return compressed_public_key()


@pytest.fixture
def organization_id():
    return ORGANIZATION_ID


@pytest.fixture
def wallet_data():
    """Mock wallet data."""
    return {
        "walletId": "wallet-1",
        "walletName": "Treasury",
        "createdAt": timestamp(),
        "updatedAt": timestamp(),
        "exported": False,
        "imported": False,
    }


@pytest.fixture
def private_key_data():
    """Mock private key data."""
    return {
        "privateKeyId": "pk-1",
        "publicKey": "9f1d0c",
        "privateKeyName": "fee-payer",
        "curve": "CURVE_ED25519",
        "addresses": [{"format": "ADDRESS_FORMAT_SOLANA", "address": "So1anaAddr"}],
        "privateKeyTags": [],
        "createdAt": timestamp(),
        "updatedAt": timestamp(),
        "exported": False,
        "imported": False,
    }


@pytest.fixture
def whoami_data():
    return {
        "organizationId": ORGANIZATION_ID,
        "organizationName": "Test Organization",
        "userId": "user-1",
        "username": "api-user",
    }


@pytest.fixture
def make_activity():
    """Factory for ActivityResponse bodies."""
    return activity_payload


@pytest.fixture
def make_response():
    """Factory for mock httpx.Response objects."""
    return create_mock_response


@pytest.fixture
def verify_stamp():
    """
    Check an X-Stamp value against the body it was computed over.

    Returns the decoded stamp so tests can make further assertions.
    """
    def _verify(stamp: str, body: bytes, private_hex: str = API_PRIVATE_KEY) -> Dict[str, str]:
        decoded = decode_stamp(stamp)
        public_key = private_key_object(private_hex).public_key()
        # raises InvalidSignature on mismatch
        public_key.verify(
            bytes.fromhex(decoded["signature"]),
            body,
            ec.ECDSA(hashes.SHA256()),
        )
        return decoded

    return _verify
