"""
Request stamping.

Turnkey authenticates a request by a signature over its exact body bytes,
sent in the ``X-Stamp`` header. The stamp is the base64url (unpadded)
encoding of ``{"public_key", "signature", "scheme"}``, where ``signature``
is the hex DER ECDSA P-256/SHA-256 signature made with the API private key.
"""

from abc import ABC, abstractmethod
import base64
import json

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from turnkey_client.exceptions import (
    InvalidPrivateKeyLengthError,
    SigningKeyError,
    StampError,
)


STAMP_HEADER = "X-Stamp"
SIGNATURE_SCHEME = "SIGNATURE_SCHEME_TK_API_P256"

_CURVE = ec.SECP256R1()


class Stamper(ABC):
    """Abstract base class for request stampers."""

    @property
    def header_name(self) -> str:
        return STAMP_HEADER

    @abstractmethod
    def stamp(self, payload: str) -> str:
        """Return the header value authenticating ``payload``."""
        ...


def load_private_key_from_hex(private_hex: str) -> ec.EllipticCurvePrivateKey:
    """
    Load a raw 32-byte P-256 private key given as hex.

    Raises:
        StampError: If the string is not valid hex
        InvalidPrivateKeyLengthError: If it does not decode to 32 bytes
        SigningKeyError: If the scalar is not a valid P-256 private key
    """
    try:
        raw = bytes.fromhex(private_hex)
    except ValueError as e:
        raise StampError(f"Invalid stamp: {e}") from e

    if len(raw) != 32:
        raise InvalidPrivateKeyLengthError()

    try:
        return ec.derive_private_key(int.from_bytes(raw, "big"), _CURVE)
    except ValueError as e:
        raise SigningKeyError(f"Signing key error: {e}") from e


class ApiKeyStamper(Stamper):
    """Stamps request bodies with a Turnkey API key pair."""

    def __init__(self, api_public_key: str, api_private_key: str):
        self.api_public_key = api_public_key
        self._api_private_key = api_private_key

    def sign(self, payload: str) -> str:
        """Hex DER signature of ``payload``."""
        private_key = load_private_key_from_hex(self._api_private_key)
        signature_der = private_key.sign(payload.encode("utf-8"), ec.ECDSA(hashes.SHA256()))
        return signature_der.hex()

    def stamp(self, payload: str) -> str:
        stamp = {
            "public_key": self.api_public_key,
            "signature": self.sign(payload),
            "scheme": SIGNATURE_SCHEME,
        }
        json_stamp = json.dumps(stamp, separators=(",", ":"))
        return base64.urlsafe_b64encode(json_stamp.encode("utf-8")).rstrip(b"=").decode("ascii")

    def __repr__(self) -> str:
        return f"ApiKeyStamper(api_public_key={self.api_public_key!r})"
