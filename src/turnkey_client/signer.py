"""
Turnkey-backed transaction signer.

``TurnkeySigner`` signs arbitrary message bytes with a key held in Turnkey
by submitting a raw-payload signing activity, and returns the fixed-width
``r || s`` signature used by ed25519 and secp256k1 verifiers.
"""

from typing import Optional
import json
import logging

from pydantic import ValidationError as PydanticValidationError

from turnkey_types.signing import (
    HashFunction,
    PayloadEncoding,
    SignRawPayloadIntentV2,
    SignRawPayloadRequest,
)

from turnkey_client.endpoints.signing import SigningClient
from turnkey_client.exceptions import (
    InvalidHexError,
    InvalidResponseError,
    InvalidSignatureError,
    InvalidSignatureLengthError,
)
from turnkey_client.http import DEFAULT_BASE_URL, AsyncHTTPClient
from turnkey_client.stamper import ApiKeyStamper

logger = logging.getLogger(__name__)

SIGNATURE_COMPONENT_SIZE = 32
SIGNATURE_SIZE = 2 * SIGNATURE_COMPONENT_SIZE


class TurnkeySigner:
    """
    Signs messages with a Turnkey private key.

    Example usage:
        ```python
        async with TurnkeySigner(
            api_public_key="02...",
            api_private_key="...",
            organization_id="org-id",
            private_key_id="key-id",
            public_key="address",
        ) as signer:
            signature = await signer.sign(message_bytes)
        ```
    """

    def __init__(
        self,
        api_public_key: str,
        api_private_key: str,
        organization_id: str,
        private_key_id: str,
        public_key: str,
        api_base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 30.0,
        max_retries: int = 3,
    ):
        self.organization_id = organization_id
        self.private_key_id = private_key_id
        self.public_key = public_key
        self.api_base_url = api_base_url
        self._stamper = ApiKeyStamper(api_public_key, api_private_key)
        self._http = AsyncHTTPClient(
            base_url=api_base_url,
            stamper=self._stamper,
            organization_id=organization_id,
            timeout=timeout,
            max_retries=max_retries,
        )
        self._signing = SigningClient(self._http)

    async def sign(self, message: bytes) -> bytes:
        """
        Sign ``message`` and return the 64-byte ``r || s`` signature.

        Raises:
            UnexpectedResponseError: If the API answers with a status other than 200
            InvalidResponseError: If the activity carries no raw payload result
            InvalidHexError: If a signature component is not hex
            InvalidSignatureError: If a component is longer than 32 bytes
        """
        request = SignRawPayloadRequest(
            organization_id=self.organization_id,
            parameters=SignRawPayloadIntentV2(
                sign_with=self.private_key_id,
                payload=message.hex(),
                encoding=PayloadEncoding.HEXADECIMAL,
                hash_function=HashFunction.NOT_APPLICABLE,
            ),
        )

        logger.debug(f"Requesting signature of {len(message)} bytes with {self.private_key_id}")
        try:
            response = await self._signing.sign_raw_payload(request)
        except (PydanticValidationError, json.JSONDecodeError) as e:
            logger.error(f"Unreadable sign_raw_payload response: {e}")
            raise InvalidResponseError() from e

        result = response.activity.result
        if result is None or result.sign_raw_payload_result is None:
            raise InvalidResponseError()

        r = _decode_component(result.sign_raw_payload_result.r)
        s = _decode_component(result.sign_raw_payload_result.s)
        return r.rjust(SIGNATURE_COMPONENT_SIZE, b"\x00") + s.rjust(SIGNATURE_COMPONENT_SIZE, b"\x00")

    async def sign_solana(self, message: bytes) -> bytes:
        """Sign a serialized Solana message, checking the signature is 64 bytes."""
        signature = await self.sign(message)
        if len(signature) != SIGNATURE_SIZE:
            raise InvalidSignatureLengthError()
        return signature

    @property
    def solana_pubkey(self) -> str:
        return self.public_key

    def create_stamp(self, body: str) -> str:
        """X-Stamp header value for ``body``."""
        return self._stamper.stamp(body)

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> "TurnkeySigner":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return (
            f"TurnkeySigner(organization_id={self.organization_id!r}, "
            f"private_key_id={self.private_key_id!r})"
        )


def _decode_component(value: Optional[str]) -> bytes:
    try:
        raw = bytes.fromhex(value or "")
    except ValueError as e:
        raise InvalidHexError(f"Invalid hex: {e}") from e
    if len(raw) > SIGNATURE_COMPONENT_SIZE:
        raise InvalidSignatureError()
    return raw
