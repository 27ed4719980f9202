"""
Main Turnkey API client.

This module provides the TurnkeyClient class, the primary entry point
for interacting with the Turnkey API. It manages request stamping,
endpoint clients, and session lifecycle.
"""

from typing import Any, Dict, Optional
import logging

from turnkey_types.organizations import GetWhoamiRequest, GetWhoamiResponse

from turnkey_client.config import TurnkeySettings
from turnkey_client.http import DEFAULT_BASE_URL, AsyncHTTPClient
from turnkey_client.stamper import ApiKeyStamper, Stamper

logger = logging.getLogger(__name__)


class TurnkeyClient:
    """
    Main client for the Turnkey API.

    This class provides:
    - Request stamping with an API key pair (or any Stamper)
    - A default organization for requests that omit one
    - Lazy-loaded endpoint clients
    - Session lifecycle management

    Example usage:
        ```python
        async with TurnkeyClient(
            organization_id="org-id",
            api_public_key="02...",
            api_private_key="...",
        ) as client:
            me = await client.whoami()
            wallets = await client.wallets.list()

            submitted = await client.private_keys.create(CreatePrivateKeysRequest(...))
            activity = await client.activities.wait(submitted.activity)
        ```
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        organization_id: Optional[str] = None,
        api_public_key: Optional[str] = None,
        api_private_key: Optional[str] = None,
        stamper: Optional[Stamper] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the Turnkey client.

        Args:
            base_url: Base URL for the API
            organization_id: Default organization id
            api_public_key: API public key (hex), used with api_private_key
            api_private_key: API private key (hex), used with api_public_key
            stamper: Custom stamper; takes precedence over the key pair
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts on connection failures
            headers: Additional headers to include in all requests
        """
        self._base_url = base_url.rstrip("/")
        self._organization_id = organization_id

        if stamper is None and api_public_key and api_private_key:
            stamper = ApiKeyStamper(api_public_key, api_private_key)
        self._stamper = stamper

        self._http = AsyncHTTPClient(
            base_url=self._base_url,
            stamper=stamper,
            organization_id=organization_id,
            timeout=timeout,
            max_retries=max_retries,
            headers=headers,
        )

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @classmethod
    def from_settings(cls, settings: TurnkeySettings) -> "TurnkeyClient":
        """Create a client from TurnkeySettings."""
        return cls(
            settings.api_base_url,
            organization_id=settings.organization_id,
            api_public_key=settings.api_public_key,
            api_private_key=settings.api_private_key,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
        )

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return self._base_url

    @property
    def organization_id(self) -> Optional[str]:
        """Get the default organization id."""
        return self._organization_id

    @property
    def is_authenticated(self) -> bool:
        """Check if requests will be stamped."""
        return self._stamper is not None

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    # =========================================================================
    # Endpoint Clients
    # =========================================================================

    def __getattr__(self, name: str) -> Any:
        """
        Dynamically access endpoint clients by name.

        This allows accessing clients like `client.wallets` without
        explicitly importing them.

        Args:
            name: Endpoint name (e.g., "wallets", "private_keys", "sub_organizations")

        Returns:
            The endpoint client instance

        Raises:
            AttributeError: If no client exists for the given name
        """
        if name.startswith("_"):
            raise AttributeError(name)

        # Check if we've already cached this client
        if name in self._endpoint_clients:
            return self._endpoint_clients[name]

        # e.g., "private_key_tags" -> "PrivateKeyTagsClient"
        class_name = "".join(p.capitalize() for p in name.split("_")) + "Client"

        from turnkey_client import endpoints

        client_class = getattr(endpoints, class_name, None)
        if client_class is None:
            raise AttributeError(
                f"No endpoint client found for '{name}'. "
                f"Expected class: {class_name}"
            )

        logger.debug(f"Creating endpoint client {class_name}")
        client = client_class(self._http)
        self._endpoint_clients[name] = client
        return client

    async def whoami(self, organization_id: Optional[str] = None) -> GetWhoamiResponse:
        """
        Get the organization and user behind the configured API key.

        Args:
            organization_id: Organization to ask; defaults to the client's
        """
        return await self.organizations.whoami(GetWhoamiRequest(organization_id=organization_id))

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "TurnkeyClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    def __repr__(self) -> str:
        auth_status = "stamped" if self.is_authenticated else "unstamped"
        return (
            f"TurnkeyClient(base_url={self._base_url!r}, "
            f"organization_id={self._organization_id!r}, {auth_status})"
        )
