"""
Async HTTP client for the Turnkey API.

This module provides the transport every endpoint group shares, built on
httpx with:
- Request stamping (X-Stamp) over the exact body bytes
- Default organization injection
- Status-code based error mapping
- Retry on connection failures
- Timeout configuration
"""

from typing import Any, Dict, Optional, Union
import json
import logging

import httpx
from pydantic import BaseModel

from turnkey_client.exceptions import (
    TurnkeyClientError,
    MissingOrganizationError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from turnkey_client.stamper import Stamper
from turnkey_types.errors import TurnkeyErrorResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.turnkey.com"


class AsyncHTTPClient:
    """
    Async HTTP client for Turnkey API requests.

    This client handles:
    - Base URL management
    - Stamp header injection
    - Response parsing and error handling
    - Retries for requests that never reached the server
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        stamper: Optional[Stamper] = None,
        organization_id: Optional[str] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Base URL for the API (e.g., "https://api.turnkey.com")
            stamper: Stamper used to authenticate request bodies
            organization_id: Default organization for requests that omit one
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts on connection failures
            headers: Additional headers to include in all requests
        """
        self.base_url = base_url.rstrip("/")
        self.stamper = stamper
        self.organization_id = organization_id
        self.timeout = timeout
        self.max_retries = max_retries
        self._default_headers = headers or {}
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            logger.debug(f"Opening HTTP connection pool for {self.base_url}")
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Build request headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _add_stamp_header(self, headers: Dict[str, str], body: str) -> Dict[str, str]:
        """Add the stamp header if a stamper is configured."""
        if self.stamper is not None:
            headers[self.stamper.header_name] = self.stamper.stamp(body)
        return headers

    def _prepare_payload(
        self,
        json_data: Optional[Union[Dict[str, Any], BaseModel]],
    ) -> Dict[str, Any]:
        """
        Convert the request body to its wire dict and fill in the organization.

        Raises:
            MissingOrganizationError: If neither the body nor the client names one
            ValueError: If a dict body uses the field name ``organization_id``
        """
        if json_data is None:
            payload: Dict[str, Any] = {}
        elif isinstance(json_data, BaseModel):
            payload = json_data.model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            payload = dict(json_data)
            if "organization_id" in payload:
                raise ValueError(
                    "Dict request bodies use wire names: pass 'organizationId', not 'organization_id'"
                )

        if not payload.get("organizationId"):
            if not self.organization_id:
                raise MissingOrganizationError()
            payload["organizationId"] = self.organization_id
        return payload

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert a non-200 response to the matching exception."""
        status_code = response.status_code
        text = response.text

        logger.error(f"Turnkey API error - status: {status_code}, response: {text}")

        # Try to parse error details from response body
        try:
            error = TurnkeyErrorResponse.model_validate(response.json())
        except Exception:
            error = TurnkeyErrorResponse()

        retry_after = response.headers.get("Retry-After")
        raise exception_from_response(
            status_code,
            error.message or f"API error: {status_code}",
            error_code=error.turnkey_error_code or None,
            details={"details": error.details} if error.details else None,
            body=text,
            grpc_code=error.code,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send a request and return the 200 response.

        Args:
            method: HTTP method
            path: Request path (will be joined with base_url)
            content: Serialized request body
            headers: Complete request headers

        Returns:
            httpx.Response object

        Raises:
            UnexpectedResponseError: On any status other than 200
            NetworkError: On connection failures
            TimeoutError: On request timeout
        """
        client = await self._get_client()

        last_exception = None
        for attempt in range(self.max_retries):
            try:
                logger.debug(f"{method} {path} (attempt {attempt + 1}/{self.max_retries})")
                response = await client.request(
                    method=method,
                    url=path,
                    content=content,
                    headers=headers,
                )

                if response.status_code == 200:
                    return response

                self._handle_error_response(response)

            except httpx.ConnectError as e:
                last_exception = NetworkError(f"Connection failed: {e}")
                if attempt < self.max_retries - 1:
                    logger.warning(f"Connection to {self.base_url} failed, retrying: {e}")
                    continue
            except httpx.TimeoutException as e:
                # the body may already have been accepted
                raise ClientTimeoutError(f"Request timed out: {e}") from e
            except TurnkeyClientError:
                raise
            except httpx.HTTPError as e:
                raise NetworkError(f"Request failed: {e}") from e

        if last_exception:
            raise last_exception
        raise NetworkError("Request failed after retries")

    async def post(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> httpx.Response:
        """
        Make a stamped POST request.

        Args:
            path: Request path
            json_data: JSON body data (can be dict or Pydantic model)
            headers: Additional headers
            authenticated: Whether to add the stamp header
        """
        payload = self._prepare_payload(json_data)
        body = json.dumps(payload, separators=(",", ":"))

        request_headers = self._build_headers(headers)
        if authenticated:
            request_headers = self._add_stamp_header(request_headers, body)

        return await self._request("POST", path, content=body, headers=request_headers)

    async def post_json(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        headers: Optional[Dict[str, str]] = None,
        authenticated: bool = True,
    ) -> Any:
        """Make a POST request and return JSON response."""
        response = await self.post(
            path,
            json_data=json_data,
            headers=headers,
            authenticated=authenticated,
        )
        return response.json()
