"""
Error body returned by the Turnkey API on non-200 responses.

The shape follows gRPC's ``google.rpc.Status`` with an extra Turnkey code.
"""

from typing import Any, List, Optional

from pydantic import Field

from .base import TurnkeyModel


class TurnkeyErrorResponse(TurnkeyModel):
    code: Optional[int] = Field(None, description="gRPC status code")
    message: Optional[str] = Field(None, description="Human-readable error message")
    details: List[Any] = Field(default_factory=list, description="Additional error details")
    turnkey_error_code: Optional[str] = Field(None, description="Turnkey-specific error code")
