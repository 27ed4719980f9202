"""
Endpoint client for activities.

Generated from the Turnkey public API OpenAPI document, plus ``wait``.
"""

from typing import Any, Dict, Union
import asyncio
import logging
import time

from turnkey_types.activities import (
    Activity,
    ActivityResponse,
    ActivityStatus,
    ApproveActivityRequest,
    GetActivitiesRequest,
    GetActivitiesResponse,
    GetActivityRequest,
    RejectActivityRequest,
)

from turnkey_client.exceptions import (
    ActivityFailedError,
    ActivityTimeoutError,
    ConsensusNeededError,
)
from turnkey_client.http import AsyncHTTPClient

logger = logging.getLogger(__name__)


class ActivitiesClient:
    """
    Client for activities endpoints.
    """

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        self._http = http_client

    async def get(
        self,
        data: Union[GetActivityRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Get activity"""
        response = await self._http.post("/public/v1/query/get_activity", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def list(
        self,
        data: Union[GetActivitiesRequest, Dict[str, Any], None] = None,
    ) -> GetActivitiesResponse:
        """List activities"""
        response = await self._http.post("/public/v1/query/list_activities", json_data=data)
        return GetActivitiesResponse.model_validate(response.json())

    async def approve(
        self,
        data: Union[ApproveActivityRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Approve activity"""
        response = await self._http.post("/public/v1/submit/approve_activity", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def reject(
        self,
        data: Union[RejectActivityRequest, Dict[str, Any]],
    ) -> ActivityResponse:
        """Reject activity"""
        response = await self._http.post("/public/v1/submit/reject_activity", json_data=data)
        return ActivityResponse.model_validate(response.json())

    async def wait(
        self,
        activity: Union[Activity, str],
        *,
        interval: float = 1.0,
        timeout: float = 60.0,
    ) -> Activity:
        """
        Poll an activity until it reaches a terminal status.

        Args:
            activity: Activity (as returned by a submit call) or activity id
            interval: Seconds between polls
            timeout: Seconds before giving up

        Returns:
            The completed activity

        Raises:
            ActivityFailedError: If the activity failed or was rejected
            ConsensusNeededError: If more approvals are required
            ActivityTimeoutError: If no terminal status was seen in time
        """
        if isinstance(activity, str):
            current = (await self.get(GetActivityRequest(activity_id=activity))).activity
        else:
            current = activity

        deadline = time.monotonic() + timeout
        while not current.status.is_terminal:
            remaining = deadline - time.monotonic()
            if remaining <= interval:
                # the next poll would land past the deadline
                await asyncio.sleep(max(remaining, 0))
                raise ActivityTimeoutError(
                    f"Activity {current.id} still {current.status.value} after {timeout}s",
                    activity_id=current.id,
                    activity_status=current.status.value,
                )
            await asyncio.sleep(interval)
            logger.debug(f"Polling activity {current.id} ({current.status.value})")
            current = (await self.get(GetActivityRequest(
                organization_id=current.organization_id,
                activity_id=current.id,
            ))).activity

        if current.status == ActivityStatus.COMPLETED:
            return current
        if current.status == ActivityStatus.CONSENSUS_NEEDED:
            raise ConsensusNeededError(
                f"Activity {current.id} requires consensus",
                activity_id=current.id,
                activity_status=current.status.value,
            )
        reason = current.failure.message if current.failure and current.failure.message else current.status.value
        raise ActivityFailedError(
            f"Activity {current.id} did not complete: {reason}",
            activity_id=current.id,
            activity_status=current.status.value,
        )
