"""Tests for activity polling."""

import json
import time

import httpx
import pytest
import respx

from turnkey_types.activities import ActivityResponse, ActivityStatus

from turnkey_client.client import TurnkeyClient
from turnkey_client.exceptions import (
    ActivityError,
    ActivityFailedError,
    ActivityTimeoutError,
    ConsensusNeededError,
)


GET_ACTIVITY = "/public/v1/query/get_activity"


@pytest.fixture
def client(base_url, organization_id):
    """Create a client for testing."""
    return TurnkeyClient(base_url, organization_id=organization_id)


class TestWaitForActivity:
    """Tests for ActivitiesClient.wait."""

    @pytest.mark.asyncio
    async def test_polls_until_completed(self, client, base_url, make_activity):
        """Test that pending activities are polled until they complete."""
        with respx.mock(base_url=base_url) as router:
            route = router.post(GET_ACTIVITY).mock(side_effect=[
                httpx.Response(200, json=make_activity("ACTIVITY_STATUS_CREATED")),
                httpx.Response(200, json=make_activity("ACTIVITY_STATUS_PENDING")),
                httpx.Response(200, json=make_activity("ACTIVITY_STATUS_COMPLETED")),
            ])
            activity = await client.activities.wait("activity-1", interval=0)

        assert activity.status is ActivityStatus.COMPLETED
        assert route.call_count == 3
        body = json.loads(route.calls.last.request.content)
        assert body == {"organizationId": "org-123", "activityId": "activity-1"}
        await client.close()

    @pytest.mark.asyncio
    async def test_completed_activity_returns_immediately(self, client, base_url, make_activity):
        """Test that an already completed activity needs no request."""
        activity = ActivityResponse.model_validate(make_activity()).activity

        with respx.mock(base_url=base_url, assert_all_called=False) as router:
            route = router.post(GET_ACTIVITY)
            result = await client.activities.wait(activity)

        assert result is activity
        assert not route.called
        await client.close()

    @pytest.mark.asyncio
    async def test_submitted_activity_is_polled_in_its_organization(self, client, base_url, make_activity):
        """Test that polling uses the organization the activity belongs to."""
        submitted = ActivityResponse.model_validate(make_activity("ACTIVITY_STATUS_PENDING")).activity
        submitted.organization_id = "sub-org-1"

        with respx.mock(base_url=base_url) as router:
            route = router.post(GET_ACTIVITY).mock(
                return_value=httpx.Response(200, json=make_activity())
            )
            await client.activities.wait(submitted, interval=0)

        assert json.loads(route.calls.last.request.content)["organizationId"] == "sub-org-1"
        await client.close()

    @pytest.mark.asyncio
    async def test_failed_activity(self, client, base_url, make_activity):
        """Test that a failed activity raises with its failure message."""
        body = make_activity(
            "ACTIVITY_STATUS_FAILED",
            failure={"code": 3, "message": "insufficient balance", "details": []},
        )
        with respx.mock(base_url=base_url) as router:
            router.post(GET_ACTIVITY).mock(return_value=httpx.Response(200, json=body))
            with pytest.raises(ActivityFailedError) as exc_info:
                await client.activities.wait("activity-1", interval=0)

        assert "insufficient balance" in str(exc_info.value)
        assert exc_info.value.activity_id == "activity-1"
        assert exc_info.value.activity_status == "ACTIVITY_STATUS_FAILED"
        await client.close()

    @pytest.mark.asyncio
    async def test_rejected_activity(self, client, base_url, make_activity):
        """Test that a rejected activity raises ActivityFailedError."""
        with respx.mock(base_url=base_url) as router:
            router.post(GET_ACTIVITY).mock(
                return_value=httpx.Response(200, json=make_activity("ACTIVITY_STATUS_REJECTED"))
            )
            with pytest.raises(ActivityFailedError) as exc_info:
                await client.activities.wait("activity-1", interval=0)

        assert "ACTIVITY_STATUS_REJECTED" in str(exc_info.value)
        await client.close()

    @pytest.mark.asyncio
    async def test_consensus_needed(self, client, base_url, make_activity):
        """Test that an activity awaiting approvals raises ConsensusNeededError."""
        with respx.mock(base_url=base_url) as router:
            router.post(GET_ACTIVITY).mock(
                return_value=httpx.Response(200, json=make_activity("ACTIVITY_STATUS_CONSENSUS_NEEDED"))
            )
            with pytest.raises(ConsensusNeededError) as exc_info:
                await client.activities.wait("activity-1", interval=0)

        assert isinstance(exc_info.value, ActivityError)
        await client.close()

    @pytest.mark.asyncio
    async def test_timeout(self, client, base_url, make_activity):
        """Test that polling stops once the timeout has passed."""
        with respx.mock(base_url=base_url) as router:
            route = router.post(GET_ACTIVITY).mock(
                return_value=httpx.Response(200, json=make_activity("ACTIVITY_STATUS_PENDING"))
            )
            with pytest.raises(ActivityTimeoutError) as exc_info:
                await client.activities.wait("activity-1", interval=0, timeout=0)

        assert route.call_count == 1
        assert exc_info.value.activity_status == "ACTIVITY_STATUS_PENDING"
        await client.close()

    @pytest.mark.asyncio
    async def test_timeout_shorter_than_interval(self, client, base_url, make_activity):
        """Test that the sleep is cut short at the deadline and no late poll is sent."""
        with respx.mock(base_url=base_url) as router:
            route = router.post(GET_ACTIVITY).mock(
                return_value=httpx.Response(200, json=make_activity("ACTIVITY_STATUS_PENDING"))
            )
            started = time.monotonic()
            with pytest.raises(ActivityTimeoutError):
                await client.activities.wait("activity-1", interval=1.0, timeout=0.1)
            elapsed = time.monotonic() - started

        assert elapsed < 0.5
        assert route.call_count == 1
        await client.close()
