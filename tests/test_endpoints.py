"""Tests for the endpoint clients."""

import json

import httpx
import pytest
import respx

from turnkey_types.activities import ActivityResponse, ActivityStatus
from turnkey_types.organizations import GetSubOrgIdsRequest
from turnkey_types.private_keys import (
    CreatePrivateKeysIntentV2,
    CreatePrivateKeysRequest,
    PrivateKeyParams,
)
from turnkey_types.wallets import (
    AddressFormat,
    Curve,
    GetWalletAccountsRequest,
    GetWalletRequest,
)

from turnkey_client.client import TurnkeyClient
from turnkey_client.exceptions import NotFoundError


SUBMIT_ENDPOINTS = [
    ("activities", "approve", "approve_activity"),
    ("activities", "reject", "reject_activity"),
    ("api_keys", "create", "create_api_keys"),
    ("api_keys", "delete", "delete_api_keys"),
    ("authenticators", "create", "create_authenticators"),
    ("authenticators", "delete", "delete_authenticators"),
    ("invitations", "create", "create_invitations"),
    ("invitations", "delete", "delete_invitation"),
    ("oauth_providers", "create", "create_oauth_providers"),
    ("oauth_providers", "delete", "delete_oauth_providers"),
    ("organizations", "set_feature", "set_organization_feature"),
    ("organizations", "remove_feature", "remove_organization_feature"),
    ("organizations", "update_root_quorum", "update_root_quorum"),
    ("organizations", "create_read_only_session", "create_read_only_session"),
    ("organizations", "create_read_write_session", "create_read_write_session"),
    ("sub_organizations", "create", "create_sub_organization"),
    ("sub_organizations", "delete", "delete_sub_organization"),
    ("policies", "create", "create_policy"),
    ("policies", "create_many", "create_policies"),
    ("policies", "update", "update_policy"),
    ("policies", "delete", "delete_policy"),
    ("private_keys", "create", "create_private_keys"),
    ("private_keys", "delete", "delete_private_keys"),
    ("private_keys", "export", "export_private_key"),
    ("private_keys", "import_", "import_private_key"),
    ("private_keys", "init_import", "init_import_private_key"),
    ("private_key_tags", "create", "create_private_key_tag"),
    ("private_key_tags", "update", "update_private_key_tag"),
    ("private_key_tags", "delete", "delete_private_key_tags"),
    ("users", "create", "create_users"),
    ("users", "update", "update_user"),
    ("users", "delete", "delete_users"),
    ("users", "recover", "recover_user"),
    ("user_tags", "create", "create_user_tag"),
    ("user_tags", "update", "update_user_tag"),
    ("user_tags", "delete", "delete_user_tags"),
    ("wallets", "create", "create_wallet"),
    ("wallets", "create_accounts", "create_wallet_accounts"),
    ("wallets", "delete", "delete_wallets"),
    ("wallets", "export", "export_wallet"),
    ("wallets", "export_account", "export_wallet_account"),
    ("wallets", "import_", "import_wallet"),
    ("wallets", "init_import", "init_import_wallet"),
    ("signing", "sign_raw_payload", "sign_raw_payload"),
    ("signing", "sign_raw_payloads", "sign_raw_payloads"),
    ("signing", "sign_transaction", "sign_transaction"),
    ("auth", "email_auth", "email_auth"),
    ("auth", "oauth", "oauth"),
    ("auth", "init_otp_auth", "init_otp_auth"),
    ("auth", "otp_auth", "otp_auth"),
    ("auth", "init_user_email_recovery", "init_user_email_recovery"),
]


@pytest.fixture
def client(base_url, organization_id, api_public_key, api_private_key):
    """Create a stamped client for testing."""
    return TurnkeyClient(
        base_url,
        organization_id=organization_id,
        api_public_key=api_public_key,
        api_private_key=api_private_key,
    )


# ============================================================================
# Submit Endpoints
# ============================================================================


class TestSubmitEndpoints:
    """Tests that every submit endpoint posts to its path."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("group,method,path", SUBMIT_ENDPOINTS)
    async def test_submit_path(self, client, base_url, make_activity, group, method, path):
        """Test the path, method and headers of a submit endpoint."""
        with respx.mock(base_url=base_url) as router:
            route = router.post(f"/public/v1/submit/{path}").mock(
                return_value=httpx.Response(200, json=make_activity())
            )
            endpoint = getattr(getattr(client, group), method)
            response = await endpoint({"type": "ACTIVITY_TYPE_TEST", "parameters": {}})

        assert isinstance(response, ActivityResponse)
        request = route.calls.last.request
        assert request.method == "POST"
        assert "X-Stamp" in request.headers
        assert json.loads(request.content)["organizationId"] == "org-123"
        await client.close()

    @pytest.mark.asyncio
    async def test_create_private_keys_body(self, client, base_url, make_activity):
        """Test the full envelope of a model-based submit."""
        request_model = CreatePrivateKeysRequest(
            timestamp_ms="1700000000000",
            parameters=CreatePrivateKeysIntentV2(private_keys=[
                PrivateKeyParams(
                    private_key_name="fee-payer",
                    curve=Curve.ED25519,
                    address_formats=[AddressFormat.SOLANA],
                ),
            ]),
        )
        result = {"createPrivateKeysResultV2": {"privateKeys": [{
            "privateKeyId": "pk-1",
            "addresses": [{"format": "ADDRESS_FORMAT_SOLANA", "address": "So1anaAddr"}],
        }]}}

        with respx.mock(base_url=base_url) as router:
            route = router.post("/public/v1/submit/create_private_keys").mock(
                return_value=httpx.Response(200, json=make_activity(
                    activity_type="ACTIVITY_TYPE_CREATE_PRIVATE_KEYS_V2",
                    result=result,
                ))
            )
            response = await client.private_keys.create(request_model)

        assert json.loads(route.calls.last.request.content) == {
            "type": "ACTIVITY_TYPE_CREATE_PRIVATE_KEYS_V2",
            "timestampMs": "1700000000000",
            "parameters": {"privateKeys": [{
                "privateKeyName": "fee-payer",
                "curve": "CURVE_ED25519",
                "privateKeyTags": [],
                "addressFormats": ["ADDRESS_FORMAT_SOLANA"],
            }]},
            "organizationId": "org-123",
        }
        created = response.activity.result.create_private_keys_result_v2.private_keys[0]
        assert created.private_key_id == "pk-1"
        assert created.addresses[0].address == "So1anaAddr"
        await client.close()

    @pytest.mark.asyncio
    async def test_parameterless_submit_without_data(self, client, base_url, make_activity):
        """Test that read-only sessions can be created without a body."""
        with respx.mock(base_url=base_url) as router:
            route = router.post("/public/v1/submit/create_read_only_session").mock(
                return_value=httpx.Response(200, json=make_activity(
                    activity_type="ACTIVITY_TYPE_CREATE_READ_ONLY_SESSION",
                ))
            )
            await client.organizations.create_read_only_session()

        body = json.loads(route.calls.last.request.content)
        assert body["type"] == "ACTIVITY_TYPE_CREATE_READ_ONLY_SESSION"
        assert body["parameters"] == {}
        await client.close()


# ============================================================================
# Query Endpoints
# ============================================================================


class TestQueryEndpoints:
    """Tests for representative query endpoints."""

    @pytest.mark.asyncio
    async def test_whoami(self, client, base_url, whoami_data, verify_stamp):
        """Test the whoami query."""
        with respx.mock(base_url=base_url) as router:
            route = router.post("/public/v1/query/whoami").mock(
                return_value=httpx.Response(200, json=whoami_data)
            )
            whoami = await client.whoami()

        assert whoami.user_id == "user-1"
        request = route.calls.last.request
        assert request.content == b'{"organizationId":"org-123"}'
        verify_stamp(request.headers["X-Stamp"], request.content)
        await client.close()

    @pytest.mark.asyncio
    async def test_list_wallets(self, client, base_url, wallet_data):
        """Test listing wallets."""
        with respx.mock(base_url=base_url) as router:
            router.post("/public/v1/query/list_wallets").mock(
                return_value=httpx.Response(200, json={"wallets": [wallet_data]})
            )
            response = await client.wallets.list()

        assert [w.wallet_id for w in response.wallets] == ["wallet-1"]
        await client.close()

    @pytest.mark.asyncio
    async def test_get_wallet(self, client, base_url, wallet_data):
        """Test getting a single wallet."""
        with respx.mock(base_url=base_url) as router:
            route = router.post("/public/v1/query/get_wallet").mock(
                return_value=httpx.Response(200, json={"wallet": wallet_data})
            )
            response = await client.wallets.get(GetWalletRequest(wallet_id="wallet-1"))

        assert response.wallet.wallet_name == "Treasury"
        assert json.loads(route.calls.last.request.content)["walletId"] == "wallet-1"
        await client.close()

    @pytest.mark.asyncio
    async def test_list_wallet_accounts(self, client, base_url):
        """Test listing wallet accounts."""
        account = {
            "walletAccountId": "acct-1",
            "organizationId": "org-123",
            "walletId": "wallet-1",
            "curve": "CURVE_ED25519",
            "pathFormat": "PATH_FORMAT_BIP32",
            "path": "m/44'/501'/0'/0'",
            "addressFormat": "ADDRESS_FORMAT_SOLANA",
            "address": "So1anaAddr",
            "createdAt": {"seconds": "1700000000", "nanos": "0"},
            "updatedAt": {"seconds": "1700000000", "nanos": "0"},
        }
        with respx.mock(base_url=base_url) as router:
            router.post("/public/v1/query/list_wallet_accounts").mock(
                return_value=httpx.Response(200, json={"accounts": [account]})
            )
            response = await client.wallets.list_accounts(GetWalletAccountsRequest(wallet_id="wallet-1"))

        assert response.accounts[0].address_format is AddressFormat.SOLANA
        await client.close()

    @pytest.mark.asyncio
    async def test_list_private_keys(self, client, base_url, private_key_data):
        """Test listing private keys."""
        with respx.mock(base_url=base_url) as router:
            router.post("/public/v1/query/list_private_keys").mock(
                return_value=httpx.Response(200, json={"privateKeys": [private_key_data]})
            )
            response = await client.private_keys.list()

        assert response.private_keys[0].curve is Curve.ED25519
        await client.close()

    @pytest.mark.asyncio
    async def test_list_sub_organizations(self, client, base_url):
        """Test that sub-organization ids come from list_suborgs."""
        with respx.mock(base_url=base_url) as router:
            route = router.post("/public/v1/query/list_suborgs").mock(
                return_value=httpx.Response(200, json={"organizationIds": ["sub-1", "sub-2"]})
            )
            response = await client.sub_organizations.list_ids(
                GetSubOrgIdsRequest(filter_type="NAME", filter_value="child")
            )

        assert response.organization_ids == ["sub-1", "sub-2"]
        body = json.loads(route.calls.last.request.content)
        assert body == {"filterType": "NAME", "filterValue": "child", "organizationId": "org-123"}
        await client.close()

    @pytest.mark.asyncio
    async def test_get_activity(self, client, base_url, make_activity):
        """Test getting an activity."""
        with respx.mock(base_url=base_url) as router:
            router.post("/public/v1/query/get_activity").mock(
                return_value=httpx.Response(200, json=make_activity("ACTIVITY_STATUS_PENDING"))
            )
            response = await client.activities.get({"activityId": "activity-1"})

        assert response.activity.status is ActivityStatus.PENDING
        await client.close()

    @pytest.mark.asyncio
    async def test_query_error_is_raised(self, client, base_url):
        """Test that a non-200 query response raises."""
        with respx.mock(base_url=base_url) as router:
            router.post("/public/v1/query/get_policy").mock(
                return_value=httpx.Response(404, json={"code": 5, "message": "policy not found"})
            )
            with pytest.raises(NotFoundError) as exc_info:
                await client.policies.get({"policyId": "missing"})

        assert exc_info.value.grpc_code == 5
        await client.close()
