"""
Endpoint clients, one per Turnkey resource group.

Each client wraps the POST endpoints of one group under
``/public/v1/query`` and ``/public/v1/submit``.
"""

from turnkey_client.endpoints.activities import ActivitiesClient
from turnkey_client.endpoints.api_keys import ApiKeysClient
from turnkey_client.endpoints.auth import AuthClient
from turnkey_client.endpoints.authenticators import AuthenticatorsClient
from turnkey_client.endpoints.invitations import InvitationsClient
from turnkey_client.endpoints.oauth_providers import OauthProvidersClient
from turnkey_client.endpoints.organizations import OrganizationsClient
from turnkey_client.endpoints.policies import PoliciesClient
from turnkey_client.endpoints.private_key_tags import PrivateKeyTagsClient
from turnkey_client.endpoints.private_keys import PrivateKeysClient
from turnkey_client.endpoints.signing import SigningClient
from turnkey_client.endpoints.sub_organizations import SubOrganizationsClient
from turnkey_client.endpoints.user_tags import UserTagsClient
from turnkey_client.endpoints.users import UsersClient
from turnkey_client.endpoints.wallets import WalletsClient

__all__ = [
    "ActivitiesClient",
    "ApiKeysClient",
    "AuthClient",
    "AuthenticatorsClient",
    "InvitationsClient",
    "OauthProvidersClient",
    "OrganizationsClient",
    "PoliciesClient",
    "PrivateKeyTagsClient",
    "PrivateKeysClient",
    "SigningClient",
    "SubOrganizationsClient",
    "UserTagsClient",
    "UsersClient",
    "WalletsClient",
]
