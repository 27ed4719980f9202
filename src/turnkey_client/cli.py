"""
Command line interface for the Turnkey client.

Settings come from TURNKEY_* environment variables (and ``.env``), or
from a YAML profile given with ``--profile`` whose keys are the
TurnkeySettings field names.
"""

import asyncio
import json
import logging
import re

import click
import yaml

from turnkey_types import get_activity_request_models
from turnkey_types.activities import ActivityResponse, GetActivityRequest

from turnkey_client.client import TurnkeyClient
from turnkey_client.config import TurnkeySettings, get_turnkey_settings
from turnkey_client.exceptions import TurnkeyClientError
from turnkey_client.signer import TurnkeySigner
from turnkey_client.stamper import ApiKeyStamper

logger = logging.getLogger(__name__)


def load_settings(profile_path) -> TurnkeySettings:
    """Settings from a YAML profile, falling back to the environment."""
    if profile_path is None:
        return get_turnkey_settings()

    with open(profile_path, "r") as file:
        data = yaml.safe_load(file) or {}

    if not isinstance(data, dict):
        raise click.ClickException(f"Profile {profile_path} must contain a mapping")
    return TurnkeySettings(**data)


def run_command(coro):
    """Run a coroutine, turning client errors into click errors."""
    try:
        return asyncio.run(coro)
    except TurnkeyClientError as e:
        raise click.ClickException(str(e)) from e


def echo_model(model) -> None:
    click.echo(json.dumps(model.to_wire(), indent=2))


def submit_path(activity_type: str) -> str:
    """Submit path for an activity type, e.g. ACTIVITY_TYPE_CREATE_POLICY_V3 -> create_policy."""
    name = activity_type.removeprefix("ACTIVITY_TYPE_")
    return "/public/v1/submit/" + re.sub(r"_V\d+$", "", name).lower()


def require_api_key(settings: TurnkeySettings) -> None:
    if not settings.api_public_key or not settings.api_private_key:
        raise click.ClickException(
            "TURNKEY_API_PUBLIC_KEY and TURNKEY_API_PRIVATE_KEY must be set"
        )


@click.group()
@click.option(
    '--profile',
    envvar='TURNKEY_PROFILE',
    type=click.Path(exists=True),
    help='Path to a YAML profile with Turnkey settings (overrides TURNKEY_* variables)'
)
@click.option(
    '--log-level',
    default='WARNING',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level'
)
@click.pass_context
def cli(ctx, profile, log_level):
    """Turnkey CLI - Query and sign with Turnkey-held keys."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj['SETTINGS'] = load_settings(profile)


@click.command()
@click.pass_context
def whoami(ctx):
    """Show the organization and user behind the API key."""
    settings = ctx.obj['SETTINGS']
    require_api_key(settings)

    async def _run():
        async with TurnkeyClient.from_settings(settings) as client:
            return await client.whoami()

    echo_model(run_command(_run()))


@click.command()
@click.argument('activity_id')
@click.option('--wait', 'wait_', is_flag=True, help='Poll until the activity is terminal')
@click.pass_context
def activity(ctx, activity_id, wait_):
    """Show an activity."""
    settings = ctx.obj['SETTINGS']
    require_api_key(settings)

    async def _run():
        async with TurnkeyClient.from_settings(settings) as client:
            if wait_:
                return await client.activities.wait(
                    activity_id,
                    interval=settings.activity_poll_interval,
                    timeout=settings.activity_poll_timeout,
                )
            response = await client.activities.get(GetActivityRequest(activity_id=activity_id))
            return response.activity

    echo_model(run_command(_run()))


@click.command()
@click.argument('activity_type')
@click.argument('parameters')
@click.option('--wait', 'wait_', is_flag=True, help='Poll until the activity is terminal')
@click.pass_context
def submit(ctx, activity_type, parameters, wait_):
    """Submit an activity of ACTIVITY_TYPE with JSON PARAMETERS."""
    settings = ctx.obj['SETTINGS']
    require_api_key(settings)

    request_models = get_activity_request_models()
    model = request_models.get(activity_type.upper())
    if model is None:
        raise click.BadParameter(
            f"unknown activity type {activity_type}", param_hint="ACTIVITY_TYPE"
        )

    try:
        request = model.model_validate({"parameters": json.loads(parameters)})
    except ValueError as e:
        raise click.BadParameter(f"invalid parameters: {e}", param_hint="PARAMETERS")

    path = submit_path(request.type)

    async def _run():
        async with TurnkeyClient.from_settings(settings) as client:
            response = await client.http.post(path, json_data=request)
            submitted = ActivityResponse.model_validate(response.json()).activity
            logger.info(f"Submitted {request.type} as activity {submitted.id}")
            if wait_:
                return await client.activities.wait(
                    submitted,
                    interval=settings.activity_poll_interval,
                    timeout=settings.activity_poll_timeout,
                )
            return submitted

    echo_model(run_command(_run()))


@click.command()
@click.pass_context
def wallets(ctx):
    """List wallets."""
    settings = ctx.obj['SETTINGS']
    require_api_key(settings)

    async def _run():
        async with TurnkeyClient.from_settings(settings) as client:
            return await client.wallets.list()

    response = run_command(_run())
    for wallet in response.wallets:
        click.echo(f"{wallet.wallet_id}\t{wallet.wallet_name}")


@click.command('private-keys')
@click.pass_context
def private_keys(ctx):
    """List private keys."""
    settings = ctx.obj['SETTINGS']
    require_api_key(settings)

    async def _run():
        async with TurnkeyClient.from_settings(settings) as client:
            return await client.private_keys.list()

    response = run_command(_run())
    for key in response.private_keys:
        click.echo(f"{key.private_key_id}\t{key.private_key_name}\t{key.curve.value}")


@click.command()
@click.argument('payload')
@click.option('--sign-with', help='Private key id or address (defaults to TURNKEY_PRIVATE_KEY_ID)')
@click.pass_context
def sign(ctx, payload, sign_with):
    """Sign a hex payload and print the 64-byte signature as hex."""
    settings = ctx.obj['SETTINGS']
    require_api_key(settings)

    sign_with = sign_with or settings.private_key_id
    if not sign_with:
        raise click.UsageError("--sign-with is required when TURNKEY_PRIVATE_KEY_ID is unset")
    if not settings.organization_id:
        raise click.UsageError("TURNKEY_ORGANIZATION_ID must be set")

    try:
        message = bytes.fromhex(payload)
    except ValueError:
        raise click.BadParameter("payload must be hex", param_hint="PAYLOAD")

    async def _run():
        async with TurnkeySigner(
            api_public_key=settings.api_public_key,
            api_private_key=settings.api_private_key,
            organization_id=settings.organization_id,
            private_key_id=sign_with,
            public_key=settings.public_key or "",
            api_base_url=settings.api_base_url,
            timeout=settings.timeout,
            max_retries=settings.max_retries,
        ) as signer:
            return await signer.sign(message)

    signature = run_command(_run())
    logger.info(f"Signed {len(message)} bytes with {sign_with}")
    click.echo(signature.hex())


@click.command()
@click.argument('body')
@click.pass_context
def stamp(ctx, body):
    """Print the X-Stamp header value for a request body."""
    settings = ctx.obj['SETTINGS']
    require_api_key(settings)

    stamper = ApiKeyStamper(settings.api_public_key, settings.api_private_key)
    try:
        click.echo(stamper.stamp(body))
    except TurnkeyClientError as e:
        raise click.ClickException(str(e)) from e


cli.add_command(whoami, "whoami")
cli.add_command(activity, "activity")
cli.add_command(submit, "submit")
cli.add_command(wallets, "wallets")
cli.add_command(private_keys, "private-keys")
cli.add_command(sign, "sign")
cli.add_command(stamp, "stamp")

if __name__ == '__main__':
    cli()
