"""The CLI for automower_connect."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import TYPE_CHECKING

from aiohttp import ClientSession

from .auth import AutomowerAuth
from .credentials import Credentials, load_credentials
from .exceptions import AutomowerConnectError
from .logging_config import setup_logging
from .session import AutomowerSession

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .model import Mower

_LOGGER = logging.getLogger(__name__)


def format_mower(mower: Mower) -> str:
    """Return a one line summary of a mower."""
    return (
        f"{mower.name} ({mower.model}, {mower.serial_number}): "
        f"{mower.battery_percent}% {mower.mode} {mower.activity} {mower.state}"
    )


async def run(credentials: Credentials) -> list[Mower]:
    """Authenticate with the client credentials and fetch the mowers."""
    async with ClientSession() as websession:
        auth = AutomowerAuth.from_credentials(websession, credentials)
        token = await auth.async_authenticate_client_credentials()
        _LOGGER.info("Authenticated, token valid until %s", token.valid_until)
        return await AutomowerSession(auth).get_mowers()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line arguments."""
    parser = argparse.ArgumentParser(
        description=main.__doc__, formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("-k", "--client_id", help="Husqvarna Application key")
    parser.add_argument("-s", "--client_secret", help="Husqvarna Application secret")
    parser.add_argument(
        "-c",
        "--credentials",
        help="JSON file with applicationKey and applicationSecret",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log the requests"
    )
    args = parser.parse_args(argv)
    if bool(args.client_id) != bool(args.client_secret):
        parser.error("--client_id and --client_secret have to be given together")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """List the mowers of a Husqvarna Automower Connect application.

    The credentials are taken from --client_id and --client_secret, else
    from --credentials, the AUTOMOWER_CREDENTIALS environment variable or
    credentials.json in the working directory.
    """
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    try:
        if args.client_id:
            credentials = Credentials(args.client_id, args.client_secret)
        else:
            credentials = load_credentials(args.credentials)
        mowers = asyncio.run(run(credentials))
    except AutomowerConnectError as err:
        _LOGGER.error("%s: %s", type(err).__name__, err)
        return 1
    for mower in mowers:
        print(format_mower(mower))  # noqa: T201
    return 0
