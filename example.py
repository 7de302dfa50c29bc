"""An example file to use this library."""

import asyncio
import logging

from aiohttp import ClientSession

from automower_connect import AutomowerAuth, AutomowerSession, load_credentials
from automower_connect.logging_config import setup_logging

_LOGGER = logging.getLogger(__name__)

# Fill out applicationKey and applicationSecret in credentials.json, you can
# find both in the Husqvarna developer portal.


async def main() -> None:
    """Authenticate with the client credentials and print all mowers."""
    async with ClientSession() as websession:
        auth = AutomowerAuth.from_credentials(websession, load_credentials())
        token = await auth.async_authenticate_client_credentials()
        _LOGGER.info("Token valid until %s", token.valid_until)
        automower_api = AutomowerSession(auth)
        for mower in await automower_api.get_mowers():
            print(mower)


setup_logging(logging.DEBUG)
asyncio.run(main())
