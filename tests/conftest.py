"""Test helpers for Husqvarna Automower Connect."""

from collections.abc import AsyncGenerator, Generator

import aiohttp
import pytest
from aioresponses import aioresponses

from automower_connect.auth import AutomowerAuth
from automower_connect.session import AutomowerSession

from . import TOKEN_URL, load_fixture_json

APPLICATION_KEY = "433e5fdf-5129-452c-xxxx-fadce3213042"
APPLICATION_SECRET = "763adf3c-1b16-4c3b-91cd-c07316243880"


@pytest.fixture(name="token_data")
def mock_token_data() -> dict:
    """Return the body of a successful token response."""
    return load_fixture_json("token.json")


@pytest.fixture(name="mower_data")
def mock_mower_data() -> dict:
    """Return the body of a mower list with two mowers."""
    return load_fixture_json("mowers.json")


@pytest.fixture(name="responses")
def aioresponses_fixture() -> Generator[aioresponses, None, None]:
    """Return aioresponses fixture."""
    with aioresponses() as mocked_responses:
        yield mocked_responses


@pytest.fixture(name="auth")
async def mock_auth() -> AsyncGenerator[AutomowerAuth, None]:
    """Return an auth without a token."""
    async with aiohttp.ClientSession() as session:
        yield AutomowerAuth(session, APPLICATION_KEY, APPLICATION_SECRET)


@pytest.fixture(name="logged_in_auth")
async def mock_logged_in_auth(
    auth: AutomowerAuth, responses: aioresponses, token_data: dict
) -> AutomowerAuth:
    """Return an auth which already holds a token."""
    responses.post(TOKEN_URL, status=200, payload=token_data)
    await auth.async_authenticate_client_credentials()
    responses.requests.clear()
    return auth


@pytest.fixture(name="automower_session")
def mock_automower_session(logged_in_auth: AutomowerAuth) -> AutomowerSession:
    """Return an Automower session with a logged in auth."""
    return AutomowerSession(logged_in_auth)
