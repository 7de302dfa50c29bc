"""Tests for asynchronous Python client for automower_connect.

Run tests with `pytest`.
"""

import json
from pathlib import Path
from typing import Any

from aioresponses import aioresponses

from automower_connect.const import MOWERS_PATH, TOKEN_PATH
from automower_connect.endpoint import Api

TOKEN_URL = f"https://{Api.AUTHENTICATION}{TOKEN_PATH}"
MOWERS_URL = f"https://{Api.AUTOMOWER}{MOWERS_PATH}"


def load_fixture(filename: str) -> str:
    """Load a fixture."""
    path = Path(__file__).parent / "fixtures" / filename
    return path.read_text(encoding="utf-8")


def load_fixture_json(filename: str) -> Any:
    """Load a fixture as JSON."""
    return json.loads(load_fixture(filename))


def sent_requests(responses: aioresponses) -> list[tuple[str, str, dict[str, Any]]]:
    """Return method, url and keyword arguments of every request sent."""
    return [
        (method, str(url), call.kwargs)
        for (method, url), calls in responses.requests.items()
        for call in calls
    ]
