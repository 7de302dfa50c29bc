"""Utils for Husqvarna Automower."""

import logging
from typing import Any

import orjson
from mashumaro.exceptions import InvalidFieldValue, MissingField

from .model import Mower, MowerList

_LOGGER = logging.getLogger(__name__)

DECODE_ERRORS = (
    orjson.JSONDecodeError,
    MissingField,
    InvalidFieldValue,
    TypeError,
    ValueError,
)
"""Errors raised while turning a response body into a model."""


def load_json_object(raw: str | bytes) -> dict[str, Any]:
    """Parse a JSON document which has to be an object."""
    result = orjson.loads(raw)
    if not isinstance(result, dict):
        msg = f"Expected a JSON object, got {type(result).__name__}"
        raise TypeError(msg)
    return result


def mower_list_to_mowers(mower_list: dict[str, Any]) -> list[Mower]:
    """Convert the mower list of the API to mowers, keeping the order."""
    mowers = MowerList.from_dict(mower_list)
    return [Mower.from_data(mower) for mower in mowers.data]
