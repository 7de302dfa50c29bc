"""Module to get the mowers from the Automower Connect API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from . import endpoint as endpoints
from .exceptions import CannotDecodeError
from .utils import DECODE_ERRORS, load_json_object, mower_list_to_mowers

if TYPE_CHECKING:
    from .auth import AutomowerAuth
    from .model import Mower

_LOGGER = logging.getLogger(__name__)


class AutomowerSession:
    """Automower API to communicate with an Automower.

    The `AutomowerSession` reads the mowers linked to the authenticated user.
    Authenticate with the `AutomowerAuth` first, every call raises
    `NotLoggedInError` otherwise.
    """

    __slots__ = ("auth",)

    def __init__(self, auth: AutomowerAuth) -> None:
        """Create a session.

        :param class auth: The AutomowerAuth class from automower_connect.auth.
        """
        self.auth = auth

    async def get_mowers(self) -> list[Mower]:
        """Get all mowers and their status via REST."""
        raw = await self.auth.get(endpoints.mowers())
        try:
            mowers = mower_list_to_mowers(load_json_object(raw))
        except DECODE_ERRORS as err:
            raise CannotDecodeError(raw, err) from err
        _LOGGER.debug("mowers: %s", [mower.id for mower in mowers])
        return mowers

    async def get_mower_names(self) -> list[str]:
        """Get the names of all mowers, in the order of the API."""
        return [mower.name for mower in await self.get_mowers()]
