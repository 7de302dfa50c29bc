"""Automower Connect library using aiohttp."""

from .auth import (
    AuthorizationCodeGrant,
    AutomowerAuth,
    ClientCredentialsGrant,
    WebAuthenticationSession,
)
from .credentials import Credentials, load_credentials
from .session import AutomowerSession

__all__ = [
    "AuthorizationCodeGrant",
    "AutomowerAuth",
    "AutomowerSession",
    "ClientCredentialsGrant",
    "Credentials",
    "WebAuthenticationSession",
    "load_credentials",
]
