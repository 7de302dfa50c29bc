"""Models for Husqvarna Authentication API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from .model_base import ApiModel


@dataclass
class TokenResponse(ApiModel):
    """The body of a successful answer of the token endpoint."""

    access_token: str
    scope: str
    expires_in: int
    provider: str
    user_id: str
    token_type: str
    refresh_token: str | None = None


@dataclass(frozen=True)
class Token:
    """An access token and the moment it expires."""

    access_token: str
    refresh_token: str | None
    valid_until: datetime

    @classmethod
    def from_response(cls, response: TokenResponse) -> Token:
        """Create a token, valid for expires_in seconds from now."""
        return cls(
            access_token=response.access_token,
            refresh_token=response.refresh_token,
            valid_until=datetime.now(tz=UTC) + timedelta(seconds=response.expires_in),
        )

    @property
    def is_expired(self) -> bool:
        """Return True if valid_until has passed.

        Nothing renews the token, callers have to authenticate again.
        """
        return datetime.now(tz=UTC) >= self.valid_until
