"""Endpoints of the Husqvarna Authentication and Automower Connect APIs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import quote_plus, urlencode

from yarl import URL

from .const import (
    API_SCHEME,
    AUTH_API_HOST,
    AUTH_HEADERS,
    AUTHORIZE_PATH,
    AUTOMOWER_API_HOST,
    MOWERS_PATH,
    TOKEN_PATH,
    GrantType,
    HttpMethod,
)
from .exceptions import InvalidURLError

_FORBIDDEN_PATH_CHARS = frozenset("?#")


class Api(StrEnum):
    """The API an endpoint belongs to, the value is its host."""

    AUTHENTICATION = AUTH_API_HOST
    "The Authentication API, used to obtain tokens."

    AUTOMOWER = AUTOMOWER_API_HOST
    "The Automower Connect API, used after authentication."


@dataclass(frozen=True)
class Endpoint:
    """Description of a single request before it is sent."""

    api: Api
    path: str
    method: HttpMethod = HttpMethod.GET
    query_items: tuple[tuple[str, str], ...] = ()
    body: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    def url(self) -> URL:
        """Build the URL from all the parts of the endpoint.

        Raises InvalidURLError when the parts don't form a valid URL.
        """
        if (
            not isinstance(self.path, str)
            or not self.path.startswith("/")
            or any(char in _FORBIDDEN_PATH_CHARS for char in self.path)
            or not self.path.isprintable()
        ):
            raise InvalidURLError(str(self.path))
        for name, value in self.query_items:
            if not isinstance(name, str) or not isinstance(value, str):
                raise InvalidURLError(self.path)
            if not name.isprintable() or not value.isprintable():
                raise InvalidURLError(self.path)
        try:
            return URL.build(
                scheme=API_SCHEME,
                host=str(self.api),
                path=self.path,
                query=list(self.query_items) or None,
            )
        except (TypeError, ValueError) as err:
            raise InvalidURLError(self.path) from err


def _form_body(fields: dict[str, str]) -> str:
    """Encode the fields as application/x-www-form-urlencoded."""
    return urlencode(fields, quote_via=quote_plus)


def authorize(client_id: str, redirect_uri: str) -> Endpoint:
    """Return the endpoint to start the Authorization Code Grant.

    The URL of this endpoint is opened in the web authentication session.
    """
    return Endpoint(
        api=Api.AUTHENTICATION,
        path=AUTHORIZE_PATH,
        query_items=(("client_id", client_id), ("redirect_uri", redirect_uri)),
    )


def token_client_credentials(client_id: str, client_secret: str) -> Endpoint:
    """Return the endpoint to get a token with the Client Credentials Grant.

    :param str client_id: The application key from the developer portal.
    :param str client_secret: The application secret from the developer portal.
    """
    return Endpoint(
        api=Api.AUTHENTICATION,
        path=TOKEN_PATH,
        method=HttpMethod.POST,
        body=_form_body(
            {
                "grant_type": GrantType.CLIENT_CREDENTIALS,
                "client_id": client_id,
                "client_secret": client_secret,
            }
        ),
        headers=tuple(AUTH_HEADERS.items()),
    )


def token_authorization_code(
    client_id: str,
    client_secret: str,
    code: str,
    redirect_uri: str,
    state: str,
) -> Endpoint:
    """Return the endpoint to get a token with the Authorization Code Grant.

    :param str client_id: The application key from the developer portal.
    :param str client_secret: The application secret from the developer portal.
    :param str code: The code received from the web authentication session.
    :param str redirect_uri: The redirect URI used in the web authentication session.
    :param str state: The state received from the web authentication session.
    """
    return Endpoint(
        api=Api.AUTHENTICATION,
        path=TOKEN_PATH,
        method=HttpMethod.POST,
        body=_form_body(
            {
                "grant_type": GrantType.AUTHORIZATION_CODE,
                "client_id": client_id,
                "client_secret": client_secret,
                "code": code,
                "redirect_uri": redirect_uri,
                "state": state,
            }
        ),
        headers=tuple(AUTH_HEADERS.items()),
    )


def mowers() -> Endpoint:
    """Return the endpoint listing all mowers linked to a user."""
    return Endpoint(api=Api.AUTOMOWER, path=MOWERS_PATH)
