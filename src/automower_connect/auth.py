"""Authentication and authenticated requests for Husqvarna Automower."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from aiohttp import ClientError, ClientSession
from yarl import URL

from . import endpoint as endpoints
from .const import (
    AUTH_HEADER_FMT,
    AUTHORIZATION_PROVIDER,
    REDIRECT_SCHEME,
    REDIRECT_URI,
)
from .exceptions import (
    AutomowerConnectError,
    CannotDecodeError,
    GeneralError,
    NotLoggedInError,
    ReceivedInvalidResponseError,
    error_from_status,
)
from .model import Token, TokenResponse
from .utils import DECODE_ERRORS, load_json_object

if TYPE_CHECKING:
    from .credentials import Credentials
    from .endpoint import Endpoint

_LOGGER = logging.getLogger(__name__)


class WebAuthenticationSession(ABC):
    """Drives a user through the consent screen of the Authentication API."""

    @abstractmethod
    async def authenticate(
        self, authorization_url: URL, callback_url_scheme: str
    ) -> str:
        """Open the authorization URL and return the final redirect URL.

        Raise when the user cancels or the flow fails.
        """


@dataclass(frozen=True)
class ClientCredentialsGrant:
    """Client Credentials Grant, no user interaction.

    This grant type is intended only for you. If you want other
    users to use your application, then they should login using Authorization
    Code Grant.
    """


@dataclass(frozen=True)
class AuthorizationCodeGrant:
    """Authorization Code Grant, the user logs in with a web session."""

    web_session: WebAuthenticationSession


Grant = ClientCredentialsGrant | AuthorizationCodeGrant


def parse_callback_url(callback_url: str) -> tuple[str, str]:
    """Return code and state from the redirect URL of the web session.

    Both have to be present, empty values are passed on as they are.
    """
    try:
        query = URL(callback_url).query
    except (TypeError, ValueError) as err:
        raise ReceivedInvalidResponseError(
            f"received invalid response: {callback_url}"
        ) from err
    code = query.get("code")
    state = query.get("state")
    if code is None or state is None:
        raise ReceivedInvalidResponseError
    return code, state


class AutomowerAuth:
    """Obtain a token and make authenticated requests with it."""

    def __init__(
        self,
        websession: ClientSession,
        application_key: str,
        application_secret: str,
    ) -> None:
        """Initialize the auth.

        :param websession: The aiohttp ClientSession used for all requests.
        :param str application_key: The application key from the developer portal.
        :param str application_secret: The application secret.
        """
        self._websession = websession
        self.application_key = application_key
        self._application_secret = application_secret
        self._token: Token | None = None

    @classmethod
    def from_credentials(
        cls, websession: ClientSession, credentials: Credentials
    ) -> AutomowerAuth:
        """Create the auth from loaded credentials."""
        return cls(
            websession, credentials.application_key, credentials.application_secret
        )

    @property
    def token(self) -> Token | None:
        """Return the current token, None before the first authentication."""
        return self._token

    async def async_authenticate(self, grant: Grant) -> Token:
        """Authenticate with the given grant."""
        if isinstance(grant, AuthorizationCodeGrant):
            return await self.async_authenticate_authorization_code(
                grant.web_session
            )
        return await self.async_authenticate_client_credentials()

    async def async_authenticate_client_credentials(self) -> Token:
        """Get a token with the Client Credentials Grant."""
        return await self._async_request_token(
            endpoints.token_client_credentials(
                self.application_key, self._application_secret
            )
        )

    async def async_authenticate_authorization_code(
        self, web_session: WebAuthenticationSession
    ) -> Token:
        """Get a token with the Authorization Code Grant.

        The user logs in through the web session, the code and the state of the
        redirect are exchanged for a token.
        """
        authorization_url = endpoints.authorize(
            self.application_key, REDIRECT_URI
        ).url()
        _LOGGER.debug("Starting authentication session")
        try:
            callback_url = await web_session.authenticate(
                authorization_url, REDIRECT_SCHEME
            )
        except AutomowerConnectError:
            raise
        except Exception as err:  # pylint: disable=broad-except
            raise GeneralError(err) from err
        _LOGGER.debug("Received response from authentication service")
        code, state = parse_callback_url(str(callback_url))
        return await self._async_request_token(
            endpoints.token_authorization_code(
                self.application_key,
                self._application_secret,
                code,
                REDIRECT_URI,
                state,
            )
        )

    async def _async_request_token(self, endpoint: Endpoint) -> Token:
        """Exchange the grant for a token and store it."""
        status, raw = await self._async_send(endpoint, dict(endpoint.headers))
        _LOGGER.debug("Resp.status get access token: %s", status)
        if error := error_from_status(status):
            raise error
        try:
            token = Token.from_response(TokenResponse.from_dict(load_json_object(raw)))
        except DECODE_ERRORS as err:
            raise CannotDecodeError(raw, err) from err
        self._token = token
        _LOGGER.debug("Token valid until: %s", token.valid_until)
        return token

    def headers(self) -> dict[str, str]:
        """Generate headers for ReST requests."""
        token = self._token
        if token is None:
            raise NotLoggedInError
        return {
            "Authorization": AUTH_HEADER_FMT.format(token.access_token),
            "Authorization-Provider": AUTHORIZATION_PROVIDER,
            "X-Api-Key": self.application_key,
        }

    async def get(self, endpoint: Endpoint) -> str:
        """Make an authenticated request and return the body."""
        status, raw = await self._async_send(endpoint, self.headers())
        if error := error_from_status(status):
            raise error
        return raw

    async def _async_send(
        self, endpoint: Endpoint, headers: dict[str, str]
    ) -> tuple[int, str]:
        """Send the request, return the status and the body as text."""
        url = endpoint.url()
        _LOGGER.debug("request[%s]=%s", endpoint.method, url)
        try:
            async with self._websession.request(
                str(endpoint.method),
                str(url),
                data=endpoint.body,
                headers=headers,
            ) as resp:
                return resp.status, await resp.text(errors="replace")
        except ClientError as err:
            raise GeneralError(err) from err

