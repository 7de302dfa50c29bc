"""The constants for automower_connect."""

from enum import StrEnum

AUTH_API_HOST = "api.authentication.husqvarnagroup.dev"
AUTOMOWER_API_HOST = "api.amc.husqvarna.dev"
API_SCHEME = "https"

AUTHORIZE_PATH = "/v1/oauth2/authorize"
TOKEN_PATH = "/v1/oauth2/token"
MOWERS_PATH = "/v1/mowers"

AUTH_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/json",
}
AUTH_HEADER_FMT = "Bearer {}"
AUTHORIZATION_PROVIDER = "husqvarna"

REDIRECT_SCHEME = "automower"
REDIRECT_URI = f"{REDIRECT_SCHEME}://"

CREDENTIALS_ENV = "AUTOMOWER_CREDENTIALS"
CREDENTIALS_FILE = "credentials.json"


class GrantType(StrEnum):
    """OAuth2 grant types supported by the Authentication API."""

    CLIENT_CREDENTIALS = "client_credentials"
    AUTHORIZATION_CODE = "authorization_code"


class HttpMethod(StrEnum):
    """HTTP methods used against the APIs."""

    GET = "GET"
    POST = "POST"
