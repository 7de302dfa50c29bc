"""Tests for the endpoints of automower_connect."""

from urllib.parse import parse_qs, parse_qsl

import pytest
from yarl import URL

from automower_connect import endpoint
from automower_connect.const import HttpMethod
from automower_connect.endpoint import Api, Endpoint
from automower_connect.exceptions import InvalidURLError

from . import TOKEN_URL

CLIENT_ID = "433e5fdf-5129-452c-xxxx-fadce3213042"
CLIENT_SECRET = "763adf3c-1b16-4c3b-91cd-c07316243880"


def test_authorize_url() -> None:
    """Test the url to start the Authorization Code Grant."""
    url = endpoint.authorize(CLIENT_ID, "automower://").url()
    assert url.scheme == "https"
    assert url.host == "api.authentication.husqvarnagroup.dev"
    assert url.path == "/v1/oauth2/authorize"
    assert dict(url.query) == {"client_id": CLIENT_ID, "redirect_uri": "automower://"}


def test_token_client_credentials() -> None:
    """Test the body of the Client Credentials Grant."""
    token = endpoint.token_client_credentials(CLIENT_ID, CLIENT_SECRET)
    assert token.method == HttpMethod.POST
    assert dict(token.headers)["Content-Type"] == "application/x-www-form-urlencoded"
    assert str(token.url()) == TOKEN_URL
    assert parse_qsl(token.body) == [
        ("grant_type", "client_credentials"),
        ("client_id", CLIENT_ID),
        ("client_secret", CLIENT_SECRET),
    ]


def test_token_authorization_code() -> None:
    """Test the body of the Authorization Code Grant contains every field."""
    token = endpoint.token_authorization_code(
        CLIENT_ID, CLIENT_SECRET, "the-code", "automower://", "the-state"
    )
    assert token.method == HttpMethod.POST
    assert dict(token.headers)["Content-Type"] == "application/x-www-form-urlencoded"
    assert parse_qs(token.body) == {
        "grant_type": ["authorization_code"],
        "client_id": [CLIENT_ID],
        "client_secret": [CLIENT_SECRET],
        "code": ["the-code"],
        "redirect_uri": ["automower://"],
        "state": ["the-state"],
    }


def test_form_values_are_encoded() -> None:
    """Test values with reserved characters don't leak into other fields."""
    token = endpoint.token_client_credentials("id&grant_type=password", "s3cr=t +")
    assert parse_qs(token.body) == {
        "grant_type": ["client_credentials"],
        "client_id": ["id&grant_type=password"],
        "client_secret": ["s3cr=t +"],
    }


def test_mowers_url() -> None:
    """Test the url of the mower list."""
    mowers = endpoint.mowers()
    assert mowers.method == HttpMethod.GET
    assert mowers.body is None
    assert str(mowers.url()) == "https://api.amc.husqvarna.dev/v1/mowers"


@pytest.mark.parametrize(
    "built",
    [
        endpoint.authorize(CLIENT_ID, "automower://"),
        endpoint.authorize("key with spaces&=", "automower://callback?x=1"),
        endpoint.token_client_credentials(CLIENT_ID, CLIENT_SECRET),
        endpoint.token_authorization_code(
            CLIENT_ID, CLIENT_SECRET, "code", "automower://", "state"
        ),
        endpoint.mowers(),
    ],
)
def test_url_round_trip(built: Endpoint) -> None:
    """Test rendering and parsing a url keeps host, path and query."""
    parsed = URL(str(built.url()))
    assert parsed.host == str(built.api)
    assert parsed.path == built.path
    assert list(parsed.query.items()) == list(built.query_items)


@pytest.mark.parametrize(
    "path",
    ["v1/mowers", "/v1/mowers?x=1", "/v1/mowers#top", "/v1/\nmowers"],
)
def test_invalid_path(path: str) -> None:
    """Test a path which can't form a url raises InvalidURLError."""
    with pytest.raises(InvalidURLError) as err:
        Endpoint(api=Api.AUTOMOWER, path=path).url()
    assert err.value.path == path


def test_invalid_query_value() -> None:
    """Test a query value with control characters raises InvalidURLError."""
    with pytest.raises(InvalidURLError, match="/v1/oauth2/authorize"):
        endpoint.authorize("broken\r\nkey", "automower://").url()


def test_endpoint_is_immutable() -> None:
    """Test an endpoint can be hashed and its headers can't be changed."""
    token = endpoint.token_client_credentials(CLIENT_ID, CLIENT_SECRET)
    assert hash(token) == hash(
        endpoint.token_client_credentials(CLIENT_ID, CLIENT_SECRET)
    )
    assert ("Accept", "application/json") in token.headers
    with pytest.raises(TypeError):
        token.headers["Accept"] = "text/html"  # type: ignore[index]
