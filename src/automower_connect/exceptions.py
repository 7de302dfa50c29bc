"""Library for Exceptions using the Husqvarna Automower Connect API."""

from http import HTTPStatus


class AutomowerConnectError(Exception):
    """Base class for all client Errors."""


class GeneralError(AutomowerConnectError):
    """Raised when an unexpected underlying failure occurred."""

    def __init__(self, cause: BaseException) -> None:
        """Initialize."""
        super().__init__(f"general error: {cause}")
        self.cause = cause


class InvalidURLError(AutomowerConnectError):
    """Raised when no valid URL can be built for an endpoint."""

    def __init__(self, path: str) -> None:
        """Initialize."""
        super().__init__(f"invalid URL for path {path}")
        self.path = path


class ReceivedInvalidResponseError(AutomowerConnectError):
    """Raised when the authentication callback misses the code or the state."""

    def __init__(self, message: str = "received invalid response") -> None:
        """Initialize."""
        super().__init__(message)


class BadRequestError(AutomowerConnectError):
    """Raised when the API answers with 400 Bad Request."""

    def __init__(self) -> None:
        """Initialize."""
        super().__init__("bad request")


class AuthError(AutomowerConnectError):
    """Raised due to auth problems, a new authentication is required."""


class UnauthorizedError(AuthError):
    """Raised when the API answers with 401 Unauthorized."""

    def __init__(self) -> None:
        """Initialize."""
        super().__init__("unauthorized")


class NotLoggedInError(AuthError):
    """Raised when an authenticated call is made before any authentication."""

    def __init__(self) -> None:
        """Initialize."""
        super().__init__("not logged in. We do not have a token")


class InvalidStatusCodeError(AutomowerConnectError):
    """Raised when the API answers with an unexpected status code."""

    def __init__(self, status: int) -> None:
        """Initialize."""
        super().__init__(f"invalid status code {status}")
        self.status = status


class CannotDecodeError(AutomowerConnectError):
    """Raised when a response body can't be decoded.

    The raw body is kept, as the upstream API is not under our control and
    the body is the best hint at what changed.
    """

    def __init__(self, raw_body: str, cause: BaseException) -> None:
        """Initialize."""
        super().__init__(f"cannot decode\n{raw_body}\n{cause}")
        self.raw_body = raw_body
        self.cause = cause


class CannotFindBundleError(AutomowerConnectError):
    """Raised when no credentials file can be found."""

    def __init__(self, location: str | None = None) -> None:
        """Initialize."""
        message = "cannot find bundle for credentials"
        if location:
            message = f"{message} at {location}"
        super().__init__(message)
        self.location = location


def error_from_status(status: int) -> AutomowerConnectError | None:
    """Return the error for a HTTP status code, None for success."""
    if status in (HTTPStatus.OK, HTTPStatus.CREATED):
        return None
    if status == HTTPStatus.BAD_REQUEST:
        return BadRequestError()
    if status == HTTPStatus.UNAUTHORIZED:
        return UnauthorizedError()
    return InvalidStatusCodeError(status)
