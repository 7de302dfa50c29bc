"""Application credentials for the Husqvarna developer portal."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import orjson
from mashumaro import field_options
from mashumaro.exceptions import InvalidFieldValue, MissingField

from .const import CREDENTIALS_ENV, CREDENTIALS_FILE
from .exceptions import CannotDecodeError, CannotFindBundleError
from .model import ApiModel

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials(ApiModel):
    """Application key and secret of an application."""

    application_key: str = field(metadata=field_options(alias="applicationKey"))
    application_secret: str = field(
        metadata=field_options(alias="applicationSecret")
    )

    class Config(ApiModel.Config):  # pylint: disable=too-few-public-methods
        """Serialize with the aliases, like the file is written."""

        serialize_by_alias = True

    def pretty_json(self) -> str:
        """Return the credentials as indented JSON."""
        return orjson.dumps(self.to_dict(), option=orjson.OPT_INDENT_2).decode()


def credentials_path(path: str | os.PathLike[str] | None = None) -> Path:
    """Return where the credentials are read from.

    An explicit path wins over the environment variable, which wins over
    credentials.json in the working directory.
    """
    if path is not None:
        return Path(path)
    if env_path := os.environ.get(CREDENTIALS_ENV):
        return Path(env_path)
    return Path.cwd() / CREDENTIALS_FILE


def load_credentials(path: str | os.PathLike[str] | None = None) -> Credentials:
    """Load the credentials from a JSON file.

    :param path: The file to read, see credentials_path for the defaults.
    """
    location = credentials_path(path)
    _LOGGER.debug("Loading credentials from %s", location)
    try:
        raw = location.read_text(encoding="utf-8")
    except FileNotFoundError as err:
        raise CannotFindBundleError(str(location)) from err
    try:
        data = orjson.loads(raw)
        if not isinstance(data, dict):
            msg = f"Expected a JSON object, got {type(data).__name__}"
            raise TypeError(msg)
        return Credentials.from_dict(data)
    except (orjson.JSONDecodeError, TypeError, MissingField, InvalidFieldValue) as err:
        raise CannotDecodeError(raw, err) from err
