"""Base model for Husqvarna API payloads."""

from typing import Any

from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig


def _strict_str(value: Any) -> str:
    """Accept only strings, mashumaro would call str() on anything else."""
    if not isinstance(value, str):
        msg = f"Expected a string, got {type(value).__name__}"
        raise TypeError(msg)
    return value


class ApiModel(DataClassDictMixin):
    """Mixin for the payloads, a JSON null or number is no string."""

    class Config(BaseConfig):  # pylint: disable=too-few-public-methods
        """Decode str fields strictly."""

        serialization_strategy = {str: {"deserialize": _strict_str}}  # noqa: RUF012
