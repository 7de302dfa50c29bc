"""Models for Automower Connect API - Positions."""

from dataclasses import dataclass

from .model_base import ApiModel


@dataclass
class Positions(ApiModel):
    """List of the GPS positions.

    Latest registered position is first in the
    array and the oldest last in the array.
    """

    latitude: float
    longitude: float
