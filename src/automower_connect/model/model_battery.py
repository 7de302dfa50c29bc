"""Models for Automower Connect API - Battery."""

from dataclasses import dataclass, field

from mashumaro import field_options

from .model_base import ApiModel


@dataclass
class Battery(ApiModel):
    """Information about the battery in the Automower."""

    battery_percent: int = field(metadata=field_options(alias="batteryPercent"))
