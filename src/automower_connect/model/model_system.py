"""Models for Automower Connect API - System."""

from dataclasses import dataclass, field

from mashumaro import field_options

from .model_base import ApiModel


@dataclass
class System(ApiModel):
    """System information about a Automower."""

    name: str
    model: str
    serial_number: int = field(metadata=field_options(alias="serialNumber"))
