"""Models for Husqvarna Automower data."""

from __future__ import annotations

from dataclasses import dataclass

from .model_base import ApiModel
from .model_battery import Battery  # noqa: TC001
from .model_mower import (  # noqa: TC001
    MowerActivities,
    MowerModes,
    MowerStates,
    MowerStatus,
)
from .model_positions import Positions
from .model_system import System  # noqa: TC001


@dataclass
class MowerAttributes(ApiModel):
    """DataClass for MowerAttributes."""

    system: System
    battery: Battery
    mower: MowerStatus
    positions: list[Positions]


@dataclass
class MowerData(ApiModel):
    """DataClass for MowerData values."""

    type: str
    id: str
    attributes: MowerAttributes


@dataclass
class MowerList(ApiModel):
    """DataClass for a list of all mowers."""

    data: list[MowerData]


@dataclass(frozen=True)
class Mower:
    """A mower and its status, flattened from the API response."""

    id: str
    type: str
    name: str
    model: str
    serial_number: int
    battery_percent: int
    mode: MowerModes
    activity: MowerActivities
    state: MowerStates
    error_code: int
    error_code_timestamp: int
    positions: tuple[Positions, ...]

    @classmethod
    def from_data(cls, data: MowerData) -> Mower:
        """Build a mower from one item of the mower list."""
        attributes = data.attributes
        return cls(
            id=data.id,
            type=data.type,
            name=attributes.system.name,
            model=attributes.system.model,
            serial_number=attributes.system.serial_number,
            battery_percent=attributes.battery.battery_percent,
            mode=attributes.mower.mode,
            activity=attributes.mower.activity,
            state=attributes.mower.state,
            error_code=attributes.mower.error_code,
            error_code_timestamp=attributes.mower.error_code_timestamp,
            positions=tuple(attributes.positions),
        )
