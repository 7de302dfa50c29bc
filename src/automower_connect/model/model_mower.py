"""Models for Automower Connect API - Mower status."""

from dataclasses import dataclass, field
from enum import StrEnum

from mashumaro import field_options

from .model_base import ApiModel


class MowerModes(StrEnum):
    """Mower modes of a lawn mower."""

    MAIN_AREA = "MAIN_AREA"
    SECONDARY_AREA = "SECONDARY_AREA"
    HOME = "HOME"
    DEMO = "DEMO"
    UNKNOWN = "UNKNOWN"


class MowerActivities(StrEnum):
    """Mower activities of a lawn mower."""

    UNKNOWN = "UNKNOWN"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    MOWING = "MOWING"
    GOING_HOME = "GOING_HOME"
    CHARGING = "CHARGING"
    LEAVING = "LEAVING"
    PARKED_IN_CS = "PARKED_IN_CS"
    STOPPED_IN_GARDEN = "STOPPED_IN_GARDEN"


class MowerStates(StrEnum):
    """Mower states of a lawn mower."""

    UNKNOWN = "UNKNOWN"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    PAUSED = "PAUSED"
    IN_OPERATION = "IN_OPERATION"
    WAIT_UPDATING = "WAIT_UPDATING"
    WAIT_POWER_UP = "WAIT_POWER_UP"
    RESTRICTED = "RESTRICTED"
    OFF = "OFF"
    STOPPED = "STOPPED"
    ERROR = "ERROR"
    FATAL_ERROR = "FATAL_ERROR"
    ERROR_AT_POWER_UP = "ERROR_AT_POWER_UP"


@dataclass
class MowerStatus(ApiModel):
    """Information about the mowers current status."""

    mode: MowerModes
    activity: MowerActivities
    state: MowerStates
    error_code: int = field(metadata=field_options(alias="errorCode"))
    error_code_timestamp: int = field(
        metadata=field_options(alias="errorCodeTimestamp")
    )
