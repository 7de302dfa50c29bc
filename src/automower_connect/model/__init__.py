"""Provide a model for the Automower Connect API."""

from .model import (
    Mower,
    MowerAttributes,
    MowerData,
    MowerList,
)
from .model_base import ApiModel
from .model_battery import Battery
from .model_mower import (
    MowerActivities,
    MowerModes,
    MowerStates,
    MowerStatus,
)
from .model_positions import Positions
from .model_system import System
from .model_token import (
    Token,
    TokenResponse,
)

__all__ = [
    "ApiModel",
    "Battery",
    "Mower",
    "MowerActivities",
    "MowerAttributes",
    "MowerData",
    "MowerList",
    "MowerModes",
    "MowerStates",
    "MowerStatus",
    "Positions",
    "System",
    "Token",
    "TokenResponse",
]
