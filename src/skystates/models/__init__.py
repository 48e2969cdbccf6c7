"""Data models for decoded states snapshots."""

from skystates.models._base import SkyBaseModel, SkyEnum, epoch_to_datetime
from skystates.models.snapshot import StatesSnapshot
from skystates.models.state_vector import PositionSource, StateVector

__all__ = [
    "PositionSource",
    "SkyBaseModel",
    "SkyEnum",
    "StateVector",
    "StatesSnapshot",
    "epoch_to_datetime",
]
