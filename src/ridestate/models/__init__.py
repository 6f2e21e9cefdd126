"""Data models for driver sightings and ride stages."""

from ridestate.models.driver import Coordinate, DriverRecord, DriverSighting
from ridestate.models.ride import (
    INITIAL_STAGE,
    ActionKind,
    Destination,
    RideActionDescriptor,
    RideStage,
)

__all__ = [
    "INITIAL_STAGE",
    "ActionKind",
    "Coordinate",
    "Destination",
    "DriverRecord",
    "DriverSighting",
    "RideActionDescriptor",
    "RideStage",
]
