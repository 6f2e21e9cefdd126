"""ridestate - Driver presence and ride action state for ride-hailing services."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ridestate")
except PackageNotFoundError:
    __version__ = "0+local"
from ridestate.config import RideStateConfig
from ridestate.exceptions import (
    IllegalTransitionError,
    InvalidRadiusError,
    InvalidSightingError,
    RideStateConfigError,
    RideStateError,
)
from ridestate.ingestion.telemetry import BatchResult, parse_sighting, reconcile_many
from ridestate.models import (
    INITIAL_STAGE,
    ActionKind,
    Coordinate,
    Destination,
    DriverRecord,
    DriverSighting,
    RideActionDescriptor,
    RideStage,
)
from ridestate.session import RideSession
from ridestate.state.board import DriverBoard
from ridestate.state.events import ReconcileResult
from ridestate.state.ride import RideActionState

__all__ = [
    "__version__",
    "INITIAL_STAGE",
    "ActionKind",
    "BatchResult",
    "Coordinate",
    "Destination",
    "DriverBoard",
    "DriverRecord",
    "DriverSighting",
    "IllegalTransitionError",
    "InvalidRadiusError",
    "InvalidSightingError",
    "ReconcileResult",
    "RideActionDescriptor",
    "RideActionState",
    "RideSession",
    "RideStage",
    "RideStateConfig",
    "RideStateConfigError",
    "RideStateError",
    "parse_sighting",
    "reconcile_many",
]
