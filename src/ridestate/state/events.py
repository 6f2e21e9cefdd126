"""Change notifications emitted by the state layer."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from ridestate.models.driver import DriverRecord
from ridestate.models.ride import RideActionDescriptor, RideStage


class ReconcileResult(StrEnum):
    """Which branch a board mutation took.

    Lets the rendering collaborator decide whether to move an existing
    annotation, add a new one, or drop one.
    """

    INSERTED = "inserted"
    UPDATED = "updated"
    REMOVED = "removed"


BoardListener = Callable[[ReconcileResult, DriverRecord], None]
"""Called after every successful board mutation with a copy of the record."""

TransitionListener = Callable[[RideStage, RideStage, RideActionDescriptor], None]
"""Called after every accepted stage transition as ``(previous, current, descriptor)``."""
