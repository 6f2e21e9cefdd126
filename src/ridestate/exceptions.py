"""Custom exception hierarchy for ridestate."""

from __future__ import annotations

from typing import Any


class RideStateError(Exception):
    """Base exception for all ridestate errors."""


class RideStateConfigError(RideStateError):
    """Invalid or missing configuration."""


class InvalidSightingError(RideStateError):
    """A driver sighting was malformed (empty id, bad coordinates).

    The sighting is discarded and the board is left unchanged.  Callers
    decide whether to log, ignore, or surface it.
    """

    def __init__(
        self,
        message: str,
        *,
        driver_id: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.driver_id = driver_id
        self.errors = errors or []
        super().__init__(message)


class IllegalTransitionError(RideStateError):
    """A ride-stage event did not name the immediate successor stage.

    Raised for skipped stages, backward moves, repeats, unknown stage
    names and any event received once the ride is terminal.  The ride
    state is left unchanged.
    """

    def __init__(self, message: str, *, current: str, target: str) -> None:
        self.current = current
        self.target = target
        super().__init__(message)


class InvalidRadiusError(RideStateError):
    """A proximity query was given a negative or NaN radius."""

    def __init__(self, message: str, *, radius_km: float) -> None:
        self.radius_km = radius_km
        super().__init__(message)
