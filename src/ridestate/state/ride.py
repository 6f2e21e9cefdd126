"""Ride action state machine."""

from __future__ import annotations

import logging

from ridestate.exceptions import IllegalTransitionError
from ridestate.models.ride import INITIAL_STAGE, Destination, RideActionDescriptor, RideStage
from ridestate.state.events import TransitionListener
from ridestate.state.policy import describe, is_terminal, next_stage

_logger = logging.getLogger(__name__)


class RideActionState:
    """Current stage of a single ride and its view-ready descriptor.

    Stages only move forward, one step at a time::

        REQUEST_RIDE -> TRIP_ACCEPTED -> PICKUP_PASSENGER -> TRIP_IN_PROGRESS -> END_TRIP

    ``END_TRIP`` is terminal.  There is no cancellation or backward path.

    Parameters
    ----------
    initial : RideStage
        Starting stage.  Defaults to :data:`INITIAL_STAGE`
        (``REQUEST_RIDE``); passing another stage restores a ride that is
        already under way.  An unknown stage raises
        :class:`IllegalTransitionError` with an empty ``current``.
    on_transition : callable, optional
        Called as ``(previous, current, descriptor)`` after every accepted
        transition.
    """

    def __init__(
        self,
        initial: RideStage = INITIAL_STAGE,
        *,
        on_transition: TransitionListener | None = None,
    ) -> None:
        try:
            self._stage = RideStage(initial)
        except ValueError:
            raise IllegalTransitionError(
                f"Unknown initial ride stage {initial!r}",
                current="",
                target=str(initial),
            ) from None
        self._destination = Destination()
        self._on_transition = on_transition

    @property
    def stage(self) -> RideStage:
        return self._stage

    @property
    def destination(self) -> Destination:
        return self._destination

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._stage)

    def current_descriptor(self) -> RideActionDescriptor:
        """Descriptor for the current stage, recomputed on every call."""
        return describe(self._stage, self._destination)

    def advance(self, target: RideStage | str) -> RideActionDescriptor:
        """Move to *target*, which must be the immediate successor stage.

        Raises
        ------
        IllegalTransitionError
            If *target* is unknown, is not the next stage, or the ride is
            already terminal.  The stage is left unchanged.
        """
        current = self._stage
        try:
            requested = RideStage(target)
        except ValueError:
            raise IllegalTransitionError(
                f"Unknown ride stage {target!r}",
                current=current.value,
                target=str(target),
            ) from None

        expected = next_stage(current)
        if expected is None:
            raise IllegalTransitionError(
                f"Ride is already at terminal stage {current.value}; cannot move to {requested.value}",
                current=current.value,
                target=requested.value,
            )
        if requested is not expected:
            raise IllegalTransitionError(
                f"Cannot move from {current.value} to {requested.value}; next stage is {expected.value}",
                current=current.value,
                target=requested.value,
            )

        self._stage = requested
        descriptor = self.current_descriptor()
        _logger.debug("Ride stage %s -> %s", current.value, requested.value)

        if self._on_transition is not None:
            try:
                self._on_transition(current, requested, descriptor)
            except Exception:
                _logger.debug("on_transition callback failed", exc_info=True)
        return descriptor

    def set_destination(self, name: str | None, address: str | None = None) -> None:
        """Attach the rider's destination to this ride.

        Always legal and never changes the stage.  Blank values clear the
        corresponding field.
        """
        self._destination = Destination(name=name, address=address)
