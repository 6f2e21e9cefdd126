"""Ride stage transition policy.

Pure functions only: the forward order of stages and the descriptor each
stage projects to.  :class:`ridestate.state.ride.RideActionState` is the
only owner of a current stage.
"""

from __future__ import annotations

from ridestate.models.ride import ActionKind, Destination, RideActionDescriptor, RideStage

EN_ROUTE_TITLE = "En Route To Passenger"

_ORDER: tuple[RideStage, ...] = (
    RideStage.REQUEST_RIDE,
    RideStage.TRIP_ACCEPTED,
    RideStage.PICKUP_PASSENGER,
    RideStage.TRIP_IN_PROGRESS,
    RideStage.END_TRIP,
)

_ACTIONS: dict[RideStage, ActionKind | None] = {
    RideStage.REQUEST_RIDE: ActionKind.REQUEST_RIDE,
    RideStage.TRIP_ACCEPTED: ActionKind.GET_DIRECTIONS,
    RideStage.PICKUP_PASSENGER: ActionKind.PICKUP,
    RideStage.TRIP_IN_PROGRESS: None,
    RideStage.END_TRIP: ActionKind.DROP_OFF,
}


def next_stage(stage: RideStage) -> RideStage | None:
    """Return the immediate successor of *stage*, or ``None`` if terminal."""
    index = _ORDER.index(stage)
    if index + 1 >= len(_ORDER):
        return None
    return _ORDER[index + 1]


def is_terminal(stage: RideStage) -> bool:
    return next_stage(stage) is None


def describe(stage: RideStage, destination: Destination | None = None) -> RideActionDescriptor:
    """Project *stage* to its view-ready descriptor.

    The title is the destination name for every stage except
    ``TRIP_ACCEPTED``, which always shows :data:`EN_ROUTE_TITLE`.
    """
    name = destination.name if destination is not None else None
    address = destination.address if destination is not None else None
    title = EN_ROUTE_TITLE if stage is RideStage.TRIP_ACCEPTED else name

    action = _ACTIONS[stage]
    return RideActionDescriptor(
        stage=stage,
        title_text=title,
        button_label=action.caption if action is not None else None,
        action_kind=action,
        address_text=address,
    )
