"""Ride lifecycle models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator

from ridestate.ingestion.normalize import safe_str


class RideStage(StrEnum):
    """Named points in a ride's lifecycle, in their fixed forward order."""

    REQUEST_RIDE = "request_ride"
    TRIP_ACCEPTED = "trip_accepted"
    PICKUP_PASSENGER = "pickup_passenger"
    TRIP_IN_PROGRESS = "trip_in_progress"
    END_TRIP = "end_trip"


#: Every ride starts here.
INITIAL_STAGE: RideStage = RideStage.REQUEST_RIDE


class ActionKind(StrEnum):
    """What the panel's action button does when tapped."""

    REQUEST_RIDE = "request_ride"
    GET_DIRECTIONS = "get_directions"
    PICKUP = "pickup"
    DROP_OFF = "drop_off"

    @property
    def caption(self) -> str:
        return _CAPTIONS[self]


_CAPTIONS: dict[ActionKind, str] = {
    ActionKind.REQUEST_RIDE: "CONFIRM UBERX",
    ActionKind.GET_DIRECTIONS: "GET DIRECTIONS",
    ActionKind.PICKUP: "PICKUP PASSENGER",
    ActionKind.DROP_OFF: "DROP OFF PASSENGER",
}


class Destination(BaseModel):
    """Where the ride is headed, as picked by the rider."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    address: str | None = None

    @field_validator("name", "address", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> str | None:
        return safe_str(value)


class RideActionDescriptor(BaseModel):
    """View-ready projection of a ride stage.

    Parameters
    ----------
    stage : RideStage
        Stage this descriptor was derived from.
    title_text : str or None
        Panel title.
    button_label : str or None
        Action button caption; ``None`` hides the button.
    action_kind : ActionKind or None
        Action bound to the button.
    address_text : str or None
        Destination address line shown under the title.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    stage: RideStage
    title_text: str | None = None
    button_label: str | None = None
    action_kind: ActionKind | None = None
    address_text: str | None = None
