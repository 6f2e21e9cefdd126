"""Driver position models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from ridestate.ingestion.normalize import first_present, opaque_id, safe_float

_ID_KEYS = ("driver_id", "driverId", "id", "uid")
_LAT_KEYS = ("latitude", "lat")
_LNG_KEYS = ("longitude", "lng", "lon")


class Coordinate(BaseModel):
    """A WGS84 latitude/longitude pair.

    Both components must be finite; latitude lies in ``[-90, 90]`` and
    longitude in ``[-180, 180]``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        allow_inf_nan=False,
    )

    latitude: float = Field(..., ge=-90.0, le=90.0, validation_alias=AliasChoices(*_LAT_KEYS))
    longitude: float = Field(..., ge=-180.0, le=180.0, validation_alias=AliasChoices(*_LNG_KEYS))

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class DriverSighting(BaseModel):
    """One reported position update for a driver.

    Accepts the flat telemetry shape ``{"id": ..., "lat": ..., "lng": ...}``
    as well as payloads that nest the coordinates under ``location`` or
    ``position``.

    Parameters
    ----------
    driver_id : str
        Opaque identifier assigned by the telemetry source, kept exactly
        as sent.  Integers are accepted and stringified; strings must not
        be empty or whitespace-only.
    position : Coordinate
        Reported position.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    driver_id: str = Field(..., validation_alias=AliasChoices(*_ID_KEYS))
    position: Coordinate

    @model_validator(mode="before")
    @classmethod
    def _collect_position(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "position" in values:
            return values
        merged = dict(values)
        nested = merged.get("location")
        source = nested if isinstance(nested, dict) else merged
        merged["position"] = {
            "latitude": first_present(source, _LAT_KEYS),
            "longitude": first_present(source, _LNG_KEYS),
        }
        return merged

    @field_validator("driver_id", mode="before")
    @classmethod
    def _normalize_driver_id(cls, value: Any) -> str:
        driver_id = opaque_id(value)
        if driver_id is None:
            raise ValueError("driver id must be a non-empty string or an integer")
        return driver_id


class DriverRecord(BaseModel):
    """A visible driver on the board.

    The position is overwritten in place on every reconciliation for the
    same ``driver_id``.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    driver_id: str
    position: Coordinate
