"""Telemetry ingestion.

Turns raw driver position payloads from the telemetry collaborator into
validated :class:`DriverSighting` objects and feeds them to a board.  The
transport delivering the payloads is not this module's concern.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from ridestate._redact import redact_for_log
from ridestate.exceptions import InvalidSightingError
from ridestate.ingestion.normalize import first_present, opaque_id
from ridestate.models.driver import DriverSighting
from ridestate.state.board import DriverBoard
from ridestate.state.events import ReconcileResult

_logger = logging.getLogger(__name__)

_ID_KEYS = ("driver_id", "driverId", "id", "uid")


@dataclasses.dataclass
class BatchResult:
    """Outcome counts for :func:`reconcile_many`."""

    inserted: int = 0
    updated: int = 0
    rejected: int = 0
    errors: list[InvalidSightingError] = dataclasses.field(default_factory=list)

    @property
    def accepted(self) -> int:
        return self.inserted + self.updated


def parse_sighting(payload: Mapping[str, Any], *, log_rejected: bool = True) -> DriverSighting:
    """Validate a raw telemetry payload.

    Parameters
    ----------
    payload : Mapping
        Shape ``{"id": str, "lat": float, "lng": float}``; see
        :class:`DriverSighting` for the accepted aliases.
    log_rejected : bool
        Log the (redacted) payload at DEBUG when it is rejected.

    Raises
    ------
    InvalidSightingError
        If the payload is not a mapping, the id is empty, or the
        coordinates are missing, non-finite or out of range.
    """
    if not isinstance(payload, Mapping):
        raise InvalidSightingError(f"Sighting payload must be a mapping, got {type(payload).__name__}")

    data = dict(payload)
    try:
        return DriverSighting.model_validate(data)
    except ValidationError as exc:
        driver_id = opaque_id(first_present(data, _ID_KEYS))
        if log_rejected:
            _logger.debug("Rejected sighting payload: %s", redact_for_log(data))
        errors = [dict(err) for err in exc.errors(include_url=False)]
        raise InvalidSightingError(
            f"Invalid sighting for driver {driver_id!r}: {exc.error_count()} validation error(s)",
            driver_id=driver_id,
            errors=errors,
        ) from exc


def reconcile_many(
    board: DriverBoard,
    payloads: Iterable[DriverSighting | Mapping[str, Any]],
) -> BatchResult:
    """Reconcile a batch of sightings.

    Every sighting is applied independently; an invalid one is counted and
    skipped without aborting the batch.
    """
    result = BatchResult()
    for payload in payloads:
        try:
            outcome = board.reconcile(payload)
        except InvalidSightingError as exc:
            result.rejected += 1
            result.errors.append(exc)
            continue
        if outcome is ReconcileResult.INSERTED:
            result.inserted += 1
        else:
            result.updated += 1

    if result.rejected:
        _logger.debug(
            "Batch reconciled: %d inserted, %d updated, %d rejected",
            result.inserted,
            result.updated,
            result.rejected,
        )
    return result
