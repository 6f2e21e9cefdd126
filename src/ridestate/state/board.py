"""Live driver board.

This is the only component allowed to mutate the set of visible drivers.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping
from threading import RLock
from typing import Any

from ridestate._geo import haversine_km
from ridestate.config import RideStateConfig
from ridestate.exceptions import InvalidRadiusError
from ridestate.models.driver import Coordinate, DriverRecord, DriverSighting
from ridestate.state.events import BoardListener, ReconcileResult

_logger = logging.getLogger(__name__)


class DriverBoard:
    """Duplicate-free set of visible drivers keyed by driver id.

    Given the same sequence of sightings, the board always ends in the same
    state: one record per distinct id, positioned at that id's latest
    sighting.  Reconciling a sighting that is already reflected is a no-op
    apart from the returned :attr:`ReconcileResult.UPDATED`.

    Mutations are serialized with an internal lock so one board can be fed
    by several ingest producers.
    """

    def __init__(
        self,
        *,
        config: RideStateConfig | None = None,
        on_change: BoardListener | None = None,
    ) -> None:
        self._config = config or RideStateConfig()
        self._on_change = on_change
        self._records: dict[str, DriverRecord] = {}
        self._lock = RLock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, driver_id: object) -> bool:
        return driver_id in self._records

    def __iter__(self) -> Iterator[DriverRecord]:
        return iter(self.snapshot())

    def reconcile(self, sighting: DriverSighting | Mapping[str, Any]) -> ReconcileResult:
        """Apply one sighting.

        Parameters
        ----------
        sighting : DriverSighting or Mapping
            A validated sighting, or a raw telemetry payload such as
            ``{"id": "d1", "lat": 37.0, "lng": -122.0}``.

        Returns
        -------
        ReconcileResult
            ``UPDATED`` if the driver was already on the board and its
            position was overwritten, ``INSERTED`` otherwise.

        Raises
        ------
        InvalidSightingError
            If the id is empty or the coordinates are not a valid finite
            latitude/longitude pair.  The board is left unchanged.
        """
        if not isinstance(sighting, DriverSighting):
            # Deferred: ingestion.telemetry depends on this module.
            from ridestate.ingestion.telemetry import parse_sighting

            sighting = parse_sighting(sighting, log_rejected=self._config.log_rejected_payloads)

        with self._lock:
            record = self._records.get(sighting.driver_id)
            if record is not None:
                record.position = sighting.position
                result = ReconcileResult.UPDATED
            else:
                record = DriverRecord(driver_id=sighting.driver_id, position=sighting.position)
                self._records[sighting.driver_id] = record
                result = ReconcileResult.INSERTED
            snapshot = record.model_copy()

        _logger.debug("Driver %s %s at %s", sighting.driver_id, result, sighting.position.as_tuple())
        self._notify(result, snapshot)
        return result

    def remove(self, driver_id: str) -> bool:
        """Drop *driver_id* from the board.

        The telemetry collaborator decides when a driver has gone stale or
        disconnected; the board never evicts on its own.

        Returns
        -------
        bool
            ``True`` if a record was removed, ``False`` if the id was unknown.
        """
        with self._lock:
            record = self._records.pop(driver_id, None)
        if record is None:
            return False

        _logger.debug("Driver %s removed", driver_id)
        self._notify(ReconcileResult.REMOVED, record)
        return True

    def clear(self) -> None:
        """Drop every record, e.g. when the session ends.

        Fires ``on_change(REMOVED, record)`` once per dropped record.
        """
        with self._lock:
            dropped = list(self._records.values())
            self._records.clear()
        if dropped:
            _logger.debug("Board cleared, %d driver(s) removed", len(dropped))
        for record in dropped:
            self._notify(ReconcileResult.REMOVED, record)

    def get(self, driver_id: str) -> DriverRecord | None:
        record = self._records.get(driver_id)
        return record.model_copy() if record is not None else None

    def snapshot(self) -> list[DriverRecord]:
        """Copies of the current records for rendering.

        Order is insertion order, but rendering should not depend on it.
        """
        with self._lock:
            return [record.model_copy() for record in self._records.values()]

    def nearby(self, center: Coordinate, radius_km: float | None = None) -> list[DriverRecord]:
        """Records within *radius_km* of *center*, closest first.

        *radius_km* defaults to :attr:`RideStateConfig.nearby_radius_km`.
        """
        radius = self._config.nearby_radius_km if radius_km is None else radius_km
        if math.isnan(radius) or radius < 0:
            raise InvalidRadiusError(f"radius_km must be non-negative, got {radius!r}", radius_km=radius)

        ranked: list[tuple[float, DriverRecord]] = []
        for record in self.snapshot():
            distance = haversine_km(center, record.position)
            if distance <= radius:
                ranked.append((distance, record))
        ranked.sort(key=lambda item: item[0])
        return [record for _, record in ranked]

    def _notify(self, result: ReconcileResult, record: DriverRecord) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(result, record)
        except Exception:
            _logger.debug("on_change callback failed", exc_info=True)
