from __future__ import annotations

import logging

import pytest

from ridestate.exceptions import InvalidSightingError
from ridestate.ingestion.telemetry import parse_sighting, reconcile_many
from ridestate.state.board import DriverBoard


class TestParseSighting:
    def test_flat_payload(self) -> None:
        sighting = parse_sighting({"id": "d1", "lat": 37.0, "lng": -122.0})
        assert sighting.driver_id == "d1"
        assert sighting.position.as_tuple() == (37.0, -122.0)

    def test_nested_location_and_aliases(self) -> None:
        sighting = parse_sighting({"uid": " abc ", "location": {"latitude": "12.5", "longitude": "-3.25"}})
        assert sighting.driver_id == " abc "
        assert sighting.position.as_tuple() == (12.5, -3.25)

    def test_numeric_id_is_stringified(self) -> None:
        assert parse_sighting({"driverId": 42, "lat": 0, "lon": 0}).driver_id == "42"

    @pytest.mark.parametrize("driver_id", ["null", "nan", "NaN", "--", " d1", "d1 "])
    def test_unusual_ids_kept_verbatim(self, driver_id: str) -> None:
        assert parse_sighting({"id": driver_id, "lat": 1.0, "lng": 1.0}).driver_id == driver_id

    @pytest.mark.parametrize("driver_id", [None, True, 1.5, ["d1"], "", " \t "])
    def test_unusable_ids_rejected(self, driver_id: object) -> None:
        with pytest.raises(InvalidSightingError):
            parse_sighting({"id": driver_id, "lat": 1.0, "lng": 1.0})

    def test_error_carries_driver_id_and_details(self) -> None:
        with pytest.raises(InvalidSightingError) as excinfo:
            parse_sighting({"id": "d9", "lat": 123.0, "lng": 0.0})
        assert excinfo.value.driver_id == "d9"
        assert excinfo.value.errors

    def test_non_mapping_payload(self) -> None:
        with pytest.raises(InvalidSightingError):
            parse_sighting(["d1", 1.0, 2.0])  # type: ignore[arg-type]

    def test_rejected_payload_logged_redacted(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ridestate.ingestion.telemetry")
        with pytest.raises(InvalidSightingError):
            parse_sighting({"id": "d1", "lat": 999, "lng": 0, "phone": "+15550100"})
        assert "+15550100" not in caplog.text
        assert "<redacted>" in caplog.text

    def test_logging_can_be_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ridestate.ingestion.telemetry")
        with pytest.raises(InvalidSightingError):
            parse_sighting({"id": "", "lat": 0, "lng": 0}, log_rejected=False)
        assert caplog.text == ""


def test_reconcile_many_counts_each_branch() -> None:
    board = DriverBoard()
    result = reconcile_many(
        board,
        [
            {"id": "a", "lat": 1.0, "lng": 1.0},
            {"id": "b", "lat": 2.0, "lng": 2.0},
            {"id": "a", "lat": 1.5, "lng": 1.5},
            {"id": "", "lat": 0.0, "lng": 0.0},
            {"id": "c", "lat": 95.0, "lng": 0.0},
        ],
    )

    assert (result.inserted, result.updated, result.rejected) == (2, 1, 2)
    assert result.accepted == 3
    assert len(result.errors) == 2
    assert len(board) == 2
