from __future__ import annotations

import pytest

from ridestate.config import DEFAULT_NEARBY_RADIUS_KM, RideStateConfig
from ridestate.exceptions import RideStateConfigError


def test_defaults() -> None:
    config = RideStateConfig()
    assert config.nearby_radius_km == DEFAULT_NEARBY_RADIUS_KM
    assert config.log_rejected_payloads is True


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDESTATE_NEARBY_RADIUS_KM", "12.5")
    monkeypatch.setenv("RIDESTATE_LOG_REJECTED_PAYLOADS", "off")

    config = RideStateConfig.from_env()

    assert config.nearby_radius_km == 12.5
    assert config.log_rejected_payloads is False


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDESTATE_NEARBY_RADIUS_KM", "12.5")
    assert RideStateConfig.from_env(nearby_radius_km=3.0).nearby_radius_km == 3.0


def test_unparseable_env_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RIDESTATE_NEARBY_RADIUS_KM", "far")
    with pytest.raises(RideStateConfigError):
        RideStateConfig.from_env()


@pytest.mark.parametrize("radius", [0.0, -1.0, float("inf"), float("nan")])
def test_invalid_radius_rejected(radius: float) -> None:
    with pytest.raises(RideStateConfigError):
        RideStateConfig(nearby_radius_km=radius)
