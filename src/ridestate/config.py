"""Library configuration for ridestate."""

from __future__ import annotations

import dataclasses
import math
import os
from typing import Any

from ridestate.exceptions import RideStateConfigError

#: Radius used by :meth:`DriverBoard.nearby` when none is given.  Matches
#: the search radius the map screen uses when fetching drivers around the
#: rider's location.
DEFAULT_NEARBY_RADIUS_KM: float = 50.0


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class RideStateConfig:
    """Per-session configuration.

    Parameters
    ----------
    nearby_radius_km : float
        Default search radius for :meth:`DriverBoard.nearby`, in
        kilometres.  Must be positive and finite.
    log_rejected_payloads : bool
        Emit rejected telemetry payloads (redacted) at DEBUG level.
    """

    nearby_radius_km: float = DEFAULT_NEARBY_RADIUS_KM
    log_rejected_payloads: bool = True

    def __post_init__(self) -> None:
        radius = self.nearby_radius_km
        if isinstance(radius, bool) or not isinstance(radius, (int, float)):
            raise RideStateConfigError(f"nearby_radius_km must be a number, got {radius!r}")
        if not math.isfinite(radius) or radius <= 0:
            raise RideStateConfigError(f"nearby_radius_km must be positive, got {radius!r}")

    @classmethod
    def from_env(cls, **overrides: Any) -> RideStateConfig:
        """Create configuration from environment variables.

        Reads ``RIDESTATE_NEARBY_RADIUS_KM`` and
        ``RIDESTATE_LOG_REJECTED_PAYLOADS``.  Explicit keyword arguments
        override environment values.

        Raises
        ------
        RideStateConfigError
            If an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        radius_env = env.get("RIDESTATE_NEARBY_RADIUS_KM")
        if radius_env is not None and "nearby_radius_km" not in overrides:
            try:
                config_kwargs["nearby_radius_km"] = float(radius_env)
            except ValueError as exc:
                raise RideStateConfigError(
                    f"RIDESTATE_NEARBY_RADIUS_KM is not a number: {radius_env!r}"
                ) from exc

        if "log_rejected_payloads" not in overrides:
            config_kwargs["log_rejected_payloads"] = _env_bool(
                env.get("RIDESTATE_LOG_REJECTED_PAYLOADS"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
