"""Per-session state bundle."""

from __future__ import annotations

from ridestate.config import RideStateConfig
from ridestate.state.board import DriverBoard
from ridestate.state.events import BoardListener, TransitionListener
from ridestate.state.ride import RideActionState


class RideSession:
    """One map screen's driver board plus one ride's action state.

    The authentication/session collaborator creates a ``RideSession`` when a
    session starts and drops it when the session ends.  Instances must not
    be shared across sessions.
    """

    def __init__(
        self,
        config: RideStateConfig | None = None,
        *,
        on_board_change: BoardListener | None = None,
        on_transition: TransitionListener | None = None,
    ) -> None:
        self.config = config or RideStateConfig()
        self.board = DriverBoard(config=self.config, on_change=on_board_change)
        self.ride = RideActionState(on_transition=on_transition)

    def close(self) -> None:
        self.board.clear()

    def __enter__(self) -> RideSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
