from __future__ import annotations

import threading

from skirmish.engine.actions import Action, StepResult, step
from skirmish.engine.game import Game
from skirmish.engine.serialize import action_to_dict
from skirmish.services.telemetry import TelemetryService


class GameSession:
    """One logical game shared by a host.

    The engine has no locking of its own; actions applied through a
    session are serialized and the session always holds the latest
    snapshot.
    """

    def __init__(self, game: Game, telemetry: TelemetryService | None = None) -> None:
        self._game = game
        self._telemetry = telemetry
        self._lock = threading.Lock()

    @property
    def game(self) -> Game:
        with self._lock:
            return self._game

    def apply(self, action: Action) -> StepResult:
        with self._lock:
            result = step(self._game, action)
            if result.ok:
                self._game = result.game
            if self._telemetry is not None:
                if result.ok:
                    self._telemetry.log_events(result.events)
                else:
                    self._telemetry.log(
                        "ACTION_REJECTED",
                        {"action": action_to_dict(action), "error": result.error},
                    )
            return result
