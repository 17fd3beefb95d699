"""MatchManager — owns the single live TurnState served by the API.

Requests are handled on a thread pool, so every read and write of the
state goes through one lock.  Readers only ever see a TurnSnapshot taken
while the lock was held.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from arena.core.errors import NoActiveMatchError
from arena.core.snapshot import TurnSnapshot
from arena.core.turn_state import TurnState
from arena.engine.brain import Brain

if TYPE_CHECKING:
    from arena.config import ArenaConfig
    from arena.core.geometry import Point
    from arena.core.models import TurnInput

logger = logging.getLogger(__name__)


class MatchManager:
    """Thread-safe holder of the current match and its latest snapshot."""

    def __init__(self, config: ArenaConfig, brain: Brain | None = None) -> None:
        self.config = config
        self._brain = brain if brain is not None else Brain()
        self._lock = threading.Lock()
        self._state: TurnState | None = None
        self._latest_snapshot: TurnSnapshot | None = None

    def start(self, base: Point, heroes_per_player: int) -> TurnSnapshot:
        with self._lock:
            self._state = TurnState(base, heroes_per_player, self.config)
            self._latest_snapshot = TurnSnapshot.from_state(self._state)
            logger.info("Match started: base %s vs %s", base, self._state.enemy.base)
            return self._latest_snapshot

    def play_turn(self, turn_input: TurnInput) -> TurnSnapshot:
        with self._lock:
            if self._state is None:
                raise NoActiveMatchError("Start a match before submitting turns.")
            self._state.load_turn(turn_input)
            commands = self._brain.next_actions(self._state)
            self._latest_snapshot = TurnSnapshot.from_state(self._state, tuple(commands))
            return self._latest_snapshot

    def get_snapshot(self) -> TurnSnapshot | None:
        with self._lock:
            return self._latest_snapshot
