"""Decision layer entry point: one command per hero per turn."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arena.engine.actions import ActionEmitter, Command

if TYPE_CHECKING:
    from arena.core.turn_state import TurnState


class Brain:
    """Placeholder policy: every hero holds its position."""

    def next_actions(self, state: TurnState) -> list[Command]:
        emitter = ActionEmitter(state)
        return [emitter.wait("TODO") for _ in range(state.heroes_per_player)]
