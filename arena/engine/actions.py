"""Action emission — turns hero decisions into protocol commands.

This is the only layer that spends mana: each spell command debits the
spell cost from ``state.me`` at the moment it is emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arena.core.enums import CommandType
from arena.core.geometry import Point

if TYPE_CHECKING:
    from arena.core.models import Entity
    from arena.core.turn_state import TurnState

DEBUG_MESSAGE = "DEBUG"


@dataclass(frozen=True, slots=True)
class Command:
    """One hero's order for the turn."""

    type: CommandType
    target: Point | None = None
    entity_id: int | None = None
    message: str = ""

    def render(self) -> str:
        """Protocol line, e.g. ``SPELL CONTROL 12 8000 4500 msg``."""
        parts: list[str]
        match self.type:
            case CommandType.WAIT:
                parts = ["WAIT"]
            case CommandType.MOVE:
                parts = ["MOVE", *self._coords()]
            case CommandType.WIND:
                parts = ["SPELL", "WIND", *self._coords()]
            case CommandType.SHIELD:
                parts = ["SPELL", "SHIELD", str(self.entity_id)]
            case CommandType.CONTROL:
                parts = ["SPELL", "CONTROL", str(self.entity_id), *self._coords()]
        if self.message:
            parts.append(self.message)
        return " ".join(parts)

    def _coords(self) -> list[str]:
        x, y = (self.target or Point()).rounded()
        return [str(x), str(y)]


class ActionEmitter:
    """Builds commands against the live TurnState of the current turn."""

    __slots__ = ("_state",)

    def __init__(self, state: TurnState) -> None:
        self._state = state

    def _message(self, message: str) -> str:
        return DEBUG_MESSAGE if self._state.warn else message

    def _cast(self) -> None:
        self._state.me.spend_mana(self._state.config.spell_cost)

    def wait(self, message: str = "") -> Command:
        return Command(CommandType.WAIT, message=self._message(message))

    def move(self, target: Point, message: str = "") -> Command:
        return Command(CommandType.MOVE, target=target, message=self._message(message))

    def cast_wind(self, target: Point, message: str = "") -> Command:
        self._cast()
        return Command(CommandType.WIND, target=target, message=self._message(message))

    def cast_shield(self, entity: Entity, message: str = "") -> Command:
        self._cast()
        return Command(CommandType.SHIELD, entity_id=entity.id, message=self._message(message))

    def cast_control(self, entity: Entity, target: Point, message: str = "") -> Command:
        self._cast()
        return Command(
            CommandType.CONTROL, target=target, entity_id=entity.id,
            message=self._message(message),
        )
