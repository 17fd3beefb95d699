"""Faction aggregate — one player's base, health, mana and live heroes.

Mana is written wholesale at the start of each turn from the game input.
Within a turn it only ever goes down, through ``spend_mana`` called by the
action emission layer when a spell command is issued.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from arena.core.geometry import Circle, Point

if TYPE_CHECKING:
    from arena.core.models import Entity


@dataclass(slots=True)
class Faction:
    """Mutable per-match record of one side."""

    base: Point
    base_health: int = 3
    mana: int = 0
    spell_cost: int = 10
    heroes: list[Entity] = field(default_factory=list)

    # -- turn start --

    def set_health(self, value: int) -> None:
        self.base_health = value

    def set_mana(self, value: int) -> None:
        self.mana = value

    # -- spending --

    def spend_mana(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Cannot spend a negative amount of mana: {amount}")
        self.mana -= amount

    def can_cast(self) -> bool:
        return self.mana >= self.spell_cost

    def can_secure_cast(self, secure_level: int) -> bool:
        """Enough mana for this cast plus *secure_level* more after it."""
        return self.mana >= self.spell_cost * (secure_level + 1)

    # -- geometry --

    def coord_to_base(self, point: Point) -> Point:
        """Per-axis absolute offset of *point* from this base."""
        return Point(abs(self.base.x - point.x), abs(self.base.y - point.y))

    def base_circle(self, radius: float) -> Circle:
        return Circle(self.base, radius)
