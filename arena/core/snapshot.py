"""Immutable snapshot of a TurnState for readers on other threads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arena.core.geometry import Point
from arena.core.models import Entity

if TYPE_CHECKING:
    from arena.core.faction import Faction
    from arena.core.turn_state import TurnState
    from arena.engine.actions import Command


@dataclass(frozen=True, slots=True)
class FactionSnapshot:
    base: Point
    base_health: int
    mana: int
    heroes: tuple[Entity, ...] = ()

    @classmethod
    def from_faction(cls, faction: Faction) -> FactionSnapshot:
        return cls(
            base=faction.base,
            base_health=faction.base_health,
            mana=faction.mana,
            heroes=tuple(faction.heroes),
        )


@dataclass(frozen=True, slots=True)
class TurnSnapshot:
    """Read-only view of one turn, safe to share across threads.

    Entities and commands are frozen already, so only the containers that
    the TurnState mutates between turns are copied.
    """

    turn: int
    heroes_per_player: int
    warn: bool
    me: FactionSnapshot
    enemy: FactionSnapshot
    monsters: tuple[Entity, ...] = ()
    threats: tuple[int, ...] = ()
    commands: tuple[Command, ...] = ()

    @classmethod
    def from_state(cls, state: TurnState, commands: tuple[Command, ...] = ()) -> TurnSnapshot:
        return cls(
            turn=state.turn,
            heroes_per_player=state.heroes_per_player,
            warn=state.warn,
            me=FactionSnapshot.from_faction(state.me),
            enemy=FactionSnapshot.from_faction(state.enemy),
            monsters=tuple(state.monsters),
            threats=tuple(m.id for m in state.threats_to_my_base()),
            commands=tuple(commands),
        )
