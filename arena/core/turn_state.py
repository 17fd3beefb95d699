"""Per-turn state container — the two factions and the visible monsters."""

from __future__ import annotations

import logging

from arena.config import ArenaConfig
from arena.core.enums import EntityKind
from arena.core.errors import TurnOrderError
from arena.core.faction import Faction
from arena.core.geometry import Point
from arena.core.models import Entity, EntityRecord, ThreatContext, TurnInput

logger = logging.getLogger(__name__)

_KNOWN_KINDS = frozenset(int(k) for k in EntityKind)


class TurnState:
    """Rebuilt from scratch every turn; the only holder of cross-entity context.

    Heroes of both factions must be added before the first monster: monster
    threat derivation reads the enemy heroes, and the context it reads is
    frozen when the first monster is built.
    """

    __slots__ = ("config", "heroes_per_player", "turn", "me", "enemy", "monsters", "warn", "_context")

    def __init__(
        self,
        base_corner: Point,
        heroes_per_player: int | None = None,
        config: ArenaConfig | None = None,
    ) -> None:
        if config is None:
            config = ArenaConfig()
        self.config: ArenaConfig = config
        self.heroes_per_player: int = (
            heroes_per_player if heroes_per_player is not None else config.heroes_per_player
        )
        self.turn: int = 0
        enemy_base = Point(
            config.map_width if base_corner.x == 0 else 0,
            config.map_height if base_corner.y == 0 else 0,
        )
        self.me = Faction(base_corner, config.starting_base_health, 0, config.spell_cost)
        self.enemy = Faction(enemy_base, config.starting_base_health, 0, config.spell_cost)
        self.monsters: list[Entity] = []
        self.warn: bool = False
        self._context: ThreatContext | None = None

    # -- lifecycle --

    def new_turn(self, health: int, mana: int, enemy_health: int, enemy_mana: int) -> None:
        self.turn += 1
        self.me.set_health(health)
        self.me.set_mana(mana)
        self.me.heroes = []
        self.enemy.set_health(enemy_health)
        self.enemy.set_mana(enemy_mana)
        self.enemy.heroes = []
        self.monsters = []
        self.warn = False
        self._context = None

    def load_turn(self, turn_input: TurnInput) -> None:
        """Reset, then add heroes before monsters whatever the input order."""
        self.new_turn(
            turn_input.health, turn_input.mana,
            turn_input.enemy_health, turn_input.enemy_mana,
        )
        records = turn_input.entities
        for record in records:
            if record.kind != EntityKind.MONSTER:
                self.add_entity(record)
        for record in records:
            if record.kind == EntityKind.MONSTER:
                self.add_entity(record)
        if self.config.debug:
            logger.debug(
                "Turn %d: %d monsters, %d heroes, %d enemy heroes, %d threats",
                self.turn, len(self.monsters), len(self.me.heroes),
                len(self.enemy.heroes), len(self.threats_to_my_base()),
            )

    def add_entity(self, record: EntityRecord) -> Entity | None:
        """Build an entity from *record* and file it; unknown rows are dropped."""
        if record.kind not in _KNOWN_KINDS:
            self.warn_debug("Unknown entity kind %s (id=%d), dropped", record.kind, record.id)
            return None

        is_monster = record.kind == EntityKind.MONSTER
        if is_monster:
            if self._context is None:
                self._context = self.threat_context()
            context = self._context
        else:
            if self._context is not None:
                raise TurnOrderError(
                    f"Hero {record.id} added after monster threat derivation started"
                )
            context = self.threat_context()

        try:
            entity = Entity.from_record(record, context)
        except ValueError as exc:
            self.warn_debug("Invalid entity row (id=%d): %s, dropped", record.id, exc)
            return None

        if is_monster:
            self.monsters.append(entity)
        elif entity.is_my_hero():
            self.me.heroes.append(entity)
        else:
            self.enemy.heroes.append(entity)
        return entity

    def threat_context(self) -> ThreatContext:
        return ThreatContext(
            my_base=self.me.base_circle(self.config.base_radius),
            enemy_base=self.enemy.base_circle(self.config.base_radius),
            enemy_heroes=tuple(self.enemy.heroes),
            enemy_can_cast=self.enemy.can_cast(),
            turn=self.turn,
            config=self.config,
        )

    def warn_debug(self, message: str, *args: object) -> None:
        """Flag the turn so emitted commands say DEBUG; log why when debugging."""
        if self.config.debug:
            logger.warning(message, *args)
        self.warn = True

    # -- queries --

    def threats_to_my_base(self) -> list[Entity]:
        """Monsters heading for my base, soonest first."""
        threats = [m for m in self.monsters if m.is_dangerous_for_my_base()]
        threats.sort(key=lambda m: (
            m.turns_before_hit if m.turns_before_hit is not None else float("inf"),
            m.distance_from_my_base,
        ))
        return threats

    def entities_by_id(self) -> dict[int, Entity]:
        entities = {e.id: e for e in self.me.heroes}
        entities.update((e.id, e) for e in self.enemy.heroes)
        entities.update((e.id, e) for e in self.monsters)
        return entities
