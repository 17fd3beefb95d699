"""Core data models: EntityRecord, ThreatContext, Entity, TurnInput."""

from __future__ import annotations

import math
from dataclasses import dataclass

from arena.config import ArenaConfig
from arena.core.enums import EntityKind, ThreatTarget
from arena.core.geometry import Circle, Point, distance, is_inside, line_circle_intersection


@dataclass(frozen=True, slots=True)
class EntityRecord:
    """One raw entity row of the turn input, before any derivation.

    Heroes carry -1 in health, vx, vy, near_base and threat_for.
    """

    id: int
    kind: int
    x: int
    y: int
    shield_life: int = 0
    is_controlled: int = 0
    health: int = 0
    vx: int = 0
    vy: int = 0
    near_base: int = 0
    threat_for: int = 0
    turns_before_hit: int | None = None   # Only when the feed reports it


@dataclass(frozen=True, slots=True)
class ThreatContext:
    """Everything an entity needs from the rest of the turn to derive its fields.

    Built by the TurnState once the heroes of both factions are final, then
    handed to every monster constructed in that turn.
    """

    my_base: Circle
    enemy_base: Circle
    enemy_heroes: tuple[Entity, ...] = ()
    enemy_can_cast: bool = False
    turn: int = 0
    config: ArenaConfig = ArenaConfig()


@dataclass(frozen=True, slots=True)
class Entity:
    """A monster or hero as seen this turn.  Never mutated after construction."""

    id: int
    kind: EntityKind
    position: Point
    vector: Point = Point()
    shield_life: int = 0
    is_controlled: bool = False
    health: int = 0
    near_base: bool = False
    threat_for: ThreatTarget = ThreatTarget.NONE
    last_visible_turn: int = 0
    # -- derived --
    distance_from_my_base: float = 0.0
    distance_from_enemy_base: float = 0.0
    turns_before_hit: int | None = None
    can_hit: bool = False

    @classmethod
    def from_record(cls, record: EntityRecord, context: ThreatContext) -> Entity:
        """Build an entity and derive its distances and threat fields.

        Raises ValueError on an unknown kind or threat code.
        """
        kind = EntityKind(record.kind)
        is_monster = kind == EntityKind.MONSTER
        # The feed reports -1 for the monster-only fields of heroes
        threat_for = ThreatTarget(record.threat_for) if is_monster else ThreatTarget.NONE
        position = Point(record.x, record.y)
        vector = Point(record.vx, record.vy) if is_monster else Point()
        dist_my = distance(position, context.my_base.center)
        dist_enemy = distance(position, context.enemy_base.center)

        turns: int | None = record.turns_before_hit
        can_hit = False
        if is_monster:
            if turns is None and threat_for == ThreatTarget.MY_BASE:
                turns = _estimate_turns_before_hit(position, vector, context)
            can_hit = _can_hit_base(
                position, record.shield_life, dist_my, turns, context,
            )

        return cls(
            id=record.id,
            kind=kind,
            position=position,
            vector=vector,
            shield_life=record.shield_life,
            is_controlled=bool(record.is_controlled),
            health=max(record.health, 0),
            near_base=is_monster and record.near_base > 0,
            threat_for=threat_for,
            last_visible_turn=context.turn,
            distance_from_my_base=dist_my,
            distance_from_enemy_base=dist_enemy,
            turns_before_hit=turns,
            can_hit=can_hit,
        )

    # -- kind --

    def is_monster(self) -> bool:
        return self.kind == EntityKind.MONSTER

    def is_my_hero(self) -> bool:
        return self.kind == EntityKind.MY_HERO

    def is_enemy_hero(self) -> bool:
        return self.kind == EntityKind.ENEMY_HERO

    # -- threat --

    def is_dangerous_for_my_base(self) -> bool:
        return self.threat_for == ThreatTarget.MY_BASE

    def is_dangerous_for_enemy(self) -> bool:
        return self.threat_for == ThreatTarget.ENEMY_BASE

    def will_hit_my_base(self) -> bool:
        return self.turns_before_hit == 0

    def can_hit_my_base(self) -> bool:
        """Strikes this turn, or could be blown into the base by an enemy WIND.

        Evaluated once, when the entity was built.
        """
        return self.can_hit

    def distance_to(self, point: Point) -> float:
        return distance(self.position, point)


def _estimate_turns_before_hit(
    position: Point,
    vector: Point,
    context: ThreatContext,
) -> int | None:
    """Whole turns left before the turn in which the monster strikes my base.

    Outside the base the monster follows its vector up to the base circle;
    inside it walks straight at the base at the locked-on speed.
    """
    cfg = context.config
    base = context.my_base
    speed = vector.norm()
    if speed == 0:
        return None

    if is_inside(base, position):
        remaining = distance(position, base.center) - cfg.base_damage_radius
        steps = math.ceil(remaining / cfg.monster_base_speed)
    else:
        entry = line_circle_intersection(
            position, position + vector, base.center, base.radius, position,
        )
        if entry is None:
            return None
        to_entry = entry - position
        if to_entry.x * vector.x + to_entry.y * vector.y < 0:
            return None  # moving away
        steps = math.ceil(to_entry.norm() / speed)
        steps += math.ceil((base.radius - cfg.base_damage_radius) / cfg.monster_base_speed)
    return max(steps - 1, 0)


def _can_hit_base(
    position: Point,
    shield_life: int,
    dist_my: float,
    turns_before_hit: int | None,
    context: ThreatContext,
) -> bool:
    if turns_before_hit == 0:
        return True

    # An enemy hero in range may WIND the monster into the base
    cfg = context.config
    if shield_life == 0 and dist_my <= cfg.wind_threat_distance and context.enemy_can_cast:
        return any(
            hero.distance_to(position) <= cfg.wind_range for hero in context.enemy_heroes
        )
    return False


@dataclass(frozen=True, slots=True)
class TurnInput:
    """Both faction snapshots plus every entity row of one turn."""

    health: int
    mana: int
    enemy_health: int
    enemy_mana: int
    entities: tuple[EntityRecord, ...] = ()
