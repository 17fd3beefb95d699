"""Tests for the entity model and its construction-time threat derivation."""

from __future__ import annotations

import dataclasses
import unittest

from arena.config import ArenaConfig
from arena.core.enums import EntityKind, ThreatTarget
from arena.core.geometry import Circle, Point
from arena.core.models import Entity, EntityRecord, ThreatContext

CFG = ArenaConfig()
MY_BASE = Circle(Point(0, 0), CFG.base_radius)
ENEMY_BASE = Circle(Point(CFG.map_width, CFG.map_height), CFG.base_radius)


def _context(enemy_heroes: tuple[Entity, ...] = (), enemy_can_cast: bool = True, turn: int = 1) -> ThreatContext:
    return ThreatContext(
        my_base=MY_BASE,
        enemy_base=ENEMY_BASE,
        enemy_heroes=enemy_heroes,
        enemy_can_cast=enemy_can_cast,
        turn=turn,
        config=CFG,
    )


def _hero(eid: int, x: int, y: int, kind: EntityKind = EntityKind.ENEMY_HERO) -> Entity:
    return Entity.from_record(EntityRecord(id=eid, kind=int(kind), x=x, y=y), _context())


def _monster(
    x: int, y: int,
    vx: int = 0, vy: int = 0,
    shield_life: int = 0,
    threat_for: ThreatTarget = ThreatTarget.MY_BASE,
    turns_before_hit: int | None = None,
    context: ThreatContext | None = None,
) -> Entity:
    record = EntityRecord(
        id=10, kind=EntityKind.MONSTER, x=x, y=y, shield_life=shield_life,
        health=14, vx=vx, vy=vy, near_base=1, threat_for=int(threat_for),
        turns_before_hit=turns_before_hit,
    )
    return Entity.from_record(record, context if context is not None else _context())


class TestEntityBasics(unittest.TestCase):
    """Kind predicates, distances and immutability."""

    def test_kind_predicates(self):
        m = _monster(6000, 0)
        mine = _hero(1, 100, 100, EntityKind.MY_HERO)
        theirs = _hero(4, 100, 100)
        self.assertTrue(m.is_monster())
        self.assertFalse(m.is_my_hero() or m.is_enemy_hero())
        self.assertTrue(mine.is_my_hero())
        self.assertTrue(theirs.is_enemy_hero())

    def test_distances_to_bases(self):
        m = _monster(3000, 4000)
        self.assertAlmostEqual(m.distance_from_my_base, 5000.0)
        self.assertAlmostEqual(m.distance_to(Point(3000, 0)), 4000.0)
        self.assertAlmostEqual(
            m.distance_from_enemy_base,
            Point(CFG.map_width - 3000, CFG.map_height - 4000).norm(),
        )

    def test_threat_target_flags(self):
        self.assertTrue(_monster(6000, 0).is_dangerous_for_my_base())
        enemy_side = _monster(12000, 6000, threat_for=ThreatTarget.ENEMY_BASE)
        self.assertTrue(enemy_side.is_dangerous_for_enemy())
        self.assertFalse(enemy_side.is_dangerous_for_my_base())

    def test_raw_flags_converted(self):
        m = _monster(6000, 0)
        self.assertTrue(m.near_base)
        self.assertFalse(m.is_controlled)
        self.assertEqual(m.health, 14)
        self.assertEqual(m.last_visible_turn, 1)

    def test_entity_is_frozen(self):
        m = _monster(6000, 0)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            m.shield_life = 5  # type: ignore[misc]

    def test_unknown_kind_rejected(self):
        with self.assertRaises(ValueError):
            Entity.from_record(EntityRecord(id=1, kind=7, x=0, y=0), _context())

    def test_heroes_never_flagged(self):
        hero = _hero(4, 1000, 0)
        self.assertIsNone(hero.turns_before_hit)
        self.assertFalse(hero.can_hit_my_base())


class TestTurnsBeforeHit(unittest.TestCase):
    """Estimate of the turns left before a monster strikes my base."""

    def test_upstream_value_wins(self):
        m = _monster(6000, 0, vx=-500, turns_before_hit=2)
        self.assertEqual(m.turns_before_hit, 2)
        self.assertFalse(m.will_hit_my_base())

    def test_outside_base_follows_vector_then_locks_on(self):
        # 1000 to the perimeter at 500/turn, then 4700 at 400/turn
        m = _monster(6000, 0, vx=-500)
        self.assertEqual(m.turns_before_hit, 13)

    def test_vertical_trajectory(self):
        m = _monster(0, 6000, vy=-400)
        self.assertEqual(m.turns_before_hit, 14)

    def test_inside_base(self):
        self.assertEqual(_monster(1000, 0, vx=-400).turns_before_hit, 1)

    def test_strikes_this_turn(self):
        m = _monster(500, 0, vx=-400)
        self.assertEqual(m.turns_before_hit, 0)
        self.assertTrue(m.will_hit_my_base())
        self.assertTrue(m.can_hit_my_base())

    def test_moving_away_is_undefined(self):
        self.assertIsNone(_monster(6000, 0, vx=500).turns_before_hit)

    def test_missing_trajectory_is_undefined(self):
        self.assertIsNone(_monster(6000, 6000, vx=500).turns_before_hit)

    def test_stationary_is_undefined(self):
        self.assertIsNone(_monster(6000, 0).turns_before_hit)

    def test_not_targeting_my_base_is_undefined(self):
        m = _monster(6000, 0, vx=-500, threat_for=ThreatTarget.NONE)
        self.assertIsNone(m.turns_before_hit)


class TestCanHitMyBase(unittest.TestCase):
    """Strike this turn, or an enemy WIND could push the monster in."""

    def setUp(self):
        self.enemy_near = _hero(4, 3000, 500)       # ~707 from (2500, 0)
        self.enemy_far = _hero(5, 9000, 4000)

    def test_far_shielded_monster_cannot_hit(self):
        ctx = _context((self.enemy_near,))
        m = _monster(6000, 0, vx=-500, shield_life=3, turns_before_hit=2, context=ctx)
        self.assertFalse(m.will_hit_my_base())
        self.assertFalse(m.can_hit_my_base())

    def test_shield_blocks_wind_threat(self):
        ctx = _context((self.enemy_near,))
        m = _monster(2500, 0, vx=-400, shield_life=1, turns_before_hit=2, context=ctx)
        self.assertFalse(m.can_hit_my_base())

    def test_enemy_hero_in_wind_range(self):
        ctx = _context((self.enemy_far, self.enemy_near))
        m = _monster(2500, 0, vx=-400, turns_before_hit=2, context=ctx)
        self.assertTrue(m.can_hit_my_base())

    def test_enemy_without_mana(self):
        ctx = _context((self.enemy_near,), enemy_can_cast=False)
        m = _monster(2500, 0, vx=-400, turns_before_hit=2, context=ctx)
        self.assertFalse(m.can_hit_my_base())

    def test_enemy_hero_out_of_range(self):
        ctx = _context((self.enemy_far,))
        m = _monster(2500, 0, vx=-400, turns_before_hit=2, context=ctx)
        self.assertFalse(m.can_hit_my_base())

    def test_monster_too_far_from_base(self):
        ctx = _context((_hero(4, 3500, 0),))
        m = _monster(3000, 0, vx=-400, turns_before_hit=2, context=ctx)
        self.assertFalse(m.can_hit_my_base())

    def test_threshold_distance_is_inclusive(self):
        # Monster exactly 2900 from my base, enemy hero exactly 1280 away
        ctx = _context((_hero(4, 2900 + 1280, 0),))
        m = _monster(2900, 0, turns_before_hit=2, context=ctx)
        self.assertEqual(m.distance_from_my_base, CFG.wind_threat_distance)
        self.assertTrue(m.can_hit_my_base())

    def test_one_unit_past_base_threshold(self):
        ctx = _context((_hero(4, 2901 + 1280, 0),))
        m = _monster(2901, 0, turns_before_hit=2, context=ctx)
        self.assertFalse(m.can_hit_my_base())

    def test_wind_range_is_inclusive(self):
        ctx = _context((_hero(4, 2000, 1280),))
        m = _monster(2000, 0, turns_before_hit=2, context=ctx)
        self.assertTrue(m.can_hit_my_base())

    def test_one_unit_past_wind_range(self):
        ctx = _context((_hero(4, 2000, 1281),))
        m = _monster(2000, 0, turns_before_hit=2, context=ctx)
        self.assertFalse(m.can_hit_my_base())

    def test_context_is_a_snapshot(self):
        heroes = [self.enemy_near]
        ctx = _context(tuple(heroes))
        m = _monster(2500, 0, turns_before_hit=2, context=ctx)
        heroes.clear()
        self.assertTrue(m.can_hit_my_base())


if __name__ == "__main__":
    unittest.main()
