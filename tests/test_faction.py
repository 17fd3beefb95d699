"""Tests for the Faction aggregate — mana affordability and base projection."""

import pytest

from arena.core.faction import Faction
from arena.core.geometry import Point


def _faction(mana: int = 0, base: Point = Point(0, 0)) -> Faction:
    return Faction(base=base, base_health=3, mana=mana, spell_cost=10)


class TestMana:
    def test_can_cast_threshold(self):
        assert _faction(10).can_cast()
        assert not _faction(9).can_cast()

    def test_can_secure_cast(self):
        f = _faction(30)
        assert f.can_secure_cast(0)
        assert f.can_secure_cast(2)
        assert not f.can_secure_cast(3)

    def test_spend_mana_only_decrements(self):
        f = _faction(25)
        f.spend_mana(10)
        assert f.mana == 15
        assert f.can_cast()
        f.spend_mana(10)
        assert not f.can_cast()

    def test_negative_spend_rejected(self):
        f = _faction(25)
        with pytest.raises(ValueError):
            f.spend_mana(-10)
        assert f.mana == 25

    def test_wholesale_overwrite(self):
        f = _faction(5)
        f.set_mana(80)
        f.set_health(1)
        assert f.mana == 80
        assert f.base_health == 1


class TestBaseProjection:
    def test_coord_to_base_from_origin(self):
        assert _faction().coord_to_base(Point(1200, 800)) == Point(1200, 800)

    def test_coord_to_base_from_far_corner(self):
        f = _faction(base=Point(17630, 9000))
        assert f.coord_to_base(Point(16630, 8500)) == Point(1000, 500)

    def test_base_circle(self):
        c = _faction(base=Point(17630, 9000)).base_circle(5000)
        assert c.center == Point(17630, 9000)
        assert c.radius == 5000
