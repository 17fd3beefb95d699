"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class EntityKind(IntEnum):
    """Entity type codes as reported by the game feed."""

    MONSTER = 0
    MY_HERO = 1
    ENEMY_HERO = 2


@unique
class ThreatTarget(IntEnum):
    """Which base a monster's current trajectory endangers."""

    NONE = 0
    MY_BASE = 1
    ENEMY_BASE = 2


@unique
class CommandType(IntEnum):
    """Commands a hero can be given for one turn."""

    WAIT = 0
    MOVE = 1
    WIND = 2
    SHIELD = 3
    CONTROL = 4
