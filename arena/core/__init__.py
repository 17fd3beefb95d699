"""Core data models and turn representation."""

from arena.core.enums import CommandType, EntityKind, ThreatTarget
from arena.core.faction import Faction
from arena.core.geometry import Circle, Point
from arena.core.models import Entity, EntityRecord, ThreatContext, TurnInput
from arena.core.snapshot import FactionSnapshot, TurnSnapshot
from arena.core.turn_state import TurnState

__all__ = [
    "Circle",
    "CommandType",
    "Entity",
    "EntityKind",
    "EntityRecord",
    "Faction",
    "FactionSnapshot",
    "Point",
    "ThreatContext",
    "ThreatTarget",
    "TurnInput",
    "TurnSnapshot",
    "TurnState",
]
