"""Arena ruleset constants and runtime configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ArenaConfig:
    """Immutable configuration for one match."""

    # Map
    map_width: int = 17630
    map_height: int = 9000

    # Bases
    base_radius: int = 5000
    base_damage_radius: int = 300          # Monsters inside this radius strike the base
    monster_base_speed: int = 400          # Monster speed once it locks onto a base
    starting_base_health: int = 3

    # Heroes
    heroes_per_player: int = 3

    # Spells
    spell_cost: int = 10
    wind_range: int = 1280                 # Max distance between caster and WIND target
    wind_threat_distance: int = 2900       # Monsters this close can be pushed into the base

    # Logging
    log_level: str = "INFO"
    debug: bool = True                     # Per-turn diagnostics on stderr
