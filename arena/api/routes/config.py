"""GET /api/v1/config — expose the ruleset constants."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from arena.api.dependencies import get_match_manager
from arena.api.match_manager import MatchManager
from arena.api.schemas import ArenaConfigResponse

router = APIRouter()


@router.get("/config", response_model=ArenaConfigResponse)
def get_config(
    manager: MatchManager = Depends(get_match_manager),
) -> ArenaConfigResponse:
    cfg = manager.config
    return ArenaConfigResponse(
        map_width=cfg.map_width,
        map_height=cfg.map_height,
        base_radius=cfg.base_radius,
        base_damage_radius=cfg.base_damage_radius,
        monster_base_speed=cfg.monster_base_speed,
        heroes_per_player=cfg.heroes_per_player,
        spell_cost=cfg.spell_cost,
        wind_range=cfg.wind_range,
        wind_threat_distance=cfg.wind_threat_distance,
        debug=cfg.debug,
    )
