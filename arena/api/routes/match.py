"""POST /api/v1/match/* and GET /api/v1/match/state — live match state."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from arena.api.dependencies import get_match_manager
from arena.api.match_manager import MatchManager
from arena.api.schemas import (
    EntitySchema,
    FactionSchema,
    MatchStartRequest,
    MatchStartResponse,
    PointSchema,
    TurnRequest,
    TurnStateResponse,
)
from arena.core.errors import NoActiveMatchError
from arena.core.geometry import Point
from arena.core.models import Entity, EntityRecord, TurnInput
from arena.core.snapshot import FactionSnapshot, TurnSnapshot

router = APIRouter()


def _point(p: Point) -> PointSchema:
    return PointSchema(x=p.x, y=p.y)


def _serialize_entity(e: Entity) -> EntitySchema:
    return EntitySchema(
        id=e.id,
        kind=e.kind.name.lower(),
        x=e.position.x,
        y=e.position.y,
        vx=e.vector.x,
        vy=e.vector.y,
        shield_life=e.shield_life,
        is_controlled=e.is_controlled,
        health=e.health,
        near_base=e.near_base,
        threat_for=e.threat_for.name.lower(),
        distance_from_my_base=e.distance_from_my_base,
        distance_from_enemy_base=e.distance_from_enemy_base,
        turns_before_hit=e.turns_before_hit,
        will_hit_my_base=e.will_hit_my_base(),
        can_hit_my_base=e.can_hit_my_base(),
    )


def _serialize_faction(f: FactionSnapshot) -> FactionSchema:
    return FactionSchema(
        base=_point(f.base),
        base_health=f.base_health,
        mana=f.mana,
        heroes=[_serialize_entity(h) for h in f.heroes],
    )


def _serialize_snapshot(snap: TurnSnapshot) -> TurnStateResponse:
    return TurnStateResponse(
        turn=snap.turn,
        warn=snap.warn,
        me=_serialize_faction(snap.me),
        enemy=_serialize_faction(snap.enemy),
        monsters=[_serialize_entity(m) for m in snap.monsters],
        threats=list(snap.threats),
        commands=[c.render() for c in snap.commands],
    )


def _to_turn_input(req: TurnRequest) -> TurnInput:
    records = tuple(
        EntityRecord(
            id=r.id, kind=r.type, x=r.x, y=r.y,
            shield_life=r.shield_life, is_controlled=r.is_controlled,
            health=r.health, vx=r.vx, vy=r.vy,
            near_base=r.near_base, threat_for=r.threat_for,
            turns_before_hit=r.turns_before_hit,
        )
        for r in req.entities
    )
    return TurnInput(req.health, req.mana, req.enemy_health, req.enemy_mana, records)


@router.post("/match/start", response_model=MatchStartResponse)
def start_match(
    req: MatchStartRequest,
    manager: MatchManager = Depends(get_match_manager),
) -> MatchStartResponse:
    snap = manager.start(Point(req.base_x, req.base_y), req.heroes_per_player)
    return MatchStartResponse(
        turn=snap.turn,
        heroes_per_player=snap.heroes_per_player,
        my_base=_point(snap.me.base),
        enemy_base=_point(snap.enemy.base),
    )


@router.post("/match/turn", response_model=TurnStateResponse)
def play_turn(
    req: TurnRequest,
    manager: MatchManager = Depends(get_match_manager),
) -> TurnStateResponse:
    try:
        snap = manager.play_turn(_to_turn_input(req))
    except NoActiveMatchError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _serialize_snapshot(snap)


@router.get("/match/state", response_model=TurnStateResponse)
def get_state(
    manager: MatchManager = Depends(get_match_manager),
) -> TurnStateResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=404, detail="No match started yet.")
    return _serialize_snapshot(snap)
