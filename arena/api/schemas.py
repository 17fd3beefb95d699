"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Geometry ---

class PointSchema(BaseModel):
    x: float
    y: float


class LineCircleRequest(BaseModel):
    origin: PointSchema
    dest: PointSchema
    center: PointSchema
    radius: float = Field(..., ge=0)
    close: PointSchema


class CircleCircleRequest(BaseModel):
    c1: PointSchema
    r1: float = Field(..., ge=0)
    c2: PointSchema
    r2: float = Field(..., ge=0)
    close: PointSchema


class IntersectionResponse(BaseModel):
    point: PointSchema | None = None
    candidates: list[PointSchema] = Field(default_factory=list)


# --- Match input ---

class MatchStartRequest(BaseModel):
    base_x: int = Field(..., ge=0)
    base_y: int = Field(..., ge=0)
    heroes_per_player: int = Field(3, ge=1)


class MatchStartResponse(BaseModel):
    turn: int
    heroes_per_player: int
    my_base: PointSchema
    enemy_base: PointSchema


class EntityRecordSchema(BaseModel):
    id: int
    type: int
    x: int
    y: int
    shield_life: int = Field(0, ge=0)
    is_controlled: int = 0
    health: int = 0
    vx: int = 0
    vy: int = 0
    near_base: int = 0
    threat_for: int = 0
    turns_before_hit: int | None = Field(None, ge=0)


class TurnRequest(BaseModel):
    health: int
    mana: int = Field(..., ge=0)
    enemy_health: int
    enemy_mana: int = Field(..., ge=0)
    entities: list[EntityRecordSchema] = Field(default_factory=list)


# --- Match output ---

class EntitySchema(BaseModel):
    id: int
    kind: str
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    shield_life: int = 0
    is_controlled: bool = False
    health: int = 0
    near_base: bool = False
    threat_for: str = "none"
    distance_from_my_base: float = 0.0
    distance_from_enemy_base: float = 0.0
    turns_before_hit: int | None = None
    will_hit_my_base: bool = False
    can_hit_my_base: bool = False


class FactionSchema(BaseModel):
    base: PointSchema
    base_health: int
    mana: int
    heroes: list[EntitySchema] = Field(default_factory=list)


class TurnStateResponse(BaseModel):
    turn: int
    warn: bool = False
    me: FactionSchema
    enemy: FactionSchema
    monsters: list[EntitySchema] = Field(default_factory=list)
    threats: list[int] = Field(default_factory=list, description="Monster ids heading for my base, soonest first")
    commands: list[str] = Field(default_factory=list)


# --- Config ---

class ArenaConfigResponse(BaseModel):
    map_width: int
    map_height: int
    base_radius: int
    base_damage_radius: int
    monster_base_speed: int
    heroes_per_player: int
    spell_cost: int
    wind_range: int
    wind_threat_distance: int
    debug: bool
