"""POST /api/v1/geometry/* — direct access to the intersection kernel."""

from __future__ import annotations

from fastapi import APIRouter

from arena.api.schemas import (
    CircleCircleRequest,
    IntersectionResponse,
    LineCircleRequest,
    PointSchema,
)
from arena.core.geometry import (
    Point,
    circle_circle_candidates,
    circle_circle_intersection,
    line_circle_candidates,
    line_circle_intersection,
)

router = APIRouter()


def _p(s: PointSchema) -> Point:
    return Point(s.x, s.y)


def _response(point: Point | None, candidates: tuple[Point, ...]) -> IntersectionResponse:
    return IntersectionResponse(
        point=PointSchema(x=point.x, y=point.y) if point is not None else None,
        candidates=[PointSchema(x=c.x, y=c.y) for c in candidates],
    )


@router.post("/geometry/line-circle", response_model=IntersectionResponse)
def line_circle(req: LineCircleRequest) -> IntersectionResponse:
    origin, dest, center = _p(req.origin), _p(req.dest), _p(req.center)
    return _response(
        line_circle_intersection(origin, dest, center, req.radius, _p(req.close)),
        line_circle_candidates(origin, dest, center, req.radius),
    )


@router.post("/geometry/circle-circle", response_model=IntersectionResponse)
def circle_circle(req: CircleCircleRequest) -> IntersectionResponse:
    c1, c2 = _p(req.c1), _p(req.c2)
    return _response(
        circle_circle_intersection(c1, req.r1, c2, req.r2, _p(req.close)),
        circle_circle_candidates(c1, req.r1, c2, req.r2),
    )
