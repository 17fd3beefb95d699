"""Geometry kernel: points, circles and closed-form intersections.

Every function here is pure.  "No intersection" is a normal outcome and is
reported as ``None`` (or an empty candidate tuple), never as an exception.

Two flavours are offered for each intersection:

  - ``*_candidates``   → every crossing point (0, 1 or 2 of them)
  - ``*_intersection`` → the single crossing relevant to the caller, picked
    by proximity to a tie-break point
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Centres closer than this (relative to the radii) are treated as concentric.
_CONCENTRIC_EPS = 1e-12
# Relative slack under which a near-miss or near-crossing counts as a tangent.
_TANGENT_TOL = 1e-10


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable 2D real coordinate (also used for velocity vectors)."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def rounded(self) -> tuple[int, int]:
        """Integer coordinates, as the game expects them in commands."""
        return round(self.x), round(self.y)

    def __repr__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True, slots=True)
class Circle:
    """A centre plus a non-negative radius (base perimeter, spell area...)."""

    center: Point
    radius: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius < 0:
            raise ValueError(f"Circle radius must be finite and >= 0, got {self.radius!r}")

    def contains(self, point: Point) -> bool:
        return is_inside(self, point)


# ---------------------------------------------------------------------------
# Distances
# ---------------------------------------------------------------------------

def distance(p: Point, q: Point) -> float:
    """Euclidean distance, via ``math.hypot`` to stay stable on large values."""
    return math.hypot(p.x - q.x, p.y - q.y)


def is_inside(circle: Circle, point: Point) -> bool:
    """True if *point* lies in *circle* (border included)."""
    dx = circle.center.x - point.x
    dy = circle.center.y - point.y
    return dx * dx + dy * dy <= circle.radius * circle.radius


def _closest(candidates: tuple[Point, ...], close: Point) -> Point | None:
    if not candidates:
        return None
    return min(candidates, key=lambda p: distance(close, p))


def _all_finite(*points: Point) -> bool:
    return all(p.is_finite() for p in points)


# ---------------------------------------------------------------------------
# Line / circle
# ---------------------------------------------------------------------------

def _line_roots(
    u0: float, v0: float,
    u1: float, v1: float,
    cu: float, cv: float,
    radius: float,
) -> list[tuple[float, float]]:
    """Roots of the line ``v = da * u + db`` against the circle, solved for u.

    Callers orient the axes so that ``|u1 - u0| >= |v1 - v0|``, which keeps
    the slope within [-1, 1].
    """
    da = (v1 - v0) / (u1 - u0)
    db = v0 - u0 * da

    a = 1 + da * da
    b = -2 * cu + 2 * da * (db - cv)
    c = cu * cu + (db - cv) ** 2 - radius * radius
    delta = b * b - 4 * a * c

    # Rounding noise in delta grows with the terms that cancel inside c
    limit = _TANGENT_TOL * max(b * b, 4 * a * (cu * cu + (db - cv) ** 2 + radius * radius))
    if delta < -limit:
        return []
    if delta <= limit:
        u = -b / (2 * a)
        return [(u, da * u + db)]

    root = math.sqrt(delta)
    first = (-b - root) / (2 * a)
    second = (-b + root) / (2 * a)
    return [(first, da * first + db), (second, da * second + db)]


def line_circle_candidates(
    origin: Point,
    dest: Point,
    center: Point,
    radius: float,
) -> tuple[Point, ...]:
    """Crossings of the infinite line through *origin* and *dest* with a circle.

    Steep lines, vertical ones included, are solved with x and y swapped so
    the slope stays bounded.  A discriminant within rounding noise of zero
    is a tangent and yields a single point.
    """
    if not _all_finite(origin, dest, center) or not math.isfinite(radius):
        return ()
    if origin == dest:
        return ()

    if abs(dest.x - origin.x) >= abs(dest.y - origin.y):
        roots = _line_roots(origin.x, origin.y, dest.x, dest.y, center.x, center.y, radius)
        return tuple(Point(x, y) for x, y in roots)
    roots = _line_roots(origin.y, origin.x, dest.y, dest.x, center.y, center.x, radius)
    return tuple(Point(x, y) for y, x in roots)


def line_circle_intersection(
    origin: Point,
    dest: Point,
    center: Point,
    radius: float,
    close: Point,
) -> Point | None:
    """The crossing of line (origin → dest) with the circle nearest *close*.

    For a vertical line the crossing nearest ``origin.y`` wins, whatever
    *close* is.  Returns None when the line misses the circle.
    """
    candidates = line_circle_candidates(origin, dest, center, radius)
    if len(candidates) == 2 and origin.x == dest.x:
        return min(candidates, key=lambda p: abs(origin.y - p.y))
    return _closest(candidates, close)


# ---------------------------------------------------------------------------
# Circle / circle
# ---------------------------------------------------------------------------

def circle_circle_candidates(
    c1: Point,
    r1: float,
    c2: Point,
    r2: float,
) -> tuple[Point, ...]:
    """Intersection points of two circles (radical-line method).

    Coincident or concentric circles have no unique intersection and yield
    an empty tuple, like separate or nested circles.
    """
    if not _all_finite(c1, c2) or not (math.isfinite(r1) and math.isfinite(r2)):
        return ()
    if r1 < 0 or r2 < 0:
        return ()

    dx = c2.x - c1.x
    dy = c2.y - c1.y
    d = math.hypot(dx, dy)
    if d <= _CONCENTRIC_EPS * max(r1, r2, 1.0):
        return ()
    gap_tol = _TANGENT_TOL * max(r1 + r2, 1.0)
    if d - (r1 + r2) > gap_tol or abs(r1 - r2) - d > gap_tol:
        return ()

    # Foot of the radical line on the centre line, measured from c1
    along = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
    h_sq = r1 * r1 - along * along
    ux, uy = dx / d, dy / d
    mid = Point(c1.x + along * ux, c1.y + along * uy)
    if h_sq <= _TANGENT_TOL * max(r1, r2, 1.0) ** 2:
        return (mid,)
    h = math.sqrt(h_sq)
    return (
        Point(mid.x - h * uy, mid.y + h * ux),
        Point(mid.x + h * uy, mid.y - h * ux),
    )


def circle_circle_intersection(
    c1: Point,
    r1: float,
    c2: Point,
    r2: float,
    close: Point,
) -> Point | None:
    """The intersection point of two circles nearest *close*, or None."""
    return _closest(circle_circle_candidates(c1, r1, c2, r2), close)
