"""2D point type and line/vector algebra."""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence, Tuple, Union


###############################################################################
# BzPoint
###############################################################################
class BzPoint(NamedTuple):
    """Immutable 2D coordinate."""

    x: float
    y: float

    def __add__(self, other: PointLike) -> BzPoint:  # type: ignore[override]
        return BzPoint(self.x + other[0], self.y + other[1])

    def __sub__(self, other: PointLike) -> BzPoint:
        return BzPoint(self.x - other[0], self.y - other[1])

    def __mul__(self, factor: float) -> BzPoint:  # type: ignore[override]
        return BzPoint(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> BzPoint:
        return BzPoint(self.x / divisor, self.y / divisor)

    def __neg__(self) -> BzPoint:
        return BzPoint(-self.x, -self.y)

    @property
    def length(self) -> float:
        """Euclidean norm of the point seen as a vector."""
        return math.hypot(self.x, self.y)

    @classmethod
    def of(cls, point: PointLike) -> BzPoint:
        """Create a BzPoint from any (x, y) sequence."""
        if isinstance(point, BzPoint):
            return point
        return cls(float(point[0]), float(point[1]))


PointLike = Union[BzPoint, Tuple[float, float], Sequence[float]]


###############################################################################
# Vector helpers
###############################################################################
def lerp(p1: PointLike, p2: PointLike, t: float) -> BzPoint:
    """Point at parameter t on the segment p1 -> p2."""
    return BzPoint(p1[0] + t * (p2[0] - p1[0]), p1[1] + t * (p2[1] - p1[1]))


def distance(p1: PointLike, p2: PointLike) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def _unit(dx: float, dy: float) -> Optional[Tuple[float, float]]:
    norm = math.hypot(dx, dy)
    if norm == 0:
        return None
    return dx / norm, dy / norm


###############################################################################
# Line algebra
###############################################################################
def line_intersection(p1: PointLike, p2: PointLike, p3: PointLike, p4: PointLike) -> Optional[BzPoint]:
    """Intersect the infinite lines through (p1, p2) and (p3, p4).

    Returns:
        Optional[BzPoint]: The intersection point, or None for parallel or
        coincident lines.
    """
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x3, y3 = p3[0], p3[1]
    x4, y4 = p4[0], p4[1]

    nx = (x1 * y2 - y1 * x2) * (x3 - x4) - (x1 - x2) * (x3 * y4 - y3 * x4)
    ny = (x1 * y2 - y1 * x2) * (y3 - y4) - (y1 - y2) * (x3 * y4 - y3 * x4)
    det = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if det == 0:
        return None
    return BzPoint(nx / det, ny / det)


def normalized_dot(p1: PointLike, p2: PointLike, p3: PointLike, p4: PointLike) -> float:
    """Dot product of the unit vectors p2-p1 and p4-p3, 0 if either has zero length."""
    u = _unit(p2[0] - p1[0], p2[1] - p1[1])
    v = _unit(p4[0] - p3[0], p4[1] - p3[1])
    if u is None or v is None:
        return 0.0
    return u[0] * v[0] + u[1] * v[1]


def side(s: PointLike, e: PointLike, p: PointLike) -> int:
    """Tell on which side of the directed line s -> e the point p lies.

    The unit direction s -> e is rotated by 90 degrees and compared with the unit
    direction s -> p. Degenerate (zero length) input counts as +1.

    Returns:
        int: +1 or -1
    """
    direction = _unit(e[0] - s[0], e[1] - s[1])
    target = _unit(p[0] - s[0], p[1] - s[1])
    if direction is None or target is None:
        return 1
    rotated = (-direction[1], direction[0])
    dot = rotated[0] * target[0] + rotated[1] * target[1]
    return -1 if dot < 0 else 1
