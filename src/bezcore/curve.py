"""Bezier curve entity built on the evaluator, integrator and root finder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from bezcore.arclength import arc_length
from bezcore.evaluator import derivative, evaluate, evaluate_many
from bezcore.geom import BzBox, GeomMath
from bezcore.ratios import chord_ratio, hull_ratio
from bezcore.roots import find_all_roots
from bezcore.vector import BzPoint, PointLike, lerp


###############################################################################
# BzOffsetProfile
###############################################################################
@dataclass(frozen=True)
class BzOffsetProfile:
    """Graduated offset of a curve.

    The offset distance grows linearly along the curve parameter from
    `thickness * start` at t=0 to `thickness * end` at t=1.
    """

    thickness: float
    start: float
    end: float

    def width(self, t: Union[float, NDArray[np.float64]]) -> Union[float, NDArray[np.float64]]:
        """Offset distance at parameter t."""
        return self.thickness * (self.start + (self.end - self.start) * t)


###############################################################################
# BzCurve
###############################################################################
class BzCurve:
    """Bezier curve of arbitrary order defined by its control points.

    Derived state (arc length and bounding box) is computed lazily and cached.
    After changing control points through `set_control_point`, call `refresh`
    to recompute it.
    """

    def __init__(self, points: Union[Sequence[PointLike], NDArray[np.float64]]):
        """Initialize a curve.

        Args:
            points: Control points as (x, y) pairs, at least two.

        Raises:
            ValueError: If the points are not (x, y) formatted or fewer than two.
        """
        points_array = np.array(points, dtype=np.float64)
        if points_array.ndim != 2 or points_array.shape[1] < 2:
            raise ValueError("Curve control points require (x, y) formatted points.")
        if points_array.shape[0] < 2:
            raise ValueError("At least two control points are required for a curve.")
        self._points: NDArray[np.float64] = points_array[:, :2].copy()
        self._profile: Optional[BzOffsetProfile] = None
        self._length: Optional[float] = None
        self._bbox: Optional[BzBox] = None

    @property
    def order(self) -> int:
        """int: Curve order (number of control points minus one)."""
        return self._points.shape[0] - 1

    @property
    def points(self) -> NDArray[np.float64]:
        """Read-only (order+1, 2) array of the control points."""
        view = self._points.view()
        view.flags.writeable = False
        return view

    @property
    def xs(self) -> List[float]:
        """Control values of the x axis."""
        return self._points[:, 0].tolist()

    @property
    def ys(self) -> List[float]:
        """Control values of the y axis."""
        return self._points[:, 1].tolist()

    @property
    def profile(self) -> Optional[BzOffsetProfile]:
        """The graduated offset profile, None until `graduate` was called."""
        return self._profile

    def control_points(self) -> Tuple[BzPoint, ...]:
        """Control points as BzPoint tuple."""
        return tuple(BzPoint(float(x), float(y)) for x, y in self._points)

    def set_control_point(self, index: int, point: PointLike) -> None:
        """Replace one control point. Derived state stays stale until `refresh`."""
        self._points[index, 0] = point[0]
        self._points[index, 1] = point[1]

    ###########################################################################
    # Evaluation
    ###########################################################################

    def point(self, t: float) -> BzPoint:
        """Point on the curve at parameter t."""
        return BzPoint(evaluate(t, self.xs), evaluate(t, self.ys))

    def derivative(self, t: float, d: int = 1) -> BzPoint:
        """d-th derivative vector at parameter t."""
        return BzPoint(derivative(d, t, self.xs), derivative(d, t, self.ys))

    def normal(self, t: float) -> BzPoint:
        """Unit normal at t (tangent rotated by +90 degrees), (0, 0) where the curve stalls."""
        tangent = self.derivative(t)
        norm = tangent.length
        if norm == 0:
            return BzPoint(0.0, 0.0)
        return BzPoint(-tangent.y / norm, tangent.x / norm)

    def polygonize(self, steps: int) -> NDArray[np.float64]:
        """Sample the curve uniformly in t.

        Args:
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2) containing the sampled points
        """
        t = np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)
        result = np.empty((steps + 1, 2), dtype=np.float64)
        result[:, 0] = evaluate_many(t, self.xs)
        result[:, 1] = evaluate_many(t, self.ys)
        return result

    ###########################################################################
    # De Casteljau
    ###########################################################################

    def subdivision_span(self, t: float) -> List[BzPoint]:
        """Full De Casteljau chain at parameter t.

        The chain starts with the control points, followed by each reduction level,
        and ends with the on-curve point. A cubic yields 4 + 3 + 2 + 1 points.
        """
        level = list(self.control_points())
        span = list(level)
        while len(level) > 1:
            level = [lerp(level[i], level[i + 1], t) for i in range(len(level) - 1)]
            span.extend(level)
        return span

    def split(self, t: float) -> Tuple[BzCurve, BzCurve]:
        """Split the curve at t into the two sub-curves [0, t] and [t, 1]."""
        span = self.subdivision_span(t)
        left: List[BzPoint] = []
        right: List[BzPoint] = []
        index = 0
        for size in range(self.order + 1, 0, -1):
            left.append(span[index])
            right.append(span[index + size - 1])
            index += size
        return BzCurve(left), BzCurve(right[::-1])

    def projection_triple(self, t: float, b: Optional[PointLike] = None) -> Tuple[BzPoint, BzPoint, BzPoint]:
        """A-B-C points at parameter t.

        B is the curve point (or the given `b`), C the point on the start/end chord
        that B projects onto, and A the hull point on the far side of B with
        |A-B| / |B-C| fixed by t and the curve order.

        Raises:
            NoRatioExists: If the curve is neither quadratic nor cubic.
        """
        ratio = hull_ratio(t, self.order)
        start = BzPoint.of(self._points[0])
        end = BzPoint.of(self._points[-1])
        point_b = self.point(t) if b is None else BzPoint.of(b)
        u = chord_ratio(t, self.order)
        point_c = BzPoint(u * start.x + (1 - u) * end.x, u * start.y + (1 - u) * end.y)
        point_a = point_b + (point_b - point_c) * ratio
        return point_a, point_b, point_c

    ###########################################################################
    # Derived state
    ###########################################################################

    def length(self) -> float:
        """Total arc length (cached), -1 if not computable."""
        if self._length is None:
            self._length = arc_length(self.xs, self.ys)
        return self._length

    def length_at(self, t: float) -> float:
        """Arc length from the curve start up to parameter t."""
        return arc_length(self.xs, self.ys, t=t)

    def extrema(self) -> Dict[str, List[float]]:
        """Parameters where the x or y component of the curve has a local extremum.

        Returns:
            Dict with keys "x", "y" (per axis roots of the first derivative) and
            "values" (sorted union of both).
        """
        x_roots = find_all_roots(1, self.xs)
        y_roots = find_all_roots(1, self.ys)
        return {"x": x_roots, "y": y_roots, "values": sorted(set(x_roots) | set(y_roots))}

    def bbox(self) -> BzBox:
        """Bounding box of the curve (cached)."""
        if self._bbox is None:
            t_values = [0.0, 1.0] + self.extrema()["values"]
            samples = [self.point(t) for t in t_values]
            self._bbox = BzBox.from_points([p.x for p in samples], [p.y for p in samples])
        return self._bbox

    def graduate(self, thickness: float, start: float, end: float) -> None:
        """Store a graduated offset profile for this curve."""
        self._profile = BzOffsetProfile(thickness, start, end)

    def refresh(self) -> None:
        """Recompute derived state after the control points changed."""
        self._length = None
        self._bbox = None
        self.length()
        self.bbox()

    def offset_points(self, steps: int, distance: float = 0.0) -> NDArray[np.float64]:
        """Sample the curve and push each sample along its normal.

        With a graduated profile the offset follows `profile.width(t)`; otherwise the
        constant `distance` is used.

        Returns:
            NDArray[np.float64] of shape (steps+1, 2)
        """
        samples = self.polygonize(steps)
        t = np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)
        widths = self._profile.width(t) if self._profile is not None else np.full(steps + 1, distance)
        normals = np.array([self.normal(float(ti)) for ti in t], dtype=np.float64)
        return samples + normals * np.asarray(widths, dtype=np.float64)[:, np.newaxis]

    def transform_affine(self, affine_trafo: Sequence[Union[int, float]]) -> BzCurve:
        """Return a new curve with every control point transformed by [a00, a01, a10, a11, b0, b1]."""
        return BzCurve([GeomMath.transform_point(affine_trafo, point) for point in self._points])

    def __str__(self):
        points = ", ".join(f"({p.x}, {p.y})" for p in self.control_points())
        return f"BzCurve(order={self.order}, points=[{points}])"
