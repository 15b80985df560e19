"""Quadratic and cubic Bezier curves through three given points."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from bezcore.curve import BzCurve
from bezcore.ratios import NoRatioExists, hull_ratio, projection_ratio
from bezcore.vector import BzPoint, PointLike

__all__ = ["NoRatioExists", "generate_curve", "projection_ratio", "reverse_de_casteljau"]


def _check_parameter(t: float) -> None:
    if not 0.0 < t < 1.0:
        raise ValueError(f"Curve parameter must lie strictly between 0 and 1, got {t}")


def reverse_de_casteljau(
    helper: PointLike,
    mid: PointLike,
    t: float,
    span: Sequence[PointLike],
    tangents: Sequence[PointLike],
) -> Tuple[BzPoint, BzPoint]:
    """Reconstruct the two inner control points of a cubic from its De Casteljau skeleton.

    Starting at the on-curve point `mid`, the two tangent offsets give the last
    reduction level. Each side is then blended back twice: once against the hull
    point `helper` and once against the curve end points `span[0]` and `span[3]`.

    Args:
        helper: Hull point A of the A-B-C construction.
        mid: On-curve point B at parameter t.
        t: Curve parameter of `mid`, strictly between 0 and 1.
        span: De Casteljau chain whose first four entries are the cubic's control points.
        tangents: Offsets from `mid` to the two points of the last reduction level.

    Returns:
        Tuple[BzPoint, BzPoint]: The second and third control points.

    Raises:
        ValueError: If t is not strictly between 0 and 1.
    """
    _check_parameter(t)
    helper = BzPoint.of(helper)
    mid = BzPoint.of(mid)
    start = BzPoint.of(span[0])
    end = BzPoint.of(span[3])
    mt = 1.0 - t

    edge1 = mid + tangents[0]
    edge2 = mid + tangents[1]

    inner1 = edge1 + (edge1 - helper) * (t / mt)
    inner2 = edge2 + (edge2 - helper) * (mt / t)

    control1 = inner1 + (inner1 - start) * (mt / t)
    control2 = inner2 + (inner2 - end) * (t / mt)
    return control1, control2


def default_tangents(p1: PointLike, p3: PointLike, t: float) -> Tuple[BzPoint, BzPoint]:
    """Symmetric tangent pair derived from the chord p3 -> p1.

    Half the chord points back towards p1 on the start side and forward towards p3
    on the end side. The two arms are weighted by 2t and 2(1-t) so that the on-curve
    point stays the t-blend of both ends; at t=0.5 both arms are the plain half chord.
    """
    half = (BzPoint.of(p1) - p3) * 0.5
    return half * (2.0 * t), -half * (2.0 * (1.0 - t))


def generate_curve(
    # pylint: disable=too-many-arguments,too-many-positional-arguments
    order: int,
    p1: PointLike,
    p2: PointLike,
    p3: PointLike,
    t: float = 0.5,
    tangents: Optional[Sequence[PointLike]] = None,
) -> Optional[BzCurve]:
    """Build a curve through p1 (t=0), p2 (at t) and p3 (t=1).

    Args:
        order: 2 for a quadratic, 3 for a cubic curve.
        p1: Start point.
        p2: Point the curve has to pass at parameter t.
        p3: End point.
        t: Parameter of p2, strictly between 0 and 1.
        tangents: Offsets from p2 to the last De Casteljau level (cubic only).
            Defaults to the symmetric half chord, see `default_tangents`.

    Returns:
        Optional[BzCurve]: The fitted curve, or None for orders other than 2 and 3.

    Raises:
        ValueError: If t is not strictly between 0 and 1.
    """
    if order not in (2, 3):
        return None
    _check_parameter(t)

    p1 = BzPoint.of(p1)
    p2 = BzPoint.of(p2)
    p3 = BzPoint.of(p3)
    if tangents is None:
        tangents = default_tangents(p1, p3, t)

    # projection_ratio() gives |A-B|/|B-C| for quadratics but the inverse for cubics
    ratio = hull_ratio(t, order)

    curve = BzCurve([p1, p2, p3] if order == 2 else [p1, p2, p2, p3])
    span = curve.subdivision_span(t)
    _, _, point_c = curve.projection_triple(t, p2)
    helper = p2 - (point_c - p2) * ratio

    if order == 2:
        curve.set_control_point(1, helper)
    else:
        control1, control2 = reverse_de_casteljau(helper, p2, t, span, tangents)
        curve.set_control_point(1, control1)
        curve.set_control_point(2, control2)

    curve.refresh()
    return curve


def main():
    """Main"""
    points = ((0.0, 0.0), (50.0, 100.0), (100.0, 0.0))
    for order in (2, 3):
        curve = generate_curve(order, *points)
        print(curve)
        print(f"  point(0.5) = {curve.point(0.5)}, length = {curve.length():.4f}")


if __name__ == "__main__":
    main()
