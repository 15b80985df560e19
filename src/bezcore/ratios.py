"""A-B-C projection ratios of quadratic and cubic Bezier curves.

For a curve point B at parameter t, the line through B and the hull point A hits the
chord start -> end in C. Both the position of C on the chord and the ratio between
the distances A-B and B-C depend only on t and the curve order.
"""

from __future__ import annotations

import math


class BezierError(Exception):
    """Base exception for Bezier curve computations."""


class NoRatioExists(BezierError):
    """Raised when an A-B:B-C ratio is requested for an order other than 2 or 3."""


def projection_ratio(t: float, order: int) -> float:
    """Projection ratio of the A-B-C construction at parameter t.

    For quadratics this is |A-B| / |B-C|. For cubics the tabulated form
    |(t^3 + (1-t)^3 - 1) / (t^3 + (1-t)^3)| is the inverse, |B-C| / |A-B|.
    A zero denominator (quadratic at t=0 or t=1) yields infinity.

    Raises:
        NoRatioExists: If order is neither 2 nor 3.
    """
    if order == 2:
        n = 2 * t * t
        m = 2 * t
        denominator = n - m
        if denominator == 0:
            return math.inf
        return abs((denominator + 1) / denominator)
    if order == 3:
        bottom = t**3 + (1 - t) ** 3
        return abs((bottom - 1) / bottom)
    raise NoRatioExists(f"No A-B:B-C ratio exists for curves of order {order}")


def hull_ratio(t: float, order: int) -> float:
    """|A-B| / |B-C| for quadratic and cubic curves.

    Raises:
        NoRatioExists: If order is neither 2 nor 3.
    """
    ratio = projection_ratio(t, order)
    if order == 2:
        return ratio
    if ratio == 0:
        return math.inf
    return 1.0 / ratio


def chord_ratio(t: float, order: int) -> float:
    """Weight u of the curve start in the chord point C = u * start + (1 - u) * end."""
    top = (1 - t) ** order
    bottom = t**order + top
    return top / bottom
