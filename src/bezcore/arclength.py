"""Arc length of Bezier curves by Gauss-Legendre quadrature."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from bezcore import quadrature
from bezcore.consts import DEFAULT_QUADRATURE_ORDER, NOT_COMPUTABLE
from bezcore.evaluator import derivative

logger = logging.getLogger(__name__)


def speed(t: float, xs: Sequence[float], ys: Sequence[float]) -> float:
    """Magnitude of the velocity vector at parameter t."""
    return math.hypot(derivative(1, t, xs), derivative(1, t, ys))


def arc_length(
    xs: Sequence[float],
    ys: Sequence[float],
    t: float = 1.0,
    n: int = DEFAULT_QUADRATURE_ORDER,
) -> float:
    """Approximate the arc length of a curve between parameter 0 and t.

    The speed integral over [0, t] is rescaled onto [-1, 1] and evaluated with an
    n-point Legendre-Gauss rule.

    Args:
        xs: Control values of the x axis.
        ys: Control values of the y axis.
        t: Upper integration bound, 1.0 for the full curve.
        n: Number of quadrature points.

    Returns:
        float: The arc length, or NOT_COMPUTABLE (-1) when the curve has more control
        points than the largest tabulated quadrature order, or n is not tabulated.
    """
    if len(xs) > quadrature.max_order():
        logger.debug("Arc length not computable for %d control points", len(xs))
        return NOT_COMPUTABLE
    if n not in quadrature.ABSCISSAE:
        logger.debug("No Legendre-Gauss table for order %d", n)
        return NOT_COMPUTABLE

    abscissae, weights = quadrature.table(n)
    z = t / 2.0
    total = 0.0
    for abscissa, weight in zip(abscissae, weights):
        total += weight * speed(z * abscissa + z, xs, ys)
    return z * total
