"""Root search on Bezier curve derivatives (Newton-Raphson with a linear special case)."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from bezcore.consts import DEFAULT_ROOT_SEARCH, NO_ROOT, RootSearchSettings
from bezcore.evaluator import derivative

logger = logging.getLogger(__name__)


def is_linear(values: Sequence[float], tolerance: Optional[float] = None) -> bool:
    """Check whether a control sequence is effectively a straight progression.

    Every consecutive difference must lie within `tolerance` of the first difference.
    The tolerance is absolute and shares the unit of `values`; the default of 2 was
    chosen for pixel coordinates.
    """
    if tolerance is None:
        tolerance = DEFAULT_ROOT_SEARCH.linear_tolerance
    if len(values) < 2:
        return True
    first = values[1] - values[0]
    for k in range(1, len(values) - 1):
        if abs((values[k + 1] - values[k]) - first) > tolerance:
            return False
    return True


def find_root(
    d: int,
    seed: float,
    values: Sequence[float],
    offset: float = 0.0,
    settings: RootSearchSettings = DEFAULT_ROOT_SEARCH,
) -> float:
    """Newton-Raphson search for t with derivative(d, t, values) == offset.

    Args:
        d: Derivative whose root is searched.
        seed: Start parameter.
        values: Control values of one axis.
        offset: Target value of the d-th derivative.
        settings: Convergence precision and depth cap.

    Returns:
        float: The converged parameter, or NO_ROOT (-1) if the search did not converge
        within `settings.max_depth` steps.
    """
    t = seed
    for _ in range(settings.max_depth):
        f = derivative(d, t, values) - offset
        slope = derivative(d + 1, t, values)
        step = f / slope if slope != 0 else f
        next_t = t - step
        if abs(t - next_t) < settings.precision:
            return next_t
        t = next_t
    logger.debug("No root for derivative %d from seed %.2f", d, seed)
    return NO_ROOT


def find_all_roots(
    d: int,
    values: Sequence[float],
    settings: RootSearchSettings = DEFAULT_ROOT_SEARCH,
) -> List[float]:
    """Find all parameters in [0, 1] where the d-th derivative of one axis is zero.

    Straight progressions and first derivatives of quadratics are solved directly:
    the first derivative is linear there, so a single sign change between t=0 and
    t=1 gives the only root. All other cases are sampled with Newton-Raphson seeds
    over [0, 1].

    Returns:
        List[float]: Distinct roots rounded to `settings.precision`, in the order the
        seeds found them.
    """
    if is_linear(values, settings.linear_tolerance) or (d == 1 and len(values) == 3):
        if d > 1:
            return []
        start = derivative(1, 0.0, values)
        end = derivative(1, 1.0, values)
        if start * end > 0 or start == end:
            return []
        return [_snap(start / (start - end), settings.precision)]

    found: Dict[float, None] = {}
    for seed in settings.seeds:
        root = find_root(d, seed, values, settings=settings)
        if root == NO_ROOT or not 0.0 <= root <= 1.0:
            continue
        found.setdefault(_snap(root, settings.precision), None)
    return list(found)


def _snap(root: float, precision: float) -> float:
    return round(root / precision) * precision
