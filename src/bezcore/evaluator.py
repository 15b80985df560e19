"""Bernstein-basis evaluation and hodograph differentiation of one curve axis."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from bezcore.coefficients import binomials


def polyterm(n: int, k: int, t: float) -> float:
    """Return (1-t)^(n-k) * t^k."""
    return ((1.0 - t) ** (n - k)) * (t**k)


def evaluate(t: float, values: Sequence[float]) -> float:
    """Evaluate one axis of a Bezier curve at parameter t.

    Args:
        t: Curve parameter, usually in [0, 1].
        values: Control values of one axis, length = order + 1.

    Returns:
        float: sum over k of C(order, k) * polyterm(order, k, t) * values[k]
    """
    order = len(values) - 1
    result = 0.0
    for k, value in enumerate(values):
        if value == 0:
            continue
        result += binomials(order, k) * polyterm(order, k, t) * value
    return result


def hodograph(values: Sequence[float]) -> List[float]:
    """Control values of the first derivative curve (one order lower)."""
    order = len(values) - 1
    return [order * (values[k + 1] - values[k]) for k in range(order)]


def derivative(d: int, t: float, values: Sequence[float]) -> float:
    """Evaluate the d-th derivative of one curve axis at parameter t.

    The control sequence is reduced d times by its hodograph. Once a single value is
    left, every further derivative is zero.
    """
    current: Sequence[float] = values
    for _ in range(d):
        if len(current) <= 1:
            return 0.0
        current = hodograph(current)
    return evaluate(t, current)


def evaluate_many(t_values: NDArray[np.float64], values: Sequence[float]) -> NDArray[np.float64]:
    """Vectorized `evaluate` over an array of parameters."""
    t_values = np.asarray(t_values, dtype=np.float64)
    order = len(values) - 1
    omt = 1.0 - t_values
    result = np.zeros_like(t_values)
    for k, value in enumerate(values):
        if value == 0:
            continue
        result += binomials(order, k) * omt ** (order - k) * t_values**k * value
    return result
