"""Legendre-Gauss abscissae and weights for quadrature orders 2 to 26.

The tables are built once at import time from numpy's Gauss-Legendre nodes and
frozen into read-only mappings of tuples. Abscissae are ordered ascending on
[-1, 1]; weights are aligned with them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

import numpy as np

from bezcore.consts import MAX_QUADRATURE_ORDER, MIN_QUADRATURE_ORDER


def _build_tables() -> Tuple[Mapping[int, Tuple[float, ...]], Mapping[int, Tuple[float, ...]]]:
    abscissae = {}
    weights = {}
    for order in range(MIN_QUADRATURE_ORDER, MAX_QUADRATURE_ORDER + 1):
        nodes, node_weights = np.polynomial.legendre.leggauss(order)
        abscissae[order] = tuple(float(x) for x in nodes)
        weights[order] = tuple(float(w) for w in node_weights)
    return MappingProxyType(abscissae), MappingProxyType(weights)


ABSCISSAE, WEIGHTS = _build_tables()


def max_order() -> int:
    """Largest quadrature order available in the tables."""
    return MAX_QUADRATURE_ORDER


def table(n: int) -> Tuple[Tuple[float, ...], Tuple[float, ...]]:
    """Return the (abscissae, weights) pair for quadrature order n.

    Raises:
        KeyError: If n is outside the tabulated range.
    """
    return ABSCISSAE[n], WEIGHTS[n]
