"""Central module containing constants and tunables for Bezier curve computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

###############################################################################
# Sentinels
###############################################################################

NOT_COMPUTABLE: float = -1.0  # arc length cannot be computed with the available quadrature tables
NO_ROOT: float = -1.0  # Newton-Raphson did not converge from the given seed

###############################################################################
# Arc length
###############################################################################

DEFAULT_QUADRATURE_ORDER = 20  # number of Legendre-Gauss points used by default
MIN_QUADRATURE_ORDER = 2
MAX_QUADRATURE_ORDER = 26

###############################################################################
# Root search
###############################################################################

LINEAR_TOLERANCE = 2.0  # pixel units, compared against control point differences
ROOT_SAMPLE_STEP = 0.01  # 101 seeds over [0, 1]
ROOT_PRECISION = 1.0e-6
ROOT_MAX_DEPTH = 12


@dataclass(frozen=True)
class RootSearchSettings:
    """Tunables for the derivative root search.

    Attributes:
        linear_tolerance: Absolute tolerance for treating a control sequence as a straight
            progression. Expressed in the unit of the control values (pixels by default).
        sample_step: Distance between Newton-Raphson seeds over [0, 1].
        precision: Convergence threshold and rounding grid for found roots.
        max_depth: Maximum number of Newton-Raphson steps per seed.
    """

    linear_tolerance: float = LINEAR_TOLERANCE
    sample_step: float = ROOT_SAMPLE_STEP
    precision: float = ROOT_PRECISION
    max_depth: int = ROOT_MAX_DEPTH

    @property
    def seeds(self) -> List[float]:
        """Seed parameters from 0 to 1 (both inclusive)."""
        count = int(round(1.0 / self.sample_step))
        return [i / count for i in range(count + 1)]


DEFAULT_ROOT_SEARCH = RootSearchSettings()
