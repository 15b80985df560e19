"""Axis-aligned boxes and affine point transformation"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Static helpers for affine geometry."""

    @staticmethod
    def transform_point(
        affine_trafo: Sequence[Union[int, float]], point: Sequence[Union[int, float]]
    ) -> Tuple[float, float]:
        """
        Map a control point through an affine transformation.

        The 6 coefficients [a00, a01, a10, a11, b0, b1] give
            x' = a00 * x + a01 * y + b0
            y' = a10 * x + a11 * y + b1

        Args:
            affine_trafo (Sequence[float]): [a00, a01, a10, a11, b0, b1]
            point (Sequence[float]): (x, y)

        Returns:
            Tuple[float, float]: the mapped point
        """
        a00, a01, a10, a11, b0, b1 = affine_trafo[:6]
        x, y = point[0], point[1]
        return float(a00 * x + a01 * y + b0), float(a10 * x + a11 * y + b1)


###############################################################################
# BzBox
###############################################################################
@dataclass(frozen=True)
class BzBox:
    """Axis-aligned bounding box of a curve, with xmin <= xmax and ymin <= ymax."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def from_points(cls, xs: Sequence[float], ys: Sequence[float]) -> BzBox:
        """Smallest box holding all points given as separate x and y sequences."""
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax)"""
        return self.xmin, self.ymin, self.xmax, self.ymax

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def contains(self, point: Sequence[float], tolerance: float = 0.0) -> bool:
        """Check whether a point lies inside the box (borders included)."""
        return (
            self.xmin - tolerance <= point[0] <= self.xmax + tolerance
            and self.ymin - tolerance <= point[1] <= self.ymax + tolerance
        )

    def __str__(self):
        return f"BzBox(xmin={self.xmin}, ymin={self.ymin}, xmax={self.xmax}, ymax={self.ymax})"
