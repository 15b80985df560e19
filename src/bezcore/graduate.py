"""Distribute a graduated offset thickness over a poly-curve by arc length."""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)


class GraduatedPiece(Protocol):
    """Curve piece that knows its arc length and accepts an offset profile."""

    def length(self) -> float:
        """Total arc length of the piece."""

    def graduate(self, thickness: float, start: float, end: float) -> None:
        """Store the offset profile of the piece."""


def graduate(
    pieces: Sequence[GraduatedPiece], thickness: float, start: float, end: float
) -> List[Tuple[float, float]]:
    """Hand each piece its share of the [start, end] thickness interval.

    A piece spanning the cumulative arc lengths [slen, elen] of a poly-curve with
    total length L receives
        s = start + (slen / L) * (end - start)
        e = start + (elen / L) * (end - start)
    and is graduated with (thickness, s, e).

    Args:
        pieces: Ordered curve pieces forming one continuous offset curve.
        thickness: Offset thickness passed through to every piece.
        start: Graduation value at the beginning of the first piece.
        end: Graduation value at the end of the last piece.

    Returns:
        List[Tuple[float, float]]: The (s, e) range assigned to each piece.
    """
    lengths = []
    for index, piece in enumerate(pieces):
        piece_length = piece.length()
        if piece_length < 0:
            logger.warning("Piece %d reports a negative arc length (%s)", index, piece_length)
        lengths.append(piece_length)

    total = sum(lengths)
    span = end - start
    ranges: List[Tuple[float, float]] = []
    slen = 0.0
    for piece, piece_length in zip(pieces, lengths):
        elen = slen + piece_length
        if total == 0:
            s, e = start, end
        else:
            s = start + (slen / total) * span
            e = start + (elen / total) * span
        piece.graduate(thickness, s, e)
        ranges.append((s, e))
        slen = elen
    return ranges
