# ===================== basis.py =====================
"""
Cubic Hermite basis table shared by every span of one curve.

The four blending weights depend only on the sample fraction ``t = i / segments``,
so they are computed once and reused for all spans.
"""

import numpy as np

from ..types.array_types import ndarray_1d, ndarray_2d
from ..utils.num_utils import truncate_segments


class HermiteBasis:
    """
    Read-only table of Hermite blending weights ``(c1, c2, c3, c4)``.

    Row ``i`` holds the weights for ``t = i / segments``:

        c1 = 2t³ - 3t² + 1      (start point)
        c2 = 3t² - 2t³          (end point)
        c3 = t³ - 2t² + t       (start tangent)
        c4 = t³ - t²            (end tangent)

    Row 0 is exactly ``(1, 0, 0, 0)`` and row ``segments`` exactly
    ``(0, 1, 0, 0)``. Weights are stored as float32.

    A basis is immutable, so a caller may build one and pass it to many
    ``interpolate`` calls with the same segment count.
    """

    __slots__ = ("_segments", "_coefficients")

    def __init__(self, segments: int):
        self._segments = truncate_segments(segments)
        self._coefficients = self._build(self._segments)

    @staticmethod
    def _build(segments: int) -> ndarray_2d:
        table = np.zeros((segments + 1, 4), dtype=np.float32)
        table[0, 0] = 1.0
        table[segments, 1] = 1.0

        st = np.arange(1, segments, dtype=np.float64) / segments
        st2 = st * st
        st3 = st2 * st
        st23 = st3 * 2
        st32 = st2 * 3

        table[1:segments, 0] = st23 - st32 + 1
        table[1:segments, 1] = st32 - st23
        table[1:segments, 2] = st3 - 2 * st2 + st
        table[1:segments, 3] = st3 - st2

        table.setflags(write=False)
        return table

    @property
    def segments(self) -> int:
        return self._segments

    @property
    def coefficients(self) -> ndarray_2d:
        """Full table, shape ``(segments + 1, 4)``."""
        return self._coefficients

    @property
    def samples(self) -> ndarray_2d:
        """Rows emitted per span, shape ``(segments, 4)``; the end row belongs to the next span."""
        return self._coefficients[:self._segments]

    def at(self, index: int) -> ndarray_1d:
        return self._coefficients[index]

    def __len__(self) -> int:
        return self._segments

    def __repr__(self) -> str:
        return f"HermiteBasis(segments={self._segments})"
