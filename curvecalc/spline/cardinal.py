from typing import Optional

from ..types.array_types import ndarray_1d, PointSequence
from ..utils.default import (
    value_or_default,
    DEFAULT_TENSION,
    DEFAULT_SEGMENTS,
    DEFAULT_DTYPE,
)
from .basis import HermiteBasis
from .core import interpolate, output_length


class CardinalSpline:
    """
    Fixed interpolation settings with their own basis table.

    Useful when many curves share tension, resolution and closure: the
    Hermite table is built once in the constructor instead of per call.

    >>> spline = CardinalSpline(segments_per_span=8, closed=True)
    >>> outline = spline([0, 0, 10, 0, 10, 10])
    """

    def __init__(
        self,
        tension: Optional[float] = DEFAULT_TENSION,
        segments_per_span: Optional[int] = DEFAULT_SEGMENTS,
        closed: bool = False,
        dtype=DEFAULT_DTYPE,
    ):
        self._tension = float(value_or_default(tension, DEFAULT_TENSION))
        self._basis = HermiteBasis(value_or_default(segments_per_span, DEFAULT_SEGMENTS))
        self._closed = bool(closed)
        self._dtype = dtype

    @property
    def tension(self) -> float:
        return self._tension

    @property
    def segments_per_span(self) -> int:
        return self._basis.segments

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def dtype(self):
        return self._dtype

    @property
    def basis(self) -> HermiteBasis:
        return self._basis

    def with_options(
        self,
        tension: Optional[float] = None,
        segments_per_span: Optional[int] = None,
        closed: Optional[bool] = None,
        dtype=None,
    ) -> "CardinalSpline":
        """Return a copy with the given settings replaced."""
        return CardinalSpline(
            tension=value_or_default(tension, self._tension),
            segments_per_span=value_or_default(segments_per_span, self.segments_per_span),
            closed=value_or_default(closed, self._closed),
            dtype=value_or_default(dtype, self._dtype),
        )

    def output_length(self, point_count: int) -> int:
        return output_length(point_count, self.segments_per_span, self._closed)

    def __call__(self, points: PointSequence) -> ndarray_1d:
        return interpolate(
            points,
            tension=self._tension,
            segments_per_span=self.segments_per_span,
            closed=self._closed,
            basis=self._basis,
            dtype=self._dtype,
        )

    def __repr__(self) -> str:
        return (
            f"CardinalSpline(tension={self._tension}, "
            f"segments_per_span={self.segments_per_span}, closed={self._closed})"
        )
