# ===================== core.py =====================
"""
Cardinal spline interpolation through a flat list of 2D control points.
"""

import warnings
from typing import Optional

import numpy as np

from ..errors import InvalidArgumentError
from ..types.array_types import ndarray_1d, ndarray_2d, PointSequence
from ..utils.default import (
    value_or_default,
    DEFAULT_TENSION,
    DEFAULT_SEGMENTS,
    DEFAULT_DTYPE,
)
from ..utils.num_utils import truncate_segments
from .basis import HermiteBasis
from .fill import fill_spans
from .padding import pad_open, pad_closed, wrap_segment


def output_length(point_count: int, segments: int, closed: bool = False) -> int:
    """
    Number of scalars produced for ``point_count`` control points.

    Open curves have ``point_count - 1`` spans, closed curves one more for the
    seam. Each span contributes ``segments`` (x, y) samples and one literal end
    point is appended.
    """
    if point_count <= 0:
        return 0
    spans = point_count if closed else point_count - 1
    return 2 * spans * segments + 2


def _as_pairs(points: PointSequence) -> Optional[ndarray_2d]:
    coords = np.asarray(points, dtype=np.float64)
    if coords.ndim != 1:
        raise InvalidArgumentError(
            f"Points must be a flat sequence x0, y0, x1, y1, ..., got shape {coords.shape}"
        )
    if coords.size < 2:
        return None
    if coords.size % 2:
        warnings.warn(f"Odd number of coordinates ({coords.size}); ignoring the trailing value")
        coords = coords[:-1]
    return coords.reshape(-1, 2)


def interpolate(
    points: PointSequence,
    tension: Optional[float] = DEFAULT_TENSION,
    segments_per_span: Optional[int] = None,
    closed: bool = False,
    *,
    basis: Optional[HermiteBasis] = None,
    dtype=DEFAULT_DTYPE,
) -> ndarray_1d:
    """
    Calculate the points of a cardinal spline through the given control points.

    Args:
        points: Flat coordinates ``[x0, y0, x1, y1, ..., xn, yn]``. Never modified.
        tension: Tangent scale. Typically in [0, 1] but may be exceeded.
            Defaults to 0.5.
        segments_per_span: Samples per span, truncated toward zero. Defaults to 25,
            or to ``basis.segments`` when a basis is given.
        closed: Join the last point back to the first, making the line continuous.
        basis: Pre-built coefficient table to reuse across calls.
        dtype: Output dtype.

    Returns:
        New flat array of interleaved coordinates. Its length is
        ``output_length(len(points) // 2, segments_per_span, closed)``; empty
        when fewer than two values are given.

    Raises:
        InvalidArgumentError: If the segment count is below one, does not match
            ``basis``, or the points are not one-dimensional.

    Example:
        >>> interpolate([0, 0, 100, 0, 100, 100, 0, 100], 0.5, 4).reshape(-1, 2)[[0, -1]]
        array([[  0.,   0.],
               [  0., 100.]], dtype=float32)
    """
    if points is None:
        return np.empty(0, dtype=dtype)
    pairs = _as_pairs(points)
    if pairs is None:
        return np.empty(0, dtype=dtype)

    tension = float(value_or_default(tension, DEFAULT_TENSION))
    default_segments = basis.segments if basis is not None else DEFAULT_SEGMENTS
    segments = truncate_segments(value_or_default(segments_per_span, default_segments))

    if basis is None:
        basis = HermiteBasis(segments)
    elif basis.segments != segments:
        raise InvalidArgumentError(
            f"Basis was built for {basis.segments} segments, got segments_per_span={segments}"
        )

    n = len(pairs)
    result = np.empty(output_length(n, segments, closed), dtype=dtype)

    padded = pad_closed(pairs) if closed else pad_open(pairs)
    pos = fill_spans(result, 0, padded, basis, tension)
    if closed:
        pos = fill_spans(result, pos, wrap_segment(pairs), basis, tension)

    # last point is literal, not interpolated
    result[pos:pos + 2] = pairs[0] if closed else pairs[n - 1]
    return result


get_curve_points = interpolate
