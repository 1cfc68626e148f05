"""
Span evaluation into a pre-sized output buffer.
"""

import numpy as np

from ..types.array_types import ndarray_1d, ndarray_2d
from .basis import HermiteBasis


def fill_spans(
    out: ndarray_1d,
    offset: int,
    padded: ndarray_2d,
    basis: HermiteBasis,
    tension: float,
) -> int:
    """
    Evaluate every span of a padded point array and write it into ``out``.

    For the span ``Pi -> Pi+1`` the tangents are

        T1 = (Pi+1 - Pi-1) * tension
        T2 = (Pi+2 - Pi) * tension

    and each basis row gives one sample ``c1*Pi + c2*Pi+1 + c3*T1 + c4*T2``.

    Args:
        out: Flat output buffer, x and y interleaved.
        offset: Index of the first free slot in ``out``.
        padded: Points of shape (m, 2), including one padding point at each end.
            Yields ``m - 3`` spans.
        basis: Coefficient table.
        tension: Tangent scale.

    Returns:
        Offset just past the last written slot.
    """
    spans = len(padded) - 3
    if spans <= 0:
        return offset

    prev = padded[:-3]
    start = padded[1:-2]
    end = padded[2:-1]
    after = padded[3:]

    t1 = (end - prev) * tension
    t2 = (after - start) * tension

    # (segments, 1) columns broadcast against (spans, 1, 2) points
    coeffs = basis.samples.astype(np.float64)
    c1, c2, c3, c4 = (coeffs[:, k:k + 1] for k in range(4))

    samples = (
        c1 * start[:, None, :]
        + c2 * end[:, None, :]
        + c3 * t1[:, None, :]
        + c4 * t2[:, None, :]
    )

    count = samples.size
    stop = offset + count
    if stop > len(out):
        raise IndexError(f"Output buffer too small: need {stop} slots, have {len(out)}")
    out[offset:stop] = samples.reshape(-1)
    return stop
