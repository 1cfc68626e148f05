"""
Padded working copies of the control points.

Every real point needs a neighbour on both sides for its tangent. Open curves
repeat their end points; closed curves borrow the points across the seam.
All helpers take an ``(n, 2)`` array and return a new ``float64`` array.
"""

import numpy as np

from ..types.array_types import ndarray_2d


def pad_open(pairs: ndarray_2d) -> ndarray_2d:
    """``[P0, P0, P1, ..., Pn-1, Pn-1]``"""
    n = len(pairs)
    padded = np.empty((n + 2, 2), dtype=np.float64)
    padded[0] = pairs[0]
    padded[1:n + 1] = pairs
    padded[n + 1] = pairs[n - 1]
    return padded


def pad_closed(pairs: ndarray_2d) -> ndarray_2d:
    """``[Pn-1, P0, P1, ..., Pn-1, P0]``"""
    n = len(pairs)
    padded = np.empty((n + 2, 2), dtype=np.float64)
    padded[0] = pairs[n - 1]
    padded[1:n + 1] = pairs
    padded[n + 1] = pairs[0]
    return padded


def wrap_segment(pairs: ndarray_2d) -> ndarray_2d:
    """
    The four points around the closing span ``Pn-1 -> P0``: ``[Pn-2, Pn-1, P0, P1]``.

    Indices wrap modulo n so loops of one or two points stay defined.
    """
    n = len(pairs)
    indices = np.array([n - 2, n - 1, 0, 1]) % n
    return pairs[indices].astype(np.float64)
