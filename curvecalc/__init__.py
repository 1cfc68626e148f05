"""
curvecalc - Cardinal Spline Curves
==================================

Computes a dense polyline approximation of a cardinal spline passing through
an ordered list of 2D control points, ready to be stroked by any renderer.

Quick Start
-----------
>>> from curvecalc import interpolate
>>>
>>> # Points are interleaved: x0, y0, x1, y1, ...
>>> curve = interpolate([0, 0, 100, 0, 100, 100, 0, 100], tension=0.5, segments_per_span=4)
>>> curve.reshape(-1, 2).shape
(13, 2)
>>>
>>> # Closed loop back to the first point
>>> loop = interpolate([0, 0, 100, 0, 100, 100, 0, 100], segments_per_span=4, closed=True)

Modules
-------
- spline: interpolation, Hermite basis table, reusable CardinalSpline
- errors: InvalidArgumentError
- utils: defaults and argument helpers
"""

from .spline import (
    interpolate,
    get_curve_points,
    output_length,
    HermiteBasis,
    CardinalSpline,
)
from .errors import InvalidArgumentError
from .utils.default import DEFAULT_TENSION, DEFAULT_SEGMENTS

__version__ = "1.0.0"

__all__ = [
    # Interpolation
    "interpolate",
    "get_curve_points",
    "output_length",

    # Reuse
    "HermiteBasis",
    "CardinalSpline",

    # Errors
    "InvalidArgumentError",

    # Defaults
    "DEFAULT_TENSION",
    "DEFAULT_SEGMENTS",

    # Version
    "__version__",
]
