"""
Cardinal spline module.

Turns a flat list of 2D control points into a dense polyline through them.
"""

from .core import interpolate, get_curve_points, output_length
from .basis import HermiteBasis
from .cardinal import CardinalSpline
from .fill import fill_spans
from .padding import pad_open, pad_closed, wrap_segment

__all__ = [
    "interpolate",
    "get_curve_points",
    "output_length",
    "HermiteBasis",
    "CardinalSpline",
    "fill_spans",
    "pad_open",
    "pad_closed",
    "wrap_segment",
]
