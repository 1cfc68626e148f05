import math
import warnings
from numbers import Real

from ..errors import InvalidArgumentError


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def truncate_segments(value) -> int:
    """
    Truncate a segments-per-span value toward zero and validate it.

    Args:
        value: Any real number (int, float or numpy scalar).

    Returns:
        The truncated segment count, always >= 1.

    Raises:
        InvalidArgumentError: If value is not a finite real number or
            truncates to less than one.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"Number of segments must be a real number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Number of segments must be finite, got {value}")
    segments = int(value)
    if segments < 1:
        raise InvalidArgumentError("Number of segments cannot be less than one.")
    if not is_close_to_int(value):
        warnings.warn(f"Number of segments {value} truncated to {segments}")
    return segments
