from typing import Optional, TypeVar
import numpy as np

T = TypeVar('T')

# Catmull-Rom tension
DEFAULT_TENSION = 0.5
# Samples emitted per span between two control points
DEFAULT_SEGMENTS = 25
DEFAULT_DTYPE = np.float32


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default
