from typing import TypeAlias, Union, Sequence
import numpy as np

ndarray_1d: TypeAlias = np.ndarray[np.floating]
ndarray_2d: TypeAlias = np.ndarray[np.floating]
ndarray_3d: TypeAlias = np.ndarray[np.floating]

# Flat interleaved coordinates: x0, y0, x1, y1, ...
PointSequence: TypeAlias = Union[Sequence[float], ndarray_1d]
