from .array_types import ndarray_1d, ndarray_2d, ndarray_3d, PointSequence

__all__ = ["ndarray_1d", "ndarray_2d", "ndarray_3d", "PointSequence"]
