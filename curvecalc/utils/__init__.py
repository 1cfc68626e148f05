from .default import (
    value_or_default,
    DEFAULT_TENSION,
    DEFAULT_SEGMENTS,
    DEFAULT_DTYPE,
)
from .num_utils import truncate_segments, is_close_to_int

__all__ = [
    "value_or_default",
    "DEFAULT_TENSION",
    "DEFAULT_SEGMENTS",
    "DEFAULT_DTYPE",
    "truncate_segments",
    "is_close_to_int",
]
