import warnings

import numpy as np
import pytest

from curvecalc.utils.num_utils import truncate_segments, is_close_to_int
from curvecalc.utils.default import value_or_default
from curvecalc.errors import InvalidArgumentError


def test_is_close_to_int():
    assert is_close_to_int(3.0)
    assert is_close_to_int(2.9999999999)
    assert not is_close_to_int(2.5)


def test_truncate_integers():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert truncate_segments(4) == 4
        assert truncate_segments(np.int32(12)) == 12
        assert truncate_segments(8.0) == 8


def test_truncate_toward_zero():
    with pytest.warns(UserWarning, match="truncated"):
        assert truncate_segments(2.99) == 2


@pytest.mark.parametrize("value", [0, -3, -0.5, 0.99, float("inf"), True, "10", None])
def test_truncate_rejects(value):
    with pytest.raises(InvalidArgumentError):
        truncate_segments(value)


def test_value_or_default():
    assert value_or_default(None, 5) == 5
    assert value_or_default(0, 5) == 0
    assert value_or_default(False, True) is False
