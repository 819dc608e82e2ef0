import numpy as np
import pytest

from heightfield.core import (
    factors_of_two,
    fade,
    is_power_of_two,
    lerp,
    smootherstep,
    validate_tile_size,
    wrap,
)
from heightfield.errors import ConfigurationError


def test_smootherstep_on_shifted_cell():
    # quintic fade of the cell-relative position; flat at both edges
    edges0 = np.array([-3.0, 7.0])
    v = edges0 + 0.25
    out = smootherstep(edges0, edges0 + 1.0, v)
    assert np.allclose(out, 0.25**3 * (0.25 * (0.25 * 6.0 - 15.0) + 10.0))
    eps = 1e-4
    assert float(smootherstep(2.0, 3.0, 2.0 + eps)) < 1e-10
    assert float(fade(np.array(1.0))) == 1.0


def test_lerp_blends_cell_rows():
    # row blend first, then column, as in one gradient cell
    n00, n10, n01, n11 = 1.0, 3.0, -2.0, 6.0
    top = lerp(n00, n10, 0.5)
    bottom = lerp(n01, n11, 0.5)
    assert top == 2.0
    assert bottom == 2.0
    assert lerp(top, lerp(n01, n11, 0.25), 1.0) == 0.0
    assert np.allclose(lerp(np.array([0.0, 10.0]), np.array([4.0, 0.0]), np.array([0.25, 0.5])), [1.0, 5.0])


def test_smootherstep_clamps_and_is_symmetric():
    v = np.array([-1.0, 0.0, 0.5, 1.0, 2.0])
    out = smootherstep(0.0, 1.0, v)
    assert np.allclose(out, np.array([0.0, 0.0, 0.5, 1.0, 1.0]))
    assert np.isclose(float(smootherstep(3.0, 4.0, 3.25)), 1.0 - float(smootherstep(3.0, 4.0, 3.75)))


def test_wrap_is_floor_modulo():
    assert wrap(0, 64) == 0
    assert wrap(64, 64) == 0
    assert wrap(-1, 64) == 63
    assert wrap(-64, 64) == 0
    assert wrap(-129, 64) == 63
    assert all(0 <= wrap(v, 16) < 16 for v in range(-100, 100))


def test_factors_of_two():
    assert factors_of_two(0) == -1
    assert factors_of_two(1) == 0
    assert factors_of_two(12) == 2
    assert factors_of_two(32) == 5
    assert factors_of_two(63) == 0
    assert factors_of_two(-8) == 3


def test_is_power_of_two():
    assert [n for n in range(0, 70) if is_power_of_two(n)] == [1, 2, 4, 8, 16, 32, 64]


@pytest.mark.parametrize("bad", [0, 1, 3, 48, -64, 64.0, "64", True])
def test_validate_tile_size_rejects(bad):
    with pytest.raises(ConfigurationError):
        validate_tile_size(bad)


def test_validate_tile_size_accepts_numpy_int():
    assert validate_tile_size(np.int64(32)) == 32
