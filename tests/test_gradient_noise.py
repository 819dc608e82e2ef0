import math

import numpy as np
import pytest

from heightfield.gradient_noise import (
    OCTAVES,
    GradientNoiseHeightField,
    dot_grid_gradient,
    gradient_layer,
    pseudorandom_angle,
)


def test_origin_is_zero():
    field = GradientNoiseHeightField()
    assert field.lattice_height(0, 0) == 0.0


def test_layer_zero_on_integer_points():
    xs, zs = np.meshgrid(np.arange(-4, 5, dtype=np.float64), np.arange(-3, 4, dtype=np.float64))
    assert np.allclose(gradient_layer(xs, zs), 0.0)


def test_octaves_double_amplitude_and_divisor():
    assert OCTAVES == ((4.0, 8.0), (8.0, 16.0), (16.0, 32.0), (32.0, 64.0))


def test_pseudorandom_angle_range_and_formula():
    ix = np.arange(-10, 10, dtype=np.float64)
    iz = np.arange(5, 25, dtype=np.float64)
    a = pseudorandom_angle(ix, iz)
    assert (a >= 0.0).all()
    assert (a < 2.0 * np.pi).all()

    v = (math.sin(3.0) + math.cos(7.0)) * 10000.0
    assert float(pseudorandom_angle(3.0, 7.0)) == pytest.approx(2.0 * math.pi * (v - math.floor(v)))


def test_dot_grid_gradient_matches_rotation():
    theta = float(pseudorandom_angle(1.0, 2.0))
    out = float(dot_grid_gradient(1.0, 2.0, 1.5, 2.25))
    assert out == pytest.approx(0.5 * math.cos(theta) - 0.25 * math.sin(theta))


def test_noise_is_sum_of_octaves():
    field = GradientNoiseHeightField()
    x, z = 13.7, -22.1
    expected = sum(a * float(gradient_layer(x / d, z / d)) for a, d in OCTAVES)
    assert field.height(x, z) == pytest.approx(expected)


def test_vectorized_matches_scalar_and_deterministic():
    field = GradientNoiseHeightField()
    xs = np.array([0.0, 3.0, 17.0, -40.0, 100.0])
    zs = np.array([0.0, 5.0, -9.0, 12.0, 64.0])
    out = field.noise(xs, zs)
    assert out.shape == xs.shape
    for x, z, h in zip(xs, zs, out):
        assert field.lattice_height(int(x), int(z)) == pytest.approx(h)
    assert np.array_equal(out, GradientNoiseHeightField().noise(xs, zs))


def test_continuity_small_step():
    field = GradientNoiseHeightField()
    xg, zg = np.meshgrid(np.linspace(0, 80, 64), np.linspace(0, 80, 64))
    d = 1e-4
    h0 = field.noise(xg, zg)
    h1 = field.noise(xg + d, zg)
    assert float(np.max(np.abs(h1 - h0))) < 0.1


def test_debug_point_matches_height():
    field = GradientNoiseHeightField()
    dbg = field.debug_point(21.5, 9.25)
    assert dbg["height"] == pytest.approx(field.height(21.5, 9.25))
    assert len(dbg["octaves"]) == 4
    first = dbg["octaves"][0]
    assert first["sample"] == {"x": 21.5 / 8.0, "z": 9.25 / 8.0}
    assert set(first["corners"]) == {"c00", "c10", "c01", "c11"}


def test_custom_octaves_validated():
    with pytest.raises(ValueError):
        GradientNoiseHeightField(octaves=())
    with pytest.raises(ValueError):
        GradientNoiseHeightField(octaves=((1.0, 0.0),))
