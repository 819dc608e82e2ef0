from __future__ import annotations

import numpy as np

from .errors import ConfigurationError


def fade(t: np.ndarray) -> np.ndarray:
    """Quintic fade curve used by Improved Perlin Noise (2002)."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def clamp(v: np.ndarray, lo: float, hi: float) -> np.ndarray:
    return np.minimum(np.maximum(v, lo), hi)


def smootherstep(edge0: np.ndarray, edge1: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Ken Perlin's smootherstep: first and second derivatives vanish at the edges."""
    t = clamp((v - edge0) / (edge1 - edge0), 0.0, 1.0)
    return fade(t)


def lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def validate_tile_size(tile_size: object) -> int:
    if isinstance(tile_size, bool) or not isinstance(tile_size, (int, np.integer)):
        raise ConfigurationError(f"tile_size must be an integer, got {tile_size!r}")
    tile_size = int(tile_size)
    if tile_size < 2 or not is_power_of_two(tile_size):
        raise ConfigurationError(
            f"tile_size must be a power of two >= 2, got {tile_size}"
        )
    return tile_size


def wrap(v: int, period: int) -> int:
    """Floor modulo: the result is always in [0, period)."""
    return ((v % period) + period) % period


def factors_of_two(n: int) -> int:
    """Count the 0 bits below the least significant 1 bit of ``n``.

    Zero has no such bit; it returns -1, lower than any real count.
    """
    if n == 0:
        return -1
    n = abs(int(n))
    return (n & -n).bit_length() - 1
