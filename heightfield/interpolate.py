from __future__ import annotations

import math
from typing import Protocol


class LatticeHeights(Protocol):
    def lattice_height(self, x: int, z: int) -> float:  # pragma: no cover
        ...


def _axis(v: float) -> tuple[int, int, float, float]:
    lo = math.floor(v)
    hi = math.ceil(v)
    if lo == hi:
        # Integral coordinate: all weight on the lower corner.
        return lo, hi, 0.0, 1.0
    return lo, hi, v - lo, hi - v


def bilinear_weights(x: float, z: float) -> tuple[float, float, float, float]:
    """Weights ``(w11, w12, w21, w22)`` of corners (x1,z1), (x1,z2), (x2,z1), (x2,z2)."""
    _, _, dx1, dx2 = _axis(float(x))
    _, _, dz1, dz2 = _axis(float(z))
    return dx2 * dz2, dx2 * dz1, dx1 * dz2, dx1 * dz1


class Interpolator:
    """Continuous-coordinate heights by bilinear blending of lattice heights.

    Exact on lattice points. When only one coordinate is integral the blend
    reduces to linear interpolation along the other axis.
    """

    def __init__(self, lattice: LatticeHeights):
        self.lattice = lattice

    def height_at(self, x: float, z: float) -> float:
        x = float(x)
        z = float(z)
        x1, x2, dx1, dx2 = _axis(x)
        z1, z2, dz1, dz2 = _axis(z)

        if x == x1 and z == z1:
            return self.lattice.lattice_height(x1, z1)

        h = self.lattice.lattice_height
        return (
            h(x1, z1) * dx2 * dz2
            + h(x1, z2) * dx2 * dz1
            + h(x2, z1) * dx1 * dz2
            + h(x2, z2) * dx1 * dz1
        )
