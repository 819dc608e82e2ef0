from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .core import lerp, smootherstep

# (amplitude, divisor): frequency halves while amplitude doubles.
OCTAVES: tuple[tuple[float, float], ...] = ((4.0, 8.0), (8.0, 16.0), (16.0, 32.0), (32.0, 64.0))


@dataclass(frozen=True)
class GridCorner:
    ix: int
    iz: int
    angle: float
    dx: float
    dz: float
    dot: float


def pseudorandom_angle(ix: np.ndarray, iz: np.ndarray) -> np.ndarray:
    v = (np.sin(ix) + np.cos(iz)) * 10000.0
    return 2.0 * np.pi * (v - np.floor(v))


def dot_grid_gradient(
    ix: np.ndarray, iz: np.ndarray, x: np.ndarray, z: np.ndarray
) -> np.ndarray:
    dx = x - ix
    dz = z - iz
    angle = pseudorandom_angle(ix, iz)
    return dx * np.cos(angle) + dz * -np.sin(angle)


def _corner(ix: float, iz: float, x: float, z: float) -> GridCorner:
    return GridCorner(
        ix=int(ix),
        iz=int(iz),
        angle=float(pseudorandom_angle(ix, iz)),
        dx=x - ix,
        dz=z - iz,
        dot=float(dot_grid_gradient(ix, iz, x, z)),
    )


def gradient_layer(x: np.ndarray, z: np.ndarray) -> np.ndarray:
    """One octave of gradient noise, zero on every integer lattice point."""
    x = np.asarray(x, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    x0 = np.floor(x)
    z0 = np.floor(z)
    x1 = x0 + 1.0
    z1 = z0 + 1.0
    sx = smootherstep(x0, x1, x)
    sz = smootherstep(z0, z1, z)

    n0 = dot_grid_gradient(x0, z0, x, z)
    n1 = dot_grid_gradient(x1, z0, x, z)
    ix0 = lerp(n0, n1, sx)
    n0 = dot_grid_gradient(x0, z1, x, z)
    n1 = dot_grid_gradient(x1, z1, x, z)
    ix1 = lerp(n0, n1, sx)
    return lerp(ix0, ix1, sz)


class GradientNoiseHeightField:
    """Layered gradient noise heights; smooth but not periodic."""

    def __init__(self, *, octaves: tuple[tuple[float, float], ...] = OCTAVES):
        self.octaves = tuple((float(a), float(d)) for a, d in octaves)
        if not self.octaves:
            raise ValueError("at least one octave is required")
        if any(d <= 0.0 for _, d in self.octaves):
            raise ValueError("octave divisors must be > 0")

    def noise(self, x: np.ndarray, z: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64)
        z = np.asarray(z, dtype=np.float64)
        total = np.zeros(np.broadcast(x, z).shape, dtype=np.float64)
        for amplitude, divisor in self.octaves:
            total += amplitude * gradient_layer(x / divisor, z / divisor)
        return total

    def height(self, x: float, z: float) -> float:
        return float(self.noise(np.array(float(x)), np.array(float(z))))

    def lattice_height(self, x: int, z: int) -> float:
        return self.height(int(x), int(z))

    def debug_point(self, x: float, z: float) -> dict:
        # Per-octave breakdown for inspection.
        xf = float(x)
        zf = float(z)
        layers = []
        total = 0.0
        for amplitude, divisor in self.octaves:
            lx = xf / divisor
            lz = zf / divisor
            x0 = float(np.floor(lx))
            z0 = float(np.floor(lz))
            sx = float(smootherstep(x0, x0 + 1.0, lx))
            sz = float(smootherstep(z0, z0 + 1.0, lz))

            c00 = _corner(x0, z0, lx, lz)
            c10 = _corner(x0 + 1.0, z0, lx, lz)
            c01 = _corner(x0, z0 + 1.0, lx, lz)
            c11 = _corner(x0 + 1.0, z0 + 1.0, lx, lz)
            value = float(gradient_layer(lx, lz))
            total += amplitude * value
            layers.append(
                {
                    "amplitude": amplitude,
                    "divisor": divisor,
                    "sample": {"x": lx, "z": lz},
                    "smooth": {"sx": sx, "sz": sz},
                    "corners": {
                        "c00": c00.__dict__,
                        "c10": c10.__dict__,
                        "c01": c01.__dict__,
                        "c11": c11.__dict__,
                    },
                    "value": value,
                }
            )

        return {"input": {"x": xf, "z": zf}, "octaves": layers, "height": total}
