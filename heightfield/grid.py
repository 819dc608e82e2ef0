from __future__ import annotations

import numpy as np
import structlog

from .errors import ConfigurationError
from .field import HeightField
from .gradient_noise import GradientNoiseHeightField

logger = structlog.get_logger()


def height_grid(
    field: HeightField,
    *,
    x0: float,
    z0: float,
    width: int,
    depth: int,
    step: float = 1.0,
    dtype: np.dtype | None = None,
) -> np.ndarray:
    """Sample a rectangular block of elevations.

    Rows run along z and columns along x, so the result is ``(depth, width)``.
    Integer-aligned blocks go through the lattice query, in a single
    vectorized call for gradient noise; anything else is interpolated.
    """

    width = int(width)
    depth = int(depth)
    if width <= 0 or depth <= 0:
        raise ConfigurationError("width and depth must be > 0")
    step = float(step)
    if step <= 0.0:
        raise ConfigurationError("step must be > 0")

    x0 = float(x0)
    z0 = float(z0)
    xs = x0 + np.arange(width, dtype=np.float64) * step
    zs = z0 + np.arange(depth, dtype=np.float64) * step

    on_lattice = (
        x0.is_integer() and z0.is_integer() and step.is_integer()
    )
    vectorized = on_lattice and isinstance(field.lattice, GradientNoiseHeightField)
    out = np.empty((depth, width), dtype=np.float64)
    if vectorized:
        xg, zg = np.meshgrid(xs, zs)
        out = field.lattice.noise(xg, zg)
    elif on_lattice:
        for j, z in enumerate(zs):
            for i, x in enumerate(xs):
                out[j, i] = field.lattice_height(int(x), int(z))
    else:
        for j, z in enumerate(zs):
            for i, x in enumerate(xs):
                out[j, i] = field.height_at(float(x), float(z))

    logger.debug(
        "Height grid sampled",
        width=width,
        depth=depth,
        step=step,
        on_lattice=on_lattice,
        vectorized=vectorized,
    )

    if dtype is not None:
        out = np.asarray(out, dtype=dtype)
    return out
