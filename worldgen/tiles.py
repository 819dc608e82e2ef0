from __future__ import annotations

import math

import numpy as np
import structlog

from heightfield.errors import ConfigurationError
from heightfield.field import HeightField
from heightfield.grid import height_grid

logger = structlog.get_logger()

TILE_LENGTH = 20
VIEW_RADIUS = 100.0


def tile_origin(*, tile_x: int, tile_z: int, tile_length: int = TILE_LENGTH) -> tuple[int, int]:
    """World coordinates of the (x, z) corner of tile index ``(tile_x, tile_z)``."""
    tl = int(tile_length)
    return int(tile_x) * tl, int(tile_z) * tl


def visible_tiles(
    x: float,
    z: float,
    *,
    radius: float = VIEW_RADIUS,
    tile_length: int = TILE_LENGTH,
) -> list[tuple[int, int]]:
    """Indices of every tile overlapping the square of half-size ``radius`` around (x, z).

    The indices feed straight into ``tile_heights``; ``tile_origin`` maps them
    back to world coordinates.
    """

    tl = int(tile_length)
    if tl <= 0:
        raise ConfigurationError("tile_length must be > 0")
    radius = float(radius)
    if radius < 0.0:
        raise ConfigurationError("radius must be >= 0")

    min_x = math.floor((x - radius) / tl)
    min_z = math.floor((z - radius) / tl)
    max_x = math.ceil((x + radius) / tl)
    max_z = math.ceil((z + radius) / tl)

    return [(tx, tz) for tx in range(min_x, max_x) for tz in range(min_z, max_z)]


def tile_heights(
    field: HeightField,
    *,
    tile_x: int,
    tile_z: int,
    tile_length: int = TILE_LENGTH,
    dtype: object = np.float64,
) -> np.ndarray:
    """Vertex elevations of one tile: ``(tile_length + 1, tile_length + 1)``, row = z.

    Neighbouring tiles share their edge rows, so meshes built from them meet
    without seams.
    """

    tl = int(tile_length)
    if tl <= 0:
        raise ConfigurationError("tile_length must be > 0")
    left, top = tile_origin(tile_x=tile_x, tile_z=tile_z, tile_length=tl)
    out = height_grid(
        field,
        x0=left,
        z0=top,
        width=tl + 1,
        depth=tl + 1,
        dtype=dtype,
    )
    logger.debug("Tile generated", tile_x=int(tile_x), tile_z=int(tile_z), tile_length=tl)
    return out
