from __future__ import annotations

import io
import math

import numpy as np
from PIL import Image

from heightfield.field import HeightField, Strategy
from worldgen.tiles import TILE_LENGTH, tile_heights, tile_origin


def elevation_window(field: HeightField) -> tuple[float, float]:
    """Symmetric range every elevation of ``field`` falls in.

    Midpoint displacement adds at most half the parent spacing per frame and
    visits two frames per level, so heights stay within ``tile_size - 1``.
    Each gradient-noise octave stays within ``sqrt(2)`` times its amplitude.
    """

    if field.strategy is Strategy.FRACTAL:
        bound = float(field.tile_size - 1)
    else:
        bound = math.sqrt(2.0) * sum(a for a, _ in field.lattice.octaves)
    return -bound, bound


def heights_to_png_bytes(heights: np.ndarray, *, window: tuple[float, float]) -> bytes:
    """Shade elevations into an 8-bit grayscale PNG, row = z.

    The shading window is fixed by the caller rather than taken from the
    block itself, so the same height gets the same gray level in every tile.
    """

    heights = np.asarray(heights, dtype=np.float64)
    if heights.ndim != 2:
        raise ValueError("expected a 2D array")
    lo, hi = (float(v) for v in window)
    if not hi > lo:
        raise ValueError("window must satisfy lo < hi")

    shade = np.rint((heights - lo) / (hi - lo) * 255.0)
    img = np.clip(shade, 0.0, 255.0).astype(np.uint8)

    out = io.BytesIO()
    Image.fromarray(img, mode="L").save(out, format="PNG")
    return out.getvalue()


def heightmap_to_obj_bytes(
    heights: np.ndarray,
    *,
    x0: float = 0.0,
    z0: float = 0.0,
    y_scale: float = 1.0,
) -> bytes:
    """Triangulate a ``(depth, width)`` grid (row = z) into Wavefront OBJ text.

    Vertices are ``x, height, z`` with y up; each lattice cell becomes two
    triangles.
    """

    heights = np.asarray(heights, dtype=np.float64)
    if heights.ndim != 2:
        raise ValueError("expected a 2D array")

    y_scale = float(y_scale)
    d, w = heights.shape
    if d < 2 or w < 2:
        raise ValueError("heightmap must be at least 2x2")

    def vid(i: int, j: int) -> int:
        return j * w + i + 1

    lines: list[str] = []
    lines.append("# Height field mesh\n")
    lines.append(f"# grid={w}x{d} origin={x0:g},{z0:g}\n")

    for j in range(d):
        for i in range(w):
            lines.append(
                f"v {(x0 + i):.6f} {(heights[j, i] * y_scale):.6f} {(z0 + j):.6f}\n"
            )

    for j in range(d - 1):
        for i in range(w - 1):
            v11 = vid(i, j)
            v21 = vid(i + 1, j)
            v12 = vid(i, j + 1)
            v22 = vid(i + 1, j + 1)
            lines.append(f"f {v11} {v21} {v12}\n")
            lines.append(f"f {v22} {v12} {v21}\n")

    return "".join(lines).encode("utf-8")


def tile_to_obj_bytes(
    field: HeightField,
    *,
    tile_x: int,
    tile_z: int,
    tile_length: int = TILE_LENGTH,
    y_scale: float = 1.0,
) -> bytes:
    """Mesh of one tile placed at its world origin."""
    left, top = tile_origin(tile_x=tile_x, tile_z=tile_z, tile_length=tile_length)
    heights = tile_heights(field, tile_x=tile_x, tile_z=tile_z, tile_length=tile_length)
    return heightmap_to_obj_bytes(heights, x0=left, z0=top, y_scale=y_scale)


def tile_to_png_bytes(
    field: HeightField,
    *,
    tile_x: int,
    tile_z: int,
    tile_length: int = TILE_LENGTH,
) -> bytes:
    heights = tile_heights(field, tile_x=tile_x, tile_z=tile_z, tile_length=tile_length)
    return heights_to_png_bytes(heights, window=elevation_window(field))
