from __future__ import annotations

from worldgen.tiles import (
    TILE_LENGTH,
    VIEW_RADIUS,
    tile_heights,
    tile_origin,
    visible_tiles,
)

__all__ = [
    "TILE_LENGTH",
    "VIEW_RADIUS",
    "tile_heights",
    "tile_origin",
    "visible_tiles",
]
