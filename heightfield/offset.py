from __future__ import annotations

DEFAULT_TILE_SIZE = 64

_MULTIPLIER = 10301
_MODULUS = 1000


def random_offset(x: int, z: int, scale: float, tile_size: int = DEFAULT_TILE_SIZE) -> float:
    """Displacement for lattice point ``(x, z)``, bounded to [-scale/2, scale/2).

    Keyed only by the coordinates, so the same point always gets the same
    offset. The hash is linear and mixes poorly; changing it reshapes every
    generated terrain.
    """
    seed = int(x) * int(tile_size) + int(z)
    unit = (seed * _MULTIPLIER % _MODULUS) / _MODULUS
    return float(scale) * (unit - 0.5)


def corner_height(x: int, z: int) -> float:
    # Tile corners are pinned at zero. A per-origin random corner is not
    # implemented.
    return 0.0
