from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import structlog

from .core import factors_of_two, validate_tile_size, wrap
from .offset import DEFAULT_TILE_SIZE, corner_height, random_offset

logger = structlog.get_logger()

CORNER = "corner"
CENTER = "center"
MIDPOINT = "midpoint"


@dataclass(frozen=True)
class Subdivision:
    kind: str
    delta: int
    parents: tuple[tuple[int, int], ...]


def classify(x: int, z: int, tile_size: int = DEFAULT_TILE_SIZE) -> Subdivision:
    """Find the parent points a lattice point is displaced from.

    A point whose coordinates share the same number of factors of two is a
    center point with four orthogonal parents. Any other point is a midpoint
    with two parents along the coarser axis. Parents come back wrapped.
    """
    x = wrap(int(x), tile_size)
    z = wrap(int(z), tile_size)

    if x == 0 and z == 0:
        return Subdivision(kind=CORNER, delta=0, parents=())

    fx = factors_of_two(x)
    fz = factors_of_two(z)

    if fx == fz:
        d = 1 << fx
        parents = ((x, z - d), (x, z + d), (x - d, z), (x + d, z))
        kind = CENTER
    else:
        if x == 0:
            along_x = False
        elif z == 0:
            along_x = True
        else:
            along_x = fx < fz

        if along_x:
            d = 1 << fx
            parents = ((x - d, z), (x + d, z))
        else:
            d = 1 << fz
            parents = ((x, z - d), (x, z + d))
        kind = MIDPOINT

    wrapped = tuple((wrap(px, tile_size), wrap(pz, tile_size)) for px, pz in parents)
    return Subdivision(kind=kind, delta=d, parents=wrapped)


class FractalHeightField:
    """Periodic midpoint displacement over a ``tile_size`` x ``tile_size`` lattice.

    Every point is the mean of its parents plus a coordinate-keyed offset
    whose scale is the parent spacing. The lattice wraps, so tiles meet
    seamlessly.

    Results are memoized per instance. The cache only skips recomputation;
    ``cache=False`` gives identical heights.
    """

    def __init__(self, *, tile_size: int = DEFAULT_TILE_SIZE, cache: bool = True):
        self.tile_size = validate_tile_size(tile_size)
        self._cache: dict[tuple[int, int], float] | None = {} if cache else None

    @property
    def cached(self) -> bool:
        return self._cache is not None

    @property
    def cache_size(self) -> int:
        return 0 if self._cache is None else len(self._cache)

    def clear_cache(self) -> None:
        if self._cache is not None:
            logger.debug("Fractal cache cleared", entries=len(self._cache))
            self._cache.clear()

    def lattice_height(self, x: int, z: int) -> float:
        return self._resolve(wrap(int(x), self.tile_size), wrap(int(z), self.tile_size))

    def lattice_heights(self, xs: np.ndarray, zs: np.ndarray) -> np.ndarray:
        xs = np.asarray(xs)
        zs = np.asarray(zs)
        if xs.shape != zs.shape:
            raise ValueError("xs and zs must have the same shape")
        out = np.empty(xs.shape, dtype=np.float64)
        for idx in np.ndindex(xs.shape):
            out[idx] = self.lattice_height(int(xs[idx]), int(zs[idx]))
        return out

    def _resolve(self, x: int, z: int) -> float:
        if self._cache is None:
            return self._displace(x, z)
        key = (x, z)
        h = self._cache.get(key)
        if h is None:
            h = self._displace(x, z)
            self._cache[key] = h
        return h

    def _displace(self, x: int, z: int) -> float:
        sub = classify(x, z, self.tile_size)
        if sub.kind == CORNER:
            return corner_height(x, z)

        total = 0.0
        for px, pz in sub.parents:
            total += self._resolve(px, pz)
        average = total / len(sub.parents)
        return average + random_offset(x, z, sub.delta, self.tile_size)
