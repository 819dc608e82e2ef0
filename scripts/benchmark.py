from __future__ import annotations

import time

import numpy as np

from heightfield import HeightField, height_grid
from worldgen.tiles import tile_heights, visible_tiles


def _timeit(label: str, fn) -> float:
    t0 = time.perf_counter()
    fn()
    t1 = time.perf_counter()
    ms = (t1 - t0) * 1000.0
    print(f"{label}: {ms:.2f} ms")
    return ms


def main() -> None:
    """Quick CPU benchmark.

    A full view (radius 100, 20-unit tiles) is 100 tiles of 21x21 vertices.
    The memoized fractal should finish it well under a second; a single
    uncached tile shows the fan-out cost the cache removes.
    """

    view = visible_tiles(0.0, 0.0)

    def run_tiles(field: HeightField, tiles: list[tuple[int, int]]) -> None:
        total = 0.0
        for tile_x, tile_z in tiles:
            out = tile_heights(field, tile_x=tile_x, tile_z=tile_z)
            total += float(np.mean(out))

    _timeit("Fractal: view (cached)", lambda: run_tiles(HeightField(cache=True), view))
    _timeit(
        "Fractal: single tile (uncached)",
        lambda: run_tiles(HeightField(cache=False), view[:1]),
    )
    _timeit(
        "Gradient noise: view",
        lambda: run_tiles(HeightField(strategy="gradient_noise"), view),
    )
    _timeit(
        "Fractal: 256x256 interpolated grid",
        lambda: height_grid(HeightField(), x0=0.25, z0=0.25, width=256, depth=256, step=0.5),
    )


if __name__ == "__main__":
    main()
