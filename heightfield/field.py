from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from .core import validate_tile_size
from .errors import ConfigurationError
from .fractal import FractalHeightField
from .gradient_noise import GradientNoiseHeightField
from .interpolate import Interpolator, LatticeHeights
from .offset import DEFAULT_TILE_SIZE

logger = structlog.get_logger()


class Strategy(str, Enum):
    FRACTAL = "fractal"
    GRADIENT_NOISE = "gradient_noise"

    @classmethod
    def parse(cls, value: object) -> "Strategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            raise ConfigurationError(f"unknown strategy: {value}") from None


@dataclass(frozen=True)
class HeightFieldConfig:
    """Construction settings for a HeightField.

    ``cache`` only applies to the fractal strategy. Gradient noise is
    evaluated directly and keeps no cache, so the flag has no effect there;
    ``uses_cache`` reports the effective setting.
    """

    tile_size: int = DEFAULT_TILE_SIZE
    strategy: Strategy = Strategy.FRACTAL
    cache: bool = True

    def __post_init__(self):
        object.__setattr__(self, "tile_size", validate_tile_size(self.tile_size))
        object.__setattr__(self, "strategy", Strategy.parse(self.strategy))
        object.__setattr__(self, "cache", bool(self.cache))

    @property
    def uses_cache(self) -> bool:
        return self.cache and self.strategy is Strategy.FRACTAL


def make_lattice_strategy(config: HeightFieldConfig) -> LatticeHeights:
    if config.strategy is Strategy.FRACTAL:
        return FractalHeightField(tile_size=config.tile_size, cache=config.cache)
    if config.strategy is Strategy.GRADIENT_NOISE:
        return GradientNoiseHeightField()
    raise ConfigurationError(f"unknown strategy: {config.strategy}")


class HeightField:
    """Elevation for any (x, z), backed by one lattice strategy.

    The strategy is picked at construction and never changes. ``height_at``
    interpolates between lattice points; ``lattice_height`` is the per-vertex
    query used by mesh tessellation.
    """

    def __init__(
        self,
        *,
        tile_size: int = DEFAULT_TILE_SIZE,
        strategy: Strategy | str = Strategy.FRACTAL,
        cache: bool = True,
    ):
        self.config = HeightFieldConfig(tile_size=tile_size, strategy=strategy, cache=cache)
        self.lattice = make_lattice_strategy(self.config)
        self.interpolator = Interpolator(self.lattice)
        logger.info(
            "Height field created",
            strategy=self.config.strategy.value,
            tile_size=self.config.tile_size,
            cache=self.config.uses_cache,
        )
        if self.config.cache and not self.config.uses_cache:
            logger.debug("Cache setting has no effect", strategy=self.config.strategy.value)

    @classmethod
    def from_config(cls, config: HeightFieldConfig) -> "HeightField":
        return cls(tile_size=config.tile_size, strategy=config.strategy, cache=config.cache)

    @property
    def tile_size(self) -> int:
        return self.config.tile_size

    @property
    def strategy(self) -> Strategy:
        return self.config.strategy

    def height_at(self, x: float, z: float) -> float:
        return self.interpolator.height_at(x, z)

    def lattice_height(self, x: int, z: int) -> float:
        return self.lattice.lattice_height(int(x), int(z))
