from .errors import ConfigurationError
from .field import HeightField, HeightFieldConfig, Strategy
from .fractal import FractalHeightField, classify
from .gradient_noise import GradientNoiseHeightField
from .grid import height_grid
from .interpolate import Interpolator, bilinear_weights
from .offset import corner_height, random_offset

__all__ = [
    "ConfigurationError",
    "FractalHeightField",
    "GradientNoiseHeightField",
    "HeightField",
    "HeightFieldConfig",
    "Interpolator",
    "Strategy",
    "bilinear_weights",
    "classify",
    "corner_height",
    "height_grid",
    "random_offset",
]
