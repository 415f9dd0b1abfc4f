"""Shimmer: animated highlight sweeping across terminal text."""

from shimmer.color import color_for_index, generate_wave, lighten, parse_color
from shimmer.config import ShimmerConfig, ShimmerOptions
from shimmer.constants import DEFAULTS
from shimmer.enums import Direction
from shimmer.model import ScheduleTick, ShimmerModel, Tick
from shimmer.runner import Spinner, run, run_async

__version__ = "0.1.0"

__all__ = [
    "DEFAULTS",
    "Direction",
    "ScheduleTick",
    "ShimmerConfig",
    "ShimmerModel",
    "ShimmerOptions",
    "Spinner",
    "Tick",
    "color_for_index",
    "generate_wave",
    "lighten",
    "parse_color",
    "run",
    "run_async",
]
