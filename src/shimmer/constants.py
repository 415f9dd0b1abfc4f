"""Animation defaults and limits - no circular dependencies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShimmerDefaults:
    """Default animation settings applied when an option is not given."""

    interval: float = 0.05  # seconds between frames
    peak_light: int = 90  # blend toward white at the wave centre (0-100)
    wave_width: int = 8  # characters covered by the wave
    wave_pause: int = 8  # idle positions between sweeps


DEFAULTS = ShimmerDefaults()

DEFAULT_COLOR = "#00D787"
FALLBACK_RGB: tuple[int, int, int] = (0, 215, 135)

MIN_WAVE_WIDTH = 2
MIN_WAVE_PAUSE = 0
MIN_PEAK_LIGHT = 0
MAX_PEAK_LIGHT = 100

MAX_LOG_MESSAGE_LENGTH = 4096
MAX_LOG_LINES = 2000
