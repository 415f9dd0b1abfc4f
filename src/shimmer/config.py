"""Option models and the TOML configuration loader."""

from __future__ import annotations

import logging
import os
import tempfile
import tomllib
from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from shimmer.color import is_valid_color
from shimmer.constants import (
    DEFAULT_COLOR,
    DEFAULTS,
    MAX_PEAK_LIGHT,
    MIN_PEAK_LIGHT,
    MIN_WAVE_PAUSE,
    MIN_WAVE_WIDTH,
)
from shimmer.enums import Direction
from shimmer.paths import get_config_path

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a config file cannot be read or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ShimmerOptions(BaseModel):
    """Animation options. Out-of-range values are clamped, never rejected."""

    model_config = ConfigDict(frozen=True)

    interval: float = Field(default=DEFAULTS.interval, description="Seconds between frames")
    peak_light: int = Field(
        default=DEFAULTS.peak_light, description="Maximum blend toward white (0-100)"
    )
    wave_width: int = Field(default=DEFAULTS.wave_width, description="Wave width in characters")
    wave_pause: int = Field(
        default=DEFAULTS.wave_pause, description="Idle positions between wave loops"
    )
    direction: Direction = Field(default=Direction.FORWARD, description="Wave direction")

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, value: float) -> float:
        if value <= 0:
            logger.debug("interval %r is not positive, using %r", value, DEFAULTS.interval)
            return DEFAULTS.interval
        return value

    @field_validator("peak_light")
    @classmethod
    def clamp_peak_light(cls, value: int) -> int:
        return max(MIN_PEAK_LIGHT, min(MAX_PEAK_LIGHT, value))

    @field_validator("wave_width")
    @classmethod
    def clamp_wave_width(cls, value: int) -> int:
        return max(MIN_WAVE_WIDTH, value)

    @field_validator("wave_pause")
    @classmethod
    def clamp_wave_pause(cls, value: int) -> int:
        return max(MIN_WAVE_PAUSE, value)

    @field_validator("direction", mode="before")
    @classmethod
    def validate_direction(cls, value: object) -> Direction:
        """Gracefully coerce unknown values to forward."""
        return Direction.coerce(value)


class ShimmerConfig(BaseModel):
    """Root configuration model."""

    color: str = Field(default=DEFAULT_COLOR, description="Base color as #RRGGBB")
    options: ShimmerOptions = Field(default_factory=ShimmerOptions)

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str) -> str:
        if not is_valid_color(value):
            logger.debug("color %r is malformed, falling back", value)
            return DEFAULT_COLOR
        return value

    @classmethod
    def load(cls, config_path: Path | None = None) -> ShimmerConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(config_path, str(exc)) from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(config_path, str(exc)) from exc

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file (created if missing)."""
        doc = tomlkit.document()
        doc["color"] = self.color

        options_table = tomlkit.table()
        for key, value in self.options.model_dump(mode="json").items():
            options_table[key] = value
        doc["options"] = options_table

        _atomic_write(path, tomlkit.dumps(doc))


def _atomic_write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        Path(tmp_path).replace(path)
    except Exception:
        Path(tmp_path).unlink(missing_ok=True)
        raise
