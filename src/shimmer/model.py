"""Animation state machine for shimmering text.

The model is an immutable value threaded through ``update``: every message
produces the next model plus an optional request for the next timer tick.
The host (a Textual widget, or anything else with a one-shot timer) owns the
scheduling and feeds ``Tick`` messages back in.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from rich.style import Style
from rich.text import Text

from shimmer.color import color_for_index, generate_wave, normalize_color
from shimmer.config import ShimmerOptions
from shimmer.constants import DEFAULT_COLOR

if TYPE_CHECKING:
    from typing import Any

    from shimmer.enums import Direction


@dataclass(frozen=True, slots=True)
class Tick:
    """Triggers one animation frame."""

    timestamp: float = field(default_factory=time.monotonic)


@dataclass(frozen=True, slots=True)
class ScheduleTick:
    """Request for a single ``Tick`` after ``delay`` seconds."""

    delay: float


@dataclass(frozen=True, slots=True)
class ShimmerModel:
    """A band of brightened color sweeping across a single line of text."""

    text: str
    base_color: str
    wave_colors: tuple[str, ...]
    interval: float
    peak_light: int
    wave_width: int
    wave_pause: int
    direction: Direction
    loading: bool = True
    position: int = 0

    @classmethod
    def create(
        cls,
        text: str,
        base_color: str = DEFAULT_COLOR,
        options: ShimmerOptions | None = None,
        *,
        loading: bool = True,
        **overrides: Any,
    ) -> ShimmerModel:
        """Create a model; keyword overrides take precedence over ``options``."""
        if options is None:
            options = ShimmerOptions()
        unknown = overrides.keys() - ShimmerOptions.model_fields.keys()
        if unknown:
            raise TypeError(f"Unknown shimmer option(s): {', '.join(sorted(unknown))}")
        if overrides:
            options =ShimmerOptions.model_validate(options.model_dump() | overrides)

        color = normalize_color(base_color)
        return cls(
            text=text,
            base_color=color,
            wave_colors=generate_wave(color, options.wave_width, options.peak_light),
            interval=options.interval,
            peak_light=options.peak_light,
            wave_width=options.wave_width,
            wave_pause=options.wave_pause,
            direction=options.direction,
            loading=loading,
        )

    @property
    def options(self) -> ShimmerOptions:
        return ShimmerOptions(
            interval=self.interval,
            peak_light=self.peak_light,
            wave_width=self.wave_width,
            wave_pause=self.wave_pause,
            direction=self.direction,
        )

    @property
    def cycle_length(self) -> int:
        """Positions in one full sweep: text, wave and pause."""
        return len(self.text) + len(self.wave_colors) + self.wave_pause

    def with_text(self, text: str) -> ShimmerModel:
        """Replace the text, keeping the position inside the new cycle."""
        updated = replace(self, text=text)
        return replace(updated, position=self.position % updated.cycle_length)

    def with_loading(self, loading: bool) -> ShimmerModel:
        """Enable or disable the animation."""
        return replace(self, loading=loading)

    def with_options(self, options: ShimmerOptions) -> ShimmerModel:
        """Apply new options, regenerating the wave and keeping the position in range."""
        updated = replace(
            self,
            wave_colors=generate_wave(self.base_color, options.wave_width, options.peak_light),
            interval=options.interval,
            peak_light=options.peak_light,
            wave_width=options.wave_width,
            wave_pause=options.wave_pause,
            direction=options.direction,
        )
        return replace(updated, position=self.position % updated.cycle_length)

    def init(self) -> ScheduleTick | None:
        """Initial scheduling request: the first tick while loading."""
        if self.loading:
            return ScheduleTick(self.interval)
        return None

    def update(self, message: object) -> tuple[ShimmerModel, ScheduleTick | None]:
        """Advance one frame on ``Tick``; anything else is a no-op."""
        if isinstance(message, Tick) and self.loading:
            position = (self.position + 1) % self.cycle_length
            return replace(self, position=position), ScheduleTick(self.interval)
        return self, None

    def color_at(self, index: int) -> str:
        """Color for the character at ``index`` in the current frame."""
        if not self.loading:
            return self.base_color
        return color_for_index(
            self.position,
            index,
            len(self.text),
            self.wave_colors,
            self.direction,
            self.base_color,
        )

    def segments(self) -> list[tuple[str, str]]:
        """``(character, color)`` pairs in text order."""
        return [(char, self.color_at(index)) for index, char in enumerate(self.text)]

    def view(self) -> Text:
        """Render the current frame as Rich text."""
        if not self.loading:
            return Text(self.text, style=Style(color=self.base_color), end="")

        result = Text(end="")
        for char, color in self.segments():
            result.append(char, style=Style(color=color))
        return result
