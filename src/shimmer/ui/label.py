"""ShimmerLabel widget: a single line of text with a sweeping highlight."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textual.reactive import var
from textual.widget import Widget

from shimmer.constants import DEFAULT_COLOR
from shimmer.model import ScheduleTick, ShimmerModel, Tick

if TYPE_CHECKING:
    from rich.text import Text
    from textual.timer import Timer

    from shimmer.config import ShimmerOptions


class ShimmerLabel(Widget):
    """Renders a ``ShimmerModel`` and drives it with one-shot timers."""

    DEFAULT_CSS = """
    ShimmerLabel {
        width: auto;
        height: 1;
    }
    """

    text: var[str] = var("", init=False)
    shimmering: var[bool] = var(True, init=False)

    def __init__(
        self,
        text: str,
        color: str = DEFAULT_COLOR,
        options: ShimmerOptions | None = None,
        *,
        shimmering: bool = True,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.model = ShimmerModel.create(
            text, color, options, loading=shimmering, **overrides
        )
        self._timer: Timer | None = None
        self.set_reactive(ShimmerLabel.text, text)
        self.set_reactive(ShimmerLabel.shimmering, shimmering)

    def on_mount(self) -> None:
        self._schedule(self.model.init())

    def on_unmount(self) -> None:
        self._cancel_timer()

    def render(self) -> Text:
        return self.model.view()

    def watch_text(self, text: str) -> None:
        self.model = self.model.with_text(text)
        self.refresh(layout=True)

    def watch_shimmering(self, shimmering: bool) -> None:
        self.model = self.model.with_loading(shimmering)
        if shimmering:
            self._schedule(self.model.init())
        else:
            self._cancel_timer()
        self.refresh()

    def apply_options(self, options: ShimmerOptions) -> None:
        """Change wave settings without restarting the sweep."""
        self.model = self.model.with_options(options)
        self.refresh()

    def _schedule(self, request: ScheduleTick | None) -> None:
        """Start the single pending timer for ``request``."""
        self._cancel_timer()
        if request is not None:
            self._timer = self.set_timer(request.delay, self._on_tick)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _on_tick(self) -> None:
        self._timer = None
        self.model, request = self.model.update(Tick())
        self._schedule(request)
        self.refresh()
