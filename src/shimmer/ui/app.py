"""Standalone Textual apps that show a single shimmering label."""

from __future__ import annotations

import asyncio
import inspect
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from textual.app import App
from textual.message import Message

from shimmer.constants import DEFAULT_COLOR
from shimmer.debug_log import log, setup_debug_logging
from shimmer.keybindings import ACTION_BINDINGS, RUN_BINDINGS
from shimmer.ui.label import ShimmerLabel

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from textual.app import ComposeResult

    from shimmer.config import ShimmerOptions


class ShimmerApp(App[None], inherit_bindings=False):
    """Shimmers until the user presses ctrl+c, q or escape."""

    CSS = """
    Screen {
        height: auto;
    }
    """

    BINDINGS = RUN_BINDINGS
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        text: str,
        color: str = DEFAULT_COLOR,
        options: ShimmerOptions | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__()
        self._label_text = text
        self._label_color = color
        self._label_options = options
        self._label_overrides = overrides

    @property
    def label(self) -> ShimmerLabel:
        return self.query_one("#shimmer", ShimmerLabel)

    def compose(self) -> ComposeResult:
        yield ShimmerLabel(
            self._label_text,
            self._label_color,
            self._label_options,
            id="shimmer",
            **self._label_overrides,
        )

    def on_mount(self) -> None:
        setup_debug_logging()
        log.bind(self)
        log.debug("Shimmer started", text=self._label_text, color=self.label.model.base_color)

    def action_quit(self) -> None:
        log.debug("Quit requested")
        self.exit()


class ShimmerActionApp(ShimmerApp, inherit_bindings=False):
    """Shimmers while a background action runs, then exits.

    A plain function runs on a daemon thread, so quitting with ctrl+c returns
    at once and abandons it. A coroutine function runs as a worker on the
    app's event loop and is cancelled on quit. Either way the app receives
    exactly one ``ActionDone`` message. Only ctrl+c quits early.
    """

    BINDINGS = ACTION_BINDINGS

    @dataclass
    class ActionDone(Message):
        error: Exception | None = None

    def __init__(
        self,
        text: str,
        action: Callable[[], object | Awaitable[object]],
        color: str = DEFAULT_COLOR,
        options: ShimmerOptions | None = None,
        **overrides: Any,
    ) -> None:
        super().__init__(text, color, options, **overrides)
        self._background_action = action
        self.action_error: Exception | None = None

    def on_mount(self) -> None:
        if inspect.iscoroutinefunction(self._background_action):
            self.run_worker(
                self._await_background_action(),
                name="shimmer-action",
                exit_on_error=False,
            )
            return

        threading.Thread(
            target=self._run_background_action,
            name="shimmer-action",
            daemon=True,
        ).start()

    async def _await_background_action(self) -> None:
        error: Exception | None = None
        try:
            await self._background_action()
        except Exception as exc:
            error = exc
        self.post_message(self.ActionDone(error))

    def _run_background_action(self) -> None:
        error: Exception | None = None
        try:
            result = self._background_action()
            if inspect.iscoroutine(result):
                asyncio.run(result)
        except Exception as exc:
            error = exc
        # Dropped when the app has already closed.
        self.post_message(self.ActionDone(error))

    def on_shimmer_action_app_action_done(self, message: ShimmerActionApp.ActionDone) -> None:
        self.action_error = message.error
        if message.error is not None:
            log.error("Background action failed", error=repr(message.error))
        else:
            log.debug("Background action finished")
        self.exit()
