"""Blocking helpers that show a shimmer in the terminal.

Example::

    shimmer.run("Loading", "#00D787")

    shimmer.Spinner("Installing", "#00D787").action(install).run()

``headless=True`` runs without a terminal, which is how the tests drive them.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from shimmer.constants import DEFAULT_COLOR
from shimmer.debug_log import export_logs_to_file, is_debug_enabled, log
from shimmer.paths import get_debug_log_path
from shimmer.ui.app import ShimmerActionApp, ShimmerApp

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from textual.app import App

    from shimmer.config import ShimmerOptions


def run(
    text: str,
    color: str = DEFAULT_COLOR,
    options: ShimmerOptions | None = None,
    *,
    headless: bool = False,
    **overrides: Any,
) -> None:
    """Show shimmering text until ctrl+c, q or escape is pressed."""
    _run_app(ShimmerApp(text, color, options, **overrides), headless=headless)


async def run_async(
    text: str,
    color: str = DEFAULT_COLOR,
    options: ShimmerOptions | None = None,
    *,
    headless: bool = False,
    **overrides: Any,
) -> None:
    """Like ``run`` but awaitable; cancel the awaiting task to stop early."""
    await _run_app_async(ShimmerApp(text, color, options, **overrides), headless=headless)


def _run_app(app: App[None], *, headless: bool = False) -> None:
    try:
        app.run(inline=True, headless=headless)
    finally:
        _finish()


async def _run_app_async(app: App[None], *, headless: bool = False) -> None:
    try:
        await app.run_async(inline=True, headless=headless)
    finally:
        _finish()

    # Textual absorbs the cancellation while shutting down; hand it back to the caller.
    task = asyncio.current_task()
    if task is not None and task.cancelling():
        raise asyncio.CancelledError


def _finish() -> None:
    log.bind(None)
    if is_debug_enabled():
        export_logs_to_file(get_debug_log_path())


class Spinner:
    """Builder for running a shimmer alongside background work.

    The shimmer stops as soon as the action returns. ``action`` accepts a
    plain function or a coroutine function. An exception raised by the action
    is re-raised from ``run`` once the terminal is restored.
    """

    def __init__(
        self,
        text: str,
        color: str = DEFAULT_COLOR,
        options: ShimmerOptions | None = None,
        **overrides: Any,
    ) -> None:
        self.text = text
        self.color = color
        self.options = options
        self.overrides = overrides
        self._action: Callable[[], object | Awaitable[object]] | None = None

    def action(self, fn: Callable[[], object | Awaitable[object]]) -> Spinner:
        """Set a function to run while the shimmer animates."""
        self._action = fn
        return self

    def _build_app(self) -> ShimmerApp:
        if self._action is None:
            return ShimmerApp(self.text, self.color, self.options, **self.overrides)
        return ShimmerActionApp(
            self.text, self._action, self.color, self.options, **self.overrides
        )

    def run(self, *, headless: bool = False) -> None:
        """Run the shimmer, blocking until the action completes or ctrl+c."""
        app = self._build_app()
        _run_app(app, headless=headless)
        _raise_action_error(app)

    async def run_async(self, *, headless: bool = False) -> None:
        """Awaitable ``run``; cancel the awaiting task to stop early."""
        app = self._build_app()
        await _run_app_async(app, headless=headless)
        _raise_action_error(app)


def _raise_action_error(app: ShimmerApp) -> None:
    if isinstance(app, ShimmerActionApp) and app.action_error is not None:
        raise app.action_error
