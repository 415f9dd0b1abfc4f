"""Keybindings for the standalone shimmer apps."""

from __future__ import annotations

from textual.binding import Binding, BindingType

# Plain run: any of the usual quit keys.
RUN_BINDINGS: list[BindingType] = [
    Binding("ctrl+c", "quit", "Quit", priority=True),
    Binding("q", "quit", "Quit"),
    Binding("escape", "quit", "Quit", show=False),
]

# While a background action runs only ctrl+c stops it early.
ACTION_BINDINGS: list[BindingType] = [
    Binding("ctrl+c", "quit", "Quit", priority=True),
]
