"""Shimmer enums."""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Which way the shimmer wave travels across the text."""

    FORWARD = "forward"  # left to right
    REVERSE = "reverse"  # right to left

    @classmethod
    def coerce(cls, value: object) -> Direction:
        """Return a Direction for ``value``, falling back to FORWARD."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("reverse", "left"):
                return cls.REVERSE
        return cls.FORWARD
