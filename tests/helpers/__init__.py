"""Test helpers package."""

from tests.helpers.wait import wait_until

__all__ = ["wait_until"]
