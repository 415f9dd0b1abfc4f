"""Textual adapters for the shimmer model."""

from shimmer.ui.app import ShimmerActionApp, ShimmerApp
from shimmer.ui.label import ShimmerLabel

__all__ = ["ShimmerActionApp", "ShimmerApp", "ShimmerLabel"]
