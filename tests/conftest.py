"""Pytest fixtures for shimmer tests."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="shimmer-tests-"))
os.environ["SHIMMER_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

if TYPE_CHECKING:
    from collections.abc import Generator

    from shimmer.model import ShimmerModel


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _clean_config_dir() -> Generator[None, None, None]:
    """Ensure config files written by one test don't leak into the next."""
    yield
    shutil.rmtree(Path(os.environ["SHIMMER_CONFIG_DIR"]), ignore_errors=True)


@pytest.fixture
def hi_model() -> ShimmerModel:
    """Two-character model with the smallest wave and no pause."""
    from shimmer.model import ShimmerModel

    return ShimmerModel.create("Hi", "#00D787", wave_width=2, peak_light=100, wave_pause=0)
