"""Unit tests for the shimmer animation state machine."""

from __future__ import annotations

from dataclasses import replace

import pytest
from rich.style import Style

from shimmer.config import ShimmerOptions
from shimmer.constants import DEFAULTS
from shimmer.enums import Direction
from shimmer.model import ScheduleTick, ShimmerModel, Tick

pytestmark = pytest.mark.unit


def _advance(model: ShimmerModel, ticks: int) -> ShimmerModel:
    for _ in range(ticks):
        model, _request = model.update(Tick())
    return model


class TestCreate:
    def test_defaults(self) -> None:
        model = ShimmerModel.create("Loading")
        assert model.base_color == "#00D787"
        assert model.interval == DEFAULTS.interval
        assert model.peak_light == DEFAULTS.peak_light
        assert model.wave_width == DEFAULTS.wave_width
        assert model.wave_pause == DEFAULTS.wave_pause
        assert model.direction == Direction.FORWARD
        assert model.loading is True
        assert model.position == 0
        assert len(model.wave_colors) == DEFAULTS.wave_width

    def test_out_of_range_values_are_clamped(self) -> None:
        model = ShimmerModel.create("x", peak_light=250, wave_width=1, wave_pause=-4)
        assert model.peak_light == 100
        assert model.wave_width == 2
        assert model.wave_pause == 0
        assert len(model.wave_colors) == 2

    def test_negative_peak_is_clamped_to_zero(self) -> None:
        assert ShimmerModel.create("x", peak_light=-1).peak_light == 0

    def test_color_is_normalized(self) -> None:
        assert ShimmerModel.create("x", "ffc000").base_color == "#FFC000"

    def test_malformed_color_falls_back(self) -> None:
        assert ShimmerModel.create("x", "#nothex").base_color == "#00D787"

    def test_overrides_win_over_options(self) -> None:
        options = ShimmerOptions(wave_width=12, peak_light=40)
        model = ShimmerModel.create("x", options=options, wave_width=4)
        assert model.wave_width == 4
        assert model.peak_light == 40

    def test_misspelled_override_is_rejected(self) -> None:
        with pytest.raises(TypeError, match="wavewidth"):
            ShimmerModel.create("x", wavewidth=3)

    def test_not_loading(self) -> None:
        assert ShimmerModel.create("x", loading=False).loading is False

    def test_options_round_trip(self) -> None:
        options = ShimmerOptions(interval=0.1, wave_width=5, direction=Direction.REVERSE)
        assert ShimmerModel.create("x", options=options).options == options


class TestInit:
    def test_requests_first_tick(self) -> None:
        model = ShimmerModel.create("x", interval=0.2)
        assert model.init() == ScheduleTick(0.2)

    def test_static_requests_nothing(self) -> None:
        assert ShimmerModel.create("x", loading=False).init() is None


class TestUpdate:
    def test_tick_advances_and_reschedules(self, hi_model: ShimmerModel) -> None:
        model, request = hi_model.update(Tick())
        assert model.position == 1
        assert request == ScheduleTick(hi_model.interval)

    def test_update_returns_new_value(self, hi_model: ShimmerModel) -> None:
        model, _ = hi_model.update(Tick())
        assert hi_model.position == 0
        assert model is not hi_model

    def test_cycles_through_four_positions(self, hi_model: ShimmerModel) -> None:
        """len("Hi") + 2 wave colors + 0 pause."""
        positions = []
        model = hi_model
        for _ in range(8):
            positions.append(model.position)
            model, _ = model.update(Tick())
        assert positions == [0, 1, 2, 3, 0, 1, 2, 3]

    def test_cycle_includes_pause(self) -> None:
        model = ShimmerModel.create("abc", wave_width=2, wave_pause=5)
        assert model.cycle_length == 10
        assert _advance(model, 9).position == 9
        assert _advance(model, 10).position == 0

    def test_static_tick_is_noop(self, hi_model: ShimmerModel) -> None:
        static = replace(hi_model, position=1).with_loading(False)
        model, request = static.update(Tick())
        assert model.position == 1
        assert request is None

    def test_other_messages_are_ignored(self, hi_model: ShimmerModel) -> None:
        model, request = hi_model.update("key")
        assert model is hi_model
        assert request is None

    def test_empty_text_still_cycles(self) -> None:
        model = ShimmerModel.create("", wave_width=2, wave_pause=0)
        assert model.cycle_length == 2
        assert _advance(model, 3).position == 1


class TestTransitions:
    def test_with_text_keeps_position_in_range(self) -> None:
        model = replace(ShimmerModel.create("a long label", wave_width=2, wave_pause=0), position=13)
        shorter = model.with_text("ab")
        assert shorter.text == "ab"
        assert 0 <= shorter.position < shorter.cycle_length
        assert shorter.position == 13 % 4

    def test_with_text_same_cycle_keeps_position(self, hi_model: ShimmerModel) -> None:
        model = replace(hi_model, position=3).with_text("Yo")
        assert model.position == 3

    def test_with_loading_round_trip(self, hi_model: ShimmerModel) -> None:
        model = hi_model.with_loading(False).with_loading(True)
        assert model.loading is True
        assert model.init() is not None

    def test_with_options_regenerates_wave(self, hi_model: ShimmerModel) -> None:
        model = hi_model.with_options(ShimmerOptions(wave_width=6, peak_light=50))
        assert len(model.wave_colors) == 6
        assert model.peak_light == 50
        assert model.base_color == hi_model.base_color


class TestRender:
    def test_forward_highlight(self, hi_model: ShimmerModel) -> None:
        """At position 1 the peak sits on 'H' and the wave start on 'i'."""
        model = replace(hi_model, position=1)
        assert model.segments() == [("H", "#FFFFFF"), ("i", "#00D787")]

    def test_forward_position_zero(self, hi_model: ShimmerModel) -> None:
        assert hi_model.color_at(0) == hi_model.wave_colors[0]
        assert hi_model.color_at(1) == hi_model.base_color

    def test_reverse_swaps_characters(self, hi_model: ShimmerModel) -> None:
        model = replace(hi_model, position=1, direction=Direction.REVERSE)
        assert model.segments() == [("H", "#00D787"), ("i", "#FFFFFF")]

    def test_reverse_position_zero(self, hi_model: ShimmerModel) -> None:
        model = replace(hi_model, direction=Direction.REVERSE)
        assert model.color_at(0) == model.base_color
        assert model.color_at(1) == model.wave_colors[0]

    def test_static_is_flat(self, hi_model: ShimmerModel) -> None:
        model = replace(hi_model, position=1).with_loading(False)
        assert model.segments() == [("H", "#00D787"), ("i", "#00D787")]
        text = model.view()
        assert text.plain == "Hi"
        assert text.style == Style(color="#00D787")
        assert not text.spans

    def test_view_styles_each_character(self, hi_model: ShimmerModel) -> None:
        text = replace(hi_model, position=1).view()
        assert text.plain == "Hi"
        assert [span.style for span in text.spans] == [
            Style(color="#FFFFFF"),
            Style(color="#00D787"),
        ]

    def test_iterates_code_points(self) -> None:
        model = ShimmerModel.create("héllo✨", wave_width=2)
        assert [char for char, _ in model.segments()] == list("héllo✨")
