"""
Unit Tests für die Umrechnung von Slider-Positionen
"""
import math

import pytest

from config import WEIGHT_MAX, WIDTH_MAX
from core.font_parameters import (
    FontVariationParameters,
    default_italic_progress,
    default_weight_progress,
    default_width_progress,
    italic_from_progress,
    weight_from_progress,
    width_from_progress,
)

ALL_PROGRESS = range(0, 101)


@pytest.mark.unit
class TestWidth:
    """Tests für width_from_progress"""

    def test_zero_progress_is_one(self):
        assert width_from_progress(0) == 1.0

    def test_full_progress_is_max(self):
        assert width_from_progress(100) == WIDTH_MAX

    def test_always_within_bounds(self):
        for progress in ALL_PROGRESS:
            width = width_from_progress(progress)
            assert 1 <= width <= WIDTH_MAX, progress

    def test_returns_float(self):
        assert isinstance(width_from_progress(20), float)
        assert width_from_progress(20) == 100.0


@pytest.mark.unit
class TestWeight:
    """Tests für weight_from_progress"""

    def test_boundaries_stay_inside_open_interval(self):
        assert weight_from_progress(0) == 1
        assert weight_from_progress(100) == WEIGHT_MAX - 1

    def test_interior_is_floor(self):
        for progress in range(1, 100):
            assert weight_from_progress(progress) == math.floor(WEIGHT_MAX * progress / 100)

    def test_never_hits_endpoints(self):
        for progress in ALL_PROGRESS:
            weight = weight_from_progress(progress)
            assert 1 <= weight <= WEIGHT_MAX - 1
            assert isinstance(weight, int)

    def test_regular_weight(self):
        assert weight_from_progress(40) == 400


@pytest.mark.unit
class TestItalic:
    """Tests für italic_from_progress"""

    def test_linear_mapping(self):
        for progress in ALL_PROGRESS:
            assert italic_from_progress(progress) == progress / 100.0

    def test_monotonic(self):
        values = [italic_from_progress(p) for p in ALL_PROGRESS]
        assert values == sorted(values)
        assert values[0] == 0.0
        assert values[-1] == 1.0


@pytest.mark.unit
class TestDefaults:
    """Initiale Slider-Positionen aus den Defaults"""

    def test_default_positions(self):
        assert default_width_progress() == 20
        assert default_weight_progress() == 40
        assert default_italic_progress() == 0

    def test_default_positions_map_back_to_defaults(self):
        assert width_from_progress(default_width_progress()) == 100.0
        assert weight_from_progress(default_weight_progress()) == 400


@pytest.mark.unit
class TestFontVariationParameters:

    def test_from_progress(self):
        params = FontVariationParameters.from_progress(0, 100, 100, best_effort=True)
        assert params == FontVariationParameters(width=1.0, weight=999, italic=1.0, best_effort=True)

    def test_is_immutable(self):
        params = FontVariationParameters.from_progress(20, 40, 0)
        with pytest.raises(AttributeError):
            params.weight = 700
