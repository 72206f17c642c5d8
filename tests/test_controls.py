"""Tests for input translation."""

import pytest

from grid_snake.controls import (
    direction_from_button,
    direction_from_key,
    direction_from_swipe,
)
from grid_snake.snake import Direction


class TestKeys:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("ArrowUp", Direction.UP),
            ("ArrowDown", Direction.DOWN),
            ("ArrowLeft", Direction.LEFT),
            ("ArrowRight", Direction.RIGHT),
        ],
    )
    def test_arrow_keys(self, key, expected):
        assert direction_from_key(key) is expected

    def test_unknown_key(self):
        assert direction_from_key("w") is None


class TestButtons:
    def test_names(self):
        assert direction_from_button("up") is Direction.UP
        assert direction_from_button(" Left ") is Direction.LEFT

    def test_unknown(self):
        assert direction_from_button("sideways") is None
        assert direction_from_button(3) is None


class TestSwipes:
    def test_horizontal(self):
        assert direction_from_swipe((10, 10), (60, 20)) is Direction.RIGHT
        assert direction_from_swipe((60, 10), (10, 20)) is Direction.LEFT

    def test_vertical(self):
        assert direction_from_swipe((10, 10), (15, 80)) is Direction.DOWN
        assert direction_from_swipe((10, 80), (15, 10)) is Direction.UP

    def test_tie_is_vertical(self):
        assert direction_from_swipe((0, 0), (5, 5)) is Direction.DOWN

    def test_tap(self):
        assert direction_from_swipe((3, 3), (3, 3)) is None
