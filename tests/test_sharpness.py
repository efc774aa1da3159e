"""Tests for the sharpness table."""

import pytest

from models import SharpnessColor
from sharpness import SHARPNESS_MODIFIERS, get_sharpness_modifier, resolve_sharpness


def test_every_color_has_a_modifier():
    assert set(SHARPNESS_MODIFIERS) == set(SharpnessColor)


def test_modifiers_increase_with_sharpness():
    values = [SHARPNESS_MODIFIERS[color] for color in SharpnessColor]
    assert values == sorted(values)


@pytest.mark.parametrize("color,expected", [
    (SharpnessColor.RED, 0.50),
    (SharpnessColor.YELLOW, 1.00),
    (SharpnessColor.WHITE, 1.32),
    ("blue", 1.20),
    ("purple", 1.39),
])
def test_known_colors(color, expected):
    assert get_sharpness_modifier(color) == expected


@pytest.mark.parametrize("color", [None, "", "rainbow"])
def test_missing_or_unknown_color_falls_back_to_white(color):
    assert resolve_sharpness(color) is SharpnessColor.WHITE
    assert get_sharpness_modifier(color) == 1.32
