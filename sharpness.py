"""
Sharpness Table

Physical damage multiplier for each sharpness color.
"""

from typing import Dict, Optional, Union

from models import SharpnessColor, DEFAULT_SHARPNESS


SHARPNESS_MODIFIERS: Dict[SharpnessColor, float] = {
    SharpnessColor.RED: 0.50,
    SharpnessColor.ORANGE: 0.75,
    SharpnessColor.YELLOW: 1.00,
    SharpnessColor.GREEN: 1.05,
    SharpnessColor.BLUE: 1.20,
    SharpnessColor.WHITE: 1.32,
    SharpnessColor.PURPLE: 1.39,
}


def resolve_sharpness(color: Optional[Union[SharpnessColor, str]]) -> SharpnessColor:
    """Normalize a color tag, falling back to white for missing/unknown values."""
    if isinstance(color, SharpnessColor):
        return color
    try:
        return SharpnessColor(color)
    except ValueError:
        return DEFAULT_SHARPNESS


def get_sharpness_modifier(color: Optional[Union[SharpnessColor, str]] = None) -> float:
    """
    Look up the damage modifier for a sharpness color.

    Args:
        color: SharpnessColor, its string value (e.g. "white"), or None

    Returns:
        Multiplier from SHARPNESS_MODIFIERS (white when missing or unknown)
    """
    return SHARPNESS_MODIFIERS[resolve_sharpness(color)]
