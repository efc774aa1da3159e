"""
Damage Formulas

Stateless physical/elemental damage calculation for a single motion hit.

Physical:
    effective = base * attack_multiplier + addition_attack
    physical  = effective * MV * sharpness * crit_modifier * hit_zone / 10000

Elemental:
    elemental = (element * element_multiplier + element_addition)
                * sharpness * element_modifier * elemental_hit_zone / 1000

Every result is rounded half-up to 2 decimals.
"""

import math

from models import DamageParameters


# Physical: motion value (%) x hit zone (%)
PHYSICAL_DIVISOR = 10000
# Elemental: element value is displayed x10, hit zone (%)
ELEMENTAL_DIVISOR = 1000

DAMAGE_PRECISION = 2


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with ties going toward positive infinity.

    round() uses banker's rounding, which would shift .5 cases down.
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def calculate_effective_weapon_multiplier(params: DamageParameters) -> float:
    """Weapon multiplier after multiplicative and then additive attack bonuses."""
    return params.base_weapon_multiplier * params.attack_multiplier_bonus + params.addition_attack_bonus


def calculate_physical_damage(params: DamageParameters) -> float:
    """
    Calculate physical damage of one hit.

    Args:
        params: Resolved parameter bundle. critical_damage_modifier is 1.25
                by default; pass 1.0 for the non-critical figure.

    Returns:
        Physical damage rounded to 2 decimals
    """
    damage = (
        calculate_effective_weapon_multiplier(params)
        * params.motion_value
        * params.sharpness_modifier
        * params.critical_damage_modifier
        * params.physical_hit_zone
    ) / PHYSICAL_DIVISOR

    return round_half_up(damage, DAMAGE_PRECISION)


def calculate_elemental_damage(params: DamageParameters) -> float:
    """Calculate elemental damage of one hit, rounded to 2 decimals."""
    element = params.base_element_value * params.element_multiplier + params.element_addition

    damage = (
        element
        * params.sharpness_modifier
        * params.element_modifier
        * params.elemental_hit_zone
    ) / ELEMENTAL_DIVISOR

    return round_half_up(damage, DAMAGE_PRECISION)


def calculate_total_damage(params: DamageParameters) -> float:
    """Physical + elemental damage of one hit, rounded to 2 decimals."""
    physical = calculate_physical_damage(params)
    elemental = calculate_elemental_damage(params)
    return round_half_up(physical + elemental, DAMAGE_PRECISION)
