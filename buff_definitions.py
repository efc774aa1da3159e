"""
Buff Definitions for the Hunt Damage Calculator

This file centralizes the attack buffs that sit outside the skill system:
consumable item buffs and weapon-category mechanics.
To add new buffs, simply add entries to the appropriate dictionary below.

ORGANIZATION:
- ITEM_BUFFS: Flat attack from consumables and carried items, by source
- SPIRIT_GAUGE_MULTIPLIERS: Long sword spirit gauge attack multiplier

STAT KEY REFERENCE:
    attack      - Flat attack added to the weapon multiplier
    label       - Display name

STACKING NOTE:
    Item buffs are summed as selected. Mutually exclusive buffs
    (e.g. Demondrug and Mega Demondrug) are not filtered here.
"""

from typing import Dict, Iterable

from models import (
    NEUTRAL_MULTIPLIER, SpiritGauge, WeaponParameters, WeaponType,
)


# =============================================================================
# ITEM BUFFS
# =============================================================================

ITEM_BUFFS = {
    # -------------------------------------------------------------------------
    # DRINKS
    # -------------------------------------------------------------------------
    "drinks": {
        "demondrug": {"label": "Demondrug", "attack": 5},
        "mega_demondrug": {"label": "Mega Demondrug", "attack": 7},
    },

    # -------------------------------------------------------------------------
    # SEEDS / POWDERS
    # -------------------------------------------------------------------------
    "seeds": {
        "might_seed": {"label": "Might Seed", "attack": 10},
        "demon_powder": {"label": "Demon Powder", "attack": 10},
    },

    # -------------------------------------------------------------------------
    # CARRIED ITEMS
    # -------------------------------------------------------------------------
    "carried": {
        "powercharm": {"label": "Powercharm", "attack": 6},
        "powertalon": {"label": "Powertalon", "attack": 9},
    },
}


def get_item_buff_sources():
    """Get list of item buff source categories."""
    return list(ITEM_BUFFS.keys())


def get_all_item_buffs_flat() -> dict:
    """Get all item buffs as a flat dictionary (buff_key -> stats)."""
    result = {}
    for source, buffs in ITEM_BUFFS.items():
        for key, stats in buffs.items():
            result[key] = {**stats, "_source": source}
    return result


def get_item_buff_total(buff_keys: Iterable[str]) -> int:
    """
    Sum the flat attack of the selected item buffs.

    Args:
        buff_keys: Selected buff keys (e.g., ["demondrug", "powercharm"])

    Returns:
        Total attack; unknown keys contribute 0
    """
    buffs = get_all_item_buffs_flat()
    return sum(buffs.get(key, {}).get("attack", 0) for key in buff_keys)


# =============================================================================
# WEAPON MECHANICS
# =============================================================================

SPIRIT_GAUGE_MULTIPLIERS: Dict[SpiritGauge, float] = {
    SpiritGauge.NONE: 1.0,
    SpiritGauge.WHITE: 1.02,
    SpiritGauge.YELLOW: 1.04,
    SpiritGauge.RED: 1.1,
}


def get_weapon_attack_multiplier(weapon: WeaponParameters) -> float:
    """
    Attack multiplier granted by the weapon category's own mechanic.

    Only the long sword has one (spirit gauge); every other category is neutral.
    """
    if weapon.weapon_type is WeaponType.LONG_SWORD:
        return SPIRIT_GAUGE_MULTIPLIERS.get(weapon.spirit_gauge, NEUTRAL_MULTIPLIER)
    return NEUTRAL_MULTIPLIER
