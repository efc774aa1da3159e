"""
Damage Table Service

Builds the damage table for a weapon/skill build against every part and state
of a monster.

The workflow for each (part, state):
1. Resolve hit zones for the state
2. Seed the attack multiplier with the weapon-category mechanic (spirit gauge)
3. For every motion: resolve applicable skills -> fold bonuses -> run the
   calculator twice (critical and non-critical) -> multiply by hit count
4. Blend the two columns by the effective critical rate into the expected value

Usage:
    from damage_table import calculate_damage_table

    rows = calculate_damage_table(weapon, motions, monster, "white", skills)
    for row in rows:
        print(row.part, row.state.value, row.expected)
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Union

from models import (
    BASE_CRITICAL_DAMAGE_MODIFIER, DEFAULT_CRITICAL_DAMAGE_MODIFIER,
    DEFAULT_ELEMENT_MODIFIER, NEUTRAL_ADDITION, NEUTRAL_MULTIPLIER,
    DamageParameters, DamageTableRow, EquippedSkill, Monster, Motion,
    PartStateDetails, SharpnessColor, SkillParameters, WeaponParameters,
)
from sharpness import get_sharpness_modifier
from damage_formulas import (
    calculate_elemental_damage, calculate_physical_damage, round_half_up,
    DAMAGE_PRECISION,
)
from skill_resolver import (
    get_applicable_skills, get_elemental_hit_zone, get_physical_hit_zone,
    get_skill_effect,
)
from buff_definitions import get_weapon_attack_multiplier

logger = logging.getLogger(__name__)

DISPLAY_PRECISION = 1

MIN_CRITICAL_RATE = 0
MAX_CRITICAL_RATE = 100


# =============================================================================
# SKILL BONUS AGGREGATION
# =============================================================================

@dataclass(frozen=True)
class SkillBonuses:
    """
    Bonuses of all applicable skills for one hit, folded together.

    Critical rate is resolved per row, see resolve_critical_rate_bonus.
    """
    addition_attack: float = NEUTRAL_ADDITION
    attack_multiplier: float = NEUTRAL_MULTIPLIER
    addition_element: float = NEUTRAL_ADDITION
    element_multiplier: float = NEUTRAL_MULTIPLIER


def aggregate_skill_bonuses(effects: Sequence[SkillParameters]) -> SkillBonuses:
    """
    Fold skill effects into one set of bonuses.

    Additive fields are summed and multiplicative fields multiplied, so the
    order of effects does not matter.
    """
    addition_attack = NEUTRAL_ADDITION
    attack_multiplier = NEUTRAL_MULTIPLIER
    addition_element = NEUTRAL_ADDITION
    element_multiplier = NEUTRAL_MULTIPLIER

    for effect in effects:
        if effect.addition_attack_bonus is not None:
            addition_attack += effect.addition_attack_bonus
        if effect.attack_multiplier_bonus is not None:
            attack_multiplier *= effect.attack_multiplier_bonus
        if effect.addition_element_bonus is not None:
            addition_element += effect.addition_element_bonus
        if effect.element_multiplier_bonus is not None:
            element_multiplier *= effect.element_multiplier_bonus

    return SkillBonuses(
        addition_attack=addition_attack,
        attack_multiplier=attack_multiplier,
        addition_element=addition_element,
        element_multiplier=element_multiplier,
    )


def resolve_critical_rate_bonus(
    equipped_skills: Sequence[EquippedSkill],
    motions: Sequence[Motion],
    state: PartStateDetails,
) -> float:
    """
    Critical rate bonus for a whole row.

    Each skill counts once if it applies to at least one motion of the sequence.
    """
    total = NEUTRAL_ADDITION
    for skill in equipped_skills:
        if not any(get_applicable_skills([skill], motion, state) for motion in motions):
            continue
        effect = get_skill_effect(skill)
        if effect.critical_rate_bonus is not None:
            total += effect.critical_rate_bonus
    return total


def calculate_critical_rate(weapon_rate: float, bonus: float) -> float:
    """Clamp weapon rate + bonus to [0, 100] and convert to a probability."""
    rate = max(MIN_CRITICAL_RATE, min(MAX_CRITICAL_RATE, weapon_rate + bonus))
    return rate / 100


def calculate_expected_value(base: float, critical: float, critical_rate: float) -> float:
    """Probability-weighted blend of the non-critical and critical outcomes."""
    return base + critical_rate * (critical - base)


# =============================================================================
# PER-MOTION DAMAGE
# =============================================================================

@dataclass
class MotionDamage:
    """Damage of one motion (all hits) in both critical columns."""
    base_physical: float = 0.0
    base_elemental: float = 0.0
    crit_physical: float = 0.0
    crit_elemental: float = 0.0

    def __iadd__(self, other: 'MotionDamage') -> 'MotionDamage':
        self.base_physical += other.base_physical
        self.base_elemental += other.base_elemental
        self.crit_physical += other.crit_physical
        self.crit_elemental += other.crit_elemental
        return self

    @property
    def base_total(self) -> float:
        return self.base_physical + self.base_elemental

    @property
    def crit_total(self) -> float:
        return self.crit_physical + self.crit_elemental


def build_damage_parameters(
    weapon: WeaponParameters,
    motion: Motion,
    state: PartStateDetails,
    bonuses: SkillBonuses,
    sharpness_modifier: float,
    attack_multiplier_baseline: float,
    item_buff_attack: float,
) -> DamageParameters:
    """Flatten weapon, motion, hit zones and folded bonuses for the calculator."""
    return DamageParameters(
        base_weapon_multiplier=weapon.weapon_multiplier,
        addition_attack_bonus=bonuses.addition_attack + item_buff_attack,
        attack_multiplier_bonus=attack_multiplier_baseline * bonuses.attack_multiplier,
        motion_value=motion.motion_value,
        sharpness_modifier=sharpness_modifier,
        physical_hit_zone=get_physical_hit_zone(state, motion.attack_type),
        base_element_value=weapon.base_element_value,
        element_multiplier=motion.element_multiplier * bonuses.element_multiplier,
        element_addition=bonuses.addition_element,
        element_modifier=DEFAULT_ELEMENT_MODIFIER,
        elemental_hit_zone=get_elemental_hit_zone(state, weapon.element_type),
        critical_damage_modifier=DEFAULT_CRITICAL_DAMAGE_MODIFIER,
    )


def calculate_motion_damage(params: DamageParameters, hit_count: int) -> MotionDamage:
    """
    Run the calculator once per critical column and scale by hit count.

    params carries the critical modifier; the base column is recomputed with 1.0.
    """
    base_params = replace(params, critical_damage_modifier=BASE_CRITICAL_DAMAGE_MODIFIER)

    return MotionDamage(
        base_physical=calculate_physical_damage(base_params) * hit_count,
        base_elemental=calculate_elemental_damage(base_params) * hit_count,
        crit_physical=calculate_physical_damage(params) * hit_count,
        crit_elemental=calculate_elemental_damage(params) * hit_count,
    )


# =============================================================================
# ROW BUILDING
# =============================================================================

def format_display(value: float) -> str:
    """Round half-up to one decimal for the display strings."""
    return f"{round_half_up(value, DISPLAY_PRECISION):.{DISPLAY_PRECISION}f}"


def format_damage(physical: float, elemental: float) -> str:
    """Display string: total first, then the physical + elemental breakdown."""
    total = physical + elemental
    return f"{format_display(total)} ({format_display(physical)} + {format_display(elemental)})"


def calculate_part_state_row(
    part_name: str,
    state: PartStateDetails,
    weapon: WeaponParameters,
    motions: Sequence[Motion],
    equipped_skills: Sequence[EquippedSkill],
    sharpness_modifier: float,
    item_buff_attack: float,
) -> DamageTableRow:
    """Fold the motion sequence against one part state into a table row."""
    attack_multiplier_baseline = get_weapon_attack_multiplier(weapon)
    totals = MotionDamage()

    for motion in motions:
        effects = get_applicable_skills(equipped_skills, motion, state)
        bonuses = aggregate_skill_bonuses(effects)
        params = build_damage_parameters(
            weapon, motion, state, bonuses,
            sharpness_modifier, attack_multiplier_baseline, item_buff_attack,
        )
        totals += calculate_motion_damage(params, motion.hit_count)

    critical_bonus = resolve_critical_rate_bonus(equipped_skills, motions, state)
    critical_rate = calculate_critical_rate(weapon.critical_rate, critical_bonus)

    expected_physical = calculate_expected_value(
        totals.base_physical, totals.crit_physical, critical_rate
    )
    expected_elemental = calculate_expected_value(
        totals.base_elemental, totals.crit_elemental, critical_rate
    )

    logger.debug(
        "%s/%s: base=%.2f crit=%.2f rate=%.2f expected=%.2f",
        part_name, state.state.value, totals.base_total, totals.crit_total,
        critical_rate, expected_physical + expected_elemental,
    )

    return DamageTableRow(
        part=part_name,
        state=state.state,
        damage=format_damage(totals.base_physical, totals.base_elemental),
        crit_damage=format_damage(totals.crit_physical, totals.crit_elemental),
        expected=format_damage(expected_physical, expected_elemental),
        physical=round_half_up(totals.base_physical, DAMAGE_PRECISION),
        elemental=round_half_up(totals.base_elemental, DAMAGE_PRECISION),
        crit_rate=critical_rate,
        base_weapon_multiplier=weapon.weapon_multiplier,
        attack_multiplier_bonus=attack_multiplier_baseline,
        addition_attack_bonus=item_buff_attack,
        motion_value=motions[0].motion_value,
        sharpness_modifier=sharpness_modifier,
        critical_damage_modifier=BASE_CRITICAL_DAMAGE_MODIFIER,
        base_element_value=weapon.base_element_value,
        element_multiplier=NEUTRAL_MULTIPLIER,
        element_addition=NEUTRAL_ADDITION,
        element_modifier=DEFAULT_ELEMENT_MODIFIER,
    )


def calculate_damage_table(
    weapon: WeaponParameters,
    motions: Sequence[Motion],
    monster: Optional[Monster],
    sharpness_color: Optional[Union[SharpnessColor, str]] = None,
    equipped_skills: Sequence[EquippedSkill] = (),
    item_buff_attack: float = 0,
) -> List[DamageTableRow]:
    """
    Calculate the damage table for every part and state of a monster.

    Args:
        weapon: Weapon base stats
        motions: Motion sequence; totals are summed over all of them
        monster: Target monster, or None
        sharpness_color: Sharpness color (white when missing or unknown)
        equipped_skills: Equipped skills in equip order
        item_buff_attack: Flat attack from item buffs (see get_item_buff_total)

    Returns:
        One row per (part, state), in part order then state order.
        Empty when there are no motions or no monster.
    """
    if not motions or monster is None:
        return []

    sharpness_modifier = get_sharpness_modifier(sharpness_color)
    rows = []

    for part in monster.parts:
        for state in part.states:
            rows.append(calculate_part_state_row(
                part.name, state, weapon, motions, equipped_skills,
                sharpness_modifier, item_buff_attack,
            ))

    logger.debug("%s: %d rows for %d motions", monster.name, len(rows), len(motions))
    return rows


# =============================================================================
# EXAMPLE USAGE
# =============================================================================

if __name__ == "__main__":
    from models import (
        AttackType, ElementKey, ElementType, Part, PartState, WeaponType,
    )

    weapon = WeaponParameters(
        weapon_type=WeaponType.LONG_SWORD,
        weapon_multiplier=220,
        base_element_value=30,
        element_type=ElementType(ElementKey.THUNDER, "Thunder"),
        critical_rate=5,
    )
    motions = [
        Motion("Overhead Slash", 26, attack_type=AttackType.SLASH),
        Motion("Spirit Blade I", 30, hit_count=2, attack_type=AttackType.SLASH),
    ]
    monster = Monster("Training Target", (
        Part("Head", (
            PartStateDetails(PartState.NORMAL, 65, 70, 60, 10, 15, 20, 25, 5),
            PartStateDetails(PartState.WOUNDED, 80, 85, 70, 15, 20, 25, 30, 10),
        )),
        Part("Tail", (
            PartStateDetails(PartState.NORMAL, 45, 35, 30, 10, 10, 15, 20, 5),
        )),
    ))
    skills = [
        EquippedSkill("attack_boost", 3, (
            SkillParameters(addition_attack_bonus=3),
            SkillParameters(addition_attack_bonus=5),
            SkillParameters(addition_attack_bonus=7),
        )),
        EquippedSkill("weakness_exploit", 1, (
            SkillParameters(critical_rate_bonus=15, min_hit_zone=45),
        )),
    ]

    print("Damage Table - Example Usage")
    print("=" * 70)
    for row in calculate_damage_table(weapon, motions, monster, "white", skills):
        print(f"{row.part:6s} {row.state.value:8s} "
              f"dmg {row.damage:28s} crit {row.crit_damage:28s} "
              f"rate {row.crit_rate:.0%}  exp {row.expected}")
