"""
Skill Applicability Resolver

Decides which equipped skill effects apply to a given motion hitting a given
part state. Skills are plain data (SkillParameters); all gating rules live in
get_applicable_skills.

A skill effect applies when all of the following hold:
1. the part state is one of its applicable_states
2. it is not jump-only, or the motion is a jump attack
3. it has no hit-zone range, or the motion's physical hit zone on this state
   lies inside [min_hit_zone, max_hit_zone] (inclusive)
"""

from typing import List, Optional, Sequence

from models import (
    AttackType, ElementKey, ElementType, EquippedSkill, Motion,
    PartStateDetails, SkillParameters,
)


def get_physical_hit_zone(state: PartStateDetails, attack_type: AttackType) -> float:
    """Hit zone column selected by the motion's attack type."""
    if attack_type is AttackType.BLUNT:
        return state.blunt_hit_zone
    if attack_type is AttackType.SHOT:
        return state.shot_hit_zone
    return state.slash_hit_zone


def get_elemental_hit_zone(state: PartStateDetails, element: ElementType) -> float:
    """Hit zone column for the weapon element; 0 for raw weapons."""
    zone_map = {
        ElementKey.FIRE: state.fire_hit_zone,
        ElementKey.WATER: state.water_hit_zone,
        ElementKey.ICE: state.ice_hit_zone,
        ElementKey.THUNDER: state.thunder_hit_zone,
        ElementKey.DRAGON: state.dragon_hit_zone,
    }
    return zone_map.get(element.key, 0)


def get_skill_effect(skill: EquippedSkill) -> Optional[SkillParameters]:
    """Effect entry for the equipped level, or None if the level is undefined."""
    index = skill.level - 1
    if index < 0 or index >= len(skill.skill_data):
        return None
    return skill.skill_data[index]


def is_hit_zone_in_range(effect: SkillParameters, hit_zone: float) -> bool:
    """Inclusive range check. A missing bound is open."""
    if effect.min_hit_zone is not None and hit_zone < effect.min_hit_zone:
        return False
    if effect.max_hit_zone is not None and hit_zone > effect.max_hit_zone:
        return False
    return True


def get_applicable_skills(
    equipped_skills: Sequence[EquippedSkill],
    motion: Motion,
    state: PartStateDetails,
) -> List[SkillParameters]:
    """
    Filter equipped skills down to the effects active for this hit.

    Args:
        equipped_skills: Skills in equip order
        motion: The attack motion being evaluated
        state: Hit zones and state tag of the part being hit

    Returns:
        Applicable SkillParameters, in equip order
    """
    physical_hit_zone = get_physical_hit_zone(state, motion.attack_type)
    applicable = []

    for skill in equipped_skills:
        effect = get_skill_effect(skill)
        if effect is None:
            continue

        if state.state not in effect.applicable_states:
            continue

        if effect.is_jump_attack_only and not motion.is_jump:
            continue

        if effect.has_hit_zone_range and not is_hit_zone_in_range(effect, physical_hit_zone):
            continue

        applicable.append(effect)

    return applicable
