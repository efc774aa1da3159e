"""
Tests for skill applicability.

Covers state gating, jump-only gating, hit-zone ranges, level selection and
hit zone column selection.
"""

from dataclasses import replace

import pytest

from conftest import make_skill, make_state
from models import (
    AttackType, ElementKey, ElementType, EquippedSkill, Motion, PartState,
    SkillParameters,
)
from skill_resolver import (
    get_applicable_skills,
    get_elemental_hit_zone,
    get_physical_hit_zone,
    get_skill_effect,
)


@pytest.fixture
def motion():
    return Motion(name="test", motion_value=10, attack_type=AttackType.SLASH)


@pytest.fixture
def jump_motion():
    return Motion(name="jump", motion_value=10, attack_type=AttackType.SLASH, is_jump=True)


# =============================================================================
# BASIC APPLICABILITY
# =============================================================================

class TestBasicApplicability:

    def test_normal_skill_applies(self, motion, normal_state):
        skills = [make_skill(addition_attack_bonus=10, min_hit_zone=0, max_hit_zone=100,
                             applicable_states=[PartState.NORMAL])]
        result = get_applicable_skills(skills, motion, normal_state)
        assert len(result) == 1
        assert result[0].addition_attack_bonus == 10

    def test_skill_without_hit_zone_range_always_applies(self, motion):
        skills = [make_skill(addition_attack_bonus=5)]
        for state in PartState:
            result = get_applicable_skills(skills, motion, make_state(state, slash=5))
            assert len(result) == 1

    def test_no_skills(self, motion, normal_state):
        assert get_applicable_skills([], motion, normal_state) == []

    def test_equip_order_is_preserved(self, motion, normal_state):
        skills = [
            make_skill("a", addition_attack_bonus=1),
            make_skill("b", addition_attack_bonus=2),
            make_skill("c", addition_attack_bonus=3),
        ]
        result = get_applicable_skills(skills, motion, normal_state)
        assert [e.addition_attack_bonus for e in result] == [1, 2, 3]


# =============================================================================
# GATING
# =============================================================================

class TestStateGating:

    @pytest.mark.parametrize("state,applies", [
        (PartState.NORMAL, True),
        (PartState.WOUNDED, False),
        (PartState.EXPOSED, False),
    ])
    def test_normal_only_skill(self, motion, state, applies):
        skills = [make_skill(addition_attack_bonus=5, applicable_states=[PartState.NORMAL])]
        result = get_applicable_skills(skills, motion, make_state(state))
        assert (len(result) == 1) is applies


class TestJumpGating:

    def test_jump_only_skill_applies_to_jump_motion(self, motion, jump_motion, normal_state):
        skills = [make_skill("hien", attack_multiplier_bonus=1.1, min_hit_zone=0,
                             max_hit_zone=100, applicable_states=[PartState.NORMAL],
                             is_jump_attack_only=True)]
        assert len(get_applicable_skills(skills, jump_motion, normal_state)) == 1
        assert len(get_applicable_skills(skills, motion, normal_state)) == 0

    def test_regular_skill_applies_to_jump_motion(self, jump_motion, normal_state):
        skills = [make_skill(addition_attack_bonus=5)]
        assert len(get_applicable_skills(skills, jump_motion, normal_state)) == 1


class TestHitZoneRange:

    def test_inside_range_applies(self, motion):
        skills = [make_skill(addition_attack_bonus=10, min_hit_zone=50, max_hit_zone=70)]
        result = get_applicable_skills(skills, motion, make_state(slash=60))
        assert len(result) == 1
        assert result[0].addition_attack_bonus == 10

    @pytest.mark.parametrize("slash,applies", [
        (60, False),
        (69, False),
        (70, True),
        (75, True),
        (100, True),
        (101, False),
    ])
    def test_range_is_inclusive(self, motion, slash, applies):
        skills = [make_skill(addition_attack_bonus=10, min_hit_zone=70, max_hit_zone=100)]
        result = get_applicable_skills(skills, motion, make_state(slash=slash))
        assert (len(result) == 1) is applies

    def test_range_uses_column_of_attack_type(self):
        skills = [make_skill(critical_rate_bonus=15, min_hit_zone=45)]
        state = make_state(slash=60, blunt=40, shot=50)
        blunt = Motion(name="smash", motion_value=20, attack_type=AttackType.BLUNT)
        shot = Motion(name="shot", motion_value=20, attack_type=AttackType.SHOT)
        assert get_applicable_skills(skills, blunt, state) == []
        assert len(get_applicable_skills(skills, shot, state)) == 1

    def test_open_max_bound(self, motion):
        skills = [make_skill(critical_rate_bonus=15, min_hit_zone=45)]
        assert len(get_applicable_skills(skills, motion, make_state(slash=150))) == 1
        assert get_applicable_skills(skills, motion, make_state(slash=44)) == []


# =============================================================================
# LEVEL SELECTION
# =============================================================================

class TestLevelSelection:

    @pytest.fixture
    def leveled(self):
        return tuple(SkillParameters(addition_attack_bonus=bonus) for bonus in (3, 5, 7))

    @pytest.mark.parametrize("level,bonus", [(1, 3), (2, 5), (3, 7)])
    def test_level_picks_entry(self, leveled, level, bonus):
        skill = EquippedSkill(key="attack_boost", level=level, skill_data=leveled)
        assert get_skill_effect(skill).addition_attack_bonus == bonus

    @pytest.mark.parametrize("level", [0, 4, -1])
    def test_undefined_level_is_skipped(self, leveled, level, motion, normal_state):
        skill = EquippedSkill(key="attack_boost", level=level, skill_data=leveled)
        assert get_skill_effect(skill) is None
        assert get_applicable_skills([skill], motion, normal_state) == []


# =============================================================================
# HIT ZONE COLUMNS
# =============================================================================

class TestHitZoneColumns:

    @pytest.mark.parametrize("attack_type,expected", [
        (AttackType.SLASH, 60),
        (AttackType.BLUNT, 50),
        (AttackType.SHOT, 40),
    ])
    def test_physical_column(self, normal_state, attack_type, expected):
        assert get_physical_hit_zone(normal_state, attack_type) == expected

    def test_elemental_column(self):
        state = replace(make_state(), fire_hit_zone=25, ice_hit_zone=5)
        assert get_elemental_hit_zone(state, ElementType(ElementKey.FIRE, "Fire")) == 25
        assert get_elemental_hit_zone(state, ElementType(ElementKey.ICE, "Ice")) == 5

    def test_raw_weapon_has_no_elemental_column(self, normal_state):
        assert get_elemental_hit_zone(normal_state, ElementType()) == 0
