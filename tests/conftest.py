"""Shared fixtures for the damage calculator tests."""

import pytest

from models import (
    AttackType, ElementKey, ElementType, EquippedSkill, Monster, Motion, Part,
    PartState, PartStateDetails, SkillParameters, WeaponParameters, WeaponType,
)


def make_state(state=PartState.NORMAL, slash=60, blunt=50, shot=40, element=10):
    """Part state with the same value in every elemental column."""
    return PartStateDetails(
        state=state,
        slash_hit_zone=slash,
        blunt_hit_zone=blunt,
        shot_hit_zone=shot,
        fire_hit_zone=element,
        water_hit_zone=element,
        ice_hit_zone=element,
        thunder_hit_zone=element,
        dragon_hit_zone=element,
    )


def make_skill(key="test", level=1, **effect):
    """Equipped skill whose only level is built from keyword arguments."""
    if "applicable_states" in effect:
        effect["applicable_states"] = frozenset(effect["applicable_states"])
    return EquippedSkill(key=key, level=level, skill_data=(SkillParameters(**effect),))


@pytest.fixture
def raw_longsword():
    return WeaponParameters(
        weapon_type=WeaponType.LONG_SWORD,
        weapon_multiplier=200,
        base_element_value=0,
        element_type=ElementType(ElementKey.NONE, "Raw"),
        critical_rate=0,
    )


@pytest.fixture
def fire_longsword():
    return WeaponParameters(
        weapon_type=WeaponType.LONG_SWORD,
        weapon_multiplier=200,
        base_element_value=30,
        element_type=ElementType(ElementKey.FIRE, "Fire"),
        critical_rate=0,
    )


@pytest.fixture
def slash_motion():
    return Motion(name="test motion", motion_value=30, attack_type=AttackType.SLASH)


@pytest.fixture
def normal_state():
    return make_state()


@pytest.fixture
def single_part_monster(normal_state):
    """One part with only a normal state."""
    return Monster(name="test monster", parts=(Part("head", (normal_state,)),))


@pytest.fixture
def three_state_monster():
    """Two parts; the head has all three states, the tail only normal."""
    return Monster(name="test monster", parts=(
        Part("head", (
            make_state(PartState.NORMAL, slash=60),
            make_state(PartState.WOUNDED, slash=75),
            make_state(PartState.EXPOSED, slash=90),
        )),
        Part("tail", (
            make_state(PartState.NORMAL, slash=45),
        )),
    ))


@pytest.fixture
def attack_boost():
    return make_skill(
        "attack_boost",
        addition_attack_bonus=10,
        attack_multiplier_bonus=1.1,
        min_hit_zone=0,
        max_hit_zone=100,
        applicable_states=[PartState.NORMAL],
    )
