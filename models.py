"""
Data models for the Hunt Damage Calculator

Defines the value objects passed into the damage engine: weapons, motions,
monsters with per-part hit zones, equipped skills, and the flattened parameter
bundle and output rows of the damage table.

All hit zones are stored as damage percentages (45 = 45%).
Critical rates are stored as percentage points (25 = 25%).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, FrozenSet


# =============================================================================
# NEUTRAL DEFAULTS
# =============================================================================

# Absent additive bonuses fold in as 0, absent multiplicative bonuses as 1
NEUTRAL_ADDITION = 0
NEUTRAL_MULTIPLIER = 1.0

# Critical hits deal +25% physical damage
DEFAULT_CRITICAL_DAMAGE_MODIFIER = 1.25
# Modifier used for the non-critical column of the table
BASE_CRITICAL_DAMAGE_MODIFIER = 1.0

# Elemental damage modifier applied on top of sharpness
DEFAULT_ELEMENT_MODIFIER = 1.0


# =============================================================================
# ENUMS
# =============================================================================

class WeaponType(Enum):
    """Weapon categories."""
    GREAT_SWORD = "greatsword"
    LONG_SWORD = "longsword"
    SWORD_AND_SHIELD = "swordshield"
    DUAL_BLADES = "dualblades"
    HAMMER = "hammer"
    HUNTING_HORN = "huntinghorn"
    LANCE = "lance"
    GUNLANCE = "gunlance"
    SWITCH_AXE = "switchaxe"
    CHARGE_BLADE = "chargeblade"
    INSECT_GLAIVE = "insectglaive"
    LIGHT_BOWGUN = "lightbowgun"
    HEAVY_BOWGUN = "heavybowgun"
    BOW = "bow"


class AttackType(Enum):
    """Damage type of a motion; selects the physical hit zone column."""
    SLASH = "slash"
    BLUNT = "blunt"
    SHOT = "shot"


class ElementKey(Enum):
    """Weapon elements. NONE means a raw weapon."""
    NONE = "none"
    FIRE = "fire"
    WATER = "water"
    ICE = "ice"
    THUNDER = "thunder"
    DRAGON = "dragon"


class PartState(Enum):
    """Damage-modeling condition of a monster part."""
    NORMAL = "normal"
    WOUNDED = "wounded"
    EXPOSED = "exposed"


class SharpnessColor(Enum):
    """Sharpness levels, lowest to highest."""
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"
    PURPLE = "purple"


class SpiritGauge(Enum):
    """Long sword spirit gauge level."""
    NONE = "none"
    WHITE = "white"
    YELLOW = "yellow"
    RED = "red"


DEFAULT_SHARPNESS = SharpnessColor.WHITE


# =============================================================================
# WEAPON / MOTION
# =============================================================================

@dataclass(frozen=True)
class ElementType:
    """Weapon element with its display label."""
    key: ElementKey = ElementKey.NONE
    label: str = "Raw"

    @property
    def is_none(self) -> bool:
        return self.key is ElementKey.NONE


@dataclass(frozen=True)
class WeaponParameters:
    """
    Base stats of the equipped weapon.

    critical_rate may be negative for weapons with innate negative affinity.
    spirit_gauge only affects long swords.
    """
    weapon_type: WeaponType
    weapon_multiplier: float
    base_element_value: float = 0
    element_type: ElementType = field(default_factory=ElementType)
    critical_rate: float = 0
    spirit_gauge: SpiritGauge = SpiritGauge.NONE


@dataclass(frozen=True)
class Motion:
    """
    A single attack action of a weapon's moveset.

    sharpness_modifier is catalog data only; damage uses the sharpness table.
    """
    name: str
    motion_value: float
    element_multiplier: float = 1.0
    sharpness_modifier: float = 1.0
    hit_count: int = 1
    attack_type: AttackType = AttackType.SLASH
    is_jump: bool = False


# =============================================================================
# MONSTER
# =============================================================================

@dataclass(frozen=True)
class PartStateDetails:
    """Hit zones of one part in one state."""
    state: PartState
    slash_hit_zone: float = 0
    blunt_hit_zone: float = 0
    shot_hit_zone: float = 0
    fire_hit_zone: float = 0
    water_hit_zone: float = 0
    ice_hit_zone: float = 0
    thunder_hit_zone: float = 0
    dragon_hit_zone: float = 0


@dataclass(frozen=True)
class Part:
    """A monster body part and the states it can be hit in."""
    name: str
    states: Tuple[PartStateDetails, ...] = ()


@dataclass(frozen=True)
class Monster:
    name: str
    parts: Tuple[Part, ...] = ()


# =============================================================================
# SKILLS
# =============================================================================

ALL_PART_STATES: FrozenSet[PartState] = frozenset(PartState)


@dataclass(frozen=True)
class SkillParameters:
    """
    Effect of one skill at one level.

    Unset bonuses are neutral. A skill with neither min_hit_zone nor
    max_hit_zone set ignores hit zones entirely.
    """
    addition_attack_bonus: Optional[float] = None
    attack_multiplier_bonus: Optional[float] = None
    addition_element_bonus: Optional[float] = None
    element_multiplier_bonus: Optional[float] = None
    critical_rate_bonus: Optional[float] = None
    min_hit_zone: Optional[float] = None
    max_hit_zone: Optional[float] = None
    applicable_states: FrozenSet[PartState] = ALL_PART_STATES
    is_jump_attack_only: bool = False

    @property
    def has_hit_zone_range(self) -> bool:
        return self.min_hit_zone is not None or self.max_hit_zone is not None


@dataclass(frozen=True)
class EquippedSkill:
    """
    A skill selection resolved against the skill catalog.

    skill_data holds one entry per level; level 1 is skill_data[0].
    """
    key: str
    level: int
    skill_data: Tuple[SkillParameters, ...] = ()


# =============================================================================
# CALCULATION BUNDLE / OUTPUT
# =============================================================================

@dataclass(frozen=True)
class DamageParameters:
    """Fully resolved inputs of a single damage calculation."""
    base_weapon_multiplier: float
    addition_attack_bonus: float
    attack_multiplier_bonus: float
    motion_value: float
    sharpness_modifier: float
    physical_hit_zone: float
    base_element_value: float = 0
    element_multiplier: float = NEUTRAL_MULTIPLIER
    element_addition: float = NEUTRAL_ADDITION
    element_modifier: float = DEFAULT_ELEMENT_MODIFIER
    elemental_hit_zone: float = 0
    critical_damage_modifier: float = DEFAULT_CRITICAL_DAMAGE_MODIFIER


@dataclass(frozen=True)
class DamageTableRow:
    """
    One (part, state) line of the damage table.

    damage / crit_damage / expected are display strings rounded to one
    decimal. physical and elemental are the non-critical totals of the whole
    motion sequence. The remaining fields record the baseline bundle the row
    started from, before per-motion skill bonuses were folded in.
    """
    part: str
    state: PartState
    damage: str
    crit_damage: str
    expected: str
    physical: float
    elemental: float
    crit_rate: float

    # Baseline inputs
    base_weapon_multiplier: float = 0
    attack_multiplier_bonus: float = NEUTRAL_MULTIPLIER
    addition_attack_bonus: float = NEUTRAL_ADDITION
    motion_value: float = 0
    sharpness_modifier: float = 1.0
    critical_damage_modifier: float = BASE_CRITICAL_DAMAGE_MODIFIER
    base_element_value: float = 0
    element_multiplier: float = NEUTRAL_MULTIPLIER
    element_addition: float = NEUTRAL_ADDITION
    element_modifier: float = DEFAULT_ELEMENT_MODIFIER
