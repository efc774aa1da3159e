"""
Pydantic schemas for calculator payloads

Catalog entries, presets and saved results are stored as camelCase JSON
(weaponMultiplier, skillData, slashHitZone, ...). These models validate that
shape, convert it to the frozen dataclasses in models.py, and wrap a finished
calculation into a snapshot that can be written back out.
"""

from dataclasses import asdict
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models import (
    AttackType, DamageTableRow, ElementKey, ElementType,
    EquippedSkill, Monster, Motion, Part, PartState, PartStateDetails,
    SharpnessColor, SkillParameters, SpiritGauge, WeaponParameters, WeaponType,
    DEFAULT_SHARPNESS,
)
from buff_definitions import get_item_buff_total
from damage_table import calculate_damage_table


class SelectionError(ValueError):
    """Raised when a calculation is requested without a monster or motions."""


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Catalog / Selection Models
# =============================================================================

class ElementTypeInfo(CamelModel):
    key: ElementKey = ElementKey.NONE
    label: str = "Raw"

    def to_domain(self) -> ElementType:
        return ElementType(key=self.key, label=self.label)


class WeaponInfo(CamelModel):
    weapon_type: WeaponType
    weapon_multiplier: float
    base_element_value: float = 0
    element_type: ElementTypeInfo = Field(default_factory=ElementTypeInfo)
    critical_rate: float = 0
    spirit_gauge: SpiritGauge = Field(SpiritGauge.NONE, alias="tachiSpiritGauge")

    def to_domain(self) -> WeaponParameters:
        return WeaponParameters(
            weapon_type=self.weapon_type,
            weapon_multiplier=self.weapon_multiplier,
            base_element_value=self.base_element_value,
            element_type=self.element_type.to_domain(),
            critical_rate=self.critical_rate,
            spirit_gauge=self.spirit_gauge,
        )


class MotionInfo(CamelModel):
    name: str
    motion_value: float
    element_multiplier: float = 1.0
    sharpness_modifier: float = 1.0
    hit_count: int = Field(1, ge=1)
    attack_type: AttackType = AttackType.SLASH
    is_jump: bool = False

    def to_domain(self) -> Motion:
        return Motion(**self.model_dump())


class PartStateInfo(CamelModel):
    state: PartState
    slash_hit_zone: float = 0
    blunt_hit_zone: float = 0
    shot_hit_zone: float = 0
    fire_hit_zone: float = 0
    water_hit_zone: float = 0
    ice_hit_zone: float = 0
    thunder_hit_zone: float = 0
    dragon_hit_zone: float = 0

    def to_domain(self) -> PartStateDetails:
        return PartStateDetails(**self.model_dump())


class PartInfo(CamelModel):
    name: str
    states: List[PartStateInfo] = []

    def to_domain(self) -> Part:
        return Part(name=self.name, states=tuple(s.to_domain() for s in self.states))


class MonsterInfo(CamelModel):
    name: str
    parts: List[PartInfo] = []

    def to_domain(self) -> Monster:
        return Monster(name=self.name, parts=tuple(p.to_domain() for p in self.parts))


class SkillParametersInfo(CamelModel):
    addition_attack_bonus: Optional[float] = None
    attack_multiplier_bonus: Optional[float] = None
    addition_element_bonus: Optional[float] = None
    element_multiplier_bonus: Optional[float] = None
    critical_rate_bonus: Optional[float] = None
    min_hit_zone: Optional[float] = None
    max_hit_zone: Optional[float] = None
    applicable_states: List[PartState] = Field(default_factory=lambda: list(PartState))
    is_jump_attack_only: bool = False

    def to_domain(self) -> SkillParameters:
        data = self.model_dump()
        data["applicable_states"] = frozenset(self.applicable_states)
        return SkillParameters(**data)


class SelectedSkillInfo(CamelModel):
    """A skill selection with the catalog's per-level effect list attached."""
    key: str
    level: int
    skill_data: List[SkillParametersInfo] = []

    def to_domain(self) -> EquippedSkill:
        return EquippedSkill(
            key=self.key,
            level=self.level,
            skill_data=tuple(s.to_domain() for s in self.skill_data),
        )


# =============================================================================
# Result Models
# =============================================================================

class DamageTableRowInfo(CamelModel):
    part: str
    state: PartState
    damage: str
    crit_damage: str
    expected: str
    physical: float
    elemental: float
    crit_rate: float
    base_weapon_multiplier: float
    attack_multiplier_bonus: float
    addition_attack_bonus: float
    motion_value: float
    sharpness_modifier: float
    critical_damage_modifier: float
    base_element_value: float
    element_multiplier: float
    element_addition: float
    element_modifier: float

    @classmethod
    def from_domain(cls, row: DamageTableRow) -> 'DamageTableRowInfo':
        return cls(**asdict(row))


INPUT_FIELDS = {
    "weapon_info", "selected_skills", "selected_motions",
    "selected_monster", "sharpness", "selected_buffs",
}


class CalculationRequest(CamelModel):
    """Everything the calculator form collects."""
    weapon_info: WeaponInfo
    selected_skills: List[SelectedSkillInfo] = []
    selected_motions: List[MotionInfo] = []
    selected_monster: Optional[MonsterInfo] = None
    sharpness: SharpnessColor = DEFAULT_SHARPNESS
    selected_buffs: List[str] = []


class CalculationSnapshot(CalculationRequest):
    """A finished calculation: the request plus its item buff total and rows."""
    item_buffs_total: float = 0
    damage_table_rows: List[DamageTableRowInfo] = []

    def same_inputs(self, other: CalculationRequest) -> bool:
        """True if both were calculated from identical selections."""
        return self.model_dump(include=INPUT_FIELDS) == other.model_dump(include=INPUT_FIELDS)


# =============================================================================
# Calculation Entry Point
# =============================================================================

def check_selection(motions, monster) -> Optional[str]:
    """
    Pre-validate a selection before calculating.

    Returns:
        Message describing what is missing, or None if the selection is complete
    """
    if not motions:
        return "Select at least one motion"
    if monster is None:
        return "Select a monster"
    return None


def run_calculation(request: CalculationRequest) -> CalculationSnapshot:
    """
    Calculate the damage table for a validated request.

    Raises:
        SelectionError: If no motion or no monster is selected
    """
    error = check_selection(request.selected_motions, request.selected_monster)
    if error:
        raise SelectionError(error)

    item_buffs_total = get_item_buff_total(request.selected_buffs)
    rows = calculate_damage_table(
        request.weapon_info.to_domain(),
        [m.to_domain() for m in request.selected_motions],
        request.selected_monster.to_domain(),
        request.sharpness,
        [s.to_domain() for s in request.selected_skills],
        item_buffs_total,
    )

    return CalculationSnapshot(
        **request.model_dump(),
        item_buffs_total=item_buffs_total,
        damage_table_rows=[DamageTableRowInfo.from_domain(row) for row in rows],
    )
