"""Weapon DTOs (Data Transfer Objects).

Result dataclasses returned by weapon query handlers. Presentation never
sees the Weapon aggregate itself.

DTOs:
    - WeaponResult: One weapon's state
    - RepairEstimateResult: Projected repair cost and gains
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.entities import Weapon
from src.domain.value_objects import RepairEstimate


@dataclass(frozen=True, kw_only=True)
class WeaponResult:
    """Weapon state for API responses.

    Attributes:
        id: Weapon identifier.
        name: Weapon name.
        weapon_type: Type value ("Sword").
        description: Weapon description.
        hit_points: Current hit points.
        max_hit_points: Hit points at creation.
        damage: Cumulative damage.
        is_repairable: Whether repair is allowed.
        value: Current value.
    """

    id: UUID
    name: str
    weapon_type: str
    description: str
    hit_points: int
    max_hit_points: int
    damage: int
    is_repairable: bool
    value: Decimal

    @classmethod
    def from_entity(cls, weapon: Weapon) -> "WeaponResult":
        return cls(
            id=weapon.id.value,
            name=weapon.name.value,
            weapon_type=weapon.type.value,
            description=weapon.description,
            hit_points=weapon.hit_points,
            max_hit_points=weapon.max_hit_points,
            damage=weapon.damage,
            is_repairable=weapon.is_repairable,
            value=weapon.value,
        )


@dataclass(frozen=True, kw_only=True)
class RepairEstimateResult:
    """Projected repair.

    Attributes:
        repair_cost: Cost of the repair.
        gained_hit_points: Hit point total after the repair.
        gained_value: Value increase (2 decimal places).
    """

    repair_cost: int
    gained_hit_points: int
    gained_value: Decimal

    @classmethod
    def from_estimate(cls, estimate: RepairEstimate) -> "RepairEstimateResult":
        return cls(
            repair_cost=estimate.repair_cost,
            gained_hit_points=estimate.gained_hit_points,
            gained_value=estimate.gained_value,
        )
