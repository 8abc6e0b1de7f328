"""Weapon request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST   /api/weapons                  - Create weapon
    GET    /api/weapons                  - List weapons
    GET    /api/weapons/{id}             - Get weapon
    GET    /api/weapons/create-random    - Create random weapon
    POST   /api/weapons/damage           - Damage weapon
    POST   /api/weapons/repair           - Repair weapon
    POST   /api/weapons/estimate-repair  - Estimate repair
    DELETE /api/weapons/{id}             - Delete weapon
"""

from uuid import UUID

from pydantic import Field

from src.application.dtos import RepairEstimateResult, WeaponResult
from src.schemas.common_schemas import CamelModel, JsonDecimal


# =============================================================================
# Requests
# =============================================================================


class CreateWeaponRequest(CamelModel):
    """Request schema for weapon creation.

    Range checks happen in the command handler so every violated rule is
    reported in one response.
    """

    name: str = Field(
        ...,
        description="Descriptor appended to the type ('{Type} of {Descriptor}')",
        examples=["Flames"],
    )
    type: str = Field(..., description="Weapon type", examples=["Sword"])
    description: str = Field(..., examples=["A blade wreathed in fire"])
    hit_points: int = Field(..., examples=[100])
    damage: int = Field(0, examples=[0])
    is_repairable: bool = Field(True)
    value: JsonDecimal = Field(..., examples=[150])


class DamageWeaponRequest(CamelModel):
    weapon_id: UUID
    damage_amount: int


class RepairWeaponRequest(CamelModel):
    weapon_id: UUID
    repair_amount: int


class EstimateRepairRequest(CamelModel):
    weapon_id: UUID
    repair_amount: int


# =============================================================================
# Responses
# =============================================================================


class WeaponCreatedResponse(CamelModel):
    """Response schema for weapon creation (201 Created)."""

    id: UUID = Field(..., description="Created weapon's ID")


class WeaponResponse(CamelModel):
    """Weapon state."""

    id: UUID
    name: str
    type: str
    description: str
    hit_points: int
    max_hit_points: int
    damage: int
    is_repairable: bool
    value: JsonDecimal

    @classmethod
    def from_result(cls, weapon: WeaponResult) -> "WeaponResponse":
        return cls(
            id=weapon.id,
            name=weapon.name,
            type=weapon.weapon_type,
            description=weapon.description,
            hit_points=weapon.hit_points,
            max_hit_points=weapon.max_hit_points,
            damage=weapon.damage,
            is_repairable=weapon.is_repairable,
            value=weapon.value,
        )


class RepairEstimateResponse(CamelModel):
    """Projected repair cost and gains."""

    repair_cost: int
    gained_hit_points: int
    gained_value: JsonDecimal

    @classmethod
    def from_result(cls, estimate: RepairEstimateResult) -> "RepairEstimateResponse":
        return cls(
            repair_cost=estimate.repair_cost,
            gained_hit_points=estimate.gained_hit_points,
            gained_value=estimate.gained_value,
        )
