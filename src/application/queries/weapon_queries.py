"""Weapon queries (CQRS read operations).

Queries represent requests for data. They never change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetWeapon:
    """Fetch one weapon by ID."""

    weapon_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetAllWeapons:
    """List every weapon."""


@dataclass(frozen=True, kw_only=True)
class EstimateRepair:
    """Project the cost and gains of repairing a weapon.

    Attributes:
        weapon_id: Target weapon.
        repair_amount: Requested repair (must not be negative).
    """

    weapon_id: UUID
    repair_amount: int
