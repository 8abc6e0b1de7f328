"""Weapon commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and validation
- Handlers return Result types
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateWeapon:
    """Create a weapon from client input.

    The stored name is "{weapon_type} of {name}", so name must be one of the
    known descriptors ("Flames", "Dragon's Breath", ...).

    Attributes:
        name: Descriptor used to build the weapon name.
        weapon_type: Weapon type name, case-insensitive ("Sword", "staff").
        description: Weapon description.
        hit_points: Initial (and maximum) hit points.
        damage: Starting damage.
        is_repairable: Whether the weapon can be repaired.
        value: Starting value.

    Example:
        >>> command = CreateWeapon(
        ...     name="Flames",
        ...     weapon_type="Sword",
        ...     description="Burns on contact",
        ...     hit_points=100,
        ...     damage=0,
        ...     is_repairable=True,
        ...     value=Decimal("150"),
        ... )
    """

    name: str
    weapon_type: str
    description: str
    hit_points: int
    damage: int
    is_repairable: bool
    value: Decimal


@dataclass(frozen=True, kw_only=True)
class CreateRandomWeapon:
    """Create a procedurally generated weapon."""


@dataclass(frozen=True, kw_only=True)
class DamageWeapon:
    """Apply damage to a weapon.

    Attributes:
        weapon_id: Target weapon.
        damage_amount: Damage to apply (must not be negative).
    """

    weapon_id: UUID
    damage_amount: int


@dataclass(frozen=True, kw_only=True)
class RepairWeapon:
    """Repair a weapon.

    Attributes:
        weapon_id: Target weapon.
        repair_amount: Requested repair (must not be negative).
    """

    weapon_id: UUID
    repair_amount: int


@dataclass(frozen=True, kw_only=True)
class DeleteWeapon:
    """Delete a weapon."""

    weapon_id: UUID
