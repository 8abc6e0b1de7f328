"""Weapon domain events.

Emitted by the Weapon aggregate (damage, repair) and by weapon command
handlers (creation, deletion).
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class WeaponCreated(DomainEvent):
    """Weapon persisted for the first time.

    Attributes:
        weapon_id: ID of the new weapon.
        name: Weapon name.
        weapon_type: Weapon type value ("Sword").
        initial_hit_points: Hit points (and max hit points) at creation.
        damage: Starting damage.
        is_repairable: Whether the weapon can be repaired.
        initial_value: Value at creation.
    """

    weapon_id: UUID
    name: str
    weapon_type: str
    initial_hit_points: int
    damage: int
    is_repairable: bool
    initial_value: Decimal


@dataclass(frozen=True, kw_only=True)
class WeaponDamaged(DomainEvent):
    """Damage applied to a weapon.

    Attributes:
        weapon_id: Damaged weapon.
        damage_amount: Damage applied in this hit.
        new_hit_points: Hit points after the hit.
        new_damage_level: Cumulative damage after the hit.
        new_value: Value after the hit.
    """

    weapon_id: UUID
    damage_amount: int
    new_hit_points: int
    new_damage_level: int
    new_value: Decimal


@dataclass(frozen=True, kw_only=True)
class WeaponRepaired(DomainEvent):
    """Weapon repaired.

    Attributes:
        weapon_id: Repaired weapon.
        repair_amount: Repair actually applied (capped by damage).
        new_hit_points: Hit points after repair.
        new_damage_level: Cumulative damage after repair.
        new_value: Value after repair.
    """

    weapon_id: UUID
    repair_amount: int
    new_hit_points: int
    new_damage_level: int
    new_value: Decimal


@dataclass(frozen=True, kw_only=True)
class WeaponDeleted(DomainEvent):
    """Weapon removed from the repository."""

    weapon_id: UUID
