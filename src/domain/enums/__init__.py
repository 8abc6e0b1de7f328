"""Domain enums for business logic.

Available Enums:
    - WeaponType: Weapon categories with melee/ranged/magic classification
"""

from src.domain.enums.weapon_type import (
    MAGIC_TYPES,
    MELEE_TYPES,
    RANGED_TYPES,
    WeaponType,
)

__all__ = [
    "MAGIC_TYPES",
    "MELEE_TYPES",
    "RANGED_TYPES",
    "WeaponType",
]
