"""WeaponRepository port, implemented with SQLAlchemy in infrastructure."""

from decimal import Decimal
from typing import Protocol

from src.domain.entities.weapon import Weapon
from src.domain.enums import WeaponType
from src.domain.value_objects import WeaponId


class WeaponRepository(Protocol):
    """Async persistence for the Weapon aggregate.

    Methods:
        find_by_id: Retrieve weapon by ID
        find_by_name: Retrieve weapon by exact name
        find_all: List every weapon
        find_by_type: List weapons of one type
        find_damaged_weapons: List weapons with damage > 0
        find_by_value_range: List weapons with value in [min, max]
        add: Persist a new weapon
        update: Persist changes to an existing weapon
        remove: Delete a weapon
        exists: Check whether an ID is stored
    """

    async def find_by_id(self, weapon_id: WeaponId) -> Weapon | None:
        """Find weapon by ID.

        Returns:
            Weapon if found, None otherwise.
        """
        ...

    async def find_by_name(self, name: str) -> Weapon | None:
        """Find weapon by exact name.

        Used by weapon creation to reject duplicate names.
        """
        ...

    async def find_all(self) -> list[Weapon]:
        ...

    async def find_by_type(self, weapon_type: WeaponType) -> list[Weapon]:
        ...

    async def find_damaged_weapons(self) -> list[Weapon]:
        ...

    async def find_by_value_range(
        self, min_value: Decimal, max_value: Decimal
    ) -> list[Weapon]:
        ...

    async def add(self, weapon: Weapon) -> None:
        """Persist a new weapon.

        Args:
            weapon: Weapon entity to persist.
        """
        ...

    async def update(self, weapon: Weapon) -> None:
        """Persist the current state of an existing weapon.

        Raises:
            LookupError: If the weapon is not stored.
        """
        ...

    async def remove(self, weapon: Weapon) -> None:
        """Delete a weapon. Removing an unknown weapon is a no-op."""
        ...

    async def exists(self, weapon_id: WeaponId) -> bool:
        ...
