"""WeaponId value object.

Immutable wrapper around the UUID that identifies a weapon.
"""

from dataclasses import dataclass
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.errors import WeaponError


@dataclass(frozen=True)
class WeaponId:
    """Weapon identifier.

    Attributes:
        value: Non-nil UUID.

    Raises:
        ValueError: If value is the nil UUID.

    Example:
        >>> weapon_id = WeaponId.create()
        >>> WeaponId.from_value(str(weapon_id)) == weapon_id
        True
    """

    value: UUID

    def __post_init__(self) -> None:
        """Reject the nil UUID."""
        if self.value.int == 0:
            raise ValueError(WeaponError.EMPTY_WEAPON_ID)

    @classmethod
    def create(cls) -> "WeaponId":
        """Generate a new time-ordered identifier."""
        return cls(uuid7())

    @classmethod
    def from_value(cls, value: UUID | str) -> "WeaponId":
        """Wrap an existing identifier.

        Args:
            value: UUID or its string form.

        Raises:
            ValueError: If value is not a UUID or is the nil UUID.
        """
        return cls(value if isinstance(value, UUID) else UUID(value))

    def __str__(self) -> str:
        return str(self.value)
