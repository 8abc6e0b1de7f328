"""UserId value object.

Immutable wrapper around the UUID that identifies a user.
"""

from dataclasses import dataclass
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.errors import UserError


@dataclass(frozen=True)
class UserId:
    """User identifier.

    Attributes:
        value: Non-nil UUID.

    Raises:
        ValueError: If value is the nil UUID.

    Example:
        >>> user_id = UserId.create()
        >>> UserId.from_value(str(user_id)) == user_id
        True
    """

    value: UUID

    def __post_init__(self) -> None:
        """Reject the nil UUID."""
        if self.value.int == 0:
            raise ValueError(UserError.EMPTY_USER_ID)

    @classmethod
    def create(cls) -> "UserId":
        """Generate a new time-ordered identifier."""
        return cls(uuid7())

    @classmethod
    def from_value(cls, value: UUID | str) -> "UserId":
        """Wrap an existing identifier.

        Args:
            value: UUID or its string form.

        Raises:
            ValueError: If value is not a UUID or is the nil UUID.
        """
        return cls(value if isinstance(value, UUID) else UUID(value))

    def __str__(self) -> str:
        return str(self.value)
