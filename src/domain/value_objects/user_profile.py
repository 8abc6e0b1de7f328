"""UserProfile value object.

Public identity of a user: username, display name and date of birth.
Immutable; every update returns a new instance.
"""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime

from src.domain.errors import UserError

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
NAME_MAX_LENGTH = 100


@dataclass(frozen=True)
class UserProfile:
    """User profile with username and name validation.

    Attributes:
        username: 3-50 characters, letters, digits, underscores and hyphens.
        name: Display name, 1-100 characters.
        date_of_birth: Calendar date of birth.

    Raises:
        ValueError: If username or name breaks the rules above.

    Example:
        >>> profile = UserProfile.create("dragon_slayer", "Ada", date(1990, 5, 1))
        >>> profile.with_name("Ada L.").name
        'Ada L.'
    """

    username: str
    name: str
    date_of_birth: date

    def __post_init__(self) -> None:
        """Validate username and name."""
        _validate_username(self.username)
        _validate_name(self.name)

    @classmethod
    def create(cls, username: str, name: str, date_of_birth: date) -> "UserProfile":
        """Build a validated profile."""
        return cls(username=username, name=name, date_of_birth=date_of_birth)

    def with_username(self, username: str) -> "UserProfile":
        """Return a copy with a new username."""
        return replace(self, username=username)

    def with_name(self, name: str) -> "UserProfile":
        """Return a copy with a new display name."""
        return replace(self, name=name)

    def with_date_of_birth(self, date_of_birth: date) -> "UserProfile":
        """Return a copy with a new date of birth."""
        return replace(self, date_of_birth=date_of_birth)

    def get_age(self, today: date | None = None) -> int:
        """Age in whole years.

        Args:
            today: Reference date (defaults to the current UTC date).

        Returns:
            int: Completed years since date_of_birth.
        """
        today = today or datetime.now(UTC).date()
        age = today.year - self.date_of_birth.year
        if (today.month, today.day) < (
            self.date_of_birth.month,
            self.date_of_birth.day,
        ):
            age -= 1
        return age


def _validate_username(username: str) -> None:
    if not username or not username.strip():
        raise ValueError(UserError.EMPTY_USERNAME)
    if len(username) < USERNAME_MIN_LENGTH:
        raise ValueError(UserError.USERNAME_TOO_SHORT)
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValueError(UserError.USERNAME_TOO_LONG)
    if not all(c.isalnum() or c in "_-" for c in username):
        raise ValueError(UserError.USERNAME_INVALID_CHARACTERS)


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValueError(UserError.EMPTY_NAME)
    if len(name) > NAME_MAX_LENGTH:
        raise ValueError(UserError.NAME_TOO_LONG)
