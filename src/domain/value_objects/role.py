"""Role value object.

Roles are compared by value. Three roles carry meaning in the system:
User (default for registrations), Admin and Application (service accounts
that receive long-lived access tokens).
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.errors import UserError


@dataclass(frozen=True)
class Role:
    """Named role.

    Attributes:
        value: Role name ("User", "Admin", "Application").

    Example:
        >>> Role.create("  Admin ").is_admin
        True
        >>> Role.USER.is_application
        False
    """

    value: str

    USER: ClassVar["Role"]
    ADMIN: ClassVar["Role"]
    APPLICATION: ClassVar["Role"]

    def __post_init__(self) -> None:
        """Reject blank role names."""
        if not self.value or not self.value.strip():
            raise ValueError(UserError.EMPTY_ROLE)

    @classmethod
    def create(cls, value: str) -> "Role":
        """Build a role from text, trimming surrounding whitespace.

        Raises:
            ValueError: If value is blank.
        """
        if not value or not value.strip():
            raise ValueError(UserError.EMPTY_ROLE)
        return cls(value.strip())

    @property
    def is_admin(self) -> bool:
        return self.value == "Admin"

    @property
    def is_application(self) -> bool:
        return self.value == "Application"

    def __str__(self) -> str:
        return self.value


Role.USER = Role("User")
Role.ADMIN = Role("Admin")
Role.APPLICATION = Role("Application")
