"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
- Raw strings are validated by the handlers (all violations reported together)
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Attributes:
        username: Unique username (3-50 chars, letters, digits, _ and -).
        name: Display name.
        email: Email address (normalized to lowercase).
        password: Plaintext password (strength-checked, then hashed).
        date_of_birth: Date of birth.

    Example:
        >>> command = RegisterUser(
        ...     username="dragon_slayer",
        ...     name="Ada",
        ...     email="ada@example.com",
        ...     password="Str0ng!Pass9",
        ...     date_of_birth=date(1990, 5, 1),
        ... )
        >>> result = await handler.handle(command)
    """

    username: str
    name: str
    email: str
    password: str
    date_of_birth: date


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email or username and password.

    Attributes:
        email_or_username: Tried as an email first, then as a username.
        password: Plaintext password.
    """

    email_or_username: str
    password: str

    def __repr__(self) -> str:
        return f"LoginUser(email_or_username={self.email_or_username!r}, password='***')"
