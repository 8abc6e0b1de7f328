"""Password value object with strength validation.

Immutable value object that validates password strength before hashing.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Final

MIN_LENGTH: Final = 8
SPECIAL_CHARACTERS: Final = "!@#$%^&*()_+-=[]{}|;:,.<>?"
WEAK_PATTERNS: Final = (
    "password",
    "123456",
    "qwerty",
    "abc123",
    "letmein",
    "welcome",
    "monkey",
    "dragon",
    "master",
    "hello",
    "login",
    "admin",
    "test",
    "guest",
    "user",
)


@dataclass(frozen=True)
class Password:
    """Password value object with strength validation.

    Password Requirements:
        - At least 8 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit
        - At least one special character
        - No whitespace
        - Not a common, sequential, or mostly-repeated pattern

    Attributes:
        value: The password string (validated)

    Raises:
        ValueError: If password does not meet the requirements. The message
            lists every violated rule.

    Example:
        >>> Password("Str0ng!Pass9").value
        'Str0ng!Pass9'
        >>> Password.strength_errors("weak")[0]
        'Password must be at least 8 characters long'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate password strength after initialization.

        Raises:
            ValueError: If any requirement is not met.
        """
        errors = self.strength_errors(self.value)
        if errors:
            raise ValueError("; ".join(errors))

    @staticmethod
    def strength_errors(value: str) -> list[str]:
        """Collect every strength rule the password violates.

        Args:
            value: Plaintext password.

        Returns:
            list[str]: Violation messages (empty if the password is strong).
        """
        if not value:
            return ["Password is required"]

        errors: list[str] = []
        if len(value) < MIN_LENGTH:
            errors.append(f"Password must be at least {MIN_LENGTH} characters long")
        if not any(c.isupper() for c in value):
            errors.append("Password must contain at least one uppercase letter")
        if not any(c.islower() for c in value):
            errors.append("Password must contain at least one lowercase letter")
        if not any(c.isdigit() for c in value):
            errors.append("Password must contain at least one digit")
        if not any(c in SPECIAL_CHARACTERS for c in value):
            errors.append(
                "Password must contain at least one special character (!@#$%^&*)"
            )
        if any(c.isspace() for c in value):
            errors.append("Password cannot contain whitespace characters")
        if _is_weak(value):
            errors.append("Password is too common or weak")
        return errors

    def __str__(self) -> str:
        """Return masked password (never log plaintext)."""
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"Password('{'*' * len(self.value)}')"


def _is_weak(value: str) -> bool:
    lowered = value.lower()
    if any(pattern in lowered for pattern in WEAK_PATTERNS):
        return True
    return _has_sequence(value) or _is_mostly_repeated(value)


def _has_sequence(value: str, run: int = 4) -> bool:
    """Detect runs like "1234", "abcd" or "dcba"."""
    codes = [ord(c) for c in value]
    for start in range(len(codes) - run + 1):
        window = codes[start : start + run]
        steps = {b - a for a, b in zip(window, window[1:])}
        if steps == {1} or steps == {-1}:
            return True
    return False


def _is_mostly_repeated(value: str) -> bool:
    """More than half of the characters are the same character."""
    if len(value) < 4:
        return False
    most_common = Counter(value).most_common(1)[0][1]
    return most_common / len(value) > 0.5
