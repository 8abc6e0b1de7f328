"""Email value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from src.domain.errors import UserError


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses email-validator for RFC-compliant validation. The stored value is
    fully lowercased so lookups are case-insensitive.

    Attributes:
        value: The email address string (validated, lowercase)

    Raises:
        ValueError: If email is empty or its format is invalid

    Example:
        >>> str(Email("Player@Example.com"))
        'player@example.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email format
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address.

        Raises:
            ValueError: If email is empty or invalid.
        """
        if not self.value or not self.value.strip():
            raise ValueError(UserError.EMPTY_EMAIL)
        try:
            # No deliverability check (no DNS lookups)
            validated = validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(UserError.INVALID_EMAIL) from e
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", validated.normalized.lower())

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
