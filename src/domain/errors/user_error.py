"""User domain errors.

Message constants for user value objects and the User aggregate.

Usage:
    from src.domain.errors import UserError

    if not username.strip():
        raise ValueError(UserError.EMPTY_USERNAME)
"""


class UserError:
    """User error constants.

    Error Categories:
        - Identity: UserId validation
        - Email: Email validation
        - Profile: username/name rules
        - Security: password hash rules
        - Roles: Role parsing
        - Collaborators: missing services
    """

    # Identity
    EMPTY_USER_ID = "UserId cannot be an empty GUID."

    # Email
    EMPTY_EMAIL = "Email cannot be empty"
    INVALID_EMAIL = "Invalid email format"

    # Profile
    EMPTY_USERNAME = "Username cannot be empty"
    USERNAME_TOO_SHORT = "Username must be at least 3 characters"
    USERNAME_TOO_LONG = "Username cannot exceed 50 characters"
    USERNAME_INVALID_CHARACTERS = (
        "Username can only contain letters, numbers, underscores, and hyphens"
    )
    EMPTY_NAME = "Name cannot be empty"
    NAME_TOO_LONG = "Name cannot exceed 100 characters"

    # Security
    EMPTY_PASSWORD_HASH = "Password hash cannot be empty"

    # Roles
    EMPTY_ROLE = "Role value cannot be empty"

    # Collaborators
    MISSING_PASSWORD_HASHER = "Password hasher is required"
    MISSING_EMAIL = "Email is required"
