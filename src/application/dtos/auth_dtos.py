"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication command and query handlers.
These carry data from handlers back to the presentation layer, which issues
tokens from them.

DTOs:
    - AuthResult: Result from LoginUser
    - UserProfileResult: Result from GetUserProfile
"""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from src.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class UserProfileResult:
    """Public user data.

    Attributes:
        id: User identifier.
        email: Normalized email address.
        username: Username.
        name: Display name.
        date_of_birth: Date of birth.
        roles: Role names (e.g. ["User"]).
        created_at: Registration timestamp.
        last_login_at: Last successful login (None if never).
    """

    id: UUID
    email: str
    username: str
    name: str
    date_of_birth: date
    roles: list[str]
    created_at: datetime
    last_login_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserProfileResult":
        return cls(
            id=user.id.value,
            email=user.email.value,
            username=user.username,
            name=user.name,
            date_of_birth=user.profile.date_of_birth,
            roles=[role.value for role in user.roles],
            created_at=user.created_at,
            last_login_at=user.security.last_login_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthResult:
    """Response from successful login.

    Contains the user data needed for token generation.

    Attributes:
        user: Authenticated user's profile.
        roles: Role names for the access token.
    """

    user: UserProfileResult
    roles: list[str]
