"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST   /api/auth/register            - Register user
    POST   /api/auth/login               - Login (tokens)
    POST   /api/auth/refresh             - Refresh tokens
    POST   /api/auth/logout              - Logout
    GET    /api/auth/profile             - Own profile
    GET    /api/auth/profile/{user_id}   - Profile by ID (own or admin)
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from src.application.dtos import UserProfileResult
from src.schemas.common_schemas import CamelModel


# =============================================================================
# Registration
# =============================================================================


class RegisterUserRequest(CamelModel):
    """Request schema for user registration.

    POST /api/auth/register
    Returns: 201 Created

    Password strength and email format are checked by the command handler,
    which reports every violation together.
    """

    username: str = Field(..., examples=["dragon_slayer"])
    name: str = Field(..., examples=["Ada Lovelace"])
    email: str = Field(..., examples=["ada@example.com"])
    password: str = Field(..., examples=["Str0ng!Pass9"])
    date_of_birth: date = Field(..., examples=["1990-05-01"])


# =============================================================================
# Login / Refresh
# =============================================================================


class LoginUserRequest(CamelModel):
    """Request schema for login.

    POST /api/auth/login
    """

    email_or_username: str = Field(..., examples=["ada@example.com"])
    password: str = Field(..., examples=["Str0ng!Pass9"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "emailOrUsername": "ada@example.com",
                "password": "Str0ng!Pass9",
            }
        }
    )


class RefreshTokenRequest(CamelModel):
    """Request schema for token refresh.

    token (the expired access token) is accepted but not required.
    """

    token: str | None = None
    refresh_token: str = Field(..., description="Refresh token from login")


# =============================================================================
# Responses
# =============================================================================


class UserResponse(CamelModel):
    """Public user data."""

    id: UUID
    email: str
    username: str
    name: str

    @classmethod
    def from_result(cls, user: UserProfileResult) -> "UserResponse":
        return cls(id=user.id, email=user.email, username=user.username, name=user.name)


class AuthResponse(CamelModel):
    """Tokens plus the authenticated user (login, register, refresh)."""

    access_token: str
    refresh_token: str
    expires_at: datetime
    user: UserResponse
