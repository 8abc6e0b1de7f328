"""JWT authentication dependencies.

FastAPI dependencies for extracting and validating bearer access tokens.

Usage:
    # Protected route (requires auth)
    @router.get("/protected")
    async def protected_route(
        current_user: CurrentUser = Depends(get_current_user),
    ):
        return {"user_id": str(current_user.user_id)}
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.errors import AuthenticationError
from src.domain.protocols import TokenServiceProtocol
from src.domain.value_objects import Role

# auto_error=False so a missing header gets the same 401 as a bad token
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user information from JWT.

    Attributes:
        user_id: User's unique identifier (from JWT 'sub' claim).
        email: User's email address (from JWT 'email' claim).
        roles: User's roles (from JWT 'roles' claim).
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    email: str
    roles: list[str]
    token_jti: str | None = None

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN.value in self.roles


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenServiceProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Get current authenticated user from JWT access token.

    Raises:
        HTTPException 401: If token is missing, invalid, expired or a
            refresh token.
    """
    if credentials is None:
        raise _unauthorized(AuthenticationError.MISSING_CREDENTIALS)

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                return CurrentUser(
                    user_id=UUID(payload["sub"]),
                    email=payload.get("email", ""),
                    roles=list(payload.get("roles", [])),
                    token_jti=payload.get("jti"),
                )
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e

        case Failure(error=error):
            raise _unauthorized(error)

    raise _unauthorized(AuthenticationError.INVALID_TOKEN)
