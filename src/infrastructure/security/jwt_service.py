"""JWT token service (adapter).

This service implements the TokenServiceProtocol using PyJWT.

Architecture:
    - Implements TokenServiceProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Claims:
    - sub, email, roles, type ("access" | "refresh"), jti (uuid7)
    - iat, exp, iss, aud

Expiration:
    - Access tokens: 180 minutes (24 hours for Application-role users)
    - Refresh tokens: 30 days
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.value_objects import Role

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user_id, email="ada@example.com", roles=["User"]
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        issuer: str = "weapon-api",
        audience: str = "weapon-api-clients",
        access_token_minutes: int = 180,
        application_token_minutes: int = 1440,
        refresh_token_days: int = 30,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing, at least 32 bytes.
            algorithm: Signing algorithm.
            issuer: "iss" claim written and required.
            audience: "aud" claim written and required.
            access_token_minutes: Access token lifetime.
            application_token_minutes: Access token lifetime for
                Application-role users.
            refresh_token_days: Refresh token lifetime.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._access_token_minutes = access_token_minutes
        self._application_token_minutes = application_token_minutes
        self._refresh_token_days = refresh_token_days

    def generate_access_token(
        self,
        user_id: UUID,
        email: str,
        roles: list[str],
    ) -> str:
        """Generate JWT access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     user_id=uuid7(), email="ada@example.com", roles=["User"]
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "roles": list(roles),
            "type": ACCESS_TOKEN_TYPE,
            "jti": str(uuid7()),
            "iat": int(now.timestamp()),
            "exp": int(self._access_expiry(now, roles).timestamp()),
            "iss": self._issuer,
            "aud": self._audience,
        }
        return self._encode(payload)

    def generate_refresh_token(self, user_id: UUID) -> str:
        """Generate JWT refresh token (carries only the subject)."""
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "type": REFRESH_TOKEN_TYPE,
            "jti": str(uuid7()),
            "iat": int(now.timestamp()),
            "exp": int(
                (now + timedelta(days=self._refresh_token_days)).timestamp()
            ),
            "iss": self._issuer,
            "aud": self._audience,
        }
        return self._encode(payload)

    def get_access_token_expiration(self, roles: list[str]) -> datetime:
        return self._access_expiry(datetime.now(UTC), roles)

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Refresh tokens are rejected with WRONG_TOKEN_TYPE.
        """
        return self._decode(token, ACCESS_TOKEN_TYPE)

    def validate_refresh_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT refresh token and extract payload.

        Access tokens are rejected with WRONG_TOKEN_TYPE.
        """
        return self._decode(token, REFRESH_TOKEN_TYPE)

    def _access_expiry(self, issued_at: datetime, roles: list[str]) -> datetime:
        if Role.APPLICATION.value in roles:
            return issued_at + timedelta(minutes=self._application_token_minutes)
        return issued_at + timedelta(minutes=self._access_token_minutes)

    def _encode(self, payload: dict[str, Any]) -> str:
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def _decode(self, token: str, expected_type: str) -> Result[dict[str, Any], str]:
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["sub", "exp", "iat", "type"]},
            )
        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        if payload.get("type") != expected_type:
            return Failure(error=AuthenticationError.WRONG_TOKEN_TYPE)

        return Success(value=payload)
