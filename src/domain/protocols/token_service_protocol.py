"""Token service protocol for domain layer.

Issues and validates the JWT access and refresh tokens handed out by the
auth endpoints. Validation is stateless (no database lookup).

Token Strategy:
    - Access tokens: 180 minutes, 24 hours for Application-role users
    - Refresh tokens: 30 days, "type": "refresh" claim
"""

from datetime import datetime
from typing import Any, Protocol
from uuid import UUID

from src.core.result import Result


class TokenServiceProtocol(Protocol):
    """JWT generation and validation interface.

    Implementations:
        - JWTService: PyJWT, HMAC-SHA256

    Usage:
        token = token_service.generate_access_token(
            user_id=user_id, email=email, roles=["User"]
        )
        match token_service.validate_access_token(token):
            case Success(value=payload):
                user_id = payload["sub"]
            case Failure(error=error):
                ...
    """

    def generate_access_token(
        self, user_id: UUID, email: str, roles: list[str]
    ) -> str:
        """Generate a signed access token.

        Args:
            user_id: Stored in the "sub" claim.
            email: Stored in the "email" claim.
            roles: Role names (e.g. ["User"], ["Admin"]).

        Returns:
            Encoded JWT (header.payload.signature).
        """
        ...

    def generate_refresh_token(self, user_id: UUID) -> str:
        """Generate a signed refresh token for user_id."""
        ...

    def get_access_token_expiration(self, roles: list[str]) -> datetime:
        """Expiry (UTC) an access token issued now for these roles would get."""
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Decode and verify an access token.

        Returns:
            Success(payload) if signature, expiry, issuer and audience are
            valid. Failure(message) otherwise.
        """
        ...

    def validate_refresh_token(self, token: str) -> Result[dict[str, Any], str]:
        """Decode and verify a refresh token (requires "type": "refresh")."""
        ...
