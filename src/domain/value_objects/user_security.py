"""UserSecurity value object.

Password hash and last login timestamp. Immutable; changes return new
instances.
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime

from src.domain.errors import UserError


@dataclass(frozen=True)
class UserSecurity:
    """Credential state for a user.

    Attributes:
        password_hash: Hash produced by the password hasher (never plaintext).
        last_login_at: When the user last logged in (None if never).

    Raises:
        ValueError: If password_hash is blank.
    """

    password_hash: str
    last_login_at: datetime | None = None

    def __post_init__(self) -> None:
        """Reject blank hashes."""
        if not self.password_hash or not self.password_hash.strip():
            raise ValueError(UserError.EMPTY_PASSWORD_HASH)

    @classmethod
    def create(
        cls, password_hash: str, last_login_at: datetime | None = None
    ) -> "UserSecurity":
        """Build security state from a hash (and optional last login)."""
        return cls(password_hash=password_hash, last_login_at=last_login_at)

    def with_password_hash(self, password_hash: str) -> "UserSecurity":
        """Return a copy with a new hash; last login is preserved."""
        return replace(self, password_hash=password_hash)

    def with_login(self, at: datetime | None = None) -> "UserSecurity":
        """Return a copy with last_login_at set (defaults to now, UTC)."""
        return replace(self, last_login_at=at or datetime.now(UTC))

    def __repr__(self) -> str:
        return f"UserSecurity(password_hash='***', last_login_at={self.last_login_at!r})"
