"""Password hashing port used by the User aggregate."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Hash and check passwords (BcryptPasswordService in infrastructure).

    Usage:
        user, event = User.register(..., password_hasher=password_service)
        if user.is_password_valid(plain, password_service):
            ...
    """

    def hash_password(self, password: str) -> str:
        """Salted hash; two calls with the same password never match."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """False on mismatch and on a malformed hash; never raises."""
        ...
