"""UserRepository port, implemented with SQLAlchemy in infrastructure."""

from typing import Protocol

from src.domain.entities.user import User
from src.domain.value_objects import Email, UserId


class UserRepository(Protocol):
    """Async persistence for the User aggregate.

    Registration calls username_exists / email_exists (or the finders)
    before add(); login resolves the identifier with find_by_email first
    and find_by_username second.
    """

    async def find_by_id(self, user_id: UserId) -> User | None: ...

    async def find_by_email(self, email: Email) -> User | None:
        """Exact match; Email values are already lowercase."""
        ...

    async def find_by_username(self, username: str) -> User | None: ...

    async def add(self, user: User) -> None: ...

    async def update(self, user: User) -> None:
        """Write back a loaded user.

        Raises:
            LookupError: If no row exists for user.id.
        """
        ...

    async def remove(self, user: User) -> None: ...

    async def exists(self, user_id: UserId) -> bool: ...

    async def email_exists(self, email: Email) -> bool: ...

    async def username_exists(self, username: str) -> bool: ...
