"""User domain events."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class UserRegistered(DomainEvent):
    """User registered.

    Attributes:
        user_id: ID of the new user.
        email: Normalized email address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class UserPasswordChanged(DomainEvent):
    """User changed their password."""

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class UserLoggedIn(DomainEvent):
    """User authenticated successfully."""

    user_id: UUID
