"""DomainError subclasses shared by the weapon and user use cases.

Example:
    ConflictError(
        code=ErrorCode.WEAPON_ALREADY_EXISTS,
        message="A weapon with the name 'Sword of Flames' already exists",
        resource_type="Weapon",
        conflicting_field="name",
    )
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Rejected input; field names the offending attribute when known."""

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness violation (weapon name, username, email)."""

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Bad credentials or an unusable token."""


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authenticated, but lacking required_role."""

    required_role: str | None = None
