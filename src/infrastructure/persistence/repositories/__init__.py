"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.user_repository import UserRepository
from src.infrastructure.persistence.repositories.weapon_repository import (
    WeaponRepository,
)

__all__ = [
    "UserRepository",
    "WeaponRepository",
]
