"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and should not be imported by the domain layer.

Models Organization:
    - weapon.py: Weapon model
    - user.py: User model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.user import User
from src.infrastructure.persistence.models.weapon import Weapon

__all__ = [
    "User",
    "Weapon",
]
