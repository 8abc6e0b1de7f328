"""Domain entities for business logic.

Pure business logic aggregates with no framework dependencies.
"""

from src.domain.entities.user import User
from src.domain.entities.weapon import Weapon

__all__ = [
    "User",
    "Weapon",
]
