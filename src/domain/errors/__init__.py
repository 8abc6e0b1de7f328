"""Domain errors package.

Usage:
    from src.domain.errors import WeaponError, UserError
    from src.domain.errors import InvalidWeaponOperationError
"""

from src.domain.errors.authentication_error import AuthenticationError
from src.domain.errors.user_error import UserError
from src.domain.errors.weapon_error import InvalidWeaponOperationError, WeaponError

__all__ = [
    "AuthenticationError",
    "InvalidWeaponOperationError",
    "UserError",
    "WeaponError",
]
