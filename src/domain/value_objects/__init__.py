"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.email import Email
from src.domain.value_objects.password import Password
from src.domain.value_objects.repair_estimate import RepairEstimate
from src.domain.value_objects.role import Role
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.user_profile import UserProfile
from src.domain.value_objects.user_security import UserSecurity
from src.domain.value_objects.weapon_id import WeaponId
from src.domain.value_objects.weapon_name import DESCRIPTORS, WeaponName

__all__ = [
    "DESCRIPTORS",
    "Email",
    "Password",
    "RepairEstimate",
    "Role",
    "UserId",
    "UserProfile",
    "UserSecurity",
    "WeaponId",
    "WeaponName",
]
