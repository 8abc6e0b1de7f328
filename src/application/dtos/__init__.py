"""Application DTOs (handler results)."""

from src.application.dtos.auth_dtos import AuthResult, UserProfileResult
from src.application.dtos.weapon_dtos import RepairEstimateResult, WeaponResult

__all__ = [
    "AuthResult",
    "RepairEstimateResult",
    "UserProfileResult",
    "WeaponResult",
]
