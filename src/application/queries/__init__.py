"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetWeapon, GetUserProfile).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.user_queries import GetUserProfile
from src.application.queries.weapon_queries import (
    EstimateRepair,
    GetAllWeapons,
    GetWeapon,
)

__all__ = [
    "EstimateRepair",
    "GetAllWeapons",
    "GetUserProfile",
    "GetWeapon",
]
