"""API module - HTTP endpoints.

Resources:
    /api/weapons  - Weapon management (bearer token required)
    /api/auth     - Registration, login, tokens and profiles
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.api.auth import router as auth_router
from src.presentation.api.weapons import router as weapons_router

api_router = APIRouter(prefix=settings.api_prefix)

api_router.include_router(weapons_router)
api_router.include_router(auth_router)

__all__ = [
    "api_router",
    "auth_router",
    "weapons_router",
]
