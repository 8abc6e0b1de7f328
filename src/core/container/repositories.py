"""Request-scoped repositories over the request's session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session
from src.infrastructure.persistence.repositories import (
    UserRepository,
    WeaponRepository,
)


async def get_weapon_repository(
    session: AsyncSession = Depends(get_db_session),
) -> WeaponRepository:
    return WeaponRepository(session=session)


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    return UserRepository(session=session)
