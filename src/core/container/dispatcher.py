"""Dispatcher dependency factory.

Builds a request-scoped Dispatcher whose handlers share the request's
repositories. Handlers are instantiated from the CQRS registry by
dependency name (see Dispatcher.from_registry).
"""

from fastapi import Depends

from src.application.cqrs import Dispatcher
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_logger, get_password_service
from src.core.container.repositories import (
    get_user_repository,
    get_weapon_repository,
)
from src.infrastructure.persistence.repositories import (
    UserRepository,
    WeaponRepository,
)


async def get_dispatcher(
    weapon_repo: WeaponRepository = Depends(get_weapon_repository),
    user_repo: UserRepository = Depends(get_user_repository),
) -> Dispatcher:
    """Get dispatcher (request-scoped).

    Both repositories come from the same request session.

    Usage:
        @router.post("/weapons/damage")
        async def damage_weapon(
            dispatcher: Dispatcher = Depends(get_dispatcher),
        ):
            result = await dispatcher.dispatch(DamageWeapon(...))
    """
    return Dispatcher.from_registry(
        {
            "weapon_repo": weapon_repo,
            "user_repo": user_repo,
            "event_bus": get_event_bus(),
            "logger": get_logger(),
            "password_service": get_password_service(),
        }
    )
