"""Domain events package.

Usage:
    from src.domain.events import DomainEvent, WeaponDamaged, UserRegistered
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.user_events import (
    UserLoggedIn,
    UserPasswordChanged,
    UserRegistered,
)
from src.domain.events.weapon_events import (
    WeaponCreated,
    WeaponDamaged,
    WeaponDeleted,
    WeaponRepaired,
)

__all__ = [
    "DomainEvent",
    "UserLoggedIn",
    "UserPasswordChanged",
    "UserRegistered",
    "WeaponCreated",
    "WeaponDamaged",
    "WeaponDeleted",
    "WeaponRepaired",
]
