"""Composition root.

    from src.core.container import get_dispatcher, get_logger

- infrastructure: database, sessions, password hashing, JWT, logging
- events: event bus with its subscriptions
- repositories: weapon and user repositories per request
- dispatcher: CQRS dispatcher per request
"""

from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.events import get_event_bus
from src.core.container.repositories import (
    get_user_repository,
    get_weapon_repository,
)
from src.core.container.dispatcher import get_dispatcher

__all__ = [
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    "get_event_bus",
    "get_user_repository",
    "get_weapon_repository",
    "get_dispatcher",
]
