"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Repository protocols import domain entities, so they are not re-exported
here (entities import PasswordHashingProtocol for type checking). Import
them from their modules:

Usage:
    from src.domain.protocols import PasswordHashingProtocol, LoggerProtocol
    from src.domain.protocols.weapon_repository import WeaponRepository
"""

from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_service_protocol import TokenServiceProtocol

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenServiceProtocol",
]
