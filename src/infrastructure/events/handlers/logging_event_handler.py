"""Logging event handler for domain events.

Writes one structured log entry per weapon and user event. Subscribed to
the event bus by the container at startup.

Log Levels:
    - INFO: all events (normal operations)
    - WARNING: a weapon reaching zero hit points

Usage:
    >>> handler = LoggingEventHandler(logger=get_logger())
    >>> handler.register(event_bus)
"""

from src.domain.events import (
    DomainEvent,
    UserLoggedIn,
    UserPasswordChanged,
    UserRegistered,
    WeaponCreated,
    WeaponDamaged,
    WeaponDeleted,
    WeaponRepaired,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handle_* method to its event type."""
        event_bus.subscribe(WeaponCreated, self.handle_weapon_created)
        event_bus.subscribe(WeaponDamaged, self.handle_weapon_damaged)
        event_bus.subscribe(WeaponRepaired, self.handle_weapon_repaired)
        event_bus.subscribe(WeaponDeleted, self.handle_weapon_deleted)
        event_bus.subscribe(UserRegistered, self.handle_user_registered)
        event_bus.subscribe(UserPasswordChanged, self.handle_user_password_changed)
        event_bus.subscribe(UserLoggedIn, self.handle_user_logged_in)

    # =========================================================================
    # Weapon Event Handlers
    # =========================================================================

    async def handle_weapon_created(self, event: WeaponCreated) -> None:
        self._logger.info(
            "event_weapon_created",
            **_base(event),
            weapon_id=str(event.weapon_id),
            name=event.name,
            weapon_type=event.weapon_type,
            initial_value=str(event.initial_value),
        )

    async def handle_weapon_damaged(self, event: WeaponDamaged) -> None:
        """Log damage (WARNING when the weapon is broken)."""
        fields = {
            **_base(event),
            "weapon_id": str(event.weapon_id),
            "damage_amount": event.damage_amount,
            "new_hit_points": event.new_hit_points,
            "new_damage_level": event.new_damage_level,
            "new_value": str(event.new_value),
        }
        if event.new_hit_points == 0:
            self._logger.warning("event_weapon_broken", **fields)
        else:
            self._logger.info("event_weapon_damaged", **fields)

    async def handle_weapon_repaired(self, event: WeaponRepaired) -> None:
        self._logger.info(
            "event_weapon_repaired",
            **_base(event),
            weapon_id=str(event.weapon_id),
            repair_amount=event.repair_amount,
            new_hit_points=event.new_hit_points,
            new_value=str(event.new_value),
        )

    async def handle_weapon_deleted(self, event: WeaponDeleted) -> None:
        self._logger.info(
            "event_weapon_deleted", **_base(event), weapon_id=str(event.weapon_id)
        )

    # =========================================================================
    # User Event Handlers
    # =========================================================================

    async def handle_user_registered(self, event: UserRegistered) -> None:
        self._logger.info(
            "event_user_registered",
            **_base(event),
            user_id=str(event.user_id),
            email=event.email,
        )

    async def handle_user_password_changed(self, event: UserPasswordChanged) -> None:
        self._logger.info(
            "event_user_password_changed", **_base(event), user_id=str(event.user_id)
        )

    async def handle_user_logged_in(self, event: UserLoggedIn) -> None:
        self._logger.info(
            "event_user_logged_in", **_base(event), user_id=str(event.user_id)
        )


def _base(event: DomainEvent) -> dict[str, str]:
    return {
        "event_id": str(event.event_id),
        "occurred_at": event.occurred_at.isoformat(),
    }
