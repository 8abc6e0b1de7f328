"""Event bus port.

Handlers publish the events returned by aggregate mutators
(weapon.damage_weapon(10) returns WeaponDamaged) through this port.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Publish/subscribe by exact event class.

    publish() never raises a subscriber's exception and is a no-op when
    nobody subscribed. Subscribers run concurrently, in no fixed order.
    """

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None: ...

    async def publish(self, event: DomainEvent) -> None: ...
