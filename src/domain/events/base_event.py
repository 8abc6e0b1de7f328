"""Base domain event class.

Domain events are immutable records of things that happened to an
aggregate, named in past tense (WeaponDamaged, UserRegistered).

Aggregates do not keep events internally: factories and mutators return the
event they produced and command handlers publish it through the event bus.

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    ... class WeaponDeleted(DomainEvent):
    ...     weapon_id: UUID
    >>> event = WeaponDeleted(weapon_id=uuid7())
    >>> event.occurred_at.tzinfo is UTC
    True
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (WeaponRepaired, NOT RepairWeapon)
        3. Be frozen dataclasses with kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance (UUID v7).
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
