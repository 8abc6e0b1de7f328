"""Registry entry types for commands and queries."""

import inspect
from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Which aggregate a command or query works on."""

    WEAPON = "weapon"
    AUTH = "auth"


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """One command and the handler that executes it.

    Attributes:
        command_class: Command dataclass (e.g. DamageWeapon).
        handler_class: Handler class (e.g. DamageWeaponHandler).
        category: WEAPON or AUTH.
        returns: Type carried by Success (UUID, AuthResult), None for
            commands that only acknowledge.
        emits_events: Whether the handler publishes to the event bus.
        description: One line for docs.
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    returns: type | None = None
    emits_events: bool = True
    description: str = ""


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """One query and the handler that answers it.

    Queries never publish events.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    returns: type
    description: str = ""


def get_handler_dependencies(handler_class: type) -> list[str]:
    """Names of the required __init__ parameters of handler_class.

    Parameters with defaults (random source, clock) are left out; the
    dispatcher only injects what a handler cannot do without.

    Example:
        >>> get_handler_dependencies(DamageWeaponHandler)
        ['weapon_repo', 'event_bus', 'logger']
    """
    params = list(inspect.signature(handler_class.__init__).parameters.values())
    return [p.name for p in params[1:] if p.default is inspect.Parameter.empty]
