"""Lookups over COMMAND_REGISTRY and QUERY_REGISTRY.

Registry imports are deferred: the registry pulls in every handler, and
handlers must stay importable without it.
"""

from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.cqrs.metadata import CommandMetadata, CQRSCategory


def get_handler_map() -> dict[type, type]:
    """Request class -> handler class, for commands and queries alike."""
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    handlers = {meta.command_class: meta.handler_class for meta in COMMAND_REGISTRY}
    for meta in QUERY_REGISTRY:
        handlers[meta.query_class] = meta.handler_class
    return handlers


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.category is category]


def get_command_metadata(command_class: type) -> "CommandMetadata | None":
    """Registry entry for command_class, or None for queries and strangers."""
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return next(
        (meta for meta in COMMAND_REGISTRY if meta.command_class is command_class),
        None,
    )


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Counts per kind and category.

    Example:
        >>> get_statistics()["commands_by_category"]
        {'weapon': 5, 'auth': 2}
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "total_operations": len(COMMAND_REGISTRY) + len(QUERY_REGISTRY),
        "commands_by_category": dict(
            Counter(meta.category.value for meta in COMMAND_REGISTRY)
        ),
        "queries_by_category": dict(
            Counter(meta.category.value for meta in QUERY_REGISTRY)
        ),
    }


def validate_registry_consistency() -> list[str]:
    """Problems that would break dispatch. Empty when the registry is sound."""
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    problems: list[str] = []
    request_classes = [meta.command_class for meta in COMMAND_REGISTRY] + [
        meta.query_class for meta in QUERY_REGISTRY
    ]
    for request_class, count in Counter(request_classes).items():
        if count > 1:
            problems.append(f"{request_class.__name__} is registered {count} times")

    for handler_class in {
        meta.handler_class for meta in [*COMMAND_REGISTRY, *QUERY_REGISTRY]
    }:
        if not callable(getattr(handler_class, "handle", None)):
            problems.append(f"{handler_class.__name__} has no handle() method")

    return problems
