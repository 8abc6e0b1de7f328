"""CQRS registry and dispatcher.

COMMAND_REGISTRY / QUERY_REGISTRY list every command and query with its
handler. Dispatcher.from_registry() builds the dispatch table from them.
"""

from src.application.cqrs.computed_views import (
    get_command_metadata,
    get_commands_by_category,
    get_handler_map,
    get_statistics,
    validate_registry_consistency,
)
from src.application.cqrs.dispatcher import Dispatcher, RequestHandler
from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
    get_handler_dependencies,
)
from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

__all__ = [
    "COMMAND_REGISTRY",
    "QUERY_REGISTRY",
    "CommandMetadata",
    "CQRSCategory",
    "Dispatcher",
    "QueryMetadata",
    "RequestHandler",
    "get_command_metadata",
    "get_commands_by_category",
    "get_handler_dependencies",
    "get_handler_map",
    "get_statistics",
    "validate_registry_consistency",
]
