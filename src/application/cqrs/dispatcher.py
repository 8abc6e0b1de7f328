"""Request dispatcher (mediator).

Routes a command or query object to the single handler registered for its
exact type. The dispatch table is built once per request scope
by the container from the CQRS registry.

Usage:
    >>> dispatcher = Dispatcher.from_registry(
    ...     {"weapon_repo": repo, "event_bus": bus, "logger": logger, ...}
    ... )
    >>> result = await dispatcher.dispatch(DamageWeapon(weapon_id=id, damage_amount=5))
"""

from collections.abc import Callable, Mapping
from functools import partial
from typing import Any, Protocol

from src.application.cqrs.computed_views import get_handler_map
from src.application.cqrs.metadata import get_handler_dependencies
from src.application.errors import ApplicationError
from src.core.result import Result


class RequestHandler(Protocol):
    """Anything with an async handle(request) returning a Result."""

    async def handle(self, request: Any) -> Result[Any, ApplicationError]: ...


class Dispatcher:
    """Typed dispatch table from request class to handler instance."""

    def __init__(
        self,
        handlers: Mapping[type, RequestHandler],
        factories: Mapping[type, Callable[[], RequestHandler]] | None = None,
    ) -> None:
        self._handlers = dict(handlers)
        self._factories = dict(factories or {})

    @classmethod
    def from_registry(cls, dependencies: Mapping[str, object]) -> "Dispatcher":
        """Wire every registered handler to its named dependencies.

        Each required __init__ parameter of a handler is looked up by name
        in dependencies. Dependencies are checked for all handlers up front;
        a handler is only instantiated the first time its request is
        dispatched.

        Raises:
            RuntimeError: If a handler needs a dependency that is not provided.
        """
        factories: dict[type, Callable[[], RequestHandler]] = {}
        for request_class, handler_class in get_handler_map().items():
            kwargs = {}
            for name in get_handler_dependencies(handler_class):
                if name not in dependencies:
                    raise RuntimeError(
                        f"{handler_class.__name__} requires missing dependency '{name}'"
                    )
                kwargs[name] = dependencies[name]
            factories[request_class] = partial(handler_class, **kwargs)
        return cls({}, factories)

    def handler_for(self, request_class: type) -> RequestHandler:
        """Return the handler registered for request_class.

        Raises:
            RuntimeError: If no handler is registered.
        """
        handler = self._handlers.get(request_class)
        if handler is None:
            factory = self._factories.get(request_class)
            if factory is None:
                raise RuntimeError(
                    f"No handler registered for {request_class.__name__}"
                )
            handler = self._handlers[request_class] = factory()
        return handler

    async def dispatch(self, request: object) -> Result[Any, ApplicationError]:
        """Send request to its handler and return the handler's Result.

        Raises:
            RuntimeError: If no handler is registered for type(request).
        """
        return await self.handler_for(type(request)).handle(request)
