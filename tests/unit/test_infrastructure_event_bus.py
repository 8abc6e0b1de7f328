"""Unit tests for InMemoryEventBus and LoggingEventHandler.

Tests cover:
- Subscription and exact-type routing
- No-op publish when nothing is subscribed
- Fail-open behavior (a failing handler is logged, others still run)
- LoggingEventHandler registration and log levels
"""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

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
from src.infrastructure.events import InMemoryEventBus
from src.infrastructure.events.handlers import LoggingEventHandler


def weapon_damaged(new_hit_points: int = 80) -> WeaponDamaged:
    return WeaponDamaged(
        weapon_id=uuid7(),
        damage_amount=20,
        new_hit_points=new_hit_points,
        new_damage_level=100 - new_hit_points,
        new_value=Decimal("150.90"),
    )


@pytest.fixture
def event_bus(mock_logger) -> InMemoryEventBus:
    return InMemoryEventBus(logger=mock_logger)


@pytest.mark.unit
class TestInMemoryEventBus:
    """Test InMemoryEventBus."""

    @pytest.mark.asyncio
    async def test_publish_calls_subscribed_handlers(self, event_bus):
        first, second = AsyncMock(), AsyncMock()
        event_bus.subscribe(WeaponDamaged, first)
        event_bus.subscribe(WeaponDamaged, second)
        event = weapon_damaged()

        await event_bus.publish(event)

        first.assert_awaited_once_with(event)
        second.assert_awaited_once_with(event)
        assert event_bus.handler_count(WeaponDamaged) == 2

    @pytest.mark.asyncio
    async def test_routing_is_by_exact_type(self, event_bus):
        handler = AsyncMock()
        event_bus.subscribe(DomainEvent, handler)

        await event_bus.publish(weapon_damaged())

        handler.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_publish_without_handlers_is_noop(self, event_bus, mock_logger):
        await event_bus.publish(WeaponDeleted(weapon_id=uuid7()))

        mock_logger.debug.assert_not_called()
        assert event_bus.handler_count(WeaponDeleted) == 0

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self, event_bus, mock_logger):
        failing = AsyncMock(side_effect=RuntimeError("armory offline"))
        healthy = AsyncMock()
        event_bus.subscribe(WeaponDamaged, failing)
        event_bus.subscribe(WeaponDamaged, healthy)

        await event_bus.publish(weapon_damaged())

        healthy.assert_awaited_once()
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("event_handler_failed",)
        assert kwargs["event_type"] == "WeaponDamaged"
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "armory offline"

    @pytest.mark.asyncio
    async def test_same_handler_registered_twice_runs_twice(self, event_bus):
        handler = AsyncMock()
        event_bus.subscribe(UserLoggedIn, handler)
        event_bus.subscribe(UserLoggedIn, handler)

        await event_bus.publish(UserLoggedIn(user_id=uuid7()))

        assert handler.await_count == 2


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test LoggingEventHandler."""

    def test_register_subscribes_every_event(self):
        bus = Mock()

        LoggingEventHandler(logger=Mock()).register(bus)

        subscribed = {call.args[0] for call in bus.subscribe.call_args_list}
        assert subscribed == {
            WeaponCreated,
            WeaponDamaged,
            WeaponRepaired,
            WeaponDeleted,
            UserRegistered,
            UserPasswordChanged,
            UserLoggedIn,
        }

    @pytest.mark.asyncio
    async def test_damage_logged_at_info(self, mock_logger):
        event = weapon_damaged(new_hit_points=80)

        await LoggingEventHandler(logger=mock_logger).handle_weapon_damaged(event)

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args == ("event_weapon_damaged",)
        assert kwargs["weapon_id"] == str(event.weapon_id)
        assert kwargs["new_value"] == "150.90"
        mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_broken_weapon_logged_at_warning(self, mock_logger):
        await LoggingEventHandler(logger=mock_logger).handle_weapon_damaged(
            weapon_damaged(new_hit_points=0)
        )

        assert mock_logger.warning.call_args.args == ("event_weapon_broken",)
        mock_logger.info.assert_not_called()

    @pytest.mark.asyncio
    async def test_published_through_bus(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        LoggingEventHandler(logger=mock_logger).register(bus)
        user_id = uuid7()

        await bus.publish(UserRegistered(user_id=user_id, email="ada@example.com"))

        args, kwargs = mock_logger.info.call_args
        assert args == ("event_user_registered",)
        assert kwargs["user_id"] == str(user_id)
        assert kwargs["email"] == "ada@example.com"
