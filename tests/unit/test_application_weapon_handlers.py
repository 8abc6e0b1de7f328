"""Unit tests for weapon command handlers.

Tests cover:
- CreateWeapon (validation, descriptor naming, duplicates, persistence)
- CreateRandomWeapon (generated ranges, seeded reproducibility)
- DamageWeapon / RepairWeapon (guards, not found, persistence, events)
- DeleteWeapon (not found, removal, event)

Architecture:
- Repository, event bus and logger are mocks
- Aggregates are real (domain rules are exercised, not stubbed)
"""

import asyncio
import random
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from src.application.commands import (
    CreateRandomWeapon,
    CreateWeapon,
    DamageWeapon,
    DeleteWeapon,
    RepairWeapon,
)
from src.application.commands.handlers.create_random_weapon_handler import (
    RANDOM_MAX_HIT_POINTS,
    CreateRandomWeaponHandler,
)
from src.application.commands.handlers.create_weapon_handler import (
    CreateWeaponError,
    CreateWeaponHandler,
)
from src.application.commands.handlers.damage_weapon_handler import (
    DamageWeaponError,
    DamageWeaponHandler,
)
from src.application.commands.handlers.delete_weapon_handler import (
    DeleteWeaponHandler,
)
from src.application.commands.handlers.repair_weapon_handler import (
    RepairWeaponError,
    RepairWeaponHandler,
)
from src.application.errors import ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.errors import WeaponError
from src.domain.events import WeaponCreated, WeaponDamaged, WeaponDeleted, WeaponRepaired
from src.domain.value_objects import WeaponId
from tests.conftest import make_weapon

MISSING_ID = UUID("0190a2c4-7b3e-7c51-9d2f-3a1b2c3d4e5f")


@pytest.fixture
def weapon_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = None
    repo.find_by_name.return_value = None
    return repo


def create_command(**overrides) -> CreateWeapon:
    fields = {
        "name": "Flames",
        "weapon_type": "Sword",
        "description": "Burns on contact",
        "hit_points": 100,
        "damage": 0,
        "is_repairable": True,
        "value": Decimal("150"),
    }
    return CreateWeapon(**(fields | overrides))


# =============================================================================
# CreateWeapon
# =============================================================================


@pytest.mark.unit
class TestCreateWeaponHandler:
    """Test CreateWeaponHandler."""

    @pytest.mark.asyncio
    async def test_create_persists_weapon_and_publishes_event(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        # Arrange
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        # Act
        result = await handler.handle(create_command())

        # Assert
        assert isinstance(result, Success)
        weapon_repo.add.assert_awaited_once()
        saved = weapon_repo.add.await_args.args[0]
        assert saved.id.value == result.value
        assert saved.name.value == "Sword of Flames"
        assert saved.max_hit_points == 100

        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, WeaponCreated)
        assert event.weapon_id == result.value
        assert event.weapon_type == "Sword"

    @pytest.mark.asyncio
    async def test_type_is_case_insensitive(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(create_command(weapon_type="staff"))

        assert isinstance(result, Success)
        saved = weapon_repo.add.await_args.args[0]
        assert saved.name.value == "Staff of Flames"
        assert saved.type.is_magic

    @pytest.mark.asyncio
    async def test_all_field_violations_reported_together(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            create_command(
                name="", hit_points=0, value=Decimal("-1"), weapon_type="Laser"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.validation_errors == (
            CreateWeaponError.NAME_REQUIRED,
            CreateWeaponError.HIT_POINTS_NOT_POSITIVE,
            CreateWeaponError.VALUE_NEGATIVE,
            CreateWeaponError.INVALID_TYPE,
        )
        weapon_repo.add.assert_not_awaited()
        mock_event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upper_bounds_enforced(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            create_command(
                description="x" * 501,
                hit_points=10_001,
                damage=1_001,
                value=Decimal("1000000.01"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.validation_errors == (
            CreateWeaponError.DESCRIPTION_TOO_LONG,
            CreateWeaponError.HIT_POINTS_TOO_HIGH,
            CreateWeaponError.DAMAGE_TOO_HIGH,
            CreateWeaponError.VALUE_TOO_HIGH,
        )

    @pytest.mark.asyncio
    async def test_unknown_descriptor_is_validation_failure(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(create_command(name="Bananas"))

        assert isinstance(result, Failure)
        assert result.error.is_validation_error
        assert result.error.message == WeaponError.UNKNOWN_DESCRIPTOR
        weapon_repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected_without_write(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon_repo.find_by_name.return_value = make_weapon("Sword of Flames")
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(create_command())

        assert isinstance(result, Failure)
        assert result.error.message == (
            "A weapon with the name 'Sword of Flames' already exists"
        )
        assert result.error.domain_error.code == ErrorCode.WEAPON_ALREADY_EXISTS
        weapon_repo.find_by_name.assert_awaited_once_with("Sword of Flames")
        weapon_repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_repository_error_returns_execution_failure(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon_repo.add.side_effect = RuntimeError("database is locked")
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(create_command())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        assert "database is locked" in result.error.message
        mock_event_bus.publish.assert_not_awaited()
        mock_logger.error.assert_called_once()


# =============================================================================
# CreateRandomWeapon
# =============================================================================


@pytest.mark.unit
class TestCreateRandomWeaponHandler:
    """Test CreateRandomWeaponHandler."""

    @pytest.mark.asyncio
    async def test_generated_weapon_within_ranges(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = CreateRandomWeaponHandler(
            weapon_repo, mock_event_bus, mock_logger, rng=random.Random(7)
        )

        result = await handler.handle(CreateRandomWeapon())

        assert isinstance(result, Success)
        weapon = weapon_repo.add.await_args.args[0]
        assert weapon.id.value == result.value
        assert weapon.hit_points == RANDOM_MAX_HIT_POINTS
        assert weapon.max_hit_points == RANDOM_MAX_HIT_POINTS
        assert 5 <= weapon.damage <= 20
        assert f"{weapon.type.value} of " in weapon.name.value
        assert weapon.value >= 0
        assert weapon.description
        assert isinstance(mock_event_bus.publish.await_args.args[0], WeaponCreated)

    @pytest.mark.asyncio
    async def test_same_seed_generates_same_weapon(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        for _ in range(2):
            handler = CreateRandomWeaponHandler(
                weapon_repo, mock_event_bus, mock_logger, rng=random.Random(42)
            )
            await handler.handle(CreateRandomWeapon())

        first, second = (call.args[0] for call in weapon_repo.add.await_args_list)
        assert first.name == second.name
        assert first.type == second.type
        assert first.value == second.value
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_repository_error_returns_execution_failure(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon_repo.add.side_effect = RuntimeError("disk full")
        handler = CreateRandomWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(CreateRandomWeapon())

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        mock_event_bus.publish.assert_not_awaited()


# =============================================================================
# DamageWeapon
# =============================================================================


@pytest.mark.unit
class TestDamageWeaponHandler:
    """Test DamageWeaponHandler."""

    @pytest.mark.asyncio
    async def test_damage_updates_weapon_and_publishes_event(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon = make_weapon(hit_points=100, value="150")
        weapon_repo.find_by_id.return_value = weapon
        handler = DamageWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            DamageWeapon(weapon_id=weapon.id.value, damage_amount=20)
        )

        assert result == Success(value=None)
        weapon_repo.find_by_id.assert_awaited_once_with(weapon.id)
        weapon_repo.update.assert_awaited_once_with(weapon)
        assert weapon.hit_points == 80
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, WeaponDamaged)
        assert event.new_value == Decimal("150.9")

    @pytest.mark.asyncio
    async def test_negative_damage_rejected_before_lookup(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = DamageWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            DamageWeapon(weapon_id=MISSING_ID, damage_amount=-1)
        )

        assert isinstance(result, Failure)
        assert result.error.is_validation_error
        assert result.error.message == DamageWeaponError.NEGATIVE_AMOUNT
        weapon_repo.find_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_weapon_is_not_found(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = DamageWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            DamageWeapon(weapon_id=MISSING_ID, damage_amount=5)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.details == {"weapon_id": str(MISSING_ID)}
        weapon_repo.update.assert_not_awaited()
        mock_event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_failure_returns_execution_failure(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon_repo.find_by_id.return_value = make_weapon()
        weapon_repo.update.side_effect = LookupError("gone")
        handler = DamageWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            DamageWeapon(weapon_id=MISSING_ID, damage_amount=5)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        mock_event_bus.publish.assert_not_awaited()


# =============================================================================
# RepairWeapon
# =============================================================================


@pytest.mark.unit
class TestRepairWeaponHandler:
    """Test RepairWeaponHandler."""

    @pytest.mark.asyncio
    async def test_repair_updates_weapon_and_publishes_event(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon = make_weapon(hit_points=100, value="150")
        weapon.damage_weapon(20)
        weapon_repo.find_by_id.return_value = weapon
        handler = RepairWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            RepairWeapon(weapon_id=weapon.id.value, repair_amount=50)
        )

        assert isinstance(result, Success)
        weapon_repo.update.assert_awaited_once_with(weapon)
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, WeaponRepaired)
        assert event.repair_amount == 20
        assert event.new_hit_points == 100

    @pytest.mark.asyncio
    async def test_negative_repair_rejected(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = RepairWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            RepairWeapon(weapon_id=MISSING_ID, repair_amount=-5)
        )

        assert isinstance(result, Failure)
        assert result.error.message == RepairWeaponError.NEGATIVE_AMOUNT

    @pytest.mark.asyncio
    async def test_non_repairable_weapon_is_validation_failure(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon = make_weapon(is_repairable=False)
        weapon_repo.find_by_id.return_value = weapon
        handler = RepairWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            RepairWeapon(weapon_id=weapon.id.value, repair_amount=5)
        )

        assert isinstance(result, Failure)
        assert result.error.is_validation_error
        assert result.error.message == WeaponError.NOT_REPAIRABLE
        weapon_repo.update.assert_not_awaited()
        mock_event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_weapon_is_not_found(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = RepairWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(
            RepairWeapon(weapon_id=MISSING_ID, repair_amount=5)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND


# =============================================================================
# DeleteWeapon
# =============================================================================


@pytest.mark.unit
class TestDeleteWeaponHandler:
    """Test DeleteWeaponHandler."""

    @pytest.mark.asyncio
    async def test_delete_removes_weapon_and_publishes_event(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon = make_weapon()
        weapon_repo.find_by_id.return_value = weapon
        handler = DeleteWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(DeleteWeapon(weapon_id=weapon.id.value))

        assert result == Success(value=None)
        weapon_repo.find_by_id.assert_awaited_once_with(WeaponId(weapon.id.value))
        weapon_repo.remove.assert_awaited_once_with(weapon)
        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, WeaponDeleted)
        assert event.weapon_id == weapon.id.value

    @pytest.mark.asyncio
    async def test_unknown_weapon_is_not_found(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = DeleteWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(DeleteWeapon(weapon_id=MISSING_ID))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        weapon_repo.remove.assert_not_awaited()


# =============================================================================
# Shared handler behaviour
# =============================================================================

NIL_ID = UUID(int=0)


def weapon_handlers():
    return [
        (DamageWeaponHandler, DamageWeapon(weapon_id=NIL_ID, damage_amount=5)),
        (RepairWeaponHandler, RepairWeapon(weapon_id=NIL_ID, repair_amount=5)),
        (DeleteWeaponHandler, DeleteWeapon(weapon_id=NIL_ID)),
    ]


@pytest.mark.unit
class TestWeaponIdValidation:
    """An empty GUID is rejected as input before any repository call."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("handler_class", "command"), weapon_handlers())
    async def test_nil_weapon_id_is_validation_failure(
        self, handler_class, command, weapon_repo, mock_event_bus, mock_logger
    ):
        handler = handler_class(weapon_repo, mock_event_bus, mock_logger)

        result = await handler.handle(command)

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.message == WeaponError.EMPTY_WEAPON_ID
        weapon_repo.find_by_id.assert_not_awaited()
        mock_event_bus.publish.assert_not_awaited()


@pytest.mark.unit
class TestCancellation:
    """Cancellation while awaiting the repository propagates to the caller."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("handler_class", "command"),
        [
            (DamageWeaponHandler, DamageWeapon(weapon_id=MISSING_ID, damage_amount=5)),
            (RepairWeaponHandler, RepairWeapon(weapon_id=MISSING_ID, repair_amount=5)),
            (DeleteWeaponHandler, DeleteWeapon(weapon_id=MISSING_ID)),
        ],
    )
    async def test_lookup_cancellation_propagates(
        self, handler_class, command, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon_repo.find_by_id.side_effect = asyncio.CancelledError()
        handler = handler_class(weapon_repo, mock_event_bus, mock_logger)

        with pytest.raises(asyncio.CancelledError):
            await handler.handle(command)

        weapon_repo.update.assert_not_awaited()
        weapon_repo.remove.assert_not_awaited()
        mock_event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_cancellation_propagates(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon_repo.find_by_name.side_effect = asyncio.CancelledError()
        handler = CreateWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        with pytest.raises(asyncio.CancelledError):
            await handler.handle(create_command())

        weapon_repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_random_cancellation_propagates(
        self, weapon_repo, mock_event_bus, mock_logger
    ):
        weapon_repo.add.side_effect = asyncio.CancelledError()
        handler = CreateRandomWeaponHandler(weapon_repo, mock_event_bus, mock_logger)

        with pytest.raises(asyncio.CancelledError):
            await handler.handle(CreateRandomWeapon())

        mock_event_bus.publish.assert_not_awaited()
