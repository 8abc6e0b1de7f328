"""CreateWeapon command handler.

Flow:
1. Validate every command field (all violations reported together)
2. Build the name "{Type} of {Descriptor}" from type and descriptor
3. Reject duplicate names (no write happens)
4. Create Weapon aggregate and persist it
5. Publish WeaponCreated
6. Return Success(weapon_id)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
"""

from decimal import Decimal
from uuid import UUID

from src.application.commands.weapon_commands import CreateWeapon
from src.application.errors import ApplicationError
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities import Weapon
from src.domain.enums import WeaponType
from src.domain.events import WeaponCreated
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.domain.protocols.weapon_repository import WeaponRepository
from src.domain.value_objects import WeaponName

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_HIT_POINTS = 10_000
MAX_DAMAGE = 1_000
MAX_VALUE = Decimal(1_000_000)


class CreateWeaponError:
    """CreateWeapon-specific errors."""

    VALIDATION_FAILED = "Validation failed"
    NAME_REQUIRED = "Weapon name is required"
    NAME_TOO_LONG = "Weapon name cannot exceed 100 characters"
    DESCRIPTION_REQUIRED = "Weapon description is required"
    DESCRIPTION_TOO_LONG = "Weapon description cannot exceed 500 characters"
    HIT_POINTS_NOT_POSITIVE = "Weapon hit points must be greater than 0"
    HIT_POINTS_TOO_HIGH = "Weapon hit points cannot exceed 10,000"
    DAMAGE_NEGATIVE = "Weapon damage cannot be negative"
    DAMAGE_TOO_HIGH = "Weapon damage cannot exceed 1,000"
    VALUE_NEGATIVE = "Weapon value cannot be negative"
    VALUE_TOO_HIGH = "Weapon value cannot exceed 1,000,000"
    INVALID_TYPE = "Invalid weapon type specified"
    DUPLICATE_NAME = "A weapon with the name '{name}' already exists"
    UNEXPECTED = "An error occurred while creating the weapon: {error}"


def validate_create_weapon(cmd: CreateWeapon) -> list[str]:
    """Collect every rule the command breaks.

    Each field reports at most one message: a missing or out-of-range value
    stops further checks on that field.

    Returns:
        list[str]: Messages in field order (empty if valid).
    """
    errors: list[str] = []

    if not cmd.name or not cmd.name.strip():
        errors.append(CreateWeaponError.NAME_REQUIRED)
    elif len(cmd.name) > MAX_NAME_LENGTH:
        errors.append(CreateWeaponError.NAME_TOO_LONG)

    if not cmd.description or not cmd.description.strip():
        errors.append(CreateWeaponError.DESCRIPTION_REQUIRED)
    elif len(cmd.description) > MAX_DESCRIPTION_LENGTH:
        errors.append(CreateWeaponError.DESCRIPTION_TOO_LONG)

    if cmd.hit_points <= 0:
        errors.append(CreateWeaponError.HIT_POINTS_NOT_POSITIVE)
    elif cmd.hit_points > MAX_HIT_POINTS:
        errors.append(CreateWeaponError.HIT_POINTS_TOO_HIGH)

    if cmd.damage < 0:
        errors.append(CreateWeaponError.DAMAGE_NEGATIVE)
    elif cmd.damage > MAX_DAMAGE:
        errors.append(CreateWeaponError.DAMAGE_TOO_HIGH)

    if cmd.value < 0:
        errors.append(CreateWeaponError.VALUE_NEGATIVE)
    elif cmd.value > MAX_VALUE:
        errors.append(CreateWeaponError.VALUE_TOO_HIGH)

    try:
        WeaponType.parse(cmd.weapon_type)
    except ValueError:
        errors.append(CreateWeaponError.INVALID_TYPE)

    return errors


class CreateWeaponHandler:
    """Handler for CreateWeapon command.

    Dependencies (injected via constructor):
        - WeaponRepository: Duplicate check and persistence
        - EventBusProtocol: WeaponCreated publication
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        weapon_repo: WeaponRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._weapon_repo = weapon_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: CreateWeapon) -> Result[UUID, ApplicationError]:
        """Handle CreateWeapon command.

        Returns:
            Success(weapon_id): Weapon created.
            Failure(ApplicationError): Validation failure (invalid fields,
                unknown descriptor, duplicate name) or unexpected error.
        """
        errors = validate_create_weapon(cmd)
        if errors:
            self._logger.info("weapon_creation_rejected", errors=errors)
            return Failure(
                error=ApplicationError.validation(
                    CreateWeaponError.VALIDATION_FAILED, errors
                )
            )

        try:
            weapon_type = WeaponType.parse(cmd.weapon_type)
            weapon_name = WeaponName.generate_with_descriptor(weapon_type, cmd.name)

            if await self._weapon_repo.find_by_name(weapon_name.value) is not None:
                message = CreateWeaponError.DUPLICATE_NAME.format(
                    name=weapon_name.value
                )
                self._logger.info("weapon_name_taken", name=weapon_name.value)
                return Failure(
                    error=ApplicationError.validation(
                        message,
                        domain_error=ConflictError(
                            code=ErrorCode.WEAPON_ALREADY_EXISTS,
                            message=message,
                            resource_type="Weapon",
                            conflicting_field="name",
                        ),
                    )
                )

            weapon = Weapon.create(
                weapon_name,
                cmd.description,
                cmd.hit_points,
                cmd.damage,
                cmd.is_repairable,
                cmd.value,
                weapon_type=weapon_type,
            )
            await self._weapon_repo.add(weapon)

        except ValueError as e:
            return Failure(error=ApplicationError.validation(str(e)))
        except Exception as e:
            self._logger.error("weapon_creation_failed", error=e)
            return Failure(
                error=ApplicationError.execution_failed(
                    CreateWeaponError.UNEXPECTED.format(error=e)
                )
            )

        await self._event_bus.publish(
            WeaponCreated(
                weapon_id=weapon.id.value,
                name=weapon.name.value,
                weapon_type=weapon.type.value,
                initial_hit_points=weapon.hit_points,
                damage=weapon.damage,
                is_repairable=weapon.is_repairable,
                initial_value=weapon.value,
            )
        )
        self._logger.info(
            "weapon_created",
            weapon_id=str(weapon.id),
            name=weapon.name.value,
            weapon_type=weapon.type.value,
        )
        return Success(value=weapon.id.value)
