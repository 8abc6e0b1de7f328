"""RepairWeapon command handler.

Flow:
1. Reject negative repair amounts
2. Load weapon (NOT_FOUND if missing)
3. Repair on the aggregate (non-repairable weapons fail with the
   aggregate's message, unchanged)
4. Persist and publish WeaponRepaired
"""

from src.application.commands.weapon_commands import RepairWeapon
from src.application.errors import ApplicationError
from src.core.result import Failure, Result, Success
from src.domain.errors import InvalidWeaponOperationError
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.domain.protocols.weapon_repository import WeaponRepository
from src.domain.value_objects import WeaponId


class RepairWeaponError:
    """RepairWeapon-specific errors."""

    NEGATIVE_AMOUNT = "Repair amount cannot be negative"
    WEAPON_NOT_FOUND = "Weapon with ID '{weapon_id}' was not found"
    UNEXPECTED = "Failed to repair weapon: {error}"


class RepairWeaponHandler:
    """Handler for RepairWeapon command."""

    def __init__(
        self,
        weapon_repo: WeaponRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._weapon_repo = weapon_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: RepairWeapon) -> Result[None, ApplicationError]:
        """Handle RepairWeapon command.

        Returns:
            Success(None): Repair applied and persisted.
            Failure(ApplicationError): Negative amount, unknown weapon,
                non-repairable weapon or unexpected error.
        """
        if cmd.repair_amount < 0:
            return Failure(
                error=ApplicationError.validation(RepairWeaponError.NEGATIVE_AMOUNT)
            )

        try:
            weapon_id = WeaponId.from_value(cmd.weapon_id)
        except ValueError as e:
            return Failure(error=ApplicationError.validation(str(e)))

        try:
            weapon = await self._weapon_repo.find_by_id(weapon_id)
            if weapon is None:
                self._logger.warning("weapon_not_found", weapon_id=str(cmd.weapon_id))
                return Failure(
                    error=ApplicationError.not_found(
                        RepairWeaponError.WEAPON_NOT_FOUND.format(
                            weapon_id=cmd.weapon_id
                        ),
                        weapon_id=str(cmd.weapon_id),
                    )
                )

            event = weapon.repair_weapon(cmd.repair_amount)
            await self._weapon_repo.update(weapon)

        except InvalidWeaponOperationError as e:
            self._logger.info(
                "weapon_repair_rejected", weapon_id=str(cmd.weapon_id), reason=str(e)
            )
            return Failure(error=ApplicationError.validation(str(e)))
        except Exception as e:
            self._logger.error(
                "weapon_repair_failed", error=e, weapon_id=str(cmd.weapon_id)
            )
            return Failure(
                error=ApplicationError.execution_failed(
                    RepairWeaponError.UNEXPECTED.format(error=e)
                )
            )

        await self._event_bus.publish(event)
        self._logger.info(
            "weapon_repaired",
            weapon_id=str(cmd.weapon_id),
            repair_amount=event.repair_amount,
            hit_points=event.new_hit_points,
        )
        return Success(value=None)
