"""DeleteWeapon command handler."""

from src.application.commands.weapon_commands import DeleteWeapon
from src.application.errors import ApplicationError
from src.core.result import Failure, Result, Success
from src.domain.events import WeaponDeleted
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.domain.protocols.weapon_repository import WeaponRepository
from src.domain.value_objects import WeaponId


class DeleteWeaponError:
    """DeleteWeapon-specific errors."""

    WEAPON_NOT_FOUND = "Weapon with ID '{weapon_id}' was not found"
    UNEXPECTED = "Failed to delete weapon: {error}"


class DeleteWeaponHandler:
    """Handler for DeleteWeapon command.

    Looks the weapon up first so unknown IDs fail with NOT_FOUND.
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

    async def handle(self, cmd: DeleteWeapon) -> Result[None, ApplicationError]:
        try:
            weapon_id = WeaponId.from_value(cmd.weapon_id)
        except ValueError as e:
            return Failure(error=ApplicationError.validation(str(e)))

        try:
            weapon = await self._weapon_repo.find_by_id(weapon_id)
            if weapon is None:
                return Failure(
                    error=ApplicationError.not_found(
                        DeleteWeaponError.WEAPON_NOT_FOUND.format(
                            weapon_id=cmd.weapon_id
                        ),
                        weapon_id=str(cmd.weapon_id),
                    )
                )

            await self._weapon_repo.remove(weapon)

        except Exception as e:
            self._logger.error(
                "weapon_deletion_failed", error=e, weapon_id=str(cmd.weapon_id)
            )
            return Failure(
                error=ApplicationError.execution_failed(
                    DeleteWeaponError.UNEXPECTED.format(error=e)
                )
            )

        await self._event_bus.publish(WeaponDeleted(weapon_id=cmd.weapon_id))
        self._logger.info("weapon_deleted", weapon_id=str(cmd.weapon_id))
        return Success(value=None)
