"""DamageWeapon command handler.

Flow:
1. Reject negative damage amounts
2. Load weapon (NOT_FOUND if missing)
3. Apply damage on the aggregate
4. Persist and publish WeaponDamaged
"""

from src.application.commands.weapon_commands import DamageWeapon
from src.application.errors import ApplicationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.domain.protocols.weapon_repository import WeaponRepository
from src.domain.value_objects import WeaponId


class DamageWeaponError:
    """DamageWeapon-specific errors."""

    NEGATIVE_AMOUNT = "Damage amount cannot be negative"
    WEAPON_NOT_FOUND = "Weapon with ID '{weapon_id}' was not found"
    UNEXPECTED = "Failed to damage weapon: {error}"


class DamageWeaponHandler:
    """Handler for DamageWeapon command."""

    def __init__(
        self,
        weapon_repo: WeaponRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._weapon_repo = weapon_repo
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: DamageWeapon) -> Result[None, ApplicationError]:
        """Handle DamageWeapon command.

        Returns:
            Success(None): Damage applied and persisted.
            Failure(ApplicationError): Negative amount, unknown weapon or
                unexpected error.
        """
        if cmd.damage_amount < 0:
            return Failure(
                error=ApplicationError.validation(DamageWeaponError.NEGATIVE_AMOUNT)
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
                        DamageWeaponError.WEAPON_NOT_FOUND.format(
                            weapon_id=cmd.weapon_id
                        ),
                        weapon_id=str(cmd.weapon_id),
                    )
                )

            event = weapon.damage_weapon(cmd.damage_amount)
            await self._weapon_repo.update(weapon)

        except Exception as e:
            self._logger.error(
                "weapon_damage_failed", error=e, weapon_id=str(cmd.weapon_id)
            )
            return Failure(
                error=ApplicationError.execution_failed(
                    DamageWeaponError.UNEXPECTED.format(error=e)
                )
            )

        await self._event_bus.publish(event)
        self._logger.info(
            "weapon_damaged",
            weapon_id=str(cmd.weapon_id),
            damage_amount=cmd.damage_amount,
            hit_points=event.new_hit_points,
        )
        return Success(value=None)
