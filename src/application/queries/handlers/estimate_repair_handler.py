"""EstimateRepair query handler.

Loads the weapon and asks the aggregate for a repair projection. Nothing is
persisted; a non-repairable weapon fails with the aggregate's message.
"""

from src.application.dtos import RepairEstimateResult
from src.application.errors import ApplicationError
from src.application.queries.weapon_queries import EstimateRepair
from src.core.result import Failure, Result, Success
from src.domain.errors import InvalidWeaponOperationError
from src.domain.protocols.weapon_repository import WeaponRepository
from src.domain.value_objects import WeaponId


class EstimateRepairError:
    """EstimateRepair-specific errors."""

    NEGATIVE_AMOUNT = "Repair amount cannot be negative"
    WEAPON_NOT_FOUND = "Weapon with ID '{weapon_id}' was not found"
    UNEXPECTED = "Failed to estimate repair: {error}"


class EstimateRepairHandler:
    """Handler for EstimateRepair query."""

    def __init__(self, weapon_repo: WeaponRepository) -> None:
        self._weapon_repo = weapon_repo

    async def handle(
        self, query: EstimateRepair
    ) -> Result[RepairEstimateResult, ApplicationError]:
        """Handle EstimateRepair query.

        Returns:
            Success(RepairEstimateResult): Projection for the weapon.
            Failure(ApplicationError): Negative amount or non-repairable
                weapon (QUERY_VALIDATION_FAILED), unknown weapon (NOT_FOUND)
                or unexpected error (QUERY_FAILED).
        """
        if query.repair_amount < 0:
            return Failure(
                error=ApplicationError.invalid_query(EstimateRepairError.NEGATIVE_AMOUNT)
            )

        try:
            weapon_id = WeaponId.from_value(query.weapon_id)
        except ValueError as e:
            return Failure(error=ApplicationError.invalid_query(str(e)))

        try:
            weapon = await self._weapon_repo.find_by_id(weapon_id)
            if weapon is None:
                return Failure(
                    error=ApplicationError.not_found(
                        EstimateRepairError.WEAPON_NOT_FOUND.format(
                            weapon_id=query.weapon_id
                        ),
                        weapon_id=str(query.weapon_id),
                    )
                )

            estimate = weapon.get_repair_estimate(query.repair_amount)

        except InvalidWeaponOperationError as e:
            return Failure(error=ApplicationError.invalid_query(str(e)))
        except Exception as e:
            return Failure(
                error=ApplicationError.query_failed(
                    EstimateRepairError.UNEXPECTED.format(error=e)
                )
            )

        return Success(value=RepairEstimateResult.from_estimate(estimate))
