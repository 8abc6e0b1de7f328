"""GetWeapon query handler.

Returns DTO (not domain entity) to prevent leaking domain to presentation.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, ApplicationError] (explicit error handling)
- NO domain events (queries are side-effect free)
"""

from src.application.dtos import WeaponResult
from src.application.errors import ApplicationError
from src.application.queries.weapon_queries import GetWeapon
from src.core.result import Failure, Result, Success
from src.domain.protocols.weapon_repository import WeaponRepository
from src.domain.value_objects import WeaponId


class GetWeaponError:
    """GetWeapon-specific errors."""

    WEAPON_NOT_FOUND = "Weapon with ID '{weapon_id}' was not found"
    UNEXPECTED = "Failed to retrieve weapon: {error}"


class GetWeaponHandler:
    """Handler for GetWeapon query."""

    def __init__(self, weapon_repo: WeaponRepository) -> None:
        self._weapon_repo = weapon_repo

    async def handle(self, query: GetWeapon) -> Result[WeaponResult, ApplicationError]:
        """Handle GetWeapon query.

        Returns:
            Success(WeaponResult): Weapon found.
            Failure(ApplicationError): NOT_FOUND or QUERY_FAILED.
        """
        try:
            weapon_id = WeaponId.from_value(query.weapon_id)
        except ValueError as e:
            return Failure(error=ApplicationError.invalid_query(str(e)))

        try:
            weapon = await self._weapon_repo.find_by_id(weapon_id)
        except Exception as e:
            return Failure(
                error=ApplicationError.query_failed(
                    GetWeaponError.UNEXPECTED.format(error=e)
                )
            )

        if weapon is None:
            return Failure(
                error=ApplicationError.not_found(
                    GetWeaponError.WEAPON_NOT_FOUND.format(weapon_id=query.weapon_id),
                    weapon_id=str(query.weapon_id),
                )
            )

        return Success(value=WeaponResult.from_entity(weapon))
