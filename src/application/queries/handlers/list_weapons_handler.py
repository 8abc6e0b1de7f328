"""GetAllWeapons query handler."""

from src.application.dtos import WeaponResult
from src.application.errors import ApplicationError
from src.application.queries.weapon_queries import GetAllWeapons
from src.core.result import Failure, Result, Success
from src.domain.protocols.weapon_repository import WeaponRepository


class ListWeaponsError:
    """GetAllWeapons-specific errors."""

    UNEXPECTED = "Failed to retrieve weapons: {error}"


class ListWeaponsHandler:
    """Handler for GetAllWeapons query."""

    def __init__(self, weapon_repo: WeaponRepository) -> None:
        self._weapon_repo = weapon_repo

    async def handle(
        self, query: GetAllWeapons
    ) -> Result[list[WeaponResult], ApplicationError]:
        try:
            weapons = await self._weapon_repo.find_all()
        except Exception as e:
            return Failure(
                error=ApplicationError.query_failed(
                    ListWeaponsError.UNEXPECTED.format(error=e)
                )
            )
        return Success(value=[WeaponResult.from_entity(w) for w in weapons])
