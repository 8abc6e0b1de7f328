"""GetUserProfile query handler."""

from src.application.dtos import UserProfileResult
from src.application.errors import ApplicationError
from src.application.queries.user_queries import GetUserProfile
from src.core.result import Failure, Result, Success
from src.domain.protocols.user_repository import UserRepository
from src.domain.value_objects import UserId


class GetUserProfileError:
    """GetUserProfile-specific errors."""

    USER_NOT_FOUND = "User with ID '{user_id}' was not found"
    UNEXPECTED = "Failed to retrieve user profile: {error}"


class GetUserProfileHandler:
    """Handler for GetUserProfile query.

    Used by the profile endpoints and by token refresh (to re-read roles).
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(
        self, query: GetUserProfile
    ) -> Result[UserProfileResult, ApplicationError]:
        try:
            user_id = UserId.from_value(query.user_id)
        except ValueError as e:
            return Failure(error=ApplicationError.invalid_query(str(e)))

        try:
            user = await self._user_repo.find_by_id(user_id)
        except Exception as e:
            return Failure(
                error=ApplicationError.query_failed(
                    GetUserProfileError.UNEXPECTED.format(error=e)
                )
            )

        if user is None:
            return Failure(
                error=ApplicationError.not_found(
                    GetUserProfileError.USER_NOT_FOUND.format(user_id=query.user_id),
                    user_id=str(query.user_id),
                )
            )

        return Success(value=UserProfileResult.from_entity(user))
