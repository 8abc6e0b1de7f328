"""Login handler.

Looks the user up by email (when the identifier parses as one) and falls
back to username, verifies the password and records the login.

Unknown users and wrong passwords return the same UNAUTHORIZED error so
callers cannot tell which factor failed. Only the log tells them apart.
"""

from src.application.commands.auth_commands import LoginUser
from src.application.dtos import AuthResult, UserProfileResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.events import UserLoggedIn
from src.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
)
from src.domain.protocols.user_repository import UserRepository
from src.domain.value_objects import Email


class LoginError:
    """Login-specific errors."""

    INVALID_CREDENTIALS = "Invalid email/username or password"
    UNEXPECTED = "Login failed: {error}"


class LoginUserHandler:
    """Handler for LoginUser command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthResult, ApplicationError]:
        """Handle LoginUser command.

        Returns:
            Success(AuthResult): Credentials valid, login recorded.
            Failure(ApplicationError): UNAUTHORIZED for unknown user or
                wrong password, COMMAND_EXECUTION_FAILED otherwise.
        """
        try:
            user = await self._find_user(cmd.email_or_username)
            if user is None:
                self._logger.info("login_failed", reason="user_not_found")
                return Failure(error=_invalid_credentials())

            if not user.is_password_valid(cmd.password, self._password_service):
                self._logger.info(
                    "login_failed", reason="invalid_password", user_id=str(user.id)
                )
                return Failure(error=_invalid_credentials())

            user.record_login()
            await self._user_repo.update(user)

        except Exception as e:
            self._logger.error("login_error", error=e)
            return Failure(
                error=ApplicationError.execution_failed(
                    LoginError.UNEXPECTED.format(error=e)
                )
            )

        await self._event_bus.publish(UserLoggedIn(user_id=user.id.value))
        self._logger.info("login_succeeded", user_id=str(user.id))
        return Success(
            value=AuthResult(
                user=UserProfileResult.from_entity(user),
                roles=[role.value for role in user.roles],
            )
        )

    async def _find_user(self, email_or_username: str) -> User | None:
        user = None
        try:
            email = Email(email_or_username)
        except ValueError:
            email = None
        if email is not None:
            user = await self._user_repo.find_by_email(email)
        if user is None:
            user = await self._user_repo.find_by_username(email_or_username)
        return user


def _invalid_credentials() -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.UNAUTHORIZED,
        message=LoginError.INVALID_CREDENTIALS,
        domain_error=AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=LoginError.INVALID_CREDENTIALS,
        ),
    )
