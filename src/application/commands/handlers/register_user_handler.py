"""Registration handler.

Flow:
1. Validate password strength (all violations reported together)
2. Validate email format
3. Check username uniqueness, then email uniqueness
4. Register User aggregate (hashes password, assigns User role)
5. Save user
6. Publish UserRegistered
7. Return Success(user_id)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
- Handler orchestrates business logic without knowing persistence details
"""

from uuid import UUID

from src.application.commands.auth_commands import RegisterUser
from src.application.errors import ApplicationError
from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
)
from src.domain.protocols.user_repository import UserRepository
from src.domain.value_objects import Email, Password


class RegistrationError:
    """Registration-specific errors."""

    VALIDATION_FAILED = "Validation failed"
    USERNAME_ALREADY_EXISTS = "Username already exists"
    EMAIL_ALREADY_EXISTS = "Email already exists"
    UNEXPECTED = "Registration failed: {error}"


class RegisterUserHandler:
    """Handler for user registration command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (User aggregate, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence
            password_service: Password hashing service
            event_bus: Event bus for publishing domain events
            logger: Structured logger
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[UUID, ApplicationError]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command with raw field values.

        Returns:
            Success(user_id) on successful registration
            Failure(ApplicationError) on validation failure, duplicate
            username/email (no persistence attempted) or unexpected error

        Side Effects:
            - Creates User in database
            - Publishes UserRegistered event (on success)
        """
        password_errors = Password.strength_errors(cmd.password)
        if password_errors:
            return Failure(
                error=ApplicationError.validation(
                    RegistrationError.VALIDATION_FAILED, password_errors
                )
            )

        try:
            email = Email(cmd.email)
        except ValueError as e:
            return Failure(error=ApplicationError.validation(str(e)))

        try:
            if await self._user_repo.find_by_username(cmd.username) is not None:
                self._logger.info("registration_username_taken", username=cmd.username)
                return Failure(
                    error=ApplicationError.validation(
                        RegistrationError.USERNAME_ALREADY_EXISTS,
                        domain_error=_conflict(
                            ErrorCode.USER_ALREADY_EXISTS,
                            RegistrationError.USERNAME_ALREADY_EXISTS,
                            "username",
                        ),
                    )
                )

            if await self._user_repo.find_by_email(email) is not None:
                self._logger.info("registration_email_taken")
                return Failure(
                    error=ApplicationError.validation(
                        RegistrationError.EMAIL_ALREADY_EXISTS,
                        domain_error=_conflict(
                            ErrorCode.EMAIL_ALREADY_EXISTS,
                            RegistrationError.EMAIL_ALREADY_EXISTS,
                            "email",
                        ),
                    )
                )

            user, event = User.register(
                username=cmd.username,
                name=cmd.name,
                email=email,
                password=cmd.password,
                date_of_birth=cmd.date_of_birth,
                password_hasher=self._password_service,
            )
            await self._user_repo.add(user)

        except ValueError as e:
            return Failure(error=ApplicationError.validation(str(e)))
        except Exception as e:
            self._logger.error("registration_failed", error=e)
            return Failure(
                error=ApplicationError.execution_failed(
                    RegistrationError.UNEXPECTED.format(error=e)
                )
            )

        await self._event_bus.publish(event)
        self._logger.info("user_registered", user_id=str(user.id))
        return Success(value=user.id.value)


def _conflict(code: ErrorCode, message: str, field: str) -> ConflictError:
    return ConflictError(
        code=code, message=message, resource_type="User", conflicting_field=field
    )
