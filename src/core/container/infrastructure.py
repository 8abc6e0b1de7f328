"""Process-wide services: database, password hashing, JWT, logging.

Each factory is lru_cached so FastAPI dependencies and handlers share one
instance. get_db_session is the only request-scoped factory here.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_service_protocol import TokenServiceProtocol


@lru_cache()
def get_database() -> Database:
    return Database(database_url=settings.database_url, echo=settings.db_echo)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One transactional session per request.

    The weapon and user repositories of a request share it, so a handler's
    writes commit together when the request finishes.
    """
    async with get_database().get_session() as session:
        yield session


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenServiceProtocol":
    """JWTService configured from the security settings."""
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        access_token_minutes=settings.access_token_expire_minutes,
        application_token_minutes=settings.application_token_expire_minutes,
        refresh_token_days=settings.refresh_token_expire_days,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """structlog console logger: coloured in development, JSON elsewhere."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
        service=settings.app_name,
    )
