"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.domain.value_objects import Email, Role, UserId, UserProfile, UserSecurity
from src.infrastructure.persistence.models.user import User as UserModel

ROLE_SEPARATOR = ","


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This is an adapter that implements the UserRepository port.
    It handles the mapping between domain User entities and database UserModel.

    This class does NOT inherit from UserRepository protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email(Email("user@example.com"))
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Find user by ID.

        Returns:
            Domain User entity if found, None otherwise.
        """
        model = await self._get_model(user_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def find_by_email(self, email: Email) -> User | None:
        """Find user by email address.

        Stored emails are lowercase (Email normalizes), so this is an exact match.
        """
        stmt = select(UserModel).where(UserModel.email == email.value)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def add(self, user: User) -> None:
        """Create new user in database.

        Raises:
            IntegrityError: If email or username already exists.
        """
        self.session.add(self._to_model(user))
        await self.session.commit()

    async def update(self, user: User) -> None:
        """Update existing user in database.

        Raises:
            LookupError: If user doesn't exist.
        """
        model = await self._get_model(user.id)
        if model is None:
            raise LookupError(f"User {user.id} not found")

        model.email = user.email.value
        model.username = user.profile.username
        model.name = user.profile.name
        model.date_of_birth = user.profile.date_of_birth
        model.password_hash = user.security.password_hash
        model.last_login_at = user.security.last_login_at
        model.roles = _join_roles(user.roles)

        await self.session.commit()

    async def remove(self, user: User) -> None:
        """Hard delete. Unknown users are ignored."""
        model = await self._get_model(user.id)
        if model is None:
            return

        await self.session.delete(model)
        await self.session.commit()

    async def exists(self, user_id: UserId) -> bool:
        stmt = select(UserModel.id).where(UserModel.id == user_id.value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def email_exists(self, email: Email) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email.value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def username_exists(self, username: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def _get_model(self, user_id: UserId) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        return User.rehydrate(
            id=UserId.from_value(model.id),
            email=Email(model.email),
            profile=UserProfile.create(
                model.username, model.name, model.date_of_birth
            ),
            security=UserSecurity.create(model.password_hash, model.last_login_at),
            roles=_split_roles(model.roles),
            created_at=model.created_at,
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model.

        Args:
            user: Domain User entity.

        Returns:
            SQLAlchemy UserModel instance.
        """
        return UserModel(
            id=user.id.value,
            email=user.email.value,
            username=user.profile.username,
            name=user.profile.name,
            date_of_birth=user.profile.date_of_birth,
            password_hash=user.security.password_hash,
            last_login_at=user.security.last_login_at,
            roles=_join_roles(user.roles),
            created_at=user.created_at,
        )


def _join_roles(roles: list[Role]) -> str:
    return ROLE_SEPARATOR.join(role.value for role in roles)


def _split_roles(raw: str) -> list[Role]:
    return [Role.create(part) for part in raw.split(ROLE_SEPARATOR) if part.strip()]
