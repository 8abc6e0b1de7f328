"""User aggregate root for authentication.

Pure business logic, no framework dependencies. Password hashing is
delegated to a PasswordHashingProtocol passed in by the caller.

Events:
    register() returns the new user together with UserRegistered and
    change_password() returns UserPasswordChanged. The aggregate never
    stores events; command handlers publish them.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from src.domain.errors import UserError
from src.domain.events import UserPasswordChanged, UserRegistered
from src.domain.value_objects import Email, Role, UserId, UserProfile, UserSecurity

if TYPE_CHECKING:
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol


@dataclass
class User:
    """User aggregate with profile, credentials and roles.

    Business Rules:
        - New users always get the User role
        - Passwords are stored only as hashes
        - created_at never changes after registration
        - Role assignment is idempotent

    Attributes:
        id: User identifier.
        email: Normalized email address.
        profile: Username, display name and date of birth.
        security: Password hash and last login timestamp.
        roles: Assigned roles (no duplicates).
        created_at: Registration timestamp (UTC).

    Example:
        >>> user, event = User.register(
        ...     "dragon_slayer", "Ada", Email("ada@example.com"),
        ...     "Str0ng!Pass9", date(1990, 5, 1), hasher,
        ... )
        >>> user.has_role(Role.USER)
        True
    """

    id: UserId
    email: Email
    profile: UserProfile
    security: UserSecurity
    roles: list[Role] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def register(
        cls,
        username: str,
        name: str,
        email: Email,
        password: str,
        date_of_birth: date,
        password_hasher: "PasswordHashingProtocol | None",
    ) -> tuple["User", UserRegistered]:
        """Register a new user.

        Args:
            username: Unique username.
            name: Display name.
            email: Validated email address.
            password: Plaintext password (hashed here, never stored).
            date_of_birth: Date of birth.
            password_hasher: Hashing service.

        Returns:
            tuple[User, UserRegistered]: The new user and its registration event.

        Raises:
            ValueError: If the hasher is missing or a profile field is invalid.
        """
        if password_hasher is None:
            raise ValueError(UserError.MISSING_PASSWORD_HASHER)

        profile = UserProfile.create(username, name, date_of_birth)
        security = UserSecurity.create(password_hasher.hash_password(password))
        user = cls(
            id=UserId.create(),
            email=email,
            profile=profile,
            security=security,
            roles=[Role.USER],
            created_at=datetime.now(UTC),
        )
        return user, UserRegistered(user_id=user.id.value, email=user.email.value)

    @classmethod
    def rehydrate(
        cls,
        *,
        id: UserId,
        email: Email,
        profile: UserProfile,
        security: UserSecurity,
        roles: list[Role],
        created_at: datetime,
    ) -> "User":
        """Rebuild a user from stored state."""
        return cls(
            id=id,
            email=email,
            profile=profile,
            security=security,
            roles=list(roles),
            created_at=created_at,
        )

    @property
    def username(self) -> str:
        return self.profile.username

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def is_admin(self) -> bool:
        return any(role.is_admin for role in self.roles)

    @property
    def is_application(self) -> bool:
        return any(role.is_application for role in self.roles)

    def update_profile(self, name: str, date_of_birth: date) -> None:
        """Replace display name and date of birth.

        Raises:
            ValueError: If name is invalid.
        """
        self.profile = self.profile.with_name(name).with_date_of_birth(date_of_birth)

    def update_username(self, username: str) -> None:
        """Replace the username.

        Raises:
            ValueError: If username is invalid.
        """
        self.profile = self.profile.with_username(username)

    def change_email(self, email: Email | None) -> None:
        if email is None:
            raise ValueError(UserError.MISSING_EMAIL)
        self.email = email

    def change_password(
        self, new_password: str, password_hasher: "PasswordHashingProtocol | None"
    ) -> UserPasswordChanged:
        """Hash and store a new password.

        Returns:
            UserPasswordChanged: Event for the change.

        Raises:
            ValueError: If the hasher is missing.
        """
        if password_hasher is None:
            raise ValueError(UserError.MISSING_PASSWORD_HASHER)
        self.security = self.security.with_password_hash(
            password_hasher.hash_password(new_password)
        )
        return UserPasswordChanged(user_id=self.id.value)

    def record_login(self) -> None:
        """Stamp last_login_at with the current UTC time."""
        self.security = self.security.with_login()

    def is_password_valid(
        self, password: str, password_hasher: "PasswordHashingProtocol | None"
    ) -> bool:
        """Check a plaintext password against the stored hash.

        Blank passwords never match.

        Raises:
            ValueError: If the hasher is missing.
        """
        if password_hasher is None:
            raise ValueError(UserError.MISSING_PASSWORD_HASHER)
        if not password or not password.strip():
            return False
        return password_hasher.verify_password(password, self.security.password_hash)

    def assign_role(self, role: Role) -> None:
        if role not in self.roles:
            self.roles.append(role)

    def remove_role(self, role: Role) -> None:
        if role in self.roles:
            self.roles.remove(role)

    def has_role(self, role: Role) -> bool:
        return role in self.roles
