"""User database model for authentication.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - roles: Comma-separated role names ("User,Admin")
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for authentication and profile data.

    Fields:
        id: UUID primary key (the domain UserId)
        created_at: Registration timestamp (copied from the domain entity)
        updated_at: From BaseMutableModel
        email: Unique email address (lowercase, indexed)
        username: Unique username (indexed)
        name: Display name
        date_of_birth: Date of birth
        password_hash: Bcrypt hashed password (NEVER plaintext)
        last_login_at: Last successful login (nullable)
        roles: Comma-separated role names

    Example:
        result = await session.execute(
            select(User).where(User.email == "user@example.com")
        )
        user = result.scalar_one_or_none()
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
        comment="Username (unique)",
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    roles: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="User",
        comment="Comma-separated role names",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r}, username={self.username!r})>"
