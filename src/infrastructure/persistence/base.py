"""SQLAlchemy declarative base for the weapons and users tables.

Models here are persistence rows only. Repositories map them to and from
the Weapon and User aggregates; domain code never sees them.
"""

from datetime import datetime
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Declarative root; BaseModel.metadata feeds create_all and Alembic."""

    __abstract__ = True

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={getattr(self, 'id', None)})>"


class BaseMutableModel(BaseModel):
    """Row keyed by the aggregate's UUID, with creation and update times.

    The id is never generated here: WeaponId and UserId are created in the
    domain and written through unchanged. Uuid maps to native UUID on
    PostgreSQL and CHAR(32) on SQLite.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(Uuid, primary_key=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
