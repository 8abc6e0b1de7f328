"""Weapon database model.

Stores the weapon aggregate state. Value is kept to two decimal places.
"""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Weapon(BaseMutableModel):
    """Weapon model.

    Fields:
        id: UUID primary key (the domain WeaponId)
        created_at / updated_at: From BaseMutableModel
        name: Weapon name (indexed, not unique; uniqueness is a handler rule)
        type: WeaponType value (indexed for type queries)
        description: Free text, up to 500 characters
        hit_points: Current hit points
        max_hit_points: Hit points at creation
        damage: Cumulative damage
        is_repairable: Whether repair is allowed
        value: Monetary value (Numeric(18, 2))
    """

    __tablename__ = "weapons"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Weapon name",
    )

    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="Weapon type (Sword, Staff, Spoon, ...)",
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        default="",
    )

    hit_points: Mapped[int] = mapped_column(Integer, nullable=False)

    max_hit_points: Mapped[int] = mapped_column(Integer, nullable=False)

    damage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_repairable: Mapped[bool] = mapped_column(Boolean, nullable=False)

    value: Mapped[Decimal] = mapped_column(
        Numeric(18, 2),
        nullable=False,
        comment="Monetary value",
    )

    def __repr__(self) -> str:
        return (
            f"<Weapon("
            f"id={self.id}, "
            f"name={self.name!r}, "
            f"type={self.type}, "
            f"hit_points={self.hit_points}/{self.max_hit_points}"
            f")>"
        )
