"""WeaponRepository - SQLAlchemy implementation of WeaponRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Weapon entities and database WeaponModel.
"""

from decimal import ROUND_HALF_EVEN, Decimal

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.weapon import Weapon
from src.domain.enums import WeaponType
from src.domain.value_objects import WeaponId, WeaponName
from src.infrastructure.persistence.models.weapon import Weapon as WeaponModel

_CENTS = Decimal("0.01")


class WeaponRepository:
    """SQLAlchemy implementation of WeaponRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = WeaponRepository(session)
        ...     weapon = await repo.find_by_id(weapon_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, weapon_id: WeaponId) -> Weapon | None:
        """Find weapon by ID.

        Returns:
            Domain Weapon entity if found, None otherwise.
        """
        model = await self._get_model(weapon_id)
        if model is None:
            return None
        return self._to_domain(model)

    async def find_by_name(self, name: str) -> Weapon | None:
        """Find the first weapon with an exact name match."""
        stmt = select(WeaponModel).where(WeaponModel.name == name).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_all(self) -> list[Weapon]:
        """List all weapons ordered by name."""
        stmt = select(WeaponModel).order_by(WeaponModel.name)
        return await self._find_many(stmt)

    async def find_by_type(self, weapon_type: WeaponType) -> list[Weapon]:
        stmt = (
            select(WeaponModel)
            .where(WeaponModel.type == weapon_type.value)
            .order_by(WeaponModel.name)
        )
        return await self._find_many(stmt)

    async def find_damaged_weapons(self) -> list[Weapon]:
        stmt = (
            select(WeaponModel)
            .where(WeaponModel.damage > 0)
            .order_by(WeaponModel.name)
        )
        return await self._find_many(stmt)

    async def find_by_value_range(
        self, min_value: Decimal, max_value: Decimal
    ) -> list[Weapon]:
        """List weapons whose value lies in [min_value, max_value]."""
        stmt = (
            select(WeaponModel)
            .where(WeaponModel.value >= min_value, WeaponModel.value <= max_value)
            .order_by(WeaponModel.value)
        )
        return await self._find_many(stmt)

    async def add(self, weapon: Weapon) -> None:
        """Create new weapon in database."""
        self.session.add(self._to_model(weapon))
        await self.session.commit()

    async def update(self, weapon: Weapon) -> None:
        """Write the aggregate state over the stored row.

        Raises:
            LookupError: If the weapon doesn't exist.
        """
        model = await self._get_model(weapon.id)
        if model is None:
            raise LookupError(f"Weapon {weapon.id} not found")

        self._update_model(model, weapon)
        await self.session.commit()

    async def remove(self, weapon: Weapon) -> None:
        """Hard delete. Unknown weapons are ignored."""
        model = await self._get_model(weapon.id)
        if model is None:
            return

        await self.session.delete(model)
        await self.session.commit()

    async def exists(self, weapon_id: WeaponId) -> bool:
        stmt = select(WeaponModel.id).where(WeaponModel.id == weapon_id.value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def _get_model(self, weapon_id: WeaponId) -> WeaponModel | None:
        stmt = select(WeaponModel).where(WeaponModel.id == weapon_id.value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _find_many(self, stmt: Select[tuple[WeaponModel]]) -> list[Weapon]:
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: WeaponModel) -> Weapon:
        """Convert database model to domain entity.

        Names are loaded with WeaponName.create since stored names may not
        follow the "{Type} of {Descriptor}" pattern.
        """
        return Weapon.rehydrate(
            id=WeaponId.from_value(model.id),
            type=WeaponType(model.type),
            name=WeaponName.create(model.name),
            description=model.description,
            hit_points=model.hit_points,
            max_hit_points=model.max_hit_points,
            damage=model.damage,
            is_repairable=model.is_repairable,
            value=Decimal(model.value),
        )

    def _to_model(self, weapon: Weapon) -> WeaponModel:
        return WeaponModel(
            id=weapon.id.value,
            name=weapon.name.value,
            type=weapon.type.value,
            description=weapon.description,
            hit_points=weapon.hit_points,
            max_hit_points=weapon.max_hit_points,
            damage=weapon.damage,
            is_repairable=weapon.is_repairable,
            value=_to_cents(weapon.value),
        )

    def _update_model(self, model: WeaponModel, weapon: Weapon) -> None:
        """Copy mutable aggregate state onto an existing model."""
        model.name = weapon.name.value
        model.description = weapon.description
        model.hit_points = weapon.hit_points
        model.damage = weapon.damage
        model.value = _to_cents(weapon.value)


def _to_cents(value: Decimal) -> Decimal:
    return Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_EVEN)
