"""Weapon aggregate root.

Pure business logic, no framework dependencies.

State Machine:
    The aggregate owns four numeric fields (hit_points, max_hit_points,
    damage, value). damage_weapon() and repair_weapon() mutate them in
    place; get_repair_estimate() projects a repair without mutating;
    validate_weapon() checks the invariants on demand.

Known quirk:
    damage_weapon() derives hit points from the latest damage amount only
    (hit_points = max(max_hit_points - amount, 0)) while the value
    adjustment uses cumulative damage. Both are kept as-is.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal

from src.domain.enums import WeaponType
from src.domain.errors import InvalidWeaponOperationError, WeaponError
from src.domain.events import WeaponDamaged, WeaponRepaired
from src.domain.value_objects import RepairEstimate, WeaponId, WeaponName

MAGIC_REPAIR_VALUE_MULTIPLIER = Decimal("0.5")
REPAIR_VALUE_MULTIPLIER = Decimal("0.3")
MAGIC_REPAIR_COST_PER_POINT = 3
REPAIR_COST_PER_POINT = 2

_CENTS = Decimal("0.01")


@dataclass
class Weapon:
    """Weapon aggregate with damage, repair and valuation rules.

    Instances are built with create() (new weapons) or rehydrate()
    (loaded from persistence), never directly by callers.

    Business Rules:
        - max_hit_points is fixed at creation
        - Damage only grows through damage_weapon()
        - Non-repairable weapons reject repair and repair estimates
        - Repairs never restore more than the accumulated damage

    Attributes:
        id: Weapon identifier.
        type: Weapon category.
        name: Weapon name.
        description: Free text (validated by the create command, up to 500 chars).
        hit_points: Current hit points.
        max_hit_points: Hit points at creation.
        damage: Cumulative damage counter.
        is_repairable: Whether repair is allowed.
        value: Monetary worth.

    Example:
        >>> weapon = Weapon.create(
        ...     WeaponName.create("Sword of Flames"), "Hot", 100, 0, True, Decimal("150")
        ... )
        >>> event = weapon.damage_weapon(20)
        >>> (weapon.damage, weapon.hit_points)
        (20, 80)
    """

    id: WeaponId
    type: WeaponType
    name: WeaponName
    description: str
    hit_points: int
    max_hit_points: int
    damage: int
    is_repairable: bool
    value: Decimal

    @classmethod
    def create(
        cls,
        name: WeaponName,
        description: str,
        hit_points: int,
        damage: int,
        is_repairable: bool,
        value: Decimal,
        *,
        weapon_type: WeaponType = WeaponType.SPOON,
    ) -> "Weapon":
        """Create a new weapon with a fresh identifier.

        Args:
            name: Weapon name.
            description: Weapon description.
            hit_points: Initial (and maximum) hit points.
            damage: Starting damage.
            is_repairable: Whether the weapon can be repaired.
            value: Starting value.
            weapon_type: Weapon category (Spoon when not given).

        Returns:
            Weapon: New weapon with max_hit_points == hit_points.
        """
        return cls(
            id=WeaponId.create(),
            type=weapon_type,
            name=name,
            description=description,
            hit_points=hit_points,
            max_hit_points=hit_points,
            damage=damage,
            is_repairable=is_repairable,
            value=Decimal(value),
        )

    @classmethod
    def rehydrate(
        cls,
        *,
        id: WeaponId,
        type: WeaponType,
        name: WeaponName,
        description: str,
        hit_points: int,
        max_hit_points: int,
        damage: int,
        is_repairable: bool,
        value: Decimal,
    ) -> "Weapon":
        """Rebuild a weapon from stored state without applying any rules."""
        return cls(
            id=id,
            type=type,
            name=name,
            description=description,
            hit_points=hit_points,
            max_hit_points=max_hit_points,
            damage=damage,
            is_repairable=is_repairable,
            value=value,
        )

    @property
    def is_broken(self) -> bool:
        return self.hit_points <= 0

    def damage_weapon(self, damage_amount: int) -> WeaponDamaged:
        """Apply damage.

        Negative amounts are not rejected here; the damage command guards them.

        Args:
            damage_amount: Damage dealt by this hit.

        Returns:
            WeaponDamaged: Event describing the new state.
        """
        self.damage += damage_amount
        self.hit_points = max(self.max_hit_points - damage_amount, 0)

        damage_ratio = Decimal(self.damage) / Decimal(self.max_hit_points)
        self.value += 1 - damage_ratio * Decimal("0.5")

        return WeaponDamaged(
            weapon_id=self.id.value,
            damage_amount=damage_amount,
            new_hit_points=self.hit_points,
            new_damage_level=self.damage,
            new_value=self.value,
        )

    def repair_weapon(self, repair_amount: int) -> WeaponRepaired:
        """Repair up to repair_amount points of damage.

        Args:
            repair_amount: Requested repair. Capped by current damage.

        Returns:
            WeaponRepaired: Event with the repair actually applied.

        Raises:
            InvalidWeaponOperationError: If the weapon is not repairable.
        """
        self._ensure_repairable()

        actual_repair = min(repair_amount, self.damage)
        self.damage -= actual_repair
        self.hit_points = min(self.max_hit_points, self.hit_points + actual_repair)

        repair_ratio = Decimal(actual_repair) / Decimal(self.max_hit_points)
        self.value += repair_ratio * self._repair_value_multiplier()

        return WeaponRepaired(
            weapon_id=self.id.value,
            repair_amount=actual_repair,
            new_hit_points=self.hit_points,
            new_damage_level=self.damage,
            new_value=self.value,
        )

    def get_repair_estimate(self, repair_amount: int) -> RepairEstimate:
        """Project a repair without changing the weapon.

        gained_hit_points is the projected hit point total after repair.

        Raises:
            InvalidWeaponOperationError: If the weapon is not repairable.
        """
        self._ensure_repairable()

        actual_repair = min(repair_amount, self.damage)
        repair_ratio = Decimal(actual_repair) / Decimal(self.max_hit_points)
        gained_value = (
            self.value * repair_ratio * self._repair_value_multiplier()
        ).quantize(_CENTS, rounding=ROUND_HALF_EVEN)
        cost_per_point = (
            MAGIC_REPAIR_COST_PER_POINT if self.type.is_magic else REPAIR_COST_PER_POINT
        )

        return RepairEstimate(
            repair_cost=actual_repair * cost_per_point,
            gained_hit_points=min(
                self.max_hit_points, self.hit_points + actual_repair
            ),
            gained_value=gained_value,
        )

    def validate_weapon(self) -> None:
        """Check the aggregate invariants.

        Raises:
            InvalidWeaponOperationError: On the first violated invariant.
        """
        if self.hit_points <= 0:
            raise InvalidWeaponOperationError(WeaponError.BROKEN)
        if self.damage < 0:
            raise InvalidWeaponOperationError(WeaponError.NEGATIVE_DAMAGE)
        if self.max_hit_points <= 0:
            raise InvalidWeaponOperationError(
                WeaponError.NON_POSITIVE_MAX_HIT_POINTS
            )
        if self.value < 0:
            raise InvalidWeaponOperationError(WeaponError.NEGATIVE_VALUE)

    def _ensure_repairable(self) -> None:
        if not self.is_repairable:
            raise InvalidWeaponOperationError(WeaponError.NOT_REPAIRABLE)

    def _repair_value_multiplier(self) -> Decimal:
        if self.type.is_magic:
            return MAGIC_REPAIR_VALUE_MULTIPLIER
        return REPAIR_VALUE_MULTIPLIER
