"""RepairEstimate value object.

Projection of what a repair would cost and yield. Computed on demand by
Weapon.get_repair_estimate() and never persisted.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.errors import WeaponError


@dataclass(frozen=True, slots=True)
class RepairEstimate:
    """Repair cost and projected gains.

    Attributes:
        repair_cost: Cost of the repair (>= 0).
        gained_hit_points: Projected hit point total after the repair (>= 0).
            This is the absolute post-repair value, not a delta.
        gained_value: Value increase, rounded to 2 places (>= 0).

    Raises:
        ValueError: If any argument is negative.
    """

    repair_cost: int
    gained_hit_points: int
    gained_value: Decimal

    def __post_init__(self) -> None:
        """Reject negative amounts."""
        if self.repair_cost < 0:
            raise ValueError(WeaponError.NEGATIVE_REPAIR_COST)
        if self.gained_hit_points < 0:
            raise ValueError(WeaponError.NEGATIVE_GAINED_HIT_POINTS)
        if self.gained_value < 0:
            raise ValueError(WeaponError.NEGATIVE_GAINED_VALUE)
