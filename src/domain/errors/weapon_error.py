"""Weapon domain errors.

Message constants for weapon validation and state transitions, plus the
exception raised when an operation is not allowed for a weapon's state.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Value objects raise ValueError with these messages
    - Aggregate operations raise InvalidWeaponOperationError
    - Handlers convert both into Failure results

Usage:
    from src.domain.errors import WeaponError

    if not self.is_repairable:
        raise InvalidWeaponOperationError(WeaponError.NOT_REPAIRABLE)
"""


class WeaponError:
    """Weapon error constants.

    Error Categories:
        - Identity: WeaponId validation
        - Naming: WeaponName validation and generation
        - State: ValidateWeapon invariants
        - Operations: repair guards
        - Estimates: RepairEstimate validation
    """

    # Identity
    EMPTY_WEAPON_ID = "WeaponId cannot be an empty GUID."

    # Naming
    EMPTY_NAME = "Weapon name cannot be empty"
    NAME_TOO_LONG = "Weapon name cannot exceed 100 characters"
    EMPTY_DESCRIPTOR = "Default descriptor cannot be null or empty"
    UNKNOWN_DESCRIPTOR = "Default descriptor must be one of the predefined descriptors"

    # Type
    INVALID_TYPE = "Invalid weapon type specified"

    # State
    BROKEN = "This weapon is broken and cannot be used."
    NEGATIVE_DAMAGE = "Damage cannot be negative."
    NON_POSITIVE_MAX_HIT_POINTS = "Max hit points must be greater than zero."
    NEGATIVE_VALUE = "Value cannot be negative."

    # Operations
    NOT_REPAIRABLE = "This weapon cannot be repaired."

    # Estimates
    NEGATIVE_REPAIR_COST = "Repair cost cannot be negative."
    NEGATIVE_GAINED_HIT_POINTS = "Gained hit points cannot be negative."
    NEGATIVE_GAINED_VALUE = "Gained value cannot be negative."


class InvalidWeaponOperationError(ValueError):
    """Raised when an operation is not allowed for the weapon's current state."""
