"""Weapon type enumeration.

Every weapon belongs to exactly one type. Types are grouped into three
overlapping classifications (melee, ranged, magic) that drive repair
pricing and value calculations.

Usage:
    from src.domain.enums import WeaponType

    if weapon.type.is_magic:
        multiplier = 0.5
"""

from enum import Enum


class WeaponType(str, Enum):
    """Weapon categories.

    String enum so the value can be stored and serialized directly.
    Values match the display names used in generated weapon names
    ("Sword of Flames").
    """

    SWORD = "Sword"
    AXE = "Axe"
    BOW = "Bow"
    CROSSBOW = "Crossbow"
    STAFF = "Staff"
    DAGGER = "Dagger"
    WAND = "Wand"
    SPEAR = "Spear"
    MACE = "Mace"
    HAMMER = "Hammer"
    SHIELD = "Shield"
    SPOON = "Spoon"
    SPONGE = "Sponge"
    STICK = "Stick"
    SLING = "Sling"
    KNIFE = "Knife"
    FLAIL = "Flail"
    SCYTHE = "Scythe"
    HALBERD = "Halberd"
    TRIDENT = "Trident"
    WHIP = "Whip"
    POLEARM = "Polearm"

    @property
    def is_melee(self) -> bool:
        """True if the type can be used in close combat."""
        return self in MELEE_TYPES

    @property
    def is_ranged(self) -> bool:
        """True if the type can be used at range."""
        return self in RANGED_TYPES

    @property
    def is_magic(self) -> bool:
        """True if the type channels magic (affects repair and value)."""
        return self in MAGIC_TYPES

    @classmethod
    def values(cls) -> list[str]:
        """Get all type values as strings.

        Returns:
            list[str]: ['Sword', 'Axe', ...] in declaration order.
        """
        return [weapon_type.value for weapon_type in cls]

    @classmethod
    def parse(cls, value: str) -> "WeaponType":
        """Parse a type name case-insensitively.

        Args:
            value: Type name ("sword", "Sword", "SWORD").

        Returns:
            WeaponType: Matching member.

        Raises:
            ValueError: If value names no weapon type.
        """
        normalized = value.strip().lower() if value else ""
        for weapon_type in cls:
            if weapon_type.value.lower() == normalized:
                return weapon_type
        raise ValueError(f"Invalid weapon type value: {value!r}")


MELEE_TYPES: frozenset[WeaponType] = frozenset(
    {
        WeaponType.SWORD,
        WeaponType.AXE,
        WeaponType.DAGGER,
        WeaponType.MACE,
        WeaponType.HAMMER,
        WeaponType.FLAIL,
        WeaponType.SCYTHE,
        WeaponType.HALBERD,
        WeaponType.TRIDENT,
        WeaponType.WHIP,
        WeaponType.POLEARM,
        WeaponType.SPOON,
        WeaponType.SPONGE,
        WeaponType.STICK,
        WeaponType.KNIFE,
        WeaponType.SPEAR,
        WeaponType.STAFF,
        WeaponType.SHIELD,
    }
)

RANGED_TYPES: frozenset[WeaponType] = frozenset(
    {
        WeaponType.BOW,
        WeaponType.CROSSBOW,
        WeaponType.SLING,
        WeaponType.STAFF,
        WeaponType.SPEAR,
        WeaponType.TRIDENT,
        WeaponType.HAMMER,
        WeaponType.WHIP,
        WeaponType.WAND,
    }
)

MAGIC_TYPES: frozenset[WeaponType] = frozenset(
    {
        WeaponType.STAFF,
        WeaponType.WAND,
        WeaponType.SCYTHE,
        WeaponType.TRIDENT,
        WeaponType.SPOON,
        WeaponType.STICK,
        WeaponType.SPONGE,
    }
)
