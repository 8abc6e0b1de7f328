"""WeaponName value object.

Weapon names are either supplied by a user or generated procedurally as
"{Type} of {Descriptor}" from a fixed descriptor list.
"""

import random
from dataclasses import dataclass
from typing import Final

from src.domain.enums import WeaponType
from src.domain.errors import WeaponError

MAX_NAME_LENGTH: Final = 100

DESCRIPTORS: Final[tuple[str, ...]] = (
    "Flames",
    "Ice",
    "Lightning",
    "Shadows",
    "Light",
    "Darkness",
    "Thunder",
    "Frost",
    "Poison",
    "Healing",
    "Power",
    "Strength",
    "Wisdom",
    "Courage",
    "Honor",
    "Glory",
    "Victory",
    "Destruction",
    "Creation",
    "Magic",
    "Loathing",
    "Fury",
    "Wrath",
    "Storm",
    "Wind",
    "Earth",
    "Water",
    "Fire",
    "Nature",
    "Spirit",
    "Soul",
    "Chaos",
    "Order",
    "Time",
    "Space",
    "Void",
    "Hate",
    "Love",
    "Life",
    "Death",
    "Steel",
    "Silver",
    "Gold",
    "Diamond",
    "Crystal",
    "Dragon's Breath",
    "Phoenix Rising",
    "Storm's Fury",
    "Ancient Power",
    "Eternal Flame",
    "Frozen Death",
    "Swift Justice",
    "Divine Wrath",
    "Mystic Force",
    "Endless Night",
    "Blazing Sun",
    "Raging Storm",
    "Silent Death",
    "Piercing Wind",
    "Crushing Stone",
    "Flowing Water",
    "Burning Earth",
    "Shining Stars",
    "Falling Meteors",
    "Rising Moon",
    "Dancing Leaves",
    "Whispering Winds",
    "Roaring Flames",
    "Crashing Waves",
    "Trembling Earth",
    "Pudding",
    "Dave",
)

_DESCRIPTOR_LOOKUP: Final = frozenset(d.lower() for d in DESCRIPTORS)


@dataclass(frozen=True)
class WeaponName:
    """Weapon name with length validation.

    Attributes:
        value: Name text (1-100 characters, not blank).

    Raises:
        ValueError: If name is blank or longer than 100 characters.

    Example:
        >>> WeaponName.generate_with_descriptor(WeaponType.SWORD, "Flames").value
        'Sword of Flames'
        >>> WeaponName.create("   ")
        Traceback (most recent call last):
        ...
        ValueError: Weapon name cannot be empty
    """

    value: str

    def __post_init__(self) -> None:
        """Validate name length."""
        if not self.value or not self.value.strip():
            raise ValueError(WeaponError.EMPTY_NAME)
        if len(self.value) > MAX_NAME_LENGTH:
            raise ValueError(WeaponError.NAME_TOO_LONG)

    @classmethod
    def create(cls, custom_name: str) -> "WeaponName":
        """Wrap a user-supplied name."""
        return cls(custom_name)

    @classmethod
    def generate(cls, weapon_type: WeaponType) -> "WeaponName":
        """Generate a name with a random descriptor.

        Args:
            weapon_type: Type used as the name prefix.

        Returns:
            WeaponName: e.g. "Axe of Thunder".
        """
        return cls._compose(weapon_type, random.choice(DESCRIPTORS))

    @classmethod
    def generate_with_descriptor(
        cls, weapon_type: WeaponType, descriptor: str
    ) -> "WeaponName":
        """Generate a name from a known descriptor.

        The descriptor is matched case-insensitively against DESCRIPTORS and
        used verbatim in the result.

        Args:
            weapon_type: Type used as the name prefix.
            descriptor: One of DESCRIPTORS.

        Returns:
            WeaponName: "{Type} of {descriptor}".

        Raises:
            ValueError: If descriptor is empty or not a known descriptor.
        """
        if not descriptor:
            raise ValueError(WeaponError.EMPTY_DESCRIPTOR)
        if descriptor.lower() not in _DESCRIPTOR_LOOKUP:
            raise ValueError(WeaponError.UNKNOWN_DESCRIPTOR)
        return cls._compose(weapon_type, descriptor)

    @classmethod
    def generate_seeded(cls, weapon_type: WeaponType, seed: int) -> "WeaponName":
        """Generate a reproducible name.

        The same (weapon_type, seed) pair always yields the same name.
        """
        rng = random.Random(seed)
        return cls._compose(weapon_type, rng.choice(DESCRIPTORS))

    @classmethod
    def _compose(cls, weapon_type: WeaponType, descriptor: str) -> "WeaponName":
        return cls(f"{weapon_type.value} of {descriptor}")

    def contains_descriptor(self, descriptor: str) -> bool:
        """Check whether "of {descriptor}" appears in the name (case-insensitive).

        Args:
            descriptor: Descriptor text. Blank input never matches.

        Returns:
            bool: True if "of {descriptor}" occurs in the name.
        """
        if not descriptor or not descriptor.strip():
            return False
        return f"of {descriptor}".lower() in self.value.lower()

    def __str__(self) -> str:
        return self.value
