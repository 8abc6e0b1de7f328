"""CreateRandomWeapon command handler.

Generates a weapon procedurally:
    - Random type and adjective-prefixed name ("Rusty Axe of Thunder")
    - Description from a fixed set of templates
    - max hit points 100, damage 5-20, repairable with 70% probability
    - Value based on 2x max hit points (see _calculate_value)
"""

import random
from decimal import Decimal
from uuid import UUID

from src.application.commands.weapon_commands import CreateRandomWeapon
from src.application.errors import ApplicationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Weapon
from src.domain.enums import WeaponType
from src.domain.events import WeaponCreated
from src.domain.protocols import EventBusProtocol, LoggerProtocol
from src.domain.protocols.weapon_repository import WeaponRepository
from src.domain.value_objects import WeaponName

RANDOM_MAX_HIT_POINTS = 100
MIN_RANDOM_DAMAGE = 5
MAX_RANDOM_DAMAGE = 20

ADJECTIVES = (
    "Mighty",
    "Swift",
    "Ancient",
    "Gleaming",
    "Rusty",
    "Sharp",
    "Dull",
    "Enchanted",
    "Cursed",
    "Legendary",
    "Common",
    "Rare",
    "Epic",
    "Divine",
    "Broken",
    "Pristine",
    "Weathered",
    "Polished",
    "Ornate",
    "Simple",
)


class CreateRandomWeaponError:
    """CreateRandomWeapon-specific errors."""

    UNEXPECTED = "Failed to create random weapon: {error}"


class CreateRandomWeaponHandler:
    """Handler for CreateRandomWeapon command.

    Args:
        weapon_repo: Persistence.
        event_bus: WeaponCreated publication.
        logger: Structured logging.
        rng: Random source (seed one in tests for reproducible weapons).
    """

    def __init__(
        self,
        weapon_repo: WeaponRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        rng: random.Random | None = None,
    ) -> None:
        self._weapon_repo = weapon_repo
        self._event_bus = event_bus
        self._logger = logger
        self._rng = rng or random.Random()

    async def handle(self, cmd: CreateRandomWeapon) -> Result[UUID, ApplicationError]:
        try:
            weapon_type = self._rng.choice(list(WeaponType))
            weapon = Weapon.create(
                self._generate_name(weapon_type),
                self._generate_description(weapon_type),
                RANDOM_MAX_HIT_POINTS,
                self._rng.randint(MIN_RANDOM_DAMAGE, MAX_RANDOM_DAMAGE),
                self._rng.randint(0, 9) > 2,
                self._calculate_value(weapon_type, RANDOM_MAX_HIT_POINTS),
                weapon_type=weapon_type,
            )
            await self._weapon_repo.add(weapon)

        except Exception as e:
            self._logger.error("random_weapon_creation_failed", error=e)
            return Failure(
                error=ApplicationError.execution_failed(
                    CreateRandomWeaponError.UNEXPECTED.format(error=e)
                )
            )

        await self._event_bus.publish(
            WeaponCreated(
                weapon_id=weapon.id.value,
                name=weapon.name.value,
                weapon_type=weapon.type.value,
                initial_hit_points=weapon.hit_points,
                damage=weapon.damage,
                is_repairable=weapon.is_repairable,
                initial_value=weapon.value,
            )
        )
        self._logger.info(
            "random_weapon_created",
            weapon_id=str(weapon.id),
            name=weapon.name.value,
        )
        return Success(value=weapon.id.value)

    def _generate_name(self, weapon_type: WeaponType) -> WeaponName:
        adjective = self._rng.choice(ADJECTIVES)
        descriptor = WeaponName.generate_seeded(weapon_type, self._rng.getrandbits(32))
        return WeaponName.create(f"{adjective} {descriptor.value}")

    def _generate_description(self, weapon_type: WeaponType) -> str:
        type_name = weapon_type.value.lower()
        magic = weapon_type.is_magic
        templates = (
            f"A {'magical' if magic else 'sturdy'} {type_name} forged by skilled artisans.",
            f"This {type_name} has seen many battles and bears the scars of combat.",
            f"A {'mystical' if magic else 'reliable'} {type_name} with excellent balance.",
            f"An {'enchanted' if magic else 'ordinary'} {type_name} crafted for warriors.",
            f"This {type_name} radiates {'magical energy' if magic else 'craftsmanship'}.",
        )
        return self._rng.choice(templates)

    def _calculate_value(self, weapon_type: WeaponType, max_hit_points: int) -> Decimal:
        """Value from type classification.

        Magic: min(base * 2..3, max_hit_points * 2..5).
        Other: base * U(0.5, 1.5), rounded to cents.
        """
        base_value = Decimal(max_hit_points * 2)

        if weapon_type.is_magic:
            max_value = Decimal(max_hit_points * self._rng.randint(2, 5))
            return min(base_value * self._rng.randint(2, 3), max_value)

        multiplier = Decimal(str(0.5 + self._rng.random()))
        return (base_value * multiplier).quantize(Decimal("0.01"))
