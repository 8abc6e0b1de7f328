"""Every command and query in the application, with its handler.

The dispatcher builds its table from these lists, so a request type that
is missing here cannot be dispatched. To add a use case: define the
dataclass in *_commands.py / *_queries.py, write its handler, add an entry
below, and make sure the container provides each of the handler's
required __init__ arguments.
"""

from uuid import UUID

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.handlers.create_random_weapon_handler import (
    CreateRandomWeaponHandler,
)
from src.application.commands.handlers.create_weapon_handler import (
    CreateWeaponHandler,
)
from src.application.commands.handlers.damage_weapon_handler import (
    DamageWeaponHandler,
)
from src.application.commands.handlers.delete_weapon_handler import (
    DeleteWeaponHandler,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.register_user_handler import RegisterUserHandler
from src.application.commands.handlers.repair_weapon_handler import (
    RepairWeaponHandler,
)
from src.application.commands.weapon_commands import (
    CreateRandomWeapon,
    CreateWeapon,
    DamageWeapon,
    DeleteWeapon,
    RepairWeapon,
)
from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from src.application.dtos import (
    AuthResult,
    RepairEstimateResult,
    UserProfileResult,
    WeaponResult,
)
from src.application.queries.handlers.estimate_repair_handler import (
    EstimateRepairHandler,
)
from src.application.queries.handlers.get_user_profile_handler import (
    GetUserProfileHandler,
)
from src.application.queries.handlers.get_weapon_handler import GetWeaponHandler
from src.application.queries.handlers.list_weapons_handler import ListWeaponsHandler
from src.application.queries.user_queries import GetUserProfile
from src.application.queries.weapon_queries import (
    EstimateRepair,
    GetAllWeapons,
    GetWeapon,
)

# Weapon lifecycle
COMMAND_REGISTRY: list[CommandMetadata] = [
    CommandMetadata(
        command_class=CreateWeapon,
        handler_class=CreateWeaponHandler,
        category=CQRSCategory.WEAPON,
        returns=UUID,
        description="Create weapon from descriptor and type, rejecting duplicate names",
    ),
    CommandMetadata(
        command_class=CreateRandomWeapon,
        handler_class=CreateRandomWeaponHandler,
        category=CQRSCategory.WEAPON,
        returns=UUID,
        description="Create procedurally generated weapon",
    ),
    CommandMetadata(
        command_class=DamageWeapon,
        handler_class=DamageWeaponHandler,
        category=CQRSCategory.WEAPON,
        description="Apply damage to weapon",
    ),
    CommandMetadata(
        command_class=RepairWeapon,
        handler_class=RepairWeaponHandler,
        category=CQRSCategory.WEAPON,
        description="Repair weapon (repairable weapons only)",
    ),
    CommandMetadata(
        command_class=DeleteWeapon,
        handler_class=DeleteWeaponHandler,
        category=CQRSCategory.WEAPON,
        description="Delete weapon",
    ),
    # Users
    CommandMetadata(
        command_class=RegisterUser,
        handler_class=RegisterUserHandler,
        category=CQRSCategory.AUTH,
        returns=UUID,
        description="Register new user",
    ),
    CommandMetadata(
        command_class=LoginUser,
        handler_class=LoginUserHandler,
        category=CQRSCategory.AUTH,
        returns=AuthResult,
        description="Authenticate with email or username and record login",
    ),
]

QUERY_REGISTRY: list[QueryMetadata] = [
    QueryMetadata(
        query_class=GetWeapon,
        handler_class=GetWeaponHandler,
        category=CQRSCategory.WEAPON,
        returns=WeaponResult,
        description="Get weapon by ID",
    ),
    QueryMetadata(
        query_class=GetAllWeapons,
        handler_class=ListWeaponsHandler,
        category=CQRSCategory.WEAPON,
        returns=list,
        description="List all weapons ordered by name",
    ),
    QueryMetadata(
        query_class=EstimateRepair,
        handler_class=EstimateRepairHandler,
        category=CQRSCategory.WEAPON,
        returns=RepairEstimateResult,
        description="Project repair cost and gains without mutating",
    ),
    QueryMetadata(
        query_class=GetUserProfile,
        handler_class=GetUserProfileHandler,
        category=CQRSCategory.AUTH,
        returns=UserProfileResult,
        description="Get user profile by ID",
    ),
]
