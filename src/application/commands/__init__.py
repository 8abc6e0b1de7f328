"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateWeapon, RepairWeapon).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import LoginUser, RegisterUser
from src.application.commands.weapon_commands import (
    CreateRandomWeapon,
    CreateWeapon,
    DamageWeapon,
    DeleteWeapon,
    RepairWeapon,
)

__all__ = [
    # Auth commands
    "LoginUser",
    "RegisterUser",
    # Weapon commands
    "CreateRandomWeapon",
    "CreateWeapon",
    "DamageWeapon",
    "DeleteWeapon",
    "RepairWeapon",
]
