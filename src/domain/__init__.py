"""Domain layer: weapons and users.

- entities/: Weapon and User aggregates
- value_objects/: ids, names, email, roles, profile, repair estimates
- enums/: WeaponType
- errors/: message constants and InvalidWeaponOperationError
- events/: records returned by aggregate mutators
- protocols/: repository and service ports implemented in infrastructure

Nothing here imports a framework.
"""
