"""Success / Failure outcome returned by every handler.

    match await dispatcher.dispatch(GetWeapon(weapon_id=weapon_id)):
        case Success(value=weapon):
            return WeaponResponse.from_result(weapon)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(error, ...)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    error: E


type Result[T, E] = Success[T] | Failure[E]
