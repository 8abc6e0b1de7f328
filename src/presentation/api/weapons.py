"""Weapons resource router.

Every endpoint requires a valid bearer access token.

Endpoints:
    POST   /api/weapons                  - Create weapon (201 + id)
    GET    /api/weapons                  - List weapons
    GET    /api/weapons/create-random    - Create random weapon (200 + weapon)
    GET    /api/weapons/{id}             - Get weapon
    POST   /api/weapons/damage           - Damage weapon (200 + weapon)
    POST   /api/weapons/repair           - Repair weapon (200 + weapon)
    POST   /api/weapons/estimate-repair  - Estimate repair
    DELETE /api/weapons/{id}             - Delete weapon (204)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import (
    CreateRandomWeapon,
    CreateWeapon,
    DamageWeapon,
    DeleteWeapon,
    RepairWeapon,
)
from src.application.cqrs import Dispatcher
from src.application.queries import EstimateRepair, GetAllWeapons, GetWeapon
from src.core.container import get_dispatcher
from src.core.result import Failure, Success
from src.presentation.api.errors import ErrorResponseBuilder, ProblemDetails
from src.presentation.api.middleware.auth_dependencies import get_current_user
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.schemas.weapon_schemas import (
    CreateWeaponRequest,
    DamageWeaponRequest,
    EstimateRepairRequest,
    RepairEstimateResponse,
    RepairWeaponRequest,
    WeaponCreatedResponse,
    WeaponResponse,
)

router = APIRouter(
    prefix="/weapons",
    tags=["Weapons"],
    dependencies=[Depends(get_current_user)],
    responses={401: {"description": "Missing or invalid access token"}},
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=WeaponCreatedResponse,
    responses={400: {"model": ProblemDetails, "description": "Validation failed"}},
    summary="Create weapon",
)
async def create_weapon(
    request: Request,
    data: CreateWeaponRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> WeaponCreatedResponse | JSONResponse:
    """Create a weapon named "{type} of {name}".

    POST /api/weapons → 201 Created
    """
    result = await dispatcher.dispatch(
        CreateWeapon(
            name=data.name,
            weapon_type=data.type,
            description=data.description,
            hit_points=data.hit_points,
            damage=data.damage,
            is_repairable=data.is_repairable,
            value=data.value,
        )
    )

    match result:
        case Success(value=weapon_id):
            return WeaponCreatedResponse(id=weapon_id)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )


@router.get(
    "",
    response_model=list[WeaponResponse],
    summary="List weapons",
)
async def list_weapons(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> list[WeaponResponse] | JSONResponse:
    result = await dispatcher.dispatch(GetAllWeapons())

    match result:
        case Success(value=weapons):
            return [WeaponResponse.from_result(weapon) for weapon in weapons]
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )


# Declared before /{weapon_id} so the literal path wins.
@router.get(
    "/create-random",
    response_model=WeaponResponse,
    summary="Create random weapon",
)
async def create_random_weapon(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> WeaponResponse | JSONResponse:
    """Generate, persist and return a random weapon."""
    result = await dispatcher.dispatch(CreateRandomWeapon())

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )
        case Success(value=weapon_id):
            return await _weapon_response(request, dispatcher, weapon_id)


@router.get(
    "/{weapon_id}",
    response_model=WeaponResponse,
    responses={404: {"model": ProblemDetails, "description": "Weapon not found"}},
    summary="Get weapon",
)
async def get_weapon(
    request: Request,
    weapon_id: UUID,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> WeaponResponse | JSONResponse:
    return await _weapon_response(request, dispatcher, weapon_id)


@router.post(
    "/damage",
    response_model=WeaponResponse,
    responses={
        400: {"model": ProblemDetails, "description": "Negative damage"},
        404: {"model": ProblemDetails, "description": "Weapon not found"},
    },
    summary="Damage weapon",
)
async def damage_weapon(
    request: Request,
    data: DamageWeaponRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> WeaponResponse | JSONResponse:
    """Apply damage and return the updated weapon."""
    result = await dispatcher.dispatch(
        DamageWeapon(weapon_id=data.weapon_id, damage_amount=data.damage_amount)
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )
        case Success():
            return await _weapon_response(request, dispatcher, data.weapon_id)


@router.post(
    "/repair",
    response_model=WeaponResponse,
    responses={
        400: {
            "model": ProblemDetails,
            "description": "Negative amount or weapon not repairable",
        },
        404: {"model": ProblemDetails, "description": "Weapon not found"},
    },
    summary="Repair weapon",
)
async def repair_weapon(
    request: Request,
    data: RepairWeaponRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> WeaponResponse | JSONResponse:
    """Repair up to repairAmount points and return the updated weapon."""
    result = await dispatcher.dispatch(
        RepairWeapon(weapon_id=data.weapon_id, repair_amount=data.repair_amount)
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )
        case Success():
            return await _weapon_response(request, dispatcher, data.weapon_id)


@router.post(
    "/estimate-repair",
    response_model=RepairEstimateResponse,
    responses={
        400: {"model": ProblemDetails, "description": "Invalid estimate request"},
        404: {"model": ProblemDetails, "description": "Weapon not found"},
    },
    summary="Estimate repair",
)
async def estimate_repair(
    request: Request,
    data: EstimateRepairRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> RepairEstimateResponse | JSONResponse:
    result = await dispatcher.dispatch(
        EstimateRepair(weapon_id=data.weapon_id, repair_amount=data.repair_amount)
    )

    match result:
        case Success(value=estimate):
            return RepairEstimateResponse.from_result(estimate)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )


@router.delete(
    "/{weapon_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ProblemDetails, "description": "Weapon not found"}},
    summary="Delete weapon",
)
async def delete_weapon(
    request: Request,
    weapon_id: UUID,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    result = await dispatcher.dispatch(DeleteWeapon(weapon_id=weapon_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )


async def _weapon_response(
    request: Request, dispatcher: Dispatcher, weapon_id: UUID
) -> WeaponResponse | JSONResponse:
    result = await dispatcher.dispatch(GetWeapon(weapon_id=weapon_id))

    match result:
        case Success(value=weapon):
            return WeaponResponse.from_result(weapon)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error, request, get_trace_id()
            )
