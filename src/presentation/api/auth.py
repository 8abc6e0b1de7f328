"""Authentication router.

Endpoints:
    POST /api/auth/register            - Register (201 + tokens)
    POST /api/auth/login               - Login (tokens)
    POST /api/auth/refresh             - Exchange a refresh token for new tokens
    POST /api/auth/logout              - Logout (auth required)
    GET  /api/auth/profile             - Current user's profile
    GET  /api/auth/profile/{user_id}   - Profile by ID (own, or any for admins)

Tokens are stateless: refresh re-issues both tokens and logout only
acknowledges the request.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands import LoginUser, RegisterUser
from src.application.cqrs import Dispatcher
from src.application.dtos import UserProfileResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries import GetUserProfile
from src.core.container import get_dispatcher, get_token_service
from src.core.result import Failure, Success
from src.domain.protocols import TokenServiceProtocol
from src.presentation.api.errors import ErrorResponseBuilder, ProblemDetails
from src.presentation.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.schemas.auth_schemas import (
    AuthResponse,
    LoginUserRequest,
    RefreshTokenRequest,
    RegisterUserRequest,
    UserResponse,
)
from src.schemas.common_schemas import MessageResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])

INVALID_REFRESH_TOKEN = "Invalid or expired refresh token"
USER_NOT_FOUND = "User not found"
PROFILE_FORBIDDEN = (
    "You can only access your own profile unless you have admin privileges"
)
LOGGED_OUT = "Successfully logged out"


def _issue_tokens(
    token_service: TokenServiceProtocol, user: UserProfileResult
) -> AuthResponse:
    return AuthResponse(
        access_token=token_service.generate_access_token(
            user_id=user.id, email=user.email, roles=user.roles
        ),
        refresh_token=token_service.generate_refresh_token(user.id),
        expires_at=token_service.get_access_token_expiration(user.roles),
        user=UserResponse.from_result(user),
    )


def _problem(request: Request, error: ApplicationError) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(error, request, get_trace_id())


def _unauthorized(request: Request, message: str) -> JSONResponse:
    return _problem(
        request,
        ApplicationError(code=ApplicationErrorCode.UNAUTHORIZED, message=message),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    responses={
        400: {"model": ProblemDetails, "description": "Validation failed"},
    },
    summary="Register user",
)
async def register(
    request: Request,
    data: RegisterUserRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    token_service: TokenServiceProtocol = Depends(get_token_service),
) -> AuthResponse | JSONResponse:
    """Register a new account and log it in.

    POST /api/auth/register → 201 Created
    """
    result = await dispatcher.dispatch(
        RegisterUser(
            username=data.username,
            name=data.name,
            email=data.email,
            password=data.password,
            date_of_birth=data.date_of_birth,
        )
    )

    match result:
        case Failure(error=error):
            return _problem(request, error)
        case Success(value=user_id):
            pass

    match await dispatcher.dispatch(GetUserProfile(user_id=user_id)):
        case Success(value=profile):
            return _issue_tokens(token_service, profile)
        case Failure(error=error):
            return _problem(request, error)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        401: {"model": ProblemDetails, "description": "Invalid credentials"},
    },
    summary="Login",
)
async def login(
    request: Request,
    data: LoginUserRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    token_service: TokenServiceProtocol = Depends(get_token_service),
) -> AuthResponse | JSONResponse:
    result = await dispatcher.dispatch(
        LoginUser(email_or_username=data.email_or_username, password=data.password)
    )

    match result:
        case Success(value=auth):
            return _issue_tokens(token_service, auth.user)
        case Failure(error=error):
            return _problem(request, error)


@router.post(
    "/refresh",
    response_model=AuthResponse,
    responses={
        401: {"model": ProblemDetails, "description": "Invalid refresh token"},
    },
    summary="Refresh tokens",
)
async def refresh(
    request: Request,
    data: RefreshTokenRequest,
    dispatcher: Dispatcher = Depends(get_dispatcher),
    token_service: TokenServiceProtocol = Depends(get_token_service),
) -> AuthResponse | JSONResponse:
    """Issue a new access/refresh pair for a valid refresh token."""
    match token_service.validate_refresh_token(data.refresh_token):
        case Failure():
            return _unauthorized(request, INVALID_REFRESH_TOKEN)
        case Success(value=payload):
            pass

    try:
        user_id = UUID(payload["sub"])
    except (KeyError, ValueError):
        return _unauthorized(request, INVALID_REFRESH_TOKEN)

    match await dispatcher.dispatch(GetUserProfile(user_id=user_id)):
        case Success(value=profile):
            return _issue_tokens(token_service, profile)
        case Failure():
            return _unauthorized(request, USER_NOT_FOUND)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
)
async def logout(
    current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    return MessageResponse(message=LOGGED_OUT)


@router.get(
    "/profile",
    response_model=UserResponse,
    responses={404: {"model": ProblemDetails, "description": "User not found"}},
    summary="Current user profile",
)
async def get_profile(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> UserResponse | JSONResponse:
    match await dispatcher.dispatch(GetUserProfile(user_id=current_user.user_id)):
        case Success(value=profile):
            return UserResponse.from_result(profile)
        case Failure(error=error):
            return _problem(request, error)


@router.get(
    "/profile/{user_id}",
    response_model=UserResponse,
    responses={
        403: {"model": ProblemDetails, "description": "Not your profile"},
        404: {"model": ProblemDetails, "description": "User not found"},
    },
    summary="User profile by ID",
)
async def get_profile_by_id(
    request: Request,
    user_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> UserResponse | JSONResponse:
    """Own profile for everyone, any profile for admins."""
    if user_id != current_user.user_id and not current_user.is_admin:
        return _problem(
            request,
            ApplicationError(
                code=ApplicationErrorCode.FORBIDDEN, message=PROFILE_FORBIDDEN
            ),
        )

    match await dispatcher.dispatch(GetUserProfile(user_id=user_id)):
        case Success(value=profile):
            return UserResponse.from_result(profile)
        case Failure(error=error):
            return _problem(request, error)
