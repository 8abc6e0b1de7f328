"""API tests for /api/auth.

Tests cover:
- Register and login issue a token pair for the user
- Login failures surface as 401 problems
- Refresh accepts only refresh tokens for existing users
- Logout and profile endpoints require authentication
- Profile by ID is limited to the owner or an admin
"""

from datetime import date

import pytest
from uuid_extensions import uuid7

from src.application.commands import LoginUser, RegisterUser
from src.application.dtos import AuthResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries import GetUserProfile
from src.core.result import Failure, Success
from src.main import app
from src.presentation.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from tests.api.conftest import profile_result
from tests.conftest import STRONG_PASSWORD

REGISTER_BODY = {
    "username": "dragon_slayer",
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "password": STRONG_PASSWORD,
    "dateOfBirth": "1990-05-01",
}


def assert_token_pair(body, token_service, profile) -> None:
    access = token_service.validate_access_token(body["accessToken"]).value
    refresh = token_service.validate_refresh_token(body["refreshToken"]).value
    assert access["sub"] == refresh["sub"] == str(profile.id)
    assert access["email"] == profile.email
    assert body["user"] == {
        "id": str(profile.id),
        "email": profile.email,
        "username": profile.username,
        "name": profile.name,
    }
    assert body["expiresAt"]


@pytest.mark.api
class TestRegister:
    def test_register_returns_tokens(self, client, dispatcher, token_service):
        profile = profile_result()
        dispatcher.returns(RegisterUser, Success(value=profile.id))
        dispatcher.returns(GetUserProfile, Success(value=profile))

        response = client.post("/api/auth/register", json=REGISTER_BODY)

        assert response.status_code == 201
        assert_token_pair(response.json(), token_service, profile)
        [command] = dispatcher.sent(RegisterUser)
        assert command.date_of_birth == date(1990, 5, 1)
        assert dispatcher.sent(GetUserProfile)[0].user_id == profile.id

    def test_register_validation_failure(self, client, dispatcher):
        dispatcher.returns(
            RegisterUser,
            Failure(
                error=ApplicationError.validation(
                    "Registration validation failed",
                    ["Password must be at least 8 characters long"],
                )
            ),
        )

        response = client.post(
            "/api/auth/register", json=REGISTER_BODY | {"password": "short"}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["message"] == (
            "Password must be at least 8 characters long"
        )
        assert dispatcher.sent(GetUserProfile) == []


@pytest.mark.api
class TestLogin:
    def test_login_returns_tokens(self, client, dispatcher, token_service):
        profile = profile_result(roles=["User", "Admin"])
        dispatcher.returns(
            LoginUser, Success(value=AuthResult(user=profile, roles=profile.roles))
        )

        response = client.post(
            "/api/auth/login",
            json={"emailOrUsername": "ada@example.com", "password": STRONG_PASSWORD},
        )

        assert response.status_code == 200
        body = response.json()
        assert_token_pair(body, token_service, profile)
        access = token_service.validate_access_token(body["accessToken"]).value
        assert access["roles"] == ["User", "Admin"]

    def test_bad_credentials_is_401(self, client, dispatcher):
        dispatcher.returns(
            LoginUser,
            Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.UNAUTHORIZED,
                    message="Invalid email/username or password",
                )
            ),
        )

        response = client.post(
            "/api/auth/login",
            json={"emailOrUsername": "ada@example.com", "password": "nope"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email/username or password"


@pytest.mark.api
class TestRefresh:
    def test_refresh_issues_new_pair(self, client, dispatcher, token_service):
        profile = profile_result()
        dispatcher.returns(GetUserProfile, Success(value=profile))

        response = client.post(
            "/api/auth/refresh",
            json={"refreshToken": token_service.generate_refresh_token(profile.id)},
        )

        assert response.status_code == 200
        assert_token_pair(response.json(), token_service, profile)

    def test_access_token_cannot_refresh(self, client, dispatcher, token_service):
        token = token_service.generate_access_token(
            user_id=uuid7(), email="ada@example.com", roles=["User"]
        )

        response = client.post("/api/auth/refresh", json={"refreshToken": token})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired refresh token"
        assert dispatcher.requests == []

    def test_unknown_user_cannot_refresh(self, client, dispatcher, token_service):
        dispatcher.returns(
            GetUserProfile,
            Failure(error=ApplicationError.not_found("User not found")),
        )

        response = client.post(
            "/api/auth/refresh",
            json={"refreshToken": token_service.generate_refresh_token(uuid7())},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "User not found"


@pytest.mark.api
class TestSessionEndpoints:
    def test_logout_requires_token(self, client):
        assert client.post("/api/auth/logout").status_code == 401

    def test_logout(self, auth_client):
        response = auth_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Successfully logged out"}

    def test_own_profile(self, auth_client, dispatcher, current_user):
        profile = profile_result(id=current_user.user_id)
        dispatcher.returns(GetUserProfile, Success(value=profile))

        response = auth_client.get("/api/auth/profile")

        assert response.status_code == 200
        assert response.json()["username"] == "dragon_slayer"
        assert dispatcher.sent(GetUserProfile)[0].user_id == current_user.user_id

    def test_other_profile_forbidden(self, auth_client, dispatcher):
        response = auth_client.get(f"/api/auth/profile/{uuid7()}")

        assert response.status_code == 403
        assert dispatcher.requests == []

    def test_admin_can_read_any_profile(self, client, dispatcher):
        admin = CurrentUser(
            user_id=uuid7(), email="root@example.com", roles=["User", "Admin"]
        )
        app.dependency_overrides[get_current_user] = lambda: admin
        profile = profile_result()
        dispatcher.returns(GetUserProfile, Success(value=profile))

        response = client.get(f"/api/auth/profile/{profile.id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(profile.id)
