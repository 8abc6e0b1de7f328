"""API test fixtures.

Routers are exercised through TestClient with the dispatcher replaced by a
FakeDispatcher, so these tests cover HTTP concerns only (status codes,
camelCase bodies, problem responses, authentication).
"""

from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.dtos import UserProfileResult, WeaponResult
from src.core.container import get_dispatcher
from src.main import app
from src.presentation.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)


class FakeDispatcher:
    """Returns a canned Result per request type and records every request."""

    def __init__(self) -> None:
        self.results: dict[type, Any] = {}
        self.requests: list[object] = []

    def returns(self, request_class: type, result: Any) -> None:
        self.results[request_class] = result

    async def dispatch(self, request: object) -> Any:
        self.requests.append(request)
        return self.results[type(request)]

    def sent(self, request_class: type) -> list[Any]:
        return [r for r in self.requests if isinstance(r, request_class)]


def weapon_result(**overrides: Any) -> WeaponResult:
    fields: dict[str, Any] = {
        "id": uuid7(),
        "name": "Sword of Flames",
        "weapon_type": "Sword",
        "description": "Burns on contact",
        "hit_points": 100,
        "max_hit_points": 100,
        "damage": 0,
        "is_repairable": True,
        "value": Decimal("150.00"),
    }
    return WeaponResult(**(fields | overrides))


def profile_result(**overrides: Any) -> UserProfileResult:
    fields: dict[str, Any] = {
        "id": uuid7(),
        "email": "ada@example.com",
        "username": "dragon_slayer",
        "name": "Ada Lovelace",
        "date_of_birth": date(1990, 5, 1),
        "roles": ["User"],
        "created_at": datetime(2026, 1, 1, tzinfo=UTC),
    }
    return UserProfileResult(**(fields | overrides))


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    return FakeDispatcher()


@pytest.fixture
def current_user() -> CurrentUser:
    return CurrentUser(user_id=uuid7(), email="ada@example.com", roles=["User"])


@pytest.fixture
def client(dispatcher):
    """Unauthenticated client (real token validation)."""
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client, current_user):
    """Client whose requests are authenticated as current_user."""
    app.dependency_overrides[get_current_user] = lambda: current_user
    return client
