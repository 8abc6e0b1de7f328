"""Pytest configuration shared by all test suites.

Settings are read once at import time, so the test environment is set up
here before anything from src is imported:
- ENVIRONMENT=testing (tables are created on app startup)
- File-backed SQLite database in a temporary directory
- Minimum bcrypt cost so hashing stays fast
"""

import os
import tempfile
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="weapon-api-tests-"))

os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR / 'app.db'}"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-at-least-32-characters"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import date  # noqa: E402
from decimal import Decimal  # noqa: E402
from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.domain.entities import User, Weapon  # noqa: E402
from src.domain.enums import WeaponType  # noqa: E402
from src.domain.value_objects import Email, WeaponName  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402
from src.infrastructure.security import (  # noqa: E402
    BcryptPasswordService,
    JWTService,
)

TEST_SECRET_KEY = os.environ["SECRET_KEY"]
STRONG_PASSWORD = "Str0ng!Pass9"


# =============================================================================
# Collaborator doubles
# =============================================================================


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double satisfying LoggerProtocol."""
    return Mock()


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def password_service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.fixture
def token_service() -> JWTService:
    return JWTService(TEST_SECRET_KEY)


# =============================================================================
# Domain factories
# =============================================================================


def make_weapon(
    name: str = "Sword of Flames",
    *,
    weapon_type: WeaponType = WeaponType.SWORD,
    description: str = "Burns on contact",
    hit_points: int = 100,
    damage: int = 0,
    is_repairable: bool = True,
    value: Decimal | str = "150",
) -> Weapon:
    """Build a Weapon aggregate with sensible defaults."""
    return Weapon.create(
        WeaponName.create(name),
        description,
        hit_points,
        damage,
        is_repairable,
        Decimal(value),
        weapon_type=weapon_type,
    )


def make_user(
    hasher: BcryptPasswordService,
    *,
    username: str = "dragon_slayer",
    email: str = "ada@example.com",
    password: str = STRONG_PASSWORD,
) -> User:
    """Register a User aggregate (event discarded)."""
    user, _ = User.register(
        username=username,
        name="Ada Lovelace",
        email=Email(email),
        password=password,
        date_of_birth=date(1990, 5, 1),
        password_hasher=hasher,
    )
    return user


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Fresh SQLite database per test, tables created and engine disposed."""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await database.create_tables()
    yield database
    await database.close()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: API endpoint tests with TestClient")
