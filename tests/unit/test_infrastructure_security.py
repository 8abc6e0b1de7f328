"""Unit tests for BcryptPasswordService and JWTService.

Tests cover:
- Password hashing and verification (including malformed hashes)
- Access/refresh token claims and lifetimes
- Application-role extended lifetime
- Expired, tampered and wrong-type tokens
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.errors import AuthenticationError
from src.infrastructure.security import BcryptPasswordService, JWTService
from tests.conftest import STRONG_PASSWORD, TEST_SECRET_KEY


@pytest.mark.unit
class TestBcryptPasswordService:
    """Test BcryptPasswordService."""

    def test_hash_and_verify(self, password_service):
        password_hash = password_service.hash_password(STRONG_PASSWORD)

        assert password_hash != STRONG_PASSWORD
        assert password_hash.startswith("$2b$04$")
        assert password_service.verify_password(STRONG_PASSWORD, password_hash)
        assert not password_service.verify_password("Wr0ng!Guess", password_hash)

    def test_hashes_are_salted(self, password_service):
        assert password_service.hash_password("x") != password_service.hash_password(
            "x"
        )

    def test_malformed_hash_does_not_verify(self, password_service):
        assert not password_service.verify_password(STRONG_PASSWORD, "not-a-hash")

    @pytest.mark.parametrize("cost", [3, 32])
    def test_cost_factor_out_of_range(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)

    def test_cost_factor_property(self):
        assert BcryptPasswordService(cost_factor=5).cost_factor == 5


@pytest.mark.unit
class TestJWTServiceGeneration:
    """Test token generation."""

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService("too-short")

    def test_access_token_claims(self, token_service):
        user_id = uuid7()

        token = token_service.generate_access_token(
            user_id=user_id, email="ada@example.com", roles=["User"]
        )
        result = token_service.validate_access_token(token)

        assert isinstance(result, Success)
        payload = result.value
        assert payload["sub"] == str(user_id)
        assert payload["email"] == "ada@example.com"
        assert payload["roles"] == ["User"]
        assert payload["type"] == "access"
        assert payload["iss"] == "weapon-api"
        assert payload["aud"] == "weapon-api-clients"
        assert payload["jti"]
        assert payload["exp"] - payload["iat"] == 180 * 60

    def test_application_role_gets_longer_lifetime(self, token_service):
        token = token_service.generate_access_token(
            user_id=uuid7(), email="svc@example.com", roles=["Application"]
        )

        payload = token_service.validate_access_token(token).value
        assert payload["exp"] - payload["iat"] == 1440 * 60

    @freeze_time("2026-01-01 12:00:00")
    def test_access_token_expiration(self, token_service):
        expected = datetime(2026, 1, 1, 15, 0, tzinfo=UTC)

        assert token_service.get_access_token_expiration(["User"]) == expected

    def test_refresh_token_carries_only_subject(self, token_service):
        user_id = uuid7()

        token = token_service.generate_refresh_token(user_id)
        payload = token_service.validate_refresh_token(token).value

        assert payload["sub"] == str(user_id)
        assert payload["type"] == "refresh"
        assert "email" not in payload
        assert payload["exp"] - payload["iat"] == 30 * 24 * 60 * 60

    def test_each_token_has_unique_jti(self, token_service):
        user_id = uuid7()
        first = token_service.generate_refresh_token(user_id)
        second = token_service.generate_refresh_token(user_id)

        assert (
            token_service.validate_refresh_token(first).value["jti"]
            != token_service.validate_refresh_token(second).value["jti"]
        )


@pytest.mark.unit
class TestJWTServiceValidation:
    """Test token validation failures."""

    def test_expired_token(self, token_service):
        with freeze_time(datetime.now(UTC) - timedelta(days=1)):
            token = token_service.generate_access_token(
                user_id=uuid7(), email="ada@example.com", roles=["User"]
            )

        result = token_service.validate_access_token(token)

        assert result == Failure(error=AuthenticationError.EXPIRED_TOKEN)

    def test_token_signed_with_other_key(self, token_service):
        other = JWTService("another-secret-key-that-is-long-enough!!")
        token = other.generate_access_token(
            user_id=uuid7(), email="ada@example.com", roles=["User"]
        )

        result = token_service.validate_access_token(token)

        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)

    def test_wrong_audience(self, token_service):
        other = JWTService(TEST_SECRET_KEY, audience="someone-else")
        token = other.generate_access_token(
            user_id=uuid7(), email="ada@example.com", roles=["User"]
        )

        assert isinstance(token_service.validate_access_token(token), Failure)

    def test_garbage_token(self, token_service):
        result = token_service.validate_access_token("not.a.jwt")

        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)

    def test_refresh_token_rejected_as_access_token(self, token_service):
        token = token_service.generate_refresh_token(uuid7())

        result = token_service.validate_access_token(token)

        assert result == Failure(error=AuthenticationError.WRONG_TOKEN_TYPE)

    def test_access_token_rejected_as_refresh_token(self, token_service):
        token = token_service.generate_access_token(
            user_id=uuid7(), email="ada@example.com", roles=["User"]
        )

        result = token_service.validate_refresh_token(token)

        assert result == Failure(error=AuthenticationError.WRONG_TOKEN_TYPE)

    def test_missing_required_claim(self, token_service):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode(
            {
                "sub": "x",
                "iat": now,
                "exp": now + 60,
                "iss": "weapon-api",
                "aud": "weapon-api-clients",
            },
            TEST_SECRET_KEY,
            algorithm="HS256",
        )

        result = token_service.validate_access_token(token)

        assert result == Failure(error=AuthenticationError.INVALID_TOKEN)
