"""Unit tests for domain value objects and the WeaponType enum."""

from datetime import date
from decimal import Decimal
from uuid import UUID

import pytest

from src.domain.enums import WeaponType
from src.domain.errors import UserError, WeaponError
from src.domain.value_objects import (
    Email,
    Password,
    RepairEstimate,
    Role,
    UserId,
    UserProfile,
    WeaponId,
    WeaponName,
)

NIL_UUID = UUID(int=0)


@pytest.mark.unit
class TestEmail:
    def test_email_is_lowercased(self):
        assert Email("Ada.Lovelace@Example.COM").value == "ada.lovelace@example.com"

    @pytest.mark.parametrize("value", ["not-an-email", "missing@", "@example.com"])
    def test_invalid_format_raises(self, value):
        with pytest.raises(ValueError, match=UserError.INVALID_EMAIL):
            Email(value)

    def test_empty_email_raises(self):
        with pytest.raises(ValueError, match=UserError.EMPTY_EMAIL):
            Email("  ")


@pytest.mark.unit
class TestPassword:
    def test_strong_password_accepted(self):
        assert Password("Str0ng!Pass9").value == "Str0ng!Pass9"

    def test_strength_errors_lists_every_violation(self):
        errors = Password.strength_errors("abc")

        assert "Password must be at least 8 characters long" in errors
        assert "Password must contain at least one uppercase letter" in errors
        assert "Password must contain at least one digit" in errors
        assert len(errors) >= 4

    @pytest.mark.parametrize("value", ["Password1!", "Abcd1234!x", "aaaaaaA1!"])
    def test_weak_patterns_rejected(self, value):
        assert "Password is too common or weak" in Password.strength_errors(value)

    def test_whitespace_rejected(self):
        errors = Password.strength_errors("Str0ng! Pass9")

        assert "Password cannot contain whitespace characters" in errors

    def test_str_is_masked(self):
        assert str(Password("Str0ng!Pass9")) == "*" * 12


@pytest.mark.unit
class TestIdentifiers:
    def test_weapon_id_rejects_nil_uuid(self):
        with pytest.raises(ValueError, match="WeaponId cannot be an empty GUID"):
            WeaponId(NIL_UUID)

    def test_user_id_rejects_nil_uuid(self):
        with pytest.raises(ValueError, match="UserId cannot be an empty GUID"):
            UserId(NIL_UUID)

    def test_from_value_accepts_string(self):
        value = "0190a2c4-7b3e-7c51-9d2f-3a1b2c3d4e5f"

        assert WeaponId.from_value(value).value == UUID(value)
        assert UserId.from_value(value).value == UUID(value)

    def test_create_generates_unique_ids(self):
        assert WeaponId.create() != WeaponId.create()


@pytest.mark.unit
class TestWeaponName:
    def test_generate_with_descriptor(self):
        name = WeaponName.generate_with_descriptor(WeaponType.SWORD, "Flames")

        assert name.value == "Sword of Flames"

    def test_descriptor_match_is_case_insensitive(self):
        name = WeaponName.generate_with_descriptor(WeaponType.AXE, "dragon's breath")

        assert name.value == "Axe of dragon's breath"

    def test_unknown_descriptor_raises(self):
        with pytest.raises(ValueError, match=WeaponError.UNKNOWN_DESCRIPTOR):
            WeaponName.generate_with_descriptor(WeaponType.SWORD, "Bananas")

    def test_empty_descriptor_raises(self):
        with pytest.raises(ValueError, match=WeaponError.EMPTY_DESCRIPTOR):
            WeaponName.generate_with_descriptor(WeaponType.SWORD, "")

    def test_seeded_generation_is_reproducible(self):
        first = WeaponName.generate_seeded(WeaponType.BOW, 42)
        second = WeaponName.generate_seeded(WeaponType.BOW, 42)

        assert first == second
        assert first.value.startswith("Bow of ")

    def test_generate_uses_type_prefix(self):
        assert WeaponName.generate(WeaponType.MACE).value.startswith("Mace of ")

    def test_name_too_long_raises(self):
        with pytest.raises(ValueError, match=WeaponError.NAME_TOO_LONG):
            WeaponName.create("x" * 101)

    def test_blank_name_raises(self):
        with pytest.raises(ValueError, match=WeaponError.EMPTY_NAME):
            WeaponName.create("   ")

    def test_contains_descriptor(self):
        name = WeaponName.create("Sword of Flames")

        assert name.contains_descriptor("flames")
        assert not name.contains_descriptor("Ice")
        assert not name.contains_descriptor(" ")


@pytest.mark.unit
class TestWeaponType:
    @pytest.mark.parametrize("value", ["sword", "Sword", "  SWORD "])
    def test_parse_is_case_insensitive(self, value):
        assert WeaponType.parse(value) is WeaponType.SWORD

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            WeaponType.parse("Laser")

    def test_classifications_overlap(self):
        assert WeaponType.STAFF.is_melee
        assert WeaponType.STAFF.is_ranged
        assert WeaponType.STAFF.is_magic
        assert not WeaponType.SWORD.is_magic
        assert WeaponType.BOW.is_ranged and not WeaponType.BOW.is_melee

    def test_values_in_declaration_order(self):
        values = WeaponType.values()

        assert values[0] == "Sword"
        assert len(values) == 22


@pytest.mark.unit
class TestRole:
    def test_create_trims_whitespace(self):
        assert Role.create("  Admin ") == Role.ADMIN

    def test_blank_role_raises(self):
        with pytest.raises(ValueError, match=UserError.EMPTY_ROLE):
            Role.create(" ")

    def test_any_role_name_is_accepted(self):
        role = Role.create("Quartermaster")

        assert not role.is_admin
        assert not role.is_application


@pytest.mark.unit
class TestUserProfile:
    @pytest.mark.parametrize(
        ("username", "message"),
        [
            ("ab", UserError.USERNAME_TOO_SHORT),
            ("x" * 51, UserError.USERNAME_TOO_LONG),
            ("has space", UserError.USERNAME_INVALID_CHARACTERS),
        ],
    )
    def test_invalid_username(self, username, message):
        with pytest.raises(ValueError, match=message):
            UserProfile.create(username, "Ada", date(1990, 5, 1))

    def test_get_age_before_and_after_birthday(self):
        profile = UserProfile.create("ada_l", "Ada", date(1990, 5, 1))

        assert profile.get_age(today=date(2020, 4, 30)) == 29
        assert profile.get_age(today=date(2020, 5, 1)) == 30


@pytest.mark.unit
class TestRepairEstimate:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"repair_cost": -1, "gained_hit_points": 0, "gained_value": Decimal(0)},
            {"repair_cost": 0, "gained_hit_points": -1, "gained_value": Decimal(0)},
            {"repair_cost": 0, "gained_hit_points": 0, "gained_value": Decimal(-1)},
        ],
    )
    def test_negative_amounts_rejected(self, kwargs):
        with pytest.raises(ValueError):
            RepairEstimate(**kwargs)
