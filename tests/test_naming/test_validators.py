"""Unit tests for the name validators (gencomposer.naming.validators)."""

from __future__ import annotations

import pytest

from gencomposer.naming.validators import (
    BadFormatValidator,
    DefaultNamesValidator,
    EmptyNameValidator,
    ExistingNamesValidator,
    ReservedNamesValidator,
    ValidationErrorType,
    ValidationResult,
)

pytestmark = pytest.mark.unit


class TestValidationResult:
    def test_ok(self):
        result = ValidationResult.ok()
        assert result.is_valid
        assert result.error_type is ValidationErrorType.NONE

    def test_fail(self):
        result = ValidationResult.fail(ValidationErrorType.EMPTY, "nope")
        assert not result.is_valid
        assert result.reason == "nope"


class TestEmptyNameValidator:
    @pytest.mark.parametrize("name", ["", "   "])
    def test_rejects_blank(self, name):
        result = EmptyNameValidator().validate(name)
        assert result.error_type is ValidationErrorType.EMPTY

    def test_accepts_text(self):
        assert EmptyNameValidator().validate("Main").is_valid


class TestExistingNamesValidator:
    def test_rejects_existing_case_insensitively(self):
        validator = ExistingNamesValidator(["Main", "Settings"])
        assert validator.validate("main").error_type is ValidationErrorType.ALREADY_EXISTS
        assert validator.validate("Settings").error_type is ValidationErrorType.ALREADY_EXISTS

    def test_accepts_new_name(self):
        assert ExistingNamesValidator(["Main"]).validate("Map").is_valid

    def test_accepts_generator_input(self):
        validator = ExistingNamesValidator(n for n in ["Main"])
        assert not validator.validate("Main").is_valid


class TestReservedNamesValidator:
    def test_rejects_reserved(self):
        validator = ReservedNamesValidator(["Shell", "class"])
        result = validator.validate("shell")
        assert result.error_type is ValidationErrorType.RESERVED_NAME
        assert "reserved" in result.reason

    def test_accepts_other(self):
        assert ReservedNamesValidator(["Shell"]).validate("ShellPage").is_valid


class TestDefaultNamesValidator:
    def test_rejects_default_name(self):
        validator = DefaultNamesValidator({"Settings"})
        assert validator.validate("Settings").error_type is ValidationErrorType.DEFAULT_NAME

    def test_accepts_other(self):
        assert DefaultNamesValidator({"Settings"}).validate("Map").is_valid


class TestBadFormatValidator:
    @pytest.mark.parametrize("name", ["Main", "map2", "Image_Gallery", "A"])
    def test_accepts_identifiers(self, name):
        assert BadFormatValidator().validate(name).is_valid

    @pytest.mark.parametrize("name", ["2Main", "_Main", "Image Gallery", "Map-2", "Straße", ""])
    def test_rejects_non_identifiers(self, name):
        result = BadFormatValidator().validate(name)
        assert result.error_type is ValidationErrorType.BAD_FORMAT
