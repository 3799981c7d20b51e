"""Composable item-name validators.

Each validator answers one question about a candidate name and carries
whatever selection state it needs (for instance the names already used) from
construction time, so ``validate`` is a pure function of the candidate.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field


class ValidationErrorType(str, Enum):
    """Why a candidate name was rejected."""
    NONE = "none"
    EMPTY = "empty"
    ALREADY_EXISTS = "already_exists"
    RESERVED_NAME = "reserved_name"
    DEFAULT_NAME = "default_name"
    BAD_FORMAT = "bad_format"


class ValidationResult(BaseModel):
    """Outcome of validating a single name."""

    is_valid: bool = Field(default=True)
    error_type: ValidationErrorType = Field(default=ValidationErrorType.NONE)
    reason: str = Field(default="", description="Human-readable rejection reason")

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def fail(cls, error_type: ValidationErrorType, reason: str) -> "ValidationResult":
        return cls(is_valid=False, error_type=error_type, reason=reason)


class Validator:
    """Base class for name validators."""

    def validate(self, suggested_name: str) -> ValidationResult:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class EmptyNameValidator(Validator):
    def validate(self, suggested_name: str) -> ValidationResult:
        if not suggested_name or not suggested_name.strip():
            return ValidationResult.fail(ValidationErrorType.EMPTY, "Name cannot be empty")
        return ValidationResult.ok()


class ExistingNamesValidator(Validator):
    """Rejects names already used by a page or feature (case-insensitive)."""

    def __init__(self, existing_names: Iterable[str]) -> None:
        self.existing_names = {n.lower() for n in existing_names}

    def validate(self, suggested_name: str) -> ValidationResult:
        if suggested_name.lower() in self.existing_names:
            return ValidationResult.fail(
                ValidationErrorType.ALREADY_EXISTS,
                f"The name '{suggested_name}' is already in use",
            )
        return ValidationResult.ok()


class ReservedNamesValidator(Validator):
    """Rejects platform reserved names and language keywords."""

    def __init__(self, reserved_names: Iterable[str]) -> None:
        self.reserved_names = {n.lower() for n in reserved_names}

    def validate(self, suggested_name: str) -> ValidationResult:
        if suggested_name.lower() in self.reserved_names:
            return ValidationResult.fail(
                ValidationErrorType.RESERVED_NAME,
                f"The name '{suggested_name}' is reserved",
            )
        return ValidationResult.ok()


class DefaultNamesValidator(Validator):
    """Rejects the fixed names of templates whose item name is not editable.

    A user naming a page ``Settings`` would otherwise clash with the settings
    feature once it is added.
    """

    def __init__(self, default_names: Iterable[str]) -> None:
        self.default_names = {n.lower() for n in default_names}

    def validate(self, suggested_name: str) -> ValidationResult:
        if suggested_name.lower() in self.default_names:
            return ValidationResult.fail(
                ValidationErrorType.DEFAULT_NAME,
                f"The name '{suggested_name}' is used by another template",
            )
        return ValidationResult.ok()


class BadFormatValidator(Validator):
    """Accepts identifiers: a leading letter followed by letters, digits or ``_``."""

    pattern = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")

    def validate(self, suggested_name: str) -> ValidationResult:
        if not self.pattern.match(suggested_name):
            return ValidationResult.fail(
                ValidationErrorType.BAD_FORMAT,
                f"The name '{suggested_name}' is not a valid identifier",
            )
        return ValidationResult.ok()
