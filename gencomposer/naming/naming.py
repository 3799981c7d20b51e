"""Item-name validation and inference.

``validate`` runs a validator pipeline and reports the first failure.
``infer`` turns any candidate into a name the pipeline accepts by cleaning it
and appending a counter, and gives up with ``NameGenerationExhausted`` once
the attempt bound is reached instead of looping forever.
"""

from __future__ import annotations

import random
import re
import string
from collections.abc import Callable, Iterable, Sequence

from gencomposer.catalog.models import TemplateDescriptor
from gencomposer.errors import NameGenerationExhausted
from gencomposer.naming.validators import (
    BadFormatValidator,
    DefaultNamesValidator,
    EmptyNameValidator,
    ExistingNamesValidator,
    ReservedNamesValidator,
    ValidationResult,
    Validator,
)

DEFAULT_FALLBACK_NAME = "Item"

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")
_LEADING_NON_LETTERS = re.compile(r"^[^A-Za-z]+")

_empty_validator = EmptyNameValidator()


def validate(suggested_name: str, validators: Sequence[Validator]) -> ValidationResult:
    """Validate *suggested_name*; empty names are always rejected.

    Validators run in list order and the first failure is returned.
    """
    result = _empty_validator.validate(suggested_name)
    if not result.is_valid:
        return result
    for validator in validators:
        result = validator.validate(suggested_name)
        if not result.is_valid:
            return result
    return ValidationResult.ok()


def clean_name(suggested_name: str, fallback: str = DEFAULT_FALLBACK_NAME) -> str:
    """Strip characters that can never appear in an item name.

    Examples::

        clean_name("Master Detail") -> "MasterDetail"
        clean_name("2nd-Page")      -> "ndPage"
        clean_name("!!!")           -> "Item"
    """
    cleaned = _INVALID_CHARS.sub("", suggested_name or "")
    cleaned = _LEADING_NON_LETTERS.sub("", cleaned)
    return cleaned or fallback


def infer(
    suggested_name: str,
    validators: Sequence[Validator],
    max_attempts: int = 1000,
) -> str:
    """Return the first of ``name``, ``name1``, ``name2``... the validators accept.

    Raises:
        NameGenerationExhausted: If no candidate is accepted within
            *max_attempts* tries.
    """
    base = clean_name(suggested_name)
    for attempt in range(max_attempts):
        candidate = f"{base}{attempt}" if attempt else base
        if validate(candidate, validators).is_valid:
            return candidate
    raise NameGenerationExhausted(suggested_name, max_attempts)


def get_default_name(template: TemplateDescriptor) -> str:
    return template.get_default_name()


def _random_token(length: int) -> str:
    return "".join(random.choices(string.ascii_lowercase + string.digits, k=length))


def get_random_name(
    template: TemplateDescriptor | None = None,
    *,
    attempts: int = 10,
    length: int = 11,
    token_factory: Callable[[int], str] | None = None,
) -> str:
    """Generate a random, well-formed item name.

    *template* is accepted so the function can be used as a ``name_fn``; the
    generated name does not depend on it.

    Raises:
        NameGenerationExhausted: If none of the *attempts* candidates passes
            the empty-name and format checks.
    """
    factory = token_factory or _random_token
    validators: list[Validator] = [EmptyNameValidator(), BadFormatValidator()]
    for _ in range(attempts):
        candidate = factory(length)
        if validate(candidate, validators).is_valid:
            return candidate
    raise NameGenerationExhausted("<random>", attempts)


def build_item_validators(
    used_names: Iterable[str],
    template: TemplateDescriptor,
    *,
    reserved_names: Iterable[str] = (),
    default_names: Iterable[str] = (),
) -> list[Validator]:
    """Compose the validator pipeline used when adding *template* to a selection.

    Existing names are checked first, then reserved names.  Default-name and
    format rules only apply when the template lets the user edit its name.
    """
    validators: list[Validator] = [
        ExistingNamesValidator(used_names),
        ReservedNamesValidator(reserved_names),
    ]
    if template.item_name_editable:
        own_name = template.get_default_name().lower()
        validators.append(
            DefaultNamesValidator(n for n in default_names if n.lower() != own_name)
        )
        validators.append(BadFormatValidator())
    return validators
