"""gencomposer item naming.

Validates candidate page/feature names against a pipeline of rules and infers
a valid, unique name when the candidate is rejected.
"""

from gencomposer.naming.naming import (
    build_item_validators,
    clean_name,
    get_default_name,
    get_random_name,
    infer,
    validate,
)
from gencomposer.naming.validators import (
    BadFormatValidator,
    DefaultNamesValidator,
    EmptyNameValidator,
    ExistingNamesValidator,
    ReservedNamesValidator,
    ValidationErrorType,
    ValidationResult,
    Validator,
)

__all__ = [
    "build_item_validators",
    "clean_name",
    "get_default_name",
    "get_random_name",
    "infer",
    "validate",
    "BadFormatValidator",
    "DefaultNamesValidator",
    "EmptyNameValidator",
    "ExistingNamesValidator",
    "ReservedNamesValidator",
    "ValidationErrorType",
    "ValidationResult",
    "Validator",
]
