"""Exception hierarchy for the template composer.

Catalog queries never raise: an uninitialised catalog answers every query with
an empty list.  Everything below is raised by loading, naming or resolution and
is meant to abort the current setup before anything is materialised.
"""

from __future__ import annotations


class ComposerError(Exception):
    """Base class for every error raised by gencomposer."""


class NameGenerationExhausted(ComposerError):
    """No valid item name could be produced within the attempt bound."""

    def __init__(self, name: str, attempts: int) -> None:
        self.name = name
        self.attempts = attempts
        super().__init__(
            f"No valid name could be generated from {name!r} after {attempts} attempts"
        )


class DependencyCycleViolation(ComposerError):
    """The catalog declares a dependency cycle the resolver cannot close.

    Raised when loading a catalog whose cycle passes through a
    multiple-instance template, and by the resolver when a single add
    operation exceeds its instance bound.
    """

    def __init__(self, message: str, path: list[str] | None = None) -> None:
        self.path = path or []
        super().__init__(message)


class CatalogValidationError(ComposerError):
    """The catalog document is malformed."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid template catalog:\n  - " + "\n  - ".join(problems))


class LayoutRequiredError(ComposerError):
    """A project type that requires pages resolved to an empty layout."""

    def __init__(self, project_type: str, frontend: str, platform: str) -> None:
        self.project_type = project_type
        self.frontend = frontend
        self.platform = platform
        super().__init__(
            f"Project type {project_type!r} requires at least one page but no layout "
            f"is defined for framework {frontend!r} on platform {platform!r}"
        )
