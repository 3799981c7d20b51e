"""gencomposer configuration.

Typed configuration for catalog loading, item naming and dependency
resolution.  All settings use Pydantic v2 models so they can be validated at
construction time and serialised to/from JSON or environment variables.

The language/platform pair a catalog is loaded for lives in an immutable
``CatalogContext`` that is passed explicitly to the loader and the resolver;
there is no process-wide "current language" state.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_LANGUAGE = "C#"
DEFAULT_PLATFORM = "Uwp"

# Names the generated shell and infrastructure code already uses.
DEFAULT_RESERVED_NAMES: list[str] = [
    "Page",
    "BackgroundTask",
    "Pivot",
    "Shell",
    "Main",
    "Platform",
    "Root",
    "App",
    "WebView",
]

DEFAULT_RESERVED_KEYWORDS: dict[str, list[str]] = {
    "C#": [
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    ],
    "VisualBasic": [
        "AddHandler", "AddressOf", "Alias", "And", "AndAlso", "As", "Boolean",
        "ByRef", "Byte", "ByVal", "Call", "Case", "Catch", "CBool", "Char",
        "Class", "Const", "Continue", "Date", "Decimal", "Declare", "Default",
        "Delegate", "Dim", "Do", "Double", "Each", "Else", "ElseIf", "End",
        "Enum", "Erase", "Error", "Event", "Exit", "False", "Finally", "For",
        "Friend", "Function", "Get", "GoTo", "Handles", "If", "Implements",
        "Imports", "In", "Inherits", "Integer", "Interface", "Is", "Let",
        "Lib", "Like", "Long", "Loop", "Me", "Mod", "Module", "MyBase",
        "MyClass", "Namespace", "New", "Next", "Not", "Nothing", "Object",
        "Of", "On", "Operator", "Option", "Optional", "Or", "OrElse",
        "Overloads", "Overridable", "Overrides", "Private", "Property",
        "Protected", "Public", "ReadOnly", "ReDim", "Resume", "Return",
        "Select", "Set", "Shadows", "Shared", "Short", "Single", "Static",
        "Step", "Stop", "String", "Structure", "Sub", "Then", "Throw", "To",
        "True", "Try", "TypeOf", "Using", "When", "While", "With",
        "WithEvents", "Xor",
    ],
}


class CatalogContext(BaseModel):
    """The language/platform pair a catalog is scoped to.

    Frozen so it can be shared freely between concurrently resolving
    selections.
    """

    model_config = ConfigDict(frozen=True)

    language: str = Field(default=DEFAULT_LANGUAGE)
    platform: str = Field(default=DEFAULT_PLATFORM)


class NamingConfig(BaseModel):
    """Settings for the item naming pipeline."""

    reserved_names: list[str] = Field(default_factory=lambda: list(DEFAULT_RESERVED_NAMES))
    reserved_keywords: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_RESERVED_KEYWORDS.items()}
    )
    max_infer_attempts: int = Field(
        default=1000, ge=1, description="Counter suffixes tried before giving up on a name"
    )
    random_name_attempts: int = Field(
        default=10, ge=1, description="Random candidates tried by get_random_name"
    )
    random_name_length: int = Field(default=11, ge=1)

    def reserved_for(self, language: str) -> list[str]:
        """Return reserved names plus the keywords of *language*."""
        return [*self.reserved_names, *self.reserved_keywords.get(language, [])]


class ResolutionConfig(BaseModel):
    """Tuning knobs for the dependency resolver."""

    max_instances: int = Field(
        default=500,
        ge=1,
        description="Upper bound on instances created by a single add operation",
    )
    validate_catalog_on_load: bool = Field(default=True)


class ComposerConfig(BaseModel):
    """Top-level gencomposer configuration.

    Instances are typically created once by the CLI entry point and then
    passed to the catalog loader and to ``GenComposer``.
    """

    catalog_path: Path | None = Field(default=None)
    context: CatalogContext = Field(default_factory=CatalogContext)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ComposerConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ComposerConfig":
        """Build a ``ComposerConfig`` from environment variables.

        Recognised variables (all optional):
            GENCOMPOSER_CATALOG, GENCOMPOSER_LANGUAGE, GENCOMPOSER_PLATFORM,
            GENCOMPOSER_MAX_INFER_ATTEMPTS, GENCOMPOSER_RANDOM_NAME_ATTEMPTS,
            GENCOMPOSER_RANDOM_NAME_LENGTH, GENCOMPOSER_MAX_INSTANCES.
        """
        naming_kwargs: dict[str, Any] = {}
        if os.environ.get("GENCOMPOSER_MAX_INFER_ATTEMPTS"):
            naming_kwargs["max_infer_attempts"] = int(os.environ["GENCOMPOSER_MAX_INFER_ATTEMPTS"])
        if os.environ.get("GENCOMPOSER_RANDOM_NAME_ATTEMPTS"):
            naming_kwargs["random_name_attempts"] = int(os.environ["GENCOMPOSER_RANDOM_NAME_ATTEMPTS"])
        if os.environ.get("GENCOMPOSER_RANDOM_NAME_LENGTH"):
            naming_kwargs["random_name_length"] = int(os.environ["GENCOMPOSER_RANDOM_NAME_LENGTH"])

        resolution_kwargs: dict[str, Any] = {}
        if os.environ.get("GENCOMPOSER_MAX_INSTANCES"):
            resolution_kwargs["max_instances"] = int(os.environ["GENCOMPOSER_MAX_INSTANCES"])

        catalog = os.environ.get("GENCOMPOSER_CATALOG")

        return cls(
            catalog_path=Path(catalog) if catalog else None,
            context=CatalogContext(
                language=os.environ.get("GENCOMPOSER_LANGUAGE", DEFAULT_LANGUAGE),
                platform=os.environ.get("GENCOMPOSER_PLATFORM", DEFAULT_PLATFORM),
            ),
            naming=NamingConfig(**naming_kwargs),
            resolution=ResolutionConfig(**resolution_kwargs),
        )
