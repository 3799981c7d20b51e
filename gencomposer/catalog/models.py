"""Pydantic v2 models for the template catalog.

Defines the template descriptors and the project-type / framework metadata a
catalog is made of, plus the serialisable ``CatalogDocument`` payload the
loader reads from disk.  Descriptors are frozen: once a catalog is loaded
nothing mutates them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TemplateType(str, Enum):
    """Kind of scaffold unit a template produces."""
    PROJECT = "Project"
    PAGE = "Page"
    FEATURE = "Feature"
    COMPOSITION = "Composition"


class FrameworkType(str, Enum):
    """Which side of the application a framework belongs to."""
    FRONTEND = "frontend"
    BACKEND = "backend"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class LayoutItem(BaseModel):
    """One default page slot declared by a project template."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Layout slot name, e.g. 'Main'")
    template_group_identity: str = Field(
        ..., description="Group identity of the page template that fills the slot"
    )
    project_type: list[str] = Field(
        default_factory=list,
        description="Project types this slot applies to; empty means all",
    )
    readonly: bool = Field(default=False, description="Whether the user may remove the page")

    def applies_to(self, project_type: str) -> bool:
        return not self.project_type or project_type in self.project_type


# ---------------------------------------------------------------------------
# Template descriptor
# ---------------------------------------------------------------------------

class TemplateDescriptor(BaseModel):
    """Metadata record for one reusable scaffold unit."""
    model_config = ConfigDict(frozen=True)

    identity: str = Field(..., description="Unique key within the catalog")
    group_identity: str = Field(
        default="", description="Identity shared by framework variants of one template"
    )
    name: str = Field(..., description="Display name")
    template_type: TemplateType = Field(..., description="Project, Page, Feature or Composition")
    platform: str = Field(..., description="Target platform, e.g. 'Uwp' or 'Wpf'")
    language: str = Field(default="C#", description="Programming language of the payload")
    frontend_frameworks: frozenset[str] = Field(
        default_factory=frozenset, description="Supported front-end frameworks; empty means any"
    )
    backend_frameworks: frozenset[str] = Field(
        default_factory=frozenset, description="Supported back-end frameworks; empty means any"
    )
    project_types: frozenset[str] = Field(
        default_factory=frozenset, description="Project types a Project template provides"
    )
    dependencies: tuple[str, ...] = Field(
        default=(), description="Identities or group identities this template requires"
    )
    multiple_instance: bool = Field(default=False)
    item_name_editable: bool = Field(default=False)
    hidden: bool = Field(default=False)
    default_name: str = Field(default="", description="Name used when the user supplies none")
    layout: tuple[LayoutItem, ...] = Field(default=())
    order: int = Field(default=0)
    description: str = Field(default="")

    @model_validator(mode="before")
    @classmethod
    def _fill_group_identity(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("group_identity"):
            data = {**data, "group_identity": data.get("identity", "")}
        return data

    def get_default_name(self) -> str:
        """Return the default item name, falling back to the template name."""
        return self.default_name or self.name

    def matches(self, identity: str) -> bool:
        """True when *identity* names this template or its group."""
        return identity in (self.identity, self.group_identity)

    def supports(self, frontend: str = "", backend: str = "") -> bool:
        """Check framework compatibility.

        An empty framework set on the template accepts every framework, and an
        empty *backend* on the request accepts every template.
        """
        if self.frontend_frameworks and frontend not in self.frontend_frameworks:
            return False
        if backend and self.backend_frameworks and backend not in self.backend_frameworks:
            return False
        return True


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

class ProjectTypeInfo(BaseModel):
    """Display metadata for a project type (Blank, SplitView, TabbedNav...)."""
    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str = ""
    description: str = ""
    order: int = 0
    platforms: frozenset[str] = Field(default_factory=frozenset)
    requires_pages: bool = Field(
        default=False, description="Whether setup must produce at least one page"
    )


class FrameworkInfo(BaseModel):
    """Display metadata for a UI or back-end framework."""
    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str = ""
    type: FrameworkType = FrameworkType.FRONTEND
    order: int = 0
    platforms: frozenset[str] = Field(default_factory=frozenset)


# ---------------------------------------------------------------------------
# Catalog document
# ---------------------------------------------------------------------------

class CatalogDocument(BaseModel):
    """Everything a catalog file contains."""
    templates: list[TemplateDescriptor] = Field(default_factory=list)
    project_types: list[ProjectTypeInfo] = Field(default_factory=list)
    frameworks: list[FrameworkInfo] = Field(default_factory=list)
