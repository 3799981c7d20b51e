"""The user's accumulating project selection.

A ``UserSelection`` is what the rendering collaborator receives: project
metadata plus the ordered page and feature instances.  It only ever grows;
there is no removal API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from gencomposer.catalog.models import TemplateDescriptor, TemplateType


class TemplateInstance(BaseModel):
    """One named inclusion of a template in a selection."""

    name: str = Field(..., description="Unique item name within the selection")
    template: TemplateDescriptor

    @property
    def identity(self) -> str:
        return self.template.identity


class UserSelection(BaseModel):
    """Project type, frameworks and the page/feature instances chosen so far."""

    project_type: str
    frontend_framework: str
    backend_framework: str = ""
    platform: str
    language: str
    pages: list[TemplateInstance] = Field(default_factory=list)
    features: list[TemplateInstance] = Field(default_factory=list)
    home_name: str = Field(default="", description="Name of the startup page")

    def instances(self) -> list[TemplateInstance]:
        """Pages followed by features."""
        return [*self.pages, *self.features]

    def used_names(self) -> list[str]:
        return [i.name for i in self.instances()]

    def is_added(self, template: TemplateDescriptor) -> bool:
        """True when an instance of *template* exists as a page or a feature."""
        return any(i.template.identity == template.identity for i in self.instances())

    def count(self, template: TemplateDescriptor) -> int:
        return sum(1 for i in self.instances() if i.template.identity == template.identity)

    def add(self, name: str, template: TemplateDescriptor) -> TemplateInstance | None:
        """Append an instance to the list matching the template type.

        Project and composition templates are not items and are not stored;
        ``None`` is returned for them.
        """
        instance = TemplateInstance(name=name, template=template)
        if template.template_type == TemplateType.PAGE:
            self.pages.append(instance)
            if not self.home_name:
                self.home_name = self.pages[0].name
        elif template.template_type == TemplateType.FEATURE:
            self.features.append(instance)
        else:
            return None
        return instance

    def to_dict(self) -> dict[str, Any]:
        """Plain payload for the materialisation step."""
        return {
            "project_type": self.project_type,
            "frontend_framework": self.frontend_framework,
            "backend_framework": self.backend_framework,
            "platform": self.platform,
            "language": self.language,
            "home_name": self.home_name,
            "pages": [{"name": p.name, "template": p.identity} for p in self.pages],
            "features": [{"name": f.name, "template": f.identity} for f in self.features],
        }
