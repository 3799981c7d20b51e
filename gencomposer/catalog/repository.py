"""Queryable, read-only template catalog.

A ``TemplateCatalog`` is built once for a ``CatalogContext`` and then only
read.  Every query is a pure filter over the loaded descriptors; nothing is
dropped except by the predicate arguments a caller passes explicitly.  A
catalog that was never initialised answers every query with an empty list so
callers can treat "no templates" and "not loaded" the same way.
"""

from __future__ import annotations

from collections.abc import Iterable

from gencomposer.catalog.models import (
    CatalogDocument,
    FrameworkInfo,
    FrameworkType,
    ProjectTypeInfo,
    TemplateDescriptor,
    TemplateType,
)
from gencomposer.config import CatalogContext

_ITEM_TYPES = (TemplateType.PAGE, TemplateType.FEATURE)


class TemplateCatalog:
    """In-memory collection of template descriptors for one context."""

    def __init__(
        self,
        context: CatalogContext | None = None,
        document: CatalogDocument | None = None,
    ) -> None:
        self.context = context
        self._document = document if context is not None else None
        templates = self._document.templates if self._document else []
        self._templates: tuple[TemplateDescriptor, ...] = tuple(templates)
        self._by_identity = {t.identity: t for t in self._templates}

    @classmethod
    def empty(cls) -> "TemplateCatalog":
        """An uninitialised catalog."""
        return cls()

    @property
    def is_initialized(self) -> bool:
        return self._document is not None

    def __len__(self) -> int:
        return len(self._templates)

    # -- Template queries --------------------------------------------------

    def get_all(self) -> list[TemplateDescriptor]:
        return list(self._templates)

    def get_templates(
        self,
        *,
        platform: str | None = None,
        frontend: str | None = None,
        backend: str | None = None,
        template_types: Iterable[TemplateType] | None = None,
        include_hidden: bool = True,
    ) -> list[TemplateDescriptor]:
        """Filter descriptors by the predicates that are not ``None``."""
        types = set(template_types) if template_types is not None else None
        result: list[TemplateDescriptor] = []
        for template in self._templates:
            if platform is not None and template.platform != platform:
                continue
            if types is not None and template.template_type not in types:
                continue
            if not include_hidden and template.hidden:
                continue
            if frontend is not None or backend is not None:
                if not template.supports(frontend or "", backend or ""):
                    continue
            result.append(template)
        return result

    def get_item_templates(self, framework: str, platform: str) -> list[TemplateDescriptor]:
        """Visible page and feature templates a user can pick for *framework*."""
        return [
            t
            for t in self.get_templates(
                platform=platform, template_types=_ITEM_TYPES, include_hidden=False
            )
            if framework in t.frontend_frameworks
        ]

    def get_project_templates(self, platform: str) -> list[TemplateDescriptor]:
        return self.get_templates(platform=platform, template_types=[TemplateType.PROJECT])

    def get(self, identity: str) -> TemplateDescriptor | None:
        """Exact identity lookup."""
        return self._by_identity.get(identity)

    def find(self, identity: str) -> TemplateDescriptor | None:
        """Return the first template whose identity or group identity matches."""
        exact = self._by_identity.get(identity)
        if exact is not None:
            return exact
        return next((t for t in self._templates if t.matches(identity)), None)

    def find_compatible(
        self,
        identity: str,
        frontend: str,
        backend: str,
        platform: str,
    ) -> TemplateDescriptor | None:
        """Resolve *identity* to the framework/platform variant that fits."""
        for template in self._templates:
            if (
                template.matches(identity)
                and template.platform == platform
                and template.supports(frontend, backend)
            ):
                return template
        return None

    # -- Metadata queries --------------------------------------------------

    def get_project_types(self, platform: str) -> list[ProjectTypeInfo]:
        if self._document is None:
            return []
        return sorted(
            (p for p in self._document.project_types if not p.platforms or platform in p.platforms),
            key=lambda p: p.order,
        )

    def get_project_type(self, name: str) -> ProjectTypeInfo | None:
        if self._document is None:
            return None
        return next((p for p in self._document.project_types if p.name == name), None)

    def get_frontend_frameworks(self, platform: str) -> list[FrameworkInfo]:
        return self._frameworks(platform, FrameworkType.FRONTEND)

    def get_backend_frameworks(self, platform: str) -> list[FrameworkInfo]:
        return self._frameworks(platform, FrameworkType.BACKEND)

    def _frameworks(self, platform: str, kind: FrameworkType) -> list[FrameworkInfo]:
        if self._document is None:
            return []
        return sorted(
            (
                f
                for f in self._document.frameworks
                if f.type == kind and (not f.platforms or platform in f.platforms)
            ),
            key=lambda f: f.order,
        )

    def default_names(self) -> set[str]:
        """Fixed names of templates whose item name the user cannot edit."""
        return {
            t.get_default_name()
            for t in self._templates
            if t.template_type in _ITEM_TYPES and not t.item_name_editable
        }
