"""gencomposer template catalog.

Holds the template descriptors a project can be composed from, together with
project-type and framework metadata, and answers read-only queries over them.

Usage::

    from gencomposer.catalog import load_catalog
    from gencomposer.config import CatalogContext

    catalog = load_catalog("catalog.json", CatalogContext(language="C#", platform="Uwp"))
    for project_type in catalog.get_project_types("Uwp"):
        print(project_type.name)
"""

from gencomposer.catalog.loader import build_catalog, load_catalog, validate_catalog
from gencomposer.catalog.models import (
    CatalogDocument,
    FrameworkInfo,
    FrameworkType,
    LayoutItem,
    ProjectTypeInfo,
    TemplateDescriptor,
    TemplateType,
)
from gencomposer.catalog.repository import TemplateCatalog

__all__ = [
    "build_catalog",
    "load_catalog",
    "validate_catalog",
    "CatalogDocument",
    "FrameworkInfo",
    "FrameworkType",
    "LayoutItem",
    "ProjectTypeInfo",
    "TemplateCatalog",
    "TemplateDescriptor",
    "TemplateType",
]
