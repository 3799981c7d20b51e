"""Shared pytest fixtures for the gencomposer test suite.

Provides reusable fixtures for:
- A small Uwp/C# template catalog document (plus a VB and a Wpf template so
  context scoping is observable)
- The loaded ``TemplateCatalog`` and a ``GenComposer`` reporting into a
  ``RecordingShell``
- The catalog written to a temporary JSON file
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from gencomposer.catalog import TemplateCatalog, build_catalog
from gencomposer.config import CatalogContext, ComposerConfig
from gencomposer.resolver import GenComposer
from gencomposer.shell import RecordingShell

BOTH = ["CodeBehind", "MVVMLight"]


def _page(identity: str, default_name: str, **extra: Any) -> dict[str, Any]:
    return {
        "identity": identity,
        "name": default_name,
        "template_type": "Page",
        "platform": "Uwp",
        "language": "C#",
        "frontend_frameworks": BOTH,
        "default_name": default_name,
        **extra,
    }


def _feature(identity: str, default_name: str, **extra: Any) -> dict[str, Any]:
    return {
        "identity": identity,
        "name": default_name,
        "template_type": "Feature",
        "platform": "Uwp",
        "language": "C#",
        "frontend_frameworks": BOTH,
        "default_name": default_name,
        **extra,
    }


# ---------------------------------------------------------------------------
# Catalog document
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog_data() -> dict[str, Any]:
    """A catalog resembling a small Windows Template Studio repository."""
    return {
        "project_types": [
            {
                "name": "Blank",
                "display_name": "Blank",
                "description": "A single page project.",
                "order": 0,
                "platforms": ["Uwp"],
                "requires_pages": True,
            },
            {
                "name": "SplitView",
                "display_name": "Navigation Pane",
                "description": "A navigation menu with pages.",
                "order": 1,
                "platforms": ["Uwp"],
                "requires_pages": True,
            },
            {
                "name": "FeatureOnly",
                "display_name": "Feature only",
                "description": "A project with no mandatory pages.",
                "order": 2,
                "platforms": ["Uwp"],
            },
            {
                "name": "Legacy",
                "display_name": "Legacy",
                "description": "",
                "order": 3,
                "platforms": ["Uwp"],
            },
            {
                "name": "Ribbon",
                "display_name": "Ribbon",
                "description": "A ribbon project.",
                "order": 0,
                "platforms": ["Wpf"],
            },
        ],
        "frameworks": [
            {"name": "CodeBehind", "display_name": "Code Behind", "type": "frontend", "order": 0, "platforms": ["Uwp", "Wpf"]},
            {"name": "MVVMLight", "display_name": "MVVM Light", "type": "frontend", "order": 1, "platforms": ["Uwp"]},
            {"name": "Prism", "display_name": "Prism", "type": "frontend", "order": 2, "platforms": ["Wpf"]},
            {"name": "CoreApi", "display_name": "ASP.NET Core", "type": "backend", "order": 0, "platforms": ["Uwp"]},
        ],
        "templates": [
            {
                "identity": "wts.Proj.Blank",
                "name": "Blank",
                "template_type": "Project",
                "platform": "Uwp",
                "language": "C#",
                "frontend_frameworks": BOTH,
                "project_types": ["Blank", "FeatureOnly"],
                "layout": [
                    {"name": "Main", "template_group_identity": "wts.Page.Blank", "project_type": ["Blank"]},
                ],
            },
            {
                "identity": "wts.Proj.SplitView",
                "name": "SplitView",
                "template_type": "Project",
                "platform": "Uwp",
                "language": "C#",
                "frontend_frameworks": BOTH,
                "backend_frameworks": ["CoreApi"],
                "project_types": ["SplitView"],
                "layout": [
                    {"name": "Main", "template_group_identity": "wts.Page.Blank"},
                    {"name": "Settings", "template_group_identity": "wts.Page.Settings", "readonly": True},
                ],
            },
            _page(
                "wts.Page.Blank.CodeBehind",
                "Blank",
                group_identity="wts.Page.Blank",
                frontend_frameworks=["CodeBehind"],
                multiple_instance=True,
                item_name_editable=True,
            ),
            _page(
                "wts.Page.Blank.MVVMLight",
                "Blank",
                group_identity="wts.Page.Blank",
                frontend_frameworks=["MVVMLight"],
                multiple_instance=True,
                item_name_editable=True,
            ),
            _page(
                "wts.Page.Settings",
                "Settings",
                dependencies=["wts.Feat.SettingsStorage"],
            ),
            _page("wts.Page.Map", "Map", multiple_instance=True, item_name_editable=True),
            _page(
                "wts.Page.ImageGallery",
                "ImageGallery",
                item_name_editable=True,
                dependencies=["wts.Feat.SampleData"],
            ),
            _feature("wts.Feat.SettingsStorage", "SettingsStorage"),
            _feature("wts.Feat.SampleData", "SampleDataService", hidden=True),
            _feature("wts.Feat.FirstRunPrompt", "FirstRunPrompt", dependencies=["wts.Page.Settings"]),
            _feature("wts.Feat.Toast", "ToastNotifications", dependencies=["wts.Feat.ToastHelper"]),
            _feature("wts.Feat.ToastHelper", "ToastHelper", frontend_frameworks=["MVVMLight"], hidden=True),
            _feature("wts.Feat.CycleA", "CycleA", dependencies=["wts.Feat.CycleB"]),
            _feature("wts.Feat.CycleB", "CycleB", dependencies=["wts.Feat.CycleA"]),
            _feature(
                "wts.Feat.WebApi",
                "WebApi",
                backend_frameworks=["CoreApi"],
            ),
            _page("wts.Page.Blank.VB", "Blank", language="VisualBasic", group_identity="wts.Page.Blank"),
            _page("wts.Page.Ribbon", "Ribbon", platform="Wpf", frontend_frameworks=["Prism"]),
        ],
    }


@pytest.fixture
def context() -> CatalogContext:
    return CatalogContext(language="C#", platform="Uwp")


@pytest.fixture
def catalog(catalog_data: dict[str, Any], context: CatalogContext) -> TemplateCatalog:
    """The C#/Uwp catalog built from ``catalog_data``."""
    return build_catalog(catalog_data, context)


@pytest.fixture
def shell() -> RecordingShell:
    return RecordingShell()


@pytest.fixture
def composer(catalog: TemplateCatalog, shell: RecordingShell) -> GenComposer:
    return GenComposer(catalog, ComposerConfig(), shell=shell)


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict[str, Any]) -> Path:
    """``catalog_data`` written to ``<tmp>/catalog.json``."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data, indent=2), encoding="utf-8")
    return path
