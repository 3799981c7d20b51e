"""gencomposer dependency resolver.

Composes a ``UserSelection`` from a catalog: layout pages first, then the
transitive closure of every template added.

Quick usage::

    from gencomposer.resolver import GenComposer

    composer = GenComposer(catalog)
    selection = composer.setup_project("Blank", "CodeBehind", "Uwp", "C#")
    composer.add_item(selection, catalog.get("wts.Feat.SettingsStorage"))
"""

from gencomposer.resolver.combinations import (
    ItemCombination,
    ProjectCombination,
    get_all_project_combinations,
    get_page_and_feature_combinations,
)
from gencomposer.resolver.composer import GenComposer, LayoutInfo, NameFn
from gencomposer.resolver.selection import TemplateInstance, UserSelection

__all__ = [
    "GenComposer",
    "ItemCombination",
    "LayoutInfo",
    "NameFn",
    "ProjectCombination",
    "TemplateInstance",
    "UserSelection",
    "get_all_project_combinations",
    "get_page_and_feature_combinations",
]
