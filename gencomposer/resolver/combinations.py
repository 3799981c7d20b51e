"""Enumerate the combinations a catalog can compose.

Used to drive exhaustive checks over a catalog: every described project type
with every front-end framework it supports, and every visible page or feature
template per framework.
"""

from __future__ import annotations

from typing import NamedTuple

from gencomposer.catalog.models import FrameworkType
from gencomposer.resolver.composer import GenComposer


class ProjectCombination(NamedTuple):
    project_type: str
    framework: str
    platform: str
    language: str


class ItemCombination(NamedTuple):
    template_name: str
    project_type: str
    framework: str
    platform: str
    identity: str
    language: str


def _project_types(composer: GenComposer, platform: str) -> list[str]:
    supported = set(composer.get_supported_project_types(platform))
    return [
        p.name
        for p in composer.catalog.get_project_types(platform)
        if p.name in supported and p.description
    ]


def _frontends(composer: GenComposer, project_type: str, platform: str) -> list[str]:
    supported = {
        f.name
        for f in composer.get_supported_frameworks(project_type, platform)
        if f.type == FrameworkType.FRONTEND
    }
    return [
        f.name for f in composer.catalog.get_frontend_frameworks(platform) if f.name in supported
    ]


def get_all_project_combinations(composer: GenComposer) -> list[ProjectCombination]:
    """Every (project type, framework) pair for the composer's catalog context.

    Project types without a description are skipped.
    """
    context = composer.catalog.context
    if context is None:
        return []
    return [
        ProjectCombination(project_type, framework, context.platform, context.language)
        for project_type in _project_types(composer, context.platform)
        for framework in _frontends(composer, project_type, context.platform)
    ]


def get_page_and_feature_combinations(
    composer: GenComposer,
    framework_filter: str,
) -> list[ItemCombination]:
    """Every visible page/feature template usable with *framework_filter*."""
    context = composer.catalog.context
    if context is None:
        return []
    result: list[ItemCombination] = []
    for project_type in _project_types(composer, context.platform):
        for framework in _frontends(composer, project_type, context.platform):
            if framework != framework_filter:
                continue
            for template in composer.catalog.get_item_templates(framework, context.platform):
                result.append(
                    ItemCombination(
                        template.name,
                        project_type,
                        framework,
                        context.platform,
                        template.identity,
                        context.language,
                    )
                )
    return result
