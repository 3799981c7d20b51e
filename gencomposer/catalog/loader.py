"""Catalog loading and authoring-time validation.

Reads a JSON catalog document, scopes it to a ``CatalogContext`` and checks
the invariants the resolver relies on:

* identities are unique,
* every declared dependency and layout slot names an existing template,
* no dependency cycle passes through a multiple-instance template.

The last rule is what keeps dependency expansion finite: a cycle made only of
single-instance templates closes because each of them is added at most once,
while a multiple-instance template on a cycle could be added forever.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from gencomposer.catalog.models import CatalogDocument, TemplateDescriptor
from gencomposer.catalog.repository import TemplateCatalog
from gencomposer.config import CatalogContext
from gencomposer.errors import CatalogValidationError, DependencyCycleViolation
from gencomposer.utils import load_json, print_warning


def load_catalog(
    path: str | Path,
    context: CatalogContext,
    *,
    validate: bool = True,
) -> TemplateCatalog:
    """Load the catalog at *path* for *context*.

    A missing file yields an uninitialised catalog, whose queries all return
    empty lists.

    Raises:
        CatalogValidationError: If the document is malformed.
        DependencyCycleViolation: If a cycle passes through a
            multiple-instance template.
    """
    file_path = Path(path)
    if not file_path.exists():
        print_warning(f"Template catalog not found: {file_path}")
        return TemplateCatalog.empty()

    try:
        data = load_json(file_path)
    except json.JSONDecodeError as exc:
        raise CatalogValidationError([f"{file_path}: not valid JSON ({exc})"]) from exc
    return build_catalog(data, context, validate=validate)


def build_catalog(
    data: dict[str, Any] | CatalogDocument,
    context: CatalogContext,
    *,
    validate: bool = True,
) -> TemplateCatalog:
    """Build a catalog from an in-memory document, scoped to *context*.

    Raises:
        CatalogValidationError: If *data* does not match the catalog schema.
    """
    if isinstance(data, CatalogDocument):
        document = data
    else:
        try:
            document = CatalogDocument.model_validate(data)
        except ValidationError as exc:
            raise CatalogValidationError(
                [
                    f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
                    for error in exc.errors()
                ]
            ) from exc
    scoped = document.model_copy(
        update={
            "templates": [
                t
                for t in document.templates
                if t.language == context.language and t.platform == context.platform
            ]
        }
    )
    if validate:
        validate_catalog(scoped.templates)
    return TemplateCatalog(context, scoped)


def validate_catalog(templates: list[TemplateDescriptor]) -> None:
    """Check a list of descriptors for authoring defects."""
    problems: list[str] = []

    seen: set[str] = set()
    for template in templates:
        if template.identity in seen:
            problems.append(f"Duplicate template identity: {template.identity}")
        seen.add(template.identity)

    for template in templates:
        for dependency in template.dependencies:
            if not any(t.matches(dependency) for t in templates):
                problems.append(
                    f"{template.identity} depends on unknown template {dependency}"
                )
        for item in template.layout:
            if not any(t.matches(item.template_group_identity) for t in templates):
                problems.append(
                    f"{template.identity} layout slot {item.name!r} names unknown "
                    f"template {item.template_group_identity}"
                )

    if problems:
        raise CatalogValidationError(problems)

    _check_cycles(templates)


def _check_cycles(templates: list[TemplateDescriptor]) -> None:
    """Depth-first search for dependency cycles through multi-instance templates."""
    edges: dict[str, list[str]] = {
        t.identity: [d.identity for dep in t.dependencies for d in templates if d.matches(dep)]
        for t in templates
    }
    by_identity = {t.identity: t for t in templates}

    white, grey, black = 0, 1, 2
    color = {identity: white for identity in edges}
    stack: list[str] = []

    def visit(identity: str) -> None:
        color[identity] = grey
        stack.append(identity)
        for target in edges[identity]:
            if color[target] == grey:
                cycle = stack[stack.index(target):] + [target]
                if any(by_identity[i].multiple_instance for i in cycle):
                    raise DependencyCycleViolation(
                        "Dependency cycle through a multiple-instance template: "
                        + " -> ".join(cycle),
                        path=cycle,
                    )
            elif color[target] == white:
                visit(target)
        stack.pop()
        color[identity] = black

    for identity in edges:
        if color[identity] == white:
            visit(identity)
