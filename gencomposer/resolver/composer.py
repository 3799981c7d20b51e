"""Template composition and dependency resolution.

``GenComposer`` turns a project type, a pair of frameworks and a platform into
a complete ``UserSelection``: it looks up the default page layout in the
catalog, adds each layout page, and closes over declared dependencies.

Dependency expansion is an explicit worklist.  Every add operation keeps a
FIFO queue of templates still to add and a set of identities already queued,
so a template is queued at most once per operation and a template that is
already part of the selection is never queued at all.  The loop therefore
terminates after at most one iteration per catalog template; ``max_instances``
is only a backstop against catalogs that were not validated on load.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable

from pydantic import BaseModel

from gencomposer.catalog.models import FrameworkInfo, LayoutItem, TemplateDescriptor
from gencomposer.catalog.repository import TemplateCatalog
from gencomposer.config import ComposerConfig
from gencomposer.errors import DependencyCycleViolation, LayoutRequiredError
from gencomposer.naming import (
    ExistingNamesValidator,
    build_item_validators,
    get_default_name,
    infer,
)
from gencomposer.resolver.selection import TemplateInstance, UserSelection
from gencomposer.shell import GenShell, NullShell

NameFn = Callable[[TemplateDescriptor], str]


class LayoutInfo(BaseModel):
    """A layout slot together with the page template that fills it."""

    layout: LayoutItem
    template: TemplateDescriptor


class GenComposer:
    """Resolves layouts and dependency closures against a catalog.

    The catalog is only read, so one catalog can back several composers (or
    several threads) at once; each ``UserSelection`` belongs to one caller.
    """

    def __init__(
        self,
        catalog: TemplateCatalog,
        config: ComposerConfig | None = None,
        shell: GenShell | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config or ComposerConfig()
        self.shell = shell or NullShell()

    # -- Catalog-derived queries -------------------------------------------

    def get_supported_project_types(self, platform: str) -> list[str]:
        """Project types provided by at least one project template."""
        names: set[str] = set()
        for project in self.catalog.get_project_templates(platform):
            names.update(project.project_types)
        return sorted(names)

    def get_supported_frameworks(self, project_type: str, platform: str) -> list[FrameworkInfo]:
        """Front-end and back-end frameworks a project type can be built with."""
        frontends: set[str] = set()
        backends: set[str] = set()
        for project in self.catalog.get_project_templates(platform):
            if project.project_types and project_type not in project.project_types:
                continue
            frontends.update(project.frontend_frameworks)
            backends.update(project.backend_frameworks)

        return [
            *(f for f in self.catalog.get_frontend_frameworks(platform) if f.name in frontends),
            *(f for f in self.catalog.get_backend_frameworks(platform) if f.name in backends),
        ]

    def get_layout_templates(
        self,
        project_type: str,
        frontend: str,
        backend: str,
        platform: str,
    ) -> list[LayoutInfo]:
        """Return the default page set for the combination.

        An empty list is a valid answer: some project types have no
        mandatory pages.
        """
        layouts: list[LayoutInfo] = []
        seen: set[str] = set()
        for project in self.catalog.get_project_templates(platform):
            if project.project_types and project_type not in project.project_types:
                continue
            if not project.supports(frontend, backend):
                continue
            for item in project.layout:
                if not item.applies_to(project_type):
                    continue
                template = self.catalog.find_compatible(
                    item.template_group_identity, frontend, backend, platform
                )
                if template is None:
                    self.shell.write_status(
                        f"No {frontend} template for layout slot {item.name} "
                        f"({item.template_group_identity})"
                    )
                    continue
                if template.identity in seen:
                    continue
                seen.add(template.identity)
                layouts.append(LayoutInfo(layout=item, template=template))
        return layouts

    def get_all_dependencies(
        self,
        template: TemplateDescriptor,
        frontend: str,
        backend: str,
        platform: str,
    ) -> list[TemplateDescriptor]:
        """Direct dependencies of *template* that fit the frameworks and platform.

        Hidden dependencies are included.  This does not recurse.
        """
        dependencies: list[TemplateDescriptor] = []
        for identity in template.dependencies:
            dependency = self.catalog.find_compatible(identity, frontend, backend, platform)
            if dependency is None:
                self.shell.write_status(
                    f"{template.identity}: no {frontend} variant of dependency {identity}"
                )
                continue
            if dependency not in dependencies:
                dependencies.append(dependency)
        return dependencies

    # -- Selection building ------------------------------------------------

    def add_item(
        self,
        selection: UserSelection,
        template: TemplateDescriptor,
        name_fn: NameFn = get_default_name,
    ) -> list[TemplateInstance]:
        """Add *template* and its dependency closure to *selection*.

        A single-instance template that is already present is skipped.  The
        new item's name comes from *name_fn*, passed through the naming
        pipeline.

        Returns:
            The instances created, root first.
        """
        if not template.multiple_instance and selection.is_added(template):
            return []
        name = self._infer_name(selection, template, name_fn(template))
        return self._add_closure(selection, template, name)

    def add_named_item(
        self,
        selection: UserSelection,
        name: str,
        template: TemplateDescriptor,
    ) -> list[TemplateInstance]:
        """Like ``add_item`` but skips the reserved and default-name rules for the root.

        Layout slot names (``Main``...) go through here because they would not
        survive the reserved-name rules meant for user-entered names.  The name
        is still kept unique: if an earlier item already holds it, a counter
        suffix is appended.
        """
        if not template.multiple_instance and selection.is_added(template):
            return []
        name = infer(
            name,
            [ExistingNamesValidator(selection.used_names())],
            self.config.naming.max_infer_attempts,
        )
        return self._add_closure(selection, template, name)

    def add_items(
        self,
        selection: UserSelection,
        templates: Iterable[TemplateDescriptor],
        name_fn: NameFn = get_default_name,
    ) -> list[TemplateInstance]:
        added: list[TemplateInstance] = []
        for template in templates:
            added.extend(self.add_item(selection, template, name_fn))
        return added

    def setup_project(
        self,
        project_type: str,
        frontend: str,
        platform: str,
        language: str,
        name_fn: NameFn | None = None,
        backend: str = "",
    ) -> UserSelection:
        """Build a selection holding the layout pages and their dependencies.

        With no *name_fn* (or the default-name function) layout pages are
        named after their slot; any other *name_fn* goes through the naming
        pipeline.

        Raises:
            LayoutRequiredError: If the project type requires pages and none
                were added.
            NameGenerationExhausted: If a page or dependency cannot be named.
        """
        selection = UserSelection(
            project_type=project_type,
            frontend_framework=frontend,
            backend_framework=backend,
            platform=platform,
            language=language,
        )
        context = self.catalog.context
        if context is not None and context.language != language:
            self.shell.write_output(
                f"Catalog is loaded for {context.language}, selection asks for {language}"
            )

        for item in self.get_layout_templates(project_type, frontend, backend, platform):
            if name_fn is None or name_fn is get_default_name:
                self.add_named_item(selection, item.layout.name, item.template)
            else:
                self.add_item(selection, item.template, name_fn)

        if selection.pages:
            selection.home_name = selection.pages[0].name
        else:
            info = self.catalog.get_project_type(project_type)
            if info is not None and info.requires_pages:
                raise LayoutRequiredError(project_type, frontend, platform)

        self.shell.write_output(
            f"{project_type}/{frontend} on {platform}: "
            f"{len(selection.pages)} page(s), {len(selection.features)} feature(s)"
        )
        return selection

    # -- Internals ---------------------------------------------------------

    def _infer_name(
        self,
        selection: UserSelection,
        template: TemplateDescriptor,
        suggested_name: str,
    ) -> str:
        naming = self.config.naming
        validators = build_item_validators(
            selection.used_names(),
            template,
            reserved_names=naming.reserved_for(selection.language),
            default_names=self.catalog.default_names(),
        )
        return infer(suggested_name, validators, naming.max_infer_attempts)

    def _add_closure(
        self,
        selection: UserSelection,
        root: TemplateDescriptor,
        root_name: str,
    ) -> list[TemplateInstance]:
        limit = self.config.resolution.max_instances
        added: list[TemplateInstance] = []
        queue: deque[tuple[TemplateDescriptor, str | None]] = deque([(root, root_name)])
        queued = {root.identity}
        processed = 0

        while queue:
            template, name = queue.popleft()
            processed += 1
            if processed > limit:
                raise DependencyCycleViolation(
                    f"Adding {root.identity} exceeded {limit} templates; "
                    "the catalog likely has a dependency cycle",
                    path=[root.identity, template.identity],
                )

            if name is None:
                name = self._infer_name(selection, template, template.get_default_name())
            instance = selection.add(name, template)
            if instance is not None:
                added.append(instance)
                self.shell.write_status(f"Added {template.template_type.value} {name} ({template.identity})")

            for dependency in self.get_all_dependencies(
                template,
                selection.frontend_framework,
                selection.backend_framework,
                selection.platform,
            ):
                if dependency.identity in queued or selection.is_added(dependency):
                    continue
                queued.add(dependency.identity)
                queue.append((dependency, None))

        return added
