"""Command-line front end for gencomposer.

Lists what a catalog offers and composes selections from it::

    python -m gencomposer.cli --catalog catalog.json project-types
    python -m gencomposer.cli --catalog catalog.json compose Blank CodeBehind --add wts.Feat.SettingsStorage
"""

from __future__ import annotations

import argparse
import functools
import sys
from pathlib import Path

from gencomposer.catalog import TemplateCatalog, TemplateType, load_catalog
from gencomposer.config import CatalogContext, ComposerConfig
from gencomposer.errors import ComposerError
from gencomposer.naming import get_default_name, get_random_name
from gencomposer.resolver import GenComposer, UserSelection
from gencomposer.shell import ConsoleShell
from gencomposer.utils import (
    console,
    print_error,
    print_header,
    print_rows,
    print_success,
    print_summary_table,
    save_json,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gencomposer",
        description="Compose project selections from a template catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m gencomposer.cli --catalog catalog.json project-types\n"
            "  python -m gencomposer.cli --catalog catalog.json compose Blank CodeBehind\n"
            "  python -m gencomposer.cli compose SplitView MVVMLight --add wts.Page.Map -o sel.json\n"
        ),
    )
    parser.add_argument("--catalog", default=None, help="Path to the catalog JSON file")
    parser.add_argument("--language", default=None, help="Programming language (default: C#)")
    parser.add_argument("--platform", default=None, help="Target platform (default: Uwp)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show resolver status messages")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("project-types", help="List project types for the platform")
    sub.add_parser("frameworks", help="List front-end and back-end frameworks")

    templates = sub.add_parser("templates", help="List visible pages and features")
    templates.add_argument("--framework", default=None, help="Only templates for this framework")

    compose = sub.add_parser("compose", help="Set up a project and add items")
    compose.add_argument("project_type")
    compose.add_argument("frontend")
    compose.add_argument("--backend", default="", help="Back-end framework")
    compose.add_argument(
        "--add", action="append", default=[], metavar="IDENTITY",
        help="Template identity to add (repeatable)",
    )
    compose.add_argument(
        "--random-names", action="store_true",
        help="Name items randomly instead of by their default names",
    )
    compose.add_argument("--output", "-o", default=None, help="Write the selection as JSON")
    return parser


def _resolve_config(args: argparse.Namespace) -> ComposerConfig:
    config = ComposerConfig.from_env()
    context = CatalogContext(
        language=args.language or config.context.language,
        platform=args.platform or config.context.platform,
    )
    catalog_path = Path(args.catalog) if args.catalog else config.catalog_path
    return config.model_copy(update={"context": context, "catalog_path": catalog_path})


def _load(config: ComposerConfig) -> TemplateCatalog:
    if config.catalog_path is None:
        return TemplateCatalog.empty()
    return load_catalog(
        config.catalog_path,
        config.context,
        validate=config.resolution.validate_catalog_on_load,
    )


def _cmd_project_types(catalog: TemplateCatalog, config: ComposerConfig) -> int:
    platform = config.context.platform
    rows = [
        [p.name, p.display_name, "yes" if p.requires_pages else "no", p.description]
        for p in catalog.get_project_types(platform)
    ]
    print_rows(f"Project types ({platform})", ["Name", "Title", "Requires pages", "Description"], rows)
    return 0


def _cmd_frameworks(catalog: TemplateCatalog, config: ComposerConfig) -> int:
    platform = config.context.platform
    frameworks = [*catalog.get_frontend_frameworks(platform), *catalog.get_backend_frameworks(platform)]
    rows = [[f.name, f.display_name, f.type.value] for f in frameworks]
    print_rows(f"Frameworks ({platform})", ["Name", "Title", "Type"], rows)
    return 0


def _cmd_templates(catalog: TemplateCatalog, config: ComposerConfig, framework: str | None) -> int:
    platform = config.context.platform
    if framework:
        templates = catalog.get_item_templates(framework, platform)
    else:
        templates = catalog.get_templates(
            platform=platform,
            template_types=[TemplateType.PAGE, TemplateType.FEATURE],
            include_hidden=False,
        )
    rows = [
        [
            t.identity,
            t.template_type.value,
            t.get_default_name(),
            ", ".join(sorted(t.frontend_frameworks)) or "any",
            ", ".join(t.dependencies),
        ]
        for t in templates
    ]
    print_rows(f"Templates ({platform})", ["Identity", "Type", "Default name", "Frameworks", "Depends on"], rows)
    return 0


def _print_selection(selection: UserSelection) -> None:
    print_summary_table(
        {
            "Project type": selection.project_type,
            "Front-end": selection.frontend_framework,
            "Back-end": selection.backend_framework or "-",
            "Platform": selection.platform,
            "Language": selection.language,
            "Home page": selection.home_name or "-",
        },
        title="Selection",
    )
    rows = [
        [instance.name, instance.template.template_type.value, instance.identity]
        for instance in selection.instances()
    ]
    print_rows("Items", ["Name", "Type", "Template"], rows)


def _cmd_compose(catalog: TemplateCatalog, config: ComposerConfig, args: argparse.Namespace) -> int:
    context = config.context
    composer = GenComposer(catalog, config, shell=ConsoleShell(verbose=args.verbose))
    if args.random_names:
        name_fn = functools.partial(
            get_random_name,
            attempts=config.naming.random_name_attempts,
            length=config.naming.random_name_length,
        )
    else:
        name_fn = get_default_name

    # Resolve every requested identity before touching the selection.
    requested = []
    for identity in args.add:
        template = catalog.find_compatible(identity, args.frontend, args.backend, context.platform)
        if template is None:
            print_error(f"Unknown template for {args.frontend}: {identity}")
            return 1
        requested.append(template)

    selection = composer.setup_project(
        args.project_type,
        args.frontend,
        context.platform,
        context.language,
        name_fn=name_fn,
        backend=args.backend,
    )
    composer.add_items(selection, requested, name_fn)

    print_header(f"{selection.project_type} / {selection.frontend_framework}")
    _print_selection(selection)

    if args.output:
        path = save_json(selection.to_dict(), args.output)
        print_success(f"Selection written to {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m gencomposer.cli``."""
    args = build_parser().parse_args(argv)
    config = _resolve_config(args)

    try:
        catalog = _load(config)
        if not catalog.is_initialized:
            console.print("[yellow]No catalog loaded -- every query is empty.[/yellow]")

        if args.command == "project-types":
            return _cmd_project_types(catalog, config)
        if args.command == "frameworks":
            return _cmd_frameworks(catalog, config)
        if args.command == "templates":
            return _cmd_templates(catalog, config, args.framework)
        return _cmd_compose(catalog, config, args)
    except ComposerError as exc:
        print_error(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
