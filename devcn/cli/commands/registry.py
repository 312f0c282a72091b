"""CLI commands for building and checking the registry.

Accessed via: ``devcn-ui registry <subcommand>``
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

console = Console()

_ROOT_HELP = "Monorepo root (defaults to DEVCN_ROOT_DIR or the current directory)."


def _layout(root: Optional[Path]):
    from devcn.config import config
    from devcn.registry import RegistryLayout
    return RegistryLayout.from_root(root if root is not None else config.root_dir)


# ─── generate ────────────────────────────────────────────────────────────────


def registry_generate(
    root: Optional[Path] = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
):
    """Regenerate ``index.json``, ``registry-types.ts`` and ``registry.mdx``.

    Example:

        devcn-ui registry generate
    """
    from devcn.config import config
    from devcn.exceptions import RegistryNotFoundError
    from devcn.registry import generate_registry

    layout = _layout(root)
    try:
        result = generate_registry(layout, config)
    except RegistryNotFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    for component in result.index.components:
        console.print(f"[green]✓[/green] {component.name}")
    for stem, reason in result.failures.items():
        console.print(f"[yellow]⚠[/yellow] Skipped {stem}: {reason}")

    console.print("\nFiles updated:")
    for path in result.written:
        console.print(f"  • {path}")
    console.print(
        f"\nComponents: [bold]{len(result.index.components)}[/bold]  "
        f"Total files: [bold]{result.total_files}[/bold]"
    )
    console.print(f"Registry available at: {config.registry_url}/registry/index.json")

    if result.failures:
        raise typer.Exit(1)


# ─── validate ────────────────────────────────────────────────────────────────


def registry_validate(
    root: Optional[Path] = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
):
    """Validate every manifest, its example/doc files, and the index.

    Exits 1 when any error is found. Warnings alone do not fail.

    Example:

        devcn-ui registry validate
    """
    from devcn.exceptions import RegistryNotFoundError
    from devcn.registry import validate_registry
    from devcn.types import IssueLevel

    try:
        report = validate_registry(_layout(root))
    except RegistryNotFoundError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    if report.issues:
        table = Table(box=box.ROUNDED, header_style="bold dim")
        table.add_column("Component", style="cyan")
        table.add_column("Level", width=8)
        table.add_column("Message")
        for issue in report.issues:
            level = (
                "[red]error[/red]" if issue.level == IssueLevel.ERROR
                else "[yellow]warning[/yellow]"
            )
            table.add_row(issue.component, level, issue.message)
        console.print(table)

    console.print(
        f"\nFiles validated: {report.files_validated}  "
        f"Errors: {len(report.errors)}  Warnings: {len(report.warnings)}"
    )
    if not report.ok:
        console.print("[red]✗ Validation failed. Please fix the errors above.[/red]")
        raise typer.Exit(1)
    if report.warnings:
        console.print("[yellow]Validation completed with warnings.[/yellow]")
    else:
        console.print("[green]✓ All validations passed![/green]")


# ─── register ────────────────────────────────────────────────────────────────


def registry_register(
    root: Optional[Path] = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
):
    """Write manifests, examples and docs for every unregistered component.

    Example:

        devcn-ui registry register
    """
    from devcn.config import config
    from devcn.registry import register_all_components

    result = register_all_components(_layout(root), config)

    for name in result.registered:
        console.print(f"[green]✓[/green] Registered [bold]{name}[/bold]")
    for name, reason in result.failures.items():
        console.print(f"[red]✗[/red] {name}: {reason}")

    console.print(
        f"\nRegistered: {len(result.registered)}  "
        f"Skipped (already exists): {len(result.skipped)}  "
        f"Failed: {len(result.failures)}"
    )
    if result.index_regenerated:
        console.print("[green]✓[/green] Registry index updated")
    if result.failures:
        raise typer.Exit(1)


# ─── discover ────────────────────────────────────────────────────────────────


def registry_discover(
    root: Optional[Path] = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
):
    """Find every component in ``packages/`` and show which are registered.

    Writes ``component-map.json`` at the monorepo root.

    Example:

        devcn-ui registry discover
    """
    from devcn.registry import discover_components, write_component_map

    layout = _layout(root)
    components = discover_components(layout)
    if not components:
        console.print(
            "[yellow]No components found.[/yellow] Expected locations:\n"
            "  • packages/<package>/components/\n"
            "  • packages/<package>/src/components/\n"
            "  • packages/<package>/lib/components/"
        )
        return

    table = Table("Package", "Component", "Status", box=box.ROUNDED, header_style="bold dim")
    for component in components:
        status = "[green]registered[/green]" if component.registered else "[red]not registered[/red]"
        table.add_row(component.package, component.name, status)
    console.print(table)

    unregistered = [c for c in components if not c.registered]
    if unregistered:
        console.print(
            f"\n[yellow]{len(unregistered)} unregistered component(s).[/yellow] "
            "Run [bold]devcn-ui registry register[/bold] to register them."
        )
    else:
        console.print("\n[green]✓[/green] All discovered components are already registered!")

    map_path = write_component_map(layout, components)
    console.print(f"Component map saved to: {map_path}")


# ─── new ─────────────────────────────────────────────────────────────────────


def registry_new(
    name: str = typer.Argument(..., help="Component name in kebab-case. Example: my-button"),
    package: str = typer.Argument("ui", help="Package under packages/ that owns it."),
    root: Optional[Path] = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing component."),
):
    """Scaffold a component source, example, docs page and manifest.

    Example:

        devcn-ui registry new my-button ui
    """
    from devcn.config import config
    from devcn.registry import scaffold_component

    layout = _layout(root)
    try:
        created = scaffold_component(
            layout, name, package=package, cli_name=config.cli_name, force=force
        )
    except (ValueError, FileExistsError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Component [bold]{name}[/bold] generated:")
    for path in created:
        console.print(f"  • {path}")
    console.print(
        "\nNext steps:\n"
        "  1. Customize the component implementation\n"
        "  2. Update the example and documentation\n"
        "  3. [bold]devcn-ui registry generate[/bold] to refresh the index"
    )
