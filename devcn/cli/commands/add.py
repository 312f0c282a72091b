"""devcn-ui add — install registry components into the current project."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

console = Console()


def add_components(
    components: list[str] = typer.Argument(
        ..., help="One or more component names, e.g. 'button card dialog'."
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip prompts (implied when CI is set)."
    ),
    cwd: Path = typer.Option(
        Path("."), "--cwd", "-c", help="Project directory to install into."
    ),
):
    """Add components and everything they depend on.

    Registry dependencies are installed first, then npm packages with the
    project's package manager (pnpm, yarn or npm, chosen by lockfile).

    Examples:

        devcn-ui add button

        devcn-ui add button card dialog --yes
    """
    from devcn.config import config
    from devcn.installer import ComponentInstaller

    names = [c.strip() for c in components if c.strip()]
    if not names:
        console.print("[red]Error:[/red] no component names given.")
        raise typer.Exit(1)

    assume_yes = yes or config.ci
    installer = ComponentInstaller(config, cwd=cwd, assume_yes=assume_yes)

    if assume_yes:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(f"Adding {', '.join(names)}...", total=None)
            result = asyncio.run(installer.add(names))
    else:
        console.print(f"Adding {', '.join(names)} with [bold]{installer.package_manager.value}[/bold]...")
        result = asyncio.run(installer.add(names))

    for name in result.installed:
        console.print(f"[green]✓[/green] Added [bold]{name}[/bold]")
    for name in result.external:
        if name not in result.failures:
            console.print(f"[green]✓[/green] Added [bold]{name}[/bold] [dim](upstream)[/dim]")
    if result.dependencies:
        console.print(f"[dim]Dependencies: {', '.join(result.dependencies)}[/dim]")
    if result.dev_dependencies:
        console.print(f"[dim]Dev dependencies: {', '.join(result.dev_dependencies)}[/dim]")

    if not result.ok:
        for name, reason in result.failures.items():
            console.print(f"[red]✗[/red] {name}: {reason}")
        raise typer.Exit(1)
