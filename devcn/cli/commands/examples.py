"""CLI commands for disabled documentation examples.

Accessed via: ``devcn-ui registry examples <subcommand>``
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

console = Console()

_HEADINGS = {
    "simple": ("Simple Examples", "need manual fixes"),
    "complex": ("Complex Examples", "likely to work after restore"),
    "ai": ("AI Components", "need the @repo/ai package"),
    "broken": ("Broken/Unknown", "need investigation"),
}


def _examples_dir(root: Optional[Path]) -> Path:
    from devcn.config import config
    from devcn.registry import RegistryLayout
    return RegistryLayout.from_root(root if root is not None else config.root_dir).examples_dir


def examples_analyze(
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Monorepo root."),
):
    """Categorise every ``*.disabled`` example.

    Example:

        devcn-ui registry examples analyze
    """
    from devcn.registry import analyze_disabled_examples

    categories = analyze_disabled_examples(_examples_dir(root))
    for category, names in categories.items():
        title, hint = _HEADINGS[category.value]
        console.print(f"\n[bold]{title}[/bold] ({len(names)}) [dim]- {hint}[/dim]")
        for name in names:
            console.print(f"  • {name}")


def examples_restore(
    root: Optional[Path] = typer.Option(None, "--root", "-r", help="Monorepo root."),
):
    """Rename restorable ``*.disabled`` examples back to ``*.tsx``.

    Simple placeholder examples are skipped; they need a real implementation.

    Example:

        devcn-ui registry examples restore
    """
    from devcn.registry import restore_examples

    result = restore_examples(_examples_dir(root))
    for name in result.restored:
        console.print(f"[green]✓[/green] Restored {name}")
    for name in result.skipped:
        console.print(f"[yellow]⚠[/yellow] Skipped {name} - needs manual fix (simple example)")
    for name, reason in result.failures.items():
        console.print(f"[red]✗[/red] Failed to restore {name}: {reason}")

    console.print(f"\nRestored: {len(result.restored)}  Skipped: {len(result.skipped) + len(result.failures)}")
    if result.failures:
        raise typer.Exit(1)
