"""devcn-ui list — show components published in the registry."""

import asyncio

from rich import box
from rich.console import Console
from rich.table import Table

console = Console()


def list_components():
    """List every component available to ``devcn-ui add``.

    Falls back to the built-in component list when the registry is
    unreachable.

    Example:
        devcn-ui list
    """
    from devcn.config import config
    from devcn.installer import RegistryClient

    async def _fetch():
        async with RegistryClient(config.registry_url, timeout=config.fetch_timeout) as client:
            return await client.fetch_index()

    listing = asyncio.run(_fetch())

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        title=f"[bold]{len(listing.components)} Components[/bold]",
    )
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="dim")
    table.add_column("Description")
    for component in listing.components:
        table.add_row(component.name, component.type, component.description)
    console.print(table)

    if listing.is_fallback:
        console.print("[yellow]Registry unreachable, showing the built-in component list.[/yellow]")
    console.print(f"\nUsage: [bold]npx {config.cli_name} add <component>[/bold]")
