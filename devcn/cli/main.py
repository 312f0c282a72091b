"""devcn-ui CLI — Typer application."""

import logging

import typer
from rich.console import Console

from devcn.config import config
from devcn.version import __version__

app = typer.Typer(
    name="devcn-ui",
    help="devcn-ui — add registry components to your project and maintain the registry.",
    no_args_is_help=True,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", is_eager=True, help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", help="Log every step to stderr"),
):
    """devcn-ui CLI."""
    if version:
        console.print(f"devcn-ui v{__version__}")
        raise typer.Exit()
    logging.basicConfig(
        level="INFO" if verbose else config.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# ── Consumer commands ──────────────────────────────────────────────────────────
from devcn.cli.commands import add, listing  # noqa: E402

app.command(name="add", help="Add components (and their dependencies) to your project")(add.add_components)
app.command(name="list", help="List components available in the registry")(listing.list_components)
app.command(name="ls", hidden=True)(listing.list_components)

# ── Registry maintenance ───────────────────────────────────────────────────────
from devcn.cli.commands import registry as registry_cmd  # noqa: E402
from devcn.cli.commands import examples as examples_cmd  # noqa: E402

registry_app = typer.Typer(name="registry", help="Registry build and validation commands.")
registry_app.command("generate", help="Regenerate index.json, types and the catalogue page")(registry_cmd.registry_generate)
registry_app.command("validate", help="Validate every manifest and the index")(registry_cmd.registry_validate)
registry_app.command("register", help="Register every unregistered component in packages/")(registry_cmd.registry_register)
registry_app.command("discover", help="Report discovered components and write component-map.json")(registry_cmd.registry_discover)
registry_app.command("new", help="Scaffold a new component")(registry_cmd.registry_new)
app.add_typer(registry_app)

examples_app = typer.Typer(name="examples", help="Disabled documentation example commands.")
examples_app.command("analyze", help="Categorise disabled examples")(examples_cmd.examples_analyze)
examples_app.command("restore", help="Re-enable disabled examples that look restorable")(examples_cmd.examples_restore)
registry_app.add_typer(examples_app)


if __name__ == "__main__":
    app()
