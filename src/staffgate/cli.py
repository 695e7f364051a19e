"""Main staffgate CLI application."""

import typer
from pydantic import ValidationError
from rich.console import Console

from staffgate import __version__
from staffgate.commands import check, matrix_cmd, menu_cmd, resolve, validate
from staffgate.core.logging import configure_logging


console = Console()

app = typer.Typer(
    name="staffgate",
    help="Inspect and validate the staff portal permission policy.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register commands
app.command(name="resolve")(resolve.resolve)
app.command(name="check")(check.check)
app.command(name="matrix")(matrix_cmd.show_matrix)
app.command(name="menu")(menu_cmd.show_menu)
app.command(name="validate")(validate.validate)


@app.callback(invoke_without_command=True)
def version_callback(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit."
    ),
) -> None:
    """staffgate - staff portal authorization policy."""
    if version:
        console.print(f"[bold cyan]staffgate[/bold cyan] version {__version__}")
        raise typer.Exit()

    try:
        configure_logging()
    except ValidationError as e:
        console.print("[red]Error:[/red] Invalid STAFFGATE_* settings:")
        for error in e.errors(include_url=False):
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"  {field}: {error['msg']}")
        raise typer.Exit(1)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
