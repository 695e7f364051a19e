"""Command: staffgate validate - Check the matrix and alias configuration."""

import typer
from rich.console import Console


console = Console()


def validate() -> None:
    """Validate the permission matrix and the configured alias file.

    Exits with status 1 if any invariant is violated or the alias file
    cannot be loaded.
    """
    from staffgate.core.errors import AliasConfigError
    from staffgate.policy.catalog import Module, Role
    from staffgate.policy.matrix import DEFAULT_MATRIX
    from staffgate.policy.resolver import get_alias_table

    failed = False

    violations = DEFAULT_MATRIX.violations()
    if violations:
        failed = True
        console.print("[red]Error:[/red] Permission matrix is invalid:")
        for violation in violations:
            console.print(f"  - {violation}")
    else:
        console.print(
            f"[green]✓[/green] Permission matrix: {len(Role)} roles x "
            f"{len(Module)} modules"
        )

    try:
        table = get_alias_table()
    except AliasConfigError as e:
        failed = True
        console.print(f"[red]Error:[/red] {e.message}")
        for key, value in e.details.items():
            console.print(f"  {key}: {value}")
    else:
        console.print(f"[green]✓[/green] Position aliases: {len(table)} titles")

    if failed:
        raise typer.Exit(1)
