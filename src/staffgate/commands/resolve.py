"""Command: staffgate resolve - Resolve a job title to a role."""

import typer
from rich.console import Console


console = Console()


def resolve(
    position: str = typer.Argument(..., help="Job title exactly as stored"),
) -> None:
    """Resolve a job title to a role.

    Matching is exact and case-sensitive. Unknown titles resolve to the
    least-privileged role.
    """
    from staffgate.core.errors import AliasConfigError
    from staffgate.policy.resolver import get_alias_table, resolve_position

    try:
        table = get_alias_table()
    except AliasConfigError as e:
        console.print(f"[red]Error:[/red] {e.message} ({e.details.get('path', '')})")
        raise typer.Exit(1)

    resolution = resolve_position(position, table)

    if resolution.matched:
        console.print(f"[green]✓[/green] Matched alias: {position}")
    else:
        console.print(
            f"[yellow]Warning:[/yellow] '{position}' is not a known position. "
            "Falling back to the least-privileged role."
        )

    console.print(f"Role: [bold]{resolution.role.value}[/bold]")
