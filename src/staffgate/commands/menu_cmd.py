"""Command: staffgate menu - Show the navigation menu for a role."""

import typer
from rich.console import Console

from staffgate.policy.catalog import Role


console = Console()


def show_menu(
    role: Role = typer.Argument(..., help="Role whose menu to show"),
) -> None:
    """Show the menu sections and modules visible to a role."""
    from staffgate.policy.menu import visible_menu

    sections = visible_menu(role)
    if not sections:
        console.print(f"[yellow]No visible modules for {role.value}.[/yellow]")
        return

    console.print(f"\n[bold cyan]Menu for {role.value}[/bold cyan]\n")
    for section in sections:
        console.print(f"[bold]{section.group.value}[/bold]")
        for module in section.modules:
            console.print(f"  - {module.value}")
    console.print()
