"""Command: staffgate matrix - Show the permission matrix."""

import typer
from rich.console import Console
from rich.table import Table

from staffgate.policy.catalog import Action, Module, Role


console = Console()


def show_matrix(
    role: Role | None = typer.Option(
        None, "--role", "-r", help="Show every action for one role"
    ),
) -> None:
    """Show the permission matrix.

    Without --role, shows which roles can view each module.
    """
    from staffgate.policy.matrix import DEFAULT_MATRIX

    if role is None:
        table = Table(title="Module visibility by role", show_header=True)
        table.add_column("Module", style="cyan", no_wrap=True)
        for r in Role:
            table.add_column(r.value, justify="center")

        for module in Module:
            row = [module.value]
            for r in Role:
                row.append("[green]✓[/green]" if DEFAULT_MATRIX.get(r, module).view else "")
            table.add_row(*row)
    else:
        table = Table(title=f"Permissions: {role.value}", show_header=True)
        table.add_column("Module", style="cyan", no_wrap=True)
        for action in Action:
            table.add_column(action.value, justify="center")
        table.add_column("Directives")

        for module, record in DEFAULT_MATRIX.permissions_for(role).items():
            row = [module.value]
            row.extend("[green]✓[/green]" if record.allows(a) else "" for a in Action)
            row.append(", ".join(sorted(d.value for d in record.directives)))
            table.add_row(*row)

    console.print()
    console.print(table)
    console.print()
