"""Command: staffgate check - Evaluate a single permission."""

import typer
from rich.console import Console

from staffgate.policy.catalog import Action, Module, Role


console = Console()


def check(
    role: Role = typer.Argument(..., help="Role to evaluate"),
    module: Module = typer.Argument(..., help="Module being accessed"),
    action: Action = typer.Argument(..., help="Requested action"),
) -> None:
    """Evaluate whether a role may perform an action on a module.

    Exits with status 1 when the action is denied.
    """
    from staffgate.policy.evaluator import default_evaluator

    allowed = default_evaluator.evaluate(role, module, action)
    directives = sorted(d.value for d in default_evaluator.active_directives(role, module))

    label = f"{role.value} -> {module.value}:{action.value}"
    if allowed:
        console.print(f"[green]ALLOWED[/green] {label}")
    else:
        console.print(f"[red]DENIED[/red] {label}")

    if directives:
        console.print(f"Directives: {', '.join(directives)}")

    if not allowed:
        raise typer.Exit(1)
