"""Show-data CLI command -- collected classes, functions and variables."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.tree import Tree

from ..exceptions import StabilityAssuranceError
from . import app
from ._common import console, fail, scan_project


@app.command()
def show_data(
    path: Path = typer.Argument(
        ...,
        help="Project directory (or single source file)",
        exists=True,
        readable=True,
    ),
):
    """
    Show the declarations collected from a project.

    [bold cyan]Examples:[/bold cyan]

      stability-assurance show-data src/
    """
    try:
        scan = scan_project(path)
    except StabilityAssuranceError as e:
        fail(e)

    root = Tree(f"[bold]{escape(str(path))}[/bold] ({len(scan.classes)} classes)")
    for cls in scan.classes:
        label = f"[yellow]class {escape(cls.name)}[/yellow] [dim]{escape(cls.declaration.location)}[/dim]"
        if cls.parent_names:
            label += f" <- {escape(', '.join(sorted(cls.parent_names)))}"
        node = root.add(label)

        functions = node.add(f"Functions ({cls.function_count})")
        for function in cls.functions:
            entry = functions.add(
                f"{escape(function.name)}{escape(function.signature_text)} "
                f"[dim]line {function.declaration.line}[/dim]"
            )
            if function.called_names:
                entry.add(f"calls: {escape(', '.join(function.called_names))}")
            if function.accessed_names:
                entry.add(f"accesses: {escape(', '.join(function.accessed_names))}")

        variables = node.add(f"Variables ({len(cls.variables)})")
        for variable in cls.variables:
            variables.add(f"{escape(variable.name)} [dim]line {variable.declaration.line}[/dim]")

    for filepath, reason in scan.skipped:
        root.add(f"[red]skipped[/red] {escape(str(filepath))}: {escape(reason)}")
    console.print(root)
