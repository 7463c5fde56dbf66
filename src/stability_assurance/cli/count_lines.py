"""Count-lines CLI command -- source lines per file and in total."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import StabilityAssuranceError
from ..scanning import SourceScanner
from . import app
from ._common import console, fail


@app.command()
def count_lines(
    path: Path = typer.Argument(
        ...,
        help="Project directory (or single source file)",
        exists=True,
        readable=True,
    ),
):
    """
    Count the source lines of every Python file.

    [bold cyan]Examples:[/bold cyan]

      stability-assurance count-lines src/
    """
    try:
        scanner = SourceScanner(path)
        counts = scanner.count_lines()
    except StabilityAssuranceError as e:
        fail(e)

    table = Table(title="Lines of code", expand=False)
    table.add_column("File", style="yellow")
    table.add_column("Lines", justify="right")
    for filepath, lines in counts.files:
        table.add_row(escape(scanner.display_path(filepath)), str(lines))
    table.add_section()
    table.add_row("[bold]Total[/bold]", f"[bold]{counts.total}[/bold]")
    console.print(table)
