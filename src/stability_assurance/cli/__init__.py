"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="stability-assurance",
    help="Stability Assurance - object-oriented stability metrics for Python projects",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Evaluate the stability of a Python project with WMC, RFC, NOC and LOCM.
    """
    if version:
        console.print(
            f"[bold cyan]Stability Assurance[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


def main() -> None:
    app()


# Import subcommands to register them
from .evaluate import evaluate as _evaluate  # noqa: F401, E402
from .metric import metric as _metric  # noqa: F401, E402
from .count_lines import count_lines as _count_lines  # noqa: F401, E402
from .show_data import show_data as _show_data  # noqa: F401, E402
