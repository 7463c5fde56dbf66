"""Metric CLI command -- project average of a single metric."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..engine import AVERAGE_PRECISION, average
from ..evaluation.report import format_value
from ..exceptions import ConfigurationError, StabilityAssuranceError
from ..metrics import run_calculators
from . import app
from ._common import console, fail, parse_metric_kind, resolve_config, scan_project


@app.command()
def metric(
    kind: str = typer.Argument(..., help="Metric to compute: WMC | RFC | NOC | LOCM"),
    path: Path = typer.Argument(
        ...,
        help="Project directory (or single source file)",
        exists=True,
        readable=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    wmc_mode: Optional[str] = typer.Option(
        None,
        "--wmc-mode",
        help="WMC weighting: custom | unity (default: from configuration)",
    ),
    per_class: bool = typer.Option(
        False,
        "--per-class",
        help="Also list the value of every class",
    ),
):
    """
    Compute the project average of one metric.

    [bold cyan]Examples:[/bold cyan]

      stability-assurance metric WMC src/

      stability-assurance metric wmc src/ --wmc-mode unity --per-class
    """
    metric_kind = parse_metric_kind(kind)

    try:
        configuration = resolve_config(config=config, wmc_mode=wmc_mode)
    except ConfigurationError as e:
        fail(e, code=2)

    try:
        classes = run_calculators(
            scan_project(path).classes, [metric_kind], configuration.wmc_mode
        )
    except StabilityAssuranceError as e:
        fail(e)

    value = round(average(classes, metric_kind), AVERAGE_PRECISION)
    typer.echo(f"{metric_kind.value} value for {path}: {value}")

    if per_class and classes:
        table = Table(title=f"{metric_kind.value} per class")
        table.add_column("Class", style="yellow")
        table.add_column("Location", style="dim")
        table.add_column(metric_kind.value, justify="right")
        for cls in classes:
            table.add_row(
                escape(cls.name),
                escape(cls.declaration.location),
                format_value(cls.metric(metric_kind).value),
            )
        console.print(table)
