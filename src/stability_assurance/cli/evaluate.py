"""Evaluate CLI command -- full stability evaluation of a project."""

import tempfile
import webbrowser
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..config import Configuration, OutputTarget
from ..engine import evaluate as evaluate_classes
from ..evaluation.report import Report
from ..exceptions import ConfigurationError, StabilityAssuranceError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from ..scanning import SourceScanner, count_lines
from . import app
from ._common import console, fail, resolve_config

HTML_REPORT_PREFIX = "stability-report-"


def _write_html_report(report: Report, open_report: bool) -> Path:
    html = get_formatter("html").format(report)
    with tempfile.NamedTemporaryFile(
        "w", suffix=".html", prefix=HTML_REPORT_PREFIX, delete=False, encoding="utf-8"
    ) as f:
        f.write(html)
        path = Path(f.name)
    if open_report:
        webbrowser.open(path.as_uri())
    return path


def _emit_report(report: Report, config: Configuration, open_report: bool) -> None:
    if config.output is OutputTarget.CONSOLE:
        get_formatter("console").render(report)
    elif config.output is OutputTarget.JSON:
        get_formatter("json").render(report)
    elif config.output is OutputTarget.HTML:
        path = _write_html_report(report, open_report)
        console.print(f"[green]HTML report written to[/green] {escape(str(path))}")
    else:
        target = config.output_file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(get_formatter("plain").format(report), encoding="utf-8")
        console.print(f"[green]Report written to[/green] {escape(str(target))}")


@app.command()
def evaluate(
    path: Path = typer.Argument(
        ...,
        help="Project directory (or single source file) to evaluate",
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
    output: Optional[str] = typer.Option(
        None,
        "-o",
        "--output",
        help="Report output: console | html | json | file",
        click_type=click.Choice([target.value for target in OutputTarget], case_sensitive=False),
    ),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output-file",
        help="Write the plain-text report to this file",
    ),
    metric: Optional[List[str]] = typer.Option(
        None,
        "-m",
        "--metric",
        help="Metric to evaluate (repeatable; default: all)",
    ),
    wmc_mode: Optional[str] = typer.Option(
        None,
        "--wmc-mode",
        help="WMC weighting: custom | unity",
    ),
    max_warnings: Optional[int] = typer.Option(
        None,
        "--max-warnings",
        help="Fail once this many warnings were emitted",
        min=1,
    ),
    open_report: bool = typer.Option(
        False,
        "--open",
        help="Open the HTML report in a browser",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Evaluate the stability of a project and render the report.

    Issue messages use the [dim]file:line: severity: message[/dim] format.
    Exits 1 when a metric exceeds its configured severity.

    [bold cyan]Examples:[/bold cyan]

      stability-assurance evaluate src/

      stability-assurance evaluate . -m WMC -m RFC --output json

      stability-assurance evaluate . --output html --open
    """
    logger = setup_logging(verbose=verbose)

    try:
        configuration = resolve_config(
            config=config,
            output=output,
            output_file=output_file,
            metrics=metric,
            wmc_mode=wmc_mode,
            max_warnings=max_warnings,
        )
    except ConfigurationError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        fail(e, code=2)

    try:
        scanner = SourceScanner(path)
        scan = scanner.scan()
        total_lines = count_lines(scan.files).total
        result = evaluate_classes(scan.classes, configuration, str(path), total_lines)
    except StabilityAssuranceError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        fail(e)

    for issue in result.report.issues:
        typer.echo(issue, err=True)

    _emit_report(result.report, configuration, open_report)

    if not result.succeeded:
        fail(result.error)
