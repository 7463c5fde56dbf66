"""Shared CLI helpers."""

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Configuration, load_config
from ..exceptions import StabilityAssuranceError
from ..models import MetricKind
from ..scanning import ScanResult, SourceScanner

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    output: Optional[str] = None,
    output_file: Optional[Path] = None,
    metrics: Optional[List[str]] = None,
    wmc_mode: Optional[str] = None,
    max_warnings: Optional[int] = None,
) -> Configuration:
    """Build configuration from CLI options."""
    overrides = {
        "output": output,
        "output_file": output_file,
        "enabled_metrics": metrics or None,
        "wmc_mode": wmc_mode,
        "max_allowed_warnings": max_warnings,
    }
    # --output-file alone means "write the report to that file"
    if output_file is not None and output is None:
        overrides["output"] = "file"
    return load_config(config_file=config, **overrides)


def scan_project(path: Path) -> ScanResult:
    return SourceScanner(path).scan()


def parse_metric_kind(name: str) -> MetricKind:
    try:
        return MetricKind.parse(name)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None


def fail(error: StabilityAssuranceError, code: int = 1) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code)
