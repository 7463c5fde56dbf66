"""Rich terminal formatter for stability reports."""

import io
from typing import List

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..evaluation.report import Report, format_value
from ..models import Mark
from .base import REPORT_TITLE, BaseFormatter

console = Console()

_MARK_STYLES = {
    Mark.GOOD: "green",
    Mark.ACCEPTED: "yellow",
    Mark.POOR: "red",
    Mark.UNOWNED: "dim",
}


def _mark_label(mark: Mark) -> str:
    style = _MARK_STYLES[mark]
    return f"[{style}]{mark.value}[/{style}]"


class RichFormatter(BaseFormatter):
    """Rich terminal output: overview panel, metrics table, class details."""

    def render(self, report: Report) -> None:
        for renderable in self._renderables(report):
            console.print(renderable)

    def format(self, report: Report) -> str:
        buffer = io.StringIO()
        capture = Console(file=buffer, width=100, no_color=True, highlight=False)
        for renderable in self._renderables(report):
            capture.print(renderable)
        return buffer.getvalue()

    # -- private helpers --

    def _renderables(self, report: Report) -> List[RenderableType]:
        overview = (
            f"System analyzed: [red]{escape(report.system)}[/red]\n"
            f"Project directory: [bold]{escape(str(report.project_directory))}[/bold]\n"
            f"Number of classes: [cyan]{report.class_count}[/cyan]  |  "
            f"Lines of code: [cyan]{report.lines_of_code}[/cyan]  |  "
            f"Project scale: [cyan]{report.scale.value}[/cyan]"
        )
        renderables: List[RenderableType] = [
            Panel(overview, title=f"[bold green]{REPORT_TITLE}[/bold green]", expand=False),
            "",
        ]

        table = Table(title="Metrics Summary", expand=False)
        table.add_column("Metric", style="bold")
        table.add_column("Name")
        table.add_column("Value", justify="right")
        table.add_column("Mark", justify="center")
        for kind, result in report.metrics:
            table.add_row(
                kind.value, kind.title, format_value(result.value), _mark_label(result.mark)
            )
        renderables.append(table)
        renderables.append(
            f"Overall mark: [bold]{_mark_label(report.overall.mark)}[/bold] "
            f"(score: [blue]{report.overall.score}[/blue])"
        )
        renderables.append(Text.assemble(("NOTE: ", "yellow"), report.note))
        renderables.append("")

        if report.classes:
            details = Table(title="Detailed description", expand=True)
            details.add_column("Class", style="yellow")
            details.add_column("Location", style="dim")
            details.add_column("Comments")
            for description in report.classes:
                details.add_row(
                    escape(description.name),
                    escape(f"{description.file_path}:{description.line}"),
                    escape("\n".join(text for _, text in description.comments)),
                )
            renderables.append(details)
        return renderables
