"""Uncoloured text report, used when writing to a file."""

from ..evaluation.report import Report, format_value
from .base import REPORT_TITLE, BaseFormatter

RULE = "-" * 48


class PlainFormatter(BaseFormatter):
    """Plain-text report with overview, metrics summary and class details."""

    def render(self, report: Report) -> None:
        print(self.format(report))

    def format(self, report: Report) -> str:
        lines = [
            REPORT_TITLE.upper(),
            "",
            RULE,
            f"    System analyzed: {report.system}",
            RULE,
            "    Project Overview",
            "",
            f"    Project directory: {report.project_directory}",
            f"    Number of classes: {report.class_count}",
            f"    Lines of code: {report.lines_of_code}",
            f"    Project scale: {report.scale.value}",
            "",
            RULE,
            "    Metrics Summary",
            "",
        ]
        for kind, result in report.metrics:
            lines.append(
                f"    {kind.value} ({kind.title}): {format_value(result.value)} "
                f"- mark: {result.mark.value}"
            )
        lines += [
            "",
            f"    Overall mark: {report.overall.label}",
            "",
            f"NOTE: {report.note}",
            "",
            RULE,
            "    Detailed description",
            "",
        ]
        for description in report.classes:
            lines.append(f"* Class {description.name}")
            lines.append(f"File path: {description.file_path}, line: {description.line}")
            lines.extend(text for _, text in description.comments)
        return "\n".join(lines) + "\n"
