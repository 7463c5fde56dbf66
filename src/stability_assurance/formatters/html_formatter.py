"""Standalone HTML report."""

from html import escape

from ..evaluation.report import Report, format_value
from .base import REPORT_TITLE, BaseFormatter

_STYLE = """
body { font-family: -apple-system, "Segoe UI", sans-serif; margin: 2rem auto; max-width: 60rem; color: #222; }
h1 { font-size: 1.6rem; }
table { border-collapse: collapse; }
td, th { padding: 0.25rem 0.75rem; text-align: left; border-bottom: 1px solid #ddd; }
.good { color: #2e7d32; } .accepted { color: #f9a825; } .poor { color: #c62828; } .unowned { color: #888; }
.issues li { font-family: monospace; }
"""


class HtmlFormatter(BaseFormatter):
    """Render the report as a self-contained HTML page."""

    def render(self, report: Report) -> None:
        print(self.format(report))

    def format(self, report: Report) -> str:
        overview = "".join(
            f"<li><strong>{label}:</strong> {escape(str(value))}</li>"
            for label, value in (
                ("Project directory", report.project_directory),
                ("Number of classes", report.class_count),
                ("Lines of code", report.lines_of_code),
                ("Project scale", report.scale.value),
            )
        )
        metrics = "".join(
            f"<tr><td>{kind.value}</td><td>{kind.title}</td>"
            f"<td>{format_value(result.value)}</td>"
            f'<td class="{result.mark.value}">{result.mark.value}</td></tr>'
            for kind, result in report.metrics
        )
        classes = "".join(
            f"<li><p>Class <strong>{escape(description.name)}</strong> "
            f"<small>{escape(description.file_path)}:{description.line}</small>"
            + "".join(f"<br> - {escape(text)}" for _, text in description.comments)
            + "</p></li>"
            for description in report.classes
        )
        issues = ""
        if report.issues:
            issues = (
                '<h3>Issues</h3><ul class="issues">'
                + "".join(f"<li>{escape(issue)}</li>" for issue in report.issues)
                + "</ul><hr>"
            )

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="description" content="Stability Assurance Report">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{REPORT_TITLE}</title>
    <style>{_STYLE}</style>
</head>
<body>
<h1>{REPORT_TITLE}</h1>
<hr>
<p><strong>System analyzed: </strong>{escape(report.system)}</p>
<hr>
<h3>Project Overview</h3>
<ul>{overview}</ul>
<hr>
<h3>Metrics Summary</h3>
<table>
<tr><th>Metric</th><th>Name</th><th>Value</th><th>Mark</th></tr>
{metrics}
</table>
<p><strong>Overall mark:</strong> <span class="{report.overall.mark.value}">{report.overall.label}</span> (score: {report.overall.score})</p>
<p><strong>Note:</strong> {escape(report.note)}</p>
<hr>
{issues}
<h3>Detailed description</h3>
<ul>{classes}</ul>
</body>
</html>
"""
