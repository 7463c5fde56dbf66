"""Tests for report formatters."""

import json

import pytest

from stability_assurance import evaluate
from stability_assurance.config import Configuration, MetricConfig
from stability_assurance.evaluation import Thresholds
from stability_assurance.formatters import (
    HtmlFormatter,
    JsonFormatter,
    PlainFormatter,
    RichFormatter,
    get_formatter,
)
from stability_assurance.models import MetricKind


@pytest.fixture
def report(make_class):
    classes = [make_class("Circle", methods=2, line=3), make_class("Square", methods=2, line=9)]
    return evaluate(classes, project_path="shapes<src>", total_lines=20).report


@pytest.fixture
def report_with_issue(make_class):
    config = Configuration(metrics={MetricKind.RFC: MetricConfig(thresholds=Thresholds(0, 1))})
    return evaluate([make_class("Big", methods=3)], config, "big").report


class TestGetFormatter:
    """Test formatter lookup."""

    @pytest.mark.parametrize(
        "name,cls",
        [
            ("console", RichFormatter),
            ("plain", PlainFormatter),
            ("html", HtmlFormatter),
            ("json", JsonFormatter),
        ],
    )
    def test_known_names(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("pdf")


class TestPlainFormatter:
    """Test the uncoloured text report."""

    def test_sections(self, report):
        text = PlainFormatter().format(report)
        assert text.startswith("PRODUCT STABILITY EVALUATION REPORT")
        assert "System analyzed: Python" in text
        assert "Number of classes: 2" in text
        assert "Lines of code: 20" in text
        assert "Project scale: small" in text
        assert "RFC (Response for Class): 2 - mark: good" in text
        assert "Overall mark: Good" in text
        assert f"NOTE: {report.note}" in text

    def test_class_details(self, report):
        text = PlainFormatter().format(report)
        assert "* Class Circle\nFile path: app.py, line: 3\nWMC mark: good (value: 0)" in text

    def test_no_escape_codes(self, report):
        assert "\x1b[" not in PlainFormatter().format(report)


class TestJsonFormatter:
    """Test JSON output."""

    def test_structure(self, report):
        data = json.loads(JsonFormatter().format(report))
        assert data["number_of_classes"] == 2
        assert data["project_scale"] == "small"
        assert data["metrics"]["RFC"] == {"value": 2.0, "mark": "good"}
        assert data["overall_mark"]["label"] == "Good"
        assert [c["name"] for c in data["classes"]] == ["Circle", "Square"]

    def test_issues_included(self, report_with_issue):
        data = json.loads(JsonFormatter().format(report_with_issue))
        assert data["warning_count"] == 1
        assert data["issues"][0].startswith("app.py:1: warning: RFC metric is poor")


class TestHtmlFormatter:
    """Test the standalone HTML page."""

    def test_document(self, report):
        html = HtmlFormatter().format(report)
        assert html.startswith("<!DOCTYPE html>")
        assert "<h1>Product Stability Evaluation Report</h1>" in html
        assert "Class <strong>Circle</strong>" in html

    def test_values_are_escaped(self, report):
        html = HtmlFormatter().format(report)
        assert "shapes&lt;src&gt;" in html
        assert "shapes<src>" not in html

    def test_issues_section(self, report, report_with_issue):
        assert "<h3>Issues</h3>" not in HtmlFormatter().format(report)
        assert "<h3>Issues</h3>" in HtmlFormatter().format(report_with_issue)


class TestRichFormatter:
    """Test the terminal formatter."""

    def test_format_returns_plain_text(self, report):
        text = RichFormatter().format(report)
        assert "Metrics Summary" in text
        assert "Circle" in text
        assert "\x1b[" not in text

    def test_markup_in_paths_is_literal(self, make_class):
        classes = [make_class("Widget", file_path="legacy[v1]/widget.py")]
        text = RichFormatter().format(evaluate(classes, project_path="legacy[v1]").report)
        assert "Project directory: legacy[v1]" in text
        assert "legacy[v1]/widget.py:1" in text

    def test_render(self, report, capsys):
        RichFormatter().render(report)
        assert "Detailed description" in capsys.readouterr().out
