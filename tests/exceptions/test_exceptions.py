"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from stability_assurance.exceptions import (
    AnalysisError,
    ConfigFileError,
    ConfigurationError,
    FileAccessError,
    InvalidConfigError,
    InvalidInputError,
    InvalidPathError,
    MetricSeverityExceededError,
    ParsingError,
    StabilityAssuranceError,
)


class TestHierarchy:
    """Every error derives from StabilityAssuranceError."""

    @pytest.mark.parametrize(
        "error,parent",
        [
            (InvalidInputError("bad"), AnalysisError),
            (FileAccessError(Path("a.py"), "denied"), AnalysisError),
            (ParsingError(Path("a.py"), "invalid syntax", 3), AnalysisError),
            (MetricSeverityExceededError("error: too big"), AnalysisError),
            (InvalidPathError(Path("x"), "missing"), ConfigurationError),
            (InvalidConfigError("output", "pdf", "unknown"), ConfigurationError),
            (ConfigFileError(Path("c.toml"), "invalid TOML"), ConfigurationError),
        ],
    )
    def test_parents(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, StabilityAssuranceError)


class TestMessages:
    """Test messages and details."""

    def test_details_are_appended(self):
        error = InvalidConfigError("max_allowed_warnings", 0, "must be at least 1")
        assert str(error) == (
            "Invalid configuration for max_allowed_warnings: 0 "
            "(key=max_allowed_warnings, value=0, reason=must be at least 1)"
        )

    def test_no_details(self):
        assert str(StabilityAssuranceError("plain")) == "plain"

    def test_parsing_error_line(self):
        error = ParsingError(Path("a.py"), "invalid syntax", 3)
        assert error.line == 3
        assert error.details["line"] == "3"
        assert ParsingError(Path("a.py"), "oops").line is None

    def test_severity_exceeded(self):
        error = MetricSeverityExceededError("a.py:1: error: RFC metric is poor.", warning_count=2)
        assert error.diagnostic == "a.py:1: error: RFC metric is poor."
        assert error.warning_count == 2
        assert str(error).startswith("Received result exceeded configured metric severity.")
