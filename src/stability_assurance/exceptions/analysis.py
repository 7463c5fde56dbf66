"""Analysis-related exceptions: input shape, parsing, severity escalation."""

from pathlib import Path
from typing import Optional

from .base import StabilityAssuranceError


class AnalysisError(StabilityAssuranceError):
    """Base class for analysis-related errors."""
    pass


class InvalidInputError(AnalysisError):
    """Raised when the evaluation input is malformed."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid evaluation input: {reason}", details={"reason": reason})
        self.reason = reason


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when file content cannot be parsed."""

    def __init__(self, filepath: Path, reason: str, line: Optional[int] = None):
        details = {"filepath": str(filepath), "reason": reason}
        if line is not None:
            details["line"] = str(line)
        super().__init__(f"Failed to parse source file: {filepath}", details=details)
        self.filepath = filepath
        self.reason = reason
        self.line = line


class MetricSeverityExceededError(AnalysisError):
    """Raised when a classification exceeded the configured metric severity.

    Either a single ``error`` severity was hit, or the warning budget
    (``max_allowed_warnings``) was reached. The report for the run is still
    complete; this error only tells the caller to fail the run.
    """

    def __init__(self, diagnostic: str, warning_count: int = 0):
        super().__init__(
            "Received result exceeded configured metric severity. "
            "Verify your configuration or adjust the source code.",
            details={"diagnostic": diagnostic, "warnings": str(warning_count)},
        )
        self.diagnostic = diagnostic
        self.warning_count = warning_count
