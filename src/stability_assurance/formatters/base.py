"""Base formatter interface for stability report rendering."""

from abc import ABC, abstractmethod

from ..evaluation.report import Report

REPORT_TITLE = "Product Stability Evaluation Report"


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, report: Report) -> None:
        """Render the report to stdout."""

    @abstractmethod
    def format(self, report: Report) -> str:
        """Return formatted string representation of the report."""
