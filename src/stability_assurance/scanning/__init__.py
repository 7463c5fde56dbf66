"""Python source scanning: files, classes, line counts."""

from .lines import LineCount, count_lines
from .python_parser import parse_file, parse_source
from .scanner import ScanResult, SourceScanner

__all__ = [
    "parse_source",
    "parse_file",
    "SourceScanner",
    "ScanResult",
    "LineCount",
    "count_lines",
]
