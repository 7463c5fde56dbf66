"""Collect the classes of a Python project."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from ..exceptions import InvalidPathError, ParsingError
from ..logging_config import get_logger
from ..models import ClassDecl
from .lines import LineCount, count_lines
from .python_parser import parse_file

logger = get_logger(__name__)

SOURCE_SUFFIX = ".py"

SKIP_DIRS = frozenset(
    {
        "venv",
        ".venv",
        "env",
        "__pycache__",
        ".git",
        ".tox",
        ".nox",
        ".mypy_cache",
        ".pytest_cache",
        "build",
        "dist",
        "node_modules",
        "site-packages",
    }
)


@dataclass(frozen=True)
class ScanResult:
    """Classes collected from a project and the files they came from."""

    classes: Tuple[ClassDecl, ...]
    files: Tuple[Path, ...]
    skipped: Tuple[Tuple[Path, str], ...] = ()


def should_skip_file(filepath: Path, exclude_patterns: Sequence[str]) -> bool:
    """Check if a file matches any of the glob exclusion patterns."""
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False


class SourceScanner:
    """Find Python sources under a root and parse their classes."""

    def __init__(self, root: Path, exclude_patterns: Optional[Iterable[str]] = None):
        """
        Initialize scanner.

        Args:
            root: Directory to scan, or a single source file
            exclude_patterns: Glob patterns of files to leave out

        Raises:
            InvalidPathError: If root does not exist
        """
        self.root = Path(root)
        self.exclude_patterns = list(exclude_patterns or [])
        if not self.root.exists():
            raise InvalidPathError(self.root, "path does not exist")
        logger.debug(f"Initialized {self.__class__.__name__} for {self.root}")

    def _in_skipped_dir(self, filepath: Path) -> bool:
        relative = filepath.relative_to(self.root).parts[:-1]
        return any(part in SKIP_DIRS or part.startswith(".") for part in relative)

    def files(self) -> Tuple[Path, ...]:
        """Source files to analyze, sorted by path."""
        if self.root.is_file():
            return (self.root,) if self.root.suffix == SOURCE_SUFFIX else ()

        found: List[Path] = []
        for filepath in sorted(self.root.rglob(f"*{SOURCE_SUFFIX}")):
            if not filepath.is_file():
                continue
            if self._in_skipped_dir(filepath):
                continue
            if should_skip_file(filepath, self.exclude_patterns):
                logger.debug(f"Skipped (pattern): {filepath}")
                continue
            found.append(filepath)
        return tuple(found)

    def display_path(self, filepath: Path) -> str:
        if self.root.is_file():
            return filepath.name
        return str(filepath.relative_to(self.root))

    def scan(self) -> ScanResult:
        """Parse every source file.

        Files that fail to parse are logged and left out of the result.

        Raises:
            FileAccessError: If a source file cannot be read
        """
        files = self.files()
        classes: List[ClassDecl] = []
        skipped: List[Tuple[Path, str]] = []

        for filepath in files:
            try:
                classes.extend(parse_file(filepath, self.display_path(filepath)))
            except ParsingError as e:
                skipped.append((filepath, e.reason))
                logger.warning(f"Parse error for {filepath}: {e.reason}")

        logger.info(
            f"Scan complete: {len(files)} files, {len(classes)} classes, {len(skipped)} skipped"
        )
        return ScanResult(tuple(classes), files, tuple(skipped))

    def collect_classes(self) -> Tuple[ClassDecl, ...]:
        return self.scan().classes

    def count_lines(self) -> LineCount:
        return count_lines(self.files())
