"""Source line counting."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple

from .python_parser import read_source


@dataclass(frozen=True)
class LineCount:
    """Line count per file plus the total."""

    files: Tuple[Tuple[Path, int], ...] = ()

    @property
    def total(self) -> int:
        return sum(count for _, count in self.files)


def count_file_lines(path: Path) -> int:
    return len(read_source(path).splitlines())


def count_lines(paths: Iterable[Path]) -> LineCount:
    """Count the lines of every file.

    Raises:
        FileAccessError: If a file cannot be read
    """
    return LineCount(tuple((path, count_file_lines(path)) for path in paths))
