"""Severity policy for accepted/poor classifications.

Every accepted or poor class mark produces one editor-style message
``{file}:{line}: {severity}: {message}``. The policy is a fold over the
classes: it returns the messages together with the warning count and, when
the run has to fail, the diagnostic explaining why. It never stops early;
deciding what to do with a failed run is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from ..logging_config import get_logger
from ..models import ClassDecl, DeclarationSite, Mark, MetricKind, Severity

logger = get_logger(__name__)


@dataclass(frozen=True)
class SeverityConfig:
    """Severities used for poor and accepted marks of one metric."""

    poor: Severity = Severity.WARNING
    accepted: Severity = Severity.WARNING

    def for_mark(self, mark: Mark) -> Optional[Severity]:
        if not mark.is_issue():
            return None
        return self.poor if mark is Mark.POOR else self.accepted


DEFAULT_SEVERITY = SeverityConfig()


@dataclass(frozen=True)
class SeverityOutcome:
    """Result of applying the severity policy to a project."""

    messages: Tuple[str, ...] = ()
    warning_count: int = 0
    fatal_message: Optional[str] = None

    @property
    def is_fatal(self) -> bool:
        return self.fatal_message is not None


def format_issue_message(
    message: str, severity: Severity, site: Optional[DeclarationSite] = None
) -> str:
    """Format a message the way compilers and editors report issues."""
    location = f"{site.file_path}:{site.line}: " if site is not None else ""
    return f"{location}{severity.value}: {message}"


def apply_severity_policy(
    classes: Sequence[ClassDecl],
    kinds: Iterable[MetricKind],
    severity_for: Callable[[MetricKind], SeverityConfig],
    max_allowed_warnings: Optional[int] = None,
) -> SeverityOutcome:
    """Emit issue messages for every accepted/poor class mark.

    Args:
        classes: Classes with their marks already assigned
        kinds: Metrics that were evaluated
        severity_for: Lookup of the configured severities per metric
        max_allowed_warnings: Warning budget; reaching it fails the run

    Returns:
        SeverityOutcome with messages, warning count and fatal diagnostic
    """
    kinds = tuple(kinds)
    messages = []
    warnings = 0
    fatal_message = None

    for cls in classes:
        for kind in kinds:
            mark = cls.metric(kind).mark
            severity = severity_for(kind).for_mark(mark)
            if severity is None:
                continue

            text = kind.poor_message if mark is Mark.POOR else kind.accepted_message
            issue = format_issue_message(text, severity, cls.declaration)
            messages.append(issue)

            if severity is Severity.WARNING:
                warnings += 1
            elif severity is Severity.ERROR and fatal_message is None:
                logger.warning(f"{kind.value} of class {cls.name} exceeded error severity")
                fatal_message = issue

    if (
        fatal_message is None
        and max_allowed_warnings is not None
        and warnings >= max_allowed_warnings
    ):
        fatal_message = format_issue_message(
            f"{warnings} warnings reached the maximum of {max_allowed_warnings} allowed warnings.",
            Severity.ERROR,
        )
        logger.warning(f"Warning budget exhausted ({warnings}/{max_allowed_warnings})")

    return SeverityOutcome(
        messages=tuple(messages), warning_count=warnings, fatal_message=fatal_message
    )
