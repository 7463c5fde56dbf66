"""Report value types produced by an evaluation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..exceptions import MetricSeverityExceededError
from ..models import Mark, MetricKind, ProjectSize
from .thresholds import OverallMark

SYSTEM_ANALYZED = "Python"

NOTES = {
    Mark.GOOD: (
        "The evaluated product demonstrates stability, aligning with stability metrics "
        "that indicate a satisfactory level of stability."
    ),
    Mark.ACCEPTED: (
        "The evaluated product shows an acceptable level of stability, meeting the criteria "
        "outlined in the stability metrics. Recommendations for improvement may be considered "
        "to enhance overall stability further."
    ),
    Mark.POOR: (
        "The evaluated product indicates areas for improvement in stability based on the "
        "applied stability metrics. Consideration of significant adjustments or enhancements "
        "is advised to achieve a higher level of stability."
    ),
}


def note_for(mark: Mark) -> str:
    """Explanatory note for an overall mark."""
    return NOTES.get(mark, NOTES[Mark.POOR])


def format_value(value: float) -> str:
    """Render integral values without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def metric_comment(kind: MetricKind, value: float, mark: Mark) -> str:
    return f"{kind.value} mark: {mark.value} (value: {format_value(value)})"


@dataclass(frozen=True)
class MetricResult:
    """Project-level value of a metric (average over classes) and its mark."""

    value: float = 0.0
    mark: Mark = Mark.UNOWNED


@dataclass(frozen=True)
class ClassDescription:
    """Per-class detail entry of the report."""

    name: str
    file_path: str
    line: int
    comments: Tuple[Tuple[MetricKind, str], ...] = ()

    def comment(self, kind: MetricKind) -> Optional[str]:
        for comment_kind, text in self.comments:
            if comment_kind is kind:
                return text
        return None


@dataclass(frozen=True)
class Report:
    """Immutable snapshot of one evaluation run."""

    project_directory: str
    class_count: int
    lines_of_code: int
    scale: ProjectSize
    metrics: Tuple[Tuple[MetricKind, MetricResult], ...]
    overall: OverallMark
    note: str
    classes: Tuple[ClassDescription, ...] = ()
    issues: Tuple[str, ...] = ()
    warning_count: int = 0
    system: str = SYSTEM_ANALYZED

    def metric(self, kind: MetricKind) -> MetricResult:
        """Project-level result of a metric (unowned zero when not evaluated)."""
        return dict(self.metrics).get(kind, MetricResult())

    @property
    def evaluated_metrics(self) -> Tuple[MetricKind, ...]:
        return tuple(kind for kind, _ in self.metrics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "system": self.system,
            "project_directory": self.project_directory,
            "number_of_classes": self.class_count,
            "lines_of_code": self.lines_of_code,
            "project_scale": self.scale.value,
            "metrics": {
                kind.value: {"value": result.value, "mark": result.mark.value}
                for kind, result in self.metrics
            },
            "overall_mark": {
                "label": self.overall.label,
                "mark": self.overall.mark.value,
                "score": self.overall.score,
            },
            "note": self.note,
            "warning_count": self.warning_count,
            "issues": list(self.issues),
            "classes": [
                {
                    "name": description.name,
                    "file_path": description.file_path,
                    "line": description.line,
                    "comments": {kind.value: text for kind, text in description.comments},
                }
                for description in self.classes
            ],
        }


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of an evaluation: always a complete report, maybe a failure."""

    report: Report
    error: Optional[MetricSeverityExceededError] = field(default=None, compare=False)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def raise_for_status(self) -> Report:
        """Return the report, or raise the severity failure of the run."""
        if self.error is not None:
            raise self.error
        return self.report
