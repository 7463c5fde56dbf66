"""Evaluation engine: classes in, stability report out.

    classes ──► calculators ──► scale + thresholds ──► class marks
                                                          │
    report ◄── overall mark ◄── severity policy ◄── project marks

The engine performs no I/O. Running it twice on the same input gives equal
reports. A run that exceeds the configured severity still produces the
complete report; the failure is returned next to it in the
``EvaluationResult`` and the caller decides whether to stop.
"""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .config import DEFAULT_CONFIGURATION, Configuration
from .evaluation.report import (
    ClassDescription,
    EvaluationResult,
    MetricResult,
    Report,
    metric_comment,
    note_for,
)
from .evaluation.scale import allowed_noc_per_class, determine_scale
from .evaluation.severity import apply_severity_policy
from .evaluation.thresholds import (
    Thresholds,
    classify,
    default_thresholds,
    overall_mark,
    wmc_project_mark,
)
from .exceptions import InvalidInputError, MetricSeverityExceededError
from .logging_config import get_logger
from .metrics import run_calculators
from .models import ClassDecl, Mark, MetricKind, MetricValue

logger = get_logger(__name__)

AVERAGE_PRECISION = 2


def average(classes: Sequence[ClassDecl], kind: MetricKind) -> float:
    """Arithmetic mean of a metric over classes (0.0 for no classes)."""
    if not classes:
        return 0.0
    return sum(cls.metric(kind).value for cls in classes) / len(classes)


def resolve_thresholds(
    classes: Sequence[ClassDecl], config: Configuration
) -> Dict[MetricKind, Thresholds]:
    """Threshold pair per evaluated metric: configured, or derived from the project."""
    scale = determine_scale(len(classes))
    allowed_noc = allowed_noc_per_class(scale, len(classes))
    average_wmc = average(classes, MetricKind.WMC)

    thresholds = {}
    for kind in config.evaluated_metrics:
        configured = config.metric_config(kind).thresholds
        thresholds[kind] = configured or default_thresholds(kind, average_wmc, allowed_noc)
    return thresholds


def mark_classes(
    classes: Sequence[ClassDecl], thresholds: Dict[MetricKind, Thresholds]
) -> Tuple[ClassDecl, ...]:
    """Assign every evaluated metric of every class its mark."""
    marked = []
    for cls in classes:
        for kind, pair in thresholds.items():
            value = cls.metric(kind).value
            cls = cls.with_metric(kind, MetricValue(value, classify(value, pair)))
        marked.append(cls)
    return tuple(marked)


def project_mark(
    kind: MetricKind, classes: Sequence[ClassDecl], value: float, thresholds: Thresholds
) -> Mark:
    if not classes:
        return Mark.UNOWNED
    if kind is MetricKind.WMC:
        return wmc_project_mark(cls.metric(kind).mark for cls in classes)
    return classify(value, thresholds)


def describe_class(cls: ClassDecl, kinds: Sequence[MetricKind]) -> ClassDescription:
    return ClassDescription(
        name=cls.name,
        file_path=cls.declaration.file_path,
        line=cls.declaration.line,
        comments=tuple(
            (kind, metric_comment(kind, cls.metric(kind).value, cls.metric(kind).mark))
            for kind in kinds
        ),
    )


def _validate_input(classes: Sequence[ClassDecl], config: Configuration, total_lines: int) -> None:
    if not isinstance(config, Configuration):
        raise InvalidInputError(f"expected a Configuration, got {type(config).__name__}")
    if isinstance(total_lines, bool) or not isinstance(total_lines, int) or total_lines < 0:
        raise InvalidInputError(f"total line count must be a non-negative integer, got {total_lines!r}")
    for position, cls in enumerate(classes):
        if not isinstance(cls, ClassDecl):
            raise InvalidInputError(
                f"item {position} is {type(cls).__name__}, expected a class declaration"
            )


def evaluate(
    classes: Sequence[ClassDecl],
    config: Configuration = DEFAULT_CONFIGURATION,
    project_path: str = "",
    total_lines: int = 0,
) -> EvaluationResult:
    """Evaluate the stability of a project.

    Args:
        classes: Every class of the project, fully collected
        config: Enabled metrics, thresholds and severities
        project_path: Project root shown in the report
        total_lines: Total source line count shown in the report

    Returns:
        EvaluationResult holding the report and, when a metric exceeded its
        configured severity, the MetricSeverityExceededError

    Raises:
        InvalidInputError: If the input is malformed (nothing is evaluated)
    """
    classes = tuple(classes)
    _validate_input(classes, config, total_lines)

    kinds = config.evaluated_metrics
    if not classes:
        logger.info(f"No classes found for {project_path or 'the project'}; nothing to evaluate")

    evaluated = run_calculators(classes, kinds, config.wmc_mode)
    thresholds = resolve_thresholds(evaluated, config)
    marked = mark_classes(evaluated, thresholds)

    results = []
    for kind in kinds:
        value = average(marked, kind)
        mark = project_mark(kind, marked, value, thresholds[kind])
        results.append((kind, MetricResult(round(value, AVERAGE_PRECISION), mark)))

    outcome = apply_severity_policy(
        marked, kinds, config.severity_for, config.max_allowed_warnings
    )
    overall = overall_mark({kind: result.mark for kind, result in results})

    report = Report(
        project_directory=project_path,
        class_count=len(marked),
        lines_of_code=total_lines,
        scale=determine_scale(len(marked)),
        metrics=tuple(results),
        overall=overall,
        note=note_for(overall.mark),
        classes=tuple(describe_class(cls, kinds) for cls in marked),
        issues=outcome.messages,
        warning_count=outcome.warning_count,
    )
    logger.debug(f"Evaluation completed for {project_path}: overall {overall.label} ({overall.score})")

    error = None
    if outcome.is_fatal:
        error = MetricSeverityExceededError(outcome.fatal_message, outcome.warning_count)
    return EvaluationResult(report=report, error=error)
