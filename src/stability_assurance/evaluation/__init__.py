"""Scale, threshold and severity classification plus report types."""

from .report import ClassDescription, EvaluationResult, MetricResult, Report
from .scale import allowed_noc_per_class, determine_scale
from .severity import SeverityConfig, SeverityOutcome, apply_severity_policy, format_issue_message
from .thresholds import OverallMark, Thresholds, classify, default_thresholds, overall_mark

__all__ = [
    "determine_scale",
    "allowed_noc_per_class",
    "Thresholds",
    "OverallMark",
    "classify",
    "default_thresholds",
    "overall_mark",
    "SeverityConfig",
    "SeverityOutcome",
    "apply_severity_policy",
    "format_issue_message",
    "Report",
    "MetricResult",
    "ClassDescription",
    "EvaluationResult",
]
