"""
Stability Assurance - object-oriented stability metrics for Python projects

Computes WMC, RFC, NOC and LOCM per class, classifies them against
project-scaled thresholds, applies a configurable severity policy and
produces a stability report with an overall mark.
"""

__version__ = "1.0.0"

from .config import Configuration, MetricConfig, OutputTarget, load_config
from .engine import evaluate
from .evaluation import EvaluationResult, Report, Thresholds
from .evaluation.severity import SeverityConfig
from .metrics import WMCMode
from .models import (
    ClassDecl,
    DeclarationSite,
    Function,
    Mark,
    MetricKind,
    MetricValue,
    ProjectSize,
    Severity,
    Variable,
)

__all__ = [
    "evaluate",  # Main entry point
    "load_config",
    "Configuration",
    "MetricConfig",
    "OutputTarget",
    "SeverityConfig",
    "Thresholds",
    "WMCMode",
    "EvaluationResult",
    "Report",
    "ClassDecl",
    "DeclarationSite",
    "Function",
    "Variable",
    "MetricValue",
    "MetricKind",
    "Mark",
    "ProjectSize",
    "Severity",
]
