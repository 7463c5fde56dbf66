"""Data models for Stability Assurance.

The declaration model is populated once by a parser adapter and then treated
as a set of values: metric calculators never mutate a class, they return a
copy carrying the new metric value (``ClassDecl.with_metric``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple


class Mark(Enum):
    """Classification outcome for a metric value."""

    UNOWNED = "unowned"  # not evaluated yet
    GOOD = "good"
    ACCEPTED = "accepted"
    POOR = "poor"

    @property
    def score(self) -> float:
        """Numeric score used by the weighted overall mark."""
        return _MARK_SCORES[self]

    @property
    def rank(self) -> int:
        """Ordering where a lower rank is a better mark (unowned sorts last)."""
        return _MARK_RANKS[self]

    def is_issue(self) -> bool:
        return self in (Mark.ACCEPTED, Mark.POOR)


_MARK_SCORES = {Mark.GOOD: 1.0, Mark.ACCEPTED: 0.5, Mark.POOR: 0.0, Mark.UNOWNED: 0.0}
_MARK_RANKS = {Mark.GOOD: 0, Mark.ACCEPTED: 1, Mark.POOR: 2, Mark.UNOWNED: 3}


class ProjectSize(Enum):
    """Project scale bucket derived from the class count."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Severity(Enum):
    """Severity attached to an accepted/poor classification."""

    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


class MetricKind(Enum):
    """The closed set of class metrics the engine knows how to compute."""

    WMC = "WMC"
    RFC = "RFC"
    NOC = "NOC"
    LOCM = "LOCM"

    @property
    def title(self) -> str:
        return _METRIC_TITLES[self]

    @property
    def weight(self) -> float:
        """Weight of the project-level mark in the overall score."""
        return _METRIC_WEIGHTS[self]

    @property
    def accepted_message(self) -> str:
        return _METRIC_MESSAGES[self][0]

    @property
    def poor_message(self) -> str:
        return _METRIC_MESSAGES[self][1]

    @classmethod
    def parse(cls, name: str) -> "MetricKind":
        """Resolve a metric from its (case-insensitive) short name.

        Raises:
            ValueError: If the name is not one of WMC, RFC, NOC, LOCM
        """
        try:
            return cls(name.strip().upper())
        except ValueError:
            valid = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unknown metric {name!r}. Choose from: {valid}") from None


_METRIC_TITLES = {
    MetricKind.WMC: "Weighted Methods per Class",
    MetricKind.RFC: "Response for Class",
    MetricKind.NOC: "Number of Children",
    MetricKind.LOCM: "Lack of Cohesion of Methods",
}

_METRIC_WEIGHTS = {
    MetricKind.WMC: 0.3,
    MetricKind.RFC: 0.3,
    MetricKind.NOC: 0.1,
    MetricKind.LOCM: 0.3,
}

# (accepted, poor)
_METRIC_MESSAGES = {
    MetricKind.WMC: (
        "WMC metric value is within the accepted range. "
        "Consider reviewing the number of methods in this class.",
        "WMC metric is poor. Consider reducing method complexity or refactoring large classes.",
    ),
    MetricKind.RFC: (
        "RFC metric value is within the accepted range. "
        "Consider reviewing your class response complexity.",
        "RFC metric is poor. Consider simplifying class methods or reducing interdependencies.",
    ),
    MetricKind.NOC: (
        "NOC metric value is within the accepted range, "
        "consider reviewing your class hierarchy breadth.",
        "NOC metric value is poor, indicating a potential issue with class hierarchy breadth.",
    ),
    MetricKind.LOCM: (
        "LOCM metric value is within the accepted range. Consider reviewing your class cohesion.",
        "LOCM metric is poor. Changes to your current model are highly recommended.",
    ),
}


@dataclass(frozen=True)
class DeclarationSite:
    """Where a class, function or variable is declared."""

    name: str
    file_path: str
    line: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be at least 1, got {self.line}")

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line}"


@dataclass(frozen=True)
class Variable:
    """A variable binding discovered inside a class."""

    declaration: DeclarationSite
    raw_text: str = ""

    @property
    def name(self) -> str:
        return self.declaration.name


@dataclass(frozen=True)
class Function:
    """A method of a class.

    ``called_names`` and ``accessed_names`` keep duplicates: every call site
    and every member access counts.
    """

    declaration: DeclarationSite
    signature_text: str = ""
    body_text: str = ""
    called_names: Tuple[str, ...] = ()
    accessed_names: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "called_names", tuple(self.called_names))
        object.__setattr__(self, "accessed_names", tuple(self.accessed_names))

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def call_count(self) -> int:
        return len(self.called_names)


@dataclass(frozen=True)
class MetricValue:
    """A raw metric value and its classification."""

    value: float = 0
    mark: Mark = Mark.UNOWNED


UNEVALUATED = MetricValue()


def _clean_parent_names(names: Iterable[str]) -> frozenset:
    cleaned = (name.strip().strip(",").strip() for name in names)
    return frozenset(name for name in cleaned if name)


@dataclass(frozen=True)
class ClassDecl:
    """A class with its methods, variables and metric values."""

    name: str
    declaration: DeclarationSite
    parent_names: frozenset = field(default_factory=frozenset)
    functions: Tuple[Function, ...] = ()
    variables: Tuple[Variable, ...] = ()
    metrics: Mapping[MetricKind, MetricValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parent_names", _clean_parent_names(self.parent_names))
        object.__setattr__(self, "functions", tuple(self.functions))
        object.__setattr__(self, "variables", tuple(self.variables))
        values = {kind: self.metrics.get(kind, UNEVALUATED) for kind in MetricKind}
        object.__setattr__(self, "metrics", MappingProxyType(values))

    def __hash__(self) -> int:
        return hash((self.name, self.declaration))

    @property
    def function_count(self) -> int:
        return len(self.functions)

    def metric(self, kind: MetricKind) -> MetricValue:
        return self.metrics[kind]

    def with_metric(self, kind: MetricKind, value: MetricValue) -> "ClassDecl":
        """Return a copy of this class with one metric replaced."""
        metrics = dict(self.metrics)
        metrics[kind] = value
        return replace(self, metrics=metrics)
