"""Threshold evaluation: map metric values to marks.

Every class of a project is judged against one shared threshold pair per
metric. The project-level marks use their own rule per metric:

    WMC        share of classes marked poor (<=10% good, <=30% accepted)
    RFC, NOC   project average against the same threshold pair
    LOCM       project average against the same threshold pair

The overall mark is a weighted sum of the project-level mark scores.
A metric that was not evaluated keeps ``Mark.UNOWNED`` and contributes 0;
weights are not renormalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from ..exceptions import InvalidConfigError
from ..models import Mark, MetricKind

# Default absolute thresholds (good, accepted)
RFC_DEFAULT = (50.0, 100.0)
LOCM_DEFAULT = (3.0, 9.0)

# Relative thresholds derive "accepted" from "good"
ACCEPTED_TOLERANCE = 1.1

# Share of poor classes tolerated for the project-level WMC mark
WMC_GOOD_POOR_SHARE = 0.1
WMC_ACCEPTED_POOR_SHARE = 0.3

# Overall score boundaries
OVERALL_GOOD_SCORE = 0.8
OVERALL_ACCEPTED_SCORE = 0.5


@dataclass(frozen=True)
class Thresholds:
    """A (good, accepted) boundary pair; values above ``accepted`` are poor."""

    good: float
    accepted: float

    def __post_init__(self) -> None:
        if self.good > self.accepted:
            raise InvalidConfigError(
                "thresholds",
                f"good={self.good}, accepted={self.accepted}",
                "good threshold must not exceed accepted threshold",
            )

    @classmethod
    def relative(cls, good: float) -> "Thresholds":
        """Thresholds where ``accepted`` is ``good`` plus a 10% tolerance."""
        return cls(good=good, accepted=good * ACCEPTED_TOLERANCE)


@dataclass(frozen=True)
class OverallMark:
    """Weighted overall stability mark."""

    label: str
    mark: Mark
    score: float


def classify(value: float, thresholds: Thresholds) -> Mark:
    """Classify a value: <= good is good, <= accepted is accepted, else poor."""
    if value <= thresholds.good:
        return Mark.GOOD
    if value <= thresholds.accepted:
        return Mark.ACCEPTED
    return Mark.POOR


def default_thresholds(
    kind: MetricKind, average_wmc: float, allowed_noc: float
) -> Thresholds:
    """Default thresholds for a metric in a given project.

    Args:
        kind: Metric to get thresholds for
        average_wmc: Project average WMC (WMC is judged relative to it)
        allowed_noc: Scale-dependent allowed NOC per class

    Returns:
        Thresholds used when the configuration does not override them
    """
    if kind is MetricKind.WMC:
        return Thresholds.relative(average_wmc)
    if kind is MetricKind.NOC:
        return Thresholds.relative(allowed_noc)
    if kind is MetricKind.RFC:
        return Thresholds(*RFC_DEFAULT)
    return Thresholds(*LOCM_DEFAULT)


def wmc_project_mark(class_marks: Iterable[Mark]) -> Mark:
    """Project-level WMC mark from the share of classes marked poor."""
    marks = list(class_marks)
    if not marks:
        return Mark.UNOWNED
    poor = sum(1 for mark in marks if mark is Mark.POOR)
    if poor <= len(marks) * WMC_GOOD_POOR_SHARE:
        return Mark.GOOD
    if poor <= len(marks) * WMC_ACCEPTED_POOR_SHARE:
        return Mark.ACCEPTED
    return Mark.POOR


def overall_mark(project_marks: Mapping[MetricKind, Mark]) -> OverallMark:
    """Combine project-level marks into the weighted overall mark."""
    score = sum(
        kind.weight * project_marks.get(kind, Mark.UNOWNED).score for kind in MetricKind
    )
    # 0.3 + 0.3 + 0.1 + 0.3 is not exactly 1.0 in binary floating point
    score = round(score, 10)
    if score >= OVERALL_GOOD_SCORE:
        return OverallMark("Good", Mark.GOOD, score)
    if score >= OVERALL_ACCEPTED_SCORE:
        return OverallMark("Accepted", Mark.ACCEPTED, score)
    return OverallMark("Poor", Mark.POOR, score)
