"""Metric registry: maps each MetricKind to its calculator."""

from typing import Callable, Dict, Iterable, Sequence, Tuple

from ..models import ClassDecl, MetricKind
from .locm import evaluate_locm
from .noc import evaluate_noc
from .rfc import evaluate_rfc
from .wmc import WMCMode, evaluate_wmc

Calculator = Callable[[Sequence[ClassDecl]], Tuple[ClassDecl, ...]]


def calculator_for(kind: MetricKind, wmc_mode: WMCMode = WMCMode.CUSTOM) -> Calculator:
    """Return the calculator for a metric."""
    calculators: Dict[MetricKind, Calculator] = {
        MetricKind.WMC: lambda classes: evaluate_wmc(classes, wmc_mode),
        MetricKind.RFC: evaluate_rfc,
        MetricKind.NOC: evaluate_noc,
        MetricKind.LOCM: evaluate_locm,
    }
    return calculators[kind]


def run_calculators(
    classes: Sequence[ClassDecl],
    kinds: Iterable[MetricKind],
    wmc_mode: WMCMode = WMCMode.CUSTOM,
) -> Tuple[ClassDecl, ...]:
    """Run the calculators of the given metrics one after another.

    Metrics not listed are skipped and keep their unevaluated value.
    """
    result = tuple(classes)
    for kind in sorted(set(kinds), key=list(MetricKind).index):
        result = calculator_for(kind, wmc_mode)(result)
    return result
