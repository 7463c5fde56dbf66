"""WMC | Weighted Methods per Class.

WMC measures the summed complexity of the methods of a class. With every
method weighted as one (``unity``) it is the method count. The ``custom``
mode weights each method by the number of calls it makes, i.e. the
response-set based complexity used by the overall evaluation. This is a
simplification, not a cyclomatic complexity sum.
"""

from enum import Enum
from typing import Sequence, Tuple

from ..logging_config import get_logger
from ..models import ClassDecl, MetricKind, MetricValue

logger = get_logger(__name__)


class WMCMode(Enum):
    """How method complexity is weighted."""

    CUSTOM = "custom"
    UNITY = "unity"


def class_wmc(cls: ClassDecl, mode: WMCMode = WMCMode.CUSTOM) -> int:
    if mode is WMCMode.UNITY:
        return cls.function_count
    return sum(function.call_count for function in cls.functions)


def evaluate_wmc(
    classes: Sequence[ClassDecl], mode: WMCMode = WMCMode.CUSTOM
) -> Tuple[ClassDecl, ...]:
    """Annotate every class with its WMC value (mark left unowned)."""
    if not classes:
        logger.info("Passed data for evaluation of the WMC metric is empty.")
        return tuple(classes)

    logger.debug(f"Evaluating WMC ({mode.value}) for {len(classes)} classes")
    return tuple(
        cls.with_metric(MetricKind.WMC, MetricValue(class_wmc(cls, mode))) for cls in classes
    )
