"""RFC | Response For a Class.

The response set of a class is the set of methods that can potentially be
executed in response to a message received by an object of that class:
each method of the class plus every call site inside it.
"""

from typing import Sequence, Tuple

from ..logging_config import get_logger
from ..models import ClassDecl, MetricKind, MetricValue

logger = get_logger(__name__)


def class_rfc(cls: ClassDecl) -> int:
    return sum(1 + function.call_count for function in cls.functions)


def evaluate_rfc(classes: Sequence[ClassDecl]) -> Tuple[ClassDecl, ...]:
    """Annotate every class with its RFC value (mark left unowned)."""
    if not classes:
        logger.info("Passed data for evaluation of the RFC metric is empty.")
        return tuple(classes)

    logger.debug(f"Evaluating RFC for {len(classes)} classes")
    return tuple(
        cls.with_metric(MetricKind.RFC, MetricValue(class_rfc(cls))) for cls in classes
    )
