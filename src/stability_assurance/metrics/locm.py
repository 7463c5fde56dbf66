"""LOCM | Lack of Cohesion of Methods.

Computed as the number of member accesses made by the methods of a class
minus the number of distinct members accessed. A higher value means the
methods reuse more of the same attributes.

Classification keeps the shared threshold rule (values at or below the
"good" boundary are good); the polarity is preserved as implemented.
"""

from typing import Sequence, Tuple

from ..logging_config import get_logger
from ..models import ClassDecl, MetricKind, MetricValue

logger = get_logger(__name__)


def class_locm(cls: ClassDecl) -> int:
    accessed = [name for function in cls.functions for name in function.accessed_names]
    return len(accessed) - len(set(accessed))


def evaluate_locm(classes: Sequence[ClassDecl]) -> Tuple[ClassDecl, ...]:
    """Annotate every class with its LOCM value (mark left unowned)."""
    if not classes:
        logger.info("Passed data for evaluation of the LOCM metric is empty.")
        return tuple(classes)

    logger.debug(f"Evaluating LOCM for {len(classes)} classes")
    return tuple(
        cls.with_metric(MetricKind.LOCM, MetricValue(class_locm(cls))) for cls in classes
    )
