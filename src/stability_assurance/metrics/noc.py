"""NOC | Number of Children.

Children are resolved by plain name equality against the flat class
collection: class ``D`` is a child of ``C`` when ``C.name`` is one of
``D.parent_names``. No hierarchy object is built and a class naming itself
as parent is counted like any other match. Parent names with no matching
class are ignored.
"""

from collections import Counter
from typing import Sequence, Tuple

from ..logging_config import get_logger
from ..models import ClassDecl, MetricKind, MetricValue

logger = get_logger(__name__)


def count_children(name: str, classes: Sequence[ClassDecl]) -> int:
    return sum(1 for other in classes if name in other.parent_names)


def evaluate_noc(classes: Sequence[ClassDecl]) -> Tuple[ClassDecl, ...]:
    """Annotate every class with its NOC value (mark left unowned).

    The whole collection must be materialized: every class is read while
    resolving the children of every other class.
    """
    if not classes:
        logger.info("Passed data for evaluation of the NOC metric is empty.")
        return tuple(classes)

    logger.debug(f"Evaluating NOC for {len(classes)} classes")
    children: Counter = Counter()
    for other in classes:
        for parent in other.parent_names:
            children[parent] += 1
    return tuple(
        cls.with_metric(MetricKind.NOC, MetricValue(children[cls.name])) for cls in classes
    )
