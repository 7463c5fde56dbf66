"""Project scale classification.

The class count decides the project scale, and the scale decides how many
children a class may have before NOC is considered too broad.
"""

from ..models import ProjectSize

SMALL_PROJECT_LIMIT = 50
MEDIUM_PROJECT_LIMIT = 200

_ALLOWED_NOC_RATIO = {
    ProjectSize.SMALL: 0.1,
    ProjectSize.MEDIUM: 0.3,
    ProjectSize.LARGE: 0.5,
}


def determine_scale(class_count: int) -> ProjectSize:
    """Bucket a project by its class count."""
    if class_count < SMALL_PROJECT_LIMIT:
        return ProjectSize.SMALL
    if class_count < MEDIUM_PROJECT_LIMIT:
        return ProjectSize.MEDIUM
    return ProjectSize.LARGE


def allowed_noc_per_class(scale: ProjectSize, class_count: int) -> float:
    """Allowed number of children per class for a project of this scale."""
    return class_count * _ALLOWED_NOC_RATIO[scale]
