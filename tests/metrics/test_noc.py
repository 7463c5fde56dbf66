"""Tests for metrics/noc.py."""

from stability_assurance.metrics import count_children, evaluate_noc
from stability_assurance.models import MetricKind


def _noc(classes):
    return {cls.name: cls.metric(MetricKind.NOC).value for cls in evaluate_noc(classes)}


class TestNOC:
    """Test Number of Children."""

    def test_base_and_derived(self, make_class):
        values = _noc([make_class("Base"), make_class("Derived", parents=["Base"])])
        assert values == {"Base": 1, "Derived": 0}

    def test_multiple_children(self, make_class):
        classes = [
            make_class("Base"),
            make_class("A", parents=["Base"]),
            make_class("B", parents=["Base", "Mixin"]),
            make_class("Mixin"),
        ]
        assert _noc(classes) == {"Base": 2, "A": 0, "B": 0, "Mixin": 1}

    def test_unknown_parent_is_ignored(self, make_class):
        assert _noc([make_class("A", parents=["object"])]) == {"A": 0}

    def test_self_reference_counts(self, make_class):
        assert _noc([make_class("Node", parents=["Node"])]) == {"Node": 1}

    def test_count_children_matches_evaluate(self, make_class):
        classes = [make_class("Base"), make_class("A", parents=["Base"])]
        assert count_children("Base", classes) == 1
        assert count_children("A", classes) == 0

    def test_empty_input(self):
        assert evaluate_noc([]) == ()
