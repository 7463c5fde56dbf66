"""Tests for metrics/wmc.py."""

from stability_assurance.metrics import WMCMode, class_wmc, evaluate_wmc
from stability_assurance.models import Mark, MetricKind


class TestClassWMC:
    """Test the per-class WMC value."""

    def test_unity_counts_methods(self, make_class, make_function):
        cls = make_class("Foo", methods=[make_function("a", calls=("x", "y")), make_function("b")])
        assert class_wmc(cls, WMCMode.UNITY) == 2

    def test_custom_sums_calls(self, make_class, make_function):
        cls = make_class(
            "Foo",
            methods=[make_function("a", calls=("x", "y")), make_function("b", calls=("x",))],
        )
        assert class_wmc(cls, WMCMode.CUSTOM) == 3

    def test_class_without_methods(self, make_class):
        cls = make_class("Empty")
        assert class_wmc(cls, WMCMode.UNITY) == 0
        assert class_wmc(cls, WMCMode.CUSTOM) == 0


class TestEvaluateWMC:
    """Test evaluate_wmc over a collection."""

    def test_values_are_set_and_marks_left_unowned(self, make_class):
        classes = [make_class(name, methods=2) for name in ("A", "B", "C")]
        result = evaluate_wmc(classes, WMCMode.UNITY)

        assert [cls.metric(MetricKind.WMC).value for cls in result] == [2, 2, 2]
        assert all(cls.metric(MetricKind.WMC).mark is Mark.UNOWNED for cls in result)

    def test_order_and_count_preserved(self, make_class):
        classes = [make_class(name, methods=i) for i, name in enumerate("XYZ")]
        result = evaluate_wmc(classes, WMCMode.UNITY)
        assert [cls.name for cls in result] == ["X", "Y", "Z"]

    def test_empty_input(self):
        assert evaluate_wmc([]) == ()

    def test_other_metrics_untouched(self, make_class):
        (cls,) = evaluate_wmc([make_class("A", methods=1)], WMCMode.UNITY)
        assert cls.metric(MetricKind.RFC).mark is Mark.UNOWNED
        assert cls.metric(MetricKind.RFC).value == 0
