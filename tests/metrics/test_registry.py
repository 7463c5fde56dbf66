"""Tests for metrics/registry.py."""

from stability_assurance.metrics import (
    WMCMode,
    calculator_for,
    evaluate_locm,
    evaluate_noc,
    evaluate_rfc,
    run_calculators,
)
from stability_assurance.models import Mark, MetricKind, MetricValue


class TestCalculatorFor:
    """Test metric-to-calculator lookup."""

    def test_plain_calculators(self):
        assert calculator_for(MetricKind.RFC) is evaluate_rfc
        assert calculator_for(MetricKind.NOC) is evaluate_noc
        assert calculator_for(MetricKind.LOCM) is evaluate_locm

    def test_wmc_calculator_uses_mode(self, make_class, make_function):
        cls = make_class("A", methods=[make_function("a", calls=("x", "y", "z"))])
        (unity,) = calculator_for(MetricKind.WMC, WMCMode.UNITY)([cls])
        (custom,) = calculator_for(MetricKind.WMC, WMCMode.CUSTOM)([cls])
        assert unity.metric(MetricKind.WMC).value == 1
        assert custom.metric(MetricKind.WMC).value == 3


class TestRunCalculators:
    """Test running a selection of calculators."""

    def test_only_selected_metrics_are_computed(self, make_class):
        (cls,) = run_calculators([make_class("A", methods=2)], [MetricKind.RFC])
        assert cls.metric(MetricKind.RFC).value == 2
        assert cls.metric(MetricKind.WMC) == MetricValue(0, Mark.UNOWNED)

    def test_all_metrics(self, make_class):
        classes = [make_class("Base", methods=2), make_class("Child", methods=1, parents=["Base"])]
        base, child = run_calculators(classes, list(MetricKind), WMCMode.UNITY)
        assert base.metric(MetricKind.WMC).value == 2
        assert base.metric(MetricKind.RFC).value == 2
        assert base.metric(MetricKind.NOC).value == 1
        assert child.metric(MetricKind.NOC).value == 0

    def test_input_is_not_mutated(self, make_class):
        classes = (make_class("A", methods=2),)
        run_calculators(classes, list(MetricKind))
        assert classes[0].metric(MetricKind.RFC).value == 0
