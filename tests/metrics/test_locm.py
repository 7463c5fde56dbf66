"""Tests for metrics/locm.py."""

from stability_assurance.metrics import class_locm, evaluate_locm
from stability_assurance.models import MetricKind


class TestLOCM:
    """Test Lack of Cohesion of Methods."""

    def test_total_minus_distinct_accesses(self, make_class, make_function):
        cls = make_class(
            "Account",
            methods=[
                make_function("deposit", accesses=("balance", "owner")),
                make_function("withdraw", accesses=("balance",)),
                make_function("report", accesses=("balance", "owner", "history")),
            ],
        )
        # 6 accesses, 3 distinct members
        assert class_locm(cls) == 3

    def test_no_shared_members(self, make_class, make_function):
        cls = make_class(
            "Foo",
            methods=[make_function("a", accesses=("x",)), make_function("b", accesses=("y",))],
        )
        assert class_locm(cls) == 0

    def test_no_accesses(self, make_class):
        assert class_locm(make_class("Foo", methods=3)) == 0

    def test_evaluate(self, make_class, make_function):
        cls = make_class("Foo", methods=[make_function("a", accesses=("x", "x"))])
        (result,) = evaluate_locm([cls])
        assert result.metric(MetricKind.LOCM).value == 1

    def test_empty_input(self):
        assert evaluate_locm([]) == ()
