"""Tests for metrics/rfc.py."""

from stability_assurance.metrics import class_rfc, evaluate_rfc
from stability_assurance.models import MetricKind


class TestRFC:
    """Test Response For a Class."""

    def test_methods_without_calls(self, make_class):
        assert class_rfc(make_class("Foo", methods=2)) == 2

    def test_each_call_site_counts(self, make_class, make_function):
        cls = make_class(
            "Foo",
            methods=[
                make_function("a", calls=("save", "save", "load")),
                make_function("b", calls=("load",)),
            ],
        )
        assert class_rfc(cls) == (1 + 3) + (1 + 1)

    def test_class_without_methods(self, make_class):
        assert class_rfc(make_class("Empty")) == 0

    def test_evaluate_sets_every_class(self, make_class):
        result = evaluate_rfc([make_class("A", methods=1), make_class("B", methods=4)])
        assert [cls.metric(MetricKind.RFC).value for cls in result] == [1, 4]

    def test_empty_input(self):
        assert evaluate_rfc(()) == ()
