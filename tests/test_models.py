"""Tests for the declaration model."""

import pytest

from stability_assurance.models import (
    ClassDecl,
    DeclarationSite,
    Function,
    Mark,
    MetricKind,
    MetricValue,
)


class TestDeclarationSite:
    """Test DeclarationSite validation."""

    def test_location(self):
        assert DeclarationSite("Foo", "pkg/foo.py", 12).location == "pkg/foo.py:12"

    def test_line_must_be_positive(self):
        with pytest.raises(ValueError):
            DeclarationSite("Foo", "foo.py", 0)


class TestFunction:
    """Test Function value semantics."""

    def test_names_are_stored_as_tuples(self):
        function = Function(
            DeclarationSite("run", "a.py", 3),
            called_names=["save", "save"],
            accessed_names=["items"],
        )
        assert function.called_names == ("save", "save")
        assert function.accessed_names == ("items",)

    def test_call_count_keeps_duplicates(self):
        function = Function(DeclarationSite("run", "a.py", 3), called_names=("a", "a", "b"))
        assert function.call_count == 3
        assert function.name == "run"


class TestClassDecl:
    """Test ClassDecl construction and metric updates."""

    def test_parent_names_are_cleaned(self, make_class):
        cls = make_class("Child", parents=[" Base,", "", "Mixin ", ","])
        assert cls.parent_names == frozenset({"Base", "Mixin"})

    def test_every_metric_starts_unevaluated(self, make_class):
        cls = make_class("Foo")
        for kind in MetricKind:
            assert cls.metric(kind) == MetricValue(0, Mark.UNOWNED)

    def test_with_metric_returns_a_copy(self, make_class):
        cls = make_class("Foo", methods=2)
        updated = cls.with_metric(MetricKind.WMC, MetricValue(2, Mark.GOOD))

        assert updated.metric(MetricKind.WMC) == MetricValue(2, Mark.GOOD)
        assert cls.metric(MetricKind.WMC).mark is Mark.UNOWNED
        assert updated.functions == cls.functions

    def test_metrics_are_read_only(self, make_class):
        cls = make_class("Foo")
        with pytest.raises(TypeError):
            cls.metrics[MetricKind.WMC] = MetricValue(1)

    def test_equal_classes_hash_equal(self, make_class):
        a = make_class("Foo", methods=1)
        b = make_class("Foo", methods=1)
        assert a == b
        assert len({a, b}) == 1

    def test_function_count(self, make_class):
        assert make_class("Foo", methods=3).function_count == 3
        assert isinstance(make_class("Foo"), ClassDecl)


class TestMetricKind:
    """Test MetricKind helpers."""

    def test_parse_is_case_insensitive(self):
        assert MetricKind.parse("locm") is MetricKind.LOCM
        assert MetricKind.parse(" Wmc ") is MetricKind.WMC

    def test_parse_unknown_metric(self):
        with pytest.raises(ValueError, match="Unknown metric"):
            MetricKind.parse("CBO")

    def test_weights_sum_to_one(self):
        assert sum(kind.weight for kind in MetricKind) == pytest.approx(1.0)

    def test_every_metric_has_messages(self):
        for kind in MetricKind:
            assert kind.value in kind.poor_message
            assert "accepted range" in kind.accepted_message


class TestMark:
    """Test Mark scores and ordering."""

    def test_scores(self):
        assert Mark.GOOD.score == 1.0
        assert Mark.ACCEPTED.score == 0.5
        assert Mark.POOR.score == 0.0
        assert Mark.UNOWNED.score == 0.0

    def test_rank_orders_best_first(self):
        ordered = sorted(Mark, key=lambda mark: mark.rank)
        assert ordered == [Mark.GOOD, Mark.ACCEPTED, Mark.POOR, Mark.UNOWNED]

    def test_issues(self):
        assert Mark.POOR.is_issue()
        assert Mark.ACCEPTED.is_issue()
        assert not Mark.GOOD.is_issue()
        assert not Mark.UNOWNED.is_issue()
