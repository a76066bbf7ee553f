"""Unit tests for ResolutionReport and its ordered views."""

from __future__ import annotations

from feature_resolution.features import Feature
from feature_resolution.kernel.errors import FeatureDependencyResolutionFailure
from feature_resolution.resolution import ResolutionOrder, ResolutionReport


def _report(default_order: ResolutionOrder = ResolutionOrder.INPUT_REVERSED):
    a, b, c = Feature(name="a"), Feature(name="b"), Feature(name="c")
    failures = {
        a: frozenset(),
        b: frozenset({
            FeatureDependencyResolutionFailure(b, "requires flag 'x' but it is not present"),
            FeatureDependencyResolutionFailure(b, "deadlock"),
        }),
        c: frozenset(),
    }
    report = ResolutionReport(
        failures=failures,
        resolution_sequence=(c, a),
        rounds=2,
        default_order=default_order,
    )
    return report, a, b, c


class TestResolutionReport:
    def test_resolved_and_failed(self) -> None:
        report, a, b, c = _report()
        assert report.resolved == (a, c)
        assert report.failed == (b,)

    def test_input_reversed(self) -> None:
        report, a, b, c = _report()
        assert [f for f, _ in report.ordered()] == [c, b, a]

    def test_resolution_order(self) -> None:
        report, a, b, c = _report()
        ordered = report.ordered(ResolutionOrder.RESOLUTION)
        assert [f for f, _ in ordered] == [c, a, b]
        assert ordered[0][1] == frozenset()

    def test_order_accepts_string(self) -> None:
        report, a, b, c = _report()
        assert [f for f, _ in report.ordered("resolution")] == [c, a, b]

    def test_default_order_from_report(self) -> None:
        report, a, b, c = _report(ResolutionOrder.RESOLUTION)
        assert [f for f, _ in report.ordered()] == [c, a, b]

    def test_explain(self) -> None:
        report, *_ = _report()
        assert report.explain() == (
            "b:\n"
            "  - deadlock\n"
            "  - requires flag 'x' but it is not present"
        )

    def test_explain_empty_when_all_resolved(self) -> None:
        a = Feature(name="a")
        assert ResolutionReport(failures={a: frozenset()}).explain() == ""
