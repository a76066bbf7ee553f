"""Property-based tests for the resolver over generated feature graphs."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from feature_resolution import Resolver, resolve_dependencies_map, resolve_dependencies_ordered_list
from feature_resolution.dependencies import FeatureDependency, FlagDependency
from feature_resolution.features import Feature
from feature_resolution.resolution import DEADLOCK_REASON
from feature_resolution.testing import FeatureGraph, feature_graph_strategy


# ---------------------------------------------------------------------------
# Shape of the result
# ---------------------------------------------------------------------------


class TestResultShape:
    @given(feature_graph_strategy())
    def test_every_input_appears_once_in_input_order(self, graph: FeatureGraph) -> None:
        result = resolve_dependencies_map(graph.unresolved, graph.active, graph.flags)
        assert list(result) == graph.unresolved

    @given(feature_graph_strategy())
    def test_ordered_list_is_reversed_map(self, graph: FeatureGraph) -> None:
        result = resolve_dependencies_map(graph.unresolved, graph.active, graph.flags)
        ordered = resolve_dependencies_ordered_list(graph.unresolved, graph.active, graph.flags)
        assert len(ordered) == len(result)
        assert ordered == list(result.items())[::-1]

    @given(feature_graph_strategy())
    def test_failed_features_carry_deadlock_record(self, graph: FeatureGraph) -> None:
        result = resolve_dependencies_map(graph.unresolved, graph.active, graph.flags)
        for failures in result.values():
            if failures:
                assert DEADLOCK_REASON in {f.reason for f in failures}


# ---------------------------------------------------------------------------
# Resolution semantics
# ---------------------------------------------------------------------------


class TestResolutionSemantics:
    @given(feature_graph_strategy())
    def test_features_without_dependencies_never_resolve(self, graph: FeatureGraph) -> None:
        result = resolve_dependencies_map(graph.unresolved, graph.active, graph.flags)
        for feature in graph.unresolved:
            if not feature.dependencies:
                assert result[feature]

    @given(feature_graph_strategy())
    def test_repeated_resolution_is_content_equal(self, graph: FeatureGraph) -> None:
        first = resolve_dependencies_map(graph.unresolved, graph.active, graph.flags)
        second = resolve_dependencies_map(graph.unresolved, graph.active, graph.flags)
        assert first == second

    @given(feature_graph_strategy())
    def test_round_count_is_bounded(self, graph: FeatureGraph) -> None:
        report = Resolver().resolve(graph.unresolved, graph.active, graph.flags)
        assert report.rounds <= 2 * len(graph.unresolved) + 1

    @given(feature_graph_strategy())
    def test_resolved_dependencies_are_backed_by_known_features(self, graph: FeatureGraph) -> None:
        report = Resolver().resolve(graph.unresolved, graph.active, graph.flags)
        available: set[Feature] = set(report.resolved) | set(graph.active)
        for feature in report.resolved:
            for dependency in feature.dependencies:
                if isinstance(dependency, FeatureDependency):
                    assert dependency.output
                    assert set(dependency.output) <= available
                if isinstance(dependency, FlagDependency):
                    assert set(dependency.output or ()) <= set(graph.flags)

    @settings(max_examples=25)
    @given(feature_graph_strategy(), st.booleans())
    def test_resolution_sequence_covers_resolved_features(self, graph: FeatureGraph, reverse: bool) -> None:
        unresolved = graph.unresolved[::-1] if reverse else graph.unresolved
        report = Resolver().resolve(unresolved, graph.active, graph.flags)
        assert set(report.resolution_sequence) == set(report.resolved)
        assert len(report.resolution_sequence) == len(report.resolved)
