"""Testing – Hypothesis strategies for resolver property tests."""
from feature_resolution.testing.strategies import FeatureGraph, feature_graph_strategy

__all__ = ["FeatureGraph", "feature_graph_strategy"]
