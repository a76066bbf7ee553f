"""Features – the Feature collaborator, flags and target criteria."""
from feature_resolution.features.criteria import (
    AllOf,
    AnyOf,
    FeatureCriterion,
    IsFeature,
    Matching,
    Named,
    Not,
    OfType,
    as_criterion,
)
from feature_resolution.features.feature import Feature
from feature_resolution.features.flags import FeatureFlag

__all__ = [
    "AllOf",
    "AnyOf",
    "Feature",
    "FeatureCriterion",
    "FeatureFlag",
    "IsFeature",
    "Matching",
    "Named",
    "Not",
    "OfType",
    "as_criterion",
]
