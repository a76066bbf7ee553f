"""
feature_resolution – fixed-point dependency resolution for pluggable features.

Import path convention::

    from feature_resolution import Feature, FeatureFlag
    from feature_resolution.dependencies import FeatureDependency, FlagDependency, Yields
    from feature_resolution.resolution import Resolver, resolve_dependencies_map
"""

from feature_resolution.features import Feature, FeatureFlag
from feature_resolution.kernel.errors import FeatureDependencyResolutionFailure
from feature_resolution.resolution import (
    ResolutionOrder,
    ResolutionReport,
    Resolver,
    ResolverSettings,
    resolve_dependencies_map,
    resolve_dependencies_ordered_list,
)

__version__ = "0.1.0"
__all__ = [
    "Feature",
    "FeatureDependencyResolutionFailure",
    "FeatureFlag",
    "ResolutionOrder",
    "ResolutionReport",
    "Resolver",
    "ResolverSettings",
    "__version__",
    "resolve_dependencies_map",
    "resolve_dependencies_ordered_list",
]
