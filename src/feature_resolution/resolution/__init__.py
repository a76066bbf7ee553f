"""Resolution – the fixed-point resolver and its result views."""
from feature_resolution.resolution.processor import (
    ResolutionPair,
    Resolver,
    resolve_dependencies_map,
    resolve_dependencies_ordered_list,
)
from feature_resolution.resolution.report import (
    FailureSet,
    OrderedResolution,
    ResolutionOrder,
    ResolutionReport,
)
from feature_resolution.resolution.settings import DEADLOCK_REASON, ResolverSettings

__all__ = [
    "DEADLOCK_REASON",
    "FailureSet",
    "OrderedResolution",
    "ResolutionOrder",
    "ResolutionPair",
    "ResolutionReport",
    "Resolver",
    "ResolverSettings",
    "resolve_dependencies_map",
    "resolve_dependencies_ordered_list",
]
