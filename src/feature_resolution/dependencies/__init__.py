"""Dependencies — the closed set of prerequisite kinds a feature can declare.

Variants::

    FlagDependency         a flag is present          (flags.py)
    IncludesExactlyOneOf   exactly one flag of a group (flags.py)
    FeatureDependency      a matching feature exists   (features.py)
    DependsOnOneOf         any of several targets      (features.py)
    Yields                 the yielding round is on    (yielding.py)
    YieldsTo               yielding and a match exists (yielding.py)
"""

from feature_resolution.dependencies.base import Dependency
from feature_resolution.dependencies.features import DependsOnOneOf, FeatureDependency
from feature_resolution.dependencies.flags import FlagDependency, IncludesExactlyOneOf
from feature_resolution.dependencies.outcome import Evaluation, Satisfied, Unsatisfied
from feature_resolution.dependencies.yielding import Yields, YieldsTo

type AnyDependency = (
    FlagDependency
    | FeatureDependency
    | DependsOnOneOf
    | Yields
    | YieldsTo
    | IncludesExactlyOneOf
)

__all__ = [
    "AnyDependency",
    "Dependency",
    "DependsOnOneOf",
    "Evaluation",
    "FeatureDependency",
    "FlagDependency",
    "IncludesExactlyOneOf",
    "Satisfied",
    "Unsatisfied",
    "Yields",
    "YieldsTo",
]
