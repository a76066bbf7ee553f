"""Feature criteria — composable predicates naming the features a dependency targets."""

from __future__ import annotations

import abc
from typing import Any, Callable, Iterable

from feature_resolution.features.feature import Feature
from feature_resolution.kernel.errors import InvariantViolationError


class FeatureCriterion(abc.ABC):
    """Abstract base for criteria — provides operator overloads.

    Subclass this and implement ``is_satisfied_by`` and ``describe``.

    Example::

        target = OfType(DriveBase) & ~Named("sim-drive")
        FeatureDependency(target)
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: Feature) -> bool: ...

    @abc.abstractmethod
    def describe(self) -> str: ...

    def select(self, candidates: Iterable[Feature]) -> tuple[Feature, ...]:
        """Return every candidate satisfying this criterion, in iteration order."""
        return tuple(c for c in candidates if self.is_satisfied_by(c))

    # Named combinators ------------------------------------------------
    def and_(self, other: FeatureCriterion) -> AllOf:
        return AllOf(self, other)

    def or_(self, other: FeatureCriterion) -> AnyOf:
        return AnyOf(self, other)

    def not_(self) -> Not:
        return Not(self)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: FeatureCriterion) -> AllOf:
        return AllOf(self, other)

    def __or__(self, other: FeatureCriterion) -> AnyOf:
        return AnyOf(self, other)

    def __invert__(self) -> Not:
        return Not(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


class OfType(FeatureCriterion):
    """Matches instances of a feature class (subclasses included)."""

    def __init__(self, feature_type: type) -> None:
        self.feature_type = feature_type

    def is_satisfied_by(self, candidate: Feature) -> bool:
        return isinstance(candidate, self.feature_type)

    def describe(self) -> str:
        return f"a feature of type {self.feature_type.__name__}"


class IsFeature(FeatureCriterion):
    """Matches one specific feature instance."""

    def __init__(self, feature: Feature) -> None:
        self.feature = feature

    def is_satisfied_by(self, candidate: Feature) -> bool:
        return candidate is self.feature

    def describe(self) -> str:
        return f"the feature {self.feature.name!r}"


class Named(FeatureCriterion):
    def __init__(self, name: str) -> None:
        self.name = name

    def is_satisfied_by(self, candidate: Feature) -> bool:
        return getattr(candidate, "name", None) == self.name

    def describe(self) -> str:
        return f"a feature named {self.name!r}"


class Matching(FeatureCriterion):
    """Wraps an arbitrary predicate; *description* is used in failure reasons."""

    def __init__(self, predicate: Callable[[Feature], bool], description: str | None = None) -> None:
        self.predicate = predicate
        self.description = description or getattr(predicate, "__name__", "predicate")

    def is_satisfied_by(self, candidate: Feature) -> bool:
        return bool(self.predicate(candidate))

    def describe(self) -> str:
        return f"a feature matching {self.description}"


class AllOf(FeatureCriterion):
    """Conjunction of two criteria."""

    def __init__(self, left: FeatureCriterion, right: FeatureCriterion) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: Feature) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)

    def describe(self) -> str:
        return f"({self._left.describe()} and {self._right.describe()})"


class AnyOf(FeatureCriterion):
    """Disjunction of two criteria."""

    def __init__(self, left: FeatureCriterion, right: FeatureCriterion) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: Feature) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)

    def describe(self) -> str:
        return f"({self._left.describe()} or {self._right.describe()})"


class Not(FeatureCriterion):
    """Negation of a criterion."""

    def __init__(self, criterion: FeatureCriterion) -> None:
        self._criterion = criterion

    def is_satisfied_by(self, candidate: Feature) -> bool:
        return not self._criterion.is_satisfied_by(candidate)

    def describe(self) -> str:
        return f"not {self._criterion.describe()}"


def as_criterion(target: Any) -> FeatureCriterion:
    """Coerce a criterion, a feature class or a feature instance into a criterion."""
    if isinstance(target, FeatureCriterion):
        return target
    if isinstance(target, type):
        return OfType(target)
    if isinstance(target, Feature):
        return IsFeature(target)
    raise InvariantViolationError(
        f"Cannot target {target!r}: expected a FeatureCriterion, a feature class or a Feature",
        detail={"target": repr(target)},
    )


__all__ = [
    "AllOf",
    "AnyOf",
    "FeatureCriterion",
    "IsFeature",
    "Matching",
    "Named",
    "Not",
    "OfType",
    "as_criterion",
]
