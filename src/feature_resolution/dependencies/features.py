"""Feature dependencies — FeatureDependency and DependsOnOneOf."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Collection

from feature_resolution.dependencies.base import Dependency
from feature_resolution.dependencies.outcome import Evaluation, Satisfied
from feature_resolution.features.criteria import FeatureCriterion, as_criterion
from feature_resolution.kernel.errors import InvariantViolationError

if TYPE_CHECKING:
    from feature_resolution.features.feature import Feature


class FeatureDependency(Dependency[Collection["Feature"], tuple["Feature", ...]]):
    """Requires a feature matching ``target`` (a criterion, a class or an instance)."""

    def __init__(self, target: Any) -> None:
        super().__init__()
        self.criterion: FeatureCriterion = as_criterion(target)

    def evaluate(self, context: Collection[Feature]) -> Evaluation[tuple[Feature, ...]]:
        matches = self.criterion.select(context)
        if matches:
            return Satisfied(matches)
        return self._unsatisfied(f"requires {self.describe()}")

    def describe(self) -> str:
        return self.criterion.describe()


class DependsOnOneOf(Dependency[Collection["Feature"], tuple["Feature", ...]]):
    """Requires a feature matching any one of several targets."""

    def __init__(self, *targets: Any) -> None:
        super().__init__()
        if not targets:
            raise InvariantViolationError("DependsOnOneOf needs at least one target")
        self.criteria: tuple[FeatureCriterion, ...] = tuple(as_criterion(t) for t in targets)

    def evaluate(self, context: Collection[Feature]) -> Evaluation[tuple[Feature, ...]]:
        matches = tuple(
            feature
            for feature in context
            if any(criterion.is_satisfied_by(feature) for criterion in self.criteria)
        )
        if matches:
            return Satisfied(matches)
        return self._unsatisfied(f"requires {self.describe()}")

    def describe(self) -> str:
        return f"one of [{'; '.join(c.describe() for c in self.criteria)}]"


__all__ = ["DependsOnOneOf", "FeatureDependency"]
