"""Yielding dependencies — Yields and YieldsTo.

Both only hold during the yielding round, which the resolver runs once all
other features have stopped making progress.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Collection

from feature_resolution.dependencies.base import Dependency
from feature_resolution.dependencies.outcome import Evaluation, Satisfied
from feature_resolution.features.criteria import FeatureCriterion, as_criterion

if TYPE_CHECKING:
    from feature_resolution.features.feature import Feature


class Yields(Dependency[bool, None]):
    def evaluate(self, context: bool) -> Evaluation[None]:
        if context:
            return Satisfied(None)
        return self._unsatisfied("yields to other features and waits for the yielding round")

    def describe(self) -> str:
        return "yields"


class YieldsTo(Dependency[tuple[bool, Collection["Feature"]], tuple["Feature", ...]]):
    """Holds during the yielding round if a feature matching ``target`` is present."""

    def __init__(self, target: Any) -> None:
        super().__init__()
        self.criterion: FeatureCriterion = as_criterion(target)

    def evaluate(self, context: tuple[bool, Collection[Feature]]) -> Evaluation[tuple[Feature, ...]]:
        yielding, features = context
        if not yielding:
            return self._unsatisfied(f"yields to {self.describe()} and waits for the yielding round")
        matches = self.criterion.select(features)
        if matches:
            return Satisfied(matches)
        return self._unsatisfied(f"yields to {self.describe()} but none is present")

    def describe(self) -> str:
        return self.criterion.describe()


__all__ = ["Yields", "YieldsTo"]
