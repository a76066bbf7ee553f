"""Evaluation outcome of a dependency — Satisfied and Unsatisfied variants."""

from __future__ import annotations

from typing import Generic, TypeVar

from feature_resolution.kernel.errors import FeatureDependencyResolutionFailure

P = TypeVar("P")


class Satisfied(Generic[P]):
    """The dependency holds; ``payload`` records what satisfied it."""

    __slots__ = ("_payload",)

    def __init__(self, payload: P) -> None:
        self._payload = payload

    @property
    def payload(self) -> P:
        return self._payload

    def __repr__(self) -> str:
        return f"Satisfied({self._payload!r})"


class Unsatisfied:
    """The dependency does not hold; ``failure`` explains why."""

    __slots__ = ("_failure",)

    def __init__(self, failure: FeatureDependencyResolutionFailure) -> None:
        self._failure = failure

    @property
    def failure(self) -> FeatureDependencyResolutionFailure:
        return self._failure

    def __repr__(self) -> str:
        return f"Unsatisfied({self._failure.reason!r})"


type Evaluation[P] = Satisfied[P] | Unsatisfied

__all__ = ["Evaluation", "Satisfied", "Unsatisfied"]
