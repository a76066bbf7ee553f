"""Dependency base class — the evaluate / accept_output contract."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Generic, TypeVar

from feature_resolution.dependencies.outcome import Evaluation, Unsatisfied
from feature_resolution.kernel.errors import (
    DependencyOwnershipError,
    FeatureDependencyResolutionFailure,
)

if TYPE_CHECKING:
    from feature_resolution.features.feature import Feature

C = TypeVar("C")
P = TypeVar("P")


class Dependency(abc.ABC, Generic[C, P]):
    """One activation prerequisite of a feature.

    ``evaluate`` checks the dependency against a context (flags, features or
    the yielding state, depending on the variant) and never raises for an
    unmet criterion: it returns :class:`Unsatisfied` carrying a failure
    record instead.  On success the resolver hands the payload to
    ``accept_output``, and the owning feature can read it back through
    ``output`` once resolution is done.
    """

    def __init__(self) -> None:
        self._owner: Feature | None = None
        self._output: P | None = None

    @property
    def owner(self) -> Feature | None:
        return self._owner

    @property
    def output(self) -> P | None:
        """What satisfied this dependency on its last successful evaluation."""
        return self._output

    def bind(self, feature: Feature) -> None:
        if self._owner is not None and self._owner is not feature:
            raise DependencyOwnershipError(self, self._owner, feature)
        self._owner = feature

    @abc.abstractmethod
    def evaluate(self, context: C) -> Evaluation[P]: ...

    def accept_output(self, output: P) -> None:
        self._output = output

    @abc.abstractmethod
    def describe(self) -> str: ...

    def _unsatisfied(self, reason: str) -> Unsatisfied:
        return Unsatisfied(FeatureDependencyResolutionFailure(self._owner, reason))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


__all__ = ["Dependency"]
