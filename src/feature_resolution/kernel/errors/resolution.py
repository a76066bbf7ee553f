"""FeatureDependencyResolutionFailure — one diagnostic in a resolution result."""

from __future__ import annotations

from typing import Any, Iterable

from feature_resolution.kernel.errors.base import feature_label
from feature_resolution.kernel.errors.domain import DomainError


class FeatureDependencyResolutionFailure(DomainError):
    """Explains why *feature* could not (yet) be resolved.

    Instances are values: they compare and hash by ``(feature, reason,
    causes)``, so a dependency that fails the same way on several rounds is
    recorded once in the result set.  The feature itself compares by
    identity.

    The resolver never raises these; they are collected into the result.
    Callers that want to abort on a failed feature may raise one directly.
    """

    default_code = "feature_dependency_resolution_failure"

    def __init__(
        self,
        feature: Any,
        reason: str,
        causes: Iterable[FeatureDependencyResolutionFailure] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(reason, feature=feature, **kwargs)
        self.reason = reason
        self.causes: frozenset[FeatureDependencyResolutionFailure] = frozenset(causes)

    def _key(self) -> tuple[int, str, frozenset[FeatureDependencyResolutionFailure]]:
        return id(self.feature), self.reason, self.causes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureDependencyResolutionFailure):
            return NotImplemented
        return self.feature is other.feature and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(feature={feature_label(self.feature)!r}, reason={self.reason!r})"

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.causes:
            base["causes"] = sorted((c.to_dict() for c in self.causes), key=lambda c: c["message"])
        return base


__all__ = ["FeatureDependencyResolutionFailure"]
