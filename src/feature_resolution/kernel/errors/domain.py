"""Domain errors — ill-formed feature and dependency declarations."""

from __future__ import annotations

from typing import Any

from feature_resolution.kernel.errors.base import BaseError, feature_label


class DomainError(BaseError):
    """Raised when a declaration rule is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A dependency or feature was declared in a way that can never be evaluated."""

    default_code = "invariant_violation"


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class DependencyOwnershipError(ConflictError):
    """A dependency is already owned by another feature.

    Dependencies record what satisfied them, so sharing one instance between
    two features would let each overwrite the other's recorded output.
    """

    default_code = "dependency_ownership"

    def __init__(self, dependency: Any, owner: Any, claimant: Any, **kwargs: Any) -> None:
        super().__init__(
            f"cannot take {dependency!r}, it is already owned by {feature_label(owner)!r}",
            feature=claimant,
            detail={"owner": feature_label(owner)},
            **kwargs,
        )
        self.dependency = dependency
        self.owner = owner


__all__ = [
    "ConflictError",
    "DependencyOwnershipError",
    "DomainError",
    "InvariantViolationError",
]
