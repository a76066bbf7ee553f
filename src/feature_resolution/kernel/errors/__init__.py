"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                              (domain.py)
    │   ├── InvariantViolationError
    │   ├── ConflictError
    │   │   └── DependencyOwnershipError
    │   └── FeatureDependencyResolutionFailure   (resolution.py)
    └── ApplicationError                         (application.py)
        └── ConfigError                          (feature_resolution.config)
"""

from feature_resolution.kernel.errors.application import ApplicationError
from feature_resolution.kernel.errors.base import BaseError, feature_label
from feature_resolution.kernel.errors.domain import (
    ConflictError,
    DependencyOwnershipError,
    DomainError,
    InvariantViolationError,
)
from feature_resolution.kernel.errors.resolution import FeatureDependencyResolutionFailure

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DependencyOwnershipError",
    "DomainError",
    "FeatureDependencyResolutionFailure",
    "InvariantViolationError",
    "feature_label",
]
