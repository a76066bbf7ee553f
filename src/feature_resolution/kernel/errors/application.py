"""Application-layer errors — configuration of the resolver."""

from __future__ import annotations

from feature_resolution.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting concern outside the resolution rules themselves."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
