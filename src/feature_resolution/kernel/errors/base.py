"""Root error class for the feature_resolution error hierarchy."""

from __future__ import annotations

from typing import Any


def feature_label(feature: Any) -> str:
    """Return the name a feature is reported under."""
    name = getattr(feature, "name", None)
    return name if isinstance(name, str) else repr(feature)


class BaseError(Exception):
    """Root of the error hierarchy.

    Most errors here concern one feature, either because it is being declared
    or because it is being resolved.  That feature is kept on the error and
    prefixes its string form, e.g. ``arm: requires flag 'x'``.

    Args:
        message: Human-readable description.
        feature: The feature the error is about, if any.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context for structured logs.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        feature: Any = None,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.feature = feature
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        if self.feature is None:
            return self.message
        return f"{feature_label(self.feature)}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured log fields."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.feature is not None:
            payload["feature"] = feature_label(self.feature)
        if self.detail:
            payload["detail"] = self.detail
        return payload


__all__ = ["BaseError", "feature_label"]
