"""Features – FeatureFlag value object."""
from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class FeatureFlag:
    """Opaque marker supplied by the caller for one resolution call.

    ``value`` lets a flag carry a setting (``FeatureFlag("mode", "teleop")``);
    plain on/off markers leave it at ``True``.  ``description`` is informative
    only and does not take part in equality.
    """
    key: str
    value: Any = True
    description: str = dataclasses.field(default="", compare=False)

    def __str__(self) -> str:
        if self.value is True:
            return self.key
        return f"{self.key}={self.value!r}"


__all__ = ["FeatureFlag"]
