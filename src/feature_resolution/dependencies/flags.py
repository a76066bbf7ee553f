"""Flag dependencies — FlagDependency and IncludesExactlyOneOf."""

from __future__ import annotations

from typing import Any, Callable, Collection

from feature_resolution.dependencies.base import Dependency
from feature_resolution.dependencies.outcome import Evaluation, Satisfied
from feature_resolution.features.flags import FeatureFlag
from feature_resolution.kernel.errors import InvariantViolationError

_ANY = object()


class FlagDependency(Dependency[Collection[FeatureFlag], tuple[FeatureFlag, ...]]):
    """Requires a flag with ``key`` among the flags of the resolution call.

    A flag carrying a value is compatible when it equals ``value`` (if
    given) and passes ``accepts`` (if given).  Every compatible flag is
    recorded as output.
    """

    def __init__(
        self,
        key: str,
        value: Any = _ANY,
        *,
        accepts: Callable[[Any], bool] | None = None,
    ) -> None:
        super().__init__()
        self.key = key
        self.value = value
        self.accepts = accepts

    def _is_compatible(self, flag: FeatureFlag) -> bool:
        if self.value is not _ANY and flag.value != self.value:
            return False
        return self.accepts is None or bool(self.accepts(flag.value))

    def evaluate(self, context: Collection[FeatureFlag]) -> Evaluation[tuple[FeatureFlag, ...]]:
        candidates = [flag for flag in context if flag.key == self.key]
        matches = tuple(flag for flag in candidates if self._is_compatible(flag))
        if matches:
            return Satisfied(matches)
        if candidates:
            found = ", ".join(str(flag) for flag in candidates)
            return self._unsatisfied(f"requires {self.describe()} but only found incompatible [{found}]")
        return self._unsatisfied(f"requires {self.describe()} but it is not present")

    def describe(self) -> str:
        if self.value is not _ANY:
            return f"flag {self.key}={self.value!r}"
        return f"flag {self.key!r}"


class IncludesExactlyOneOf(Dependency[Collection[FeatureFlag], FeatureFlag]):
    """Requires exactly one flag from a group (zero or several both fail)."""

    def __init__(self, *keys: str) -> None:
        super().__init__()
        if not keys:
            raise InvariantViolationError("IncludesExactlyOneOf needs at least one flag key")
        self.keys: tuple[str, ...] = tuple(dict.fromkeys(keys))

    def evaluate(self, context: Collection[FeatureFlag]) -> Evaluation[FeatureFlag]:
        present = [flag for flag in context if flag.key in self.keys]
        if len(present) == 1:
            return Satisfied(present[0])
        if not present:
            return self._unsatisfied(f"requires {self.describe()} but none were present")
        found = ", ".join(sorted(str(flag) for flag in present))
        return self._unsatisfied(f"requires {self.describe()} but found {len(present)}: [{found}]")

    def describe(self) -> str:
        return f"exactly one of flags [{', '.join(self.keys)}]"


__all__ = ["FlagDependency", "IncludesExactlyOneOf"]
