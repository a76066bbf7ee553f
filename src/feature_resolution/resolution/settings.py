"""Resolver settings."""
from __future__ import annotations

import dataclasses
import os
import typing

from feature_resolution.config import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    Settings,
)
from feature_resolution.resolution.report import ResolutionOrder

DEADLOCK_REASON = "attempts to resolve this dependency resulted in a deadlock"


@dataclasses.dataclass
class ResolverSettings(Settings):
    """Tunables of :class:`~feature_resolution.resolution.Resolver`.

    Read from ``FEATURE_RESOLUTION_ORDERING``, ``FEATURE_RESOLUTION_DEADLOCK_REASON``
    and ``FEATURE_RESOLUTION_LOG_ROUNDS``.
    """

    _prefix: typing.ClassVar[str] = "FEATURE_RESOLUTION"

    ordering: str = ResolutionOrder.INPUT_REVERSED.value
    deadlock_reason: str = DEADLOCK_REASON
    log_rounds: bool = True

    def _validate(self) -> None:
        if self.ordering not in {o.value for o in ResolutionOrder}:
            raise InvalidSettingValueError(
                "ordering",
                self.ordering,
                f"expected one of {', '.join(o.value for o in ResolutionOrder)}",
            )
        if not self.deadlock_reason.strip():
            raise InvalidSettingValueError("deadlock_reason", self.deadlock_reason, "must not be empty")

    @property
    def order(self) -> ResolutionOrder:
        return ResolutionOrder(self.ordering)

    @classmethod
    def from_env(cls, env_file: str | os.PathLike[str] | None = None) -> ResolverSettings:
        """Load from the environment, reading *env_file* first when given."""
        loader = DotenvSettingsLoader(env_file) if env_file is not None else EnvSettingsLoader()
        return loader.load(cls)


__all__ = ["DEADLOCK_REASON", "ResolverSettings"]
