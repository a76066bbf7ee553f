"""Features – the Feature base class consumed by the resolver."""
from __future__ import annotations

from typing import TYPE_CHECKING

from feature_resolution.kernel.errors import DependencyOwnershipError

if TYPE_CHECKING:
    from feature_resolution.dependencies.base import Dependency


class Feature:
    """A pluggable unit with an ordered list of activation prerequisites.

    Features compare by identity.  Every dependency handed to the constructor
    is bound to this feature; a dependency can belong to one feature only.

    A feature without dependencies never resolves through the resolver and
    has to be activated by the caller some other way.

    Example::

        class Telemetry(Feature):
            def __init__(self) -> None:
                super().__init__(FlagDependency("telemetry"), Yields())
    """

    def __init__(self, *dependencies: Dependency, name: str | None = None) -> None:
        self._name = name
        self._dependencies: tuple[Dependency, ...] = tuple(dependencies)
        # all or nothing: a rejected feature leaves none of its dependencies bound
        for dependency in self._dependencies:
            if dependency.owner is not None:
                raise DependencyOwnershipError(dependency, dependency.owner, self)
        for dependency in self._dependencies:
            dependency.bind(self)

    @property
    def name(self) -> str:
        return self._name or type(self).__name__

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        return self._dependencies

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


__all__ = ["Feature"]
