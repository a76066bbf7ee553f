"""Result assembly — ResolutionReport and the ordered views of a resolution run."""
from __future__ import annotations

import dataclasses
import enum
from typing import Mapping

from feature_resolution.features.feature import Feature
from feature_resolution.kernel.errors import FeatureDependencyResolutionFailure

type FailureSet = frozenset[FeatureDependencyResolutionFailure]
type OrderedResolution = list[tuple[Feature, FailureSet]]


class ResolutionOrder(enum.StrEnum):
    """How :meth:`ResolutionReport.ordered` lays out its entries.

    ``INPUT_REVERSED`` is the long-standing behaviour of
    ``resolve_dependencies_ordered_list``: the caller's input order, reversed,
    regardless of the round in which each feature resolved.

    ``RESOLUTION`` lists resolved features in the order they actually
    resolved (round by round, input order within a round), followed by the
    features that failed, in input order.
    """

    INPUT_REVERSED = "input_reversed"
    RESOLUTION = "resolution"


@dataclasses.dataclass(frozen=True)
class ResolutionReport:
    """Everything one resolution run produced.

    ``failures`` maps every input feature, in input order, to its diagnostic
    trail; an empty set means the feature resolved.
    """

    failures: Mapping[Feature, FailureSet]
    resolution_sequence: tuple[Feature, ...] = ()
    rounds: int = 0
    yielded: bool = False
    default_order: ResolutionOrder = ResolutionOrder.INPUT_REVERSED

    @property
    def resolved(self) -> tuple[Feature, ...]:
        return tuple(feature for feature, failures in self.failures.items() if not failures)

    @property
    def failed(self) -> tuple[Feature, ...]:
        return tuple(feature for feature, failures in self.failures.items() if failures)

    def ordered(self, order: ResolutionOrder | str | None = None) -> OrderedResolution:
        order = ResolutionOrder(order) if order is not None else self.default_order
        if order is ResolutionOrder.INPUT_REVERSED:
            return list(self.failures.items())[::-1]
        ordered: OrderedResolution = [(feature, frozenset()) for feature in self.resolution_sequence]
        ordered.extend((feature, failures) for feature, failures in self.failures.items() if failures)
        return ordered

    def explain(self) -> str:
        """Render the failed features and their reasons, one reason per line."""
        lines: list[str] = []
        for feature in self.failed:
            lines.append(f"{feature.name}:")
            lines.extend(f"  - {reason}" for reason in sorted(f.reason for f in self.failures[feature]))
        return "\n".join(lines)


__all__ = ["FailureSet", "OrderedResolution", "ResolutionOrder", "ResolutionReport"]
