"""Resolution loop — decides which features can be activated, and why the others cannot.

Every round evaluates all dependencies of every pending feature, in input
order.  A feature whose dependencies all hold becomes visible to
``FeatureDependency`` / ``DependsOnOneOf`` / ``YieldsTo`` checks of the
features evaluated after it, in the same round, and leaves the pending list
at the end of the round.  When a round makes no progress, one yielding round
follows in which ``Yields`` and ``YieldsTo`` can succeed; if that round makes
no progress either, every feature still pending is deadlocked.

A yielding round that makes progress returns the loop to normal rounds, so
every pair of rounds resolves at least one feature and at most
``2 * len(unresolved) + 1`` rounds run.
"""

from __future__ import annotations

import dataclasses
import itertools
from typing import Collection, Iterable, Sequence, assert_never

from feature_resolution.dependencies import (
    AnyDependency,
    DependsOnOneOf,
    Evaluation,
    FeatureDependency,
    FlagDependency,
    IncludesExactlyOneOf,
    Satisfied,
    Yields,
    YieldsTo,
)
from feature_resolution.features import Feature, FeatureFlag
from feature_resolution.kernel.errors import FeatureDependencyResolutionFailure
from feature_resolution.observability import get_logger
from feature_resolution.resolution.report import (
    FailureSet,
    OrderedResolution,
    ResolutionOrder,
    ResolutionReport,
)
from feature_resolution.resolution.settings import ResolverSettings

_NO_FAILURES: FailureSet = frozenset()


@dataclasses.dataclass
class ResolutionPair:
    """A pending feature and whether it resolves in the current round."""

    feature: Feature
    resolves: bool = False


class Resolver:
    """Fixed-point dependency resolver.

    Holds no state between calls apart from its settings; the only objects
    mutated during a call are the dependencies' recorded outputs.
    """

    def __init__(self, settings: ResolverSettings | None = None) -> None:
        self.settings = settings or ResolverSettings()
        self._log = get_logger(__name__)

    def resolve(
        self,
        unresolved: Iterable[Feature],
        active: Iterable[Feature] = (),
        flags: Iterable[FeatureFlag] = (),
    ) -> ResolutionReport:
        pending = [ResolutionPair(feature) for feature in dict.fromkeys(unresolved)]
        active_features = tuple(active)
        feature_flags = tuple(flags)
        failures: dict[Feature, FailureSet] = {}
        sequence: list[Feature] = []
        rounds = 0
        yielding = False
        yielded = False
        progressed = bool(pending)

        while pending and (progressed or yielding):
            rounds += 1
            yielded = yielded or yielding
            before = len(pending)
            # grows during the round: a feature resolving now satisfies later features in the same round
            resolved_so_far = list(sequence)

            for pair in pending:
                round_failures = self._evaluate(pair, resolved_so_far, active_features, feature_flags, yielding)
                failures[pair.feature] = failures.get(pair.feature, _NO_FAILURES) | round_failures
                if pair.resolves:
                    resolved_so_far.append(pair.feature)

            still_pending: list[ResolutionPair] = []
            for pair in pending:
                if pair.resolves:
                    # earlier rounds may have failed on features that only resolved since
                    failures[pair.feature] = _NO_FAILURES
                    sequence.append(pair.feature)
                else:
                    still_pending.append(pair)
            pending = still_pending

            progressed = len(pending) != before
            if self.settings.log_rounds:
                self._log.debug(
                    "resolution.round",
                    round=rounds,
                    yielding=yielding,
                    resolved=before - len(pending),
                    pending=len(pending),
                )
            yielding = not progressed and not yielding

        for pair in pending:
            deadlock = FeatureDependencyResolutionFailure(pair.feature, self.settings.deadlock_reason)
            failures[pair.feature] = failures[pair.feature] | {deadlock}
            self._log.warning(
                "resolution.deadlock",
                feature=pair.feature.name,
                failures=[f.to_dict() for f in sorted(failures[pair.feature], key=lambda f: f.reason)],
            )

        report = ResolutionReport(
            failures=failures,
            resolution_sequence=tuple(sequence),
            rounds=rounds,
            yielded=yielded,
            default_order=self.settings.order,
        )
        self._log.info(
            "resolution.completed",
            rounds=rounds,
            resolved=len(sequence),
            failed=len(pending),
            yielded=yielded,
        )
        return report

    def resolve_map(
        self,
        unresolved: Iterable[Feature],
        active: Iterable[Feature] = (),
        flags: Iterable[FeatureFlag] = (),
    ) -> dict[Feature, FailureSet]:
        return dict(self.resolve(unresolved, active, flags).failures)

    def resolve_ordered(
        self,
        unresolved: Iterable[Feature],
        active: Iterable[Feature] = (),
        flags: Iterable[FeatureFlag] = (),
        *,
        order: ResolutionOrder | str | None = None,
    ) -> OrderedResolution:
        return self.resolve(unresolved, active, flags).ordered(order)

    # ------------------------------------------------------------------

    def _evaluate(
        self,
        pair: ResolutionPair,
        resolved: Sequence[Feature],
        active: Sequence[Feature],
        flags: Sequence[FeatureFlag],
        yielding: bool,
    ) -> FailureSet:
        # a feature without dependencies is never activated by the resolver
        pair.resolves = bool(pair.feature.dependencies)
        round_failures: set[FeatureDependencyResolutionFailure] = set()
        for dependency in pair.feature.dependencies:
            if not self._check(dependency, resolved, active, flags, yielding, round_failures):
                pair.resolves = False
        return frozenset(round_failures)

    def _check(
        self,
        dependency: AnyDependency,
        resolved: Sequence[Feature],
        active: Sequence[Feature],
        flags: Sequence[FeatureFlag],
        yielding: bool,
        round_failures: set[FeatureDependencyResolutionFailure],
    ) -> bool:
        if isinstance(dependency, (FlagDependency, IncludesExactlyOneOf)):
            return _accept(dependency, dependency.evaluate(flags), round_failures)
        if isinstance(dependency, FeatureDependency):
            outcomes = (dependency.evaluate(resolved), dependency.evaluate(active))
            return _settle(dependency, outcomes, round_failures)
        if isinstance(dependency, DependsOnOneOf):
            fresh, current = dependency.evaluate(resolved), dependency.evaluate(active)
            # only the match among already-active features is recorded
            return _settle(dependency, (fresh, current), round_failures, recorded=(current,))
        if isinstance(dependency, Yields):
            return _accept(dependency, dependency.evaluate(yielding), round_failures)
        if isinstance(dependency, YieldsTo):
            outcomes = (dependency.evaluate((yielding, resolved)), dependency.evaluate((yielding, active)))
            return _settle(dependency, outcomes, round_failures)
        assert_never(dependency)


def _accept(
    dependency: AnyDependency,
    outcome: Evaluation,
    round_failures: set[FeatureDependencyResolutionFailure],
) -> bool:
    if isinstance(outcome, Satisfied):
        dependency.accept_output(outcome.payload)
        return True
    round_failures.add(outcome.failure)
    return False


def _settle(
    dependency: AnyDependency,
    outcomes: Sequence[Evaluation],
    round_failures: set[FeatureDependencyResolutionFailure],
    *,
    recorded: Sequence[Evaluation] | None = None,
) -> bool:
    """Succeed if any outcome is satisfied, accepting the combined payloads of
    *recorded* (all outcomes by default); otherwise collect every failure."""
    if not any(isinstance(outcome, Satisfied) for outcome in outcomes):
        round_failures.update(outcome.failure for outcome in outcomes if not isinstance(outcome, Satisfied))
        return False
    payloads = [o.payload for o in (outcomes if recorded is None else recorded) if isinstance(o, Satisfied)]
    dependency.accept_output(tuple(itertools.chain.from_iterable(payloads)))
    return True


def resolve_dependencies_map(
    unresolved: Collection[Feature],
    active: Collection[Feature] = (),
    flags: Collection[FeatureFlag] = (),
) -> dict[Feature, FailureSet]:
    """Resolve *unresolved* against *active* and *flags*.

    Every input feature appears once, in input order; an empty failure set
    means the feature can be activated.
    """
    return Resolver().resolve_map(unresolved, active, flags)


def resolve_dependencies_ordered_list(
    unresolved: Collection[Feature],
    active: Collection[Feature] = (),
    flags: Collection[FeatureFlag] = (),
    *,
    order: ResolutionOrder | str | None = None,
) -> OrderedResolution:
    """Return the entries of :func:`resolve_dependencies_map` as an ordered list.

    By default the list is the input order reversed, which is not the order
    in which features resolved; pass ``order=ResolutionOrder.RESOLUTION`` for
    that.
    """
    return Resolver().resolve_ordered(unresolved, active, flags, order=order)


__all__ = [
    "ResolutionPair",
    "Resolver",
    "resolve_dependencies_map",
    "resolve_dependencies_ordered_list",
]
