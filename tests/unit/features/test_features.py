"""Unit tests for features, flags and criteria."""

from __future__ import annotations

import pytest

from feature_resolution.dependencies import FlagDependency, Yields
from feature_resolution.features import (
    Feature,
    FeatureFlag,
    IsFeature,
    Matching,
    Named,
    OfType,
    as_criterion,
)
from feature_resolution.kernel.errors import DependencyOwnershipError, InvariantViolationError


class Drive(Feature):
    def __init__(self) -> None:
        super().__init__(FlagDependency("drive"), Yields())


# ---------------------------------------------------------------------------
# Feature
# ---------------------------------------------------------------------------


class TestFeature:
    def test_default_name_is_class_name(self) -> None:
        assert Drive().name == "Drive"
        assert Feature(name="custom").name == "custom"

    def test_dependencies_in_declaration_order(self) -> None:
        drive = Drive()
        assert [type(d) for d in drive.dependencies] == [FlagDependency, Yields]

    def test_dependencies_bound_to_owner(self) -> None:
        drive = Drive()
        assert all(d.owner is drive for d in drive.dependencies)

    def test_identity_equality(self) -> None:
        assert Drive() != Drive()
        drive = Drive()
        assert {drive: 1}[drive] == 1

    def test_dependency_cannot_change_owner(self) -> None:
        dependency = Yields()
        Feature(dependency)
        with pytest.raises(DependencyOwnershipError):
            Feature(dependency)

    def test_rebinding_same_owner_is_allowed(self) -> None:
        dependency = Yields()
        feature = Feature(dependency)
        dependency.bind(feature)
        assert dependency.owner is feature


# ---------------------------------------------------------------------------
# FeatureFlag
# ---------------------------------------------------------------------------


class TestFeatureFlag:
    def test_frozen(self) -> None:
        flag = FeatureFlag("drive")
        with pytest.raises((AttributeError, TypeError)):
            flag.key = "other"  # type: ignore[misc]

    def test_description_ignored_in_equality(self) -> None:
        assert FeatureFlag("drive", description="a") == FeatureFlag("drive", description="b")

    def test_value_participates_in_equality(self) -> None:
        assert FeatureFlag("mode", "auto") != FeatureFlag("mode", "teleop")

    def test_str(self) -> None:
        assert str(FeatureFlag("drive")) == "drive"
        assert str(FeatureFlag("mode", "auto")) == "mode='auto'"


# ---------------------------------------------------------------------------
# Criteria
# ---------------------------------------------------------------------------


class TestCriteria:
    def test_combinators(self) -> None:
        drive = Drive()
        other = Feature(name="other")
        criterion = OfType(Drive) | Named("other")
        assert criterion.select([drive, other]) == (drive, other)
        assert (OfType(Drive) & ~Named("Drive")).select([drive, other]) == ()
        assert OfType(Drive).not_().is_satisfied_by(other) is True

    def test_named_methods_match_operators(self) -> None:
        drive = Drive()
        assert OfType(Drive).and_(Named("Drive")).is_satisfied_by(drive)
        assert Named("x").or_(Named("Drive")).is_satisfied_by(drive)

    def test_matching_description(self) -> None:
        criterion = Matching(lambda f: f.name.startswith("d"), "a lowercase d-name")
        assert criterion.describe() == "a feature matching a lowercase d-name"
        assert criterion.is_satisfied_by(Feature(name="drive"))

    def test_describe_composite(self) -> None:
        assert (OfType(Drive) & Named("x")).describe() == "(a feature of type Drive and a feature named 'x')"

    def test_as_criterion(self) -> None:
        drive = Drive()
        assert isinstance(as_criterion(Drive), OfType)
        assert isinstance(as_criterion(drive), IsFeature)
        named = Named("x")
        assert as_criterion(named) is named
        with pytest.raises(InvariantViolationError):
            as_criterion(42)
