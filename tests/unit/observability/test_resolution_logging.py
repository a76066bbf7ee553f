"""Unit tests for resolver logging."""

from __future__ import annotations

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from feature_resolution import Feature, FeatureFlag, Resolver, ResolverSettings
from feature_resolution.dependencies import FlagDependency
from feature_resolution.observability import configure_logging, get_logger
from feature_resolution.resolution import DEADLOCK_REASON


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolverLogging:
    def test_round_and_completion_events(self) -> None:
        a = Feature(FlagDependency("x"), name="a")
        with capture_logs() as logs:
            Resolver().resolve([a], [], [FeatureFlag("x")])
        events = [entry["event"] for entry in logs]
        assert events == ["resolution.round", "resolution.completed"]
        assert logs[0]["round"] == 1
        assert logs[0]["resolved"] == 1
        assert logs[1]["rounds"] == 1

    def test_deadlock_is_a_warning(self) -> None:
        stuck = Feature(FlagDependency("missing"), name="stuck")
        with capture_logs() as logs:
            Resolver().resolve([stuck])
        deadlocks = [entry for entry in logs if entry["event"] == "resolution.deadlock"]
        assert len(deadlocks) == 1
        assert deadlocks[0]["log_level"] == "warning"
        assert deadlocks[0]["feature"] == "stuck"
        assert deadlocks[0]["failures"] == [
            {"code": "feature_dependency_resolution_failure", "message": DEADLOCK_REASON, "feature": "stuck"},
            {
                "code": "feature_dependency_resolution_failure",
                "message": "requires flag 'missing' but it is not present",
                "feature": "stuck",
            },
        ]

    def test_round_events_can_be_disabled(self) -> None:
        a = Feature(FlagDependency("x"), name="a")
        with capture_logs() as logs:
            Resolver(ResolverSettings(log_rounds=False)).resolve([a], [], [FeatureFlag("x")])
        assert [entry["event"] for entry in logs] == ["resolution.completed"]


class TestConfigureLogging:
    def test_installs_single_root_handler(self, restore_logging) -> None:
        configure_logging(logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_console_renderer(self, restore_logging) -> None:
        configure_logging(json=False)
        formatter = logging.getLogger().handlers[0].formatter
        assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)

    def test_get_logger_binds_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests", run="r1").info("hello")
        assert logs == [{"run": "r1", "event": "hello", "log_level": "info"}]
