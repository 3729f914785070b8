"""Tests configurations and fixtures."""

from typing import TYPE_CHECKING

import pytest

from suite_runner.reporting import ConsoleReporter
from suite_runner.runner import TestExecutor
from suite_runner.suite import RegistrationContext

if TYPE_CHECKING:
    from collections.abc import Callable

    from suite_runner.runner import ExecutionResult


@pytest.fixture
def context() -> RegistrationContext:
    """Provide a fresh registration context per test."""
    return RegistrationContext()


@pytest.fixture
def run() -> "Callable[[RegistrationContext], ExecutionResult]":
    """Provide a helper that freezes a context and runs it silently.

    Report lines are recorded on the returned result instead of being
    printed, so tests can compare them exactly.
    """
    def execute(ctx: RegistrationContext) -> "ExecutionResult":
        executor = TestExecutor(ctx.freeze(), reporter=ConsoleReporter(sink=None))
        return executor.execute()

    return execute


@pytest.fixture
def calls() -> list[str]:
    """Provide a list that actions append to, to observe call order."""
    return []
