"""Test executor - walks the filtered suite tree and runs it.

Coordinates a run:
1. Resolve which cases and groups are runnable
2. Run top-level cases, then top-level groups
3. Per group: print its name, run its cases (setup hooks first), recurse
4. Collect outcomes and failure records
5. Print the summary
"""

import asyncio
import inspect
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from ..reporting.console_reporter import ConsoleReporter
from ..reporting.json_reporter import DEFAULT_REPORT_NAME, JsonReporter
from ..suite.schema import Action, Case, Failure, Forest, RunResult
from .resolver import Resolution, resolve_forest
from .result_collector import CollectedResult, ResultCollector

logger = logging.getLogger(__name__)


@dataclass
class ExecutionConfig:
    """Configuration for a run."""
    save_report: bool = False
    report_dir: Optional[Path] = None


@dataclass
class ExecutionResult:
    """Complete result of a run."""
    result: RunResult = field(default_factory=RunResult)
    collected: CollectedResult = field(default_factory=CollectedResult)
    lines: list[str] = field(default_factory=list)
    duration_ms: int = 0
    report_path: Optional[str] = None

    @property
    def passed(self) -> int:
        return self.result.passed

    @property
    def failed(self) -> int:
        return self.result.failed

    @property
    def all_passed(self) -> bool:
        return self.result.failed == 0

    def to_json(self) -> dict[str, Any]:
        """Convert to the JSON report structure."""
        return JsonReporter().generate(self.collected, duration_ms=self.duration_ms)


async def _invoke(action: Action) -> None:
    """Call an action and wait for it if it suspends."""
    outcome = action()
    if inspect.isawaitable(outcome):
        await outcome


class TestExecutor:
    """Runs a frozen forest strictly one case at a time.

    Failures in hooks and case actions are recorded and never stop the
    run. Anything that is not an ``Exception`` propagates.
    """

    __test__ = False

    def __init__(
        self,
        forest: Forest,
        config: Optional[ExecutionConfig] = None,
        reporter: Optional[ConsoleReporter] = None,
    ):
        """Initialize test executor.

        Args:
            forest: Frozen registration to run.
            config: Execution configuration.
            reporter: Console reporter (None = print to stdout).
        """
        self.forest = forest
        self.config = config or ExecutionConfig()
        self.reporter = reporter or ConsoleReporter()
        self._collector = ResultCollector()

    def execute(self) -> ExecutionResult:
        """Run the forest on a fresh event loop."""
        return asyncio.run(self.execute_async())

    async def execute_async(self) -> ExecutionResult:
        """Run the forest inside an already running event loop."""
        start_time = time.time()
        self._collector = ResultCollector()
        self.reporter.reset()
        resolution = resolve_forest(self.forest)
        logger.debug(
            "Starting run (exclusive mode: %s)", resolution.exclusive_mode
        )

        totals = RunResult()
        for case in resolution.cases:
            totals += await self._run_case(case, hooks=[], depth=0, path=[])

        for sub in resolution.subgroups:
            totals += await self._run_group(sub, depth=1, path=[])

        collected = self._collector.result
        self.reporter.summary(totals, collected.failures)

        result = ExecutionResult(
            result=totals,
            collected=collected,
            lines=list(self.reporter.lines),
            duration_ms=int((time.time() - start_time) * 1000),
        )

        if self.config.save_report:
            result.report_path = self._save_report(result)

        return result

    async def _run_group(
        self, resolution: Resolution, depth: int, path: list[str]
    ) -> RunResult:
        """Run one group: its own cases first, then nested groups."""
        if not resolution.visible:
            return RunResult()

        group = resolution.group
        self.reporter.group(group.name, depth)
        path = path + [group.name]

        totals = RunResult()
        for case in resolution.cases:
            totals += await self._run_case(
                case, hooks=group.setup_hooks, depth=depth + 1, path=path
            )

        for sub in resolution.subgroups:
            totals += await self._run_group(sub, depth=depth + 1, path=path)

        return totals

    async def _run_case(
        self, case: Case, hooks: list[Action], depth: int, path: list[str]
    ) -> RunResult:
        """Run setup hooks then the case action; record the outcome."""
        start_time = time.time()
        try:
            for hook in hooks:
                await _invoke(hook)
            await _invoke(case.action)
        except Exception as e:
            duration_ms = int((time.time() - start_time) * 1000)
            failure = Failure.from_exception(e)
            logger.debug("Case %r failed:\n%s", case.name, failure.traceback)
            record = self._collector.add_failure(
                case.name, path, failure, depth, duration_ms
            )
            self.reporter.case_failed(record.index, case.name, depth)
            return RunResult(failed=1)

        duration_ms = int((time.time() - start_time) * 1000)
        self._collector.add_pass(case.name, path, duration_ms)
        self.reporter.case_passed(case.name, depth)
        return RunResult(passed=1)

    def _save_report(self, result: ExecutionResult) -> Optional[str]:
        """Save the JSON report to the configured directory."""
        report_dir = self.config.report_dir or Path(".")
        try:
            saved_path = JsonReporter().save(
                result.to_json(), Path(report_dir) / DEFAULT_REPORT_NAME
            )
        except OSError as e:
            logger.warning("Failed to save report: %s", e)
            return None

        logger.info("Report saved: %s", saved_path)
        return str(saved_path)
