"""Console reporter - hierarchical text report of a run.

Every line is passed to the sink as soon as it is produced, so output
order follows traversal order.
"""

from typing import Callable, Optional

from ..suite.schema import FailureRecord, RunResult

INDENT = "  "
PASS_MARK = "✓"
DETAILS_INDENT = INDENT * 3


class ConsoleReporter:
    """Writes report lines to a sink and keeps a copy of them."""

    def __init__(self, sink: Optional[Callable[[str], None]] = print):
        """Initialize console reporter.

        Args:
            sink: Callable receiving one line at a time. None = record only.
        """
        self.sink = sink
        self.lines: list[str] = []

    def reset(self) -> None:
        """Forget lines recorded by a previous run."""
        self.lines.clear()

    def emit(self, line: str) -> None:
        self.lines.append(line)
        if self.sink is not None:
            self.sink(line)

    def group(self, name: str, depth: int) -> None:
        self.emit(f"{INDENT * depth}{name}")

    def case_passed(self, name: str, depth: int) -> None:
        self.emit(f"{INDENT * depth}{PASS_MARK} {name}")

    def case_failed(self, index: int, name: str, depth: int) -> None:
        # Top-level failures still get one level of indentation.
        self.emit(f"{INDENT * max(depth, 1)}{index}) {name}")

    def summary(self, result: RunResult, failures: list[FailureRecord]) -> None:
        """Print totals and one detail block per failure."""
        self.emit("")
        self.emit(f"{INDENT}{result.passed} passing")
        if result.failed > 0:
            self.emit(f"{INDENT}{result.failed} failing")
            for failure in failures:
                self.emit("")
                self.emit(f"{INDENT}{failure.index}) {failure.name}:")
                self.emit("")
                self.emit(f"{DETAILS_INDENT}{failure.details}")
