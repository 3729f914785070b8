"""Result collector for suite execution.

Accumulates per-case outcomes and failure records while the executor
walks the tree, and hands out global failure indices.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..suite.schema import Failure, FailureRecord


@dataclass
class CaseOutcome:
    """Outcome of one executed case."""
    name: str
    path: list[str]
    passed: bool
    duration_ms: int = 0
    failure_index: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": list(self.path),
            "status": "passed" if self.passed else "failed",
            "duration_ms": self.duration_ms,
            "failure": self.failure_index,
        }


@dataclass
class CollectedResult:
    """Aggregated collection of case outcomes and failures."""
    outcomes: list[CaseOutcome] = field(default_factory=list)
    failures: list[FailureRecord] = field(default_factory=list)

    @property
    def passed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.passed)

    @property
    def total_count(self) -> int:
        return len(self.outcomes)

    @property
    def has_failures(self) -> bool:
        return len(self.failures) > 0


class ResultCollector:
    """Collects case outcomes for a single run."""

    def __init__(self):
        self.result = CollectedResult()
        self._next_index = 1

    def add_pass(self, name: str, path: list[str], duration_ms: int = 0) -> CaseOutcome:
        outcome = CaseOutcome(name=name, path=path, passed=True, duration_ms=duration_ms)
        self.result.outcomes.append(outcome)
        return outcome

    def add_failure(
        self,
        name: str,
        path: list[str],
        failure: Failure,
        depth: int,
        duration_ms: int = 0,
    ) -> FailureRecord:
        """Record a failed case under the next global failure index."""
        record = FailureRecord(
            index=self._next_index,
            name=name,
            message=failure.message,
            depth=depth,
            details=failure.details,
            traceback=failure.traceback,
        )
        self._next_index += 1
        self.result.failures.append(record)
        self.result.outcomes.append(CaseOutcome(
            name=name,
            path=path,
            passed=False,
            duration_ms=duration_ms,
            failure_index=record.index,
        ))
        return record
