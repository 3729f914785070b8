"""Runner module - filtering and execution."""

from .executor import ExecutionConfig, ExecutionResult, TestExecutor
from .resolver import Resolution, count_runnable, resolve_forest, resolve_group
from .result_collector import CaseOutcome, CollectedResult, ResultCollector

__all__ = [
    "ExecutionConfig",
    "ExecutionResult",
    "TestExecutor",
    "Resolution",
    "count_runnable",
    "resolve_forest",
    "resolve_group",
    "CaseOutcome",
    "CollectedResult",
    "ResultCollector",
]
