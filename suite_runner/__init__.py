"""suite-runner: nested test groups, exclusive runs and a console report.

Host test modules register through the module-level helpers::

    from suite_runner import before_each, describe, it

    def body():
        before_each(reset_state)
        it("adds", lambda: check_add())

    describe("math", body)
"""

from .runner import ExecutionConfig, ExecutionResult, TestExecutor
from .suite import (
    RegistrationContext,
    RegistrationError,
    activate,
    before_each,
    describe,
    describe_only,
    get_context,
    it,
    it_only,
    load_forest,
)

__version__ = "0.1.0"

__all__ = [
    "ExecutionConfig",
    "ExecutionResult",
    "TestExecutor",
    "RegistrationContext",
    "RegistrationError",
    "activate",
    "before_each",
    "describe",
    "describe_only",
    "get_context",
    "it",
    "it_only",
    "load_forest",
]
