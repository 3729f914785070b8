"""Suite module - test tree model and registration."""

from .schema import (
    Case,
    Failure,
    FailureRecord,
    Forest,
    Group,
    RegistrationError,
    RunResult,
)
from .registry import (
    RegistrationContext,
    activate,
    before_each,
    describe,
    describe_only,
    get_context,
    it,
    it_only,
)
from .loader import ModuleLoadError, load_forest, load_module

__all__ = [
    "Case",
    "Failure",
    "FailureRecord",
    "Forest",
    "Group",
    "RegistrationError",
    "RunResult",
    "RegistrationContext",
    "activate",
    "before_each",
    "describe",
    "describe_only",
    "get_context",
    "it",
    "it_only",
    "ModuleLoadError",
    "load_forest",
    "load_module",
]
