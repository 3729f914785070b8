"""Run configuration data models.

Defines dataclasses for parsing and representing YAML run configuration
files (``.suiterunner.yml``).
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from ..runner.executor import ExecutionConfig


class ReporterType(str, Enum):
    """Supported output formats."""
    CONSOLE = "console"
    JSON = "json"


VALID_REPORTERS = {e.value for e in ReporterType}
DEFAULT_CONFIG_NAMES = (".suiterunner.yml", ".suiterunner.yaml")


@dataclass
class RunConfig:
    """Options for one invocation of the runner."""
    modules: list[str] = field(default_factory=list)
    reporter: str = "console"
    save_report: bool = False
    report_dir: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        self.reporter = self.reporter.lower()

    def to_execution_config(self) -> ExecutionConfig:
        return ExecutionConfig(
            save_report=self.save_report,
            report_dir=Path(self.report_dir) if self.report_dir else None,
        )


@dataclass
class ValidationError:
    """A single validation error."""
    path: str
    message: str
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __str__(self) -> str:
        if self.valid:
            msg = "Valid"
            if self.warnings:
                msg += f" ({self.warning_count} warnings)"
            return msg
        return f"Invalid: {self.error_count} errors, {self.warning_count} warnings"
