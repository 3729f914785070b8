"""Config module - YAML run configuration parsing."""

from .schema import (
    ReporterType,
    RunConfig,
    ValidationError,
    ValidationResult,
)
from .parser import find_config, parse_config, parse_config_data
from .validator import validate_config

__all__ = [
    "ReporterType",
    "RunConfig",
    "ValidationError",
    "ValidationResult",
    "find_config",
    "parse_config",
    "parse_config_data",
    "validate_config",
]
