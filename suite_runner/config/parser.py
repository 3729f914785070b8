"""YAML run configuration parser.

Parses ``.suiterunner.yml`` files into RunConfig dataclass objects.
"""

from pathlib import Path
from typing import Optional, Union

import yaml

from .schema import DEFAULT_CONFIG_NAMES, RunConfig


def find_config(directory: Union[str, Path] = ".") -> Optional[Path]:
    """Return the default configuration file in ``directory``, if any."""
    directory = Path(directory)
    for name in DEFAULT_CONFIG_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def parse_config(file_path: Union[str, Path]) -> RunConfig:
    """Parse a YAML configuration file into a RunConfig object.

    Args:
        file_path: Path to the YAML configuration file.

    Returns:
        Parsed RunConfig object.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML is malformed or fields have the wrong shape.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    # An empty file means defaults.
    if data is None:
        return RunConfig()

    return parse_config_data(data, source=str(file_path))


def parse_config_data(data: dict, source: str = "<inline>") -> RunConfig:
    """Parse a configuration from a dictionary (already loaded YAML).

    Args:
        data: Dictionary with configuration data.
        source: Source identifier for error messages.

    Returns:
        Parsed RunConfig object.

    Raises:
        ValueError: If fields are malformed.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    modules = data.get("modules", [])
    if isinstance(modules, str):
        modules = [modules]
    if not isinstance(modules, list):
        raise ValueError(f"'modules' must be a list in {source}")

    for i, module in enumerate(modules):
        if not isinstance(module, str):
            raise ValueError(f"modules[{i}] must be a string in {source}")

    reporter = data.get("reporter", "console")
    if not isinstance(reporter, str):
        raise ValueError(f"'reporter' must be a string in {source}")

    for flag in ("save_report", "verbose"):
        if flag in data and not isinstance(data[flag], bool):
            raise ValueError(f"'{flag}' must be true or false in {source}")

    report_dir = data.get("report_dir")
    if report_dir is not None:
        report_dir = str(report_dir)

    return RunConfig(
        modules=list(modules),
        reporter=reporter,
        save_report=data.get("save_report", False),
        report_dir=report_dir,
        verbose=data.get("verbose", False),
    )
