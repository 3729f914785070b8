"""Tests for run configuration parsing and validation."""

from pathlib import Path

import pytest

from suite_runner.config import (
    RunConfig,
    find_config,
    parse_config,
    parse_config_data,
    validate_config,
)


def test_parse_config_file(tmp_path: Path) -> None:
    """A complete YAML file maps onto RunConfig."""
    path = tmp_path / ".suiterunner.yml"
    path.write_text(
        "modules:\n"
        "  - tests/test_a.py\n"
        "  - pkg.checks\n"
        "reporter: JSON\n"
        "save_report: true\n"
        "report_dir: out\n",
        encoding="utf-8",
    )

    config = parse_config(path)

    assert config.modules == ["tests/test_a.py", "pkg.checks"]
    assert config.reporter == "json"
    assert config.save_report is True
    assert config.report_dir == "out"
    execution = config.to_execution_config()
    assert execution.report_dir == Path("out")
    assert execution.save_report is True


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty configuration file is the default configuration."""
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert parse_config(path) == RunConfig()


@pytest.mark.parametrize("name, content, match", (
    pytest.param("cfg.txt", "modules: []", "Expected .yaml", id="suffix"),
    pytest.param("cfg.yml", "modules: [a, [b]", "Malformed YAML", id="syntax"),
    pytest.param("cfg.yml", "- a\n- b\n", "must be a YAML mapping", id="not mapping"),
    pytest.param("cfg.yml", "modules: 3\n", "'modules' must be a list", id="modules type"),
    pytest.param("cfg.yml", "modules: [1]\n", "modules\\[0\\] must be a string", id="module type"),
    pytest.param("cfg.yml", "reporter: 3\n", "'reporter' must be a string", id="reporter type"),
    pytest.param("cfg.yml", "verbose: maybe\n", "'verbose' must be true or false", id="flag type"),
))
def test_malformed_config(tmp_path: Path, name: str, content: str, match: str) -> None:
    """Shape errors surface as ValueError."""
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=match):
        parse_config(path)


def test_missing_config_file(tmp_path: Path) -> None:
    """A missing explicit file is reported."""
    with pytest.raises(FileNotFoundError):
        parse_config(tmp_path / "absent.yml")


def test_single_module_string_is_accepted() -> None:
    """A bare string is treated as a one-item module list."""
    assert parse_config_data({"modules": "only.py"}).modules == ["only.py"]


def test_find_config(tmp_path: Path) -> None:
    """The default file is found only when present."""
    assert find_config(tmp_path) is None

    path = tmp_path / ".suiterunner.yaml"
    path.write_text("{}", encoding="utf-8")

    assert find_config(tmp_path) == path


def test_validate_config() -> None:
    """Unknown reporters are errors; odd but harmless options are warnings."""
    config = RunConfig(modules=["a.py", "a.py", " "], reporter="xml", report_dir="out")

    validation = validate_config(config)

    assert not validation.valid
    assert [e.path for e in validation.errors] == ["reporter", "modules[2]"]
    assert [w.path for w in validation.warnings] == ["modules[1]", "report_dir"]
    assert str(validation) == "Invalid: 2 errors, 2 warnings"


def test_validate_config_without_modules_warns() -> None:
    """An empty module list is valid but warned about."""
    validation = validate_config(RunConfig())

    assert validation.valid
    assert [w.path for w in validation.warnings] == ["modules"]
    assert str(validation) == "Valid (1 warnings)"
