"""CLI entry point for the suite runner.

Usage:
    suite-runner <module> [<module> ...] [options]
    python -m suite_runner <module> [options]
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .config import (
    RunConfig,
    find_config,
    parse_config,
    validate_config,
)
from .config.schema import VALID_REPORTERS
from .reporting import ConsoleReporter, JsonReporter
from .runner import TestExecutor
from .suite import ModuleLoadError, load_forest

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def output_error(message: str) -> None:
    """Print an error line on stderr."""
    click.echo(f"ERROR: {message}", err=True)


def load_run_config(config_path: Optional[Path]) -> RunConfig:
    """Load an explicit config file, the default one, or defaults."""
    if config_path is None:
        config_path = find_config(Path.cwd())
        if config_path is None:
            return RunConfig()

    logger.debug("Using config file %s", config_path)
    return parse_config(config_path)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("modules", nargs=-1)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML run configuration (default: ./.suiterunner.yml if present).",
)
@click.option(
    "--reporter",
    type=click.Choice(sorted(VALID_REPORTERS), case_sensitive=False),
    default=None,
    help="Output format (default: console).",
)
@click.option("--save-report", is_flag=True, default=False, help="Save a JSON report file.")
@click.option(
    "--report-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for saved reports.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def main(
    modules: tuple[str, ...],
    config_path: Optional[Path],
    reporter: Optional[str],
    save_report: bool,
    report_dir: Optional[Path],
    verbose: bool,
) -> None:
    """Load MODULES, run the cases they register and print a report."""
    try:
        run_config = load_run_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        setup_logging(verbose)
        output_error(f"Failed to read config: {e}")
        sys.exit(1)

    # Command-line options take precedence over the config file.
    run_config.modules = run_config.modules + list(modules)
    if reporter is not None:
        run_config.reporter = reporter.lower()
    if save_report:
        run_config.save_report = True
    if report_dir is not None:
        run_config.report_dir = str(report_dir)
    run_config.verbose = run_config.verbose or verbose

    setup_logging(run_config.verbose)

    validation = validate_config(run_config)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.path, warning.message)
    if not validation.valid:
        errors_str = "; ".join(f"{e.path}: {e.message}" for e in validation.errors)
        output_error(f"Invalid configuration: {errors_str}")
        sys.exit(1)

    if not run_config.modules:
        output_error("At least one test module is required.")
        sys.exit(1)

    try:
        forest = load_forest(run_config.modules)
    except ModuleLoadError as e:
        output_error(str(e))
        sys.exit(1)

    json_output = run_config.reporter == "json"
    console = ConsoleReporter(sink=None if json_output else click.echo)
    executor = TestExecutor(
        forest,
        config=run_config.to_execution_config(),
        reporter=console,
    )

    try:
        result = executor.execute()
    except KeyboardInterrupt:
        output_error("Run interrupted by user")
        sys.exit(130)

    if json_output:
        click.echo(JsonReporter().to_json_string(result.to_json()))

    if not result.all_passed:
        sys.exit(1)


if __name__ == "__main__":
    main()
