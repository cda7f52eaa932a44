"""CLI entry point for license-headers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from license_headers import __version__
from license_headers.config import TaskConfig, load_config
from license_headers.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_headers.exceptions import LicenseHeaderError, LicenseHeadersError
from license_headers.models.config import Verbosity
from license_headers.models.verdict import ReportVerdict
from license_headers.output.terminal import RulesFormatter, VerdictFormatter
from license_headers.rules import get_default_matchers, get_default_rules
from license_headers.task import LicenseHeadersTask, verify_report

# Module-level console for consistent output
_console = Console()
# Separate console for log records and errors (writes to stderr)
_error_console = Console(stderr=True)

_LOG_LEVELS = {
    Verbosity.QUIET: logging.WARNING,
    Verbosity.NORMAL: logging.INFO,
    Verbosity.VERBOSE: logging.DEBUG,
}


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Headers - Fail the build on missing or unapproved license headers.

    Scans source directories for license headers, writes a plain-text
    report under the build directory and fails if any file carries an
    unknown or disallowed license.

    \b
    Examples:
        license-headers check
        license-headers check --source-dir src/main/java --source-dir src/test/java
        license-headers verify build/reports/licenseHeaders/rat.log
        license-headers rules
    """
    pass


def _verbosity_options(func: Callable[..., None]) -> Callable[..., None]:
    """Add the mutually exclusive --verbose and --quiet flags."""
    func = click.option(
        "--quiet",
        "-q",
        "quiet_flag",
        is_flag=True,
        default=False,
        help="Only show warnings and errors.",
    )(func)
    func = click.option(
        "--verbose",
        "-v",
        "verbose_flag",
        is_flag=True,
        default=False,
        help="Show debug output, including skipped directories.",
    )(func)
    return func


@main.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--build-dir",
    "build_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Build output directory (report goes to reports/licenseHeaders/rat.log).",
)
@click.option(
    "--source-dir",
    "source_dirs",
    type=click.Path(file_okay=False),
    multiple=True,
    help="Source directory to scan; repeatable. Replaces configured source sets.",
)
@click.option(
    "--header-lines",
    type=click.IntRange(min=1),
    default=None,
    help="Only search the first N lines of each file (default: whole file).",
)
@click.option(
    "--no-default-matchers",
    "no_default_matchers",
    is_flag=True,
    default=False,
    help="Disable the built-in license matchers.",
)
@_verbosity_options
def check(
    config_path: str | None,
    build_dir: str | None,
    source_dirs: tuple[str, ...],
    header_lines: Optional[int],
    no_default_matchers: bool,
    verbose_flag: bool,
    quiet_flag: bool,
) -> None:
    """Check sources for missing, incorrect, or unacceptable license headers.

    Source directories that do not exist are skipped. The report is
    left on disk for inspection.

    \b
    Examples:
        license-headers check
        license-headers check --build-dir out --source-dir lib
        license-headers check --config custom-config.yaml
        license-headers check --verbose
    """
    verbosity = _resolve_verbosity(verbose_flag, quiet_flag)
    _configure_logging(verbosity)

    try:
        config = load_config(config_path)
        config = _apply_overrides(
            config, build_dir, source_dirs, header_lines, no_default_matchers
        )
        verdict = LicenseHeadersTask(config).check()
    except LicenseHeaderError as e:
        _display_error(e)
        sys.exit(EXIT_ISSUES)
    except LicenseHeadersError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)

    _display_verdict(verdict, verbosity)
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.argument(
    "report",
    type=click.Path(exists=True, dir_okay=False),
)
@_verbosity_options
def verify(report: str, verbose_flag: bool, quiet_flag: bool) -> None:
    """Verify an existing report without scanning again.

    \b
    Examples:
        license-headers verify build/reports/licenseHeaders/rat.log
    """
    verbosity = _resolve_verbosity(verbose_flag, quiet_flag)
    _configure_logging(verbosity)

    try:
        verdict = verify_report(Path(report))
    except LicenseHeaderError as e:
        _display_error(e)
        sys.exit(EXIT_ISSUES)

    _display_verdict(verdict, verbosity)
    sys.exit(EXIT_SUCCESS)


@main.command()
@click.option(
    "--no-default-matchers",
    "no_default_matchers",
    is_flag=True,
    default=False,
    help="Hide the built-in license matchers.",
)
def rules(no_default_matchers: bool) -> None:
    """List license families and whether they are approved."""
    RulesFormatter(console=_console).format_rules(
        get_default_rules(add_default_matchers=not no_default_matchers),
        get_default_matchers(),
    )


def _resolve_verbosity(verbose_flag: bool, quiet_flag: bool) -> Verbosity:
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")
    if quiet_flag:
        return Verbosity.QUIET
    if verbose_flag:
        return Verbosity.VERBOSE
    return Verbosity.NORMAL


def _configure_logging(verbosity: Verbosity) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbosity: Output verbosity level.
    """
    handler = RichHandler(
        console=_error_console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger("license_headers")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(_LOG_LEVELS[verbosity])


def _apply_overrides(
    config: TaskConfig,
    build_dir: str | None,
    source_dirs: tuple[str, ...],
    header_lines: Optional[int],
    no_default_matchers: bool,
) -> TaskConfig:
    """Apply command-line options on top of the loaded configuration.

    Each --source-dir becomes its own source set.
    """
    update: dict[str, object] = {}
    if build_dir is not None:
        update["build_dir"] = Path(build_dir).resolve()
    if source_dirs:
        update["source_sets"] = [[Path(d).resolve()] for d in source_dirs]
    if header_lines is not None:
        update["header_lines"] = header_lines
    if no_default_matchers:
        update["add_default_matchers"] = False
    return config.model_copy(update=update) if update else config


def _display_verdict(verdict: ReportVerdict, verbosity: Verbosity) -> None:
    if verbosity == Verbosity.QUIET:
        return
    VerdictFormatter(console=_console).format_verdict(verdict)


def _display_error(error: LicenseHeadersError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    _error_console.print(
        f"Error: {error_type}: {error}", style="red bold", markup=False
    )


if __name__ == "__main__":
    main()
