"""License header check task.

Runs the auditor once over every existing source directory, then reads
the report back to decide whether the build may continue.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from license_headers.auditors.base import BaseAuditor
from license_headers.auditors.header import HeaderAuditor
from license_headers.constants import (
    PROBLEM_MARKER,
    REPORT_DIR,
    REPORT_NAME,
    SECTION_DELIMITER,
    UNAPPROVED_SECTION,
    ZERO_UNKNOWN_MARKER,
)
from license_headers.exceptions import LicenseHeaderError
from license_headers.models.config import TaskConfig
from license_headers.models.verdict import ReportVerdict
from license_headers.rules import get_default_rules

logger = logging.getLogger(__name__)


def collect_scan_targets(source_sets: Iterable[Iterable[Path]]) -> list[Path]:
    """Collect the source directories that exist on disk.

    Missing directories are common (a module without test sources, for
    instance) and are skipped silently.

    Args:
        source_sets: Candidate directories, one list per source set.

    Returns:
        Existing directories in first-seen order, without duplicates.
    """
    targets: list[Path] = []
    seen: set[Path] = set()
    for dirs in source_sets:
        for directory in dirs:
            if not directory.is_dir():
                logger.debug("Skipping missing source directory %s", directory)
                continue
            resolved = directory.resolve()
            if resolved not in seen:
                seen.add(resolved)
                targets.append(resolved)
    return targets


def report_path(build_dir: Path) -> Path:
    """Get the absolute report location for a build directory."""
    return (build_dir / REPORT_DIR / REPORT_NAME).resolve()


def prepare_report_file(build_dir: Path) -> Path:
    """Create the report directory and delete any stale report.

    Args:
        build_dir: Build output directory.

    Returns:
        Absolute path the auditor should write the report to.
    """
    report_file = report_path(build_dir)
    report_file.parent.mkdir(parents=True, exist_ok=True)
    report_file.unlink(missing_ok=True)
    return report_file


def interpret_report(report_file: Path) -> ReportVerdict:
    """Read a report once and decide pass or fail.

    Args:
        report_file: The report written by the auditor.

    Returns:
        ReportVerdict with both markers set.
    """
    zero_unknown_licenses = False
    found_problems_with_files = False
    with report_file.open(encoding="utf-8") as report:
        for line in report:
            if line.startswith(ZERO_UNKNOWN_MARKER):
                zero_unknown_licenses = True
            if line.startswith(PROBLEM_MARKER):
                found_problems_with_files = True

    return ReportVerdict(
        report_file=report_file,
        zero_unknown_licenses=zero_unknown_licenses,
        found_problems_with_files=found_problems_with_files,
    )


def extract_unapproved_section(report_file: Path) -> list[str]:
    """Extract the unapproved-licenses section of a report.

    Sections are delimited by rows of asterisks; the lines after the
    second delimiter and before the third are returned, delimiters
    excluded.

    Args:
        report_file: The report written by the auditor.

    Returns:
        Lines of the section without trailing newlines.
    """
    section = 0
    lines: list[str] = []
    with report_file.open(encoding="utf-8") as report:
        for line in report:
            if line.startswith(SECTION_DELIMITER):
                section += 1
            elif section == UNAPPROVED_SECTION:
                lines.append(line.rstrip("\r\n"))
    return lines


def verify_report(
    report_file: Path, log: Optional[logging.Logger] = None
) -> ReportVerdict:
    """Interpret a report and fail if it shows license problems.

    On failure the unapproved-licenses section is logged line by line at
    error level before raising.

    Args:
        report_file: The report written by the auditor.
        log: Logger receiving the section; defaults to this module's.

    Returns:
        The passing verdict.

    Raises:
        LicenseHeaderError: If the report is missing the zero-unknown
            line or flags any file.
    """
    log = log if log is not None else logger
    report_file = report_file.resolve()
    verdict = interpret_report(report_file)
    if verdict.passed:
        return verdict

    # the unapproved section is usually all that is needed to fix problems
    section = extract_unapproved_section(report_file)
    for line in section:
        log.error(line)
    raise LicenseHeaderError(report_file, section)


class LicenseHeadersTask:
    """Check sources for missing, incorrect, or unacceptable license headers.

    All build-system access is passed in: the source directories and
    build directory come from ``config``, the audit engine from
    ``auditor``.
    """

    description = "Checks sources for missing, incorrect, or unacceptable license headers"

    def __init__(
        self,
        config: TaskConfig,
        auditor: Optional[BaseAuditor] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the task.

        Args:
            config: Source sets, build directory and matching options.
            auditor: Audit engine; defaults to HeaderAuditor.
            log: Logger for the failure section; defaults to this module's.
        """
        self._config = config
        self._auditor = (
            auditor
            if auditor is not None
            else HeaderAuditor(header_lines=config.header_lines)
        )
        self._log = log if log is not None else logger

    @property
    def report_file(self) -> Path:
        """Absolute path of the report this task writes."""
        return report_path(self._config.build_dir)

    def scan(self) -> Path:
        """Run the auditor over every existing source directory.

        Returns:
            Absolute path of the freshly written report.
        """
        targets: Sequence[Path] = collect_scan_targets(self._config.source_sets)
        report_file = prepare_report_file(self._config.build_dir)
        rules = get_default_rules(self._config.add_default_matchers)

        self._log.info(
            "Auditing %d source director%s",
            len(targets),
            "y" if len(targets) == 1 else "ies",
        )
        self._auditor.run_audit(targets, rules, report_file)
        return report_file

    def check(self) -> ReportVerdict:
        """Scan sources and verify the report.

        Returns:
            The passing verdict.

        Raises:
            LicenseHeaderError: If license header problems were found.
            AuditInvocationError: If the auditor could not run.
        """
        report_file = self.scan()
        verdict = verify_report(report_file, self._log)
        self._log.info("License headers OK, report at %s", report_file)
        return verdict
