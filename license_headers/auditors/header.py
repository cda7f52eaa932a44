"""Built-in license header auditor."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from license_headers.auditors.base import BaseAuditor
from license_headers.exceptions import AuditInvocationError
from license_headers.models.audit import AuditSummary, FileAudit, FileKind
from license_headers.models.rules import LicenseFamily, RuleSet
from license_headers.output.rat_report import RatReportFormatter
from license_headers.rules import get_default_matchers

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES = frozenset(
    {".jar", ".zip", ".tar", ".gz", ".tgz", ".bz2", ".war", ".ear", ".7z"}
)
BINARY_SUFFIXES = frozenset(
    {
        ".class", ".so", ".dll", ".dylib", ".exe", ".o", ".a", ".pyc",
        ".png", ".jpg", ".jpeg", ".gif", ".ico", ".bmp", ".pdf",
        ".ttf", ".otf", ".woff", ".woff2", ".eot",
    }
)
_NOTICE_STEMS = (
    "LICENSE", "LICENCE", "NOTICE", "README", "COPYING", "COPYRIGHT",
    "AUTHORS", "CHANGES", "CHANGELOG", "INSTALL",
)
# Upper-cased file names; only bare names and .txt variants are notices
NOTICE_NAMES = frozenset(
    name for stem in _NOTICE_STEMS for name in (stem, f"{stem}.TXT")
)

# Bytes sniffed for a NUL when deciding whether a file is binary
BINARY_SNIFF_BYTES = 8192
# Lines of each unapproved file echoed into the report
HEADER_PREVIEW_LINES = 20
GENERATED_CATEGORY = "GEN"


class HeaderAuditor(BaseAuditor):
    """Audit files for license headers using literal substring matching.

    A file is assigned the first family, in rule order, whose pattern
    occurs in it. The auditor's built-in matchers come after the
    configured families when the rule set enables them.
    """

    def __init__(
        self,
        header_lines: Optional[int] = None,
        formatter: Optional[RatReportFormatter] = None,
    ) -> None:
        """Initialize the auditor.

        Args:
            header_lines: Only search the first N lines of each file.
                None searches the whole file.
            formatter: Report formatter; defaults to RatReportFormatter.
        """
        self._header_lines = header_lines
        self._formatter = formatter if formatter is not None else RatReportFormatter()

    def run_audit(
        self,
        directories: Sequence[Path],
        rules: RuleSet,
        report_file: Path,
    ) -> None:
        summary = self.audit(directories, rules)
        logger.debug(
            "Audited %d files, %d unapproved",
            len(summary.files),
            summary.unknown_licenses,
        )
        report_file.write_text(
            self._formatter.format_report(summary), encoding="utf-8"
        )

    def audit(self, directories: Sequence[Path], rules: RuleSet) -> AuditSummary:
        """Audit every file below the given directories.

        Args:
            directories: Directories to scan recursively.
            rules: License families and approved names.

        Returns:
            AuditSummary with one entry per file, in sorted path order.

        Raises:
            AuditInvocationError: If a directory or file cannot be read.
        """
        families = self._families(rules)
        files: list[FileAudit] = []
        for directory in directories:
            if not directory.is_dir():
                raise AuditInvocationError(
                    f"Cannot audit '{directory}': not a directory"
                )
            for path in _walk_files(directory):
                files.append(self.audit_file(path, families, rules))
        return AuditSummary(files=files)

    def audit_file(
        self,
        path: Path,
        families: Sequence[LicenseFamily],
        rules: RuleSet,
    ) -> FileAudit:
        """Classify a single file and match it against license families.

        Args:
            path: File to audit.
            families: Families to try, in match order.
            rules: Rule set deciding approval.

        Returns:
            FileAudit for the file.

        Raises:
            AuditInvocationError: If the file cannot be read.
        """
        suffix = path.suffix.lower()
        if suffix in ARCHIVE_SUFFIXES:
            return FileAudit(path=path, kind=FileKind.ARCHIVE)
        if path.name.upper() in NOTICE_NAMES:
            return FileAudit(path=path, kind=FileKind.NOTICE)
        if suffix in BINARY_SUFFIXES:
            return FileAudit(path=path, kind=FileKind.BINARY)

        try:
            data = path.read_bytes()
        except OSError as e:
            raise AuditInvocationError(f"Cannot read '{path}': {e}") from e

        if b"\0" in data[:BINARY_SNIFF_BYTES]:
            return FileAudit(path=path, kind=FileKind.BINARY)

        lines = data.decode("utf-8", errors="replace").splitlines()
        if self._header_lines is not None:
            lines = lines[: self._header_lines]
        text = "\n".join(lines)

        family = next((f for f in families if f.matches(text)), None)
        kind = FileKind.STANDARD
        if family is not None and family.category.strip() == GENERATED_CATEGORY:
            kind = FileKind.GENERATED

        approved = rules.is_approved(family)
        return FileAudit(
            path=path,
            kind=kind,
            family=family,
            approved=approved,
            header=[] if approved else lines[:HEADER_PREVIEW_LINES],
        )

    def _families(self, rules: RuleSet) -> tuple[LicenseFamily, ...]:
        if rules.add_default_matchers:
            return rules.families + get_default_matchers()
        return rules.families


def _raise_walk_error(error: OSError) -> None:
    raise AuditInvocationError(
        f"Cannot read directory '{error.filename}': {error.strerror}"
    ) from error


def _walk_files(directory: Path) -> list[Path]:
    """List every file below a directory, sorted.

    Raises:
        AuditInvocationError: If any directory in the tree cannot be read.
    """
    paths: list[Path] = []
    for root, _, filenames in os.walk(directory, onerror=_raise_walk_error):
        for filename in filenames:
            path = Path(root) / filename
            if path.is_file():
                paths.append(path)
    return sorted(paths)
