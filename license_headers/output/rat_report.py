"""Plain-text audit report formatter.

Writes the line-oriented report the license header check reads back.
Sections are separated by rows of asterisks; the second section lists
files with unapproved licenses, and every such file is also flagged with
a leading " !" in the per-file listing.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from license_headers.constants import REPORT_RULE_WIDTH
from license_headers.models.audit import AuditSummary, FileAudit, FileKind

RULE = "*" * REPORT_RULE_WIDTH
FILE_RULE = "=" * REPORT_RULE_WIDTH

LEGEND = [
    "  Files with Apache License headers will be marked AL",
    "  Binary files (which do not require any license headers) will be marked B",
    "  Compressed archives will be marked A",
    "  Notices, licenses etc. will be marked N",
]


class RatReportFormatter:
    """Format audit results as a plain-text report."""

    def format_report(
        self,
        summary: AuditSummary,
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Format audit results as report text.

        Args:
            summary: The audit results to format.
            generated_at: Timestamp written into the summary section.
                Defaults to the current UTC time.

        Returns:
            Report text, newline terminated.
        """
        timestamp = generated_at or datetime.now(timezone.utc)
        lines: list[str] = [""]
        lines.extend(self._build_summary(summary, timestamp))
        lines.extend(self._build_unapproved(summary))
        lines.extend(self._build_archives(summary))
        lines.extend(self._build_listing(summary))
        lines.extend(self._build_headers(summary))
        return "\n".join(lines) + "\n"

    def _build_summary(
        self, summary: AuditSummary, timestamp: datetime
    ) -> list[str]:
        return [
            RULE,
            "Summary",
            "-------",
            f"Generated at: {timestamp.strftime('%Y-%m-%dT%H:%M:%S%z')}",
            f"Notes: {summary.count(FileKind.NOTICE)}",
            f"Binaries: {summary.count(FileKind.BINARY)}",
            f"Archives: {summary.count(FileKind.ARCHIVE)}",
            f"Standards: {summary.standards}",
            "",
            f"Apache Licensed: {summary.apache_licensed}",
            f"Generated Documents: {summary.count(FileKind.GENERATED)}",
            "",
            "JavaDocs are generated, thus a license header is optional.",
            "Generated files do not require license headers.",
            "",
            f"{summary.unknown_licenses} Unknown Licenses",
            "",
        ]

    def _build_unapproved(self, summary: AuditSummary) -> list[str]:
        lines = [RULE, "", "Files with unapproved licenses:", ""]
        lines.extend(f"  {audit.path}" for audit in summary.unapproved)
        lines.append("")
        return lines

    def _build_archives(self, summary: AuditSummary) -> list[str]:
        lines = [RULE, "", "Archives:", ""]
        lines.extend(
            f"  + {audit.path}"
            for audit in summary.files
            if audit.kind is FileKind.ARCHIVE
        )
        return lines

    def _build_listing(self, summary: AuditSummary) -> list[str]:
        lines = [RULE]
        lines.extend(LEGEND)
        lines.append("")
        lines.extend(self._listing_line(audit) for audit in summary.files)
        lines.append("")
        return lines

    def _listing_line(self, audit: FileAudit) -> str:
        flag = "  " if audit.approved else " !"
        return f"{flag}{audit.marker} {audit.path}"

    def _build_headers(self, summary: AuditSummary) -> list[str]:
        """Print the leading lines of each text file without a valid header.

        Binary files, archives and notices never appear here.
        """
        lines = [
            RULE,
            " Printing headers for text files without a valid license header...",
        ]
        for audit in summary.unapproved:
            lines.extend(["", FILE_RULE, f"== File: {audit.path}", FILE_RULE])
            lines.extend(audit.header)
        return lines
