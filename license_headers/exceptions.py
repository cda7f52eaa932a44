"""Custom exceptions for license-headers."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class LicenseHeadersError(Exception):
    """Base exception for all license-headers errors."""

    pass


class ConfigurationError(LicenseHeadersError):
    """Exception raised when configuration is invalid."""

    pass


class AuditInvocationError(LicenseHeadersError):
    """Exception raised when the auditor cannot be run."""

    pass


class LicenseHeaderError(LicenseHeadersError):
    """Exception raised when the report shows unknown or unapproved licenses.

    Attributes:
        report_file: Absolute path of the report, kept on disk.
        unapproved_lines: The report's unapproved-licenses section.
    """

    def __init__(
        self, report_file: Path, unapproved_lines: Optional[list[str]] = None
    ) -> None:
        self.report_file = report_file
        self.unapproved_lines = unapproved_lines or []
        super().__init__(
            f"License header problems were found! Full details: {report_file}"
        )
