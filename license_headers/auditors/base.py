"""Base auditor interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from license_headers.models.rules import RuleSet


class BaseAuditor(ABC):
    """Abstract base class for license auditors.

    An auditor scans a set of directories against a rule set and writes
    a plain-text report. The check only depends on two line prefixes of
    that report: "0 Unknown Licenses" and the " !" per-file problem flag.
    """

    @abstractmethod
    def run_audit(
        self,
        directories: Sequence[Path],
        rules: RuleSet,
        report_file: Path,
    ) -> None:
        """Audit directories and write the report.

        Args:
            directories: Existing directories to scan.
            rules: License families and approved names.
            report_file: Where to write the report.

        Raises:
            AuditInvocationError: If the audit cannot be run.
        """
