"""Pydantic data models for license-headers."""

from license_headers.models.audit import AuditSummary, FileAudit, FileKind
from license_headers.models.config import TaskConfig, Verbosity
from license_headers.models.rules import LicenseFamily, RuleSet
from license_headers.models.verdict import ReportVerdict

__all__ = [
    "AuditSummary",
    "FileAudit",
    "FileKind",
    "LicenseFamily",
    "ReportVerdict",
    "RuleSet",
    "TaskConfig",
    "Verbosity",
]
