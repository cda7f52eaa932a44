"""Output formatters for license-headers."""

from license_headers.output.rat_report import RatReportFormatter
from license_headers.output.terminal import RulesFormatter, VerdictFormatter

__all__ = [
    "RatReportFormatter",
    "RulesFormatter",
    "VerdictFormatter",
]
