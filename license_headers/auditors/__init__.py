"""License auditors for license-headers."""

from license_headers.auditors.base import BaseAuditor
from license_headers.auditors.header import HeaderAuditor

__all__ = ["BaseAuditor", "HeaderAuditor"]
