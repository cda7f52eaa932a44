"""Audit result Pydantic models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from license_headers.models.rules import LicenseFamily

UNKNOWN_CATEGORY = "?????"


class FileKind(Enum):
    """How the auditor classified a file."""

    STANDARD = "standard"
    GENERATED = "generated"
    NOTICE = "notice"
    BINARY = "binary"
    ARCHIVE = "archive"


# Markers used in the per-file listing for files without a license family
KIND_MARKERS = {
    FileKind.NOTICE: "N    ",
    FileKind.BINARY: "B    ",
    FileKind.ARCHIVE: "A    ",
}


class FileAudit(BaseModel):
    """Audit outcome for a single file."""

    model_config = {"extra": "forbid"}

    path: Path = Field(description="Path of the audited file")
    kind: FileKind = Field(description="File classification")
    family: Optional[LicenseFamily] = Field(
        default=None, description="Matched license family (None if unknown)"
    )
    approved: bool = Field(
        default=True, description="Whether the file passes the approval rules"
    )
    header: list[str] = Field(
        default_factory=list,
        description="Leading lines kept for files without a valid header",
    )

    @property
    def marker(self) -> str:
        """Category column shown for the file in the report listing."""
        if self.family is not None:
            return self.family.category
        return KIND_MARKERS.get(self.kind, UNKNOWN_CATEGORY)

    @property
    def is_unknown(self) -> bool:
        """Check whether the file is a text document with no matched family."""
        return self.kind is FileKind.STANDARD and self.family is None


class AuditSummary(BaseModel):
    """All file audits of one run plus derived totals."""

    model_config = {"extra": "forbid"}

    files: list[FileAudit] = Field(
        default_factory=list, description="Per-file results, in scan order"
    )

    def count(self, kind: FileKind) -> int:
        """Count files of a given kind."""
        return sum(1 for audit in self.files if audit.kind is kind)

    @property
    def standards(self) -> int:
        """Number of text documents, generated ones included."""
        return self.count(FileKind.STANDARD) + self.count(FileKind.GENERATED)

    @property
    def apache_licensed(self) -> int:
        """Number of files matched to an Apache family."""
        return sum(
            1
            for audit in self.files
            if audit.family is not None and audit.family.category.strip() == "AL"
        )

    @property
    def unapproved(self) -> list[FileAudit]:
        """Files carrying an unknown or disallowed license."""
        return [audit for audit in self.files if not audit.approved]

    @property
    def unknown_licenses(self) -> int:
        """Number of files the report counts as unknown licenses."""
        return len(self.unapproved)
