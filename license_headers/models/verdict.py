"""Report verdict Pydantic model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ReportVerdict(BaseModel):
    """Pass/fail decision derived from an audit report."""

    model_config = {"extra": "forbid"}

    report_file: Path = Field(description="Absolute path of the report read")
    zero_unknown_licenses: bool = Field(
        default=False,
        description='Whether a line starts with "0 Unknown Licenses"',
    )
    found_problems_with_files: bool = Field(
        default=False,
        description='Whether any line starts with the " !" problem marker',
    )

    @property
    def passed(self) -> bool:
        """Check whether the report passes.

        The two markers are independent: a missing zero-unknown line or a
        single flagged file each fail the check.
        """
        return self.zero_unknown_licenses and not self.found_problems_with_files
