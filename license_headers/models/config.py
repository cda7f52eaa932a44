"""Configuration Pydantic models for license-headers."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

DEFAULT_BUILD_DIR = Path("build")
DEFAULT_SOURCE_SETS = [[Path("src/main/java")], [Path("src/test/java")]]


class Verbosity(Enum):
    """Output verbosity levels."""

    QUIET = "quiet"
    NORMAL = "normal"
    VERBOSE = "verbose"


class TaskConfig(BaseModel):
    """Everything the license header task needs from the surrounding build.

    Each entry of ``source_sets`` is the list of candidate source
    directories of one compilation unit. Directories that do not exist
    are skipped at scan time.
    """

    model_config = {"extra": "forbid"}

    build_dir: Path = Field(
        default=DEFAULT_BUILD_DIR,
        description="Build output directory; the report is written below it",
    )
    source_sets: List[List[Path]] = Field(
        default_factory=lambda: [list(dirs) for dirs in DEFAULT_SOURCE_SETS],
        description="Candidate source directories, one list per source set",
    )
    header_lines: Optional[int] = Field(
        default=None,
        ge=1,
        description="Only search the first N lines of each file (default: all)",
    )
    add_default_matchers: bool = Field(
        default=True,
        description="Also consult the built-in license matchers",
    )

    def resolve_paths(self, base_dir: Path) -> TaskConfig:
        """Resolve relative paths against a base directory.

        Args:
            base_dir: Directory that relative paths are relative to.

        Returns:
            New TaskConfig with absolute build and source paths.
        """
        return self.model_copy(
            update={
                "build_dir": base_dir / self.build_dir,
                "source_sets": [
                    [base_dir / directory for directory in dirs]
                    for dirs in self.source_sets
                ],
            }
        )
