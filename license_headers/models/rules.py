"""License family and rule set Pydantic models."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Category codes are padded to a fixed width so report columns line up
CATEGORY_WIDTH = 5


class LicenseFamily(BaseModel):
    """A named class of license text identified by literal substrings."""

    model_config = {"extra": "forbid", "frozen": True}

    category: str = Field(description="Fixed-width short category code")
    name: str = Field(description="Display name of the license family")
    patterns: tuple[str, ...] = Field(
        description="Literal substrings identifying the family"
    )

    @field_validator("category")
    @classmethod
    def pad_category(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("category must not be blank")
        if len(value) > CATEGORY_WIDTH:
            raise ValueError(
                f"category must be at most {CATEGORY_WIDTH} characters"
            )
        return value.ljust(CATEGORY_WIDTH)

    @field_validator("patterns")
    @classmethod
    def require_patterns(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value or any(not pattern for pattern in value):
            raise ValueError("patterns must be a non-empty list of substrings")
        return value

    def matches(self, text: str) -> bool:
        """Check whether any pattern occurs in the text.

        Args:
            text: File content to search.

        Returns:
            True if one of the family's substrings is found.
        """
        return any(pattern in text for pattern in self.patterns)


class RuleSet(BaseModel):
    """License families and the display names approved for use.

    Families are consulted in order; the first one whose pattern occurs
    in a file is assigned to it.
    """

    model_config = {"extra": "forbid", "frozen": True}

    families: tuple[LicenseFamily, ...] = Field(
        default=(), description="Configured license families, in match order"
    )
    approved: frozenset[str] = Field(
        default=frozenset(), description="Display names considered acceptable"
    )
    add_default_matchers: bool = Field(
        default=True,
        description="Also consult the auditor's built-in matchers",
    )

    def is_approved(self, family: Optional[LicenseFamily]) -> bool:
        """Check whether a matched family is acceptable.

        Args:
            family: The matched family, or None for an unknown license.

        Returns:
            True if the family's display name is in the approved set.
        """
        return family is not None and family.name in self.approved
