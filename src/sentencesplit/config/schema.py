"""Pydantic schema for splitter configuration files."""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from ..core.errors import InvalidLanguageCode
from ..prefixes.loader import validate_language_code


class SplitterConfig(BaseModel):
    """Settings needed to construct a SentenceSplitter."""
    language: str = Field(default="en", description="Two-letter lowercase language code")
    prefix_file: Optional[str] = Field(default=None,
                                       description="Prefix file overriding the bundled table")

    class Config:
        extra = "forbid"  # Strict validation

    def validate_settings(self) -> List[str]:
        """Validate settings and return any issues."""
        issues = []

        try:
            validate_language_code(self.language)
        except InvalidLanguageCode as e:
            issues.append(str(e))

        if self.prefix_file is not None:
            if not self.prefix_file.strip():
                issues.append("prefix_file is empty")
            elif not Path(self.prefix_file).exists():
                issues.append(f"Prefix file not found: {self.prefix_file}")

        return issues
