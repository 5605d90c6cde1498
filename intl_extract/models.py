"""
models.py - Pydantic v2 data models for intl-extract.

Defines data structures for:
- Message descriptors (the extraction output)
- Extractor options
- Per-file results used by the CLI
- Project configuration
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    ".git", "node_modules", "build", "dist", "coverage",
    ".next", ".idea", ".vscode",
)


# ---------------------------------------------------------------------------
# Core data models
# ---------------------------------------------------------------------------

class MessageDescriptor(BaseModel):
    """A single react-intl message descriptor.

    ``id`` and ``default_message`` are always non-empty; ``description`` is
    optional. Instances are immutable.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    default_message: str = Field(alias="defaultMessage", min_length=1)
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the JS field names, omitting a missing description."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FileMessages(BaseModel):
    """Descriptors extracted from one source file."""
    file_path: str
    messages: list[MessageDescriptor] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------

class ExtractorConfig(BaseModel):
    """Options understood by the extractor core."""
    model_config = ConfigDict(populate_by_name=True)

    # Scanned after the built-in FormattedMessage tag, in this order.
    additional_tag_names: list[str] = Field(
        default_factory=list, alias="additionalTagNames",
    )


class ProjectConfig(BaseModel):
    """Top-level configuration for the CLI."""
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    # Directories to skip when walking
    exclude_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS)
    )
