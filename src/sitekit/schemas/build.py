"""Build report models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class FileReport(BaseModel):
    """Size report for one minified source file."""

    path: Path
    original_size: int = Field(..., ge=0)
    minified_size: int = Field(..., ge=0)

    @property
    def reduction(self) -> float:
        """Percentage of bytes saved, 0.0 for an empty source."""
        if not self.original_size:
            return 0.0
        return (1 - self.minified_size / self.original_size) * 100


class CopyReport(BaseModel):
    """A file copied verbatim into the output directory."""

    path: Path
    size: int = Field(..., ge=0)


class BuildResult(BaseModel):
    """Final build output."""

    minified: list[FileReport] = Field(default_factory=list)
    copied: list[CopyReport] = Field(default_factory=list)
    source_size: int = 0
    dist_size: int = 0

    @property
    def reduction(self) -> float:
        if not self.source_size:
            return 0.0
        return (1 - self.dist_size / self.source_size) * 100
