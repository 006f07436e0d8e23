"""Shared schemas for sitekit."""

from sitekit.schemas.build import BuildResult, CopyReport, FileReport
from sitekit.schemas.search import SearchResult, WidgetState

__all__ = ["BuildResult", "CopyReport", "FileReport", "SearchResult", "WidgetState"]
