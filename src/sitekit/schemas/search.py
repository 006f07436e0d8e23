"""Search widget state and result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class WidgetState(str, Enum):
    """Lifecycle of a search widget instance."""

    IDLE = "idle"
    PENDING = "pending"
    MATCHED = "matched"
    NO_MATCH = "no_match"


class SearchResult(BaseModel):
    """Outcome of a single search pass.

    Attributes:
        query: The trimmed query, empty for a reset.
        match_count: Number of sections whose text contains the query.
        total_sections: Number of sections the content was split into.
        status_text: Text shown in the status display, None when hidden.
        state: Widget state after the search.
    """

    query: str
    match_count: int = 0
    total_sections: int = 0
    status_text: str | None = None
    state: WidgetState = WidgetState.IDLE
