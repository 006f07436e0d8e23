"""In-page section search: filter and highlight content as the user types."""

from __future__ import annotations

import logging
from typing import Any

from sitekit.config import SECTION_HEADING, SITEKIT_SEARCH_DEBOUNCE_S
from sitekit.debounce import DebounceTimer, Scheduler
from sitekit.highlight import compile_query, highlight_node
from sitekit.nodes import ContentContainer, QueryInput, StatusDisplay
from sitekit.schemas import SearchResult, WidgetState
from sitekit.sections import partition_sections, section_matches

logger = logging.getLogger(__name__)

NO_RESULTS_STATUS = "No results found"
NO_RESULTS_PLACEHOLDER = "No results found. Try a different search term."
CANCEL_KEY = "Escape"


def format_match_status(count: int) -> str:
    """Status line for a non-empty result set."""
    return f"Found {count} section{'' if count == 1 else 's'} with matches"


class SectionSearch:
    """Search widget bound to one content container.

    The container's markup is captured once when the widget is created and
    every search starts again from that snapshot, so results never depend on
    a previous search.
    """

    def __init__(
        self,
        container: ContentContainer,
        search_input: QueryInput,
        status: StatusDisplay,
        *,
        debounce_s: float = SITEKIT_SEARCH_DEBOUNCE_S,
        scheduler: Scheduler | None = None,
        heading_name: str = SECTION_HEADING,
    ) -> None:
        self.container = container
        self.search_input = search_input
        self.status = status
        self.heading_name = heading_name
        self.state = WidgetState.IDLE
        self._snapshot: Any = container.snapshot()
        self._timer = DebounceTimer(debounce_s, scheduler)

    @classmethod
    def attach(
        cls,
        container: ContentContainer | None,
        search_input: QueryInput | None,
        status: StatusDisplay | None,
        **kwargs: Any,
    ) -> SectionSearch | None:
        """Create a widget, or return None when a required element is missing."""
        if container is None or search_input is None or status is None:
            logger.debug("Search widget not attached: required element missing")
            return None
        return cls(container, search_input, status, **kwargs)

    @property
    def pending(self) -> bool:
        return self._timer.pending

    def search(self, query: str) -> SearchResult:
        """Restore the pristine content, then filter and highlight it for query."""
        self.container.restore(self._snapshot)

        term = (query or "").strip()
        if not term:
            self.status.hide()
            self.state = WidgetState.IDLE
            return SearchResult(query="", state=self.state)

        sections = partition_sections(self.container.get_children(), heading_name=self.heading_name)
        matched = [section for section in sections if section_matches(section, term)]
        logger.debug("Query %r matched %d of %d sections", term, len(matched), len(sections))

        if not matched:
            self.container.show_placeholder(NO_RESULTS_PLACEHOLDER)
            self.status.show(NO_RESULTS_STATUS)
            self.state = WidgetState.NO_MATCH
            return SearchResult(
                query=term,
                total_sections=len(sections),
                status_text=NO_RESULTS_STATUS,
                state=self.state,
            )

        for section in sections:
            for node in section.nodes:
                node.set_visible(False)

        pattern = compile_query(term)
        for section in matched:
            for node in section.nodes:
                node.set_visible(True)
                highlight_node(node, pattern)

        status_text = format_match_status(len(matched))
        self.status.show(status_text)
        self.state = WidgetState.MATCHED
        return SearchResult(
            query=term,
            match_count=len(matched),
            total_sections=len(sections),
            status_text=status_text,
            state=self.state,
        )

    def reset(self) -> SearchResult:
        """Drop any pending search and show the unfiltered content."""
        self._timer.cancel()
        return self.search("")

    def on_input(self, value: str) -> None:
        """Schedule a search for value once typing pauses."""
        self._timer.arm(self.search, value)
        self.state = WidgetState.PENDING

    def on_keydown(self, key: str) -> None:
        if key != CANCEL_KEY:
            return
        self.search_input.clear()
        self.reset()
        self.search_input.blur()

    def on_blur(self) -> None:
        if not self.search_input.value.strip():
            self.reset()
