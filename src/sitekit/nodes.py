"""Tree contracts the section search engine is written against.

Any tree (a parsed HTML document, a virtual DOM, or a test double) can be
searched once it is wrapped in these protocols.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Protocol, Sequence

TEXT_NODE = "#text"


class Fragment(NamedTuple):
    """A run of text, optionally wrapped in a highlight marker."""

    text: str
    highlighted: bool = False


class ContentNode(Protocol):
    """An element or text segment inside the searchable container."""

    @property
    def name(self) -> str:
        """Lower-case tag name, or ``#text`` for a text segment."""
        ...

    def get_text(self) -> str: ...

    def get_children(self) -> Sequence[ContentNode]: ...

    def set_visible(self, visible: bool) -> None: ...

    def is_code_like(self) -> bool:
        """True for preformatted or code content, including text inside it."""
        ...

    def set_text(self, fragments: Sequence[Fragment]) -> None:
        """Replace the node's content (or the text segment itself) with fragments."""
        ...


class ContentContainer(Protocol):
    """The element whose direct children are split into sections."""

    def get_children(self) -> Sequence[ContentNode]: ...

    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...

    def show_placeholder(self, message: str) -> None: ...


class StatusDisplay(Protocol):
    def show(self, text: str) -> None: ...

    def hide(self) -> None: ...


class QueryInput(Protocol):
    @property
    def value(self) -> str: ...

    def clear(self) -> None: ...

    def blur(self) -> None: ...
