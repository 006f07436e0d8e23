"""Wrap query matches inside content nodes in highlight fragments."""

from __future__ import annotations

import re
from typing import Iterator

from sitekit.nodes import TEXT_NODE, ContentNode, Fragment

# Elements whose whole text is replaced when it contains the query.
WHOLE_TEXT_NAMES = frozenset({"h3", "p", "li"})


def compile_query(query: str) -> re.Pattern[str]:
    """Compile a user query for literal, case-insensitive matching."""
    return re.compile(re.escape(query), re.IGNORECASE)


def split_matches(text: str, pattern: re.Pattern[str]) -> list[Fragment]:
    """Split text into plain and highlighted fragments, keeping original casing."""
    fragments: list[Fragment] = []
    position = 0
    for match in pattern.finditer(text):
        if match.start() == match.end():
            continue
        if match.start() > position:
            fragments.append(Fragment(text[position : match.start()]))
        fragments.append(Fragment(match.group(0), highlighted=True))
        position = match.end()
    if position < len(text):
        fragments.append(Fragment(text[position:]))
    return fragments


def highlight_node(node: ContentNode, pattern: re.Pattern[str]) -> None:
    """Highlight occurrences of pattern in a node, leaving code untouched."""
    if node.is_code_like():
        return

    if node.name in WHOLE_TEXT_NAMES and not _contains_code(node):
        text = node.get_text()
        if pattern.search(text):
            node.set_text(split_matches(text, pattern))
        return

    # Collect first: replacing a segment mutates its parent's children.
    for segment in list(iter_text_segments(node)):
        text = segment.get_text()
        if pattern.search(text):
            segment.set_text(split_matches(text, pattern))


def iter_text_segments(node: ContentNode) -> Iterator[ContentNode]:
    """Yield text segments below node, skipping code-like subtrees."""
    for child in node.get_children():
        if child.is_code_like():
            continue
        if child.name == TEXT_NODE:
            yield child
        else:
            yield from iter_text_segments(child)


def _contains_code(node: ContentNode) -> bool:
    for child in node.get_children():
        if child.name == TEXT_NODE:
            continue
        if child.is_code_like() or _contains_code(child):
            return True
    return False
