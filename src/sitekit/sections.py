"""Split container content into heading-delimited sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from sitekit.config import SECTION_HEADING
from sitekit.nodes import ContentNode


@dataclass
class Section:
    """A heading and the content nodes that follow it.

    The leading section has no heading when content precedes the first one.
    """

    heading: ContentNode | None = None
    nodes: list[ContentNode] = field(default_factory=list)


def partition_sections(
    children: Iterable[ContentNode], *, heading_name: str = SECTION_HEADING
) -> list[Section]:
    """Group children into sections, each started by a heading node."""
    sections: list[Section] = []
    current: Section | None = None

    for child in children:
        if child.name == heading_name:
            current = Section(heading=child, nodes=[child])
            sections.append(current)
        elif current is not None:
            current.nodes.append(child)
        else:
            current = Section()
            current.nodes.append(child)
            sections.append(current)

    return sections


def section_text(section: Section) -> str:
    return " ".join(node.get_text() for node in section.nodes)


def section_matches(section: Section, query: str) -> bool:
    """Case-insensitive substring test over the section's text."""
    return query.lower() in section_text(section).lower()
