"""BeautifulSoup adapters that let the section search run on parsed HTML."""

from __future__ import annotations

from typing import Any, Sequence

try:
    from bs4 import BeautifulSoup
    from bs4.element import NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML search (pip install beautifulsoup4)."
    ) from exc

from sitekit import config
from sitekit.nodes import TEXT_NODE, Fragment
from sitekit.widget import SectionSearch

CODE_NAMES = ["pre", "code"]
HIGHLIGHT_CLASS = "search-highlight"
PLACEHOLDER_STYLE = "padding: 20px; text-align: center; color: #999;"

# Owns tags created for highlights and placeholders before they are inserted.
_FACTORY = BeautifulSoup("", "html.parser")


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def parse_fragment(html: str) -> BeautifulSoup:
    # html.parser keeps fragments free of the html/body wrapper lxml adds.
    return BeautifulSoup(html, "html.parser")


def set_display(tag: Tag, display: str | None) -> None:
    """Set or remove the inline ``display`` declaration, keeping other styles."""
    declarations = [
        item.strip()
        for item in str(tag.get("style", "")).split(";")
        if item.strip() and item.split(":", 1)[0].strip().lower() != "display"
    ]
    if display is not None:
        declarations.append(f"display: {display}")
    if declarations:
        tag["style"] = "; ".join(declarations)
    elif "style" in tag.attrs:
        del tag["style"]


def is_hidden(tag: Tag) -> bool:
    style = str(tag.get("style", "")).replace(" ", "").lower()
    return "display:none" in style


def _is_text(element: Any) -> bool:
    # Comments, doctypes and script/style strings are NavigableString subclasses.
    return type(element) is NavigableString


class SoupNode:
    """A bs4 Tag or text string exposed as a ContentNode."""

    def __init__(self, element: Tag | NavigableString) -> None:
        self.element = element

    def __repr__(self) -> str:
        return f"SoupNode({self.name!r})"

    @property
    def name(self) -> str:
        if isinstance(self.element, Tag):
            return self.element.name.lower()
        return TEXT_NODE

    def get_text(self) -> str:
        if isinstance(self.element, Tag):
            return self.element.get_text()
        return str(self.element)

    def get_children(self) -> list[SoupNode]:
        if not isinstance(self.element, Tag):
            return []
        return [
            SoupNode(child)
            for child in self.element.children
            if isinstance(child, Tag) or _is_text(child)
        ]

    def set_visible(self, visible: bool) -> None:
        if isinstance(self.element, Tag):
            set_display(self.element, None if visible else "none")

    def is_code_like(self) -> bool:
        if isinstance(self.element, Tag):
            return self.element.name.lower() in CODE_NAMES
        return self.element.find_parent(CODE_NAMES) is not None

    def set_text(self, fragments: Sequence[Fragment]) -> None:
        nodes = [_render_fragment(fragment) for fragment in fragments]
        if isinstance(self.element, Tag):
            self.element.clear()
            for node in nodes:
                self.element.append(node)
            return
        for node in nodes:
            self.element.insert_before(node)
        self.element.extract()


class SoupContainer:
    """The searchable content element; its snapshot is its inner markup."""

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    def get_children(self) -> list[SoupNode]:
        return [SoupNode(child) for child in self.tag.children if isinstance(child, Tag)]

    def snapshot(self) -> str:
        return self.tag.decode_contents()

    def restore(self, snapshot: str) -> None:
        self.tag.clear()
        fragment = parse_fragment(snapshot)
        for child in list(fragment.contents):
            self.tag.append(child.extract())

    def show_placeholder(self, message: str) -> None:
        self.tag.clear()
        placeholder = _FACTORY.new_tag("p", attrs={"style": PLACEHOLDER_STYLE})
        placeholder.string = message
        self.tag.append(placeholder)


class SoupStatus:
    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    @property
    def text(self) -> str:
        return self.tag.get_text()

    @property
    def visible(self) -> bool:
        return not is_hidden(self.tag)

    def show(self, text: str) -> None:
        self.tag.string = text
        set_display(self.tag, "block")

    def hide(self) -> None:
        self.tag.clear()
        set_display(self.tag, "none")


class SoupInput:
    """A text ``<input>``; its value lives in the ``value`` attribute."""

    def __init__(self, tag: Tag) -> None:
        self.tag = tag
        self.focused = False

    @property
    def value(self) -> str:
        return str(self.tag.get("value", ""))

    @value.setter
    def value(self, text: str) -> None:
        self.tag["value"] = text

    def focus(self) -> None:
        self.focused = True

    def clear(self) -> None:
        self.tag["value"] = ""

    def blur(self) -> None:
        self.focused = False


def attach_to_document(
    soup: BeautifulSoup,
    *,
    input_id: str = config.SEARCH_INPUT_ID,
    status_id: str = config.SEARCH_STATUS_ID,
    container_id: str = config.SEARCH_CONTAINER_ID,
    **kwargs: Any,
) -> SectionSearch | None:
    """Bind a search widget to the elements of a parsed page.

    Returns None, leaving the page untouched, when any element is missing.
    Debounced input needs a ``scheduler`` keyword or a running asyncio loop.
    """
    input_tag = soup.find(id=input_id)
    status_tag = soup.find(id=status_id)
    container_tag = soup.find(id=container_id)
    return SectionSearch.attach(
        SoupContainer(container_tag) if container_tag is not None else None,
        SoupInput(input_tag) if input_tag is not None else None,
        SoupStatus(status_tag) if status_tag is not None else None,
        **kwargs,
    )


def _render_fragment(fragment: Fragment) -> Tag | NavigableString:
    if not fragment.highlighted:
        return NavigableString(fragment.text)
    mark = _FACTORY.new_tag("mark", attrs={"class": HIGHLIGHT_CLASS})
    mark.string = fragment.text
    return mark
