"""Regex-based minifiers for CSS, JavaScript, and HTML sources."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable

from sitekit.exceptions import UnsupportedAssetError

_WHITESPACE_RE = re.compile(r"\s+")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.S)
_HTML_COMMENT_RE = re.compile(r"<!--.*?-->", re.S)

# String and template literals are matched first so comment markers inside
# them survive; "//" inside a regex literal is still stripped.
_JS_COMMENT_RE = re.compile(
    r"""(?P<literal>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`)"""
    r"|/\*.*?\*/"
    r"|//[^\n]*",
    re.S,
)

_CSS_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r";\s*}"), "}"),
    (re.compile(r"\s*{\s*"), "{"),
    (re.compile(r";\s*"), ";"),
    (re.compile(r":\s*"), ":"),
    (re.compile(r",\s*"), ","),
)

_JS_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r";\s*}"), "}"),
    (re.compile(r"\s*{\s*"), "{"),
    (re.compile(r"}\s*"), "}"),
    (re.compile(r";\s*"), ";"),
    (re.compile(r",\s*"), ","),
)

_TAG_GAP_RE = re.compile(r">\s+<")


def minify_css(css: str) -> str:
    """Strip comments and redundant whitespace from a stylesheet."""
    css = _BLOCK_COMMENT_RE.sub("", css)
    css = _WHITESPACE_RE.sub(" ", css)
    return _apply(css, _CSS_RULES).strip()


def minify_js(code: str) -> str:
    """Strip comments and redundant whitespace from a script.

    Quoted strings and template literals are left intact when removing
    comments, but whitespace inside them is still collapsed.
    """
    code = _JS_COMMENT_RE.sub(lambda match: match.group("literal") or "", code)
    code = _WHITESPACE_RE.sub(" ", code)
    return _apply(code, _JS_RULES).strip()


def minify_html(html: str) -> str:
    """Strip comments and whitespace between tags from a document."""
    html = _HTML_COMMENT_RE.sub("", html)
    html = _WHITESPACE_RE.sub(" ", html)
    return _TAG_GAP_RE.sub("><", html).strip()


_MINIFIERS: dict[str, Callable[[str], str]] = {
    ".js": minify_js,
    ".css": minify_css,
    ".html": minify_html,
    ".htm": minify_html,
}


def minifier_for(path: str | Path) -> Callable[[str], str]:
    """Return the minifier registered for the file's suffix."""
    suffix = Path(path).suffix.lower()
    try:
        return _MINIFIERS[suffix]
    except KeyError as exc:
        raise UnsupportedAssetError(f"No minifier for {suffix or 'extension-less'} file: {path}") from exc


def _apply(text: str, rules: tuple[tuple[re.Pattern[str], str], ...]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text
