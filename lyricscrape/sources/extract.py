from __future__ import annotations

import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

_WS = re.compile(r"[ \t\r\n\f]+")

_LINE_BREAK_TAGS = frozenset({"br"})
_BLOCK_TAGS = frozenset({"p", "div", "li", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "tr"})
_DROPPED_TAGS = frozenset({"script", "style", "template", "noscript"})


def visible_text(node: Tag) -> str:
    """
    Full text of the node and its descendants, whitespace-normalized.
    Inline markup joins its text as is; <br> and block elements separate words.
    """
    out: list[str] = []
    _render(node, out)
    return " ".join("".join(out).split())


def result_url(node: Tag, *, base_url: str, as_json: bool) -> str:
    """
    Lyrics-page URL referenced by a search result node: its text for JSON
    searches, its href made absolute otherwise. Empty string when absent.
    """
    if as_json:
        return " ".join(node.get_text().split())
    href = node.get("href")
    if not isinstance(href, str) or not href.strip():
        return ""
    return urljoin(base_url, href.strip())


def clean_with_newlines(markup: str) -> str:
    """
    Reduce lyrics markup to plain text.

    <br> is a hard line break, block elements start and end lines, every
    other tag is dropped. Source whitespace collapses to single spaces so
    pretty-printed markup leaves no stray indentation or blank lines.
    """
    soup = BeautifulSoup(markup, "html.parser")
    out: list[str] = []
    _render(soup, out)
    lines = [line.strip() for line in "".join(out).split("\n")]
    return "\n".join(lines).strip("\n")


def _render(node: Tag, out: list[str]) -> None:
    for child in node.children:
        if isinstance(child, PreformattedString):
            # comments, doctypes, CDATA, processing instructions
            continue
        if isinstance(child, NavigableString):
            out.append(_WS.sub(" ", str(child)))
            continue
        if not isinstance(child, Tag) or child.name in _DROPPED_TAGS:
            continue
        if child.name in _LINE_BREAK_TAGS:
            out.append("\n")
        elif child.name in _BLOCK_TAGS:
            _soft_break(out)
            _render(child, out)
            _soft_break(out)
        else:
            _render(child, out)


def _soft_break(out: list[str]) -> None:
    # Only break when the current line already has text.
    for piece in reversed(out):
        if not piece.strip(" "):
            continue
        if not piece.rstrip(" ").endswith("\n"):
            out.append("\n")
        return
