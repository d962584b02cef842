from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

import requests
from bs4 import BeautifulSoup, NavigableString, Tag

from lyricscrape.errors import FetchError

logger = logging.getLogger(__name__)

_BAD_TAG_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


@dataclass(frozen=True, slots=True)
class Document:
    url: str
    soup: BeautifulSoup

    def select_first(self, selector: str) -> Tag | None:
        return self.soup.select_one(selector)


class Fetcher:
    def __init__(self, *, user_agent: str, timeout_s: float, session: requests.Session | None = None):
        self.user_agent = user_agent
        self.timeout_s = timeout_s
        self.session = session or requests.Session()

    def fetch(self, url: str, *, as_json: bool = False) -> Document:
        """
        GET `url` and parse it. Every transport, status or decoding failure
        raises FetchError.
        """
        logger.debug("GET %s (json=%s)", url, as_json)
        try:
            r = self.session.get(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout_s)
            r.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e

        final_url = r.url or url
        if not as_json:
            return parse_html(r.text, final_url)
        try:
            data = r.json()
        except ValueError as e:
            raise FetchError(url, f"invalid JSON: {e}") from e
        return parse_json(data, final_url)

    def close(self) -> None:
        self.session.close()


def parse_html(markup: str, url: str) -> Document:
    return Document(url=url, soup=BeautifulSoup(markup, "html.parser"))


def parse_json(data: Any, url: str) -> Document:
    """
    Build an element tree from decoded JSON: object keys become elements,
    array items repeat the enclosing element, scalars become text.

    The tree is built node by node rather than parsed from markup, so key
    names like "link", "meta" or "script" get no special HTML treatment.
    """
    # No string containers: text under "style"/"script" stays plain text
    soup = BeautifulSoup("", "html.parser", string_containers={})
    stack: list[tuple[Tag, str | None, Any, bool]] = [(soup, None, data, False)]
    while stack:
        parent, name, value, wrap = stack.pop()
        if wrap:
            # A list nested directly in a list: its items go in <array>
            parent = _append_tag(soup, parent, name)
            name = "array"
        if isinstance(value, dict):
            target = parent if name is None else _append_tag(soup, parent, name)
            for key, item in reversed(list(value.items())):
                stack.append((target, _tag_name(str(key)), item, False))
        elif isinstance(value, list):
            item_name = name or "array"
            for item in reversed(value):
                stack.append((parent, item_name, item, isinstance(item, list)))
        else:
            target = parent if name is None else _append_tag(soup, parent, name)
            target.append(NavigableString(_scalar_text(value)))
    return Document(url=url, soup=soup)


def _append_tag(soup: BeautifulSoup, parent: Tag, name: str | None) -> Tag:
    tag = soup.new_tag(name or "array")
    parent.append(tag)
    return tag


def _scalar_text(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _tag_name(key: str) -> str:
    name = _BAD_TAG_CHARS.sub("_", key).lower()
    if not name[:1].isalpha():
        name = f"key_{name}"
    return name
