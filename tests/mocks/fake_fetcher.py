from __future__ import annotations

import threading
from typing import Any

from lyricscrape.errors import FetchError
from lyricscrape.sources.fetcher import Document, parse_html, parse_json


class FakeFetcher:
    """
    Mock fetcher for testing.

    Serves canned pages by exact URL and counts every call:
    - html pages: `add_html(url, markup)`
    - json pages: `add_json(url, data)`
    - anything else raises FetchError, like an unreachable site
    """

    def __init__(self, delay_event: threading.Event | None = None):
        self._pages: dict[str, tuple[str, Any]] = {}
        self._lock = threading.Lock()
        self.calls: list[tuple[str, bool]] = []
        self.closed = False
        # When set, fetch() waits for the event before answering
        self.delay_event = delay_event

    def add_html(self, url: str, markup: str) -> None:
        self._pages[url] = ("html", markup)

    def add_json(self, url: str, data: Any) -> None:
        self._pages[url] = ("json", data)

    @property
    def call_count(self) -> int:
        with self._lock:
            return len(self.calls)

    def fetch(self, url: str, *, as_json: bool = False) -> Document:
        with self._lock:
            self.calls.append((url, as_json))
        if self.delay_event is not None:
            self.delay_event.wait(timeout=5)

        page = self._pages.get(url)
        if page is None:
            raise FetchError(url, "404 Client Error: Not Found")
        kind, body = page
        if as_json:
            if kind != "json":
                raise FetchError(url, "invalid JSON")
            return parse_json(body, url)
        if kind == "json":
            return parse_html(str(body), url)
        return parse_html(body, url)

    def close(self) -> None:
        self.closed = True
