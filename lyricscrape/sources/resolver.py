from __future__ import annotations

import logging
from typing import Any, Mapping

import soupsieve

from lyricscrape.errors import UnknownSourceError

from .types import QUERY_SLOT, SourceConfig

logger = logging.getLogger(__name__)

_SELECTOR_FIELDS = (
    ("search", "select"),
    ("parse", "title"),
    ("parse", "author"),
    ("parse", "content"),
)


class SourceResolver:
    """
    Maps a source name to a validated SourceConfig.

    Entries are checked on every resolve, so a broken source only fails the
    requests that name it.
    """

    def __init__(self, sources: Mapping[str, Any]):
        self._sources = sources

    def names(self) -> list[str]:
        return sorted(self._sources)

    def resolve(self, name: str) -> SourceConfig:
        entry = self._sources.get(name)
        if entry is None:
            raise UnknownSourceError(name)
        if not isinstance(entry, Mapping):
            raise UnknownSourceError(name, "entry must be an object")

        url = _field(name, entry, "search", "url")
        if url.count(QUERY_SLOT) != 1:
            raise UnknownSourceError(name, f"search.url must contain exactly one {QUERY_SLOT} slot")

        is_json = _section(name, entry, "search").get("json")
        if not isinstance(is_json, bool):
            raise UnknownSourceError(name, "search.json must be true or false")

        selectors = [_selector(name, entry, section, key) for section, key in _SELECTOR_FIELDS]
        result_sel, title_sel, author_sel, content_sel = selectors

        return SourceConfig(
            name=name,
            search_url_template=url,
            search_is_json=is_json,
            result_selector=result_sel,
            title_selector=title_sel,
            author_selector=author_sel,
            content_selector=content_sel,
        )

    def check_all(self) -> dict[str, UnknownSourceError | None]:
        report: dict[str, UnknownSourceError | None] = {}
        for name in self.names():
            try:
                self.resolve(name)
                report[name] = None
            except UnknownSourceError as e:
                logger.debug("Source check failed: %s", e)
                report[name] = e
        return report


def _section(name: str, entry: Mapping[str, Any], section: str) -> Mapping[str, Any]:
    value = entry.get(section)
    if not isinstance(value, Mapping):
        raise UnknownSourceError(name, f"missing '{section}' section")
    return value


def _field(name: str, entry: Mapping[str, Any], section: str, key: str) -> str:
    value = _section(name, entry, section).get(key)
    if not isinstance(value, str) or not value.strip():
        raise UnknownSourceError(name, f"{section}.{key} must be a non-empty string")
    return value


def _selector(name: str, entry: Mapping[str, Any], section: str, key: str) -> str:
    value = _field(name, entry, section, key)
    try:
        soupsieve.compile(value)
    except soupsieve.SelectorSyntaxError as e:
        raise UnknownSourceError(name, f"{section}.{key} is not a valid selector: {e}") from e
    return value
