from __future__ import annotations

from dataclasses import dataclass

QUERY_SLOT = "{query}"


@dataclass(frozen=True, slots=True)
class SourceConfig:
    name: str
    search_url_template: str
    search_is_json: bool
    result_selector: str
    title_selector: str
    author_selector: str
    content_selector: str

    def search_url(self, query: str) -> str:
        # The raw query is substituted as-is; requests quotes it when preparing the request.
        return self.search_url_template.replace(QUERY_SLOT, query)


@dataclass(frozen=True, slots=True)
class Lyrics:
    title: str
    author: str
    content: str
    url: str
    source: str

    @property
    def display(self) -> str:
        if self.author and self.title:
            return f"{self.author} - {self.title}"
        return self.title or self.author or "Unknown track"


@dataclass(frozen=True, slots=True)
class Found:
    lyrics: Lyrics


@dataclass(frozen=True, slots=True)
class NotFound:
    """No lyrics for this source and query, whatever the cause."""


NOT_FOUND = NotFound()

LookupResult = Found | NotFound
