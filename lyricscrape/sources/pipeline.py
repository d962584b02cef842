from __future__ import annotations

import logging

from lyricscrape.cache.memory import CacheKey, LyricsCache
from lyricscrape.errors import FetchError

from .extract import clean_with_newlines, result_url, visible_text
from .fetcher import Fetcher
from .types import NOT_FOUND, Found, LookupResult, Lyrics, SourceConfig

logger = logging.getLogger(__name__)


class ScrapePipeline:
    """
    search page -> result link -> lyrics page -> fields, for any SourceConfig.
    """

    def __init__(self, fetcher: Fetcher, cache: LyricsCache):
        self.fetcher = fetcher
        self.cache = cache

    def run(self, key: CacheKey, config: SourceConfig) -> LookupResult:
        """
        Scrape `key.query` from the already resolved source and memoize the
        outcome. Never raises; any failure while fetching or parsing ends as
        NOT_FOUND.
        """
        try:
            result = self.scrape(config, key.query)
        except FetchError as e:
            logger.warning("%s: lookup of %r failed: %s", config.name, key.query, e)
            result = NOT_FOUND
        except Exception:
            logger.warning("%s: lookup of %r failed", config.name, key.query, exc_info=True)
            result = NOT_FOUND
        self.cache.put(key, result)
        return result

    def scrape(self, config: SourceConfig, query: str) -> LookupResult:
        search_doc = self.fetcher.fetch(config.search_url(query), as_json=config.search_is_json)

        node = search_doc.select_first(config.result_selector)
        if node is None:
            logger.info("%s: no search result for %r", config.name, query)
            return NOT_FOUND
        url = result_url(node, base_url=search_doc.url, as_json=config.search_is_json)
        if not url:
            logger.info("%s: search result for %r has no link", config.name, query)
            return NOT_FOUND

        page = self.fetcher.fetch(url)
        title = page.select_first(config.title_selector)
        author = page.select_first(config.author_selector)
        content = page.select_first(config.content_selector)
        if title is None or author is None or content is None:
            # A partially parseable page counts as not found
            logger.info(
                "%s: %s is missing fields (title=%s author=%s content=%s)",
                config.name,
                url,
                title is not None,
                author is not None,
                content is not None,
            )
            return NOT_FOUND

        lyrics = Lyrics(
            title=visible_text(title),
            author=visible_text(author),
            content=clean_with_newlines(content.decode_contents()),
            url=url,
            source=config.name,
        )
        logger.debug("%s: found %s at %s", config.name, lyrics.display, url)
        return Found(lyrics)
