from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor

from lyricscrape.cache.memory import CacheKey, LyricsCache
from lyricscrape.config import AppConfig, load_config
from lyricscrape.sources.fetcher import Fetcher
from lyricscrape.sources.pipeline import ScrapePipeline
from lyricscrape.sources.resolver import SourceResolver
from lyricscrape.sources.types import LookupResult

logger = logging.getLogger(__name__)


class LyricsClient:
    """
    Entry point for lyrics lookups.

    `get_lyrics` never blocks on the network: cached outcomes come back as an
    already completed future, everything else runs on the executor. A
    NotFound outcome is memoized like a Found one; use `cache.invalidate` or
    `cache.clear` to look it up again.
    """

    def __init__(
        self,
        default_source: str | None = None,
        executor: Executor | None = None,
        *,
        config: AppConfig | None = None,
        fetcher: Fetcher | None = None,
        cache: LyricsCache | None = None,
    ):
        self.cfg = config or load_config()
        self.default_source = default_source if default_source is not None else self.cfg.default_source
        self.resolver = SourceResolver(self.cfg.sources)
        self.cache = cache if cache is not None else LyricsCache()
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or Fetcher(user_agent=self.cfg.user_agent, timeout_s=self.cfg.timeout_s)
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=self.cfg.max_workers, thread_name_prefix="lyricscrape"
        )
        self.pipeline = ScrapePipeline(self.fetcher, self.cache)

    def get_lyrics(self, query: str, source: str | None = None) -> Future[LookupResult]:
        """
        Look up lyrics for `query` on `source` (default source when omitted).

        Raises UnknownSourceError right away for an unknown or misconfigured
        source; the returned future itself never fails for lookup problems.
        """
        source = source if source is not None else self.default_source
        key = CacheKey(source=source, query=query)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s/%r", source, query)
            done: Future[LookupResult] = Future()
            done.set_result(cached)
            return done

        config = self.resolver.resolve(source)
        return self.executor.submit(self.pipeline.run, key, config)

    def lookup(self, query: str, source: str | None = None, timeout: float | None = None) -> LookupResult:
        return self.get_lyrics(query, source).result(timeout=timeout)

    def sources(self) -> list[str]:
        return self.resolver.names()

    def close(self) -> None:
        if self._owns_executor:
            self.executor.shutdown(wait=True)
        if self._owns_fetcher:
            self.fetcher.close()

    def __enter__(self) -> "LyricsClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
