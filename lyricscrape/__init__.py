from lyricscrape.cache.memory import CacheKey, LyricsCache
from lyricscrape.client import LyricsClient
from lyricscrape.errors import FetchError, LyricsError, UnknownSourceError
from lyricscrape.sources.types import NOT_FOUND, Found, LookupResult, Lyrics, NotFound, SourceConfig

__all__ = [
    "CacheKey",
    "FetchError",
    "Found",
    "LookupResult",
    "Lyrics",
    "LyricsCache",
    "LyricsClient",
    "LyricsError",
    "NOT_FOUND",
    "NotFound",
    "SourceConfig",
    "UnknownSourceError",
]
