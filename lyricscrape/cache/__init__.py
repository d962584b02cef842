from .memory import CacheKey, LyricsCache

__all__ = ["CacheKey", "LyricsCache"]
