from .types import NOT_FOUND, Found, LookupResult, Lyrics, NotFound, SourceConfig

__all__ = ["NOT_FOUND", "Found", "LookupResult", "Lyrics", "NotFound", "SourceConfig"]
