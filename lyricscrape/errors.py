from __future__ import annotations


class LyricsError(RuntimeError):
    pass


class UnknownSourceError(LyricsError, ValueError):
    """Source is not configured, or its configuration is incomplete."""

    def __init__(self, source: str, reason: str | None = None):
        msg = f"Source '{source}' does not exist or is not configured correctly"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.source = source
        self.reason = reason


class FetchError(LyricsError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
