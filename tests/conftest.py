"""
Pytest configuration and shared fixtures
"""

from __future__ import annotations

from pathlib import Path

import pytest

from lyricscrape.config import AppConfig
from tests.mocks.fake_fetcher import FakeFetcher

SEARCH_URL = "https://lyrics.example.com/search?q=smooth criminal"
LYRICS_URL = "https://lyrics.example.com/songs/smooth-criminal"
JSON_SEARCH_URL = "https://api.example.com/search?q=lights"
JSON_LYRICS_URL = "https://example.com/song"

SEARCH_PAGE = """
<html>
<body>
  <div class="results">
    <a class="hit" href="/songs/smooth-criminal">Smooth Criminal</a>
    <a class="hit" href="/songs/other">Other</a>
  </div>
</body>
</html>
"""

EMPTY_SEARCH_PAGE = """
<html><body><div class="results"><p>No results</p></div></body></html>
"""

LYRICS_PAGE = """
<html>
<body>
  <h1 class="title">  Smooth
     Criminal </h1>
  <h2 class="artist"><a href="/artists/mj">Michael Jackson</a></h2>
  <div id="lyrics">
    <!-- start of lyrics -->
    <p>As he came into the window<br>
    It was the sound of a crescendo</p>
    <p>He came into her apartment<br>
    He left the bloodstains on the carpet</p>
  </div>
</body>
</html>
"""

SMOOTH_CRIMINAL_TEXT = (
    "As he came into the window\n"
    "It was the sound of a crescendo\n"
    "He came into her apartment\n"
    "He left the bloodstains on the carpet"
)

JSON_LYRICS_PAGE = """
<html><body>
  <h1>Lights</h1>
  <span class="artist">Ellie Goulding</span>
  <div id="lyrics">I had a way then<br>Losing it all on my own</div>
</body></html>
"""


@pytest.fixture
def sources() -> dict:
    return {
        "Example": {
            "search": {
                "url": "https://lyrics.example.com/search?q={query}",
                "json": False,
                "select": "div.results a.hit",
            },
            "parse": {"title": "h1.title", "author": "h2.artist", "content": "div#lyrics"},
        },
        "Example JSON": {
            "search": {
                "url": "https://api.example.com/search?q={query}",
                "json": True,
                "select": "result",
            },
            "parse": {"title": "h1", "author": ".artist", "content": "#lyrics"},
        },
    }


@pytest.fixture
def app_config(tmp_path: Path, sources: dict) -> AppConfig:
    return AppConfig(
        config_dir=tmp_path / "config",
        default_source="Example",
        user_agent="lyricscrape-tests/1.0",
        timeout_s=1.0,
        max_workers=4,
        sources=sources,
    )


@pytest.fixture
def fetcher() -> FakeFetcher:
    f = FakeFetcher()
    f.add_html(SEARCH_URL, SEARCH_PAGE)
    f.add_html(LYRICS_URL, LYRICS_PAGE)
    f.add_json(JSON_SEARCH_URL, {"result": JSON_LYRICS_URL})
    f.add_html(JSON_LYRICS_URL, JSON_LYRICS_PAGE)
    return f
