from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from lyricscrape.sources.extract import clean_with_newlines, result_url, visible_text


@pytest.mark.parametrize(
    "markup, expected",
    [
        ("<p>line one</p><p>line two</p>", "line one\nline two"),
        ("line one<br>line two", "line one\nline two"),
        ("line one<br/>\n    line two<br />", "line one\nline two"),
        ("<p>line one</p>\n\n   <p>line two</p>", "line one\nline two"),
        ("<div><p>a<br></p><p>b</p></div>", "a\nb"),
    ],
)
def test_clean_with_newlines_line_breaks(markup, expected):
    assert clean_with_newlines(markup) == expected


def test_clean_with_newlines_keeps_stanza_breaks():
    assert clean_with_newlines("one<br>two<br><br>three") == "one\ntwo\n\nthree"


def test_clean_with_newlines_strips_other_markup():
    markup = (
        '<script>var ad = 1;</script><!-- ad -->'
        '<p><b>Bold</b> and <i class="x">italic</i> &amp; <a href="/x">linked</a></p>'
        "<style>p { color: red }</style>"
    )
    text = clean_with_newlines(markup)
    assert text == "Bold and italic & linked"
    assert "<" not in text


def test_clean_with_newlines_collapses_pretty_print_whitespace():
    markup = """
        <p>
            first   line
        </p>
        <p>
            second line
        </p>
    """
    assert clean_with_newlines(markup) == "first line\nsecond line"


def test_clean_with_newlines_empty():
    assert clean_with_newlines("   ") == ""


def test_visible_text_trims_and_normalizes():
    soup = BeautifulSoup("<h1>  Smooth\n  <span>Criminal</span>  </h1>", "html.parser")
    assert visible_text(soup.h1) == "Smooth Criminal"


@pytest.mark.parametrize(
    "markup, expected",
    [
        ("<h1>Don<span>'</span>t Stop Me<b>ow</b></h1>", "Don't Stop Meow"),
        ("<h1>Smooth<br>Criminal</h1>", "Smooth Criminal"),
        ("<h1><div>Michael</div><div>Jackson</div></h1>", "Michael Jackson"),
        ("<h1>Bad<!-- ad --><script>x()</script></h1>", "Bad"),
    ],
)
def test_visible_text_keeps_inline_words_whole(markup, expected):
    soup = BeautifulSoup(markup, "html.parser")
    assert visible_text(soup.h1) == expected


def test_result_url_resolves_relative_href():
    soup = BeautifulSoup('<a href="../songs/x.html">x</a>', "html.parser")
    url = result_url(soup.a, base_url="https://example.com/search/index.php?q=x", as_json=False)
    assert url == "https://example.com/songs/x.html"


def test_result_url_without_href_is_empty():
    soup = BeautifulSoup("<a>x</a>", "html.parser")
    assert result_url(soup.a, base_url="https://example.com/", as_json=False) == ""


def test_result_url_json_uses_text():
    soup = BeautifulSoup("<url> https://example.com/song </url>", "html.parser")
    assert result_url(soup.url, base_url="https://api.example.com/", as_json=True) == "https://example.com/song"
