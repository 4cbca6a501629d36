# versegate/services/references/remote_corpus.py
"""
Verse corpus that scrapes Bible Gateway.

Passage URL format:
    https://www.biblegateway.com/passage/?search=John+3&version=ESV

Range queries are rendered back to a reference string for the search
parameter; Bible Gateway does its own range handling.
"""

import logging
import os
from typing import Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from ...utils.http_retry import get_with_retry
from .abbreviations import book_from_osis, canonical_book_name
from .corpus import BookEntry, Corpus, RemoteCorpusError, VerseRecord
from .range_resolver import RangeQuery

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.biblegateway.com"


def _strip_notes(soup: BeautifulSoup):
    """Remove cross-reference and footnote markers from the passage."""
    for node in soup.select(".crossreference, .footnote"):
        node.decompose()


def _line_position(line) -> tuple[str, int, int]:
    """
    Read book, chapter and verse from a span's class, e.g. "text 1John-3-16".
    """
    classes = line.get("class") or []
    if len(classes) != 2:
        raise RemoteCorpusError(f"Unexpected class format on text line: {classes}")

    parts = classes[1].split("-")
    if len(parts) != 3:
        raise RemoteCorpusError(f"Unexpected inner class format: {classes[1]}")

    book = book_from_osis(parts[0])
    if book is None:
        raise RemoteCorpusError(f"Unknown book code: {parts[0]}")
    try:
        return book, int(parts[1]), int(parts[2])
    except ValueError as e:
        raise RemoteCorpusError(f"Bad chapter/verse in {classes[1]}: {e}") from e


def parse_passage_html(html: str) -> list[VerseRecord]:
    """
    Extract verse records from a Bible Gateway passage page.

    Headings become the title of the verse that follows them. A text span
    carrying a verse or chapter number starts part 1 of a verse; spans
    without one continue the previous verse.
    """
    soup = BeautifulSoup(html, "html.parser")
    _strip_notes(soup)

    verses = []
    for passage in soup.select(".passage-table"):
        for node in passage.select(".translation"):
            node.decompose()

        title: Optional[str] = None
        part = 0
        for line in passage.select(".text"):
            if line.parent is not None and line.parent.name.startswith("h"):
                title = line.get_text()
                continue

            book, chapter, number = _line_position(line)

            markers = line.select(".versenum, .chapternum")
            if markers:
                for marker in markers:
                    marker.decompose()
                part = 1
            else:
                part += 1

            verses.append(VerseRecord(
                book=book,
                chapter=chapter,
                number=number,
                part=part,
                text=line.get_text().strip(),
                title=title,
            ))
            title = None

    return verses


def parse_booklist_html(html: str) -> list[BookEntry]:
    """Extract book names and chapter counts from a translation info page."""
    soup = BeautifulSoup(html, "html.parser")

    books = []
    for row in soup.select(".infotable tr .book-name"):
        for svg in row.select("svg"):
            svg.decompose()

        count = row.select_one(".num-chapters")
        if count is None:
            raise RemoteCorpusError("Book row has no chapter count")
        try:
            chapters = int(count.get_text(strip=True))
        except ValueError as e:
            raise RemoteCorpusError(f"Bad chapter count: {count.get_text()!r}") from e
        count.decompose()

        books.append(BookEntry(
            name=canonical_book_name(row.get_text(strip=True)),
            chapters=chapters,
        ))

    return books


class RemoteCorpus(Corpus):
    """
    Fetches passages from Bible Gateway.

    Usage:
        corpus = RemoteCorpus("ESV")
        verses = corpus.query(parse_query("Psalm 23"))
        books = corpus.booklist()
    """

    source = "remote"

    def __init__(self, translation: str, base_url: Optional[str] = None):
        self.translation = translation.upper()
        self.base_url = (
            base_url or os.getenv("BIBLEGATEWAY_BASE_URL", DEFAULT_BASE_URL)
        ).rstrip("/")
        self._request_timeout = 15  # seconds

    @property
    def passage_url(self) -> str:
        return f"{self.base_url}/passage/"

    def _get(self, url: str, params: Optional[dict] = None) -> str:
        try:
            response = get_with_retry(url, params=params, timeout=self._request_timeout)
        except (RuntimeError, requests.RequestException) as e:
            logger.error(f"Remote request failed: {e}")
            raise RemoteCorpusError(f"Unable to retrieve {url}: {e}") from e
        return response.text

    def fetch_passage(self, search: str) -> list[VerseRecord]:
        """Fetch and parse a passage by free-text search string."""
        logger.debug(f"Fetching {search!r} ({self.translation})")
        html = self._get(
            self.passage_url,
            params={"search": search, "version": self.translation},
        )
        return parse_passage_html(html)

    def query(self, range_query: RangeQuery) -> list[VerseRecord]:
        return self.fetch_passage(range_query.to_search_string())

    def booklist(self) -> list[BookEntry]:
        html = self._get(
            self.passage_url,
            params={"search": "Genesis 1", "version": self.translation},
        )
        soup = BeautifulSoup(html, "html.parser")
        link = soup.select_one(".publisher-info-bottom a")
        if link is None or not link.get("href"):
            raise RemoteCorpusError(f"Unable to find book list for {self.translation}")

        booklist_url = urljoin(self.base_url + "/", link["href"])
        books = parse_booklist_html(self._get(booklist_url))
        logger.debug(f"Found {len(books)} books for {self.translation}")
        return books
