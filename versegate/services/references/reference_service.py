# versegate/services/references/reference_service.py
"""
Lookup service tying the reference parser to a verse corpus.

Chooses the corpus for a translation (a downloaded local file if one
exists, otherwise Bible Gateway) and provides previous/next chapter
navigation with wraparound at the ends of the Bible.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from .corpus import BookEntry, Corpus, VerseRecord
from .local_corpus import LocalCorpus
from .range_resolver import Point, RangeQuery, parse_query
from .remote_corpus import RemoteCorpus
from .storage import CorpusStorage

if TYPE_CHECKING:
    from ...core.config import ReaderConfig

logger = logging.getLogger(__name__)


def open_corpus(translation: str, storage: CorpusStorage) -> Corpus:
    """Return a LocalCorpus if the translation is downloaded, else a RemoteCorpus."""
    if storage.has_local(translation):
        logger.debug(f"Using local corpus for {translation}")
        return LocalCorpus(storage.translation_path(translation), translation)
    logger.debug(f"No local copy of {translation}, using remote corpus")
    return RemoteCorpus(translation)


class ReferenceService:
    """
    Parses references and runs them against a corpus.

    Usage:
        service = ReferenceService(config)

        query, verses = service.lookup("John 3:16-18")
        following = service.next_chapter(verses)
    """

    def __init__(
        self,
        config: ReaderConfig,
        storage: Optional[CorpusStorage] = None,
        corpus: Optional[Corpus] = None,
    ):
        self.config = config
        self.storage = storage or CorpusStorage()
        self.corpus = corpus or open_corpus(config.translation, self.storage)
        self._books: Optional[list[BookEntry]] = None

    def close(self):
        self.corpus.close()

    def lookup(self, text: str) -> tuple[RangeQuery, list[VerseRecord]]:
        """
        Parse a reference and fetch its verses.

        Returns:
            (RangeQuery, verses); verses may be empty

        Raises:
            ReferenceParseError: If the reference is malformed
            CorpusError: If the corpus fails
        """
        range_query = parse_query(text)
        verses = self.corpus.query(range_query)
        logger.info(
            f"{range_query.to_search_string()} ({self.corpus.translation}, "
            f"{self.corpus.source}): {len(verses)} records"
        )
        return range_query, verses

    def booklist(self) -> list[BookEntry]:
        """Return the corpus booklist, fetched once per service."""
        if self._books is None:
            self._books = self.corpus.booklist()
        return self._books

    def _book_index(self, book: str) -> int:
        books = self.booklist()
        for i, entry in enumerate(books):
            if entry.name == book:
                return i
        raise LookupError(f"Book not found: {book}")

    def previous_chapter(self, verses: list[VerseRecord]) -> Point:
        """
        Chapter before the first verse shown. Genesis 1 wraps to the last
        chapter of the last book.
        """
        if not verses:
            raise LookupError("No passage to navigate from")
        first = verses[0]
        if first.chapter > 1:
            return Point(first.book, first.chapter - 1)

        books = self.booklist()
        index = self._book_index(first.book)
        previous = books[index - 1]  # index 0 wraps to the end
        return Point(previous.name, previous.chapters)

    def next_chapter(self, verses: list[VerseRecord]) -> Point:
        """
        Chapter after the last verse shown. The last chapter of the last
        book wraps to Genesis 1.
        """
        if not verses:
            raise LookupError("No passage to navigate from")
        last = verses[-1]

        books = self.booklist()
        index = self._book_index(last.book)
        if last.chapter < books[index].chapters:
            return Point(last.book, last.chapter + 1)

        following = books[(index + 1) % len(books)]
        return Point(following.name, 1)

    def read(self, range_query: RangeQuery) -> list[VerseRecord]:
        """Fetch verses for an already-resolved query (e.g. from navigation)."""
        return self.corpus.query(range_query)
