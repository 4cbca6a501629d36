# versegate/services/references/corpus.py
"""
Verse corpus contract.

A corpus executes RangeQuery values and lists its books. Two variants
exist: LocalCorpus (a downloaded SQLite file) and RemoteCorpus (Bible
Gateway). Choosing between them is the caller's job.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .range_resolver import RangeQuery


class CorpusError(Exception):
    """Base exception for corpus operations."""
    pass


class LocalCorpusError(CorpusError):
    """Raised when the local database cannot be opened or queried."""
    pass


class RemoteCorpusError(CorpusError):
    """Raised when the remote source is unreachable or returns bad markup."""
    pass


@dataclass
class VerseRecord:
    """
    One stored verse fragment.

    Attributes:
        book: Canonical book name
        chapter: Chapter number
        number: Verse number
        part: Continuation index, 1 for the first fragment of a verse
        text: Verse text
        title: Section heading that precedes this fragment, if any
    """
    book: str
    chapter: int
    number: int
    part: int
    text: str
    title: Optional[str] = None

    @property
    def has_title(self) -> bool:
        return self.title is not None

    def to_dict(self) -> dict:
        return {
            "book": self.book,
            "chapter": self.chapter,
            "number": self.number,
            "part": self.part,
            "text": self.text,
            "title": self.title,
        }


@dataclass
class BookEntry:
    """A book name and its chapter count."""
    name: str
    chapters: int

    def __str__(self) -> str:
        return f"{self.name} ({self.chapters})"

    def to_dict(self) -> dict:
        return {"name": self.name, "chapters": self.chapters}


class Corpus(ABC):
    """Base class for verse sources."""

    translation: str = ""
    source: str = ""

    @abstractmethod
    def query(self, range_query: RangeQuery) -> list[VerseRecord]:
        """
        Return the records covered by a range query, in canonical order.

        An empty list means nothing matched; it is not an error.
        """
        pass

    @abstractmethod
    def booklist(self) -> list[BookEntry]:
        """Return books in canonical order with their chapter counts."""
        pass

    def close(self):
        """Release any held resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
