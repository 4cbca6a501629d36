# versegate/services/references/__init__.py
"""
Scripture reference parsing and verse retrieval.

This package provides:
- parse_query: Parse a human-readable reference into a RangeQuery
- tokenize / parse_reference / resolve: The individual parsing stages
- Point, Span: RangeQuery values handed to a corpus
- LocalCorpus: Verses from a downloaded SQLite file
- RemoteCorpus: Verses scraped from Bible Gateway
- ReferenceService: Corpus selection, lookup and chapter navigation
- CorpusStorage: Data directory and configuration file
- download_translation: Import a translation for offline use
"""

from .abbreviations import (
    BOOK_NAMES,
    OSIS_CODES,
    book_from_osis,
    CANONICAL_BOOKS,
    canonical_book_name,
    lookup_book,
)
from .errors import (
    ReferenceParseError,
    InvalidCharacter,
    BookNotFound,
    InvalidChapter,
    InvalidVerse,
    InvalidRangeContinuation,
)
from .tokenizer import Token, TokenKind, tokenize
from .reference_parser import (
    Reference,
    parse_book,
    parse_chapter,
    parse_verse,
    parse_reference,
)
from .range_resolver import (
    Point,
    Span,
    RangeQuery,
    resolve,
    normalize_query,
    parse_query,
)
from .corpus import (
    Corpus,
    CorpusError,
    LocalCorpusError,
    RemoteCorpusError,
    VerseRecord,
    BookEntry,
)
from .storage import CorpusStorage
from .local_corpus import LocalCorpus
from .remote_corpus import RemoteCorpus
from .downloader import download_translation
from .reference_service import ReferenceService, open_corpus

__all__ = [
    # Book table
    "BOOK_NAMES",
    "OSIS_CODES",
    "book_from_osis",
    "CANONICAL_BOOKS",
    "canonical_book_name",
    "lookup_book",
    # Errors
    "ReferenceParseError",
    "InvalidCharacter",
    "BookNotFound",
    "InvalidChapter",
    "InvalidVerse",
    "InvalidRangeContinuation",
    # Parsing
    "Token",
    "TokenKind",
    "tokenize",
    "Reference",
    "parse_book",
    "parse_chapter",
    "parse_verse",
    "parse_reference",
    "Point",
    "Span",
    "RangeQuery",
    "resolve",
    "normalize_query",
    "parse_query",
    # Corpora
    "Corpus",
    "CorpusError",
    "LocalCorpusError",
    "RemoteCorpusError",
    "VerseRecord",
    "BookEntry",
    "CorpusStorage",
    "LocalCorpus",
    "RemoteCorpus",
    "download_translation",
    # Service
    "ReferenceService",
    "open_corpus",
]
