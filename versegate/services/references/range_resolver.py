# versegate/services/references/range_resolver.py
"""
Range resolution: turns a parsed reference plus the tokens after it into
a RangeQuery a corpus can execute.

A RangeQuery is either a Point (one chapter or one verse) or a Span
between two references. Spans are bounded by corpus sequence position,
so nothing here compares books, chapters or verses to order them.

Dash continuations, in order:

    "john 3:1-5"    verse on the left, lone number on the right -> verse
    "john 3:1-4:5"  chapter:verse on the right -> new chapter and verse
    "john 3-4"      lone number otherwise -> whole chapter
    "john 3-acts 2" a book on the right replaces the left book
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .errors import (
    InvalidChapter,
    InvalidRangeContinuation,
    InvalidVerse,
    ReferenceParseError,
)
from .reference_parser import (
    Reference,
    parse_book,
    parse_reference,
    parse_verse,
    positive_int,
    starts_book,
)
from .tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """An exact chapter (verse=None) or an exact verse."""
    book: str
    chapter: int
    verse: Optional[int] = None

    @property
    def reference(self) -> Reference:
        return Reference(self.book, self.chapter, self.verse)

    def to_search_string(self) -> str:
        return str(self.reference)

    def to_dict(self) -> dict:
        return {"type": "point", **self.reference.to_dict()}


@dataclass(frozen=True)
class Span:
    """Inclusive range from start to end in corpus order."""
    start: Reference
    end: Reference

    def to_search_string(self) -> str:
        """
        Render as a human reference, e.g. "John 3:1-5", "John 3:1-4:5",
        "John 3-4" or "John 3:16-Acts 2".
        """
        start, end = self.start, self.end
        if start.book != end.book:
            return f"{start}-{end}"
        if start.chapter == end.chapter and start.verse is not None and end.verse is not None:
            return f"{start}-{end.verse}"
        if end.verse is None:
            return f"{start}-{end.chapter}"
        return f"{start}-{end.chapter}:{end.verse}"

    def to_dict(self) -> dict:
        return {
            "type": "span",
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
        }


RangeQuery = Union[Point, Span]


def _parse_continuation(
    first: Reference, tokens: tuple[Token, ...]
) -> tuple[Reference, tuple[Token, ...]]:
    """Parse the reference fragment after a dash, filling gaps from first."""
    if not tokens:
        raise InvalidRangeContinuation("Nothing follows '-'")

    book = None
    if starts_book(tokens):
        book, tokens = parse_book(tokens)

    if not tokens:
        raise InvalidRangeContinuation(f"Missing chapter after '{book}'")
    if tokens[0].kind is TokenKind.COLON:
        raise InvalidRangeContinuation("Range end gives a verse without a chapter")
    if tokens[0].kind is not TokenKind.NUMBER:
        raise InvalidRangeContinuation(f"Unexpected {tokens[0].value!r} after '-'")

    number, tokens = tokens[0], tokens[1:]
    verse, tokens = parse_verse(tokens)

    if verse is not None:
        chapter = positive_int(number, InvalidChapter, "Chapter")
        return Reference(book or first.book, chapter, verse), tokens

    if book is None and first.verse is not None:
        verse = positive_int(number, InvalidVerse, "Verse")
        return Reference(first.book, first.chapter, verse), tokens

    chapter = positive_int(number, InvalidChapter, "Chapter")
    return Reference(book or first.book, chapter, None), tokens


def resolve(first: Reference, tail: tuple[Token, ...]) -> RangeQuery:
    """
    Combine a parsed reference and the tokens after it into a RangeQuery.

    Args:
        first: The reference parsed from the front of the query
        tail: Tokens left over after parsing first

    Returns:
        Point if tail is empty, Span if tail is a dash continuation

    Raises:
        InvalidRangeContinuation: If tail is anything else or cannot be
            resolved to an end reference
    """
    if not tail:
        return Point(first.book, first.chapter, first.verse)

    if tail[0].kind is not TokenKind.DASH:
        raise InvalidRangeContinuation(f"Unexpected {tail[0].value!r} after '{first}'")

    end, rest = _parse_continuation(first, tail[1:])
    if rest:
        raise InvalidRangeContinuation(f"Unexpected {rest[0].value!r} after '{end}'")

    return Span(start=first, end=end)


def normalize_query(query: str) -> str:
    return query.strip().lower()


def parse_query(query: str) -> RangeQuery:
    """
    Parse a free-form reference string into a RangeQuery.

    Args:
        query: User input such as "1 John 1:1", "John 3-4" or "Ps 23"

    Returns:
        Point or Span

    Raises:
        ReferenceParseError: One of its subclasses, with ``query`` set
    """
    try:
        tokens = tokenize(normalize_query(query))
        first, tail = parse_reference(tokens)
        result = resolve(first, tail)
    except ReferenceParseError as e:
        e.query = query
        raise

    logger.debug(f"Parsed {query!r} -> {result}")
    return result
