# versegate/services/references/reference_parser.py
"""
Recursive-descent parser for a single scripture reference.

Grammar (over tokens from the tokenizer):

    reference := book chapter verse?
    book      := WORD WORD* | NUMBER WORD WORD*
    chapter   := NUMBER
    verse     := COLON NUMBER

Each step takes the remaining tokens and returns its value together with
the tokens it did not consume. Nothing here touches a corpus; the book
table is the only data consulted.
"""

from dataclasses import dataclass
from typing import Optional

from .abbreviations import lookup_book
from .errors import BookNotFound, InvalidChapter, InvalidVerse
from .tokenizer import Token, TokenKind


@dataclass(frozen=True)
class Reference:
    """
    A resolved book/chapter(/verse) triple.

    Attributes:
        book: Canonical book name (e.g., "1 John")
        chapter: Chapter number, always >= 1
        verse: Verse number, or None for the whole chapter
    """
    book: str
    chapter: int
    verse: Optional[int] = None

    @property
    def is_chapter(self) -> bool:
        return self.verse is None

    def __str__(self) -> str:
        if self.verse is None:
            return f"{self.book} {self.chapter}"
        return f"{self.book} {self.chapter}:{self.verse}"

    def to_dict(self) -> dict:
        return {"book": self.book, "chapter": self.chapter, "verse": self.verse}


def starts_book(tokens: tuple[Token, ...]) -> bool:
    """True when the next tokens could open a book name."""
    if not tokens:
        return False
    if tokens[0].kind is TokenKind.WORD:
        return True
    return (
        tokens[0].kind is TokenKind.NUMBER
        and len(tokens) > 1
        and tokens[1].kind is TokenKind.WORD
    )


def positive_int(token: Token, error_cls, what: str) -> int:
    """Convert a NUMBER token to an int, rejecting zero."""
    value = int(token.value)
    if value < 1:
        raise error_cls(f"{what} must be at least 1, got {token.value}")
    return value


def parse_book(tokens: tuple[Token, ...]) -> tuple[str, tuple[Token, ...]]:
    """
    Consume a book name.

    A WORD is looked up directly; a NUMBER followed by a WORD is looked up
    as their concatenation ("1" + "john"). Trailing WORD tokens are joined
    on as well so multi-word names ("song of solomon", "i john") resolve;
    the longest matching run wins.

    Raises:
        BookNotFound: If nothing matches the book table
    """
    if not starts_book(tokens):
        if not tokens:
            raise BookNotFound("No book found")
        raise BookNotFound(f"Expected a book name, found {tokens[0].value!r}")

    first_word = 0 if tokens[0].kind is TokenKind.WORD else 1
    end = first_word
    while end < len(tokens) and tokens[end].kind is TokenKind.WORD:
        end += 1

    for stop in range(end, first_word, -1):
        key = "".join(token.value for token in tokens[:stop])
        book = lookup_book(key)
        if book is not None:
            return book, tokens[stop:]

    key = "".join(token.value for token in tokens[:first_word + 1])
    raise BookNotFound(f"Book not found: {key}")


def parse_chapter(tokens: tuple[Token, ...]) -> tuple[int, tuple[Token, ...]]:
    """
    Consume a chapter number.

    Raises:
        InvalidChapter: If the next token is missing, not a NUMBER, or zero
    """
    if not tokens:
        raise InvalidChapter("No chapter found")
    if tokens[0].kind is not TokenKind.NUMBER:
        raise InvalidChapter(f"Invalid chapter: {tokens[0].value!r}")
    return positive_int(tokens[0], InvalidChapter, "Chapter"), tokens[1:]


def parse_verse(tokens: tuple[Token, ...]) -> tuple[Optional[int], tuple[Token, ...]]:
    """
    Consume an optional ``:verse`` suffix.

    Returns (None, tokens) unchanged when the next token is not a COLON.

    Raises:
        InvalidVerse: If a COLON is not followed by a positive NUMBER
    """
    if not tokens or tokens[0].kind is not TokenKind.COLON:
        return None, tokens
    if len(tokens) == 1:
        raise InvalidVerse("No verse found after ':'")
    if tokens[1].kind is not TokenKind.NUMBER:
        raise InvalidVerse(f"Invalid verse: {tokens[1].value!r}")
    return positive_int(tokens[1], InvalidVerse, "Verse"), tokens[2:]


def parse_reference(tokens: tuple[Token, ...]) -> tuple[Reference, tuple[Token, ...]]:
    """
    Parse ``book chapter verse?`` from the front of the token sequence.

    Returns:
        (Reference, remaining tokens)
    """
    book, tokens = parse_book(tokens)
    chapter, tokens = parse_chapter(tokens)
    verse, tokens = parse_verse(tokens)
    return Reference(book=book, chapter=chapter, verse=verse), tokens
