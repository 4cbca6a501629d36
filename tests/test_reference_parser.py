# tests/test_reference_parser.py
"""
Tests for book/chapter/verse parsing of a single reference.
"""

import pytest

from versegate.services.references import (
    BookNotFound,
    InvalidChapter,
    InvalidVerse,
    Reference,
    Token,
    TokenKind,
    parse_book,
    parse_chapter,
    parse_reference,
    parse_verse,
    tokenize,
)


class TestParseBook:
    """Tests for parse_book()."""

    def test_single_word(self):
        book, rest = parse_book(tokenize("john3"))
        assert book == "John"
        assert rest == (Token(TokenKind.NUMBER, "3"),)

    def test_abbreviation(self):
        assert parse_book(tokenize("ps 23"))[0] == "Psalms"
        assert parse_book(tokenize("gen 1"))[0] == "Genesis"
        assert parse_book(tokenize("rev 22"))[0] == "Revelation"

    def test_number_and_word_are_concatenated(self):
        book, rest = parse_book(tokenize("1 john 1"))
        assert book == "1 John"
        assert rest == (Token(TokenKind.NUMBER, "1"),)

    def test_multi_word_names(self):
        assert parse_book(tokenize("song of solomon 2"))[0] == "Song of Solomon"
        assert parse_book(tokenize("i john 1"))[0] == "1 John"
        assert parse_book(tokenize("ii cor 5"))[0] == "2 Corinthians"

    def test_unknown_word(self):
        with pytest.raises(BookNotFound) as exc:
            parse_book(tokenize("xyz 1"))
        assert "xyz" in exc.value.message

    def test_unknown_numbered_book(self):
        with pytest.raises(BookNotFound):
            parse_book(tokenize("4 john 1"))

    def test_number_without_word(self):
        with pytest.raises(BookNotFound):
            parse_book(tokenize("3 4"))

    def test_no_tokens(self):
        with pytest.raises(BookNotFound):
            parse_book(())


class TestParseChapterAndVerse:
    """Tests for parse_chapter() and parse_verse()."""

    def test_chapter(self):
        chapter, rest = parse_chapter(tokenize("16:1"))
        assert chapter == 16
        assert rest[0].kind is TokenKind.COLON

    def test_leading_zero_is_decimal(self):
        assert parse_chapter(tokenize("010"))[0] == 10

    def test_chapter_missing(self):
        with pytest.raises(InvalidChapter):
            parse_chapter(())

    def test_chapter_wrong_kind(self):
        with pytest.raises(InvalidChapter):
            parse_chapter(tokenize(":1"))

    def test_chapter_zero(self):
        with pytest.raises(InvalidChapter):
            parse_chapter(tokenize("0"))

    def test_verse_absent(self):
        tokens = tokenize("-4")
        assert parse_verse(tokens) == (None, tokens)
        assert parse_verse(()) == (None, ())

    def test_verse_present(self):
        assert parse_verse(tokenize(":16")) == (16, ())

    @pytest.mark.parametrize("text", [":", ":a", ":-", ":0"])
    def test_verse_invalid(self, text):
        with pytest.raises(InvalidVerse):
            parse_verse(tokenize(text))


class TestParseReference:
    """Tests for parse_reference()."""

    def test_verse_reference(self):
        ref, rest = parse_reference(tokenize("1john1:1"))
        assert ref == Reference("1 John", 1, 1)
        assert rest == ()

    def test_chapter_reference(self):
        ref, rest = parse_reference(tokenize("ps 23"))
        assert ref == Reference("Psalms", 23)
        assert ref.is_chapter
        assert rest == ()

    def test_leaves_continuation(self):
        ref, rest = parse_reference(tokenize("john 3:1-5"))
        assert ref == Reference("John", 3, 1)
        assert [t.kind for t in rest] == [TokenKind.DASH, TokenKind.NUMBER]

    def test_book_alone(self):
        with pytest.raises(InvalidChapter):
            parse_reference(tokenize("john"))

    def test_str(self):
        assert str(Reference("John", 3, 16)) == "John 3:16"
        assert str(Reference("Psalms", 23)) == "Psalms 23"
