# tests/test_passage_formatter.py
"""
Tests for plain-text passage and booklist rendering.
"""

from versegate.services.passage_formatter import (
    render_booklist,
    render_passage,
    wrap_line,
)
from versegate.services.references import BookEntry, VerseRecord


JOHN_3 = [
    VerseRecord("John", 3, 1, 1, "Now there was a man.", "You Must Be Born Again"),
    VerseRecord("John", 3, 2, 1, "This man came by night."),
    VerseRecord("John", 3, 3, 1, "Jesus answered him."),
    VerseRecord("John", 3, 3, 2, "unless one is born again."),
]


def test_no_results():
    assert render_passage([], query="acts 99", padding=2) == ['  No results found for "acts 99"']


def test_verse_per_line():
    assert render_passage(JOHN_3) == [
        "You Must Be Born Again",
        " John: 3 ",
        "1 Now there was a man.",
        "2 This man came by night.",
        "3 Jesus answered him.",
        "    unless one is born again.",
    ]


def test_no_header_mid_chapter():
    lines = render_passage(JOHN_3[1:3])
    assert lines == ["2 This man came by night.", "3 Jesus answered him."]


def test_wrap_mode_joins_until_continuation():
    assert render_passage(JOHN_3, wrap=True) == [
        "You Must Be Born Again",
        " John: 3 ",
        "1 Now there was a man. 2 This man came by night. 3 Jesus answered him.",
        "    unless one is born again.",
    ]


def test_wrap_mode_breaks_at_title():
    verses = [
        VerseRecord("John", 3, 2, 1, "One."),
        VerseRecord("John", 3, 3, 1, "Two.", "Heading"),
        VerseRecord("John", 3, 4, 1, "Three."),
    ]
    assert render_passage(verses, wrap=True) == ["2 One.", "Heading", "3 Two. 4 Three."]


def test_padding_applies_to_every_line():
    lines = render_passage(JOHN_3[:2], padding=3)
    assert all(line.startswith("   ") for line in lines)


def test_long_verse_wraps_with_hanging_indent():
    verse = VerseRecord("John", 3, 2, 1, "word " * 10)
    lines = render_passage([verse], width=24)
    assert len(lines) > 1
    assert all(len(line) <= 24 for line in lines)
    assert all(line.startswith("    ") for line in lines[1:])


def test_wrap_line_keeps_long_words():
    assert wrap_line("a" * 30, 10) == ["a" * 30]
    assert wrap_line("", 10) == [""]


def test_render_booklist():
    books = [BookEntry("John", 21), BookEntry("1 John", 5), BookEntry("Jude", 1)]
    assert render_booklist(books) == ["John (21)", "1 John (5)", "Jude (1)"]
    assert render_booklist(books, name_filter="JOHN", padding=1) == [" John (21)", " 1 John (5)"]
