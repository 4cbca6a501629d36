# versegate/services/passage_formatter.py
"""
Plain-text rendering of verse records for the terminal.

Each verse starts on its own line with its number, continuation parts
are indented, and long lines are word-wrapped with a hanging indent. In
wrap mode consecutive verses run together as one paragraph until a
section title, a continuation part or a new chapter breaks it.
"""

import textwrap
from typing import Iterable, Optional

from .references.corpus import BookEntry, VerseRecord

INDENT = "    "
MIN_WIDTH = 20


def chapter_header(verse: VerseRecord) -> str:
    return f" {verse.book}: {verse.chapter} "


def _starts_chapter(verse: VerseRecord) -> bool:
    return verse.number == 1 and verse.part == 1


def _verse_line(verse: VerseRecord) -> str:
    if verse.part > 1:
        return INDENT + verse.text
    return f"{verse.number} {verse.text}"


def wrap_line(line: str, width: int, indentation: str = "") -> list[str]:
    """Split a line into chunks no wider than width (words are never broken)."""
    chunks = textwrap.wrap(
        line,
        width=width,
        subsequent_indent=indentation,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return chunks or [line]


def render_passage(
    verses: list[VerseRecord],
    width: int = 80,
    padding: int = 0,
    wrap: bool = False,
    query: Optional[str] = None,
) -> list[str]:
    """
    Lay out verses as terminal lines.

    Args:
        verses: Records in canonical order
        width: Terminal width in columns
        padding: Blank columns on each side
        wrap: Join consecutive verses into paragraphs
        query: Original query, used in the "no results" message

    Returns:
        List of lines, each already left-padded
    """
    pad = " " * padding
    usable = max(width - 2 * padding, MIN_WIDTH)

    if not verses:
        return [f'{pad}No results found for "{query or ""}"']

    lines = []
    indentation = "" if wrap else INDENT
    i = 0
    while i < len(verses):
        current = verses[i]
        if current.has_title:
            lines.append(current.title)
        if _starts_chapter(current):
            lines.append(chapter_header(current))

        line = _verse_line(current)

        if wrap and current.part == 1:
            while i + 1 < len(verses):
                following = verses[i + 1]
                if following.has_title or following.part > 1 or _starts_chapter(following):
                    break
                line = f"{line} {_verse_line(following)}"
                i += 1

        lines.extend(wrap_line(line, usable, indentation))
        i += 1

    return [pad + line for line in lines]


def render_booklist(
    books: Iterable[BookEntry],
    name_filter: str = "",
    padding: int = 0,
) -> list[str]:
    """Render "Name (chapters)" rows, keeping names that contain name_filter."""
    pad = " " * padding
    needle = name_filter.lower()
    return [f"{pad}{book}" for book in books if needle in book.name.lower()]
