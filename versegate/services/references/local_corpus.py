# versegate/services/references/local_corpus.py
"""
Verse corpus backed by a downloaded SQLite file.

Rows are inserted in canonical reading order, so the autoincrement id is
the sequence position used to bound spans.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Iterable

from .corpus import BookEntry, Corpus, LocalCorpusError, VerseRecord
from .range_resolver import Point, RangeQuery, Span
from .reference_parser import Reference

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS verses (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    book TEXT NOT NULL,
    chapter INTEGER NOT NULL,
    number INTEGER NOT NULL,
    part INTEGER NOT NULL DEFAULT 1,
    text TEXT NOT NULL,
    title TEXT
);
CREATE INDEX IF NOT EXISTS idx_verses_ref ON verses (book, chapter, number);
"""

_COLUMNS = "book, chapter, number, part, text, title"


def _reference_filter(ref: Reference) -> tuple[str, list]:
    """WHERE fragment matching a chapter or a single verse."""
    clause = "book = ? AND chapter = ?"
    params = [ref.book, ref.chapter]
    if ref.verse is not None:
        clause += " AND number = ?"
        params.append(ref.verse)
    return clause, params


class LocalCorpus(Corpus):
    """
    Reads verses from {base}/{TRANSLATION}.sql.

    Usage:
        with LocalCorpus("/home/me/.versegate/ESV.sql", "ESV") as corpus:
            verses = corpus.query(parse_query("John 3:16"))
    """

    source = "local"

    def __init__(self, db_path, translation: str = "", create: bool = False):
        self.db_path = Path(db_path)
        self.translation = translation.upper()

        if not create and not self.db_path.is_file():
            raise LocalCorpusError(f"No local database at {self.db_path}")

        try:
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
            if create:
                self._conn.executescript(SCHEMA)
        except sqlite3.Error as e:
            raise LocalCorpusError(f"Failed to open {self.db_path}: {e}") from e

    def _fetch(self, sql: str, params: list) -> list[sqlite3.Row]:
        try:
            return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            logger.error(f"Local query failed: {e}")
            raise LocalCorpusError(f"Local query failed: {e}") from e

    def _bound(self, ref: Reference, last: bool):
        """First (or last) id covered by a reference, or None."""
        clause, params = _reference_filter(ref)
        agg = "MAX" if last else "MIN"
        row = self._fetch(f"SELECT {agg}(id) AS id FROM verses WHERE {clause}", params)
        return row[0]["id"] if row else None

    def query(self, range_query: RangeQuery) -> list[VerseRecord]:
        if isinstance(range_query, Point):
            clause, params = _reference_filter(range_query.reference)
            sql = f"SELECT {_COLUMNS} FROM verses WHERE {clause} ORDER BY id"
        elif isinstance(range_query, Span):
            first = self._bound(range_query.start, last=False)
            last = self._bound(range_query.end, last=True)
            if first is None or last is None:
                logger.debug(f"Span bound not found for {range_query}")
                return []
            sql = f"SELECT {_COLUMNS} FROM verses WHERE id >= ? AND id <= ? ORDER BY id"
            params = [first, last]
        else:
            raise TypeError(f"Unsupported range query: {range_query!r}")

        rows = self._fetch(sql, params)
        return [VerseRecord(**dict(row)) for row in rows]

    def booklist(self) -> list[BookEntry]:
        rows = self._fetch(
            "SELECT book AS name, MAX(chapter) AS chapters FROM verses "
            "GROUP BY book ORDER BY MIN(id)",
            [],
        )
        return [BookEntry(name=row["name"], chapters=row["chapters"]) for row in rows]

    def insert(self, verses: Iterable[VerseRecord]) -> int:
        """
        Append records in the given order.

        Returns:
            Number of rows written
        """
        rows = [
            (v.book, v.chapter, v.number, v.part, v.text, v.title)
            for v in verses
        ]
        try:
            with self._conn:
                self._conn.executemany(
                    f"INSERT INTO verses ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                    rows,
                )
        except sqlite3.Error as e:
            raise LocalCorpusError(f"Insert failed: {e}") from e
        return len(rows)

    def close(self):
        self._conn.close()
