# tests/test_downloader.py
"""
Tests for download_translation with an in-memory remote corpus.
"""

from unittest.mock import patch

import pytest
import requests

from versegate.services.references import (
    BookEntry,
    Corpus,
    LocalCorpus,
    RemoteCorpus,
    RemoteCorpusError,
    VerseRecord,
    download_translation,
    parse_query,
)


class FakeRemote(Corpus):
    translation = "TEST"
    source = "remote"

    def __init__(self, books, chapters, fail_on=None, error=None):
        self.books = books
        self.chapters = chapters
        self.fail_on = fail_on
        self.error = error or RemoteCorpusError("Bible Gateway unavailable")
        self.requested = []

    def booklist(self):
        return self.books

    def query(self, range_query):
        key = (range_query.book, range_query.chapter)
        self.requested.append(key)
        if key == self.fail_on:
            raise self.error
        # Remote pages may spell the book differently
        return [
            VerseRecord(f"{range_query.book} (alt)", range_query.chapter, n, 1, f"verse {n}")
            for n in self.chapters.get(key, [])
        ]


BOOKS = [BookEntry("Ruth", 2), BookEntry("Jude", 1)]
CHAPTERS = {
    ("Ruth", 1): [1, 2],
    ("Ruth", 2): [1],
    ("Jude", 1): [1, 2, 3],
}


def test_download_writes_every_chapter(storage):
    remote = FakeRemote(BOOKS, CHAPTERS)
    progress = []

    total = download_translation(
        "test", storage, delay_ms=0, remote=remote,
        progress_callback=lambda book, chapter, count: progress.append((book, chapter, count)),
    )

    assert total == 6
    assert remote.requested == [("Ruth", 1), ("Ruth", 2), ("Jude", 1)]
    assert progress == [("Ruth", 1, 2), ("Ruth", 2, 2), ("Jude", 1, 1)]
    assert storage.has_local("TEST")

    with LocalCorpus(storage.translation_path("TEST"), "TEST") as local:
        assert local.booklist() == BOOKS
        verses = local.query(parse_query("ruth 1:2-jude 1:1"))
        assert [(v.book, v.chapter, v.number) for v in verses] == [
            ("Ruth", 1, 2),
            ("Ruth", 2, 1),
            ("Jude", 1, 1),
        ]


def test_download_replaces_existing_file(storage):
    download_translation("TEST", storage, delay_ms=0, remote=FakeRemote(BOOKS, CHAPTERS))
    total = download_translation(
        "TEST", storage, delay_ms=0, remote=FakeRemote([BookEntry("Jude", 1)], CHAPTERS)
    )

    assert total == 3
    with LocalCorpus(storage.translation_path("TEST"), "TEST") as local:
        assert local.booklist() == [BookEntry("Jude", 1)]


def test_failed_download_leaves_nothing(storage):
    remote = FakeRemote(BOOKS, CHAPTERS, fail_on=("Ruth", 2))

    with pytest.raises(RemoteCorpusError):
        download_translation("TEST", storage, delay_ms=0, remote=remote)
    assert not storage.has_local("TEST")


def test_empty_booklist(storage):
    with pytest.raises(RemoteCorpusError):
        download_translation("TEST", storage, delay_ms=0, remote=FakeRemote([], {}))
    assert not storage.has_local("TEST")


def test_interrupted_download_leaves_nothing(storage):
    remote = FakeRemote(BOOKS, CHAPTERS, fail_on=("Ruth", 2), error=KeyboardInterrupt())

    with pytest.raises(KeyboardInterrupt):
        download_translation("TEST", storage, delay_ms=0, remote=remote)
    assert not storage.has_local("TEST")


@patch("versegate.utils.http_retry.requests.get")
def test_broken_transfer_leaves_nothing(mock_get, storage):
    remote = RemoteCorpus("TEST", base_url="https://bg.example")
    mock_get.side_effect = requests.exceptions.ChunkedEncodingError("connection broken")

    with patch.object(RemoteCorpus, "booklist", return_value=BOOKS):
        with pytest.raises(RemoteCorpusError):
            download_translation("TEST", storage, delay_ms=0, remote=remote)
    assert not storage.has_local("TEST")
