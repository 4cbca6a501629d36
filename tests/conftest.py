# tests/conftest.py
"""
Shared fixtures: a temporary data directory with a small ESV corpus.
"""

import pytest

from versegate.services.references import CorpusStorage, LocalCorpus, VerseRecord


SAMPLE_VERSES = [
    VerseRecord("Genesis", 1, 1, 1, "In the beginning, God created the heavens and the earth.", "The Creation of the World"),
    VerseRecord("Genesis", 1, 2, 1, "The earth was without form and void."),
    VerseRecord("Genesis", 2, 1, 1, "Thus the heavens and the earth were finished."),
    VerseRecord("John", 3, 1, 1, "Now there was a man of the Pharisees named Nicodemus.", "You Must Be Born Again"),
    VerseRecord("John", 3, 2, 1, "This man came to Jesus by night."),
    VerseRecord("John", 3, 3, 1, "Jesus answered him."),
    VerseRecord("John", 3, 16, 1, "For God so loved the world,", "For God So Loved the World"),
    VerseRecord("John", 3, 16, 2, "that he gave his only Son."),
    VerseRecord("John", 4, 1, 1, "Now when Jesus learned that the Pharisees had heard."),
    VerseRecord("John", 4, 5, 1, "So he came to a town of Samaria called Sychar."),
    VerseRecord("John", 4, 6, 1, "Jacob's well was there."),
    VerseRecord("1 John", 1, 1, 1, "That which was from the beginning."),
    VerseRecord("1 John", 1, 2, 1, "The life was made manifest."),
    VerseRecord("1 John", 2, 1, 1, "My little children, I am writing these things to you."),
    VerseRecord("1 John", 2, 2, 1, "He is the propitiation for our sins."),
    VerseRecord("1 John", 3, 1, 1, "See what kind of love the Father has given to us."),
    VerseRecord("Revelation", 22, 21, 1, "The grace of the Lord Jesus be with all. Amen."),
]


@pytest.fixture
def storage(tmp_path, monkeypatch):
    """Empty data directory."""
    monkeypatch.delenv("VERSEGATE_TRANSLATION", raising=False)
    monkeypatch.delenv("VERSEGATE_HOME", raising=False)
    monkeypatch.setenv("COLUMNS", "100")
    return CorpusStorage(str(tmp_path / "versegate"))


@pytest.fixture
def esv_storage(storage):
    """Data directory with a downloaded ESV sample."""
    corpus = LocalCorpus(storage.translation_path("ESV"), "ESV", create=True)
    corpus.insert(SAMPLE_VERSES)
    corpus.close()
    return storage


@pytest.fixture
def local_corpus(esv_storage):
    corpus = LocalCorpus(esv_storage.translation_path("ESV"), "ESV")
    yield corpus
    corpus.close()
