# versegate/services/references/downloader.py
"""
One-time import of a translation from Bible Gateway into a local
SQLite corpus.

Chapters are fetched one at a time in booklist order and appended, so
row ids follow canonical reading order.
"""

import logging
import time
from typing import Callable, Optional

from .corpus import RemoteCorpusError
from .local_corpus import LocalCorpus
from .range_resolver import Point
from .remote_corpus import RemoteCorpus
from .storage import CorpusStorage

logger = logging.getLogger(__name__)


def download_translation(
    translation: str,
    storage: CorpusStorage,
    delay_ms: Optional[int] = None,
    remote: Optional[RemoteCorpus] = None,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> int:
    """
    Download every chapter of a translation into storage.

    Any existing local file for the translation is replaced.

    Args:
        translation: Translation code (e.g., "ESV")
        storage: Target data directory
        delay_ms: Pause between chapter requests. Uses config if None.
        remote: Remote corpus to read from (defaults to Bible Gateway)
        progress_callback: Optional callback(book, chapter, total_chapters)

    Returns:
        Number of verse records written

    Raises:
        RemoteCorpusError: If the booklist is empty or a fetch fails
    """
    translation = translation.upper()
    remote = remote or RemoteCorpus(translation)
    if delay_ms is None:
        delay_ms = int(storage.get_config().get("download_delay_ms", 100))

    books = remote.booklist()
    if not books:
        raise RemoteCorpusError(f"No books found for translation: {translation}")

    db_path = storage.translation_path(translation)
    if db_path.exists():
        logger.info(f"Removing existing {db_path}")
        db_path.unlink()

    total = 0
    completed = False
    try:
        with LocalCorpus(db_path, translation, create=True) as local:
            for book in books:
                logger.info(f"Downloading {book.name}...")

                for chapter in range(1, book.chapters + 1):
                    verses = remote.query(Point(book.name, chapter))
                    for verse in verses:
                        verse.book = book.name
                    total += local.insert(verses)

                    if progress_callback:
                        progress_callback(book.name, chapter, book.chapters)

                    time.sleep(delay_ms / 1000)
        completed = True
    finally:
        if not completed:
            logger.warning(f"Download of {translation} aborted, removing {db_path}")
            db_path.unlink(missing_ok=True)

    logger.info(f"Downloaded {translation}: {total} records to {db_path}")
    return total
