#!/usr/bin/env python3
"""
Command line interface for versegate.

Usage:
    versegate read John 3:16
    versegate read "1 John 1-2" --wrap --padding 2
    versegate read Genesis 50 --next
    versegate list --filter john
    versegate list --local
    versegate download --translation KJV --delay 250
    versegate parse "john 3:1-4:5"
    versegate serve --port 5056
"""

import argparse
import json
import logging
import sys

from .core.config import load_config
from .services.passage_formatter import render_booklist, render_passage
from .services.references import (
    CorpusError,
    CorpusStorage,
    ReferenceParseError,
    ReferenceService,
    download_translation,
    parse_query,
)

logger = logging.getLogger(__name__)


def print_progress(book: str, chapter: int, total: int):
    """Print per-book download progress bar."""
    bar_length = 30
    filled = int(bar_length * chapter / total)
    bar = "=" * filled + "-" * (bar_length - filled)
    print(f"\r    {book:<16} [{bar}] {chapter}/{total}", end="", flush=True)
    if chapter == total:
        print()


def cmd_read(args, storage: CorpusStorage) -> int:
    config = load_config(
        storage,
        translation=args.translation,
        padding=args.padding,
        wrap=args.wrap or None,
        width=args.width,
    )
    query = " ".join(args.query)

    service = ReferenceService(config, storage=storage)
    try:
        _, verses = service.lookup(query)
        if verses and (args.next or args.previous):
            target = service.next_chapter(verses) if args.next else service.previous_chapter(verses)
            query = target.to_search_string()
            verses = service.read(target)
    finally:
        service.close()

    for line in render_passage(
        verses,
        width=config.width,
        padding=config.padding,
        wrap=config.wrap,
        query=query,
    ):
        print(line)
    return 0


def cmd_list(args, storage: CorpusStorage) -> int:
    if args.local:
        for translation in storage.list_local():
            print(translation)
        return 0

    config = load_config(storage, translation=args.translation, padding=args.padding)
    service = ReferenceService(config, storage=storage)
    try:
        books = service.booklist()
    finally:
        service.close()

    for line in render_booklist(books, args.filter, config.padding):
        print(line)
    return 0


def cmd_download(args, storage: CorpusStorage) -> int:
    config = load_config(
        storage,
        translation=args.translation,
        download_delay_ms=args.delay,
    )
    print(f"Downloading {config.translation} to {storage.translation_path(config.translation)}")
    total = download_translation(
        config.translation,
        storage,
        delay_ms=config.download_delay_ms,
        progress_callback=None if args.quiet else print_progress,
    )
    print(f"Done: {total} records")
    return 0


def cmd_parse(args, storage: CorpusStorage) -> int:
    range_query = parse_query(" ".join(args.query))
    print(json.dumps(range_query.to_dict(), indent=2))
    return 0


def cmd_serve(args, storage: CorpusStorage) -> int:
    from .server import create_app

    app = create_app({"VERSEGATE_STORAGE": storage})
    app.run(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="versegate",
        description="Read the Bible in the terminal from Bible Gateway or a local copy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--home",
        default=None,
        help="Data directory (default: $VERSEGATE_HOME or ~/.versegate)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    read = sub.add_parser("read", help="Print a passage")
    read.add_argument("query", nargs="+", help='Reference, e.g. "John 3:16" or "Ps 23"')
    read.add_argument("-t", "--translation", help="Translation code (e.g., ESV, KJV)")
    read.add_argument("-p", "--padding", type=int, help="Horizontal padding in characters")
    read.add_argument("-w", "--wrap", action="store_true", help="Run verses together as paragraphs")
    read.add_argument("--width", type=int, help="Line width (default: $COLUMNS or 80)")
    nav = read.add_mutually_exclusive_group()
    nav.add_argument("-n", "--next", action="store_true", help="Show the chapter after the passage")
    nav.add_argument("-P", "--previous", action="store_true", help="Show the chapter before the passage")
    read.set_defaults(func=cmd_read)

    books = sub.add_parser("list", help="List books and their chapter counts")
    books.add_argument("-f", "--filter", default="", help="Filter by book name (case insensitive)")
    books.add_argument("-t", "--translation", help="Translation code")
    books.add_argument("-p", "--padding", type=int, help="Horizontal padding in characters")
    books.add_argument("-l", "--local", action="store_true", help="List downloaded translations instead")
    books.set_defaults(func=cmd_list)

    download = sub.add_parser("download", help="Download a translation for offline use")
    download.add_argument("-t", "--translation", help="Translation code")
    download.add_argument("-d", "--delay", type=int, help="Milliseconds between requests")
    download.add_argument("-q", "--quiet", action="store_true", help="No progress bar")
    download.set_defaults(func=cmd_download)

    parse = sub.add_parser("parse", help="Show how a reference is parsed")
    parse.add_argument("query", nargs="+")
    parse.set_defaults(func=cmd_parse)

    serve = sub.add_parser("serve", help="Run the JSON API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=5056)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        storage = CorpusStorage(args.home)
        return args.func(args, storage)
    except ReferenceParseError as e:
        print(f"Invalid reference: {e.message}", file=sys.stderr)
        return 1
    except (CorpusError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
