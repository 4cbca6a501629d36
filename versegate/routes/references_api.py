# versegate/routes/references_api.py
"""
API endpoints for scripture lookup.

Provides access to:
- Passage lookup against the local or remote corpus
- Reference parsing without a corpus
- Book lists with chapter counts
"""

import logging

from flask import Blueprint, current_app, request, jsonify

from ..core.config import load_config
from ..services.references import (
    CorpusError,
    CorpusStorage,
    ReferenceParseError,
    ReferenceService,
    parse_query,
)
from ..utils.errors import error_response, missing_field, not_found, upstream_error

logger = logging.getLogger(__name__)

references_bp = Blueprint("references_api", __name__, url_prefix="/api/references")


def get_storage() -> CorpusStorage:
    """Storage configured on the app, or the default data directory."""
    storage = current_app.config.get("VERSEGATE_STORAGE")
    if storage is None:
        storage = CorpusStorage(current_app.config.get("VERSEGATE_HOME"))
        current_app.config["VERSEGATE_STORAGE"] = storage
    return storage


def get_service(translation: str = None) -> ReferenceService:
    """Create a ReferenceService for one request."""
    storage = get_storage()
    config = load_config(storage, translation=translation)
    return ReferenceService(config, storage=storage)


# =============================================================================
# Lookup Endpoints
# =============================================================================

@references_bp.get("/lookup")
def lookup_reference():
    """
    Look up a scripture passage.

    Query params:
        q: Reference string (required) e.g., "John 3:16-18"
        translation: Translation code (optional) e.g., "KJV"

    Returns:
        {
            "query": "John 3:16-18",
            "translation": "ESV",
            "range": {"type": "span", "start": {...}, "end": {...}},
            "verses": [{"book": "John", "chapter": 3, "number": 16, ...}]
        }
    """
    query = request.args.get("q")
    if not query:
        return missing_field("q")

    try:
        service = get_service(request.args.get("translation"))
    except CorpusError as e:
        return upstream_error(detail=str(e))

    try:
        range_query, verses = service.lookup(query)
    except ReferenceParseError as e:
        return error_response(e.kind, 400, e.message, query=query)
    except CorpusError as e:
        logger.error(f"Lookup failed for {query!r}: {e}")
        return upstream_error(detail=str(e))
    finally:
        service.close()

    if not verses:
        return not_found("passage", f'No results found for "{query}"')

    return jsonify({
        "query": query,
        "translation": service.corpus.translation,
        "range": range_query.to_dict(),
        "verses": [v.to_dict() for v in verses],
    })


@references_bp.get("/parse")
def parse_reference():
    """
    Parse a reference without fetching text.

    Query params:
        q: Reference string (required)

    Returns:
        {"query": "1 John 1:1", "range": {"type": "point", ...}}
    """
    query = request.args.get("q")
    if not query:
        return missing_field("q")

    try:
        range_query = parse_query(query)
    except ReferenceParseError as e:
        return error_response(e.kind, 400, e.message, query=query)

    return jsonify({
        "query": query,
        "range": range_query.to_dict(),
        "search": range_query.to_search_string(),
    })


@references_bp.get("/books")
def list_books():
    """
    List books and chapter counts for a translation.

    Query params:
        translation: Translation code (optional)
        filter: Case-insensitive substring of the book name (optional)
    """
    name_filter = request.args.get("filter", "").lower()

    try:
        service = get_service(request.args.get("translation"))
        try:
            books = service.booklist()
        finally:
            service.close()
    except CorpusError as e:
        return upstream_error(detail=str(e))

    return jsonify({
        "translation": service.corpus.translation,
        "books": [b.to_dict() for b in books if name_filter in b.name.lower()],
    })
