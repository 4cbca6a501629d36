# tests/test_references_api.py
"""
Tests for the /api/references endpoints.
"""

from unittest.mock import patch

import pytest

from versegate.server import create_app
from versegate.services.references import RemoteCorpusError


@pytest.fixture
def client(esv_storage):
    app = create_app({"TESTING": True, "VERSEGATE_STORAGE": esv_storage})
    return app.test_client()


class TestLookup:

    def test_lookup_passage(self, client):
        response = client.get("/api/references/lookup", query_string={"q": "John 3:1-3"})
        assert response.status_code == 200

        data = response.get_json()
        assert data["query"] == "John 3:1-3"
        assert data["translation"] == "ESV"
        assert data["range"]["type"] == "span"
        assert [v["number"] for v in data["verses"]] == [1, 2, 3]
        assert data["verses"][0]["title"] == "You Must Be Born Again"

    def test_missing_query(self, client):
        response = client.get("/api/references/lookup")
        assert response.status_code == 400
        assert response.get_json()["error"] == "q_required"

    def test_parse_error_kind(self, client):
        response = client.get("/api/references/lookup", query_string={"q": "john 3-"})
        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "invalid_range_continuation"
        assert data["query"] == "john 3-"

    def test_no_results(self, client):
        response = client.get("/api/references/lookup", query_string={"q": "acts 2"})
        assert response.status_code == 404
        assert response.get_json()["error"] == "not_found"

    @patch("versegate.services.references.local_corpus.LocalCorpus.query")
    def test_corpus_failure(self, mock_query, client):
        mock_query.side_effect = RemoteCorpusError("Bible Gateway unavailable")
        response = client.get("/api/references/lookup", query_string={"q": "john 3"})
        assert response.status_code == 502
        assert response.get_json()["error"] == "upstream_error"


def test_parse_endpoint(client):
    response = client.get("/api/references/parse", query_string={"q": "ps 23"})
    assert response.status_code == 200
    assert response.get_json() == {
        "query": "ps 23",
        "range": {"type": "point", "book": "Psalms", "chapter": 23, "verse": None},
        "search": "Psalms 23",
    }


def test_parse_endpoint_rejects_bad_book(client):
    response = client.get("/api/references/parse", query_string={"q": "nope 1"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "book_not_found"


def test_books(client):
    response = client.get("/api/references/books", query_string={"filter": "JOHN"})
    assert response.status_code == 200
    assert response.get_json() == {
        "translation": "ESV",
        "books": [
            {"name": "John", "chapters": 4},
            {"name": "1 John", "chapters": 3},
        ],
    }
