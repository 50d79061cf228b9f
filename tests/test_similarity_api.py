from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def test_post_similarity_ranks_expected_document():
    payload = {
        "documents": [
            "Python typing with hints.",
            "Recipes and ingredients for delicious meals.",
            "Typing in Python with mypy and type hints.",
        ],
    }
    r = client.post("/similarity", json=payload)
    assert r.status_code == 200
    data = r.json()
    assert data["most_similar"] == 2
    assert data["scores"][1] == 0.0
    assert set(data["idf"]) == {"python", "typing", "with", "hints"}


def test_post_similarity_single_document_returns_null():
    r = client.post("/similarity", json={"documents": ["alone"]})
    assert r.status_code == 200
    assert r.json()["most_similar"] is None


def test_post_similarity_empty_corpus_is_rejected():
    r = client.post("/similarity", json={"documents": []})
    assert r.status_code == 422
    assert "reference document" in r.json()["detail"]


def test_post_similarity_strict_empty(monkeypatch):
    payload = {"documents": ["an apple", "!!!"], "strict_empty": True}
    r = client.post("/similarity", json=payload)
    assert r.status_code == 422
    assert r.json()["detail"] == "document 1 has no words"

    monkeypatch.setenv("DOCSIM_STRICT_EMPTY", "1")
    r = client.post("/similarity", json={"documents": ["an apple", "!!!"]})
    assert r.status_code == 422
    r = client.post("/similarity", json={"documents": ["an apple", "!!!"], "strict_empty": False})
    assert r.status_code == 200
    assert r.json()["most_similar"] == 1
