"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from splitter.main import app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_chunk_with_overrides(client: TestClient) -> None:
    body = {
        "documents": [{"content": "hello world this is a test", "metadata": {"id": "d1", "source": "x"}}],
        "chunk_size": 10,
        "overlap": 0,
    }

    response = client.post("/chunk", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "success"
    assert data["documents_chunked"] == 1
    assert data["total_chunks"] == 3
    assert [c["chunk_text"] for c in data["chunks"]] == ["hello", "world this", "is a test"]
    assert all(c["document_id"] == "d1" for c in data["chunks"])
    assert data["chunks"][0]["metadata"] == {"id": "d1", "source": "x"}


def test_chunk_with_default_profile(client: TestClient) -> None:
    response = client.post("/chunk", json={"documents": [{"content": "short"}]})

    assert response.status_code == 200
    assert [c["chunk_text"] for c in response.json()["chunks"]] == ["short"]


def test_chunk_with_separator_override(client: TestClient) -> None:
    body = {"documents": [{"content": "abcdefg"}], "chunk_size": 3, "overlap": 0, "separators": ["\n\n"]}

    response = client.post("/chunk", json=body)

    assert [c["chunk_text"] for c in response.json()["chunks"]] == ["abc", "def", "g"]


def test_invalid_configuration(client: TestClient) -> None:
    body = {"documents": [{"content": "text"}], "chunk_size": 10, "overlap": 10}

    response = client.post("/chunk", json=body)

    assert response.status_code == 422
    assert response.json() == {"detail": "invalid chunk configuration"}


def test_unknown_profile(client: TestClient) -> None:
    response = client.post("/chunk", json={"documents": [{"content": "text"}], "profile": "nope"})

    assert response.status_code == 404


def test_requires_documents(client: TestClient) -> None:
    response = client.post("/chunk", json={"documents": []})

    assert response.status_code == 422


def test_too_many_documents(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_DOCUMENTS_PER_REQUEST", "1")

    response = client.post("/chunk", json={"documents": [{"content": "a"}, {"content": "b"}]})

    assert response.status_code == 413


def test_list_profiles(client: TestClient) -> None:
    response = client.get("/chunk/profiles")

    assert response.status_code == 200
    data = response.json()
    assert data["active"] == "default"
    assert data["profiles"]["tokens"]["length_function"] == "tokens"
