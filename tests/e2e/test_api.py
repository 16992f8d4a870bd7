# tests/e2e/test_api.py
import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from minirag.app.dependencies import get_rag_service, get_retrieval_service
from minirag.app.main import app
from minirag.core.domain.entities import Document
from minirag.core.services.rag import RagService


class DummyGenerator:
    def generate(self, question, context):
        return f"eco:{question}|{context}"


class FailingGenerator:
    def generate(self, question, context):
        raise HTTPException(503, detail="Could not connect to Ollama server")


@pytest.fixture
def client(retrieval_service):
    rag = RagService(retrieval_service, DummyGenerator())
    app.dependency_overrides[get_retrieval_service] = lambda: retrieval_service
    app.dependency_overrides[get_rag_service] = lambda: rag
    yield TestClient(app)
    app.dependency_overrides = {}


# ---------- tests -----------------------------------------------------------
def test_add_document_endpoint(client):
    resp = client.post("/api/documents", json={"id": "1", "content": "Swift language"})
    assert resp.status_code == 201
    assert resp.json() == {"id": "1", "documents": 1}

    resp = client.post("/api/documents", json={"id": "1", "content": "duplicate id"})
    assert resp.json() == {"id": "1", "documents": 2}


def test_retrieve_endpoint(client):
    client.post("/api/documents", json={"id": "1", "content": "Swift is a programming language"})
    client.post("/api/documents", json={"id": "2", "content": "Python is great for data science"})

    resp = client.post("/api/retrieve", json={"query": "What language is good for apps?", "k": 1})
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert len(results) == 1
    assert results[0]["document"] == {"id": "1", "content": "Swift is a programming language"}
    assert 0.0 < results[0]["score"] <= 1.0


def test_retrieve_endpoint_defaults_and_limits(client):
    for i in range(5):
        client.post("/api/documents", json={"id": str(i), "content": "data"})
    assert len(client.post("/api/retrieve", json={"query": "data"}).json()["results"]) == 3
    assert client.post("/api/retrieve", json={"query": "data", "k": 0}).json() == {"results": []}
    assert client.post("/api/retrieve", json={"query": "data", "k": -1}).status_code == 422


def test_ask_endpoint(client):
    client.post("/api/documents", json={"id": "1", "content": "Swift language"})
    resp = client.post("/api/ask", json={"question": "language", "k": 2})
    assert resp.status_code == 200
    data = resp.json()
    assert data["answer"] == "eco:language|Swift language"
    assert [s["document"]["id"] for s in data["sources"]] == ["1"]


def test_ask_endpoint_empty_store(client):
    resp = client.post("/api/ask", json={"question": "hola", "k": 2})
    assert resp.status_code == 200
    assert resp.json()["sources"] == []


def test_ask_endpoint_generator_failure(retrieval_service):
    retrieval_service.add_document(Document(id="1", content="Swift language"))
    app.dependency_overrides[get_rag_service] = lambda: RagService(
        retrieval_service, FailingGenerator()
    )
    try:
        resp = TestClient(app).post("/api/ask", json={"question": "language"})
    finally:
        app.dependency_overrides = {}
    assert resp.status_code == 503
    assert "Could not connect" in resp.json()["detail"]


def test_health_endpoint(client):
    client.post("/api/documents", json={"id": "1", "content": "data"})
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "documents": 1}


def test_ask_endpoint_zero_k_with_documents(client):
    client.post("/api/documents", json={"id": "1", "content": "language"})
    resp = client.post("/api/ask", json={"question": "language", "k": 0})
    assert resp.status_code == 200
    data = resp.json()
    assert data["sources"] == []
    assert "No documents are indexed" not in data["answer"]


def test_retrieve_endpoint_accepts_large_k(client):
    for i in range(3):
        client.post("/api/documents", json={"id": str(i), "content": "data"})
    resp = client.post("/api/retrieve", json={"query": "data", "k": 1000})
    assert resp.status_code == 200
    assert len(resp.json()["results"]) == 3
    assert client.post("/api/ask", json={"question": "data", "k": 50}).status_code == 200
