# src/minirag/app/api_router.py

"""
FastAPI router for the application endpoints.
"""

from typing import Sequence

from fastapi import APIRouter, Depends, status

from minirag.app.dependencies import get_rag_service, get_retrieval_service
from minirag.core.domain.entities import Document
from minirag.core.services.rag import RagService
from minirag.core.services.retrieval import RetrievalService
from minirag.models import (
    AddDocumentRequest,
    AddDocumentResponse,
    AskRequest,
    AskResponse,
    DocumentOut,
    HealthResponse,
    QueryResult,
    RetrieveRequest,
    RetrieveResponse,
)

router = APIRouter()


def _to_results(docs: Sequence[Document], scores: Sequence[float]) -> list[QueryResult]:
    return [
        QueryResult(document=DocumentOut(id=doc.id, content=doc.content), score=score)
        for doc, score in zip(docs, scores)
    ]


# ---------------------- API Endpoints ---------------------- #


@router.post(
    "/documents",
    response_model=AddDocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_document(
    request: AddDocumentRequest,
    service: RetrievalService = Depends(get_retrieval_service),
) -> AddDocumentResponse:
    service.add_document(Document(id=request.id, content=request.content))
    return AddDocumentResponse(id=request.id, documents=service.document_count())


@router.post("/retrieve", response_model=RetrieveResponse)
def retrieve(
    request: RetrieveRequest,
    service: RetrievalService = Depends(get_retrieval_service),
) -> RetrieveResponse:
    docs, scores = service.retrieve(request.query, request.k)
    return RetrieveResponse(results=_to_results(docs, scores))


@router.post("/ask", response_model=AskResponse)
def ask(request: AskRequest, service: RagService = Depends(get_rag_service)) -> AskResponse:
    rag_result = service.ask(question=request.question, top_k=request.k)
    return AskResponse(
        answer=rag_result["answer"],
        sources=_to_results(rag_result["docs"], rag_result["scores"]),
    )


@router.get("/health", response_model=HealthResponse)
def health(
    service: RetrievalService = Depends(get_retrieval_service),
) -> HealthResponse:
    return HealthResponse(status="ok", documents=service.document_count())
