# src/minirag/models.py
from typing import List

from pydantic import BaseModel, Field

from minirag.settings import settings


class DocumentOut(BaseModel):
    id: str
    content: str


class QueryResult(BaseModel):
    document: DocumentOut
    score: float


# API
class AddDocumentRequest(BaseModel):
    """Request schema for the `/documents` endpoint."""

    id: str = Field(..., description="Caller-supplied identifier, not required to be unique")
    content: str = Field(..., description="Document text")


class AddDocumentResponse(BaseModel):
    id: str
    documents: int


class RetrieveRequest(BaseModel):
    query: str = Field(..., description="Search query")
    k: int = Field(
        default_factory=lambda: settings.retrieval_top_k,
        ge=0,
        description="Number of documents to retrieve",
    )


class RetrieveResponse(BaseModel):
    results: List[QueryResult]


class AskRequest(BaseModel):
    """Request schema for the `/ask` endpoint."""

    question: str = Field(..., description="User's question")
    k: int = Field(
        default_factory=lambda: settings.retrieval_top_k,
        ge=0,
        description="Number of documents to retrieve",
    )


class AskResponse(BaseModel):
    answer: str
    sources: List[QueryResult]


class HealthResponse(BaseModel):
    status: str
    documents: int
