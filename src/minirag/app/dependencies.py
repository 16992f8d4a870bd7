"""FastAPI dependencies for the application."""

from fastapi import Request

from minirag.core.services.rag import RagService
from minirag.core.services.retrieval import RetrievalService


def get_retrieval_service(request: Request) -> RetrievalService:
    """Return the :class:`RetrievalService` built at startup."""
    return request.app.state.retrieval_service


def get_rag_service(request: Request) -> RagService:
    """Return the :class:`RagService` built at startup."""
    return request.app.state.rag_service


__all__ = ["get_rag_service", "get_retrieval_service"]
