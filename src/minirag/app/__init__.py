"""
File: src/minirag/app/__init__.py
FastAPI application module.
"""

from .dependencies import get_rag_service, get_retrieval_service
from .main import app

__all__ = ["app", "get_rag_service", "get_retrieval_service"]
