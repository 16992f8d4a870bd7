# src/minirag/app/main.py
import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from minirag.app.api_router import router
from minirag.app.factory import build_services
from minirag.settings import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)  # logger after de basicConfig


# --- Lifespan Context Manager ---
@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    logger.info("Lifespan startup: Initializing retrieval and RAG services...")
    retrieval, rag = build_services()
    app_instance.state.retrieval_service = retrieval
    app_instance.state.rag_service = rag
    logger.info("Lifespan startup: Services initialized.")
    yield
    logger.info("Lifespan shutdown: Releasing services...")
    app_instance.state.retrieval_service = None
    app_instance.state.rag_service = None


app = FastAPI(title="Mini RAG", lifespan=lifespan)


app.include_router(router, prefix="/api")


if __name__ == "__main__":
    # default: host="0.0.0.0", port=8000
    uvicorn.run(
        "minirag.app.main:app", host=settings.app_host, port=settings.app_port, reload=True
    )
