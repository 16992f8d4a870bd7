"""
File: src/minirag/settings.py
Global configuration loaded via environment variables.
Use a `.env` file or export vars before running.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # RUNTIME
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"
    # RETRIEVAL
    retrieval_top_k: int = Field(3, ge=0)
    embedding_backend: str = Field(
        "word_vectors", pattern="^(word_vectors|sentence_transformers)$"
    )
    word_vectors_path: str = "data/word_vectors.txt"  # GloVe / word2vec text format
    # SENTENCE-TRANSFORMERS
    st_embedding_model: str = "all-MiniLM-L6-v2"
    # OLLAMA
    ollama_enabled: bool = True
    ollama_model: str = "llama3.2:3b"
    ollama_base_url: str = "http://localhost:11434"
    ollama_request_timeout: int = 90  # Timeout in seconds
    # OPENAI
    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_temperature: float = 0.2
    openai_top_p: float = 1.0
    openai_max_tokens: int = 256
    # SEED DATA
    seed_documents_path: str | None = None  # JSON list of {"id", "content"}

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
