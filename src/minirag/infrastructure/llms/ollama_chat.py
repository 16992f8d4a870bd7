# src/minirag/infrastructure/llms/ollama_chat.py
import logging

import requests
from fastapi import HTTPException

from minirag.core.ports import GeneratorPort
from minirag.infrastructure.llms.prompts import build_prompt
from minirag.settings import settings

logger = logging.getLogger(__name__)


class OllamaGenerator(GeneratorPort):
    """Blocking call to Ollama's `/api/generate`, bounded by `timeout` seconds."""

    def __init__(
        self,
        *,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.model = model or settings.ollama_model
        self.base_url = (base_url or settings.ollama_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.ollama_request_timeout

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api/generate"

    def generate(self, question: str, context: str) -> str:
        payload = {
            "model": self.model,
            "prompt": build_prompt(question, context),
            "stream": False,  # single JSON object with the full answer
        }

        try:
            response = requests.post(self.api_url, json=payload, timeout=self.timeout)
            response.raise_for_status()  # HTTP codes 4xx/5xx
            response_data = response.json()
        except requests.exceptions.Timeout as err:
            raise HTTPException(
                504,
                detail=f"Ollama request timed out after {self.timeout}s: {self.api_url}",
            ) from err
        except requests.exceptions.ConnectionError as err:
            raise HTTPException(
                503, detail=f"Could not connect to Ollama server at {self.api_url}"
            ) from err
        except requests.exceptions.HTTPError as err:
            error_content = err.response.text if err.response is not None else str(err)
            status_code = err.response.status_code if err.response is not None else 500
            raise HTTPException(
                status_code, detail=f"Ollama API error: {error_content}"
            ) from err
        except requests.exceptions.JSONDecodeError as err:
            raise HTTPException(
                500,
                detail=f"Failed to decode Ollama JSON response. Original error: {str(err)}",
            ) from err

        # stream=False:
        # {"model": "...", "created_at": "...", "response": "...", "done": true, ...}
        answer = response_data.get("response") if isinstance(response_data, dict) else None
        if not isinstance(answer, str):
            logger.warning(f"Ollama response malformed. Data: {response_data}")
            raise HTTPException(
                500,
                detail="Ollama response malformed: 'response' key missing or not a string.",
            )
        return answer.strip()
