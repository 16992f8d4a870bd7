"""OpenAI chat-completion generator (API v1).

* Instantiated with `OpenAI(api_key=...)`.
* Any client error becomes `HTTPException 502`.
"""
from __future__ import annotations

from fastapi import HTTPException
from openai import OpenAI  # type: ignore

from minirag.core.ports import GeneratorPort
from minirag.infrastructure.llms.prompts import build_prompt
from minirag.settings import settings

__all__ = ["OpenAIGenerator"]


class OpenAIGenerator(GeneratorPort):
    def __init__(
        self,
        *,
        model: str | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> None:
        self.model = model or settings.openai_model
        self.temperature = (
            temperature if temperature is not None else settings.openai_temperature
        )
        client_kwargs = {"api_key": settings.openai_api_key}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self.client = OpenAI(**client_kwargs)

    def generate(self, question: str, context: str) -> str:
        prompt = build_prompt(question, context)
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                top_p=settings.openai_top_p,
                max_tokens=settings.openai_max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as err:
            raise HTTPException(
                status_code=502,
                detail=f"OpenAI API Error: {getattr(err, 'message', str(err))}",
            ) from err

        return resp.choices[0].message.content or ""  # type: ignore[attr-defined]
