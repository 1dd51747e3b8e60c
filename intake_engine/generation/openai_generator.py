"""
OpenAI chat-completions implementation of the ``TextGenerator`` capability.

The client is built with the configured timeout and transport retry
count; a timeout surfaces as ``GenerationError`` like any other failure.
"""

import logging
from typing import Any, Optional

from openai import OpenAI, OpenAIError

from intake_engine.config import settings
from intake_engine.generation.base import GenerationError

logger = logging.getLogger(__name__)


class OpenAIGenerator:
    """Chat-completions backed generator."""

    def __init__(
        self,
        model: Optional[str] = None,
        client: Optional[Any] = None,
        api_key: Optional[str] = None,
    ) -> None:
        self.model = model or settings.generation.llm_model
        self._client = client or OpenAI(
            api_key=api_key,
            timeout=settings.generation.timeout_sec,
            max_retries=settings.generation.max_retries,
        )

    def generate(
        self,
        system_instruction: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_instruction},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except OpenAIError as exc:
            raise GenerationError(f"{self.model} call failed: {exc}") from exc

        if not response.choices:
            raise GenerationError(f"{self.model} returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise GenerationError(f"{self.model} returned an empty message")
        logger.debug("Generated %d chars with %s", len(content), self.model)
        return content.strip()
