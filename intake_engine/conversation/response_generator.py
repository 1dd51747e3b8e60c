"""Free-form assistant replies for free talk and clarification turns."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from intake_engine.config import GenerationProfile, settings
from intake_engine.generation.base import TextGenerator, safe_generate
from intake_engine.logging_context import get_session_logger
from intake_engine.prompts.prompt_templates import build_response_prompt
from intake_engine.prompts.system_prompts import RESPONSE_SYSTEM_PROMPT
from intake_engine.schemas.project_schema import render_project_context

logger = get_session_logger(__name__)

EMPTY_PROMPT_REPLY = "Continuons avec votre projet !"
UNAVAILABLE_REPLY = "Je suis là pour vous aider avec votre projet de rénovation !"


class ResponseGenerator:
    """Answers the user conversationally, with a fixed reply when generation fails."""

    def __init__(
        self,
        generator: TextGenerator,
        profile: Optional[GenerationProfile] = None,
    ) -> None:
        self._generator = generator
        self._profile = profile or settings.profiles.response

    def generate(
        self,
        prompt: str,
        project_context: Union[str, Mapping[str, Any], None] = "",
    ) -> str:
        if not prompt or not prompt.strip():
            return EMPTY_PROMPT_REPLY

        if project_context is None or isinstance(project_context, Mapping):
            project_context = render_project_context(project_context)

        reply = safe_generate(
            self._generator,
            RESPONSE_SYSTEM_PROMPT,
            build_response_prompt(prompt, project_context),
            self._profile,
            operation="generate_response",
        )
        if reply is None:
            logger.info("Using fixed reply for free talk")
            return UNAVAILABLE_REPLY
        return reply
