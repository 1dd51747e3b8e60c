"""Natural phrasing of the question that collects one field."""

from collections.abc import Mapping
from typing import Any, Optional

from intake_engine.config import GenerationProfile, settings
from intake_engine.generation.base import TextGenerator, safe_generate
from intake_engine.logging_context import get_session_logger
from intake_engine.prompts.prompt_templates import build_question_prompt
from intake_engine.prompts.system_prompts import QUESTION_SYSTEM_PROMPT
from intake_engine.schemas.field_schema import get_field

logger = get_session_logger(__name__)


class QuestionGenerator:
    """Asks for a field, falling back to its static help prompt."""

    def __init__(
        self,
        generator: TextGenerator,
        profile: Optional[GenerationProfile] = None,
    ) -> None:
        self._generator = generator
        self._profile = profile or settings.profiles.question

    def generate(self, field_id: str, project_state: Optional[Mapping[str, Any]] = None) -> str:
        """
        Return a question for ``field_id`` adapted to the project so far.

        Raises:
            UnknownFieldError: If ``field_id`` is not a canonical field.
        """
        defn = get_field(field_id)
        question = safe_generate(
            self._generator,
            QUESTION_SYSTEM_PROMPT,
            build_question_prompt(defn, project_state or {}),
            self._profile,
            operation=f"question:{defn.id.value}",
        )
        if question is None:
            logger.info("Using static help prompt for '%s'", defn.id.value)
            return defn.help_prompt
        return question
