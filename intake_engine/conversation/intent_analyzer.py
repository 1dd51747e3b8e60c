"""Classification of a user reply into the fixed intent vocabulary."""

from typing import Optional

from intake_engine.config import GenerationProfile, settings
from intake_engine.generation.base import TextGenerator, safe_generate
from intake_engine.logging_context import get_session_logger
from intake_engine.prompts.prompt_templates import build_intent_prompt
from intake_engine.prompts.system_prompts import INTENT_SYSTEM_PROMPT
from intake_engine.schemas.conversation_schema import UserIntent

logger = get_session_logger(__name__)

DEFAULT_INTENT = UserIntent.COMPLETE_ANSWER


class IntentAnalyzer:
    """Detects whether a reply answers, confirms suggestions, asks for help, etc."""

    def __init__(
        self,
        generator: TextGenerator,
        profile: Optional[GenerationProfile] = None,
    ) -> None:
        self._generator = generator
        self._profile = profile or settings.profiles.intent

    def analyze(self, user_input: str, context: str = "", recent_context: str = "") -> UserIntent:
        """Return the detected intent, or COMPLETE_ANSWER when unsure."""
        if not user_input or not user_input.strip():
            return DEFAULT_INTENT

        reply = safe_generate(
            self._generator,
            INTENT_SYSTEM_PROMPT,
            build_intent_prompt(user_input, context, recent_context),
            self._profile,
            operation="analyze_intent",
        )
        if reply is None:
            return DEFAULT_INTENT

        candidate = reply.strip().strip(".\"'`").lower()
        try:
            return UserIntent(candidate)
        except ValueError:
            logger.warning("Unknown intent %r, assuming %s", reply, DEFAULT_INTENT.value)
            return DEFAULT_INTENT
