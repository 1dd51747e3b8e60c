"""
Resolution of user confirmations into the content of offered suggestions.

Two stages, run in order and never together:
1. Generation maps the confirmation ("les 3 points", "le point 2") onto
   the suggestions and returns their content.
2. If that result is unusable, a structural parse of the suggestion text
   strips enumeration markers and joins the items.

If both stages come up empty the caller receives EXTRACTION_FAILED_MESSAGE,
a recoverable "no value extracted" outcome.
"""

import re
from typing import Optional

from intake_engine.config import GenerationProfile, settings
from intake_engine.generation.base import TextGenerator, safe_generate
from intake_engine.logging_context import get_session_logger
from intake_engine.prompts.prompt_templates import build_resolution_prompt
from intake_engine.prompts.system_prompts import RESOLVER_SYSTEM_PROMPT

logger = get_session_logger(__name__)

EXTRACTION_FAILED_MESSAGE = "Je n'ai pas réussi à extraire les suggestions valides."


def _compile_patterns(phrases: list[str]) -> re.Pattern[str]:
    """Compile a list of phrases into a single word-boundary regex."""
    escaped = [re.escape(p) for p in phrases]
    return re.compile(r"\b(?:" + "|".join(escaped) + r")\b", re.IGNORECASE)


# Best-effort detector; phrasing- and locale-dependent by nature.
_AFFIRMATION_PHRASES = [
    "parfait",
    "excellent",
    "super",
    "génial",
    "bonne suggestion",
    "bonnes suggestions",
    "ces points",
    "ça me va",
    "d'accord",
]
_AFFIRMATION_RE = _compile_patterns(_AFFIRMATION_PHRASES)

# "1. ", "2) ", "- ", "• ", "* " at line start or after whitespace
_ENUM_MARKER_RE = re.compile(r"(?:^|(?<=\s))(?:\d+[.)](?!\d)|[-•*])\s*", re.MULTILINE)


def looks_like_affirmation(text: str) -> bool:
    """Check whether ``text`` still contains confirmation-only vocabulary."""
    return bool(_AFFIRMATION_RE.search(text))


def extract_enumerated_items(suggestions_text: str) -> str:
    """Strip enumeration markers from the suggestions and join the items.

    Text before the first marker (an introduction such as "Par exemple :")
    is discarded. Returns an empty string when no marked item is found.

    Examples:
        >>> extract_enumerated_items("1. Plomberie 2. Électricité 3. Chauffage")
        'Plomberie, Électricité, Chauffage'
        >>> extract_enumerated_items("- Carrelage\\n- Parquet")
        'Carrelage, Parquet'
    """
    parts = _ENUM_MARKER_RE.split(suggestions_text)
    if len(parts) < 2:
        return ""
    items = [part.strip().strip(",;").strip() for part in parts[1:]]
    return ", ".join(item for item in items if item)


def is_extraction_failure(value: Optional[str]) -> bool:
    """Check whether a resolved value is the extraction-failed sentinel."""
    return value == EXTRACTION_FAILED_MESSAGE


class SuggestionResolver:
    """Turns a confirmation of earlier suggestions into a field value."""

    def __init__(
        self,
        generator: TextGenerator,
        profile: Optional[GenerationProfile] = None,
    ) -> None:
        self._generator = generator
        self._profile = profile or settings.profiles.resolve

    def resolve(self, user_input: str, suggestions_text: Optional[str]) -> str:
        """Return the content of the suggestion(s) the user confirmed."""
        if not suggestions_text or not suggestions_text.strip() or not user_input:
            return user_input

        extracted = safe_generate(
            self._generator,
            RESOLVER_SYSTEM_PROMPT,
            build_resolution_prompt(user_input, suggestions_text),
            self._profile,
            operation="resolve_suggestion",
        )
        if extracted is not None and self._is_usable(extracted, user_input):
            logger.debug("Resolved confirmation %r -> %r", user_input, extracted)
            return extracted

        logger.info("Generated extraction rejected, parsing suggestions directly")
        fallback = extract_enumerated_items(suggestions_text)
        if fallback:
            return fallback

        logger.warning("No value could be extracted from suggestions for %r", user_input)
        return EXTRACTION_FAILED_MESSAGE

    @staticmethod
    def _is_usable(extracted: str, user_input: str) -> bool:
        if extracted == user_input.strip():
            return False
        return not looks_like_affirmation(extracted)
