"""
Field-aware cleaning of raw user replies.

Normalization is a best-effort refinement: the generated value replaces
the raw reply only when it is substantive and actually different.
Any generation failure leaves the user's words untouched.

Usage:
    normalizer = ResponseNormalizer(generator)
    normalizer.normalize("project_location", "à paris en france")
    # -> "Paris, France"
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from intake_engine.config import GenerationProfile, settings
from intake_engine.generation.base import TextGenerator, safe_generate
from intake_engine.logging_context import get_session_logger
from intake_engine.prompts.prompt_templates import build_normalization_prompt
from intake_engine.prompts.system_prompts import NORMALIZER_SYSTEM_PROMPT
from intake_engine.schemas.field_schema import get_field
from intake_engine.schemas.project_schema import render_project_context

logger = get_session_logger(__name__)

# Cleaned values this short are treated as degenerate
MIN_CLEANED_LENGTH = 3

_QUOTE_PAIRS = [('"', '"'), ("'", "'"), ("«", "»"), ("“", "”")]


def _strip_wrapping_quotes(value: str) -> str:
    for left, right in _QUOTE_PAIRS:
        if len(value) >= 2 and value.startswith(left) and value.endswith(right):
            return value[len(left):-len(right)].strip()
    return value


class ResponseNormalizer:
    """Produces the canonical value of one field from a raw reply."""

    def __init__(
        self,
        generator: TextGenerator,
        profile: Optional[GenerationProfile] = None,
    ) -> None:
        self._generator = generator
        self._profile = profile or settings.profiles.normalize

    def normalize(
        self,
        field_id: str,
        raw_value: Any,
        last_suggestions: Optional[str] = None,
        project_context: Union[str, Mapping[str, Any], None] = "",
    ) -> Any:
        """
        Clean ``raw_value`` for ``field_id``.

        Returns the cleaned value only if it is longer than
        MIN_CLEANED_LENGTH and differs from the raw value; otherwise the
        raw value unchanged. Empty or non-string input is returned as is.

        Raises:
            UnknownFieldError: If ``field_id`` is not a canonical field.
        """
        defn = get_field(field_id)
        if not isinstance(raw_value, str) or not raw_value.strip():
            return raw_value

        if isinstance(project_context, Mapping):
            project_context = render_project_context(project_context)

        prompt = build_normalization_prompt(
            defn, raw_value, last_suggestions, project_context or ""
        )
        cleaned = safe_generate(
            self._generator,
            NORMALIZER_SYSTEM_PROMPT,
            prompt,
            self._profile,
            operation=f"normalize:{defn.id.value}",
        )
        if cleaned is None:
            logger.info("Keeping raw value for '%s' after generation failure", defn.id.value)
            return raw_value

        cleaned = _strip_wrapping_quotes(cleaned)
        if len(cleaned) > MIN_CLEANED_LENGTH and cleaned != raw_value:
            logger.debug("Normalized '%s': %r -> %r", defn.id.value, raw_value, cleaned)
            return cleaned

        logger.debug("Rejected cleaned value for '%s': %r", defn.id.value, cleaned)
        return raw_value
