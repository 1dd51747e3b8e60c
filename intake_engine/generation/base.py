"""
Text generation capability consumed by every intake component.

Components never talk to a provider SDK directly. They receive an object
satisfying ``TextGenerator`` and go through ``safe_generate``, which turns
any failure (transport error, timeout, empty reply) into ``None`` so the
caller can fall through to its deterministic fallback.
"""

from typing import Optional, Protocol, runtime_checkable

from intake_engine.config import GenerationProfile
from intake_engine.logging_context import get_session_logger

logger = get_session_logger(__name__)


class GenerationError(Exception):
    """Raised by generators when the provider call fails or returns nothing."""


@runtime_checkable
class TextGenerator(Protocol):
    """Synchronous natural-language generation call."""

    def generate(
        self,
        system_instruction: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        ...


def safe_generate(
    generator: TextGenerator,
    system_instruction: str,
    user_prompt: str,
    profile: GenerationProfile,
    operation: str,
) -> Optional[str]:
    """Call the generator once and return its stripped reply, or None on failure.

    No retries happen here; retry policy belongs to the generator's transport.
    """
    try:
        reply = generator.generate(
            system_instruction,
            user_prompt,
            profile.temperature,
            profile.max_tokens,
        )
    except Exception as exc:
        logger.warning("Generation failed during %s: %s", operation, exc)
        return None

    if not isinstance(reply, str) or not reply.strip():
        logger.warning("Empty generation reply during %s", operation)
        return None
    logger.debug("Generation reply for %s: %r", operation, reply)
    return reply.strip()
