"""
Next-action selection for the intake dialogue.

The engine is memoryless: every decision is a function of the project
state and the last turn only, so a conversation can be resumed or
replayed from its state. Whatever the generation capability returns, the
result is either a validated Decision or the deterministic fallback
(ask for the project category), so the dialogue never stalls.
"""

import json
import re
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from intake_engine.config import GenerationProfile, settings
from intake_engine.generation.base import TextGenerator, safe_generate
from intake_engine.logging_context import get_session_logger
from intake_engine.prompts.prompt_templates import build_decision_prompt
from intake_engine.prompts.system_prompts import DECISION_SYSTEM_PROMPT
from intake_engine.schemas.conversation_schema import DialogueAction, Decision, Turn
from intake_engine.schemas.field_schema import FieldId

logger = get_session_logger(__name__)

FALLBACK_RATIONALE_PREFIX = "fallback"

_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def fallback_decision(reason: str) -> Decision:
    """Default decision: ask for the first field in intake order."""
    return Decision(
        action=DialogueAction.ASK_NEXT,
        target_field=FieldId.PROJECT_CATEGORY,
        rationale=f"{FALLBACK_RATIONALE_PREFIX}: {reason}",
        is_fallback=True,
    )


def is_fallback_decision(decision: Decision) -> bool:
    return decision.is_fallback


def parse_decision(reply: str) -> Optional[Decision]:
    """Parse the first JSON object in ``reply`` into a validated Decision.

    Returns None when there is no JSON object, it does not decode, or it
    names an unknown action or a non-canonical target field.
    """
    match = _JSON_OBJECT_RE.search(reply)
    if not match:
        logger.warning("No JSON object in decision reply: %r", reply)
        return None
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        logger.warning("Undecodable decision reply: %s", exc)
        return None
    if not isinstance(data, dict):
        return None
    data.pop("is_fallback", None)
    try:
        return Decision.model_validate(data)
    except ValidationError as exc:
        logger.warning(
            "Rejected decision action=%r target_field=%r (%d errors)",
            data.get("action"), data.get("target_field"), exc.error_count(),
        )
        return None


class DialogueDecisionEngine:
    """Chooses the next dialogue action and the field it targets."""

    def __init__(
        self,
        generator: TextGenerator,
        profile: Optional[GenerationProfile] = None,
    ) -> None:
        self._generator = generator
        self._profile = profile or settings.profiles.decide

    def decide(
        self,
        project_state: Optional[Mapping[str, Any]],
        last_turn: Union[Turn, Mapping[str, Any], None] = None,
    ) -> Decision:
        """Return the next action, falling back to asking for the category."""
        turn = self._coerce_turn(last_turn)
        reply = safe_generate(
            self._generator,
            DECISION_SYSTEM_PROMPT,
            build_decision_prompt(project_state or {}, turn),
            self._profile,
            operation="decide_next_action",
        )
        if reply is None:
            return fallback_decision("generation unavailable")

        decision = parse_decision(reply)
        if decision is None:
            return fallback_decision("malformed decision reply")

        logger.info(
            "Next action: %s -> %s",
            decision.action.value,
            decision.target_field.value if decision.target_field else None,
        )
        return decision

    @staticmethod
    def _coerce_turn(last_turn: Union[Turn, Mapping[str, Any], None]) -> Turn:
        if last_turn is None:
            return Turn()
        if isinstance(last_turn, Turn):
            return last_turn
        return Turn.model_validate(dict(last_turn))
