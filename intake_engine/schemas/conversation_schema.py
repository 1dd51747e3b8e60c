"""Dialogue turn, decision and intent models."""

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from intake_engine.schemas.field_schema import FieldId


class DialogueAction(str, Enum):
    ASK_NEXT = "ask_next"
    CLARIFY = "clarify"
    SUGGEST = "suggest"
    VALIDATE = "validate"
    FREE_TALK = "free_talk"


class UserIntent(str, Enum):
    COMPLETE_ANSWER = "complete_answer"
    VALIDATES_SUGGESTIONS = "validates_suggestions"
    NEED_HELP = "need_help"
    UNCERTAINTY = "uncertainty"
    QUESTION_BACK = "question_back"
    CLARIFICATION = "clarification"
    SUGGESTION_REQUEST = "suggestion_request"


class Turn(BaseModel):
    """One exchange: the system's last message and the user's raw reply."""

    question_or_suggestion: str = Field(
        default="",
        validation_alias=AliasChoices("question_or_suggestion", "questionOrSuggestion"),
    )
    user_reply: str = Field(
        default="", validation_alias=AliasChoices("user_reply", "userReply")
    )
    suggestions: list[str] = Field(default_factory=list)


class Decision(BaseModel):
    """Next dialogue action chosen by the decision engine.

    ``target_field`` is typed as ``FieldId``, so constructing a decision
    that names a field outside the canonical set raises a validation error.
    """

    action: DialogueAction
    target_field: Optional[FieldId] = None
    rationale: str = Field(
        default="", validation_alias=AliasChoices("rationale", "reasoning")
    )
    # Set only by the engine's deterministic fallback, never parsed from a reply.
    is_fallback: bool = Field(default=False, exclude=True)

    @field_validator("target_field", mode="before")
    @classmethod
    def _blank_target_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() in ("", "null", "none"):
            return None
        return value

    @field_validator("rationale", mode="before")
    @classmethod
    def _rationale_as_text(cls, value: Any) -> Any:
        return "" if value is None else value
