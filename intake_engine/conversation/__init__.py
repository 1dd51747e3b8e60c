from intake_engine.conversation.decision_engine import (
    DialogueDecisionEngine,
    fallback_decision,
    is_fallback_decision,
)
from intake_engine.conversation.intent_analyzer import IntentAnalyzer
from intake_engine.conversation.question_generator import QuestionGenerator
from intake_engine.conversation.response_generator import ResponseGenerator
from intake_engine.conversation.response_normalizer import ResponseNormalizer
from intake_engine.conversation.suggestion_resolver import (
    EXTRACTION_FAILED_MESSAGE,
    SuggestionResolver,
    is_extraction_failure,
)

__all__ = [
    "DialogueDecisionEngine",
    "fallback_decision",
    "is_fallback_decision",
    "IntentAnalyzer",
    "QuestionGenerator",
    "ResponseGenerator",
    "ResponseNormalizer",
    "SuggestionResolver",
    "EXTRACTION_FAILED_MESSAGE",
    "is_extraction_failure",
]
