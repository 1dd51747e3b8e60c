"""
Facade exposing the intake operations to the conversation orchestrator.

All components share one injected ``TextGenerator``; swapping the
provider (or a scripted double in tests) means passing another object
with the same ``generate`` signature.

Usage:
    engine = IntakeEngine(OpenAIGenerator())
    decision = engine.decide_next_action(state, Turn(user_reply="Bonjour"))
    engine.estimate_price(state)
    engine.generate_response("Une douche italienne, c'est possible ?", state)
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from intake_engine.conversation.decision_engine import DialogueDecisionEngine
from intake_engine.conversation.intent_analyzer import IntentAnalyzer
from intake_engine.conversation.question_generator import QuestionGenerator
from intake_engine.conversation.response_generator import ResponseGenerator
from intake_engine.conversation.response_normalizer import ResponseNormalizer
from intake_engine.conversation.suggestion_resolver import SuggestionResolver
from intake_engine.generation.base import TextGenerator
from intake_engine.pricing.price_estimator import PriceEstimator
from intake_engine.schemas.conversation_schema import Decision, Turn, UserIntent
from intake_engine.schemas.project_schema import PriceEstimate


class IntakeEngine:
    """Request/response entry points of the project-intake core."""

    def __init__(self, generator: TextGenerator) -> None:
        self.normalizer = ResponseNormalizer(generator)
        self.resolver = SuggestionResolver(generator)
        self.estimator = PriceEstimator(generator)
        self.decision_engine = DialogueDecisionEngine(generator)
        self.intent_analyzer = IntentAnalyzer(generator)
        self.question_generator = QuestionGenerator(generator)
        self.response_generator = ResponseGenerator(generator)

    def normalize_field(
        self,
        field_id: str,
        raw_value: str,
        last_suggestions: Optional[str] = None,
        project_context: Union[str, Mapping[str, Any], None] = "",
    ) -> str:
        return self.normalizer.normalize(field_id, raw_value, last_suggestions, project_context)

    def resolve_suggestion(self, user_input: str, suggestions_text: Optional[str]) -> str:
        return self.resolver.resolve(user_input, suggestions_text)

    def estimate_price(self, project_state: Optional[Mapping[str, Any]]) -> Optional[PriceEstimate]:
        return self.estimator.estimate(project_state)

    def decide_next_action(
        self,
        project_state: Optional[Mapping[str, Any]],
        last_turn: Union[Turn, Mapping[str, Any], None] = None,
    ) -> Decision:
        return self.decision_engine.decide(project_state, last_turn)

    def analyze_intent(self, user_input: str, context: str = "", recent_context: str = "") -> UserIntent:
        return self.intent_analyzer.analyze(user_input, context, recent_context)

    def generate_question(self, field_id: str, project_state: Optional[Mapping[str, Any]] = None) -> str:
        return self.question_generator.generate(field_id, project_state)

    def generate_response(
        self,
        prompt: str,
        project_context: Union[str, Mapping[str, Any], None] = "",
    ) -> str:
        return self.response_generator.generate(prompt, project_context)
