"""Shared test fixtures and helpers."""

from dataclasses import dataclass
from typing import Optional, Union

import pytest

from intake_engine.conversation.decision_engine import DialogueDecisionEngine
from intake_engine.conversation.intent_analyzer import IntentAnalyzer
from intake_engine.conversation.question_generator import QuestionGenerator
from intake_engine.conversation.response_generator import ResponseGenerator
from intake_engine.conversation.response_normalizer import ResponseNormalizer
from intake_engine.conversation.suggestion_resolver import SuggestionResolver
from intake_engine.generation.base import GenerationError
from intake_engine.pricing.price_estimator import PriceEstimator


@dataclass
class GenerationCall:
    system_instruction: str
    user_prompt: str
    temperature: float
    max_tokens: int


class ScriptedGenerator:
    """Test double returning scripted replies (or raising scripted errors) in order.

    When the script runs out, the last entry is repeated.
    """

    def __init__(self, *replies: Union[str, Exception]) -> None:
        self.replies = list(replies)
        self.calls: list[GenerationCall] = []

    def generate(
        self,
        system_instruction: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        self.calls.append(GenerationCall(system_instruction, user_prompt, temperature, max_tokens))
        if not self.replies:
            raise GenerationError("no scripted reply")
        index = min(len(self.calls) - 1, len(self.replies) - 1)
        reply = self.replies[index]
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def last_prompt(self) -> Optional[str]:
        return self.calls[-1].user_prompt if self.calls else None


def failing_generator() -> ScriptedGenerator:
    """Generator whose every call fails, as during a total outage."""
    return ScriptedGenerator(GenerationError("service unavailable"))


@pytest.fixture
def outage():
    return failing_generator()


@pytest.fixture
def normalizer_with():
    def _make(*replies: Union[str, Exception]) -> tuple[ResponseNormalizer, ScriptedGenerator]:
        gen = ScriptedGenerator(*replies)
        return ResponseNormalizer(gen), gen
    return _make


@pytest.fixture
def resolver_with():
    def _make(*replies: Union[str, Exception]) -> tuple[SuggestionResolver, ScriptedGenerator]:
        gen = ScriptedGenerator(*replies)
        return SuggestionResolver(gen), gen
    return _make


@pytest.fixture
def estimator_with():
    def _make(*replies: Union[str, Exception]) -> tuple[PriceEstimator, ScriptedGenerator]:
        gen = ScriptedGenerator(*replies)
        return PriceEstimator(gen), gen
    return _make


@pytest.fixture
def decision_engine_with():
    def _make(*replies: Union[str, Exception]) -> tuple[DialogueDecisionEngine, ScriptedGenerator]:
        gen = ScriptedGenerator(*replies)
        return DialogueDecisionEngine(gen), gen
    return _make


@pytest.fixture
def intent_analyzer_with():
    def _make(*replies: Union[str, Exception]) -> tuple[IntentAnalyzer, ScriptedGenerator]:
        gen = ScriptedGenerator(*replies)
        return IntentAnalyzer(gen), gen
    return _make


@pytest.fixture
def question_generator_with():
    def _make(*replies: Union[str, Exception]) -> tuple[QuestionGenerator, ScriptedGenerator]:
        gen = ScriptedGenerator(*replies)
        return QuestionGenerator(gen), gen
    return _make


@pytest.fixture
def response_generator_with():
    def _make(*replies: Union[str, Exception]) -> tuple[ResponseGenerator, ScriptedGenerator]:
        gen = ScriptedGenerator(*replies)
        return ResponseGenerator(gen), gen
    return _make


@pytest.fixture
def scripted():
    """Factory for a ScriptedGenerator with the given replies."""
    return ScriptedGenerator
