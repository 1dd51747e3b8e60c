"""
Console demo: walks through a project-intake conversation in the terminal.

Uses the real intake components: decision engine, question generator,
intent analyzer, suggestion resolver, normalizer and price estimator.
With OPENAI_API_KEY set, generation goes to the configured model;
without it an offline generator fails every call, so each component's
deterministic fallback is what you see.

Usage:
    python console_demo.py
    python console_demo.py --scenario salle_de_bain
    python console_demo.py --scenario plomberie
"""

import argparse
import os
import uuid
from typing import Optional

from intake_engine.config import settings
from intake_engine.conversation.decision_engine import is_fallback_decision
from intake_engine.conversation.suggestion_resolver import is_extraction_failure
from intake_engine.engine import IntakeEngine
from intake_engine.generation.base import GenerationError, TextGenerator
from intake_engine.generation.openai_generator import OpenAIGenerator
from intake_engine.logging_context import set_session_id
from intake_engine.schemas.conversation_schema import Decision, DialogueAction, Turn, UserIntent
from intake_engine.schemas.field_schema import FieldDefinition, get_field
from intake_engine.schemas.project_schema import ProjectState

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class OfflineGenerator:
    """Generator used without API keys: every call fails."""

    def generate(self, system_instruction: str, user_prompt: str,
                 temperature: float, max_tokens: int) -> str:
        raise GenerationError("offline mode, no generation backend configured")


def build_generator() -> TextGenerator:
    if os.getenv("OPENAI_API_KEY"):
        return OpenAIGenerator()
    return OfflineGenerator()


class ConsoleSession:
    """Simulates an intake conversation in the terminal."""

    SCENARIOS: dict[str, list[str]] = {
        "salle_de_bain": [
            "Salle de bain",
            "Rénovation complète",
            "je voudrais refaire toute la salle de bain avec une douche italienne",
            "à lyon en france",
            "Normal (1-3 mois)",
            "entre 6000 et 9000 euros",
        ],
        "plomberie": [
            "plomberie",
            "Réparation de fuite",
            "fuite d'eau sous l'évier de la cuisine",
            "paris",
        ],
    }

    MAX_INPUT_LENGTH = 500

    def __init__(self, generator: Optional[TextGenerator] = None) -> None:
        self.engine = IntakeEngine(generator or build_generator())
        self.state = ProjectState()
        self.current_field: Optional[FieldDefinition] = get_field("project_category")
        self.last_message = ""
        self.suggestions: list[str] = []
        set_session_id(f"INTAKE-{uuid.uuid4().hex[:8]}")

    def assistant_say(self, text: str) -> None:
        print(f"{GREEN}{BOLD}[Assistant]{RESET} {GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  PROJECT INTAKE - {title}{RESET}")
        print(f"{BOLD}  Marketplace: {settings.marketplace.name}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _greet(self) -> None:
        self.last_message = self.engine.generate_question("project_category", self.state)
        self.assistant_say(
            f"Bonjour ! Je vais vous aider à décrire votre projet. {self.last_message}"
        )

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._banner(f"Scenario: {scenario}")
        self._greet()
        for step in steps:
            if self.current_field is None:
                break
            print(f"\n{BLUE}[Client] {RESET}{step}")
            self._process_input(step)
        self._finish()

    def run(self) -> None:
        self._banner("Console Demo (type 'quit' to exit)")
        self._greet()

        while self.current_field is not None:
            user_input = input(f"\n{BLUE}[Client] {RESET}").strip()
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                break
            if len(user_input) > self.MAX_INPUT_LENGTH:
                self.assistant_say("C'est un peu long, pouvez-vous résumer ?")
                continue
            self._process_input(user_input)
        self._finish()

    def _process_input(self, text: str) -> None:
        field = self.current_field
        suggestions_text = "\n".join(self.suggestions) if self.suggestions else None
        turn = Turn(
            question_or_suggestion=self.last_message,
            user_reply=text,
            suggestions=self.suggestions,
        )

        intent = self.engine.analyze_intent(text, context=field.label, recent_context=self.last_message)
        self.system_log(f"Intent: {intent.value}")

        value = text
        if intent == UserIntent.VALIDATES_SUGGESTIONS and suggestions_text:
            value = self.engine.resolve_suggestion(text, suggestions_text)
            if is_extraction_failure(value):
                self.assistant_say("Je n'ai pas bien compris votre choix. Pouvez-vous préciser ?")
                return

        value = self.engine.normalize_field(field.id.value, value, suggestions_text, self.state)
        self.state.set(field.id.value, value)
        self.system_log(f"{field.id.value} = {value!r}")

        decision = self.engine.decide_next_action(self.state, turn)
        target = decision.target_field.value if decision.target_field else None
        self.system_log(f"Decision: {decision.action.value} -> {target} ({decision.rationale})")
        self._advance(decision, text)

    def _advance(self, decision: Decision, user_reply: str = "") -> None:
        if decision.action == DialogueAction.FREE_TALK and user_reply:
            self.assistant_say(self.engine.generate_response(user_reply, self.state))

        missing = self.state.missing_fields()
        if not missing:
            self.current_field = None
            return

        target = decision.target_field
        if target is None or target.value in self.state or is_fallback_decision(decision):
            # Fallback always names the category; move on to the next gap instead.
            self.current_field = missing[0]
        else:
            self.current_field = get_field(target)

        self.suggestions = []
        self.last_message = self.engine.generate_question(self.current_field.id.value, self.state)
        if decision.action == DialogueAction.SUGGEST and self.current_field.examples:
            self.suggestions = [
                f"{i}. {example}" for i, example in enumerate(self.current_field.examples, start=1)
            ]
            self.last_message += " " + " ".join(self.suggestions)
        self.assistant_say(self.last_message)

    def _finish(self) -> None:
        estimate = self.engine.estimate_price(self.state)
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Project summary{RESET}")
        for field_id, value in self.state.items():
            print(f"  {get_field(field_id).label}: {value}")
        if estimate is not None:
            print(
                f"{YELLOW}  Estimate: {estimate.min} - {estimate.max} "
                f"{settings.marketplace.currency} ({estimate.source.value}){RESET}"
            )
        print(f"{BOLD}{'=' * 60}{RESET}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Project intake console demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args()

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
