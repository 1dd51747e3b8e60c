"""Tests for free-form assistant replies."""

import pytest

from console_demo import ConsoleSession
from intake_engine.conversation.response_generator import EMPTY_PROMPT_REPLY, UNAVAILABLE_REPLY
from intake_engine.prompts.system_prompts import RESPONSE_SYSTEM_PROMPT
from intake_engine.schemas.conversation_schema import Decision, DialogueAction


class TestGeneratedReply:
    def test_returns_generated_reply(self, response_generator_with):
        reply = "Oui, une douche italienne est tout à fait envisageable. Quelle surface fait la pièce ?"
        responder, _ = response_generator_with(reply)
        assert responder.generate("Une douche italienne, c'est possible ?") == reply

    def test_context_mapping_is_label_qualified(self, response_generator_with):
        responder, gen = response_generator_with("Très bien.")
        responder.generate("Et ensuite ?", {"project_category": "Salle de bain"})
        assert "Catégorie du projet (project_category): Salle de bain" in gen.last_prompt
        assert "Et ensuite ?" in gen.last_prompt

    def test_uses_response_profile_and_rules(self, response_generator_with):
        responder, gen = response_generator_with("Très bien.")
        responder.generate("Bonjour")
        assert gen.calls[0].temperature == pytest.approx(0.7)
        assert gen.calls[0].max_tokens == 200
        assert gen.calls[0].system_instruction == RESPONSE_SYSTEM_PROMPT
        assert "No markdown" in RESPONSE_SYSTEM_PROMPT
        assert "2 to 3 sentences" in RESPONSE_SYSTEM_PROMPT


class TestFixedReplies:
    def test_outage_uses_fixed_reply(self, response_generator_with):
        responder, _ = response_generator_with(ConnectionError("unreachable"))
        assert responder.generate("Combien de temps durent les travaux ?") == UNAVAILABLE_REPLY

    def test_blank_reply_uses_fixed_reply(self, response_generator_with):
        responder, _ = response_generator_with("   ")
        assert responder.generate("Bonjour") == UNAVAILABLE_REPLY

    def test_empty_prompt_skips_generation(self, response_generator_with):
        responder, gen = response_generator_with("Bonjour !")
        assert responder.generate("  ") == EMPTY_PROMPT_REPLY
        assert gen.calls == []


class TestConsoleFreeTalk:
    def test_free_talk_decision_is_answered(self, scripted, capsys):
        gen = scripted("Bien sûr, c'est tout à fait possible.")
        session = ConsoleSession(gen)
        session._advance(Decision(action=DialogueAction.FREE_TALK), "C'est possible ?")

        systems = [call.system_instruction for call in gen.calls]
        assert systems[0] == RESPONSE_SYSTEM_PROMPT
        assert "Bien sûr, c'est tout à fait possible." in capsys.readouterr().out
        assert session.current_field.id.value == "project_category"

    def test_other_actions_do_not_free_talk(self, scripted):
        gen = scripted("Quel est votre projet ?")
        session = ConsoleSession(gen)
        session._advance(Decision(action=DialogueAction.ASK_NEXT), "Bonjour")
        assert RESPONSE_SYSTEM_PROMPT not in [call.system_instruction for call in gen.calls]
