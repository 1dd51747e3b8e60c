"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_field_schema(self):
        from intake_engine.schemas.field_schema import FIELD_DEFINITIONS, FieldId, FieldKind
        assert len(FIELD_DEFINITIONS) == 12
        assert FieldId.BUDGET_RANGE == "budget_range"
        assert FieldKind.LOCATION == "location"

    def test_import_conversation_schema(self):
        from intake_engine.schemas.conversation_schema import DialogueAction, Turn, UserIntent
        assert DialogueAction.FREE_TALK == "free_talk"
        assert UserIntent.NEED_HELP == "need_help"
        assert Turn().question_or_suggestion == ""

    def test_import_project_schema(self):
        from intake_engine.schemas.project_schema import PriceEstimate, ProjectState
        assert len(ProjectState()) == 0
        assert PriceEstimate(min=1, max=2).as_range() == {"min": 1, "max": 2}


class TestConversationImports:
    def test_import_conversation_package(self):
        from intake_engine.conversation import (
            DialogueDecisionEngine, IntentAnalyzer, QuestionGenerator,
            ResponseGenerator, ResponseNormalizer, SuggestionResolver,
        )
        assert DialogueDecisionEngine is not None
        assert IntentAnalyzer is not None
        assert QuestionGenerator is not None
        assert ResponseNormalizer is not None
        assert ResponseGenerator is not None
        assert SuggestionResolver is not None

    def test_fallback_helpers(self):
        from intake_engine.conversation import fallback_decision, is_fallback_decision
        assert is_fallback_decision(fallback_decision("test"))


class TestGenerationImports:
    def test_import_generation_package(self):
        from intake_engine.generation import GenerationError, OpenAIGenerator, TextGenerator, safe_generate
        assert issubclass(GenerationError, Exception)
        assert callable(safe_generate)
        assert OpenAIGenerator is not None
        assert TextGenerator is not None


class TestPricingImports:
    def test_import_pricing_package(self):
        from intake_engine.pricing import KEYWORD_BASE_PRICES, PriceEstimator, match_base_price
        assert KEYWORD_BASE_PRICES[0] == ("plomberie", 300)
        assert callable(match_base_price)
        assert PriceEstimator is not None


class TestPromptImports:
    def test_import_system_prompts(self):
        from intake_engine.prompts.system_prompts import (
            DECISION_SYSTEM_PROMPT, ESTIMATOR_SYSTEM_PROMPT,
            NORMALIZER_SYSTEM_PROMPT, RESOLVER_SYSTEM_PROMPT,
        )
        assert "renovation" in NORMALIZER_SYSTEM_PROMPT
        assert RESOLVER_SYSTEM_PROMPT
        assert ESTIMATOR_SYSTEM_PROMPT
        assert DECISION_SYSTEM_PROMPT

    def test_import_prompt_templates(self):
        from intake_engine.prompts.prompt_templates import (
            build_decision_prompt,
            build_estimation_prompt,
            build_normalization_prompt,
            build_resolution_prompt,
        )
        assert callable(build_normalization_prompt)
        assert callable(build_resolution_prompt)
        assert callable(build_estimation_prompt)
        assert callable(build_decision_prompt)


class TestPackageExports:
    def test_top_level_exports(self):
        import intake_engine
        for name in intake_engine.__all__:
            assert hasattr(intake_engine, name)


class TestConfigImport:
    def test_import_config(self):
        from intake_engine.config import settings
        assert settings.marketplace.name is not None
        assert settings.generation.llm_model is not None
        assert settings.pricing.default_base_price >= 1


class TestConsoleDemo:
    def test_console_session_imports(self):
        from console_demo import ConsoleSession, OfflineGenerator
        session = ConsoleSession(OfflineGenerator())
        assert session.current_field.id.value == "project_category"
        assert len(session.state) == 0
