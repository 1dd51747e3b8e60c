"""Tests for resolving confirmations of offered suggestions."""

from intake_engine.conversation.suggestion_resolver import (
    EXTRACTION_FAILED_MESSAGE,
    extract_enumerated_items,
    is_extraction_failure,
    looks_like_affirmation,
)

SUGGESTIONS = "1. Plomberie 2. Électricité 3. Chauffage"


class TestNoSuggestions:
    def test_missing_suggestions_returns_input(self, resolver_with):
        resolver, gen = resolver_with("Plomberie")
        assert resolver.resolve("les 3 points", None) == "les 3 points"
        assert gen.calls == []

    def test_blank_suggestions_returns_input(self, resolver_with):
        resolver, gen = resolver_with("Plomberie")
        assert resolver.resolve("ok", "   ") == "ok"
        assert gen.calls == []


class TestPrimaryExtraction:
    def test_single_item_selected(self, resolver_with):
        resolver, _ = resolver_with("Modéré")
        assert resolver.resolve("le point 2", "1. Urgent 2. Modéré 3. Pas pressé") == "Modéré"

    def test_subset_selected(self, resolver_with):
        resolver, gen = resolver_with("Plomberie, Électricité")
        assert resolver.resolve("les deux premiers", SUGGESTIONS) == "Plomberie, Électricité"
        assert len(gen.calls) == 1

    def test_prompt_contains_suggestions_and_confirmation(self, resolver_with):
        resolver, gen = resolver_with("Chauffage")
        resolver.resolve("le troisième", SUGGESTIONS)
        assert SUGGESTIONS in gen.last_prompt
        assert "le troisième" in gen.last_prompt


class TestDeterministicFallback:
    def test_all_three_points_with_validation_echo(self, resolver_with):
        resolver, _ = resolver_with("Parfait, ces points me conviennent !")
        assert resolver.resolve("les 3 points", SUGGESTIONS) == "Plomberie, Électricité, Chauffage"

    def test_echo_of_input_is_rejected(self, resolver_with):
        resolver, _ = resolver_with("les 3 points")
        assert resolver.resolve("les 3 points", SUGGESTIONS) == "Plomberie, Électricité, Chauffage"

    def test_generation_failure_uses_fallback(self, resolver_with):
        resolver, _ = resolver_with(ConnectionError("network down"))
        assert resolver.resolve("tous", "- Carrelage\n- Peinture\n- Parquet") == "Carrelage, Peinture, Parquet"

    def test_fallback_runs_after_single_attempt(self, resolver_with):
        resolver, gen = resolver_with("super", "Plomberie")
        resolver.resolve("les 3 points", SUGGESTIONS)
        assert len(gen.calls) == 1

    def test_sentinel_when_nothing_extractable(self, resolver_with):
        resolver, _ = resolver_with("génial")
        result = resolver.resolve("parfait", "Carrelage ou parquet, à vous de voir")
        assert result == EXTRACTION_FAILED_MESSAGE
        assert is_extraction_failure(result)


class TestEnumeratedItems:
    def test_inline_numbering(self):
        assert extract_enumerated_items(SUGGESTIONS) == "Plomberie, Électricité, Chauffage"

    def test_bullets_on_lines(self):
        assert extract_enumerated_items("• Béton\n• Brique") == "Béton, Brique"

    def test_intro_text_discarded(self):
        text = "Voici mes idées :\n1. Douche italienne\n2. Meuble vasque"
        assert extract_enumerated_items(text) == "Douche italienne, Meuble vasque"

    def test_parenthesis_numbering(self):
        assert extract_enumerated_items("1) Urgent 2) Normal") == "Urgent, Normal"

    def test_hyphenated_words_not_split(self):
        assert extract_enumerated_items("- Placard sur-mesure\n- Étagères") == "Placard sur-mesure, Étagères"

    def test_decimal_numbers_not_split(self):
        assert extract_enumerated_items("1. Surface de 2.5 m2 2. Plinthes") == "Surface de 2.5 m2, Plinthes"

    def test_no_marker_yields_empty(self):
        assert extract_enumerated_items("Carrelage, Peinture") == ""


class TestAffirmationDetector:
    def test_detects_affirmations(self):
        assert looks_like_affirmation("Parfait, merci")
        assert looks_like_affirmation("Ces points sont bons")
        assert looks_like_affirmation("c'est génial")

    def test_ignores_substantive_content(self):
        assert not looks_like_affirmation("Plomberie, Électricité")
        assert not looks_like_affirmation("Superficie de 20 m2")

    def test_sentinel_is_not_a_regular_value(self):
        assert not is_extraction_failure("Plomberie")
