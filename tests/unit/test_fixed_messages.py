"""
Unit tests for Fixed Tool-Result Messages.

Every (outcome, language) pair must map to exactly one stable string.
"""
import pytest

import sys
sys.path.insert(0, 'src')

from chat_router.fixed_messages import (
    FIXED_MESSAGES,
    ToolOutcome,
    build_cooked_history_message,
    build_custom_recipe_ready_message,
    build_empty_cooked_history_message,
    build_fixed_message,
    build_no_search_results_message,
    build_search_results_message,
    normalize_language,
    outcome_for_tool_result,
)


BUILDERS = {
    ToolOutcome.SEARCH_HIT: build_search_results_message,
    ToolOutcome.SEARCH_MISS: build_no_search_results_message,
    ToolOutcome.HISTORY_HIT: build_cooked_history_message,
    ToolOutcome.HISTORY_EMPTY: build_empty_cooked_history_message,
    ToolOutcome.CUSTOM_RECIPE_READY: build_custom_recipe_ready_message,
}


# =============================================================================
# Test Message Table
# =============================================================================

class TestMessageTable:
    """Totality and uniqueness of the outcome x language table."""

    def test_every_outcome_has_both_languages(self):
        for outcome in ToolOutcome:
            assert set(FIXED_MESSAGES[outcome]) == {"en", "es"}
            assert all(FIXED_MESSAGES[outcome].values())

    def test_messages_are_unique(self):
        messages = [text for table in FIXED_MESSAGES.values() for text in table.values()]
        assert len(messages) == len(set(messages))

    def test_every_outcome_has_a_builder(self):
        assert set(BUILDERS) == set(ToolOutcome)

    @pytest.mark.parametrize("outcome", list(ToolOutcome))
    @pytest.mark.parametrize("language", ["en", "es"])
    def test_builder_matches_table(self, outcome, language):
        assert BUILDERS[outcome](language) == FIXED_MESSAGES[outcome][language]

    def test_stable_across_calls(self):
        assert build_search_results_message("es") == build_search_results_message("es")

    def test_languages_differ(self):
        assert build_custom_recipe_ready_message("en") != build_custom_recipe_ready_message("es")


class TestLanguageNormalization:
    """Tests for normalize_language()."""

    @pytest.mark.parametrize("tag,expected", [
        ("en", "en"),
        ("es", "es"),
        ("ES", "es"),
        ("es-MX", "es"),
        ("en-US", "en"),
        ("fr", "en"),
        ("", "en"),
    ])
    def test_normalize(self, tag, expected):
        assert normalize_language(tag) == expected

    def test_unknown_language_falls_back_to_english(self):
        assert build_fixed_message(ToolOutcome.SEARCH_MISS, "de") == FIXED_MESSAGES[ToolOutcome.SEARCH_MISS]["en"]


# =============================================================================
# Test Outcome Mapping
# =============================================================================

class TestOutcomeForToolResult:
    """Tests for outcome_for_tool_result()."""

    def test_search(self):
        assert outcome_for_tool_result("search_recipes", 3) == ToolOutcome.SEARCH_HIT
        assert outcome_for_tool_result("search_recipes", 0) == ToolOutcome.SEARCH_MISS

    def test_history(self):
        assert outcome_for_tool_result("retrieve_cooked_recipes", 1) == ToolOutcome.HISTORY_HIT
        assert outcome_for_tool_result("retrieve_cooked_recipes", 0) == ToolOutcome.HISTORY_EMPTY

    def test_generation(self):
        assert outcome_for_tool_result("generate_custom_recipe", 0) == ToolOutcome.CUSTOM_RECIPE_READY
        assert outcome_for_tool_result("modify_recipe", 0) == ToolOutcome.CUSTOM_RECIPE_READY

    def test_unknown_tool(self):
        with pytest.raises(ValueError):
            outcome_for_tool_result("get_weather", 1)
