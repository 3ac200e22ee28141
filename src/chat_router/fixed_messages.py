"""
Fixed Tool-Result Messages

Once a tool result is known, the reply text is a constant per (outcome, language)
pair instead of a second streamed model call. Removes a round-trip of latency and
keeps the narration stable.
"""
from enum import Enum
from typing import Dict, Literal

from chat_router.tool_routing import (
    GENERATE_CUSTOM_RECIPE,
    MODIFY_RECIPE,
    RETRIEVE_COOKED_RECIPES,
    SEARCH_RECIPES,
)

Language = Literal["en", "es"]

DEFAULT_LANGUAGE: Language = "en"


class ToolOutcome(Enum):
    """Tool outcomes that have a fixed reply."""
    SEARCH_HIT = "search_hit"
    SEARCH_MISS = "search_miss"
    HISTORY_HIT = "history_hit"
    HISTORY_EMPTY = "history_empty"
    CUSTOM_RECIPE_READY = "custom_recipe_ready"


FIXED_MESSAGES: Dict[ToolOutcome, Dict[str, str]] = {
    ToolOutcome.SEARCH_HIT: {
        "en": "I found a few recipes you might like. Tap one to see the details.",
        "es": "Encontré algunas recetas que te pueden gustar. Toca una para ver los detalles.",
    },
    ToolOutcome.SEARCH_MISS: {
        "en": "I couldn't find a matching recipe. Want me to create a custom one for you?",
        "es": "No encontré una receta que coincida. ¿Quieres que cree una personalizada para ti?",
    },
    ToolOutcome.HISTORY_HIT: {
        "en": "Here are the recipes you've cooked recently.",
        "es": "Estas son las recetas que has cocinado recientemente.",
    },
    ToolOutcome.HISTORY_EMPTY: {
        "en": "You haven't cooked any recipes yet. Want me to suggest something?",
        "es": "Todavía no has cocinado ninguna receta. ¿Quieres que te sugiera algo?",
    },
    ToolOutcome.CUSTOM_RECIPE_READY: {
        "en": "Your recipe is ready! Let me know if you'd like to change anything.",
        "es": "¡Tu receta está lista! Dime si quieres cambiar algo.",
    },
}


def normalize_language(language: str) -> Language:
    """Map a language tag to a supported language, defaulting to English."""
    tag = (language or "").strip().lower()[:2]
    return "es" if tag == "es" else DEFAULT_LANGUAGE


def build_fixed_message(outcome: ToolOutcome, language: str) -> str:
    """Return the constant reply for a tool outcome in the given language."""
    return FIXED_MESSAGES[outcome][normalize_language(language)]


def build_search_results_message(language: Language) -> str:
    return build_fixed_message(ToolOutcome.SEARCH_HIT, language)


def build_no_search_results_message(language: Language) -> str:
    return build_fixed_message(ToolOutcome.SEARCH_MISS, language)


def build_cooked_history_message(language: Language) -> str:
    return build_fixed_message(ToolOutcome.HISTORY_HIT, language)


def build_empty_cooked_history_message(language: Language) -> str:
    return build_fixed_message(ToolOutcome.HISTORY_EMPTY, language)


def build_custom_recipe_ready_message(language: Language) -> str:
    return build_fixed_message(ToolOutcome.CUSTOM_RECIPE_READY, language)


def outcome_for_tool_result(tool_name: str, result_count: int) -> ToolOutcome:
    """
    Map a finished tool call to its fixed-reply outcome.

    Args:
        tool_name: Registered tool name
        result_count: Number of recipes the tool returned (ignored for generation tools)

    Returns:
        ToolOutcome

    Raises:
        ValueError: If the tool has no fixed reply
    """
    if tool_name == SEARCH_RECIPES:
        return ToolOutcome.SEARCH_HIT if result_count > 0 else ToolOutcome.SEARCH_MISS
    if tool_name == RETRIEVE_COOKED_RECIPES:
        return ToolOutcome.HISTORY_HIT if result_count > 0 else ToolOutcome.HISTORY_EMPTY
    if tool_name in (GENERATE_CUSTOM_RECIPE, MODIFY_RECIPE):
        return ToolOutcome.CUSTOM_RECIPE_READY
    raise ValueError(f"No fixed message for tool: {tool_name}")
