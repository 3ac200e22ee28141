"""
Recipe Intent Classification

Pattern-based detection of messages that should force tool use instead of a
conversational reply. No LLM call required - fast and deterministic.

Every locale's patterns are always checked: the message language is not
validated upstream, and mixed-language messages are common ("I need a recipe
para la cena"). A miss is not proof of no intent; the caller can still let
the model decide with tool_choice="auto".
"""
from typing import Dict, List, Pattern

from chat_router.intent_patterns import (
    RECIPE_INTENT_PATTERNS,
    SEARCH_INTENT_PATTERNS,
    all_locales,
)


def _matches_any(message: str, table: Dict[str, List[Pattern]]) -> bool:
    lower_message = message.lower()
    return any(pattern.search(lower_message) for pattern in all_locales(table))


def has_high_recipe_intent(message: str) -> bool:
    """
    Detect if a message clearly asks for a recipe to be found or generated.

    Args:
        message: Raw user message, any language

    Returns:
        True when any recipe-intent pattern matches
    """
    return _matches_any(message, RECIPE_INTENT_PATTERNS)


def has_search_intent(message: str) -> bool:
    """Detect broad discovery asks ("something sweet", "show me more recipes")."""
    return _matches_any(message, SEARCH_INTENT_PATTERNS)
