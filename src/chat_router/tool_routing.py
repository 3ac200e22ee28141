"""
Tool-Choice Routing

Combines the pattern classifiers into one per-turn decision: whether the model
must call a tool, and which one.

Precedence:
- modification of the active recipe -> force modify_recipe
- discovery/search ask -> force search_recipes
- explicit recipe request -> tool use required, model picks the tool
- anything else -> auto (model may reply conversationally)
"""
from dataclasses import dataclass
from typing import Literal, Optional

import structlog

from chat_router.intent_classifier import has_high_recipe_intent, has_search_intent
from chat_router.modification_detector import ConversationContext, detect_modification_intent

logger = structlog.get_logger("chat_router.tool_routing")

SEARCH_RECIPES = "search_recipes"
GENERATE_CUSTOM_RECIPE = "generate_custom_recipe"
MODIFY_RECIPE = "modify_recipe"
RETRIEVE_COOKED_RECIPES = "retrieve_cooked_recipes"

ToolChoice = Literal["auto", "required"]


@dataclass
class ToolDecision:
    """How the tool-execution layer should be called for this turn."""
    tool_choice: ToolChoice = "auto"
    tool_name: Optional[str] = None
    modifications: str = ""
    reason: str = "no_intent"

    @property
    def forces_tool(self) -> bool:
        return self.tool_choice == "required"


def decide_tool_choice(message: str, context: ConversationContext) -> ToolDecision:
    """
    Decide tool forcing for one user turn.

    Args:
        message: Raw user message
        context: Whether a recipe is active in this conversation

    Returns:
        ToolDecision
    """
    modification = detect_modification_intent(message, context)
    if modification.is_modification:
        decision = ToolDecision(
            tool_choice="required",
            tool_name=MODIFY_RECIPE,
            modifications=modification.modifications,
            reason="modification",
        )
    elif has_search_intent(message):
        decision = ToolDecision(tool_choice="required", tool_name=SEARCH_RECIPES, reason="search_intent")
    elif has_high_recipe_intent(message):
        decision = ToolDecision(tool_choice="required", reason="recipe_intent")
    else:
        decision = ToolDecision()

    logger.debug(
        "tool_choice_decided",
        tool_choice=decision.tool_choice,
        tool_name=decision.tool_name,
        reason=decision.reason
    )
    return decision
