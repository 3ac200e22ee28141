"""
Recipe Modification Detection

Decides whether a turn asks to change the recipe already on screen, and if so
extracts a short modification instruction for the modify_recipe tool.

Order is fixed:
1. No active recipe -> not a modification
2. Whole-message conversational negation ("No thanks", "No, gracias") -> not a modification
3. Regex heuristic extraction

Step 2 must run before step 3: the heuristic treats "No <ingredient>" as a
removal, so a plain decline would otherwise become "remove I'm good".
"""
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

import structlog

from chat_router.intent_patterns import (
    ADDITION_PATTERNS,
    ADJUSTMENT_PATTERNS,
    DIETARY_ADAPTATION_PATTERNS,
    NEGATION_PATTERNS,
    REMOVAL_PATTERNS,
    SERVING_SIZE_PATTERNS,
    SPEED_PATTERNS,
    SUBSTITUTION_PATTERNS,
    all_locales,
)

logger = structlog.get_logger("chat_router.modification_detector")

_TRAILING_PUNCTUATION = re.compile(r"[?.!,]+$")


@dataclass
class ConversationContext:
    """What the current turn knows about the conversation."""
    has_recipe: bool = False
    last_recipe_name: Optional[str] = None


@dataclass
class ModificationResult:
    """Outcome of modification detection."""
    is_modification: bool = False
    modifications: str = ""


def _clean(capture: str) -> str:
    return _TRAILING_PUNCTUATION.sub("", capture.strip())


def _first_match(text: str, patterns: List[Pattern]) -> Optional[re.Match]:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match
    return None


def is_conversational_negation(message: str) -> bool:
    """True when the whole message is a plain decline in any supported locale."""
    trimmed = message.strip()
    return any(pattern.match(trimmed) for pattern in all_locales(NEGATION_PATTERNS))


def detect_modification_heuristic(message: str) -> ModificationResult:
    """
    Extract a modification instruction with regex heuristics.

    Families are tried in priority order: serving size, dietary adaptation,
    speed, removal, substitution, addition, adjustment. First match wins.

    Args:
        message: Raw user message

    Returns:
        ModificationResult; modifications is empty when nothing matched
    """
    trimmed = message.strip()
    if not trimmed:
        return ModificationResult(False, "")

    match = _first_match(trimmed, SERVING_SIZE_PATTERNS)
    if match:
        return ModificationResult(True, f"adjust servings to {match.group(1)}")

    match = _first_match(trimmed, DIETARY_ADAPTATION_PATTERNS)
    if match:
        return ModificationResult(True, f"adapt to {match.group(1).strip().lower()}")

    if _first_match(trimmed, SPEED_PATTERNS):
        return ModificationResult(True, "make it faster and simpler")

    match = _first_match(trimmed, REMOVAL_PATTERNS)
    if match:
        return ModificationResult(True, f"remove {_clean(match.group(match.lastindex))}")

    # Substitution before addition: "change X for Y" is a swap
    match = _first_match(trimmed, SUBSTITUTION_PATTERNS)
    if match:
        return ModificationResult(
            True,
            f"replace {_clean(match.group(1))} with {_clean(match.group(2))}",
        )

    # Addition before adjustment: "ponle más ajo" adds, it does not adjust
    match = _first_match(trimmed, ADDITION_PATTERNS)
    if match:
        return ModificationResult(True, f"add {_clean(match.group(1))}")

    match = _first_match(trimmed, ADJUSTMENT_PATTERNS)
    if match:
        return ModificationResult(True, f"adjust {_clean(match.group(match.lastindex))}")

    return ModificationResult(False, "")


def detect_modification_intent(
    message: str,
    context: ConversationContext,
) -> ModificationResult:
    """
    Decide whether a message modifies the active recipe.

    Args:
        message: Raw user message
        context: Conversation context for this turn

    Returns:
        ModificationResult
    """
    if not context.has_recipe:
        return ModificationResult(False, "")

    if is_conversational_negation(message):
        logger.debug("modification_negation_detected", message=message[:50])
        return ModificationResult(False, "")

    result = detect_modification_heuristic(message)
    if result.is_modification:
        logger.debug(
            "modification_detected",
            recipe=context.last_recipe_name or "untitled",
            modifications=result.modifications,
        )
    return result
