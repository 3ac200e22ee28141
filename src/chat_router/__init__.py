"""
Chat Router Module for the recipe assistant.

Per-turn decision layer: admission control (rate limit, voice quota),
tool-choice forcing from pattern-based intent and modification detection,
and fixed replies for finished tool calls.
"""

from .intent_classifier import has_high_recipe_intent, has_search_intent
from .modification_detector import (
    ConversationContext,
    ModificationResult,
    detect_modification_intent,
    detect_modification_heuristic,
    is_conversational_negation,
)
from .tool_routing import (
    ToolDecision,
    decide_tool_choice,
    SEARCH_RECIPES,
    GENERATE_CUSTOM_RECIPE,
    MODIFY_RECIPE,
    RETRIEVE_COOKED_RECIPES,
)
from .fixed_messages import (
    ToolOutcome,
    build_fixed_message,
    build_search_results_message,
    build_no_search_results_message,
    build_cooked_history_message,
    build_empty_cooked_history_message,
    build_custom_recipe_ready_message,
    outcome_for_tool_result,
)
from .rate_limiter import (
    RateLimitConfig,
    RateLimitResult,
    check_rate_limit,
    retry_after_seconds,
    RATE_LIMIT_RPC,
)
from .quota_resolver import (
    QuotaStatus,
    get_quota_limit_for_user,
    evaluate_quota,
)

__all__ = [
    'has_high_recipe_intent',
    'has_search_intent',
    'ConversationContext',
    'ModificationResult',
    'detect_modification_intent',
    'detect_modification_heuristic',
    'is_conversational_negation',
    'ToolDecision',
    'decide_tool_choice',
    'SEARCH_RECIPES',
    'GENERATE_CUSTOM_RECIPE',
    'MODIFY_RECIPE',
    'RETRIEVE_COOKED_RECIPES',
    'ToolOutcome',
    'build_fixed_message',
    'build_search_results_message',
    'build_no_search_results_message',
    'build_cooked_history_message',
    'build_empty_cooked_history_message',
    'build_custom_recipe_ready_message',
    'outcome_for_tool_result',
    'RateLimitConfig',
    'RateLimitResult',
    'check_rate_limit',
    'retry_after_seconds',
    'RATE_LIMIT_RPC',
    'QuotaStatus',
    'get_quota_limit_for_user',
    'evaluate_quota',
]
