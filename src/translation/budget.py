"""
Translation Budget Allocation

One pipeline run translates at most ``limit`` records in total. The budget is
consumed greedily in a fixed priority order:

1. ingredients
2. useful items
3. tags

Ingredients always have first claim; tags only get what is left. Changing the
order changes which records get translated in a short run.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, TypeVar

import structlog

logger = structlog.get_logger("translation.budget")

T = TypeVar('T')

DEFAULT_TRANSLATION_LIMIT = 50


@dataclass
class TranslationAllocation:
    """Per-bucket record counts for one run. total == sum of buckets <= limit."""
    ingredient_count: int = 0
    useful_item_count: int = 0
    tag_count: int = 0
    total: int = 0


def _clamp_limit(limit) -> int:
    try:
        value = float(limit)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(value) or value <= 0:
        return 0
    return math.floor(value)


def allocate_translation_limit(
    ingredient_candidates: int,
    useful_item_candidates: int,
    tag_candidates: int,
    limit,
) -> TranslationAllocation:
    """
    Split one global record limit across the three buckets.

    Args:
        ingredient_candidates: Ingredients needing translation
        useful_item_candidates: Useful items needing translation
        tag_candidates: Tags needing translation
        limit: Global cap for the run (non-finite or <= 0 means nothing)

    Returns:
        TranslationAllocation
    """
    remaining = _clamp_limit(limit)
    counts = []

    for candidates in (ingredient_candidates, useful_item_candidates, tag_candidates):
        take = min(max(int(candidates), 0), remaining)
        counts.append(take)
        remaining -= take

    ingredient_count, useful_item_count, tag_count = counts
    return TranslationAllocation(
        ingredient_count=ingredient_count,
        useful_item_count=useful_item_count,
        tag_count=tag_count,
        total=sum(counts),
    )


def select_for_translation(
    ingredients: Sequence[T],
    useful_items: Sequence[T],
    tags: Sequence[T],
    limit=DEFAULT_TRANSLATION_LIMIT,
) -> Tuple[List[T], List[T], List[T]]:
    """
    Pick the records to translate in this run, honoring the shared budget.

    Returns:
        (ingredients, useful_items, tags) slices, in candidate order
    """
    allocation = allocate_translation_limit(len(ingredients), len(useful_items), len(tags), limit)

    logger.info(
        "translation_budget_allocated",
        limit=limit,
        ingredients=allocation.ingredient_count,
        useful_items=allocation.useful_item_count,
        tags=allocation.tag_count,
        total=allocation.total
    )

    return (
        list(ingredients[:allocation.ingredient_count]),
        list(useful_items[:allocation.useful_item_count]),
        list(tags[:allocation.tag_count]),
    )
