"""
Unit tests for Translation Budget Allocation.

Tests greedy allocation across ingredients, useful items and tags under one
global limit.
"""
import pytest

import sys
sys.path.insert(0, 'src')

from translation.budget import (
    DEFAULT_TRANSLATION_LIMIT,
    TranslationAllocation,
    allocate_translation_limit,
    select_for_translation,
)


# =============================================================================
# Test allocate_translation_limit
# =============================================================================

class TestAllocateTranslationLimit:
    """Tests for allocate_translation_limit()."""

    def test_ingredients_consume_whole_budget(self):
        assert allocate_translation_limit(25, 25, 25, 20) == TranslationAllocation(20, 0, 0, 20)

    def test_spills_into_useful_items(self):
        assert allocate_translation_limit(5, 12, 8, 10) == TranslationAllocation(5, 5, 0, 10)

    def test_spills_into_tags(self):
        assert allocate_translation_limit(3, 4, 8, 10) == TranslationAllocation(3, 4, 3, 10)

    def test_budget_larger_than_candidates(self):
        assert allocate_translation_limit(2, 3, 4, 50) == TranslationAllocation(2, 3, 4, 9)

    def test_zero_limit(self):
        assert allocate_translation_limit(5, 12, 8, 0) == TranslationAllocation()

    @pytest.mark.parametrize("limit", [-5, float("nan"), float("inf"), float("-inf"), None, "lots"])
    def test_invalid_limit_allocates_nothing(self, limit):
        assert allocate_translation_limit(5, 12, 8, limit).total == 0

    def test_fractional_limit_floors(self):
        assert allocate_translation_limit(5, 12, 8, 7.9).total == 7

    def test_numeric_string_limit(self):
        assert allocate_translation_limit(5, 12, 8, "6").ingredient_count == 5

    def test_negative_candidates_treated_as_empty(self):
        assert allocate_translation_limit(-3, 4, 0, 10) == TranslationAllocation(0, 4, 0, 4)

    def test_no_candidates(self):
        assert allocate_translation_limit(0, 0, 0, 50) == TranslationAllocation()

    @pytest.mark.parametrize("counts,limit", [
        ((25, 25, 25), 20),
        ((5, 12, 8), 10),
        ((0, 100, 1), 60),
        ((1, 1, 1), 2),
    ])
    def test_total_never_exceeds_limit(self, counts, limit):
        allocation = allocate_translation_limit(*counts, limit)
        assert allocation.total <= limit
        assert allocation.total == (
            allocation.ingredient_count + allocation.useful_item_count + allocation.tag_count
        )

    def test_priority_order(self):
        """Tags only receive budget once ingredients and useful items are exhausted."""
        allocation = allocate_translation_limit(0, 10, 10, 10)
        assert allocation.useful_item_count == 10
        assert allocation.tag_count == 0


# =============================================================================
# Test select_for_translation
# =============================================================================

class TestSelectForTranslation:
    """Tests for select_for_translation()."""

    def test_slices_in_candidate_order(self):
        ingredients = ["salt", "pepper"]
        useful_items = ["whisk", "pan", "bowl"]
        tags = ["quick", "vegan"]

        picked = select_for_translation(ingredients, useful_items, tags, limit=4)

        assert picked == (["salt", "pepper"], ["whisk", "pan"], [])

    def test_default_limit(self):
        ingredients = [f"ingredient-{i}" for i in range(80)]
        picked_ingredients, picked_items, picked_tags = select_for_translation(ingredients, [], ["tag"])

        assert len(picked_ingredients) == DEFAULT_TRANSLATION_LIMIT
        assert picked_items == []
        assert picked_tags == []

    def test_returns_lists_for_tuples(self):
        picked = select_for_translation(("a",), ("b",), ("c",), limit=3)
        assert picked == (["a"], ["b"], ["c"])

    def test_zero_limit_selects_nothing(self):
        assert select_for_translation(["a"], ["b"], ["c"], limit=0) == ([], [], [])
