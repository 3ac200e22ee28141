"""
Translation Pipeline Module.

Budget allocation for batch translation runs.
"""

from .budget import (
    TranslationAllocation,
    allocate_translation_limit,
    select_for_translation,
    DEFAULT_TRANSLATION_LIMIT,
)

__all__ = [
    'TranslationAllocation',
    'allocate_translation_limit',
    'select_for_translation',
    'DEFAULT_TRANSLATION_LIMIT',
]
