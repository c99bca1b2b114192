"""
Services Package

Business logic modules for the shopping list pipeline.
"""

from .parsing import (
    normalize_ingredient,
    strip_leading_filler,
    strip_leading_quantity,
)

from .extraction import (
    classify_meal_type,
    extract_ingredients,
)

from .matching import (
    CATEGORY_RULES,
    categorize_ingredient,
    is_ingredient_in_pantry,
)

from .planning import group_recipes_by_day

from .shopping import (
    NO_PLAN_MESSAGE,
    generate_weekly_shopping_list,
    reconcile,
)

__all__ = [
    # Parsing
    'normalize_ingredient',
    'strip_leading_filler',
    'strip_leading_quantity',
    # Extraction
    'classify_meal_type',
    'extract_ingredients',
    # Matching
    'CATEGORY_RULES',
    'categorize_ingredient',
    'is_ingredient_in_pantry',
    # Planning
    'group_recipes_by_day',
    # Shopping
    'NO_PLAN_MESSAGE',
    'generate_weekly_shopping_list',
    'reconcile',
]
