"""
Constants Package

Word lists, category tables and validation whitelists.
"""

from .units import QUANTITY_UNITS, FILLER_WORDS
from .categories import CATEGORY_KEYWORDS, DEFAULT_CATEGORY
from .validation import (
    COUNTED_MEAL_TYPES,
    OTHER_MEAL_TYPE,
    DEFAULT_MEAL_TYPE,
    WEEK_DAYS,
    SHOPPING_SOURCES,
    MAX_LENGTHS,
)

__all__ = [
    'QUANTITY_UNITS',
    'FILLER_WORDS',
    'CATEGORY_KEYWORDS',
    'DEFAULT_CATEGORY',
    'COUNTED_MEAL_TYPES',
    'OTHER_MEAL_TYPE',
    'DEFAULT_MEAL_TYPE',
    'WEEK_DAYS',
    'SHOPPING_SOURCES',
    'MAX_LENGTHS',
]
