"""
Ingredient Extraction Service

Collects the distinct normalized ingredients of a week's planned recipes.
"""

import logging
from collections import namedtuple

from constants import COUNTED_MEAL_TYPES, OTHER_MEAL_TYPE
from .parsing import normalize_ingredient

logger = logging.getLogger(__name__)

ExtractionResult = namedtuple('ExtractionResult', ['ingredients', 'meal_types'])


def empty_meal_type_stats():
    stats = {meal_type: 0 for meal_type in COUNTED_MEAL_TYPES}
    stats[OTHER_MEAL_TYPE] = 0
    return stats


def classify_meal_type(meal_type):
    """Map a stated meal type onto breakfast/lunch/dinner, or 'other'."""
    meal_type = (meal_type or '').lower()
    return meal_type if meal_type in COUNTED_MEAL_TYPES else OTHER_MEAL_TYPE


def extract_ingredients(recipes):
    """
    Walk planned recipes and return an ExtractionResult.

    ingredients: normalized names in first-seen order, no duplicates.
    meal_types: count of recipes per meal type, for diagnostics only.

    Recipes without an ingredient list contribute nothing.
    """
    ingredients = []
    seen = set()
    meal_types = empty_meal_type_stats()

    for recipe in recipes:
        meal_types[classify_meal_type(recipe.meal_type)] += 1

        raw_ingredients = recipe.recipe_data.ingredients
        if raw_ingredients is None:
            logger.warning("Skipping recipe %r: ingredients missing or not a list",
                           recipe.recipe_data.name)
            continue

        for raw in raw_ingredients:
            name = normalize_ingredient(raw)
            if name and name not in seen:
                seen.add(name)
                ingredients.append(name)

    return ExtractionResult(ingredients, meal_types)
