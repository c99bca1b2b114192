"""
Shopping List Service

Derives the weekly shopping list: ingredients the latest weekly plan needs
that the pantry does not already cover.
"""

import logging
from datetime import datetime, timezone

from stores.base import UpstreamFetchError
from .extraction import extract_ingredients
from .matching import categorize_ingredient, is_ingredient_in_pantry
from .parsing import normalize_ingredient
from .schemas import ShoppingListEntry, WeeklyShoppingList

logger = logging.getLogger(__name__)

NO_PLAN_MESSAGE = 'No weekly plan found'


def find_missing_ingredients(ingredients, pantry_names):
    """Ingredients not covered by the pantry, in input order."""
    return [ing for ing in ingredients if not is_ingredient_in_pantry(ing, pantry_names)]


def reconcile(recipes, pantry_item_names, now=None):
    """
    Build a WeeklyShoppingList from planned recipes and raw pantry names.

    Pure: no I/O, no shared state.
    """
    extraction = extract_ingredients(recipes)

    pantry_names = [normalize_ingredient(name) for name in pantry_item_names]
    pantry_names = [name for name in pantry_names if name]

    missing = find_missing_ingredients(extraction.ingredients, pantry_names)

    logger.info(
        "Meal types processed: breakfast=%(breakfast)s lunch=%(lunch)s dinner=%(dinner)s other=%(other)s",
        extraction.meal_types,
    )
    logger.info("%s unique ingredients, %s pantry items, %s missing",
                len(extraction.ingredients), len(pantry_names), len(missing))

    entries = [ShoppingListEntry(name=name, category=categorize_ingredient(name)) for name in missing]
    now = now or datetime.now(timezone.utc)

    return WeeklyShoppingList(
        shopping_list=entries,
        total_items=len(entries),
        meal_types_included=extraction.meal_types,
        timestamp=now.isoformat(),
    )


def _fetch(what, fetch, *args):
    try:
        return fetch(*args)
    except UpstreamFetchError as e:
        logger.error("Error fetching %s: %s", what, e)
        raise UpstreamFetchError(f'Failed to fetch {what}') from e


def generate_weekly_shopping_list(user_id, plan_store, pantry_store, now=None):
    """
    Compute the shopping list for the user's most recent weekly plan.

    Raises UpstreamFetchError if the plan, its recipes or the pantry
    cannot be read. A user without a plan gets an empty list and a message.
    """
    plan = _fetch('weekly plan', plan_store.latest_plan, user_id)
    if plan is None:
        return WeeklyShoppingList.empty(NO_PLAN_MESSAGE)

    recipes = _fetch('weekly plan recipes', plan_store.plan_recipes, plan.id)
    pantry_item_names = _fetch('pantry items', pantry_store.item_names, user_id)

    return reconcile(recipes, pantry_item_names, now=now)
