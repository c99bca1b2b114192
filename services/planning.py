"""
Weekly Plan Service

Groups a plan's recipes into a Monday-to-Sunday view.
"""

import logging

from constants import COUNTED_MEAL_TYPES, DEFAULT_MEAL_TYPE, WEEK_DAYS

logger = logging.getLogger(__name__)


def empty_week():
    return {day: {meal_type: [] for meal_type in COUNTED_MEAL_TYPES} for day in WEEK_DAYS}


def day_index(week_start_date, planned_date):
    """Days from the start of the week, clamped to 0-6."""
    return max(0, min(len(WEEK_DAYS) - 1, (planned_date - week_start_date).days))


def view_meal_type(meal_type):
    meal_type = (meal_type or '').lower()
    return meal_type if meal_type in COUNTED_MEAL_TYPES else DEFAULT_MEAL_TYPE


def group_recipes_by_day(week_start_date, recipes):
    """
    Bucket recipe payloads by weekday and meal type.

    Unknown meal types are shown as dinner. Recipes without a planned
    date, or a plan without a start date, are left out.
    """
    week = empty_week()
    if week_start_date is None:
        logger.warning("Weekly plan has no start date; returning an empty week")
        return week

    for recipe in recipes:
        if recipe.planned_date is None:
            logger.warning("Recipe %r has no planned date", recipe.recipe_data.name)
            continue
        day = WEEK_DAYS[day_index(week_start_date, recipe.planned_date)]
        week[day][view_meal_type(recipe.meal_type)].append(
            recipe.recipe_data.model_dump(mode='json', by_alias=True)
        )
    return week
