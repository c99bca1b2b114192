"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .mealplan import WeeklyPlan, WeeklyPlanRecipe
from .pantry import PantryItem
from .shopping import ShoppingItem

__all__ = [
    'db',
    'WeeklyPlan',
    'WeeklyPlanRecipe',
    'PantryItem',
    'ShoppingItem',
]
