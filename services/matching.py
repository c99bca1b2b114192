"""
Ingredient Matching Service

Functions for deciding whether a pantry already covers an ingredient and
for placing missing ingredients in a shopping category.
"""

from collections import namedtuple
from constants import CATEGORY_KEYWORDS, DEFAULT_CATEGORY


class CategoryRule(namedtuple('CategoryRule', ['category', 'keywords'])):
    """A shopping category and the keywords that select it."""
    __slots__ = ()

    def matches(self, text):
        return any(keyword in text for keyword in self.keywords)


CATEGORY_RULES = tuple(CategoryRule(category, keywords) for category, keywords in CATEGORY_KEYWORDS)


def head_word(ingredient):
    """Last word of an ingredient, taken as its main noun ('rice' in 'cooked rice')."""
    words = ingredient.split()
    return words[-1] if words else ''


def is_ingredient_in_pantry(ingredient, pantry_items):
    """
    Check whether a normalized ingredient is covered by normalized pantry names.

    A pantry entry covers the ingredient when it is equal to it, when
    either one contains the other, or when it contains the ingredient's
    last word. Empty pantry entries are ignored.
    """
    if not ingredient:
        return False

    main_word = head_word(ingredient)
    for pantry_item in pantry_items:
        if not pantry_item:
            continue
        if pantry_item == ingredient:
            return True
        if pantry_item in ingredient or ingredient in pantry_item:
            return True
        if main_word and main_word in pantry_item:
            return True
    return False


def categorize_ingredient(ingredient, rules=CATEGORY_RULES):
    """Return the first category whose keywords appear in the ingredient."""
    text = (ingredient or '').lower()
    for rule in rules:
        if rule.matches(text):
            return rule.category
    return DEFAULT_CATEGORY
