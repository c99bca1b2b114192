from datetime import datetime, timezone

import pytest

from conftest import FakePantryStore, FakePlanStore
from services.schemas import PlannedRecipe
from services.shopping import (
    NO_PLAN_MESSAGE,
    find_missing_ingredients,
    generate_weekly_shopping_list,
    reconcile,
)
from stores.base import UpstreamFetchError

NOW = datetime(2024, 1, 5, 12, 0, tzinfo=timezone.utc)

DINNER = {
    'mealType': 'dinner',
    'plannedDate': '2024-01-02',
    'recipeData': {
        'name': 'Chicken and rice',
        'ingredients': ['1 lb chicken breast', '2 cups rice', '1 onion'],
    },
}


def test_end_to_end_week():
    result = generate_weekly_shopping_list(
        'user-1', FakePlanStore([DINNER]), FakePantryStore(['rice', 'onions']), now=NOW,
    )
    assert result.to_json() == {
        'shoppingList': [{'name': 'chicken breast', 'category': 'Meat'}],
        'totalItems': 1,
        'mealTypesIncluded': {'breakfast': 0, 'lunch': 0, 'dinner': 1, 'other': 0},
        'timestamp': '2024-01-05T12:00:00+00:00',
    }


def test_no_plan_is_an_empty_result():
    result = generate_weekly_shopping_list('user-1', FakePlanStore(has_plan=False), FakePantryStore())
    assert result.to_json() == {'shoppingList': [], 'message': NO_PLAN_MESSAGE}


@pytest.mark.parametrize('plan_store, pantry_store, message', [
    (FakePlanStore(fail_on='plan'), FakePantryStore(), 'Failed to fetch weekly plan'),
    (FakePlanStore(fail_on='recipes'), FakePantryStore(), 'Failed to fetch weekly plan recipes'),
    (FakePlanStore([DINNER]), FakePantryStore(fail=True), 'Failed to fetch pantry items'),
])
def test_fetch_failures(plan_store, pantry_store, message):
    with pytest.raises(UpstreamFetchError) as exc_info:
        generate_weekly_shopping_list('user-1', plan_store, pantry_store)
    assert str(exc_info.value) == message


def test_pantry_names_are_normalized():
    recipes = [PlannedRecipe.model_validate(DINNER)]
    result = reconcile(recipes, ['2 lbs Chicken Breast (Costco)', 'Basmati Rice', 'Yellow Onions'], now=NOW)
    assert [entry.name for entry in result.shopping_list] == []


def test_blank_pantry_names_do_not_cover_everything():
    recipes = [PlannedRecipe.model_validate(DINNER)]
    result = reconcile(recipes, ['', '(misc)'], now=NOW)
    assert result.total_items == 3


def test_malformed_recipe_does_not_blank_the_week():
    broken = {'mealType': 'lunch', 'recipeData': {'name': 'Broken', 'ingredients': 'rice'}}
    recipes = [PlannedRecipe.model_validate(r) for r in (broken, DINNER)]
    result = reconcile(recipes, [], now=NOW)
    assert [entry.name for entry in result.shopping_list] == ['chicken breast', 'rice', '1 onion']
    assert [entry.category for entry in result.shopping_list] == ['Meat', 'Grains', 'Vegetables']
    assert result.meal_types_included == {'breakfast': 0, 'lunch': 1, 'dinner': 1, 'other': 0}


def test_find_missing_keeps_order():
    assert find_missing_ingredients(['salt', 'garlic', 'basil'], ['sea salt']) == ['garlic', 'basil']
