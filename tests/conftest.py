import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from services.schemas import PlannedRecipe, WeeklyPlanRecord  # noqa: E402
from stores.base import PantryStore, PlanStore, UpstreamFetchError  # noqa: E402

USER = 'user-1'


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {'X-User-Id': USER}


class FakePlanStore(PlanStore):
    """In-memory plan store holding at most one plan per user."""

    def __init__(self, recipes=None, has_plan=True, fail_on=None):
        self.recipes = [PlannedRecipe.model_validate(r) for r in (recipes or [])]
        self.has_plan = has_plan
        self.fail_on = fail_on

    def latest_plan(self, user_id):
        if self.fail_on == 'plan':
            raise UpstreamFetchError('boom')
        if not self.has_plan:
            return None
        return WeeklyPlanRecord(id=1, user_id=user_id, week_start_date='2024-01-01')

    def plan_recipes(self, plan_id):
        if self.fail_on == 'recipes':
            raise UpstreamFetchError('boom')
        return self.recipes

    def save_plan(self, user_id, week_start_date, recipes):
        self.recipes = list(recipes)
        return 1


class FakePantryStore(PantryStore):

    def __init__(self, names=None, fail=False):
        self.names = list(names or [])
        self.fail = fail

    def item_names(self, user_id):
        if self.fail:
            raise UpstreamFetchError('boom')
        return list(self.names)

    def list_items(self, user_id):
        return []

    def add_item(self, user_id, name, category='Other', quantity=1.0, unit=None):
        self.names.append(name)

    def update_item(self, user_id, item_id, changes):
        return None

    def delete_item(self, user_id, item_id):
        return False

    def clear(self, user_id):
        self.names = []
