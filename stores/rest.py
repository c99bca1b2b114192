"""
REST Stores

Plan and pantry stores for a hosted Postgres exposed through PostgREST
(the REST interface Supabase serves under /rest/v1).
"""

import logging
from datetime import datetime, timezone

import requests
from pydantic import ValidationError

from constants import DEFAULT_MEAL_TYPE
from services.schemas import PantryItemRecord, PlannedRecipe, WeeklyPlanRecord
from .base import PantryStore, PlanStore, UpstreamFetchError

logger = logging.getLogger(__name__)

# Wire column names for pantry fields that differ from the Python names
PANTRY_COLUMNS = {
    'item_name': 'itemName',
    'category': 'category',
    'quantity': 'quantity',
    'unit': 'unit',
    'expiration_date': 'expirationDate',
}


def _now_iso():
    return datetime.now(timezone.utc).isoformat()


def _json_value(value):
    return value.isoformat() if hasattr(value, 'isoformat') else value


class RestClient:
    """Thin wrapper around a PostgREST endpoint."""

    def __init__(self, base_url, api_key, timeout=10.0, session=None):
        if not base_url:
            raise ValueError("SUPABASE_URL is required for the REST stores")
        self.base_url = base_url.rstrip('/') + '/rest/v1'
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'apikey': api_key or '',
            'Authorization': f'Bearer {api_key or ""}',
            'Content-Type': 'application/json',
        })

    def request(self, method, table, params=None, json=None, prefer=None):
        url = f"{self.base_url}/{table}"
        headers = {'Prefer': prefer} if prefer else None
        try:
            resp = self.session.request(method, url, params=params, json=json,
                                        headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, table, e)
            raise UpstreamFetchError(f'Request to {table} failed') from e

        if not resp.content:
            return []
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamFetchError(f'Invalid response from {table}') from e

    def select(self, table, **params):
        params.setdefault('select', '*')
        return self.request('GET', table, params=params)

    def insert(self, table, rows):
        return self.request('POST', table, json=rows, prefer='return=representation')

    def update(self, table, values, **params):
        return self.request('PATCH', table, params=params, json=values, prefer='return=representation')

    def delete(self, table, **params):
        return self.request('DELETE', table, params=params, prefer='return=representation')


def _plan_record(row):
    try:
        return WeeklyPlanRecord(
            id=row['id'],
            user_id=row.get('userid', ''),
            week_start_date=row.get('weekStartDate'),
        )
    except (KeyError, TypeError, ValidationError) as e:
        raise UpstreamFetchError('Invalid weekly plan in response') from e


def _pantry_record(row):
    try:
        return PantryItemRecord.model_validate(row)
    except ValidationError as e:
        raise UpstreamFetchError('Invalid pantry item in response') from e


class RestPlanStore(PlanStore):

    def __init__(self, client):
        self.client = client

    def latest_plan(self, user_id):
        rows = self.client.select('weekly_plans', userid=f'eq.{user_id}',
                                  order='weekStartDate.desc', limit=1)
        return _plan_record(rows[0]) if rows else None

    def plan_recipes(self, plan_id):
        rows = self.client.select('weekly_plan_recipes', weeklyPlanId=f'eq.{plan_id}',
                                  order='plannedDate.asc')
        recipes = []
        for row in rows:
            try:
                recipes.append(PlannedRecipe.model_validate(row))
            except ValidationError as e:
                logger.warning("Skipping malformed planned recipe row: %s", e)
        return recipes

    def save_plan(self, user_id, week_start_date, recipes):
        week_start = _json_value(week_start_date)
        existing = self.client.select('weekly_plans', userid=f'eq.{user_id}',
                                      weekStartDate=f'eq.{week_start}', limit=1)
        if existing:
            plan_id = existing[0]['id']
            self.client.update('weekly_plans', {'updatedAt': _now_iso()}, id=f'eq.{plan_id}')
            self.client.delete('weekly_plan_recipes', weeklyPlanId=f'eq.{plan_id}')
        else:
            now = _now_iso()
            created = self.client.insert('weekly_plans', [{
                'userid': user_id,
                'weekStartDate': week_start,
                'createdAt': now,
                'updatedAt': now,
            }])
            if not created or 'id' not in created[0]:
                raise UpstreamFetchError('Weekly plan was not created')
            plan_id = created[0]['id']

        if recipes:
            now = _now_iso()
            self.client.insert('weekly_plan_recipes', [{
                'weeklyPlanId': plan_id,
                'mealType': recipe.meal_type or DEFAULT_MEAL_TYPE,
                'plannedDate': _json_value(recipe.planned_date),
                'recipeData': recipe.recipe_data.model_dump(mode='json', by_alias=True),
                'createdAt': now,
                'updatedAt': now,
            } for recipe in recipes])
        return plan_id


class RestPantryStore(PantryStore):

    def __init__(self, client):
        self.client = client

    def list_items(self, user_id):
        rows = self.client.select('pantry_items', userid=f'eq.{user_id}', order='createdAt.desc')
        items = []
        for row in rows:
            try:
                items.append(PantryItemRecord.model_validate(row))
            except ValidationError as e:
                logger.warning("Skipping malformed pantry item row: %s", e)
        return items

    def item_names(self, user_id):
        rows = self.client.select('pantry_items', select='itemName', userid=f'eq.{user_id}')
        return [(row.get('itemName') if isinstance(row, dict) else None) or '' for row in rows]

    def add_item(self, user_id, name, category='Other', quantity=1.0, unit=None):
        now = _now_iso()
        rows = self.client.insert('pantry_items', [{
            'itemName': name,
            'category': category,
            'quantity': quantity,
            'unit': unit,
            'userid': user_id,
            'createdAt': now,
            'updatedAt': now,
        }])
        if not rows:
            raise UpstreamFetchError('Pantry item was not created')
        return _pantry_record(rows[0])

    def update_item(self, user_id, item_id, changes):
        values = {PANTRY_COLUMNS[field]: _json_value(value)
                  for field, value in changes.items() if field in PANTRY_COLUMNS}
        values['updatedAt'] = _now_iso()
        rows = self.client.update('pantry_items', values, id=f'eq.{item_id}', userid=f'eq.{user_id}')
        return _pantry_record(rows[0]) if rows else None

    def delete_item(self, user_id, item_id):
        rows = self.client.delete('pantry_items', id=f'eq.{item_id}', userid=f'eq.{user_id}')
        return bool(rows)

    def clear(self, user_id):
        rows = self.client.delete('pantry_items', userid=f'eq.{user_id}')
        return len(rows)
