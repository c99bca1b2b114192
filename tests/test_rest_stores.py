import json
import logging
from datetime import date

import pytest
import requests

from services.schemas import PlannedRecipe
from services.shopping import generate_weekly_shopping_list
from stores import build_stores
from stores.base import UpstreamFetchError
from stores.rest import RestClient, RestPantryStore, RestPlanStore


class FakeResponse:

    def __init__(self, payload, status_code=200):
        self.status_code = status_code
        self.content = json.dumps(payload).encode() if payload is not None else b''
        self._payload = payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} error')

    def json(self):
        return self._payload


class FakeSession:
    """Answers PostgREST calls from a {(method, table): payload} map and records them."""

    def __init__(self, responses=None, error=None):
        self.headers = {}
        self.responses = responses or {}
        self.error = error
        self.calls = []

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        table = url.rsplit('/', 1)[-1]
        self.calls.append({'method': method, 'table': table, 'params': params,
                           'json': json, 'headers': headers, 'timeout': timeout})
        if self.error:
            raise self.error
        payload = self.responses.get((method, table), [])
        if isinstance(payload, FakeResponse):
            return payload
        return FakeResponse(payload)


def make_client(session):
    return RestClient('https://db.example.test/', 'secret-key', timeout=3, session=session)


def test_client_sets_auth_headers():
    session = FakeSession()
    client = make_client(session)
    assert client.base_url == 'https://db.example.test/rest/v1'
    assert session.headers['apikey'] == 'secret-key'
    assert session.headers['Authorization'] == 'Bearer secret-key'


def test_client_requires_url():
    with pytest.raises(ValueError):
        RestClient('', 'key', session=FakeSession())


def test_latest_plan_query():
    session = FakeSession({('GET', 'weekly_plans'): [
        {'id': 'plan-9', 'userid': 'u1', 'weekStartDate': '2024-01-08T00:00:00+00:00'},
    ]})
    plan = RestPlanStore(make_client(session)).latest_plan('u1')

    assert plan.id == 'plan-9'
    assert plan.week_start_date == date(2024, 1, 8)
    call = session.calls[0]
    assert call['params'] == {'select': '*', 'userid': 'eq.u1', 'order': 'weekStartDate.desc', 'limit': 1}
    assert call['timeout'] == 3


def test_latest_plan_none():
    assert RestPlanStore(make_client(FakeSession())).latest_plan('u1') is None


def test_plan_recipes_skips_malformed_rows():
    session = FakeSession({('GET', 'weekly_plan_recipes'): [
        'garbage',
        {'mealType': 'lunch', 'plannedDate': '2024-01-02', 'recipeData': {'name': 'Soup', 'ingredients': ['1 cup broth']}},
        {'mealType': 'dinner', 'recipeData': None},
    ]})
    recipes = RestPlanStore(make_client(session)).plan_recipes('plan-9')

    assert len(recipes) == 2
    assert recipes[0].recipe_data.ingredients == ['1 cup broth']
    assert recipes[1].recipe_data.ingredients is None


def test_save_plan_creates_plan_and_recipes():
    session = FakeSession({
        ('GET', 'weekly_plans'): [],
        ('POST', 'weekly_plans'): [{'id': 42}],
    })
    recipe = PlannedRecipe.model_validate({'plannedDate': '2024-01-02', 'recipeData': {'name': 'Tacos'}})
    plan_id = RestPlanStore(make_client(session)).save_plan('u1', date(2024, 1, 1), [recipe])

    assert plan_id == 42
    inserted = [c for c in session.calls if c['method'] == 'POST' and c['table'] == 'weekly_plan_recipes']
    row = inserted[0]['json'][0]
    assert row['weeklyPlanId'] == 42
    assert row['mealType'] == 'dinner'
    assert row['plannedDate'] == '2024-01-02'
    assert row['recipeData']['name'] == 'Tacos'
    assert inserted[0]['headers'] == {'Prefer': 'return=representation'}


def test_save_plan_replaces_existing_week():
    session = FakeSession({('GET', 'weekly_plans'): [{'id': 7, 'userid': 'u1'}]})
    plan_id = RestPlanStore(make_client(session)).save_plan('u1', date(2024, 1, 1), [])

    assert plan_id == 7
    methods = [(c['method'], c['table']) for c in session.calls]
    assert ('DELETE', 'weekly_plan_recipes') in methods
    assert ('POST', 'weekly_plans') not in methods


def test_pantry_store():
    session = FakeSession({
        ('GET', 'pantry_items'): [{'id': 1, 'itemName': 'Rice', 'quantity': 2}, {'id': 2, 'itemName': None}],
        ('PATCH', 'pantry_items'): [],
        ('DELETE', 'pantry_items'): [{'id': 1}, {'id': 3}],
    })
    store = RestPantryStore(make_client(session))

    assert store.item_names('u1') == ['Rice', '']
    assert store.update_item('u1', 5, {'item_name': 'Oats', 'expiration_date': date(2024, 3, 1)}) is None
    patch = session.calls[-1]
    assert patch['json']['itemName'] == 'Oats'
    assert patch['json']['expirationDate'] == '2024-03-01'
    assert patch['params'] == {'id': 'eq.5', 'userid': 'eq.u1'}
    assert store.clear('u1') == 2


@pytest.mark.parametrize('session', [
    FakeSession(error=requests.ConnectionError('refused')),
    FakeSession({('GET', 'pantry_items'): FakeResponse({'message': 'oops'}, status_code=500)}),
])
def test_transport_and_http_errors(session):
    with pytest.raises(UpstreamFetchError):
        RestPantryStore(make_client(session)).item_names('u1')


def test_weekly_list_over_rest():
    session = FakeSession({
        ('GET', 'weekly_plans'): [{'id': 3, 'userid': 'u1', 'weekStartDate': '2024-01-01'}],
        ('GET', 'weekly_plan_recipes'): [{
            'mealType': 'Dinner',
            'plannedDate': '2024-01-02',
            'recipeData': {'name': 'Stir fry', 'ingredients': ['1 lb chicken breast', '2 cups rice', '1 onion']},
        }],
        ('GET', 'pantry_items'): [{'itemName': 'Rice'}, {'itemName': 'Onions'}],
    })
    client = make_client(session)
    result = generate_weekly_shopping_list('u1', RestPlanStore(client), RestPantryStore(client))

    assert [(e.name, e.category) for e in result.shopping_list] == [('chicken breast', 'Meat')]
    assert result.meal_types_included['dinner'] == 1


def test_build_stores():
    plan, pantry = build_stores({'STORE_BACKEND': 'rest', 'SUPABASE_URL': 'https://db.example.test'})
    assert isinstance(plan, RestPlanStore)
    assert isinstance(pantry, RestPantryStore)
    assert plan.client is pantry.client

    with pytest.raises(ValueError):
        build_stores({'STORE_BACKEND': 'mongo'})


def test_pantry_list_skips_malformed_rows(caplog):
    caplog.set_level(logging.WARNING, logger='stores.rest')
    session = FakeSession({('GET', 'pantry_items'): [
        {'id': 1, 'itemName': 'rice'},
        {'id': 2, 'itemName': None},
        'garbage',
    ]})
    items = RestPantryStore(make_client(session)).list_items('u1')

    assert [item.item_name for item in items] == ['rice']
    assert caplog.text.count('Skipping malformed pantry item row') == 2


def test_pantry_writes_reject_malformed_rows():
    session = FakeSession({
        ('POST', 'pantry_items'): [{'id': 9}],
        ('PATCH', 'pantry_items'): [{'itemName': 'rice'}],
    })
    store = RestPantryStore(make_client(session))

    with pytest.raises(UpstreamFetchError):
        store.add_item('u1', 'rice')
    with pytest.raises(UpstreamFetchError):
        store.update_item('u1', 9, {'item_name': 'rice'})


def test_latest_plan_rejects_malformed_row():
    session = FakeSession({('GET', 'weekly_plans'): [{'userid': 'u1'}]})
    with pytest.raises(UpstreamFetchError):
        RestPlanStore(make_client(session)).latest_plan('u1')


def test_pantry_route_skips_malformed_rows(app, client, auth_headers):
    session = FakeSession({('GET', 'pantry_items'): [{'id': 1, 'itemName': 'rice'}, {'id': 2, 'itemName': None}]})
    app.extensions['pantry_store'] = RestPantryStore(make_client(session))

    resp = client.get('/api/pantry', headers=auth_headers)

    assert resp.status_code == 200
    assert [item['itemName'] for item in resp.get_json()['pantryItems']] == ['rice']
