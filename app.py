import logging
from datetime import date

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_login import current_user, login_required
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from auth import login_manager
from config import get_config
from models import db, ShoppingItem
from services import (
    categorize_ingredient,
    generate_weekly_shopping_list,
    group_recipes_by_day,
    normalize_ingredient,
)
from services.schemas import PlannedRecipe
from stores import UpstreamFetchError, build_stores
from utils import (
    sanitize_category, sanitize_ingredient, sanitize_item_name, sanitize_unit, safe_float
)

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')


# ============================================
# HELPERS
# ============================================

def plan_store():
    return current_app.extensions['plan_store']


def pantry_store():
    return current_app.extensions['pantry_store']


def json_body():
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def bad_request(message):
    return jsonify({'error': message}), 400


def not_found(message='Item not found or unauthorized'):
    return jsonify({'error': message}), 404


def no_store(response):
    """Tell browsers and proxies never to cache this response."""
    response.headers['Cache-Control'] = 'no-store, max-age=0, must-revalidate'
    response.headers['Pragma'] = 'no-cache'
    response.headers['Expires'] = '0'
    return response


def parse_date(value):
    """Parse YYYY-MM-DD (a trailing time part is ignored). Returns None if invalid."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def guess_category(name):
    return categorize_ingredient(normalize_ingredient(name))


# ============================================
# ROUTES - WEEKLY SHOPPING LIST
# ============================================

@api.route('/shopping/weekly-list', methods=['GET'])
@login_required
def weekly_shopping_list():
    result = generate_weekly_shopping_list(current_user.id, plan_store(), pantry_store())
    return no_store(jsonify(result.to_json()))


@api.route('/shopping/weekly-list', methods=['POST'])
@login_required
def weekly_shopping_list_save():
    """Add the week's missing ingredients to the shopping list (manual items preserved)"""
    result = generate_weekly_shopping_list(current_user.id, plan_store(), pantry_store())
    if result.message:
        return no_store(jsonify({'added': 0, 'shoppingItems': [], 'message': result.message}))

    # Clear only generated items, preserve manual entries
    ShoppingItem.query.filter_by(user_id=current_user.id, source='weekly-plan').delete()

    items = []
    for entry in result.shopping_list:
        item = ShoppingItem(user_id=current_user.id, name=entry.name,
                            category=entry.category, source='weekly-plan')
        db.session.add(item)
        items.append(item)
    db.session.commit()

    logger.info("Added %s weekly plan items to the shopping list", len(items))
    return no_store(jsonify({'added': len(items), 'shoppingItems': [i.to_dict() for i in items]}))


# ============================================
# ROUTES - SHOPPING LIST
# ============================================

def _owned_shopping_item(item_id):
    return ShoppingItem.query.filter_by(id=item_id, user_id=current_user.id).first()


@api.route('/shopping', methods=['GET'])
@login_required
def shopping_list():
    items = (ShoppingItem.query.filter_by(user_id=current_user.id)
             .order_by(ShoppingItem.checked, ShoppingItem.category, ShoppingItem.name)
             .all())
    return jsonify({'shoppingItems': [item.to_dict() for item in items]})


@api.route('/shopping', methods=['POST'])
@login_required
def shopping_add():
    body = json_body()
    name = sanitize_item_name(body.get('name'))
    if not name:
        return bad_request('Name is required')

    item = ShoppingItem(
        user_id=current_user.id,
        name=name,
        category=sanitize_category(body.get('category'), default=guess_category(name)),
        quantity=safe_float(body.get('quantity'), default=1.0, min_val=0),
        unit=sanitize_unit(body.get('unit')) or 'item',
        source='manual',
    )
    db.session.add(item)
    db.session.commit()
    return jsonify({'shoppingItem': item.to_dict()}), 201


@api.route('/shopping/bulk', methods=['POST'])
@login_required
def shopping_add_bulk():
    items = json_body().get('items')
    if not isinstance(items, list) or not items:
        return bad_request('Valid items array is required')

    added = []
    for raw in items:
        if not isinstance(raw, dict):
            continue
        name = sanitize_item_name(raw.get('name'))
        if not name:
            continue
        item = ShoppingItem(
            user_id=current_user.id,
            name=name,
            category=sanitize_category(raw.get('category'), default=guess_category(name)),
            source='manual',
        )
        db.session.add(item)
        added.append(item)

    if not added:
        return bad_request('No valid items to add')
    db.session.commit()
    return jsonify({'added': len(added), 'shoppingItems': [i.to_dict() for i in added]}), 201


@api.route('/shopping/<int:item_id>', methods=['PUT'])
@login_required
def shopping_update(item_id):
    item = _owned_shopping_item(item_id)
    if not item:
        return not_found()

    body = json_body()
    if 'name' in body:
        name = sanitize_item_name(body['name'])
        if not name:
            return bad_request('Name cannot be empty')
        item.name = name
    if 'category' in body:
        item.category = sanitize_category(body['category'])
    if 'quantity' in body:
        item.quantity = safe_float(body['quantity'], default=item.quantity, min_val=0)
    if 'unit' in body:
        item.unit = sanitize_unit(body['unit']) or 'item'
    if 'isChecked' in body:
        item.checked = bool(body['isChecked'])
    db.session.commit()
    return jsonify({'shoppingItem': item.to_dict()})


@api.route('/shopping/<int:item_id>', methods=['DELETE'])
@login_required
def shopping_delete(item_id):
    item = _owned_shopping_item(item_id)
    if not item:
        return not_found()
    db.session.delete(item)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# ROUTES - PANTRY
# ============================================

@api.route('/pantry', methods=['GET'])
@login_required
def pantry_list():
    items = pantry_store().list_items(current_user.id)
    return jsonify({'pantryItems': [item.to_json() for item in items]})


@api.route('/pantry', methods=['POST'])
@login_required
def pantry_add():
    body = json_body()
    name = sanitize_item_name(body.get('name'))
    if not name:
        return bad_request('Name is required')

    item = pantry_store().add_item(
        current_user.id,
        name,
        category=sanitize_category(body.get('category')),
        quantity=safe_float(body.get('quantity'), default=1.0, min_val=0),
        unit=sanitize_unit(body.get('unit')),
    )
    return jsonify({'pantryItem': item.to_json()}), 201


@api.route('/pantry/<item_id>', methods=['PUT'])
@login_required
def pantry_update(item_id):
    body = json_body()
    changes = {}
    if 'name' in body:
        name = sanitize_item_name(body['name'])
        if not name:
            return bad_request('Name cannot be empty')
        changes['item_name'] = name
    if 'category' in body:
        changes['category'] = sanitize_category(body['category'])
    if 'quantity' in body:
        changes['quantity'] = safe_float(body['quantity'], default=1.0, min_val=0)
    if 'unit' in body:
        changes['unit'] = sanitize_unit(body['unit'])
    if body.get('expiration'):
        expiration = parse_date(body['expiration'])
        if expiration is None:
            return bad_request('expiration must be a date (YYYY-MM-DD)')
        changes['expiration_date'] = expiration

    item = pantry_store().update_item(current_user.id, item_id, changes)
    if item is None:
        return not_found()
    return jsonify({'pantryItem': item.to_json()})


@api.route('/pantry/<item_id>', methods=['DELETE'])
@login_required
def pantry_delete(item_id):
    if not pantry_store().delete_item(current_user.id, item_id):
        return not_found('Item not found or you do not have permission to delete it')
    return jsonify({'success': True})


@api.route('/pantry/clear', methods=['DELETE'])
@login_required
def pantry_clear():
    deleted = pantry_store().clear(current_user.id)
    return jsonify({'success': True, 'deleted': deleted,
                    'message': 'All pantry items cleared successfully'})


# ============================================
# ROUTES - WEEKLY PLAN
# ============================================

@api.route('/weekly-plan', methods=['GET'])
@login_required
def weekly_plan():
    plan = plan_store().latest_plan(current_user.id)
    if plan is None:
        return jsonify({'weeklyPlan': None})

    recipes = plan_store().plan_recipes(plan.id)
    week = group_recipes_by_day(plan.week_start_date, recipes)
    return jsonify({'weeklyPlan': {**plan.to_json(), **week}})


@api.route('/weekly-plan', methods=['POST'])
@login_required
def weekly_plan_save():
    body = json_body()
    week_start_date = parse_date(body.get('weekStartDate'))
    if week_start_date is None:
        return bad_request('weekStartDate is required')

    raw_recipes = body.get('recipes')
    if not isinstance(raw_recipes, list):
        return bad_request('recipes must be a valid array')

    try:
        recipes = [PlannedRecipe.model_validate(raw) for raw in raw_recipes]
    except ValidationError:
        return bad_request('Each recipe must be an object')

    for recipe in recipes:
        ingredients = recipe.recipe_data.ingredients
        if ingredients is not None:
            recipe.recipe_data.ingredients = [
                text for text in (sanitize_ingredient(raw) for raw in ingredients) if text
            ]

    plan_id = plan_store().save_plan(current_user.id, week_start_date, recipes)
    return jsonify({'success': True, 'weeklyPlanId': plan_id})


# ============================================
# APP FACTORY
# ============================================

def register_error_handlers(app):

    @app.errorhandler(UpstreamFetchError)
    def upstream_error(error):
        return jsonify({'error': str(error)}), 500

    @app.errorhandler(SQLAlchemyError)
    def database_error(error):
        db.session.rollback()
        logger.error("Database error: %s", error)
        return jsonify({'error': 'Database request failed'}), 500

    @app.errorhandler(404)
    def page_not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405


def init_db(app):
    """Create tables for the local database."""
    with app.app_context():
        db.create_all()


def create_app(config_name=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    logging.basicConfig(level=app.config['LOG_LEVEL'])

    db.init_app(app)
    login_manager.init_app(app)

    plan, pantry = build_stores(app.config)
    app.extensions['plan_store'] = plan
    app.extensions['pantry_store'] = pantry

    app.register_blueprint(api)
    register_error_handlers(app)
    init_db(app)
    return app


if __name__ == '__main__':
    # host='0.0.0.0' allows access from other devices on the network
    create_app().run(host='0.0.0.0', port=5000, use_reloader=False)
