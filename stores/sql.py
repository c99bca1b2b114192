"""
SQL Stores

Plan and pantry stores backed by the application's Flask-SQLAlchemy
database.
"""

import logging
from functools import wraps

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from constants import DEFAULT_MEAL_TYPE
from models import db, PantryItem, WeeklyPlan, WeeklyPlanRecipe
from services.schemas import PantryItemRecord, PlannedRecipe, WeeklyPlanRecord
from .base import PantryStore, PlanStore, UpstreamFetchError

logger = logging.getLogger(__name__)

PANTRY_FIELDS = {'item_name', 'category', 'quantity', 'unit', 'expiration_date'}


def database_errors(func):
    """Roll back and re-raise database failures as UpstreamFetchError."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception("Database error in %s", func.__name__)
            raise UpstreamFetchError('Database request failed') from e
    return wrapper


def _pantry_record(item):
    return PantryItemRecord(
        id=item.id,
        item_name=item.item_name,
        category=item.category,
        quantity=item.quantity,
        unit=item.unit,
        expiration_date=item.expiration_date,
    )


class SqlPlanStore(PlanStore):

    @database_errors
    def latest_plan(self, user_id):
        plan = (WeeklyPlan.query.filter_by(user_id=user_id)
                .order_by(WeeklyPlan.week_start_date.desc(), WeeklyPlan.id.desc())
                .first())
        if not plan:
            return None
        return WeeklyPlanRecord(id=plan.id, user_id=plan.user_id, week_start_date=plan.week_start_date)

    @database_errors
    def plan_recipes(self, plan_id):
        rows = (WeeklyPlanRecipe.query.filter_by(weekly_plan_id=plan_id)
                .order_by(WeeklyPlanRecipe.planned_date, WeeklyPlanRecipe.id)
                .all())
        recipes = []
        for row in rows:
            try:
                recipes.append(PlannedRecipe(
                    meal_type=row.meal_type,
                    planned_date=row.planned_date,
                    recipe_data=row.recipe_data,
                ))
            except ValidationError as e:
                logger.warning("Skipping planned recipe %s: %s", row.id, e)
        return recipes

    @database_errors
    def save_plan(self, user_id, week_start_date, recipes):
        plan = WeeklyPlan.query.filter_by(user_id=user_id, week_start_date=week_start_date).first()
        if plan:
            # Replace the week's recipes
            WeeklyPlanRecipe.query.filter_by(weekly_plan_id=plan.id).delete()
        else:
            plan = WeeklyPlan(user_id=user_id, week_start_date=week_start_date)
            db.session.add(plan)
            db.session.flush()

        for recipe in recipes:
            db.session.add(WeeklyPlanRecipe(
                weekly_plan_id=plan.id,
                meal_type=recipe.meal_type or DEFAULT_MEAL_TYPE,
                planned_date=recipe.planned_date,
                recipe_data=recipe.recipe_data.model_dump(mode='json', by_alias=True),
            ))
        db.session.commit()
        return plan.id


class SqlPantryStore(PantryStore):

    def _owned(self, user_id, item_id):
        try:
            item_id = int(item_id)
        except (TypeError, ValueError):
            return None
        return PantryItem.query.filter_by(id=item_id, user_id=user_id).first()

    @database_errors
    def list_items(self, user_id):
        items = (PantryItem.query.filter_by(user_id=user_id)
                 .order_by(PantryItem.created_at.desc(), PantryItem.id.desc())
                 .all())
        return [_pantry_record(item) for item in items]

    @database_errors
    def item_names(self, user_id):
        rows = db.session.query(PantryItem.item_name).filter_by(user_id=user_id).all()
        return [row[0] for row in rows]

    @database_errors
    def add_item(self, user_id, name, category='Other', quantity=1.0, unit=None):
        item = PantryItem(user_id=user_id, item_name=name, category=category,
                          quantity=quantity, unit=unit)
        db.session.add(item)
        db.session.commit()
        return _pantry_record(item)

    @database_errors
    def update_item(self, user_id, item_id, changes):
        item = self._owned(user_id, item_id)
        if not item:
            return None
        for field, value in changes.items():
            if field in PANTRY_FIELDS:
                setattr(item, field, value)
        db.session.commit()
        return _pantry_record(item)

    @database_errors
    def delete_item(self, user_id, item_id):
        item = self._owned(user_id, item_id)
        if not item:
            return False
        db.session.delete(item)
        db.session.commit()
        return True

    @database_errors
    def clear(self, user_id):
        deleted = PantryItem.query.filter_by(user_id=user_id).delete()
        db.session.commit()
        return deleted
