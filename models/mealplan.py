"""
Meal Plan Models

Contains the WeeklyPlan and WeeklyPlanRecipe models for weekly meal planning.
"""

from datetime import datetime, timezone

from .base import db


def utcnow():
    return datetime.now(timezone.utc)


class WeeklyPlan(db.Model):
    """A user's plan for the week starting on week_start_date."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    week_start_date = db.Column(db.Date, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)
    recipes = db.relationship('WeeklyPlanRecipe', backref='weekly_plan', lazy=True,
                              cascade='all, delete-orphan',
                              order_by='WeeklyPlanRecipe.planned_date')


class WeeklyPlanRecipe(db.Model):
    """One recipe scheduled in a weekly plan. recipe_data is the raw recipe payload."""
    id = db.Column(db.Integer, primary_key=True)
    weekly_plan_id = db.Column(db.Integer, db.ForeignKey('weekly_plan.id', ondelete='CASCADE'), nullable=False, index=True)
    meal_type = db.Column(db.String(20), default='dinner')  # 'breakfast', 'lunch', 'dinner', ...
    planned_date = db.Column(db.Date, nullable=True)
    recipe_data = db.Column(db.JSON, default=dict)
