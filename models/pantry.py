"""
Pantry Model

Contains the PantryItem model for tracking what a user already has.
"""

from .base import db
from .mealplan import utcnow


class PantryItem(db.Model):
    """Free-text inventory entry owned by a user (brand names, plurals and all)."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    item_name = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), default='Other')
    quantity = db.Column(db.Float, default=1.0)
    unit = db.Column(db.String(20), nullable=True)
    expiration_date = db.Column(db.Date, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)
