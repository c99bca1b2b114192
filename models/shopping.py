"""
Shopping Model

Contains the ShoppingItem model for a user's persisted shopping list.
"""

from .base import db


class ShoppingItem(db.Model):
    """Shopping list item with category and source information."""
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), default='Other')
    quantity = db.Column(db.Float, default=1.0)
    unit = db.Column(db.String(20), default='item')
    checked = db.Column(db.Boolean, default=False)
    # Source tracking: 'manual' (user added) or 'weekly-plan' (generated from the plan)
    source = db.Column(db.String(20), default='manual')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'quantity': self.quantity,
            'unit': self.unit,
            'isChecked': self.checked,
            'source': self.source,
        }
