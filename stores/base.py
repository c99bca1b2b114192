"""
Store Interfaces

The shopping list pipeline and the API routes only talk to these
interfaces. Concrete stores are created per application in create_app().
"""

from abc import ABC, abstractmethod


class UpstreamFetchError(Exception):
    """Raised when a backing store cannot answer a request.

    The message is safe to show to API callers.
    """
    pass


class PlanStore(ABC):
    """Weekly plans and the recipes planned in them."""

    @abstractmethod
    def latest_plan(self, user_id):
        """Return the user's most recent WeeklyPlanRecord, or None."""

    @abstractmethod
    def plan_recipes(self, plan_id):
        """Return the PlannedRecipe list of a plan, ordered by planned date."""

    @abstractmethod
    def save_plan(self, user_id, week_start_date, recipes):
        """Create or replace the plan for a week and return its id."""


class PantryStore(ABC):
    """A user's pantry inventory."""

    @abstractmethod
    def list_items(self, user_id):
        """Return PantryItemRecords, newest first."""

    @abstractmethod
    def add_item(self, user_id, name, category='Other', quantity=1.0, unit=None):
        """Add an item and return its PantryItemRecord."""

    @abstractmethod
    def update_item(self, user_id, item_id, changes):
        """Apply field changes; return the updated record or None if not found."""

    @abstractmethod
    def delete_item(self, user_id, item_id):
        """Delete one item; return False if it does not exist for this user."""

    @abstractmethod
    def clear(self, user_id):
        """Delete every pantry item of the user."""

    def item_names(self, user_id):
        return [item.item_name for item in self.list_items(user_id)]
