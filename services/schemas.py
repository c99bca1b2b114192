"""
Record Schemas

Validated shapes for the data that flows between the stores, the
shopping list pipeline and the JSON API. Field names are snake_case in
Python and camelCase on the wire.
"""

from datetime import date, datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _coerce_date(value):
    """Accept a date, a datetime or an ISO string; anything unreadable becomes None."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


class Record(BaseModel):
    """Base for every record: camelCase aliases, construction by either name."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json(self):
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)


class RecipeData(Record):
    """Recipe payload stored with a planned recipe.

    ``ingredients`` is None when the stored value is missing or not a list.
    Non-string entries inside a list are dropped.
    """
    model_config = ConfigDict(extra='allow')

    name: str = ''
    ingredients: Optional[List[str]] = None

    @field_validator('name', mode='before')
    @classmethod
    def _name_as_text(cls, value):
        return value if isinstance(value, str) else ''

    @field_validator('ingredients', mode='before')
    @classmethod
    def _ingredients_as_list(cls, value):
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, str)]


class PlannedRecipe(Record):
    """One recipe scheduled within a weekly plan."""
    meal_type: Optional[str] = None
    planned_date: Optional[date] = None
    recipe_data: RecipeData = Field(default_factory=RecipeData)

    @field_validator('meal_type', mode='before')
    @classmethod
    def _meal_type_as_text(cls, value):
        return value if isinstance(value, str) and value else None

    @field_validator('planned_date', mode='before')
    @classmethod
    def _planned_date(cls, value):
        return _coerce_date(value)

    @field_validator('recipe_data', mode='before')
    @classmethod
    def _recipe_data_as_dict(cls, value):
        if isinstance(value, RecipeData):
            return value
        return value if isinstance(value, dict) else {}


class WeeklyPlanRecord(Record):
    id: Union[int, str]
    user_id: str
    week_start_date: Optional[date] = None

    @field_validator('user_id', mode='before')
    @classmethod
    def _user_id_as_text(cls, value):
        return str(value)

    @field_validator('week_start_date', mode='before')
    @classmethod
    def _week_start(cls, value):
        return _coerce_date(value)


class PantryItemRecord(Record):
    id: Union[int, str]
    item_name: str
    category: str = 'Other'
    quantity: float = 1.0
    unit: Optional[str] = None
    expiration_date: Optional[date] = None

    @field_validator('category', mode='before')
    @classmethod
    def _category_default(cls, value):
        return value or 'Other'

    @field_validator('quantity', mode='before')
    @classmethod
    def _quantity_default(cls, value):
        return 1.0 if value is None else value

    @field_validator('expiration_date', mode='before')
    @classmethod
    def _expiration(cls, value):
        return _coerce_date(value)


class ShoppingListEntry(Record):
    name: str
    category: str


class WeeklyShoppingList(Record):
    """Result of one shopping list computation.

    A week without a plan carries only ``shopping_list`` and ``message``.
    """
    shopping_list: List[ShoppingListEntry] = Field(default_factory=list)
    total_items: Optional[int] = None
    meal_types_included: Optional[Dict[str, int]] = None
    timestamp: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def empty(cls, message):
        return cls(shopping_list=[], message=message)
