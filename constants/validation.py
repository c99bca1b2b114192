"""
Validation Constants

Contains whitelist values for validating user input to prevent
injection attacks and ensure data integrity.
"""

# Meal types counted separately in the shopping list summary
COUNTED_MEAL_TYPES = ('breakfast', 'lunch', 'dinner')

# Bucket for anything that is not a counted meal type
OTHER_MEAL_TYPE = 'other'

# Meal type assumed when a planned recipe does not say
DEFAULT_MEAL_TYPE = 'dinner'

# Day labels for the weekly plan view, Monday first
WEEK_DAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')

# Where a shopping list item came from
SHOPPING_SOURCES = {'manual', 'weekly-plan'}

# Maximum field lengths for security
MAX_LENGTHS = {
    'item_name': 200,
    'category': 50,
    'unit': 20,
    'ingredient': 300,
}
