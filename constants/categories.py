"""
Shopping Category Constants

Keyword groups used to place a missing ingredient in a store section.
Order matters: the first group with a matching keyword wins.
"""

DEFAULT_CATEGORY = 'Other'

# (category, keywords) in priority order
CATEGORY_KEYWORDS = (
    ('Meat', (
        'chicken', 'beef', 'pork', 'turkey', 'lamb', 'bacon', 'ham',
        'sausage', 'steak', 'ground meat', 'veal', 'venison', 'brisket',
    )),
    ('Seafood', (
        'fish', 'shrimp', 'salmon', 'tuna', 'cod', 'tilapia', 'crab',
        'lobster', 'scallop', 'clam', 'mussel', 'oyster',
    )),
    ('Plant Protein', (
        'tofu', 'tempeh', 'seitan', 'protein', 'lentil', 'bean', 'chickpea',
    )),
    ('Dairy', (
        'milk', 'cheese', 'yogurt', 'cream', 'butter', 'sour cream',
    )),
    ('Fruit', (
        'apple', 'banana', 'orange', 'grape', 'berry', 'blueberry',
        'strawberry', 'raspberry', 'melon', 'watermelon', 'kiwi', 'mango',
        'pineapple',
    )),
    ('Vegetables', (
        'lettuce', 'spinach', 'kale', 'carrot', 'broccoli', 'pepper',
        'onion', 'garlic', 'cucumber', 'tomato', 'potato', 'zucchini',
        'squash', 'eggplant', 'asparagus', 'celery',
    )),
    ('Pantry Staples', (
        'flour', 'sugar', 'salt', 'pepper', 'oil', 'vinegar', 'spice',
        'herb', 'oregano', 'basil', 'thyme', 'cumin', 'cinnamon', 'nutmeg',
        'vanilla', 'baking powder', 'baking soda',
    )),
    ('Bread', (
        'bread', 'bagel', 'tortilla', 'wrap', 'pita', 'bun', 'roll',
    )),
    ('Grains', (
        'pasta', 'rice', 'quinoa', 'oat', 'barley', 'couscous', 'noodle',
    )),
    ('Nuts & Seeds', (
        'almond', 'cashew', 'peanut', 'walnut', 'pecan', 'seed', 'nut',
    )),
)
