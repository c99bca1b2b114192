"""
Unit and Modifier Constants

Word lists used by the text normalizer to strip the leading
quantity/unit phrase and the leading filler word from ingredient text.
"""

# Units accepted after a leading quantity ("2 cups", "1/2 tsp", "2-3 slices")
QUANTITY_UNITS = (
    'cups', 'cup',
    'tablespoons', 'tablespoon',
    'teaspoons', 'teaspoon',
    'tbsp', 'tsp',
    'ounces', 'ounce', 'oz',
    'pounds', 'pound',
    'lbs', 'lb',
    'grams', 'gram', 'g',
    'ml', 'l',
    'pinches', 'pinch',
    'dashes', 'dash',
    'to taste',
    'dozen',
    'slices', 'slice',
)

# Words dropped from the start of an ingredient (only the first one is removed)
FILLER_WORDS = (
    'of', 'a', 'an', 'the',
    'fresh', 'dried', 'frozen',
    'large', 'medium', 'small', 'ripe',
    'chopped', 'minced', 'diced', 'sliced', 'grated',
)
