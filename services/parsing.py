"""
Parsing Service

Reduces free-text ingredient and pantry strings to a canonical name used
for deduplication, pantry matching and categorization.
"""

import re
from constants import QUANTITY_UNITS, FILLER_WORDS


def _alternation(words):
    # Longest first so "cups" is tried before "cup"
    return '|'.join(re.escape(w) for w in sorted(words, key=len, reverse=True))


# "2 cups", "1/2 tsp", "1 1/2 cups", "2-3 slices" at the very start only.
# Each whitespace run has a single owner so a failed match stays linear.
LEADING_QUANTITY_RE = re.compile(
    r'^(?=\d)\d*(?:\s*\d/\d)?(?:\s*-\s*\d+)?\s*'
    r'(?:' + _alternation(QUANTITY_UNITS) + r')\b\s*'
)

LEADING_FILLER_RE = re.compile(r'^(?:' + _alternation(FILLER_WORDS) + r')\s+')

PARENTHETICAL_RE = re.compile(r'\([^)]*\)')


def strip_leading_quantity(text):
    """Remove one leading quantity-and-unit phrase."""
    return LEADING_QUANTITY_RE.sub('', text, count=1)


def strip_leading_filler(text):
    """Remove one leading filler word such as 'fresh' or 'the'."""
    return LEADING_FILLER_RE.sub('', text, count=1)


def normalize_ingredient(text):
    """
    Normalize a raw ingredient or pantry string.

    Each pass runs once, so "2 large ripe tomatoes" keeps "ripe". Returns
    an empty string for anything that is not text.

    >>> normalize_ingredient('2 cups cooked rice')
    'cooked rice'
    >>> normalize_ingredient('large ripe tomato (optional)')
    'ripe tomato'
    """
    if not isinstance(text, str):
        return ''

    normalized = text.lower()
    normalized = strip_leading_quantity(normalized)
    normalized = strip_leading_filler(normalized)
    normalized = PARENTHETICAL_RE.sub('', normalized)

    normalized = normalized.strip()
    if normalized.endswith(','):
        normalized = normalized[:-1]

    # Collapse gaps left by removed asides
    return ' '.join(normalized.split())
