"""
Input Sanitization Module

Cleans user-supplied values before they are stored. Output is JSON, so
text is not HTML-escaped here; callers that render HTML must escape.
"""

import math
import re

from constants import MAX_LENGTHS


def sanitize_text(text, max_length=10000):
    """
    Clean a free-text value.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Stripped string without control characters, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Remove control characters and null bytes
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', ' ', text)

    # Collapse multiple spaces
    text = re.sub(r'\s+', ' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_item_name(name):
    """Sanitize a pantry or shopping item name. Empty result means invalid."""
    return sanitize_text(name, max_length=MAX_LENGTHS['item_name'])


def sanitize_ingredient(text):
    """Clean one free-text recipe ingredient line."""
    return sanitize_text(text, max_length=MAX_LENGTHS['ingredient'])


def sanitize_category(category, default='Other'):
    category = sanitize_text(category, max_length=MAX_LENGTHS['category'])
    return category or default


def sanitize_unit(unit):
    """Return a cleaned unit, or None when no unit was given."""
    unit = sanitize_text(unit, max_length=MAX_LENGTHS['unit'])
    return unit or None


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a finite float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
        if not math.isfinite(result):
            return default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default
