# Utility modules for the pantry list app
from .sanitizer import (
    sanitize_text, sanitize_item_name, sanitize_ingredient,
    sanitize_category, sanitize_unit, safe_float
)
