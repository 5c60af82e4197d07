"""
Coercion helpers for duck-typed product and variant payloads.

Payloads reach the engine either as records (ProductRecord, ProductVariant)
or as plain mappings straight from the client; these helpers read both.
"""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation


def get_field(obj, name, default=None):
    """Read `name` from a mapping key or an object attribute."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def normalize_value(value):
    """
    Coerce an attribute value to the string it is matched by.

    Blank values (None, empty or whitespace-only strings) normalize to None.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        value = 'true' if value else 'false'
    text = str(value)
    if not text.strip():
        return None
    return text


def to_decimal(value):
    """Parse a price into a Decimal, or None if it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not result.is_finite():
        return None
    return result


def to_stock(value):
    """Parse a stock level; None means stock is not tracked."""
    if value is None or isinstance(value, bool):
        return None
    try:
        stock = int(value)
    except (ValueError, TypeError):
        return None
    return max(stock, 0)
