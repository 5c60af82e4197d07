"""
Well-known attribute metadata and sentinel values shared by the engine.
"""

from typing import NamedTuple


class AttributeMeta(NamedTuple):
    """Display metadata for an attribute key that gets special treatment."""

    label: str
    priority: int


SIZE = 'size'
COLOR = 'color'

# Rendered first, in priority order; any other key falls back to its raw name
WELL_KNOWN_ATTRIBUTES = {
    SIZE: AttributeMeta(label='Size', priority=0),
    COLOR: AttributeMeta(label='Color', priority=1),
}

# Keys a selection or variant payload may carry that are not attributes
NON_ATTRIBUTE_KEYS = frozenset([
    'id',
    'variant_id',
    'variantId',
    'sku',
    'name',
    'price',
    'stock',
    'available',
    'color_hex',
    'colorHex',
    'images',
    'labels',
    'attributes',
])

DEFAULT_VARIANT_LABEL = 'Default'

SELECT_SIZE_AND_COLOR = 'Select Size & Color'
SELECT_SIZE = 'Select Size'
SELECT_COLOR = 'Select Color'
SELECT_OPTIONS = 'Select Options'

STOCK_IN = 'in_stock'
STOCK_LOW = 'low_stock'
STOCK_OUT = 'out_of_stock'

SKU_TOKEN_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'


def get_attribute_label(name):
    """Canonical display label for an attribute key."""
    meta = WELL_KNOWN_ATTRIBUTES.get(name)
    return meta.label if meta else name
