"""
Variant helper predicates and formatters.

Everything here is total: malformed or missing input yields a sentinel
("Default", "Select Options", False, the base price) instead of an exception.
Inputs may be records or plain mappings from the client.
"""

import logging
from collections.abc import Mapping
from typing import Dict

from django.utils.crypto import get_random_string

from apps.variants import conf
from apps.variants.constants import (
    COLOR,
    DEFAULT_VARIANT_LABEL,
    NON_ATTRIBUTE_KEYS,
    SELECT_COLOR,
    SELECT_OPTIONS,
    SELECT_SIZE,
    SELECT_SIZE_AND_COLOR,
    SIZE,
    SKU_TOKEN_ALPHABET,
    STOCK_IN,
    STOCK_LOW,
    STOCK_OUT,
    WELL_KNOWN_ATTRIBUTES,
)
from apps.variants.records import ProductVariant
from apps.variants.utils import get_field, normalize_value, to_decimal, to_stock

logger = logging.getLogger(__name__)


def get_variant_attributes(variant, option_names=None) -> Dict[str, str]:
    """
    Attribute map of a variant record or a selection mapping.

    Top-level keys that look like metadata (`name`, `price`, ...) are
    skipped unless listed in `option_names`, the catalog's attribute names.
    """
    record = ProductVariant.coerce(variant)
    if record is None:
        return {}
    attributes = record.attributes
    if option_names and isinstance(variant, Mapping):
        attributes = dict(attributes)
        for name in option_names:
            if name in attributes or name not in NON_ATTRIBUTE_KEYS:
                continue
            value = normalize_value(variant.get(name))
            if value is not None:
                attributes[name] = value
    return attributes


def _non_empty(values) -> bool:
    return isinstance(values, (list, tuple)) and len(values) > 0


# =============================================================================
# Product predicates
# =============================================================================

def has_variants(product) -> bool:
    """
    True if the product must go through variant selection: it exposes
    variants, explicitly requires a selection, or declares sizes/colors.
    """
    if product is None:
        return False
    if _non_empty(get_field(product, 'variants')):
        return True
    requires = get_field(product, 'requires_variant_selection')
    if requires is None:
        requires = get_field(product, 'requiresVariantSelection')
    if requires is True:
        return True
    return _non_empty(get_field(product, 'sizes')) or _non_empty(get_field(product, 'colors'))


def get_variant_display_name(product) -> str:
    """Prompt shown on the variant picker button."""
    has_sizes = _non_empty(get_field(product, 'sizes'))
    has_colors = _non_empty(get_field(product, 'colors'))

    if has_sizes and has_colors:
        return SELECT_SIZE_AND_COLOR
    if has_sizes:
        return SELECT_SIZE
    if has_colors:
        return SELECT_COLOR
    return SELECT_OPTIONS


# =============================================================================
# Selection predicates
# =============================================================================

def variants_match(a, b) -> bool:
    """
    Two selections are the same choice when size and color agree.
    Stock and price are inventory metadata and do not take part.
    """
    if a is None or b is None:
        return False
    attrs_a = get_variant_attributes(a)
    attrs_b = get_variant_attributes(b)
    return (
        attrs_a.get(SIZE) == attrs_b.get(SIZE)
        and attrs_a.get(COLOR) == attrs_b.get(COLOR)
    )


def is_variant_selection_complete(selection, required_attrs) -> bool:
    """
    True iff every required attribute has a non-blank value in `selection`.

    `required_attrs` holds attribute names or AttributeOption objects.
    """
    for attribute in required_attrs or []:
        name = getattr(attribute, 'name', attribute)
        if normalize_value(get_field(selection, name)) is None:
            return False
    return True


def is_variant_in_stock(variant, min_quantity=1) -> bool:
    """Untracked stock is assumed available."""
    if variant is None:
        return False
    stock = to_stock(get_field(variant, 'stock'))
    if stock is None:
        return True
    return stock >= min_quantity


def is_variant_low_stock(variant, threshold=None) -> bool:
    if variant is None:
        return False
    stock = to_stock(get_field(variant, 'stock'))
    if stock is None:
        return False
    if threshold is None:
        threshold = conf.get_low_stock_threshold()
    return 0 < stock <= threshold


def get_stock_status(variant) -> str:
    if not is_variant_in_stock(variant):
        return STOCK_OUT
    if is_variant_low_stock(variant):
        return STOCK_LOW
    return STOCK_IN


# =============================================================================
# Pricing
# =============================================================================

def get_variant_price(base_price, selection):
    """Variant price when it is set and positive, otherwise the base price."""
    price = to_decimal(get_field(selection, 'price'))
    if price is not None and price > 0:
        return price
    return base_price


# =============================================================================
# Display / SKU
# =============================================================================

def format_variant_display(attrs, option_names=None) -> str:
    """
    Render a selection as "Size: M, Color: Blue, material: Cotton".

    Well-known keys come first in their fixed order with their canonical
    label; any other key follows in insertion order, lower-cased. Pass the
    catalog's `option_names` when an attribute shares a name with variant
    metadata (e.g. an engraving option called "name").
    """
    if not isinstance(attrs, (Mapping, ProductVariant)):
        return DEFAULT_VARIANT_LABEL

    attributes = get_variant_attributes(attrs, option_names)
    known = sorted(
        (key for key in attributes if key in WELL_KNOWN_ATTRIBUTES),
        key=lambda key: WELL_KNOWN_ATTRIBUTES[key].priority,
    )
    parts = [
        f"{WELL_KNOWN_ATTRIBUTES[key].label}: {attributes[key]}"
        for key in known
    ]
    parts.extend(
        f"{key.lower()}: {value}"
        for key, value in attributes.items()
        if key not in WELL_KNOWN_ATTRIBUTES
    )

    if not parts:
        return DEFAULT_VARIANT_LABEL
    return ', '.join(parts)


def _get_variant_id(variant):
    if isinstance(variant, ProductVariant):
        return variant.id
    for key in ('variant_id', 'variantId', 'id'):
        value = normalize_value(get_field(variant, key))
        if value is not None:
            return value
    return None


def _get_product_token(product, missing):
    if isinstance(product, (str, int)) and not isinstance(product, bool):
        return normalize_value(product) or missing
    return normalize_value(get_field(product, 'id')) or missing


def generate_variant_sku(product, variant) -> str:
    """
    SKU for a variant: the explicit one, or PROD-<product>-<SIZE>-<COL>-<suffix>.

    The suffix is the variant id when known; otherwise it is a fresh random
    token, so two calls for an id-less variant give different SKUs.
    """
    explicit = normalize_value(get_field(variant, 'sku'))
    if explicit is not None:
        return explicit

    missing = conf.get_missing_token()
    attributes = get_variant_attributes(variant)

    size = attributes.get(SIZE)
    size_token = size.upper() if size else missing

    color = attributes.get(COLOR)
    color_length = conf.get_setting('SKU_COLOR_TOKEN_LENGTH', 3)
    color_token = color[:color_length].upper() if color else missing

    suffix = _get_variant_id(variant)
    if suffix is None:
        suffix = get_random_string(
            conf.get_setting('SKU_SUFFIX_LENGTH', 8),
            allowed_chars=SKU_TOKEN_ALPHABET,
        )

    sku = '-'.join([
        conf.get_sku_prefix(),
        _get_product_token(product, missing),
        size_token,
        color_token,
        suffix,
    ])
    logger.debug("Synthesized SKU %s", sku)
    return sku
