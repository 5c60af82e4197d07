"""
Cart line construction for "add to cart".
"""

import logging
import uuid
from collections.abc import Mapping

from django.utils import timezone

from apps.variants import conf
from apps.variants.records import CartLineItem, ProductPrice, ProductVariant
from apps.variants.utils import get_field

from .variant_helpers import generate_variant_sku, get_variant_price

logger = logging.getLogger(__name__)

_last_added_at = None


def _next_added_at():
    """Current time, never earlier than the previous line's timestamp."""
    global _last_added_at
    now = timezone.now()
    if _last_added_at is not None and now < _last_added_at:
        now = _last_added_at
    _last_added_at = now
    return now


def _selection_descriptor(variant_selection):
    if variant_selection is None:
        return None
    if isinstance(variant_selection, ProductVariant):
        return variant_selection.to_selection()
    if isinstance(variant_selection, Mapping):
        return dict(variant_selection)
    return None


def create_cart_item(product, variant_selection=None, quantity=None) -> CartLineItem:
    """
    Build the cart line for a product and the chosen variant.

    Args:
        product: ProductRecord or raw product mapping
        variant_selection: Selection dict, ProductVariant, or None
        quantity: Used verbatim; defaults to DEFAULT_QUANTITY (1)

    Returns:
        A new CartLineItem. Neither `product` nor `variant_selection` is
        modified.
    """
    if quantity is None:
        quantity = conf.get_default_quantity()

    price = ProductPrice.coerce(get_field(product, 'price'))
    base_price = price.current
    variant = _selection_descriptor(variant_selection)

    discounted_price = get_variant_price(base_price, variant)
    original_price = price.original if price.original is not None else base_price

    sku = generate_variant_sku(product, variant) if variant is not None else None

    item = CartLineItem(
        id=uuid.uuid4().hex,
        product_id=get_field(product, 'id'),
        name=get_field(product, 'name'),
        brand=get_field(product, 'brand'),
        image=get_field(product, 'image'),
        quantity=quantity,
        original_price=original_price,
        discounted_price=discounted_price,
        variant=variant,
        added_at=_next_added_at(),
        sku=sku,
        category=get_field(product, 'category'),
    )
    logger.debug(
        "Built cart line %s for product %s (qty %s)",
        item.id, item.product_id, quantity,
    )
    return item
