"""
Per-product selection session used by the variant picker.

Wraps the pure engine functions around one product: its catalog, its
options and the shopper's current selection. A new selector is created when
the picker opens for a product and discarded when the product changes.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from apps.variants.records import AttributeOption, ProductRecord, ProductVariant

from .availability import get_all_available_options, is_option_available
from .cart import create_cart_item
from .option_catalog import build_catalog, extract_options
from .resolver import find_first_compatible_variant, resolve_variant
from .selection import clear_attribute, seed_selection, select_attribute
from .variant_helpers import (
    format_variant_display,
    generate_variant_sku,
    get_stock_status,
    get_variant_display_name,
    get_variant_price,
    is_variant_selection_complete,
)

logger = logging.getLogger(__name__)


class VariantSelector:
    """
    Selection state for one product.

    Example:
        selector = VariantSelector(product)
        selector.select('size', 'M')
        selector.select('color', 'Blue')
        if selector.can_confirm:
            item = selector.build_cart_item(quantity=2)
    """

    def __init__(self, product, selection=None):
        if isinstance(product, Mapping):
            product = ProductRecord.from_dict(product)
        self.product: ProductRecord = product if isinstance(product, ProductRecord) else ProductRecord()
        self.catalog: List[ProductVariant] = build_catalog(self.product)
        self.options: List[AttributeOption] = extract_options(self.catalog)
        self.selection: Dict[str, str] = seed_selection(selection, self.options)

    def __repr__(self):
        return f"<VariantSelector {self.product.id} {self.selection}>"

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def select(self, name, value) -> Dict[str, str]:
        """Choose `value` for `name`; values the catalog lacks are ignored."""
        self.selection = select_attribute(self.selection, name, value, options=self.options)
        return self.selection

    def clear(self, name) -> Dict[str, str]:
        self.selection = clear_attribute(self.selection, name)
        return self.selection

    def reset(self, seed=None) -> Dict[str, str]:
        self.selection = seed_selection(seed, self.options)
        return self.selection

    # -------------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------------

    @property
    def has_options(self):
        return bool(self.options)

    @property
    def option_names(self) -> List[str]:
        return [option.name for option in self.options]

    @property
    def prompt(self) -> str:
        return get_variant_display_name(self.product)

    @property
    def is_complete(self) -> bool:
        return is_variant_selection_complete(self.selection, self.options)

    @property
    def resolved_variant(self) -> Optional[ProductVariant]:
        return resolve_variant(self.selection, self.catalog)

    @property
    def preview_variant(self) -> Optional[ProductVariant]:
        """Exact match when complete, else the first compatible variant."""
        return self.resolved_variant or find_first_compatible_variant(
            self.selection, self.catalog
        )

    @property
    def current_price(self):
        return get_variant_price(self.product.base_price, self.preview_variant)

    @property
    def can_confirm(self) -> bool:
        variant = self.resolved_variant
        return variant is not None and variant.is_purchasable

    def is_available(self, name, value) -> bool:
        return is_option_available(name, value, self.selection, self.catalog)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def get_selection_descriptor(self) -> Optional[Dict[str, Any]]:
        """
        Descriptor of the confirmed variant for the cart, or None if the
        selection does not resolve. The SKU is synthesized if the catalog
        has none.
        """
        variant = self.resolved_variant
        if variant is None:
            return None
        descriptor = variant.to_selection()
        descriptor['sku'] = generate_variant_sku(self.product, descriptor)
        if 'price' not in descriptor and self.product.base_price is not None:
            descriptor['price'] = self.product.base_price
        return descriptor

    def build_cart_item(self, quantity=None):
        """Cart line for the confirmed variant, or None if it cannot be confirmed."""
        if self.has_options and not self.can_confirm:
            logger.debug(
                "Cannot add product %s to cart: selection %s not purchasable",
                self.product.id, self.selection,
            )
            return None
        descriptor = self.get_selection_descriptor() if self.has_options else None
        return create_cart_item(self.product, descriptor, quantity)

    def get_selector_data(self) -> Dict[str, Any]:
        """
        Build render-ready data for the picker.
        Returns structure for attribute chip rows plus the current outcome.
        """
        variant = self.resolved_variant
        return {
            'product': {
                'id': self.product.id,
                'name': self.product.name,
                'prompt': self.prompt,
            },
            'attributes': get_all_available_options(self.catalog, self.selection),
            'selection': dict(self.selection),
            'is_complete': self.is_complete,
            'current_price': self.current_price,
            'can_confirm': self.can_confirm,
            'variant': {
                'id': variant.id,
                'sku': variant.sku,
                'display': format_variant_display(variant),
                'price': get_variant_price(self.product.base_price, variant),
                'stock_status': get_stock_status(variant),
                'is_purchasable': variant.is_purchasable,
            } if variant is not None else None,
        }
