from collections.abc import Mapping
from typing import Dict, List, Optional

from apps.variants.constants import COLOR, NON_ATTRIBUTE_KEYS, SIZE
from apps.variants.utils import normalize_value, to_decimal, to_stock


class ProductVariant:
    """
    Individual SKU with its own price and stock.
    Each variant is a unique combination of attribute values.

    Attributes are an open string-keyed map. Legacy payloads that carry
    `size` and `color` at the top level are folded into it.
    """

    def __init__(
        self,
        id=None,
        sku=None,
        attributes=None,
        price=None,
        stock=None,
        available=True,
        color_hex=None,
        labels=None,
        images=None,
        name=None,
    ):
        self.id = normalize_value(id)
        self.sku = normalize_value(sku)
        self.attributes = self._clean_attributes(attributes)
        self.price = to_decimal(price)
        self.stock = to_stock(stock)
        self.available = available is not False
        self.color_hex = color_hex or None
        self.labels = {
            str(key): str(value)
            for key, value in (labels.items() if isinstance(labels, Mapping) else ())
            if value
        }
        self.images = list(images or [])
        self.name = name

    def __repr__(self):
        return f"<ProductVariant {self.sku or self.id or '?'} {self.attributes}>"

    def __eq__(self, other):
        if not isinstance(other, ProductVariant):
            return NotImplemented
        return (
            self.id == other.id
            and self.sku == other.sku
            and self.attributes == other.attributes
            and self.price == other.price
            and self.stock == other.stock
            and self.available == other.available
        )

    __hash__ = None

    @staticmethod
    def _clean_attributes(attributes):
        cleaned = {}
        if not isinstance(attributes, Mapping):
            return cleaned
        for key, value in attributes.items():
            value = normalize_value(value)
            if value is not None:
                cleaned[str(key)] = value
        return cleaned

    @classmethod
    def from_dict(cls, data: Mapping) -> 'ProductVariant':
        """
        Build a variant from a loose payload.

        Accepts `attributes` as a mapping plus top-level `size` / `color`
        (top-level wins) and any other non-metadata top-level key.
        """
        raw_attributes = data.get('attributes')
        attributes = dict(raw_attributes) if isinstance(raw_attributes, Mapping) else {}
        for key, value in data.items():
            if key in NON_ATTRIBUTE_KEYS:
                continue
            attributes[key] = value

        return cls(
            id=data.get('id', data.get('variant_id', data.get('variantId'))),
            sku=data.get('sku'),
            attributes=attributes,
            price=data.get('price'),
            stock=data.get('stock'),
            available=data.get('available', True),
            color_hex=data.get('color_hex', data.get('colorHex')),
            labels=data.get('labels'),
            images=data.get('images'),
            name=data.get('name'),
        )

    @classmethod
    def coerce(cls, obj) -> Optional['ProductVariant']:
        """Return `obj` as a ProductVariant, or None if it is not variant-like."""
        if isinstance(obj, ProductVariant):
            return obj
        if isinstance(obj, Mapping):
            return cls.from_dict(obj)
        return None

    @property
    def size(self):
        return self.attributes.get(SIZE)

    @property
    def color(self):
        return self.attributes.get(COLOR)

    @property
    def is_stock_tracked(self):
        return self.stock is not None

    @property
    def is_purchasable(self):
        """Available and not sold out (untracked stock counts as available)."""
        if not self.available:
            return False
        return self.stock is None or self.stock > 0

    def get_option_value(self, attribute_name) -> Optional[str]:
        """Get the value for a specific attribute, or None."""
        return self.attributes.get(attribute_name)

    def get_options_dict(self) -> Dict[str, str]:
        """Return dict of {attribute_name: value}"""
        return dict(self.attributes)

    def get_label(self, attribute_name) -> Optional[str]:
        return self.labels.get(attribute_name)

    def to_selection(self) -> dict:
        """
        Descriptor handed to the cart when this variant is confirmed.
        Metadata first, then every attribute value.
        """
        selection = {
            'variant_id': self.id,
            'sku': self.sku,
            'price': self.price,
            'stock': self.stock,
        }
        selection.update(self.attributes)
        return {key: value for key, value in selection.items() if value is not None}


def coerce_variants(variants) -> List[ProductVariant]:
    """Normalize a raw variant list, skipping entries that are not variant-like."""
    if not variants or isinstance(variants, (str, bytes, Mapping)):
        return []
    result = []
    try:
        iterator = iter(variants)
    except TypeError:
        return []
    for item in iterator:
        variant = ProductVariant.coerce(item)
        if variant is not None:
            result.append(variant)
    return result
