from collections.abc import Mapping
from typing import List

from apps.variants.utils import get_field, normalize_value, to_decimal

from .variant import coerce_variants


class ProductPrice:
    """Base product pricing: current selling price plus optional "was" price."""

    def __init__(self, current=None, original=None, discount=None):
        self.current = to_decimal(current)
        self.original = to_decimal(original)
        self.discount = discount

    def __repr__(self):
        return f"<ProductPrice current={self.current} original={self.original}>"

    @classmethod
    def coerce(cls, value) -> 'ProductPrice':
        """
        Accept a ProductPrice, a {current, original, discount} mapping,
        or a bare number meaning the current price.
        """
        if isinstance(value, ProductPrice):
            return value
        if isinstance(value, Mapping) or hasattr(value, 'current'):
            return cls(
                current=get_field(value, 'current'),
                original=get_field(value, 'original'),
                discount=get_field(value, 'discount'),
            )
        return cls(current=value)

    @property
    def is_discounted(self):
        return bool(
            self.original is not None
            and self.current is not None
            and self.original > self.current
        )


class ProductRecord:
    """
    Base product as received from the catalog.
    A product is sold either through explicit `variants` or through declared
    dimensions (`sizes`, `colors`, product-level `attributes`).
    """

    def __init__(
        self,
        id=None,
        name='',
        brand='',
        image=None,
        price=None,
        sizes=None,
        colors=None,
        variants=None,
        attributes=None,
        requires_variant_selection=False,
        category=None,
    ):
        self.id = normalize_value(id)
        self.name = name or ''
        self.brand = brand or ''
        self.image = image
        self.price = ProductPrice.coerce(price)
        self.sizes = self._clean_values(sizes)
        self.colors = self._clean_values(colors)
        self.variants = coerce_variants(variants)
        self.attributes = self._clean_declarations(attributes)
        self.requires_variant_selection = requires_variant_selection is True
        self.category = category

    def __repr__(self):
        return f"<ProductRecord {self.id} {self.name!r}>"

    @staticmethod
    def _clean_values(values) -> List[str]:
        if not isinstance(values, (list, tuple)):
            return []
        cleaned = []
        for value in values:
            value = normalize_value(value)
            if value is not None and value not in cleaned:
                cleaned.append(value)
        return cleaned

    @classmethod
    def _clean_declarations(cls, declarations):
        """Product-level attributes as a list of {'name': ..., 'values': [...]}"""
        if not isinstance(declarations, (list, tuple)):
            return []
        cleaned = []
        for declaration in declarations:
            name = normalize_value(get_field(declaration, 'name'))
            values = cls._clean_values(get_field(declaration, 'values'))
            if name is not None and values:
                cleaned.append({'name': name, 'values': values})
        return cleaned

    @classmethod
    def from_dict(cls, data: Mapping) -> 'ProductRecord':
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            brand=data.get('brand'),
            image=data.get('image'),
            price=data.get('price'),
            sizes=data.get('sizes'),
            colors=data.get('colors'),
            variants=data.get('variants'),
            attributes=data.get('attributes'),
            requires_variant_selection=data.get(
                'requires_variant_selection',
                data.get('requiresVariantSelection', False),
            ),
            category=data.get('category'),
        )

    @property
    def base_price(self):
        return self.price.current
