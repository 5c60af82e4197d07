"""
Plain records the variant engine works on.

Record Hierarchy:
- ProductRecord: Base product (e.g., "Cotton Tee") with its base price
- ProductVariant: Individual SKU, one attribute combination with price/stock
- AttributeOption: A selectable dimension derived from the variants (size)
- OptionValue: One value of that dimension (M), with optional display name
- CartLineItem: Output of an "add to cart" action
"""

from .product import ProductPrice, ProductRecord
from .attribute import AttributeOption, OptionValue
from .variant import ProductVariant, coerce_variants
from .cart import CartLineItem

__all__ = [
    'ProductPrice',
    'ProductRecord',
    'AttributeOption',
    'OptionValue',
    'ProductVariant',
    'coerce_variants',
    'CartLineItem',
]
