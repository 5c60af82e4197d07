from .serializers import (
    ProductPriceSerializer,
    ProductVariantSerializer,
    AttributeDeclarationSerializer,
    VariantSelectionSerializer,
    ProductSerializer,
    OptionValueSerializer,
    AttributeOptionSerializer,
    CartLineItemSerializer,
)
from .loaders import load_product, load_selection

__all__ = [
    'ProductPriceSerializer',
    'ProductVariantSerializer',
    'AttributeDeclarationSerializer',
    'VariantSelectionSerializer',
    'ProductSerializer',
    'OptionValueSerializer',
    'AttributeOptionSerializer',
    'CartLineItemSerializer',
    'load_product',
    'load_selection',
]
