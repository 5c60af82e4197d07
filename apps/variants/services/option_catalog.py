"""
Attribute option catalog.

Options are INFERRED from the variant list, not configured: every attribute
key present on any variant becomes a selectable dimension, and its values
keep the order in which they first appear so choice chips never reorder.
"""

from collections.abc import Mapping
from itertools import product as cartesian_product
from typing import List

from apps.variants.constants import COLOR, SIZE
from apps.variants.records import (
    AttributeOption,
    OptionValue,
    ProductRecord,
    ProductVariant,
    coerce_variants,
)


def extract_options(variants) -> List[AttributeOption]:
    """
    Build one AttributeOption per attribute name found in the variants.

    Args:
        variants: ProductVariant records or raw variant mappings (possibly empty)

    Returns:
        List of AttributeOption in first-appearance order; empty when there
        is nothing to select
    """
    options = {}

    for variant in coerce_variants(variants):
        for name, value in variant.attributes.items():
            option = options.get(name)
            if option is None:
                option = options[name] = AttributeOption(name)

            existing = option.get_value(value)
            if existing is None:
                existing = OptionValue(value)
                option.values.append(existing)

            # First variant that carries a label / swatch for the value wins
            if existing.display_value is None:
                existing.display_value = variant.get_label(name)
            if existing.color_hex is None and name == COLOR:
                existing.color_hex = variant.color_hex

    return list(options.values())


def get_option_names(variants) -> List[str]:
    """Attribute names a complete selection must cover."""
    return [option.name for option in extract_options(variants)]


def _declared_dimensions(product: ProductRecord):
    dimensions = []
    if product.sizes:
        dimensions.append((SIZE, product.sizes))
    if product.colors:
        dimensions.append((COLOR, product.colors))
    for declaration in product.attributes:
        if declaration['name'] in (SIZE, COLOR):
            continue
        dimensions.append((declaration['name'], declaration['values']))
    return dimensions


def build_catalog(product) -> List[ProductVariant]:
    """
    Variant catalog for a product.

    Explicit variants are returned as-is. A product that only declares its
    dimensions (sizes, colors, product-level attributes) is expanded into
    every combination, each with untracked stock and the base price.
    """
    if isinstance(product, Mapping):
        product = ProductRecord.from_dict(product)
    if not isinstance(product, ProductRecord):
        return []

    if product.variants:
        return list(product.variants)

    dimensions = _declared_dimensions(product)
    if not dimensions:
        return []

    names = [name for name, _ in dimensions]
    catalog = []
    for combination in cartesian_product(*(values for _, values in dimensions)):
        catalog.append(ProductVariant(attributes=dict(zip(names, combination))))
    return catalog
