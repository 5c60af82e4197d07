"""
Resolve a shopper's selection to a concrete variant.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Optional

from apps.variants.constants import NON_ATTRIBUTE_KEYS
from apps.variants.records import ProductVariant, coerce_variants
from apps.variants.utils import normalize_value

from .option_catalog import get_option_names
from .variant_helpers import is_variant_selection_complete

logger = logging.getLogger(__name__)


def _clean_selection(selection, option_names=()) -> Dict[str, str]:
    """
    Attribute part of a selection. Metadata keys (price, sku, ...) are
    dropped unless the catalog uses that name as an attribute.
    """
    if not isinstance(selection, Mapping):
        return {}
    cleaned = {}
    for name, value in selection.items():
        if name in NON_ATTRIBUTE_KEYS and name not in option_names:
            continue
        value = normalize_value(value)
        if value is not None:
            cleaned[str(name)] = value
    return cleaned


def resolve_variant(selection, catalog) -> Optional[ProductVariant]:
    """
    Find the variant whose attributes exactly equal a complete selection.

    Args:
        selection: Dict of {attribute_name: value}
        catalog: ProductVariant records or raw variant mappings

    Returns:
        The matching ProductVariant, or None when the selection is incomplete
        or the complete combination does not exist. If the catalog holds the
        same combination twice, the first one in catalog order wins.
    """
    variants = coerce_variants(catalog)
    if not variants:
        return None

    option_names = get_option_names(variants)
    if not is_variant_selection_complete(selection, option_names):
        return None

    chosen = _clean_selection(selection, option_names)
    match = None
    for variant in variants:
        if variant.attributes != chosen:
            continue
        if match is None:
            match = variant
        else:
            logger.warning(
                "Duplicate attribute combination %s (%s and %s); using the first",
                chosen, match.sku or match.id, variant.sku or variant.id,
            )
            break
    return match


def find_first_compatible_variant(selection, catalog) -> Optional[ProductVariant]:
    """
    First variant agreeing with every selected value, even when the
    selection is partial. Used to preview price and image while choosing.
    """
    variants = coerce_variants(catalog)
    chosen = _clean_selection(selection, get_option_names(variants))
    if not chosen:
        return None
    for variant in variants:
        if all(variant.get_option_value(name) == value for name, value in chosen.items()):
            return variant
    return None


def find_best_matching_variant(selection, catalog) -> Optional[ProductVariant]:
    """
    Find the single variant that best matches the given selections.
    Fallback for direct variant access when no exact match exists.

    Returns:
        Exact match if one exists, otherwise the variant matching the most
        selected attributes, otherwise the first variant (None if empty)
    """
    variants = coerce_variants(catalog)
    if not variants:
        return None

    chosen = _clean_selection(selection, get_option_names(variants))
    if not chosen:
        return variants[0]

    # Try exact match first - every selected attribute must match
    for variant in variants:
        if all(variant.get_option_value(name) == value for name, value in chosen.items()):
            return variant

    # No exact match - score each variant by how many attributes match
    best_variant = None
    best_score = 0

    for variant in variants:
        score = sum(
            1 for name, value in chosen.items()
            if variant.get_option_value(name) == value
        )
        if score > best_score:
            best_score = score
            best_variant = variant

    return best_variant or variants[0]


def is_combination_available(selection, catalog) -> bool:
    """Complete selection that resolves to a purchasable variant."""
    variant = resolve_variant(selection, catalog)
    return variant is not None and variant.is_purchasable
