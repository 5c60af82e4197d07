"""
Availability of option values given the current partial selection.

Availability is selection-dependent (choosing "Red" may rule out "XXL" even
though XXL exists in other colors), so every candidate value is evaluated on
its own against the live selection; nothing is cached.
"""

from collections.abc import Mapping
from typing import Dict, List

from apps.variants.records import ProductVariant, coerce_variants
from apps.variants.utils import normalize_value

from .option_catalog import extract_options


def _other_selections(selection, attribute_name) -> Dict[str, str]:
    if not isinstance(selection, Mapping):
        return {}
    others = {}
    for name, value in selection.items():
        if name == attribute_name:
            continue
        value = normalize_value(value)
        if value is not None:
            others[name] = value
    return others


def is_compatible(variant: ProductVariant, selections: Dict[str, str]) -> bool:
    """A variant agrees with every selected attribute it carries."""
    for name, value in selections.items():
        variant_value = variant.get_option_value(name)
        if variant_value is not None and variant_value != value:
            return False
    return True


def is_option_available(attribute_name, value, selection, catalog) -> bool:
    """
    True if choosing `attribute_name=value` still leaves at least one
    purchasable variant, given the other attributes already selected.

    Example:
        selection = {'color': 'Red'}
        is_option_available('size', 'XXL', selection, catalog)
        -> False when XXL only exists in Blue, or the Red XXL is sold out
    """
    value = normalize_value(value)
    if value is None:
        return False

    others = _other_selections(selection, attribute_name)

    for variant in coerce_variants(catalog):
        if variant.get_option_value(attribute_name) != value:
            continue
        if not variant.is_purchasable:
            continue
        if is_compatible(variant, others):
            return True
    return False


def get_available_values(attribute_name, selection, catalog) -> List[str]:
    """Values of one attribute that remain available, in catalog order."""
    variants = coerce_variants(catalog)
    for option in extract_options(variants):
        if option.name == attribute_name:
            return [
                value for value in option.value_list
                if is_option_available(attribute_name, value, selection, variants)
            ]
    return []


def get_all_available_options(catalog, selection) -> List[Dict]:
    """
    Every attribute with all its values, flagged for the chip row.

    Returns:
        List of dicts in option order:
        {'name', 'label', 'selected_value', 'options': [
            {'value', 'display_value', 'color_hex', 'is_selected', 'is_available'}
        ]}
    """
    variants = coerce_variants(catalog)
    selection = selection if isinstance(selection, Mapping) else {}
    result = []

    for option in extract_options(variants):
        current_value = normalize_value(selection.get(option.name))
        result.append({
            'name': option.name,
            'label': option.label,
            'selected_value': current_value,
            'options': [
                {
                    'value': opt.value,
                    'display_value': opt.get_display_value(),
                    'color_hex': opt.color_hex,
                    'is_selected': opt.value == current_value,
                    'is_available': is_option_available(
                        option.name, opt.value, selection, variants
                    ),
                }
                for opt in option.values
            ],
        })

    return result
