from .option_catalog import build_catalog, extract_options, get_option_names
from .selection import (
    clear_attribute,
    get_selected_value,
    seed_selection,
    select_attribute,
)
from .availability import (
    get_all_available_options,
    get_available_values,
    is_option_available,
)
from .resolver import (
    find_best_matching_variant,
    find_first_compatible_variant,
    is_combination_available,
    resolve_variant,
)
from .variant_helpers import (
    format_variant_display,
    generate_variant_sku,
    get_stock_status,
    get_variant_display_name,
    get_variant_price,
    has_variants,
    is_variant_in_stock,
    is_variant_low_stock,
    is_variant_selection_complete,
    variants_match,
)
from .cart import create_cart_item
from .selector import VariantSelector

__all__ = [
    'build_catalog',
    'extract_options',
    'get_option_names',
    'clear_attribute',
    'get_selected_value',
    'seed_selection',
    'select_attribute',
    'get_all_available_options',
    'get_available_values',
    'is_option_available',
    'find_best_matching_variant',
    'find_first_compatible_variant',
    'is_combination_available',
    'resolve_variant',
    'format_variant_display',
    'generate_variant_sku',
    'get_stock_status',
    'get_variant_display_name',
    'get_variant_price',
    'has_variants',
    'is_variant_in_stock',
    'is_variant_low_stock',
    'is_variant_selection_complete',
    'variants_match',
    'create_cart_item',
    'VariantSelector',
]
