"""Variant engine configuration."""

from django.conf import settings


def get_config():
    """Get variant engine configuration from settings."""
    defaults = {
        # Synthesized SKUs: PROD-<product>-<size>-<color>-<suffix>
        'SKU_PREFIX': 'PROD',
        'SKU_MISSING_TOKEN': 'NA',
        'SKU_COLOR_TOKEN_LENGTH': 3,
        'SKU_SUFFIX_LENGTH': 8,

        # Stock badges
        'LOW_STOCK_THRESHOLD': 5,

        # Cart
        'DEFAULT_QUANTITY': 1,
    }

    user_config = getattr(settings, 'VARIANT_ENGINE', {})
    return {**defaults, **user_config}


def get_setting(name, default=None):
    """Get a specific variant engine setting."""
    config = get_config()
    return config.get(name, default)


def get_sku_prefix():
    """Get the prefix used for synthesized SKUs."""
    return get_setting('SKU_PREFIX', 'PROD')


def get_missing_token():
    """Get the SKU token used when an attribute is absent."""
    return get_setting('SKU_MISSING_TOKEN', 'NA')


def get_low_stock_threshold():
    """Get the stock level at or below which a variant counts as low stock."""
    return get_setting('LOW_STOCK_THRESHOLD', 5)


def get_default_quantity():
    """Get the quantity used when a cart line is built without one."""
    return get_setting('DEFAULT_QUANTITY', 1)
