"""
Django settings for the storefront variant engine.

The engine keeps no state in a database; this module only configures the
installed apps, logging and the VARIANT_ENGINE options read by
apps.variants.conf.
"""

import os

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'storefront-variants-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', 'false').lower() == 'true'

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'rest_framework',
    'apps.variants',
]

USE_TZ = True
TIME_ZONE = 'UTC'

# Variant engine options (see apps/variants/conf.py for defaults)
VARIANT_ENGINE = {
    'SKU_PREFIX': 'PROD',
    'LOW_STOCK_THRESHOLD': 5,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'apps.variants': {
            'handlers': ['console'],
            'level': os.environ.get('VARIANT_ENGINE_LOG_LEVEL', 'INFO'),
            'propagate': True,
        },
    },
}
