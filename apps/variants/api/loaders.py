"""
Input boundary: turn raw client payloads into engine records.
"""

import logging

from apps.variants.exceptions import InvalidProductRecord

from .serializers import ProductSerializer, VariantSelectionSerializer

logger = logging.getLogger(__name__)


def load_product(data):
    """
    Validate a product payload and return a ProductRecord.

    Raises:
        InvalidProductRecord: payload rejected by ProductSerializer
    """
    serializer = ProductSerializer(data=data)
    if not serializer.is_valid():
        logger.warning("Rejected product payload: %s", serializer.errors)
        raise InvalidProductRecord('Invalid product payload', errors=serializer.errors)
    return serializer.save()


def load_selection(data):
    """
    Validate a selection payload and return a plain selection dict.
    An invalid payload yields an empty selection rather than an error.
    """
    serializer = VariantSelectionSerializer(data=data or {})
    if not serializer.is_valid():
        logger.info("Discarding invalid selection payload: %s", serializer.errors)
        return {}
    return serializer.save()
