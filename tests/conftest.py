"""Pytest configuration for the variant engine tests."""

import os

import django
import pytest


def pytest_configure():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')
    django.setup()


@pytest.fixture
def tee_variants():
    """T-shirt catalog: Red has no XL, Blue L is sold out, Green is untracked and has no SKU."""
    return [
        {'id': 'v1', 'sku': 'TEE-S-RED', 'size': 'S', 'color': 'Red', 'price': 999, 'stock': 4},
        {'id': 'v2', 'sku': 'TEE-M-RED', 'size': 'M', 'color': 'Red', 'price': 999, 'stock': 10},
        {'id': 'v3', 'sku': 'TEE-M-BLU', 'size': 'M', 'color': 'Blue', 'price': 1099, 'stock': 10},
        {'id': 'v4', 'sku': 'TEE-L-BLU', 'size': 'L', 'color': 'Blue', 'price': 1099, 'stock': 0},
        {'id': 'v5', 'sku': 'TEE-XL-BLU', 'size': 'XL', 'color': 'Blue', 'price': 1199, 'stock': 2},
        {'id': 'v6', 'size': 'L', 'color': 'Green'},
    ]


@pytest.fixture
def tee_product(tee_variants):
    return {
        'id': 'p-100',
        'name': 'Cotton Tee',
        'brand': 'Basics',
        'image': 'https://cdn.example.com/tee.jpg',
        'price': {'current': 899, 'original': 1299, 'discount': 30},
        'variants': tee_variants,
        'category': 'apparel',
    }


@pytest.fixture
def declared_product():
    """Product that only declares its dimensions."""
    return {
        'id': 'p-200',
        'name': 'Hoodie',
        'brand': 'Basics',
        'image': 'https://cdn.example.com/hoodie.jpg',
        'price': {'current': 999},
        'sizes': ['S', 'M', 'L'],
        'colors': ['Red', 'Blue'],
        'requiresVariantSelection': True,
    }
