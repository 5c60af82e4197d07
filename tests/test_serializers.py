"""Tests for the input/output boundary serializers."""

from decimal import Decimal

import pytest

from apps.variants.api import (
    AttributeOptionSerializer,
    CartLineItemSerializer,
    ProductSerializer,
    ProductVariantSerializer,
    VariantSelectionSerializer,
    load_product,
    load_selection,
)
from apps.variants.exceptions import InvalidProductRecord
from apps.variants.records import ProductRecord, ProductVariant
from apps.variants.services import create_cart_item, extract_options


class TestProductSerializer:

    def test_camel_case_payload(self):
        payload = {
            'id': 42,
            'name': 'Linen Shirt',
            'brand': 'Coast',
            'image': 'https://cdn.example.com/shirt.jpg',
            'price': {'current': '1499.00', 'original': '1999.00', 'discount': 25},
            'sizes': ['S', 'M'],
            'colors': ['White'],
            'requiresVariantSelection': True,
            'variants': [
                {'id': 'a', 'size': 'S', 'color': 'White', 'colorHex': '#FFFFFF', 'stock': 3},
                {'id': 'b', 'size': 'M', 'color': 'White', 'price': '1599.00',
                 'attributes': {'fit': 'Relaxed'}},
            ],
        }

        serializer = ProductSerializer(data=payload)
        assert serializer.is_valid(), serializer.errors
        product = serializer.save()

        assert isinstance(product, ProductRecord)
        assert product.id == '42'
        assert product.requires_variant_selection is True
        assert product.price.current == Decimal('1499.00')
        assert product.price.original == Decimal('1999.00')
        assert product.sizes == ['S', 'M']
        assert [variant.id for variant in product.variants] == ['a', 'b']
        assert product.variants[0].color_hex == '#FFFFFF'
        assert product.variants[0].attributes == {'size': 'S', 'color': 'White'}
        assert product.variants[1].attributes == {'fit': 'Relaxed', 'size': 'M', 'color': 'White'}
        assert product.variants[1].price == Decimal('1599.00')
        assert product.variants[1].stock is None

    def test_bare_number_price(self):
        serializer = ProductSerializer(data={'id': 'p', 'name': 'Mug', 'price': 250})

        assert serializer.is_valid(), serializer.errors
        assert serializer.save().price.current == Decimal('250')

    @pytest.mark.parametrize('payload,field', [
        ({'name': 'Mug', 'price': 250}, 'id'),
        ({'id': 'p', 'name': 'Mug', 'price': 'cheap'}, 'price'),
        ({'id': 'p', 'name': 'Mug', 'price': -1}, 'price'),
        ({'id': 'p', 'name': 'Mug', 'price': 1, 'variants': [{'stock': -2}]}, 'variants'),
        ({'id': 'p', 'name': 'Mug', 'price': 1, 'attributes': [{'name': 'fit', 'values': []}]}, 'attributes'),
    ])
    def test_invalid_payloads(self, payload, field):
        serializer = ProductSerializer(data=payload)

        assert serializer.is_valid() is False
        assert field in serializer.errors

    def test_scalar_attribute_values_become_strings(self):
        product = load_product({
            'id': 'p',
            'name': 'Boot',
            'price': 120,
            'sizes': [42, 43],
            'variants': [
                {'id': 'a', 'size': 42, 'attributes': {'waterproof': True, 'width': 2.5}},
            ],
        })

        assert product.sizes == ['42', '43']
        assert product.variants[0].attributes == {
            'waterproof': 'true',
            'width': '2.5',
            'size': '42',
        }

    def test_nested_attribute_value_is_rejected(self):
        serializer = ProductSerializer(data={
            'id': 'p',
            'name': 'Boot',
            'price': 120,
            'variants': [{'attributes': {'waterproof': {'rating': 'IP68'}}}],
        })

        assert serializer.is_valid() is False
        assert 'variants' in serializer.errors

    def test_product_level_attributes(self):
        product = load_product({
            'id': 'p',
            'name': 'Scarf',
            'price': 10,
            'attributes': [{'name': 'material', 'values': ['Wool', 'Silk']}],
        })

        assert product.attributes == [{'name': 'material', 'values': ['Wool', 'Silk']}]


class TestLoaders:

    def test_load_product_raises_on_invalid(self):
        with pytest.raises(InvalidProductRecord) as excinfo:
            load_product({'name': 'No id', 'price': 1})

        assert 'id' in excinfo.value.errors
        assert 'fields: id' in str(excinfo.value)

    def test_load_selection_keeps_custom_attributes(self):
        selection = load_selection({
            'variantId': 'v1',
            'size': 'M',
            'color': '',
            'price': '999',
            'material': 'Cotton',
            'images': ['a.jpg'],
        })

        assert selection == {
            'variant_id': 'v1',
            'size': 'M',
            'price': Decimal('999'),
            'material': 'Cotton',
        }

    def test_load_selection_boolean_attribute(self):
        assert load_selection({'size': 10, 'giftWrap': False}) == {
            'size': '10',
            'giftWrap': 'false',
        }

    def test_load_selection_invalid_payload(self):
        assert load_selection({'stock': 'many'}) == {}
        assert load_selection(None) == {}


class TestVariantSerializers:

    def test_variant_serializer_builds_record(self):
        serializer = ProductVariantSerializer(data={'sku': 'X-1', 'size': 'L', 'stock': 0, 'available': False})

        assert serializer.is_valid(), serializer.errors
        variant = serializer.save()

        assert isinstance(variant, ProductVariant)
        assert variant.sku == 'X-1'
        assert variant.attributes == {'size': 'L'}
        assert variant.available is False

    def test_selection_serializer_rejects_non_mapping(self):
        serializer = VariantSelectionSerializer(data=['size', 'M'])

        assert serializer.is_valid() is False


class TestOutputSerializers:

    def test_cart_line_item(self, tee_product):
        item = create_cart_item(
            tee_product,
            {'variant_id': 'v3', 'size': 'M', 'color': 'Blue', 'price': Decimal('1099')},
            2,
        )

        data = CartLineItemSerializer(item).data

        assert data['productId'] == 'p-100'
        assert data['quantity'] == 2
        assert data['originalPrice'] == '1299.00'
        assert data['discountedPrice'] == '1099.00'
        assert data['sku'] == 'PROD-p-100-M-BLU-v3'
        assert data['selected'] is True
        assert data['variant'] == {'variantId': 'v3', 'size': 'M', 'color': 'Blue', 'price': '1099'}
        assert data['addedAt'].endswith('Z')

    def test_cart_line_item_without_variant(self):
        item = create_cart_item({'id': 'p-1', 'name': 'Mug', 'price': 250})

        data = CartLineItemSerializer(item).data

        assert data['variant'] is None
        assert data['sku'] is None
        assert data['brand'] is None

    def test_attribute_options(self):
        options = extract_options([
            ProductVariant(attributes={'color': 'Navy'}, labels={'color': 'Deep Navy'}, color_hex='#000080'),
        ])

        data = AttributeOptionSerializer(options, many=True).data

        assert data[0]['name'] == 'color'
        assert data[0]['label'] == 'Color'
        assert data[0]['values'][0] == {
            'value': 'Navy',
            'displayValue': 'Deep Navy',
            'colorHex': '#000080',
        }
