from collections.abc import Mapping
from decimal import Decimal

from rest_framework import serializers

from apps.variants.constants import NON_ATTRIBUTE_KEYS
from apps.variants.records import ProductPrice, ProductRecord, ProductVariant
from apps.variants.utils import normalize_value


def _drop_nulls(data):
    return {key: value for key, value in data.items() if value is not None}


class AttributeValueField(serializers.Field):
    """
    Scalar attribute value. Numbers and booleans are accepted and stored as
    the string they are matched by; blank values become None.
    """
    default_error_messages = {
        'invalid': 'Attribute values must be scalars, not {type}.',
    }

    def to_internal_value(self, data):
        if isinstance(data, (Mapping, list, tuple, set)):
            self.fail('invalid', type=type(data).__name__)
        return normalize_value(data)

    def to_representation(self, value):
        return value


# =============================================================================
# Price Serializers
# =============================================================================

class ProductPriceSerializer(serializers.Serializer):
    current = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.00')
    )
    original = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.00'),
        required=False, allow_null=True
    )
    discount = serializers.IntegerField(required=False, allow_null=True)


class ProductPriceField(serializers.Field):
    """Accepts a bare number (the current price) or a price object."""

    def to_internal_value(self, data):
        if not isinstance(data, Mapping):
            data = {'current': data}
        serializer = ProductPriceSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    def to_representation(self, value):
        price = ProductPrice.coerce(value)
        return {
            'current': str(price.current) if price.current is not None else None,
            'original': str(price.original) if price.original is not None else None,
            'discount': price.discount,
        }


# =============================================================================
# Variant Serializers
# =============================================================================

class ProductVariantSerializer(serializers.Serializer):
    """Variant payload; `size` / `color` may sit at the top level."""
    id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    sku = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    size = AttributeValueField(required=False, allow_null=True)
    color = AttributeValueField(required=False, allow_null=True)
    colorHex = serializers.CharField(
        source='color_hex', required=False, allow_null=True, allow_blank=True
    )
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0.00'),
        required=False, allow_null=True
    )
    stock = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    available = serializers.BooleanField(required=False, default=True)
    attributes = serializers.DictField(
        child=AttributeValueField(allow_null=True), required=False
    )
    labels = serializers.DictField(child=serializers.CharField(), required=False)
    images = serializers.ListField(child=serializers.CharField(), required=False)

    def create(self, validated_data):
        return ProductVariant.from_dict(_drop_nulls(validated_data))


class AttributeDeclarationSerializer(serializers.Serializer):
    """Product-level attribute: {"name": "material", "values": [...]}"""
    name = serializers.CharField()
    values = serializers.ListField(child=AttributeValueField(), allow_empty=False)


class VariantSelectionSerializer(serializers.Serializer):
    """
    Shopper's selection as sent by the picker.
    Keys other than the declared ones are kept as custom attributes.
    """
    variantId = serializers.CharField(
        source='variant_id', required=False, allow_null=True, allow_blank=True
    )
    size = AttributeValueField(required=False, allow_null=True)
    color = AttributeValueField(required=False, allow_null=True)
    sku = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    price = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )
    stock = serializers.IntegerField(required=False, allow_null=True)

    def to_internal_value(self, data):
        validated = super().to_internal_value(data)
        for key, value in data.items():
            if key in self.fields or key in NON_ATTRIBUTE_KEYS:
                continue
            if isinstance(value, (Mapping, list, tuple)):
                continue
            value = normalize_value(value)
            if value is not None:
                validated[key] = value
        return validated

    def create(self, validated_data):
        return {
            key: value for key, value in validated_data.items()
            if value is not None and value != ''
        }


# =============================================================================
# Product Serializers
# =============================================================================

class ProductSerializer(serializers.Serializer):
    """Product record as sent to the product-detail screen."""
    id = serializers.CharField()
    name = serializers.CharField(allow_blank=True)
    brand = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    price = ProductPriceField()
    sizes = serializers.ListField(child=AttributeValueField(), required=False)
    colors = serializers.ListField(child=AttributeValueField(), required=False)
    variants = ProductVariantSerializer(many=True, required=False)
    attributes = AttributeDeclarationSerializer(many=True, required=False)
    requiresVariantSelection = serializers.BooleanField(
        source='requires_variant_selection', required=False, default=False
    )
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def create(self, validated_data):
        data = dict(validated_data)
        data['variants'] = [
            ProductVariant.from_dict(_drop_nulls(variant))
            for variant in data.get('variants', [])
        ]
        data['attributes'] = [dict(attribute) for attribute in data.get('attributes', [])]
        data['price'] = dict(data['price'])
        return ProductRecord.from_dict(data)


# =============================================================================
# Output Serializers
# =============================================================================

class OptionValueSerializer(serializers.Serializer):
    value = serializers.CharField()
    displayValue = serializers.CharField(source='get_display_value')
    colorHex = serializers.CharField(source='color_hex', allow_null=True)


class AttributeOptionSerializer(serializers.Serializer):
    name = serializers.CharField()
    label = serializers.CharField()
    values = OptionValueSerializer(many=True)


class CartLineItemSerializer(serializers.Serializer):
    """Cart line in the shape the cart store persists."""
    VARIANT_KEYS = {
        'variant_id': 'variantId',
        'color_hex': 'colorHex',
    }

    id = serializers.CharField()
    productId = serializers.CharField(source='product_id')
    name = serializers.CharField()
    brand = serializers.CharField(allow_null=True)
    image = serializers.CharField(allow_null=True)
    quantity = serializers.IntegerField()
    originalPrice = serializers.DecimalField(
        source='original_price', max_digits=12, decimal_places=2, allow_null=True
    )
    discountedPrice = serializers.DecimalField(
        source='discounted_price', max_digits=12, decimal_places=2, allow_null=True
    )
    variant = serializers.SerializerMethodField()
    sku = serializers.CharField(allow_null=True)
    category = serializers.CharField(allow_null=True)
    selected = serializers.BooleanField()
    addedAt = serializers.DateTimeField(source='added_at')

    def get_variant(self, obj):
        if obj.variant is None:
            return None
        result = {}
        for key, value in obj.variant.items():
            if isinstance(value, Decimal):
                value = str(value)
            result[self.VARIANT_KEYS.get(key, key)] = value
        return result
