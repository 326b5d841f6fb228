"""
Validation of Storefront API payloads.

Each serializer reads the camelCase GraphQL shape and returns the matching
read-only model from `apps.storefront.models` as its validated data.
"""

import logging

from rest_framework import serializers

from apps.storefront.exceptions import StorefrontTransportError
from apps.storefront.models import (
    Collection,
    Image,
    Money,
    PriceRange,
    Product,
    ProductOption,
    ProductSummary,
    ProductVariant,
    SelectedOption,
)

logger = logging.getLogger(__name__)


def _without_nulls(attrs):
    return {key: value for key, value in attrs.items() if value is not None}


class ConnectionSerializer(serializers.Serializer):
    """`{nodes: [...]}` wrapper used by GraphQL list fields."""
    node_serializer_class = None

    def get_fields(self):
        return {'nodes': self.node_serializer_class(many=True)}

    def to_internal_value(self, data):
        return tuple(super().to_internal_value(data)['nodes'])


# =============================================================================
# Value Serializers
# =============================================================================

class MoneySerializer(serializers.Serializer):
    # Kept as a string: malformed amounts are handled by the formatter.
    amount = serializers.CharField()
    currencyCode = serializers.CharField(source='currency_code')

    def to_internal_value(self, data):
        return Money(**super().to_internal_value(data))


class PriceRangeSerializer(serializers.Serializer):
    minVariantPrice = MoneySerializer(
        source='min_variant_price', allow_null=True, required=False
    )
    maxVariantPrice = MoneySerializer(
        source='max_variant_price', allow_null=True, required=False
    )

    def to_internal_value(self, data):
        return PriceRange(**super().to_internal_value(data))


class ImageSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True, required=False)
    url = serializers.CharField()
    altText = serializers.CharField(
        source='alt_text', allow_null=True, allow_blank=True, required=False
    )
    width = serializers.IntegerField(allow_null=True, required=False)
    height = serializers.IntegerField(allow_null=True, required=False)

    def to_internal_value(self, data):
        return Image(**super().to_internal_value(data))


class ImageConnectionSerializer(ConnectionSerializer):
    node_serializer_class = ImageSerializer


# =============================================================================
# Variant Serializers
# =============================================================================

class SelectedOptionSerializer(serializers.Serializer):
    name = serializers.CharField()
    value = serializers.CharField(trim_whitespace=False)

    def to_internal_value(self, data):
        return SelectedOption(**super().to_internal_value(data))


class ProductVariantSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    availableForSale = serializers.BooleanField(source='available_for_sale')
    quantityAvailable = serializers.IntegerField(
        source='quantity_available', allow_null=True, required=False
    )
    price = MoneySerializer()
    compareAtPrice = MoneySerializer(
        source='compare_at_price', allow_null=True, required=False
    )
    selectedOptions = SelectedOptionSerializer(
        source='selected_options', many=True, required=False
    )
    image = ImageSerializer(allow_null=True, required=False)

    def to_internal_value(self, data):
        attrs = _without_nulls(super().to_internal_value(data))
        attrs['selected_options'] = tuple(attrs.get('selected_options', ()))
        return ProductVariant(**attrs)


class ProductVariantConnectionSerializer(ConnectionSerializer):
    node_serializer_class = ProductVariantSerializer


class VariantAvailabilitySerializer(serializers.Serializer):
    availableForSale = serializers.BooleanField()

    def to_internal_value(self, data):
        return super().to_internal_value(data)['availableForSale']


class VariantAvailabilityConnectionSerializer(ConnectionSerializer):
    node_serializer_class = VariantAvailabilitySerializer


# =============================================================================
# Product Serializers
# =============================================================================

class ProductOptionSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True, required=False)
    name = serializers.CharField()
    values = serializers.ListField(
        child=serializers.CharField(trim_whitespace=False), required=False
    )

    def to_internal_value(self, data):
        attrs = _without_nulls(super().to_internal_value(data))
        attrs['values'] = tuple(attrs.get('values', ()))
        return ProductOption(**attrs)


class ProductSerializer(serializers.Serializer):
    """Full product detail (getProductByHandle)."""
    id = serializers.CharField()
    handle = serializers.CharField()
    title = serializers.CharField(allow_blank=True)
    description = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    descriptionHtml = serializers.CharField(
        source='description_html', allow_blank=True, allow_null=True, required=False
    )
    vendor = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    tags = serializers.ListField(
        child=serializers.CharField(allow_blank=True), required=False
    )
    featuredImage = ImageSerializer(source='featured_image', allow_null=True, required=False)
    images = ImageConnectionSerializer(required=False)
    options = ProductOptionSerializer(many=True, required=False)
    priceRange = PriceRangeSerializer(source='price_range', required=False)
    compareAtPriceRange = PriceRangeSerializer(
        source='compare_at_price_range', allow_null=True, required=False
    )
    variants = ProductVariantConnectionSerializer(required=False)

    def to_internal_value(self, data):
        attrs = _without_nulls(super().to_internal_value(data))
        attrs['tags'] = tuple(attrs.get('tags', ()))
        attrs['options'] = tuple(attrs.get('options', ()))
        return Product(**attrs)


class ProductSummarySerializer(serializers.Serializer):
    """Product card data (getCollectionProducts)."""
    id = serializers.CharField()
    handle = serializers.CharField()
    title = serializers.CharField(allow_blank=True)
    description = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    featuredImage = ImageSerializer(source='featured_image', allow_null=True, required=False)
    priceRange = PriceRangeSerializer(source='price_range', required=False)
    compareAtPriceRange = PriceRangeSerializer(
        source='compare_at_price_range', allow_null=True, required=False
    )
    options = ProductOptionSerializer(many=True, required=False)
    variants = VariantAvailabilityConnectionSerializer(required=False)

    def to_internal_value(self, data):
        attrs = _without_nulls(super().to_internal_value(data))
        attrs['options'] = tuple(attrs.get('options', ()))
        availability = attrs.pop('variants', ())
        attrs['available_for_sale'] = availability[0] if availability else None
        return ProductSummary(**attrs)


class ProductSummaryConnectionSerializer(ConnectionSerializer):
    node_serializer_class = ProductSummarySerializer


class CollectionSerializer(serializers.Serializer):
    id = serializers.CharField()
    handle = serializers.CharField(allow_blank=True, required=False)
    title = serializers.CharField(allow_blank=True)
    description = serializers.CharField(allow_blank=True, allow_null=True, required=False)
    products = ProductSummaryConnectionSerializer(required=False)

    def to_internal_value(self, data):
        return Collection(**_without_nulls(super().to_internal_value(data)))


def parse_payload(serializer_class, data, label):
    """
    Validate a payload and return the model it describes.

    Raises:
        StorefrontTransportError: If the payload does not have the expected shape
    """
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        logger.error("Malformed %s payload: %s", label, serializer.errors)
        raise StorefrontTransportError(f"Malformed {label} payload")
    return serializer.validated_data
